import logging

from .alignment import NULL, decode
from .em import EMTrainer, corpus_log_likelihood, posteriors, progress, renormalize
from .table import SparseJointTable


def initial_lexical_table(corpus, value=1.0, probs=None):
    """ Seed P(target | source) for every co-occurring pair, null included.

    With probs given, only the pairs it lacks are seeded.
    """
    if probs is None:
        probs = SparseJointTable()
    for pair in corpus:
        for t in pair.target:
            for s in pair.source + (NULL,):
                if (s, t) not in probs:
                    probs.set(s, t, value)
    return probs


def lexical_counts(probs, pair, counts):
    """ E-step for one sentence pair: add P(a_j = i | t, s) to counts. """
    sources = pair.source + (NULL,)
    for t in pair.target:
        weights = [probs.get(s, t) for s in sources]
        for s, c in zip(sources, posteriors(weights)):
            counts.increment(s, t, c)  # Expected count


class Model1Trainer(EMTrainer):
    """ IBM Model 1: EM over the lexical table P(target | source or null).
    """

    MAX_ITERATIONS = 50
    name = "Model 1"

    def __init__(self, **kwargs):
        super(Model1Trainer, self).__init__(**kwargs)
        self.lexical = SparseJointTable()

    def train(self, corpus):
        corpus = list(corpus)
        self.lexical = initial_lexical_table(corpus)
        logging.info('Training %s on %d sentence pairs (%d lexical entries)',
                     self.name, len(corpus), len(self.lexical))
        self._run(corpus)
        return self.lexical

    def _iterate(self, corpus):
        counts = SparseJointTable()
        for pair in progress(corpus, self.show_progress, self.name):
            lexical_counts(self.lexical, pair, counts)
        return renormalize(self.lexical, counts)

    def _log_likelihood(self, corpus):
        return corpus_log_likelihood(corpus, self.score)

    def score(self, pair, source_pos, target_pos):
        source = NULL if source_pos is NULL else pair.source[source_pos]
        return self.lexical.get(source, pair.target[target_pos])

    def align(self, pair):
        return decode(pair, lambda i, j: self.score(pair, i, j))
