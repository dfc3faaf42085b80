import logging
import time

from .alignment import NULL, decode
from .em import EMTrainer, corpus_log_likelihood, posteriors, progress, renormalize
from .lexicon import load_lexical_table
from .model_one import initial_lexical_table
from .table import DistortionTable, SparseJointTable


def distortion_context(pair, target_pos):
    return (target_pos, len(pair.source), len(pair.target))


def initial_distortion_table(corpus):
    """ Uniform Q: every source position of a context, plus null, gets 1/(l+1). """
    q = DistortionTable()
    for pair in corpus:
        l = len(pair.source)
        for j in range(len(pair.target)):
            context = distortion_context(pair, j)
            if context in q.keys_of_1():
                continue
            for i in range(l):
                q.set(context, i, 1.0 / (l + 1))
            q.set(context, NULL, 1.0 / (l + 1))
    return q


class Model2Trainer(EMTrainer):
    """ IBM Model 2: EM over the lexical table and the distortion table.

    A link (i, j) scores Q(i | j, l, m) * P(t_j | s_i), with i = None for
    the null source. The lexical table can be warm-started from a trained
    Model 1 table.
    """

    MAX_ITERATIONS = 100
    name = "Model 2"

    def __init__(self, warm_start=None, **kwargs):
        super(Model2Trainer, self).__init__(**kwargs)
        self.warm_start = warm_start
        self.lexical = SparseJointTable()
        self.distortion = DistortionTable()

    @classmethod
    def from_lexicon_file(cls, path, **kwargs):
        """ Load a persisted Model 1 table; WarmStartUnavailable if that fails. """
        start = time.time()
        warm_start = load_lexical_table(path)
        logging.info('Loaded warm-start lexical table from %s (%d entries) in %.2fs',
                     path, len(warm_start), time.time() - start)
        return cls(warm_start=warm_start, **kwargs)

    def train(self, corpus, warm_start=None):
        corpus = list(corpus)
        if warm_start is None:
            warm_start = self.warm_start
        if warm_start is not None:
            # pairs the warm start never saw would score 0 on every iteration
            self.lexical = initial_lexical_table(corpus, probs=warm_start.copy())
        else:
            self.lexical = initial_lexical_table(corpus)
        self.distortion = initial_distortion_table(corpus)
        logging.info('Training %s on %d sentence pairs (%d lexical, %d distortion entries, warm start: %s)',
                     self.name, len(corpus), len(self.lexical), len(self.distortion),
                     warm_start is not None)
        self._run(corpus)
        return self.lexical, self.distortion

    def _iterate(self, corpus):
        counts = SparseJointTable()
        q_counts = SparseJointTable()
        for pair in progress(corpus, self.show_progress, self.name):
            positions = list(range(len(pair.source))) + [NULL]
            for j, t in enumerate(pair.target):
                context = distortion_context(pair, j)
                weights = [self.score(pair, i, j) for i in positions]
                for i, c in zip(positions, posteriors(weights)):
                    s = NULL if i is NULL else pair.source[i]
                    counts.increment(s, t, c)
                    q_counts.increment(context, i, c)

        delta = renormalize(self.lexical, counts)
        return max(delta, renormalize(self.distortion, q_counts, drop_zeros=True))

    def _log_likelihood(self, corpus):
        return corpus_log_likelihood(corpus, self.score)

    def score(self, pair, source_pos, target_pos):
        source = NULL if source_pos is NULL else pair.source[source_pos]
        q = self.distortion.get(distortion_context(pair, target_pos), source_pos)
        if q == 0.0:
            return 0.0
        return q * self.lexical.get(source, pair.target[target_pos])

    def align(self, pair):
        """ Sentence-length pairs never seen in training have no Q row, so they come out unaligned. """
        return decode(pair, lambda i, j: self.score(pair, i, j))
