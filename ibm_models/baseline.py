from collections import defaultdict

from .alignment import NULL, Alignment, best_sources


class CooccurrenceAligner:
    """ Baseline: align each target word to the source word with the highest
    c(s, t) / (c(s) * c(t)) ratio of sentence-level co-occurrence counts.
    """

    def __init__(self):
        self.pair_counts = defaultdict(float)
        self.source_counts = defaultdict(float)
        self.target_counts = defaultdict(float)

    def train(self, corpus):
        for pair in corpus:
            for s in pair.source:
                self.source_counts[s] += 1
            for t in pair.target:
                self.target_counts[t] += 1
            for s in set(pair.source):
                for t in set(pair.target):
                    self.pair_counts[(s, t)] += 1
        return self

    def ratio(self, source, target):
        source_count = self.source_counts.get(source, 0.0)
        target_count = self.target_counts.get(target, 0.0)
        if source_count == 0 or target_count == 0:
            return 0.0
        return self.pair_counts.get((source, target), 0.0) / (source_count * target_count)

    def align(self, pair):
        def score(i, j):
            if i is NULL:
                return 0.0
            return self.ratio(pair.source[i], pair.target[j])

        return Alignment(
            (j, i) for (j, i, _) in best_sources(pair, score) if i is not NULL
        )
