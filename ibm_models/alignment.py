from collections import namedtuple

# The null source. Tokens are strings, so it never collides with a real word.
NULL = None


class SentencePair(namedtuple("SentencePair", ["source", "target"])):
    """ A source sentence and its target translation, both token tuples.
    """
    __slots__ = ()

    def __new__(cls, source, target):
        return super(SentencePair, cls).__new__(cls, tuple(source), tuple(target))


class Alignment:
    """ Partial map target position -> source position for one sentence pair.

    A target position missing from the map is aligned to the null source.
    """

    def __init__(self, links=None):
        self._links = dict(links or {})

    def get(self, target_pos, default=None):
        return self._links.get(target_pos, default)

    def items(self):
        return sorted(self._links.items())

    def pairs(self):
        """ (source, target) position pairs, the order used by gold alignments. """
        return set((s, t) for (t, s) in self._links.items())

    def to_line(self):
        return " ".join("%i-%i" % (s, t) for (t, s) in self.items())

    def __getitem__(self, target_pos):
        return self._links[target_pos]

    def __contains__(self, target_pos):
        return target_pos in self._links

    def __iter__(self):
        return iter(sorted(self._links))

    def __len__(self):
        return len(self._links)

    def __eq__(self, other):
        if not isinstance(other, Alignment):
            return NotImplemented
        return self._links == other._links

    def __hash__(self):
        return hash(frozenset(self._links.items()))

    def __repr__(self):
        return "Alignment(%r)" % dict(self.items())


def best_sources(pair, score):
    """ Pick the best source position for every target position of pair.

    score(source_pos, target_pos) gives the alignment score, with source_pos
    None for the null source. Null is the baseline; a real position has to
    beat the best score so far strictly, so the lowest index wins ties.
    Yields (target_pos, best_source_pos, best_score).
    """
    for j in range(len(pair.target)):
        best_i = NULL
        best_score = score(NULL, j)
        for i in range(len(pair.source)):
            s = score(i, j)
            if s > best_score:
                best_i = i
                best_score = s
        yield j, best_i, best_score


def decode(pair, score):
    alignment = {}
    for j, best_i, _ in best_sources(pair, score):
        if best_i is not NULL:
            alignment[j] = best_i
    return Alignment(alignment)
