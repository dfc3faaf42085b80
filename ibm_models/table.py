import math

from .errors import NumericDegeneracy


class SparseJointTable:
    """ A sparse mapping (k1, k2) -> nonnegative float, 0.0 when missing.

    Every probability and count table of the aligners is one of these. k1 is
    the conditioning key (source word, or distortion context) so that a row
    can be renormalized over the k2 values actually observed with it.
    """

    def __init__(self, rows=None):
        self._rows = {}
        if rows is not None:
            for k1, row in rows.items():
                for k2, value in row.items():
                    self.set(k1, k2, value)

    def get(self, k1, k2):
        row = self._rows.get(k1)
        if row is None:
            return 0.0
        return row.get(k2, 0.0)

    def set(self, k1, k2, value):
        _check(k1, k2, value)
        self._rows.setdefault(k1, {})[k2] = value

    def increment(self, k1, k2, delta):
        value = self.get(k1, k2) + delta
        _check(k1, k2, value)
        self._rows.setdefault(k1, {})[k2] = value

    def keys_of_1(self):
        return self._rows.keys()

    def keys_of_2(self, k1):
        row = self._rows.get(k1)
        if row is None:
            return {}.keys()
        return row.keys()

    def row(self, k1):
        """Read-only copy of the k2 -> value mapping of k1."""
        return dict(self._rows.get(k1, {}))

    def replace_row(self, k1, values):
        """Swap in a new row for k1, returning the largest absolute change."""
        for k2, value in values.items():
            _check(k1, k2, value)
        old = self._rows.get(k1, {})
        delta = 0.0
        for k2 in set(old) | set(values):
            delta = max(delta, abs(old.get(k2, 0.0) - values.get(k2, 0.0)))
        if values:
            self._rows[k1] = dict(values)
        else:
            self._rows.pop(k1, None)
        return delta

    def items(self):
        return (
            (k1, k2, value)
            for (k1, row) in self._rows.items()
            for (k2, value) in row.items()
        )

    def copy(self):
        table = type(self)()
        table._rows = {k1: dict(row) for (k1, row) in self._rows.items()}
        return table

    def to_dict(self):
        return {k1: dict(row) for (k1, row) in self._rows.items()}

    def __contains__(self, keys):
        k1, k2 = keys
        return k2 in self._rows.get(k1, {})

    def __len__(self):
        return sum(len(row) for row in self._rows.values())

    def __repr__(self):
        return "%s(%d rows, %d entries)" % (type(self).__name__, len(self._rows), len(self))


class DistortionTable(SparseJointTable):
    """ Q(source position or None | target position, source length, target length)

    Rows are keyed by the context tuple, columns by the source position.
    """

    def probability(self, source_pos, target_pos, source_len, target_len):
        return self.get((target_pos, source_len, target_len), source_pos)


def _check(k1, k2, value):
    # NaN fails both comparisons, so test it explicitly
    if math.isnan(value) or value < 0:
        raise NumericDegeneracy("invalid table value %r at (%r, %r)" % (value, k1, k2))

