import pickle

from .alignment import NULL
from .errors import NumericDegeneracy, WarmStartUnavailable
from .table import SparseJointTable

NULL_LABEL = "NULL"


def save_lexical_table(table, path):
    """ Pickle the table's rows so a later Model 2 run can warm-start from it. """
    with open(path, "wb") as t_file:
        pickle.dump(table.to_dict(), t_file)


def load_lexical_table(path):
    try:
        with open(path, "rb") as t_file:
            rows = pickle.load(t_file)
    except (OSError, pickle.UnpicklingError, EOFError, AttributeError, ImportError) as e:
        raise WarmStartUnavailable("cannot load lexical table from %s: %s" % (path, e)) from e

    if not isinstance(rows, dict) or not all(isinstance(row, dict) for row in rows.values()):
        raise WarmStartUnavailable("%s does not hold a lexical table" % path)
    try:
        return SparseJointTable(rows)
    except (NumericDegeneracy, TypeError) as e:
        raise WarmStartUnavailable("%s holds invalid probabilities: %s" % (path, e)) from e


def write_lexicon(table, path, threshold=0.0):
    """ Human readable dump: source, target, probability per line, best first. """
    entries = [(s, t, p) for (s, t, p) in table.items() if p > threshold]
    entries.sort(key=lambda e: (e[0] is not NULL, e[0] or "", -e[2], e[1]))
    with open(path, "w", encoding="utf-8", newline="\n") as file:
        for src_word, trg_word, prob in entries:
            label = NULL_LABEL if src_word is NULL else src_word
            file.write(f"{label}\t{trg_word}\t{round(prob, 8)}\n")
