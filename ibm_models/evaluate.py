from collections import namedtuple

AlignmentScore = namedtuple("AlignmentScore", ["precision", "recall", "aer"])


def parse_gold_line(line):
    """ "i-j" tokens are sure links, "i?j" tokens possible ones. """
    sure = set()
    possible = set()
    for token in line.split():
        if "-" in token:
            a, b = token.split("-")
            sure.add((int(a), int(b)))
        elif "?" in token:
            a, b = token.split("?")
            possible.add((int(a), int(b)))
    return sure, possible


def read_gold(path):
    with open(path, encoding="utf-8") as gold_file:
        return [parse_gold_line(line) for line in gold_file]


def score_alignments(predicted, gold):
    """ Precision, recall and AER of predicted against gold.

    predicted holds one set of (source, target) pairs (or an Alignment) per
    sentence, gold one (sure, possible) tuple per sentence.
    """
    (size_a, size_s, size_a_and_s, size_a_and_p) = (0.0, 0.0, 0.0, 0.0)
    for alignment, (sure, possible) in zip(predicted, gold):
        if hasattr(alignment, "pairs"):
            alignment = alignment.pairs()
        alignment = set(alignment)
        size_a += len(alignment)
        size_s += len(sure)
        size_a_and_s += len(alignment & sure)
        size_a_and_p += len(alignment & (possible | sure))

    precision = size_a_and_p / size_a if size_a else 0.0
    recall = size_a_and_s / size_s if size_s else 0.0
    if size_a + size_s:
        aer = 1 - ((size_a_and_s + size_a_and_p) / (size_a + size_s))
    else:
        aer = 1.0
    return AlignmentScore(precision, recall, aer)
