import logging
import math
from collections import namedtuple

import numpy as np
from tqdm import tqdm

from .alignment import best_sources

# Since log-likelihoods are negative, the new one must be at least this much
# less negative than the old one for training to go on.
INCREASE_RATIO = 1.0005
INITIAL_LOG_LIKELIHOOD = -9999999.0

IterationReport = namedtuple("IterationReport", ["iteration", "log_likelihood", "max_delta"])


def has_improved(old_llh, new_llh, ratio=INCREASE_RATIO):
    return new_llh > old_llh / ratio


def corpus_log_likelihood(corpus, score):
    """ Sum over target positions of log(best score), null included.

    score(pair, source_pos, target_pos) scores one link; the best link of
    each target position is found the same way decoding finds it.
    """
    llh = 0.0
    for pair in corpus:
        best = np.fromiter(
            (best_score for (_, _, best_score) in best_sources(pair, lambda i, j: score(pair, i, j))),
            dtype=float, count=len(pair.target))
        with np.errstate(divide="ignore"):
            llh += np.log(best).sum()
    return float(llh)


def posteriors(weights):
    """ Normalize candidate weights to responsibilities.

    A zero (or non finite) total gives every candidate 0.
    """
    z = math.fsum(weights)
    if z <= 0.0 or not math.isfinite(z):
        return [0.0] * len(weights)
    return [w / z for w in weights]


def renormalize(table, counts, drop_zeros=False):
    """ M-step: rebuild every row of table seen in counts from its expected counts.

    A row with no mass falls back to uniform over its observed keys. Rows
    counts never touched keep their old values. Returns the largest absolute
    change made to table.
    """
    max_delta = 0.0
    fallbacks = 0
    for k1 in list(counts.keys_of_1()):
        row = counts.row(k1)
        total = math.fsum(row.values())
        if total > 0.0:
            probs = dict((k2, c / total) for (k2, c) in row.items()
                         if c > 0.0 or not drop_zeros)
        else:
            fallbacks += 1
            probs = dict((k2, 1.0 / len(row)) for k2 in row)
        max_delta = max(max_delta, table.replace_row(k1, probs))
    if fallbacks:
        logging.debug('%d rows had no mass and were reset to uniform', fallbacks)
    return max_delta


def progress(corpus, enabled, desc):
    return tqdm(corpus, desc=desc, disable=not enabled, leave=False)


class EMTrainer:
    """ Outer EM loop shared by the aligners.

    Subclasses implement _iterate(corpus) (one E-step plus M-step, returning
    the largest parameter change) and _log_likelihood(corpus).
    """

    MAX_ITERATIONS = 50
    name = "EM"

    def __init__(self, max_iterations=None, increase_ratio=INCREASE_RATIO,
                 on_iteration=None, show_progress=False):
        self.max_iterations = self.MAX_ITERATIONS if max_iterations is None else max_iterations
        self.increase_ratio = increase_ratio
        self.on_iteration = on_iteration
        self.show_progress = show_progress
        self.history = []

    def _run(self, corpus):
        self.history = []
        old_llh = INITIAL_LOG_LIKELIHOOD
        iteration = 0
        while iteration < self.max_iterations:
            max_delta = self._iterate(corpus)
            new_llh = self._log_likelihood(corpus)
            report = IterationReport(iteration, new_llh, max_delta)
            self.history.append(report)
            logging.info('%s iteration %d: log-likelihood %.4f, max delta %.6f',
                         self.name, iteration, new_llh, max_delta)
            if self.on_iteration is not None:
                self.on_iteration(report)

            if math.isnan(new_llh):
                logging.warning('%s log-likelihood is NaN, stopping', self.name)
                break
            if not has_improved(old_llh, new_llh, self.increase_ratio):
                logging.info('%s converged after %d iterations', self.name, iteration + 1)
                break
            old_llh = new_llh
            iteration += 1
        else:
            logging.info('%s stopped at the iteration cap (%d)', self.name, self.max_iterations)
        return self.history
