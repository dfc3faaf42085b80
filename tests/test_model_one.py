import math

import pytest

from ibm_models import NULL, IterationReport, Model1Trainer, SentencePair
from ibm_models.em import has_improved


def assert_rows_normalized(table):
    for source in table.keys_of_1():
        total = math.fsum(table.get(source, t) for t in table.keys_of_2(source))
        assert total == pytest.approx(1.0, abs=1e-9)


def test_single_pair_is_symmetric(le_chat):
    trainer = Model1Trainer()
    probs = trainer.train(le_chat)
    assert_rows_normalized(probs)
    # nothing in one pair tells "le" from "chat", or either from null
    assert probs.get("le", "the") == pytest.approx(probs.get("chat", "the"))
    assert probs.get("le", "the") == pytest.approx(probs.get(NULL, "the"))
    assert len(trainer.align(le_chat[0])) == 0


def test_learns_unambiguous_links(small_bitext):
    trainer = Model1Trainer()
    probs = trainer.train(small_bitext)
    assert_rows_normalized(probs)

    alignment = trainer.align(small_bitext[0])
    assert alignment.get(0) == 0  # the -> le
    assert alignment.get(1) == 1  # cat -> chat
    assert alignment.to_line() == "0-0 1-1"


def test_unambiguous_source_gets_more_mass():
    bitext = [
        SentencePair(["le"], ["the", "a"]),
        SentencePair(["chat"], ["cat"]),
    ]
    probs = Model1Trainer().train(bitext)
    assert probs.get("chat", "cat") > probs.get("le", "the")
    assert probs.get("chat", "cat") > probs.get("le", "a")


def test_decoding_is_deterministic(small_bitext):
    trainer = Model1Trainer()
    trainer.train(small_bitext)
    for pair in small_bitext:
        assert trainer.align(pair) == trainer.align(pair)


def test_unseen_target_is_left_unaligned(small_bitext):
    trainer = Model1Trainer()
    trainer.train(small_bitext)
    alignment = trainer.align(SentencePair(["le", "chat"], ["the", "zebra"]))
    assert 1 not in alignment
    assert alignment.get(0) == 0


def test_reports_every_iteration(small_bitext):
    reports = []
    trainer = Model1Trainer(on_iteration=reports.append)
    trainer.train(small_bitext)

    assert reports == trainer.history
    assert [r.iteration for r in reports] == list(range(len(reports)))
    assert all(isinstance(r, IterationReport) for r in reports)
    assert all(r.max_delta >= 0.0 and r.log_likelihood <= 0.0 for r in reports)
    assert len(reports) <= Model1Trainer.MAX_ITERATIONS
    # every iteration but the last improved enough to keep going
    for old, new in zip(reports, reports[1:-1]):
        assert has_improved(old.log_likelihood, new.log_likelihood)


def test_iteration_cap(small_bitext):
    trainer = Model1Trainer(max_iterations=1)
    probs = trainer.train(small_bitext)
    assert len(trainer.history) == 1
    assert probs.get("le", "the") == pytest.approx(0.5)
    assert probs.get("chat", "cat") == pytest.approx(0.5)


def test_empty_sentences_are_harmless():
    bitext = [
        SentencePair([], ["the"]),
        SentencePair(["le"], []),
        SentencePair(["le"], ["the"]),
    ]
    trainer = Model1Trainer()
    probs = trainer.train(bitext)
    assert_rows_normalized(probs)
    assert trainer.align(bitext[0]).items() == []
    assert probs.get(NULL, "the") == pytest.approx(1.0)
