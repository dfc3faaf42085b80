import pytest

from ibm_models import SentencePair


@pytest.fixture
def le_chat():
    return [SentencePair(["le", "chat"], ["the", "cat"])]


@pytest.fixture
def small_bitext():
    return [
        SentencePair(["le", "chat"], ["the", "cat"]),
        SentencePair(["le", "chien"], ["the", "dog"]),
        SentencePair(["un", "chat"], ["a", "cat"]),
    ]


@pytest.fixture
def diagonal_bitext():
    return [
        SentencePair(["le", "chat", "noir"], ["the", "cat", "black"]),
        SentencePair(["le", "chien", "blanc"], ["the", "dog", "white"]),
        SentencePair(["un", "chat", "blanc"], ["a", "cat", "white"]),
        SentencePair(["un", "chien", "noir"], ["a", "dog", "black"]),
    ]
