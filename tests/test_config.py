import pytest

from textsum.config import SummarizerConfig
from textsum.preprocessing import STOPWORDS

ENV_VARS = (
    "TEXTSUM_DAMPING",
    "TEXTSUM_ITERATIONS",
    "TEXTSUM_SYNCHRONOUS",
    "TEXTSUM_STOPWORDS",
    "TEXTSUM_MAX_SENTENCES",
)


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for name in ENV_VARS:
        monkeypatch.delenv(name, raising=False)


def test_defaults():
    config = SummarizerConfig.from_env()
    assert config.rank.damping == 0.85
    assert config.rank.iterations == 20
    assert config.rank.synchronous is True
    assert config.preprocess.stop_words == STOPWORDS
    assert config.preprocess.max_sentences is None


def test_overrides(monkeypatch):
    monkeypatch.setenv("TEXTSUM_DAMPING", "0.5")
    monkeypatch.setenv("TEXTSUM_ITERATIONS", "5")
    monkeypatch.setenv("TEXTSUM_SYNCHRONOUS", "no")
    monkeypatch.setenv("TEXTSUM_STOPWORDS", "Foo, bar ,,")
    monkeypatch.setenv("TEXTSUM_MAX_SENTENCES", "100")
    config = SummarizerConfig.from_env()
    assert config.rank.damping == 0.5
    assert config.rank.iterations == 5
    assert config.rank.synchronous is False
    assert config.preprocess.stop_words == frozenset({"foo", "bar"})
    assert config.preprocess.max_sentences == 100


def test_empty_stopword_list_disables_filtering(monkeypatch):
    monkeypatch.setenv("TEXTSUM_STOPWORDS", "")
    assert SummarizerConfig.from_env().preprocess.stop_words == frozenset()


@pytest.mark.parametrize(
    "name, value",
    [
        ("TEXTSUM_DAMPING", "high"),
        ("TEXTSUM_DAMPING", "2"),
        ("TEXTSUM_ITERATIONS", "1.5"),
        ("TEXTSUM_SYNCHRONOUS", "maybe"),
        ("TEXTSUM_MAX_SENTENCES", "-4"),
    ],
)
def test_invalid_values(monkeypatch, name, value):
    monkeypatch.setenv(name, value)
    with pytest.raises(ValueError):
        SummarizerConfig.from_env()
