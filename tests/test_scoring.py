import math

import numpy as np
import pytest

from textsum.preprocessing import preprocess_text
from textsum.scoring import (
    METHOD_TEXTRANK,
    METHOD_TFISF,
    RankConfig,
    score_sentences,
    textrank_scores,
    tfisf_scores,
)


def test_rank_config_validation():
    with pytest.raises(ValueError):
        RankConfig(damping=1.5)
    with pytest.raises(ValueError):
        RankConfig(damping=-0.1)
    with pytest.raises(ValueError):
        RankConfig(iterations=-1)


def test_textrank_empty_document():
    assert textrank_scores(preprocess_text("")) == []


def test_textrank_single_sentence_settles_at_base_score():
    doc = preprocess_text("Only one sentence here.", initial_score=1.0)
    assert textrank_scores(doc) == [pytest.approx(0.15)]


def test_textrank_zero_iterations_keeps_initial_scores(animals_doc):
    scores = textrank_scores(animals_doc, cfg=RankConfig(iterations=0))
    assert scores == [1.0] * len(animals_doc.sentences)


def test_textrank_writes_scores_back(animals_doc):
    scores = textrank_scores(animals_doc)
    assert [s.score for s in animals_doc.sentences] == scores


def test_textrank_connected_sentences_outrank_isolated(animals_doc):
    scores = textrank_scores(animals_doc)
    # "Fish swim quietly." shares nothing with the rest
    assert scores[2] == pytest.approx(0.15)
    assert scores[4] == pytest.approx(0.15)
    assert scores[0] > scores[2]
    assert scores[3] > scores[2]
    assert all(math.isfinite(s) for s in scores)


def test_synchronous_and_in_place_updates_differ():
    sim = np.array([[0.0, 0.5], [0.5, 0.0]])
    cfg = dict(damping=0.85, iterations=1)

    doc = preprocess_text("One. Two.", initial_score=1.0)
    assert textrank_scores(doc, sim, RankConfig(synchronous=True, **cfg)) == [
        pytest.approx(0.575), pytest.approx(0.575),
    ]

    doc = preprocess_text("One. Two.", initial_score=1.0)
    assert textrank_scores(doc, sim, RankConfig(synchronous=False, **cfg)) == [
        pytest.approx(0.575), pytest.approx(0.15 + 0.425 * 0.575),
    ]


def test_tfisf_sums_term_weights(pets_doc):
    w2 = (2 / 3) * math.log(3 / 2)
    w1 = (1 / 3) * math.log(3)
    scores = tfisf_scores(pets_doc)
    assert scores == [pytest.approx(2 * w2), pytest.approx(2 * w2 + w1), pytest.approx(2 * w2 + w1)]
    assert [s.score for s in pets_doc.sentences] == scores


def test_tfisf_repeated_words_count_each_time():
    doc = preprocess_text("Apple apple pie. Banana split. Cherry tart.")
    scores = tfisf_scores(doc)
    stats_weight = (2 / 3) * math.log(3 / 2)
    pie_weight = (1 / 3) * math.log(3)
    assert scores[0] == pytest.approx(2 * stats_weight + pie_weight)


def test_tfisf_sentence_without_words_scores_zero():
    doc = preprocess_text("The and of. Real words here.")
    assert tfisf_scores(doc)[0] == 0.0


def test_score_sentences_dispatch(pets_doc):
    assert score_sentences(pets_doc, METHOD_TFISF) == tfisf_scores(preprocess_text(pets_doc.raw_text))
    with pytest.raises(ValueError):
        score_sentences(pets_doc, "lexrank")


def test_score_sentences_seeds_textrank_at_one(animals_text):
    plain = preprocess_text(animals_text)
    seeded = preprocess_text(animals_text, initial_score=1.0)
    assert score_sentences(plain, METHOD_TEXTRANK) == score_sentences(seeded, METHOD_TEXTRANK)


def test_score_sentences_ignores_stale_scores(pets_doc):
    for s in pets_doc.sentences:
        s.score = 42.0
    fresh = preprocess_text(pets_doc.raw_text)
    assert score_sentences(pets_doc, METHOD_TFISF) == score_sentences(fresh, METHOD_TFISF)
