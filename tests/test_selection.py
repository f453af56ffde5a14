import pytest

from lexrank_summary.datatypes import Sentence
from lexrank_summary.selection import build_candidates, select_diverse_sentences

SENTS = [
    Sentence(0, "Solar panels convert sunlight into electricity for homes."),
    Sentence(1, "Solar panels convert sunlight into electricity for houses."),
    Sentence(2, "Wind turbines generate power along windy coastal ridges."),
    Sentence(3, "Ok."),
]
SCORES = [0.5, 0.9, 0.3, 1.0]


def test_build_candidates_length_mismatch():
    with pytest.raises(ValueError):
        build_candidates(SENTS, SCORES[:2])


def test_select_skips_low_quality_and_near_paraphrases():
    selected, candidates = select_diverse_sentences(SENTS, SCORES, max_sentences=3)
    assert [s.index for s in selected] == [1, 2]
    assert len(candidates) == 4
    assert candidates[3].quality_score <= 0.3


def test_select_respects_max_and_document_order():
    selected, _ = select_diverse_sentences(SENTS, SCORES, max_sentences=1)
    assert [s.index for s in selected] == [1]
    selected, _ = select_diverse_sentences(SENTS, [0.1, 0.1, 0.9, 0.0], max_sentences=2)
    assert [s.index for s in selected] == [0, 2]


def test_select_zero_max():
    selected, _ = select_diverse_sentences(SENTS, SCORES, max_sentences=0)
    assert selected == []
