import math

import numpy as np
import pytest

from lexrank_summary import remove_duplicates, run_pipeline, segment, split_sentences, summarize

ARTICLE_SENTENCES = [
    "Machine learning models learn patterns from large training data sets.",
    "Researchers collect labeled data before training any new model.",
    "A good training method balances model accuracy against speed.",
    "Feature engineering turns raw data into signals a model can use.",
    "Overfitting happens when a model memorizes its training examples.",
    "Regularization is a common technique that limits overfitting.",
    "Validation data helps researchers measure how models generalize.",
    "Gradient descent updates model weights in small careful steps.",
    "Larger data sets usually improve the accuracy of deep models.",
    "Engineers monitor training runs to catch unstable learning early.",
    "Transfer learning reuses a trained model for related new tasks.",
    "Careful evaluation compares several models on held out data.",
    "Deployment requires that the model stays fast under real traffic.",
    "Teams retrain production models when incoming data starts drifting.",
    "Documentation explains each model choice to future maintainers.",
]
ARTICLE = " ".join(ARTICLE_SENTENCES)

BUDGET = (
    "The city council approved a new budget on Monday that increases funding for public "
    "libraries across every district in the region. Library directors said the additional "
    "money will extend opening hours and pay for modern computers in older branch buildings. "
    "Residents who spoke at the meeting welcomed the decision and asked officials to publish "
    "quarterly reports on how funds are spent."
)

PYTHON_ONLY = (
    "It is the python and it was the python for them. "
    "We have been with this python, but they had that python. "
    "She would do it with a python if he could be at the python. "
    "You might have had the python, or they might have been by it. "
    "I can do this for us, and we will do it in the python. "
    "These were to be on the python, as he did with us. "
    "They must have had her python, and he may be with them."
)


def _emitted(result):
    out = list(result.key_points)
    for section in result.sections:
        out.extend(section.points or [])
    return out


def test_scenario_a_short_input_is_empty():
    text = ("Short text. " * 30)[:250]
    assert len(text) == 250
    res = summarize(text, "Tiny")
    assert res.title == "Tiny"
    assert res.sections == []
    assert res.key_points == []
    assert res.total_sentences == 0
    assert res.summary_ratio == 0


def test_empty_input():
    res = summarize("")
    assert res.title == "Text Summary"
    assert res.to_dict() == {"title": "Text Summary", "sections": [], "keyPoints": [],
                             "totalSentences": 0, "summaryRatio": 0.0}


def test_two_unique_sentences_skip_ranking():
    museum = ("The museum reopened its east wing after a long renovation that restored the "
              "original painted ceilings. Visitors can now walk through twelve galleries arranged "
              "by century, from medieval tapestries to modern sculpture.")
    text = museum + " " + museum
    assert len(text) >= 300
    trace = run_pipeline(text, max_sentences=5)
    assert trace.early_exit == "few_sentences"
    assert trace.scores is None
    res = trace.result
    assert res.total_sentences == 2
    assert res.summary_ratio == 1.0
    assert res.sections == []
    assert 1 <= len(res.key_points) <= 2
    for p in res.key_points:
        assert p in museum


def test_scenario_b_three_sentences():
    assert len(BUDGET) >= 300
    res = summarize(BUDGET)
    assert res.total_sentences == 3
    assert 1 <= len(res.key_points) <= 3
    assert res.sections == []
    for p in res.key_points:
        assert p in BUDGET


def test_scenario_c_long_article():
    trace = run_pipeline(ARTICLE, "ML Notes", max_sentences=5)
    res = trace.result
    assert res.total_sentences == 15
    assert 2 <= len(res.key_points) <= 4
    assert len(res.sections) == 1
    section = res.sections[0]
    assert section.heading == "Main Content"
    assert section.heading_level == 3
    assert section.content

    in_section = sum(1 for s in ARTICLE_SENTENCES if s in section.content)
    assert in_section >= 1
    assert res.summary_ratio == round((len(res.key_points) + in_section) / 15, 2)
    # the emitted text is exactly the selection, in order
    selected = [s.text for s in trace.selected]
    assert res.key_points == selected[:len(res.key_points)]
    assert section.content == " ".join(selected[len(res.key_points):])


def test_scenario_d_near_duplicate_is_dropped():
    dup = "Machine learning models learn patterns from huge training data sets."
    text = " ".join(ARTICLE_SENTENCES[:5] + [dup] + ARTICLE_SENTENCES[5:10])
    raw = split_sentences(text)
    assert len(raw) == 11
    trace = run_pipeline(text)
    assert trace.result.total_sentences == len(raw) - 1
    kept = [s.text for s in trace.unique_sentences]
    assert ARTICLE_SENTENCES[0] in kept
    assert dup not in kept


def test_scenario_e_degenerate_vocabulary_terminates():
    trace = run_pipeline(PYTHON_ONLY, max_sentences=5)
    assert trace.vocabulary == ["python"]
    assert trace.scores is not None
    assert np.all(np.isfinite(trace.scores))
    res = trace.result
    assert math.isfinite(res.summary_ratio)
    assert 0 <= res.summary_ratio <= 1
    assert res.key_points


def test_determinism():
    first = summarize(ARTICLE, "ML Notes", 5).to_dict()
    second = summarize(ARTICLE, "ML Notes", 5).to_dict()
    assert first == second


@pytest.mark.parametrize("text", [ARTICLE, BUDGET, PYTHON_ONLY])
def test_verbatim_and_order(text):
    res = summarize(text)
    points = _emitted(res)
    positions = [text.index(p) for p in points]
    assert positions == sorted(positions)
    for section in res.sections:
        if section.content:
            # sentences of the paragraph, in document order
            parts = [s.text for s in segment(text) if s.text in section.content]
            assert parts
            in_content = [section.content.index(p) for p in parts]
            assert in_content == sorted(in_content)
            assert section.content == " ".join(parts)
            assert text.index(parts[0]) > max(positions)


@pytest.mark.parametrize("text,max_sentences", [(ARTICLE, 5), (ARTICLE, 100), (ARTICLE, 0),
                                                (BUDGET, 5), (PYTHON_ONLY, 3), ("", 5)])
def test_ratio_bound(text, max_sentences):
    res = summarize(text, max_sentences=max_sentences)
    assert 0 <= res.summary_ratio <= 1
    if res.total_sentences == 0:
        assert res.summary_ratio == 0


def test_dedup_idempotent_on_real_text():
    once = remove_duplicates(segment(ARTICLE + " " + ARTICLE))
    assert len(once) == 15
    assert remove_duplicates(once) == once
