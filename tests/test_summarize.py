from lexrank_summary.datatypes import Sentence
from lexrank_summary.summarize import adaptive_max_sentences, format_result


def _sents(n):
    return [Sentence(i, f"Sentence {i} carries some text.") for i in range(n)]


def test_adaptive_max_sentences():
    assert adaptive_max_sentences(5, 3) == 2
    assert adaptive_max_sentences(5, 4) == 2
    assert adaptive_max_sentences(5, 8) == 4
    assert adaptive_max_sentences(5, 20) == 5
    assert adaptive_max_sentences(10, 20) == 7
    assert adaptive_max_sentences(1, 20) == 1
    assert adaptive_max_sentences(-3, 20) == 0


def test_format_short_content():
    all_ = _sents(5)
    res = format_result(all_[:3], all_, "")
    assert res.title == "Text Summary"
    assert res.key_points == [s.text for s in all_[:3]]
    assert res.sections == []
    assert res.total_sentences == 5
    assert res.summary_ratio == 0.6


def test_format_long_content_splits_main_content():
    all_ = _sents(12)
    res = format_result(all_[:7], all_, "Report")
    assert res.title == "Report"
    assert res.key_points == [s.text for s in all_[:4]]
    assert len(res.sections) == 1
    section = res.sections[0]
    assert section.heading == "Main Content"
    assert section.heading_level == 3
    assert section.points is None
    assert section.content == " ".join(s.text for s in all_[4:7])
    assert res.summary_ratio == 0.58

    res = format_result(all_[:4], all_, "Report")
    assert len(res.key_points) == 2
    assert res.sections[0].content == " ".join(s.text for s in all_[2:4])


def test_format_medium_content():
    all_ = _sents(12)
    res = format_result(all_[:3], all_, "")
    assert len(res.key_points) == 3
    assert res.sections == []

    all_ = _sents(8)
    res = format_result(all_[:1], all_, "")
    assert len(res.key_points) == 1
    # 12.5% rounds half up
    assert res.summary_ratio == 0.13


def test_format_empty_selection():
    res = format_result([], [], "")
    assert res.key_points == []
    assert res.total_sentences == 0
    assert res.summary_ratio == 0.0


def test_to_dict_uses_camel_case_keys():
    all_ = _sents(12)
    d = format_result(all_[:5], all_, "T").to_dict()
    assert set(d) == {"title", "sections", "keyPoints", "totalSentences", "summaryRatio"}
    assert d["sections"][0] == {"heading": "Main Content", "headingLevel": 3,
                                "content": " ".join(s.text for s in all_[3:5])}
