"""Tests for keyword-based CDT code lookup."""

import pytest

from app.clinical.cdt.service import get_cdt_code, list_cdt_codes, lookup_cdt_codes
from app.core.errors import InvalidArgumentError


def _scores(matches):
    return {m.code: m.score for m in matches}


@pytest.mark.parametrize("text", ["", " ", "   \t\n  "])
def test_empty_or_blank_input_returns_nothing(text):
    assert lookup_cdt_codes(text) == []


def test_nonsense_query_returns_nothing():
    assert lookup_cdt_codes("xyzabc nonsense query") == []


def test_composite_filling_posterior_tooth_suggests_posterior_composite():
    scores = _scores(lookup_cdt_codes("composite filling posterior tooth"))
    assert scores["D2391"] >= 1
    assert scores["D2392"] >= 1
    assert scores["D2391"] == 2  # "composite" and "posterior"


def test_root_canal_molar_scores_molar_endodontic_therapy():
    matches = lookup_cdt_codes("root canal molar")
    scores = _scores(matches)
    assert scores["D3330"] == 3
    assert matches[0].score == 3


def test_short_tokens_do_not_affect_scoring():
    assert lookup_cdt_codes("a root canal") == lookup_cdt_codes("root canal")
    assert lookup_cdt_codes("a of to the") == []


def test_case_insensitive():
    assert lookup_cdt_codes("ROOT CANAL") == lookup_cdt_codes("root canal")


def test_results_sorted_by_descending_score():
    matches = lookup_cdt_codes("comprehensive oral evaluation periodontal")
    scores = [m.score for m in matches]
    assert scores == sorted(scores, reverse=True)
    assert all(m.score > 0 for m in matches)


def test_adding_matching_token_never_lowers_score():
    base = _scores(lookup_cdt_codes("endodontic therapy"))
    extended = _scores(lookup_cdt_codes("endodontic therapy molar"))
    for code, score in base.items():
        assert extended[code] >= score
    assert extended["D3330"] == base["D3330"] + 1


def test_repeated_keyword_accumulates(small_table):
    assert _scores(lookup_cdt_codes("molar molar", table=small_table))["D3330"] == 2


def test_same_input_same_ordered_result():
    assert lookup_cdt_codes("crown porcelain metal") == lookup_cdt_codes("crown porcelain metal")


def test_ties_keep_table_order(small_table):
    matches = lookup_cdt_codes("root canal", table=small_table)
    assert [m.code for m in matches] == ["D3330", "D3348"]
    assert [m.score for m in matches] == [2, 2]


def test_limit_truncates_ranked_matches(small_table):
    matches = lookup_cdt_codes("root canal molar surface", table=small_table, limit=1)
    assert len(matches) == 1
    assert matches[0].code == "D3330"


def test_match_carries_table_description(small_table):
    (match,) = lookup_cdt_codes("prophylaxis", table=small_table)
    assert match.code == "D1110"
    assert match.description == "Prophylaxis - adult"
    assert match.score == 1


@pytest.mark.parametrize("bad", [None, 42, b"root canal", ["root", "canal"]])
def test_non_string_input_is_rejected(bad):
    with pytest.raises(InvalidArgumentError):
        lookup_cdt_codes(bad)


@pytest.mark.parametrize("bad_limit", [0, -1, True, 2.5])
def test_bad_limit_is_rejected(small_table, bad_limit):
    with pytest.raises(InvalidArgumentError):
        lookup_cdt_codes("molar", table=small_table, limit=bad_limit)


def test_get_cdt_code_is_case_insensitive(small_table):
    assert get_cdt_code("d3330", table=small_table).code == "D3330"
    assert get_cdt_code(" D1110 ", table=small_table).description == "Prophylaxis - adult"
    assert get_cdt_code("D9999", table=small_table) is None
    assert get_cdt_code("", table=small_table) is None


def test_list_cdt_codes_by_category(small_table):
    assert [e.code for e in list_cdt_codes("restorative", table=small_table)] == ["D2391", "D2140"]
    assert len(list_cdt_codes(table=small_table)) == 5


def test_bundled_table_covers_every_category():
    categories = {e.category for e in list_cdt_codes()}
    assert {
        "Diagnostic",
        "Preventive",
        "Restorative",
        "Endodontics",
        "Periodontics",
        "Prosthodontics (removable)",
        "Prosthodontics (fixed)",
        "Oral and maxillofacial surgery",
        "Orthodontics",
        "Adjunctive general services",
    } <= categories
    assert len(list_cdt_codes()) >= 150


@pytest.mark.parametrize("bad", [123, ["Restorative"]])
def test_list_cdt_codes_rejects_non_string_category(small_table, bad):
    with pytest.raises(InvalidArgumentError):
        list_cdt_codes(bad, table=small_table)
