"""Tests for argument validation against the tool schemas."""

from __future__ import annotations

import pytest

from news_mcp.messages import JA
from news_mcp.schemas import GET_NEWS, GET_TOP_HEADLINES, SEARCH_NEWS_GNEWS, SEARCH_NEWS_RSS
from news_mcp.utils import ValidationError
from news_mcp.validation import validate


# ---------------------------------------------------------------------------
# Defaults
# ---------------------------------------------------------------------------


def test_missing_limit_defaults_to_five():
    assert validate(GET_NEWS, {"category": "top"}) == {"category": "top", "limit": 5}


def test_search_news_fills_category_and_limit():
    resolved = validate(SEARCH_NEWS_RSS, {"keyword": "地震"})

    assert resolved == {"keyword": "地震", "category": "top", "limit": 5}


def test_gnews_search_defaults_language_and_country():
    resolved = validate(SEARCH_NEWS_GNEWS, {"keyword": "AI"})

    assert resolved == {"keyword": "AI", "lang": "ja", "country": "jp", "max": 5}


def test_no_arguments_resolves_all_defaults():
    resolved = validate(GET_TOP_HEADLINES, None)

    assert resolved == {"category": "general", "lang": "ja", "country": "jp", "max": 5}


def test_explicit_values_are_kept():
    resolved = validate(GET_NEWS, {"category": "sports", "limit": 20})

    assert resolved == {"category": "sports", "limit": 20}


def test_unknown_keys_are_ignored():
    resolved = validate(GET_NEWS, {"category": "it", "page": 3})

    assert resolved == {"category": "it", "limit": 5}


def test_integral_float_is_accepted():
    assert validate(GET_NEWS, {"category": "it", "limit": 3.0})["limit"] == 3


def test_fractional_limit_within_bounds_is_accepted():
    assert validate(GET_NEWS, {"category": "it", "limit": 2.5})["limit"] == 2.5


# ---------------------------------------------------------------------------
# Failures
# ---------------------------------------------------------------------------


def test_missing_required_argument():
    with pytest.raises(ValidationError) as exc:
        validate(GET_NEWS, {"limit": 3})

    assert exc.value.kind == ValidationError.MISSING_REQUIRED
    assert exc.value.key == "category"
    assert str(exc.value) == "Missing required argument: category"


@pytest.mark.parametrize("limit", [0, 21, -5, 25.5, 0.5, -3.7, 20.5])
def test_limit_out_of_range(limit):
    with pytest.raises(ValidationError) as exc:
        validate(GET_NEWS, {"category": "top", "limit": limit})

    assert exc.value.kind == ValidationError.OUT_OF_RANGE
    assert exc.value.key == "limit"
    assert "[1, 20]" in str(exc.value)


def test_gnews_max_is_capped_at_ten():
    with pytest.raises(ValidationError) as exc:
        validate(SEARCH_NEWS_GNEWS, {"keyword": "AI", "max": 11})

    assert exc.value.kind == ValidationError.OUT_OF_RANGE
    assert exc.value.key == "max"


@pytest.mark.parametrize("lang", ["j", "jpn"])
def test_language_code_must_be_two_letters(lang):
    with pytest.raises(ValidationError) as exc:
        validate(SEARCH_NEWS_GNEWS, {"keyword": "AI", "lang": lang})

    assert exc.value.kind == ValidationError.OUT_OF_RANGE
    assert exc.value.key == "lang"


def test_empty_keyword_is_rejected():
    with pytest.raises(ValidationError) as exc:
        validate(SEARCH_NEWS_RSS, {"keyword": ""})

    assert exc.value.kind == ValidationError.OUT_OF_RANGE
    assert exc.value.key == "keyword"


def test_category_outside_enum():
    with pytest.raises(ValidationError) as exc:
        validate(GET_NEWS, {"category": "weather"})

    assert exc.value.kind == ValidationError.INVALID_ENUM
    assert exc.value.key == "category"
    assert "domestic" in str(exc.value)


def test_headline_category_outside_enum():
    with pytest.raises(ValidationError) as exc:
        validate(GET_TOP_HEADLINES, {"category": "top"})

    assert exc.value.kind == ValidationError.INVALID_ENUM


@pytest.mark.parametrize("limit", ["many", None, True, False, float("nan")])
def test_non_numeric_limit(limit):
    with pytest.raises(ValidationError) as exc:
        validate(GET_NEWS, {"category": "top", "limit": limit})

    assert exc.value.kind == ValidationError.INVALID_TYPE
    assert exc.value.key == "limit"


def test_first_violated_parameter_wins():
    # category (missing) is declared before limit (out of range)
    with pytest.raises(ValidationError) as exc:
        validate(GET_NEWS, {"limit": 50})

    assert exc.value.key == "category"
    assert exc.value.kind == ValidationError.MISSING_REQUIRED


def test_declaration_order_not_argument_order():
    with pytest.raises(ValidationError) as exc:
        validate(SEARCH_NEWS_GNEWS, {"max": 99, "country": "japan", "keyword": "AI"})

    assert exc.value.key == "country"


def test_arguments_must_be_an_object():
    with pytest.raises(ValidationError) as exc:
        validate(GET_NEWS, ["top", 5])

    assert exc.value.kind == ValidationError.INVALID_TYPE


def test_error_text_uses_catalogue():
    with pytest.raises(ValidationError) as exc:
        validate(SEARCH_NEWS_RSS, {}, JA)

    assert str(exc.value) == "必須の引数がありません: keyword"
