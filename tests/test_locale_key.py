"""Tests for LocaleKey normalization, projection and Babel interop.

Python 3.13+.
"""

from __future__ import annotations

from unittest.mock import patch

import pytest
from babel import Locale
from hypothesis import given

from resxtext.core import INVARIANT_LOCALE, LocaleKey
from resxtext.diagnostics import DiagnosticCode, InvalidLocaleTagError
from tests.strategies import locale_tags


class TestNormalization:
    """Construction normalizes spelling."""

    @pytest.mark.parametrize(
        ("tag", "expected"),
        [
            ("en", "en"),
            ("EN", "en"),
            ("en_us", "en-US"),
            ("EN-us", "en-US"),
            ("zh_hans_cn", "zh-Hans-CN"),
            ("ZH-HANT-tw", "zh-Hant-TW"),
            ("es-419", "es-419"),
            ("de-DE-1996", "de-DE-1996"),
            ("  fr-CA  ", "fr-CA"),
        ],
    )
    def test_canonical_tag(self, tag: str, expected: str) -> None:
        """Separators become hyphens and subtags get canonical case."""
        assert LocaleKey(tag).tag == expected

    def test_equality_is_case_and_separator_insensitive(self) -> None:
        """Different spellings of one tag are equal keys."""
        assert LocaleKey("en_us") == LocaleKey("EN-US") == LocaleKey("en-US")

    def test_different_tags_not_equal(self) -> None:
        """Equality is exact, not fuzzy."""
        assert LocaleKey("en") != LocaleKey("en-US")

    def test_hashing_matches_equality(self) -> None:
        """Equal keys find the same dict entry."""
        table = {LocaleKey("pt-br"): "x"}
        assert table[LocaleKey("PT_BR")] == "x"

    def test_str_is_tag(self) -> None:
        """str() gives the canonical tag."""
        assert str(LocaleKey("de_at")) == "de-AT"

    def test_frozen(self) -> None:
        """Keys are immutable."""
        key = LocaleKey("en")
        with pytest.raises(AttributeError):
            key.tag = "de"  # type: ignore[misc]


class TestInvariantLocale:
    """The empty tag is the invariant locale."""

    @pytest.mark.parametrize("tag", ["", " ", "\t"])
    def test_parse_empty_is_invariant(self, tag: str) -> None:
        """parse() maps empty and blank tags to INVARIANT_LOCALE."""
        assert LocaleKey.parse(tag) is INVARIANT_LOCALE

    def test_invariant_properties(self) -> None:
        """Invariant has an empty tag and language."""
        assert INVARIANT_LOCALE.is_invariant
        assert INVARIANT_LOCALE.tag == ""
        assert INVARIANT_LOCALE.language == ""

    def test_constructed_empty_equals_invariant(self) -> None:
        """LocaleKey('') equals the module constant."""
        assert LocaleKey("") == INVARIANT_LOCALE

    def test_regular_key_not_invariant(self) -> None:
        """Any real tag is not invariant."""
        assert not LocaleKey("en").is_invariant


class TestInvalidTags:
    """Malformed tags raise InvalidLocaleTagError."""

    @pytest.mark.parametrize(
        "tag",
        [
            "e",
            "abcdefghi",
            "123",
            "en US",
            "en-US.UTF-8",
            "sr@latin",
            "de--DE",
            "en-US-x",
            "en/US",
            "fr-ÄÖ",
        ],
    )
    def test_rejected(self, tag: str) -> None:
        """Tag syntax errors are surfaced, not recovered."""
        with pytest.raises(InvalidLocaleTagError) as exc_info:
            LocaleKey.parse(tag)
        assert exc_info.value.tag == tag
        assert exc_info.value.diagnostic is not None
        assert exc_info.value.diagnostic.code == DiagnosticCode.INVALID_LOCALE_TAG

    def test_error_is_value_error(self) -> None:
        """Callers catching ValueError see invalid tags."""
        with pytest.raises(ValueError, match="Invalid locale tag"):
            LocaleKey("not a tag")


class TestLanguageOnly:
    """language_only() keeps only the first subtag."""

    @pytest.mark.parametrize(
        ("tag", "expected"),
        [
            ("en-US", "en"),
            ("zh-Hans-CN", "zh"),
            ("es-419", "es"),
            ("de", "de"),
        ],
    )
    def test_projection(self, tag: str, expected: str) -> None:
        """Region, script and variant are dropped."""
        assert LocaleKey(tag).language_only() == LocaleKey(expected)

    def test_language_only_returns_self_when_bare(self) -> None:
        """A bare language key is its own projection."""
        key = LocaleKey("de")
        assert key.language_only() is key

    def test_invariant_projects_to_invariant(self) -> None:
        """Invariant has no language and stays invariant."""
        assert INVARIANT_LOCALE.language_only() is INVARIANT_LOCALE

    def test_language_property(self) -> None:
        """language is the primary subtag."""
        assert LocaleKey("sr_latn_rs").language == "sr"


class TestCoerce:
    """coerce() accepts the public locale argument types."""

    def test_none_is_invariant(self) -> None:
        """None means invariant."""
        assert LocaleKey.coerce(None) is INVARIANT_LOCALE

    def test_key_passes_through(self) -> None:
        """Existing keys are returned unchanged."""
        key = LocaleKey("de")
        assert LocaleKey.coerce(key) is key

    def test_string_parsed(self) -> None:
        """Strings are parsed."""
        assert LocaleKey.coerce("de_de") == LocaleKey("de-DE")

    def test_empty_string_is_invariant(self) -> None:
        """Empty strings are invariant."""
        assert LocaleKey.coerce("") is INVARIANT_LOCALE

    def test_other_types_rejected(self) -> None:
        """Non-locale values raise TypeError."""
        with pytest.raises(TypeError, match="got int"):
            LocaleKey.coerce(42)  # type: ignore[arg-type]


class TestBabelInterop:
    """to_babel() and from_system()."""

    def test_to_babel(self) -> None:
        """Known tags map to a Babel Locale."""
        locale = LocaleKey("de-AT").to_babel()
        assert isinstance(locale, Locale)
        assert locale.language == "de"
        assert locale.territory == "AT"

    def test_to_babel_invariant_raises(self) -> None:
        """Invariant has no CLDR counterpart."""
        with pytest.raises(InvalidLocaleTagError) as exc_info:
            INVARIANT_LOCALE.to_babel()
        assert exc_info.value.diagnostic is not None
        assert exc_info.value.diagnostic.code == DiagnosticCode.UNKNOWN_LOCALE

    def test_to_babel_unknown_raises(self) -> None:
        """Well-formed but unknown tags fail only at to_babel()."""
        key = LocaleKey("qq")
        with pytest.raises(InvalidLocaleTagError, match="not known to CLDR"):
            key.to_babel()

    def test_from_system(self) -> None:
        """from_system() parses the detected POSIX locale."""
        with patch("resxtext.core.locale_key.get_system_locale", return_value="de_AT"):
            assert LocaleKey.from_system() == LocaleKey("de-AT")


class TestLocaleKeyProperties:
    """Hypothesis properties of normalization."""

    @given(locale_tags())
    def test_spelling_normalizes_to_canonical(self, pair: tuple[str, str]) -> None:
        """Any spelling of a pool tag normalizes to its canonical form."""
        spelling, canonical = pair
        assert LocaleKey(spelling).tag == canonical

    @given(locale_tags())
    def test_normalization_idempotent(self, pair: tuple[str, str]) -> None:
        """Re-parsing a canonical tag changes nothing."""
        key = LocaleKey(pair[0])
        assert LocaleKey(key.tag) == key

    @given(locale_tags())
    def test_language_only_idempotent(self, pair: tuple[str, str]) -> None:
        """Projecting twice equals projecting once."""
        key = LocaleKey(pair[0])
        assert key.language_only().language_only() == key.language_only()
