"""Tests for culture normalization, the parent hierarchy and the ambient culture.

Python 3.13+.
"""

from __future__ import annotations

import locale
import threading

import pytest
from hypothesis import given

from jsonlocalizer.culture import (
    culture_chain,
    get_current_culture,
    get_system_culture,
    normalize_culture,
    parent_culture,
    use_culture,
)
from jsonlocalizer.errors import InvalidCultureError, LocalizationError
from tests.strategies import culture_names


class TestNormalizeCulture:
    """normalize_culture() canonical spelling."""

    @pytest.mark.parametrize(
        ("raw", "expected"),
        [
            ("en-US", "en-US"),
            ("en-us", "en-US"),
            ("EN_us", "en-US"),
            ("zh-hant-tw", "zh-Hant-TW"),
            ("sr_Latn", "sr-Latn"),
            ("es-419", "es-419"),
            ("de_DE.UTF-8", "de-DE"),
            ("fr", "fr"),
        ],
    )
    def test_canonical_form(self, raw: str, expected: str) -> None:
        """Casing and separators are made canonical."""
        assert normalize_culture(raw) == expected

    def test_neutral_and_root_alias(self) -> None:
        """Both "" and "." are the neutral culture."""
        assert normalize_culture("") == ""
        assert normalize_culture(".") == ""

    @pytest.mark.parametrize("raw", ["123", "en-US-!!", "e n", " en", "en/US", "..", "a\\b"])
    def test_invalid_rejected(self, raw: str) -> None:
        """Malformed or unsafe names raise InvalidCultureError."""
        with pytest.raises(InvalidCultureError) as exc_info:
            normalize_culture(raw)
        assert exc_info.value.culture == raw
        assert isinstance(exc_info.value, ValueError)
        assert isinstance(exc_info.value, LocalizationError)

    def test_non_string_rejected(self) -> None:
        """Non-string input raises TypeError."""
        with pytest.raises(TypeError, match="culture must be a str"):
            normalize_culture(None)  # type: ignore[arg-type]

    @given(culture_names())
    def test_idempotent(self, culture: str) -> None:
        """Normalizing twice changes nothing."""
        once = normalize_culture(culture)
        assert normalize_culture(once) == once
        assert normalize_culture(culture.replace("-", "_").lower()) == once


class TestParentCulture:
    """parent_culture() hierarchy."""

    @pytest.mark.parametrize(
        ("culture", "parent"),
        [
            ("en-US", "en"),
            ("en", ""),
            ("", ""),
            (".", ""),
            ("zh-Hant-TW", "zh-Hant"),
            ("de-Latn", "de"),
        ],
    )
    def test_drops_most_specific_component(self, culture: str, parent: str) -> None:
        """Territory, then script, then language are dropped."""
        assert parent_culture(culture) == parent

    def test_cldr_parent_exception(self) -> None:
        """CLDR parent exceptions take precedence over truncation."""
        assert parent_culture("es-MX") == "es-419"
        assert parent_culture("es-419") == "es"

    def test_neutral_is_fixed_point(self) -> None:
        """The neutral culture is its own parent."""
        assert parent_culture(parent_culture("")) == ""


class TestCultureChain:
    """culture_chain() full fallback walk."""

    def test_chain(self) -> None:
        """The chain lists the culture, its ancestors, and the neutral culture."""
        assert culture_chain("en-US") == ("en-US", "en", "")
        assert culture_chain("es-MX") == ("es-MX", "es-419", "es", "")

    def test_neutral_chain(self) -> None:
        """The neutral culture's chain is just itself."""
        assert culture_chain("") == ("",)

    @given(culture_names())
    def test_chain_terminates_at_neutral(self, culture: str) -> None:
        """Every chain ends at the neutral culture without repeats."""
        chain = culture_chain(culture)
        assert chain[0] == normalize_culture(culture)
        assert chain[-1] == ""
        assert len(set(chain)) == len(chain)
        for child, parent in zip(chain, chain[1:], strict=False):
            assert parent_culture(child) == parent


class TestAmbientCulture:
    """use_culture()/get_current_culture()."""

    def test_use_culture_sets_and_restores(self) -> None:
        """The ambient culture is scoped to the with block."""
        before = get_current_culture()
        with use_culture("de_de") as culture:
            assert culture == "de-DE"
            assert get_current_culture() == "de-DE"
            with use_culture("fr"):
                assert get_current_culture() == "fr"
            assert get_current_culture() == "de-DE"
        assert get_current_culture() == before

    def test_use_culture_validates(self) -> None:
        """Invalid cultures are rejected before anything is set."""
        with pytest.raises(InvalidCultureError), use_culture("not a culture"):
            pass

    def test_threads_do_not_share_ambient_culture(self) -> None:
        """A new thread does not see another thread's ambient culture."""
        seen: list[str] = []
        with use_culture("lv-LV"):
            thread = threading.Thread(target=lambda: seen.append(get_current_culture()))
            thread.start()
            thread.join()
        assert seen == [get_system_culture()]


class TestSystemCulture:
    """get_system_culture() detection."""

    @pytest.fixture
    def clean_env(self, monkeypatch: pytest.MonkeyPatch) -> pytest.MonkeyPatch:
        monkeypatch.setattr(locale, "getlocale", lambda: (None, None))
        for var in ("LC_ALL", "LC_MESSAGES", "LANG"):
            monkeypatch.delenv(var, raising=False)
        return monkeypatch

    def test_from_lang(self, clean_env: pytest.MonkeyPatch) -> None:
        """LANG is read and normalized."""
        clean_env.setenv("LANG", "de_DE.UTF-8")
        assert get_system_culture() == "de-DE"

    def test_lc_all_wins(self, clean_env: pytest.MonkeyPatch) -> None:
        """LC_ALL overrides LANG."""
        clean_env.setenv("LANG", "de_DE.UTF-8")
        clean_env.setenv("LC_ALL", "fr_FR.UTF-8")
        assert get_system_culture() == "fr-FR"

    def test_posix_locale_skipped(self, clean_env: pytest.MonkeyPatch) -> None:
        """C/POSIX pseudo-locales fall through to the default."""
        clean_env.setenv("LANG", "C.UTF-8")
        assert get_system_culture() == "en-US"

    def test_raise_on_failure(self, clean_env: pytest.MonkeyPatch) -> None:
        """raise_on_failure turns the default into an error."""
        with pytest.raises(RuntimeError, match="Could not determine system culture"):
            get_system_culture(raise_on_failure=True)
