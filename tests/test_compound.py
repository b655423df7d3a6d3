"""Tests for する/来る compound verbs."""

import pytest

from conjugator.classify import classify_verb
from conjugator.compound import (
    COMMON_KURU_COMPOUNDS,
    COMMON_SURU_COMPOUNDS,
    conjugate_compound,
    conjugate_compound_verb,
    get_kuru_compound_prefix,
    get_suru_compound_prefix,
    is_kuru_compound,
    is_suru_compound,
    verify_prefix_preservation,
)
from conjugator.errors import ConjugationFailedError
from conjugator.godan import conjugate_godan


class TestDetection:
    """Compound checks on raw text."""

    def test_suru(self):
        assert is_suru_compound("勉強する")
        assert not is_suru_compound("する")
        assert not is_suru_compound("書く")

    def test_kuru(self):
        assert is_kuru_compound("持ってくる")
        assert is_kuru_compound("持って来る")
        assert not is_kuru_compound("くる")
        assert is_kuru_compound("つくる")

    def test_prefixes(self):
        assert get_suru_compound_prefix("料理する") == "料理"
        assert get_kuru_compound_prefix("帰ってくる") == "帰って"

    def test_prefix_of_non_compound(self):
        with pytest.raises(ValueError):
            get_suru_compound_prefix("書く")
        with pytest.raises(ValueError):
            get_kuru_compound_prefix("くる")


class TestConjugation:
    """Compound forms keep their prefix."""

    def test_benkyou_suru(self):
        forms = {f.id: f for f in conjugate_compound_verb("勉強する")}
        assert forms["dictionary"].kanji == "勉強する"
        assert forms["te"].kanji == "勉強して"
        assert forms["potential-plain"].kanji == "勉強できる"
        assert forms["honorific-respectful"].kanji == "お勉強しになる"

    def test_motte_kuru(self):
        forms = {f.id: f for f in conjugate_compound_verb("持ってくる")}
        assert forms["te"].kanji == "持って来て"
        assert forms["te"].hiragana == "持ってきて"
        assert forms["nai"].hiragana == "持ってこない"

    @pytest.mark.parametrize("verb", COMMON_SURU_COMPOUNDS)
    def test_common_suru_compounds(self, verb):
        forms = conjugate_compound_verb(verb)
        assert len(forms) == 34
        assert verify_prefix_preservation(forms, get_suru_compound_prefix(verb))

    @pytest.mark.parametrize("verb", COMMON_KURU_COMPOUNDS)
    def test_common_kuru_compounds(self, verb):
        forms = conjugate_compound_verb(verb)
        assert len(forms) == 34
        assert verify_prefix_preservation(forms, get_kuru_compound_prefix(verb))

    def test_requires_compound(self):
        with pytest.raises(ConjugationFailedError):
            conjugate_compound(classify_verb("する"))
        with pytest.raises(ConjugationFailedError):
            conjugate_compound(classify_verb("書く"))


class TestVerifyPrefixPreservation:
    """The checker itself."""

    def test_missing_prefix(self):
        forms = conjugate_godan(classify_verb("書く"))
        assert not verify_prefix_preservation(forms, "勉強")

    def test_empty_forms(self):
        assert verify_prefix_preservation([], "勉強")
