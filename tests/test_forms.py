"""Tests for the form catalogue and the static classification tables."""

import pytest

from models import ConjugationCategory, Formality, IrregularType
from conjugator.data import (
    FALSE_ICHIDAN_VERBS,
    GODAN_ENDINGS,
    HONORIFIC_VERBS,
    IRREGULAR_VERBS,
    KNOWN_ICHIDAN_VERBS,
)
from conjugator.forms import (
    CATEGORY_NAMES,
    CATEGORY_ORDER,
    CONJUGATION_FORMS,
    FORM_IDS,
    create_form,
    get_all_categories,
    get_form_definition,
    get_forms_by_category,
    get_forms_by_formality,
)


class TestCatalogue:
    """The 34 standard forms."""

    def test_size_and_order(self):
        assert len(CONJUGATION_FORMS) == 34
        assert FORM_IDS[0] == "dictionary"
        assert FORM_IDS[1] == "te"
        assert FORM_IDS[-1] == "honorific-humble"

    def test_ids_unique(self):
        assert len(set(FORM_IDS)) == len(FORM_IDS)

    def test_every_category_has_forms(self):
        for category in ConjugationCategory:
            assert get_forms_by_category(category), category

    def test_categories_in_display_order(self):
        assert get_all_categories() == list(CATEGORY_ORDER)
        assert len(CATEGORY_ORDER) == 14

    def test_category_names_complete(self):
        assert set(CATEGORY_NAMES) == set(ConjugationCategory)
        assert CATEGORY_NAMES[ConjugationCategory.BASIC] == ("Basic Forms", "基本形")

    def test_tai_forms(self):
        ids = [f.id for f in get_forms_by_category(ConjugationCategory.TAI_FORM)]
        assert ids == ["tai", "takunai", "takatta", "takunakatta"]

    def test_polite_forms(self):
        polite = get_forms_by_formality(Formality.POLITE)
        assert all(f.formality == Formality.POLITE for f in polite)
        assert "masu" in {f.id for f in polite}
        assert "nai" not in {f.id for f in polite}


class TestFormLookup:
    """Definitions by ID."""

    def test_standard_form(self):
        definition = get_form_definition("te")
        assert definition.name == "Te Form"
        assert definition.name_ja == "て形"
        assert definition.category == ConjugationCategory.BASIC

    def test_colloquial_potential_is_supplementary(self):
        definition = get_form_definition("potential-colloquial")
        assert definition.category == ConjugationCategory.POTENTIAL
        assert "potential-colloquial" not in FORM_IDS

    def test_unknown_form(self):
        assert get_form_definition("nope") is None

    def test_create_form(self):
        form = create_form("masu", "のみます")
        assert form.name == "Masu Form"
        assert form.name_japanese == "ます形"
        assert form.hiragana == "のみます"
        assert form.romaji == "nomimasu"
        assert form.formality == Formality.POLITE

    def test_create_form_folds_katakana(self):
        form = create_form("te", "サボって")
        assert form.kanji == "サボって"
        assert form.hiragana == "さぼって"

    def test_create_form_separate_reading(self):
        form = create_form("te", "来て", "きて")
        assert form.kanji == "来て"
        assert form.romaji == "kite"

    def test_create_form_unknown_id(self):
        with pytest.raises(KeyError):
            create_form("nope", "かく")


class TestClassificationTables:
    """Static data used by the classifier."""

    def test_nine_godan_endings(self):
        assert set(GODAN_ENDINGS) == set("うくぐすつぬぶむる")

    @pytest.mark.parametrize("ending,te,ta", [
        ("う", "って", "った"),
        ("つ", "って", "った"),
        ("る", "って", "った"),
        ("む", "んで", "んだ"),
        ("ぶ", "んで", "んだ"),
        ("ぬ", "んで", "んだ"),
        ("く", "いて", "いた"),
        ("ぐ", "いで", "いだ"),
        ("す", "して", "した"),
    ])
    def test_euphonic_forms(self, ending, te, ta):
        assert GODAN_ENDINGS[ending].te == te
        assert GODAN_ENDINGS[ending].ta == ta

    def test_u_negative_row_is_wa(self):
        assert GODAN_ENDINGS["う"].a == "わ"

    def test_irregular_table(self):
        assert IRREGULAR_VERBS["する"] == IrregularType.SURU
        assert IRREGULAR_VERBS["くる"] == IRREGULAR_VERBS["来る"] == IrregularType.KURU
        assert len(HONORIFIC_VERBS) == 5

    def test_disambiguation_lists_disjoint(self):
        assert not KNOWN_ICHIDAN_VERBS & FALSE_ICHIDAN_VERBS

    def test_tables_read_only(self):
        with pytest.raises(TypeError):
            IRREGULAR_VERBS["やる"] = IrregularType.SURU
