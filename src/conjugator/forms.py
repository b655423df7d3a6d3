"""Conjugation form catalogue.

Defines the 34 standard forms, in display order, with their category,
English/Japanese names and formality. Every generator looks up display
metadata here when it builds a ``ConjugationForm``.
"""

from dataclasses import dataclass
from types import MappingProxyType

import jaconv

from models import ConjugationCategory, ConjugationForm, Formality
from conjugator.romaji import to_romaji


@dataclass(frozen=True, slots=True)
class FormDefinition:
    """Static metadata for a conjugation form."""

    id: str
    category: ConjugationCategory
    name: str
    name_ja: str
    formality: Formality


_C = ConjugationCategory
_PLAIN = Formality.PLAIN
_POLITE = Formality.POLITE


CONJUGATION_FORMS: tuple[FormDefinition, ...] = (
    # Basic
    FormDefinition("dictionary", _C.BASIC, "Dictionary Form", "辞書形", _PLAIN),
    FormDefinition("te", _C.BASIC, "Te Form", "て形", _PLAIN),
    # Polite
    FormDefinition("masu", _C.POLITE, "Masu Form", "ます形", _POLITE),
    FormDefinition("masen", _C.POLITE, "Masen (Polite Negative)", "ません", _POLITE),
    FormDefinition("mashita", _C.POLITE, "Mashita (Polite Past)", "ました", _POLITE),
    FormDefinition(
        "masen-deshita", _C.POLITE, "Masen Deshita (Polite Past Negative)", "ませんでした", _POLITE,
    ),
    # Negative
    FormDefinition("nai", _C.NEGATIVE, "Nai Form (Negative)", "ない形", _PLAIN),
    FormDefinition("nakatta", _C.NEGATIVE, "Nakatta Form (Past Negative)", "なかった形", _PLAIN),
    # Past
    FormDefinition("ta", _C.PAST, "Ta Form (Past)", "た形", _PLAIN),
    # Volitional
    FormDefinition("volitional-plain", _C.VOLITIONAL, "Volitional (Plain)", "意向形", _PLAIN),
    FormDefinition("volitional-polite", _C.VOLITIONAL, "Volitional (Polite)", "ましょう", _POLITE),
    # Potential
    FormDefinition("potential-plain", _C.POTENTIAL, "Potential (Plain)", "可能形", _PLAIN),
    FormDefinition("potential-polite", _C.POTENTIAL, "Potential (Polite)", "可能形丁寧", _POLITE),
    FormDefinition("potential-negative", _C.POTENTIAL, "Potential (Negative)", "可能形否定", _PLAIN),
    # Passive
    FormDefinition("passive-plain", _C.PASSIVE, "Passive (Plain)", "受身形", _PLAIN),
    FormDefinition("passive-polite", _C.PASSIVE, "Passive (Polite)", "受身形丁寧", _POLITE),
    # Causative
    FormDefinition("causative-plain", _C.CAUSATIVE, "Causative (Plain)", "使役形", _PLAIN),
    FormDefinition("causative-polite", _C.CAUSATIVE, "Causative (Polite)", "使役形丁寧", _POLITE),
    # Causative-passive
    FormDefinition(
        "causative-passive-plain", _C.CAUSATIVE_PASSIVE, "Causative-Passive (Plain)", "使役受身形", _PLAIN,
    ),
    FormDefinition(
        "causative-passive-polite", _C.CAUSATIVE_PASSIVE, "Causative-Passive (Polite)", "使役受身形丁寧", _POLITE,
    ),
    # Imperative
    FormDefinition("imperative-plain", _C.IMPERATIVE, "Imperative (Plain)", "命令形", _PLAIN),
    FormDefinition("imperative-polite", _C.IMPERATIVE, "Imperative (Polite)", "てください", _POLITE),
    FormDefinition("imperative-negative", _C.IMPERATIVE, "Negative Imperative", "禁止形", _PLAIN),
    # Conditional
    FormDefinition("conditional-ba", _C.CONDITIONAL, "Ba Form (Conditional)", "ば形", _PLAIN),
    FormDefinition("conditional-tara", _C.CONDITIONAL, "Tara Form (Conditional)", "たら形", _PLAIN),
    FormDefinition("conditional-nara", _C.CONDITIONAL, "Nara Form (Conditional)", "なら形", _PLAIN),
    # Tai-form (want to)
    FormDefinition("tai", _C.TAI_FORM, "Tai Form (Want to)", "たい形", _PLAIN),
    FormDefinition("takunai", _C.TAI_FORM, "Takunai (Don't want to)", "たくない", _PLAIN),
    FormDefinition("takatta", _C.TAI_FORM, "Takatta (Wanted to)", "たかった", _PLAIN),
    FormDefinition("takunakatta", _C.TAI_FORM, "Takunakatta (Didn't want to)", "たくなかった", _PLAIN),
    # Progressive
    FormDefinition("progressive-present", _C.PROGRESSIVE, "Te-iru (Continuous)", "ている", _PLAIN),
    FormDefinition("progressive-past", _C.PROGRESSIVE, "Te-ita (Past Continuous)", "ていた", _PLAIN),
    # Honorific
    FormDefinition(
        "honorific-respectful", _C.HONORIFIC, "Respectful (O-verb-ni-naru)", "お〜になる", _POLITE,
    ),
    FormDefinition("honorific-humble", _C.HONORIFIC, "Humble (O-verb-suru)", "お〜する", _POLITE),
)

# Outside the standard list: only the ichidan colloquial potential uses it
SUPPLEMENTARY_FORMS: tuple[FormDefinition, ...] = (
    FormDefinition(
        "potential-colloquial", _C.POTENTIAL, "Potential (Colloquial)", "可能形（ら抜き）", _PLAIN,
    ),
)

FORM_IDS = tuple(f.id for f in CONJUGATION_FORMS)

_FORMS_BY_ID = MappingProxyType({f.id: f for f in CONJUGATION_FORMS + SUPPLEMENTARY_FORMS})


CATEGORY_NAMES = MappingProxyType({
    _C.BASIC: ("Basic Forms", "基本形"),
    _C.POLITE: ("Polite Forms", "丁寧形"),
    _C.NEGATIVE: ("Negative Forms", "否定形"),
    _C.PAST: ("Past Forms", "過去形"),
    _C.VOLITIONAL: ("Volitional Forms", "意向形"),
    _C.POTENTIAL: ("Potential Forms", "可能形"),
    _C.PASSIVE: ("Passive Forms", "受身形"),
    _C.CAUSATIVE: ("Causative Forms", "使役形"),
    _C.CAUSATIVE_PASSIVE: ("Causative-Passive Forms", "使役受身形"),
    _C.IMPERATIVE: ("Imperative Forms", "命令形"),
    _C.CONDITIONAL: ("Conditional Forms", "条件形"),
    _C.TAI_FORM: ("Desire Forms (Tai)", "たい形"),
    _C.PROGRESSIVE: ("Progressive Forms", "進行形"),
    _C.HONORIFIC: ("Honorific Forms", "敬語"),
})

CATEGORY_ORDER: tuple[ConjugationCategory, ...] = tuple(ConjugationCategory)


# ============================================================================
# Lookups
# ============================================================================


def get_form_definition(form_id: str) -> FormDefinition | None:
    """Get a form definition by its ID (standard or supplementary)."""
    return _FORMS_BY_ID.get(form_id)


def get_forms_by_category(category: ConjugationCategory) -> list[FormDefinition]:
    """Get the standard form definitions of one category."""
    return [f for f in CONJUGATION_FORMS if f.category == category]


def get_forms_by_formality(formality: Formality) -> list[FormDefinition]:
    """Get the standard form definitions of one formality level."""
    return [f for f in CONJUGATION_FORMS if f.formality == formality]


def get_all_categories() -> list[ConjugationCategory]:
    """Categories in the order they first appear in the catalogue."""
    return list(dict.fromkeys(f.category for f in CONJUGATION_FORMS))


def create_form(form_id: str, kanji: str, hiragana: str | None = None) -> ConjugationForm:
    """Build a ConjugationForm from catalogue metadata.

    Args:
        form_id: Identifier of a catalogued form
        kanji: Surface form in the verb's own script mix
        hiragana: Phonetic spelling; derived from ``kanji`` when omitted

    Returns:
        The assembled form
    """
    definition = _FORMS_BY_ID.get(form_id)
    if definition is None:
        raise KeyError(f"Unknown form ID: {form_id}")

    if hiragana is None:
        hiragana = jaconv.kata2hira(kanji)

    return ConjugationForm(
        id=form_id,
        name=definition.name,
        name_japanese=definition.name_ja,
        kanji=kanji,
        hiragana=hiragana,
        romaji=to_romaji(hiragana),
        formality=definition.formality,
        category=definition.category,
    )
