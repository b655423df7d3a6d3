"""Japanese verb conjugator.

Classifies a verb in dictionary form and generates its 34 conjugated forms
with kanji, hiragana and romaji.

Usage:
    from conjugator import conjugate, find_form
"""

from .errors import (
    AmbiguousVerbError,
    ConjugationFailedError,
    ConjugatorError,
    EmptyInputError,
    InvalidCharactersError,
    UnknownVerbError,
)
from .forms import (
    CATEGORY_NAMES,
    CATEGORY_ORDER,
    CONJUGATION_FORMS,
    FORM_IDS,
    FormDefinition,
    get_all_categories,
    get_form_definition,
    get_forms_by_category,
    get_forms_by_formality,
)
from .romaji import (
    hiragana_to_romaji,
    katakana_to_romaji,
    romaji_to_hiragana,
    romaji_to_katakana,
    to_romaji,
)
from .classify import (
    classify_verb,
    is_hiragana,
    is_japanese,
    is_kanji,
    is_katakana,
)
from .godan import conjugate_godan
from .ichidan import conjugate_ichidan, get_ichidan_colloquial_potential
from .irregular import conjugate_irregular
from .compound import conjugate_compound_verb, is_kuru_compound, is_suru_compound
from .engine import (
    conjugate,
    conjugate_or_raise,
    conjugate_to_form,
    deserialize_result,
    find_form,
    get_verb_info,
    is_valid_verb,
    results_equivalent,
    serialize_result,
)
from .history import ConjugationHistory
from .export import format_form, format_result

__all__ = [
    # Errors
    "AmbiguousVerbError",
    "ConjugationFailedError",
    "ConjugatorError",
    "EmptyInputError",
    "InvalidCharactersError",
    "UnknownVerbError",
    # Form catalogue
    "CATEGORY_NAMES",
    "CATEGORY_ORDER",
    "CONJUGATION_FORMS",
    "FORM_IDS",
    "FormDefinition",
    "get_all_categories",
    "get_form_definition",
    "get_forms_by_category",
    "get_forms_by_formality",
    # Romaji
    "hiragana_to_romaji",
    "katakana_to_romaji",
    "romaji_to_hiragana",
    "romaji_to_katakana",
    "to_romaji",
    # Classification
    "classify_verb",
    "is_hiragana",
    "is_japanese",
    "is_kanji",
    "is_katakana",
    # Generators
    "conjugate_godan",
    "conjugate_ichidan",
    "get_ichidan_colloquial_potential",
    "conjugate_irregular",
    "conjugate_compound_verb",
    "is_kuru_compound",
    "is_suru_compound",
    # Facade
    "conjugate",
    "conjugate_or_raise",
    "conjugate_to_form",
    "deserialize_result",
    "find_form",
    "get_verb_info",
    "is_valid_verb",
    "results_equivalent",
    "serialize_result",
    # History & export
    "ConjugationHistory",
    "format_form",
    "format_result",
]
