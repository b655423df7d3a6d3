"""Japanese verb classification.

Determines whether a verb in dictionary form is godan (五段), ichidan (一段)
or irregular, and extracts its stem and ending. Checks run in a fixed
order, first match wins:

1. する/来る compounds (勉強する, 持ってくる)
2. Irregular verb table (する, 来る, ある, 行く, honorific verbs)
3. Ichidan heuristic (-iru/-eru plus the disambiguation lists)
4. Godan fallback (any of the nine godan endings)
"""

import logging

import jaconv

from models import IrregularType, VerbInfo, VerbType
from conjugator import settings
from conjugator.data import (
    FALSE_ICHIDAN_VERBS,
    GODAN_ENDINGS,
    GodanEnding,
    ICHIDAN_ENDING,
    ICHIDAN_PRECEDING_CHARS,
    IRREGULAR_VERBS,
    KNOWN_ICHIDAN_VERBS,
    KURU_COMPOUND_SUFFIXES,
    SURU_COMPOUND_SUFFIXES,
)
from conjugator.errors import EmptyInputError, InvalidCharactersError, UnknownVerbError
from conjugator.romaji import to_romaji

logger = logging.getLogger(__name__)


# ============================================================================
# Character Predicates
# ============================================================================


def is_hiragana(char: str) -> bool:
    """Check if a character is hiragana."""
    return '\u3040' <= char <= '\u309f'


def is_katakana(char: str) -> bool:
    """Check if a character is katakana (including ー)."""
    return '\u30a0' <= char <= '\u30ff'


def is_kanji(char: str) -> bool:
    """Check if a character is a CJK ideograph (base block or extension A)."""
    return '\u4e00' <= char <= '\u9faf' or '\u3400' <= char <= '\u4dbf'


def is_japanese(text: str) -> bool:
    """Check that a non-empty string is only hiragana, katakana and kanji."""
    return bool(text) and all(
        is_hiragana(ch) or is_katakana(ch) or is_kanji(ch) for ch in text
    )


# ============================================================================
# Compound Detection
# ============================================================================


def detect_suru_compound(verb: str) -> str | None:
    """Return the prefix of a する-compound (勉強する → 勉強), else None."""
    for suffix in SURU_COMPOUND_SUFFIXES:
        if verb.endswith(suffix) and len(verb) > len(suffix):
            return verb[:-len(suffix)]
    return None


def detect_kuru_compound(verb: str) -> str | None:
    """Return the prefix of a 来る-compound (持ってくる → 持って), else None."""
    for suffix in KURU_COMPOUND_SUFFIXES:
        if verb.endswith(suffix) and len(verb) > len(suffix):
            return verb[:-len(suffix)]
    return None


# ============================================================================
# Ichidan / Godan Detection
# ============================================================================


def _looks_like_ichidan(verb: str, unknown_kanji_ru: str) -> bool:
    if len(verb) < 2 or verb[-1] != ICHIDAN_ENDING:
        return False

    before_ru = verb[-2]
    if is_hiragana(before_ru):
        return before_ru in ICHIDAN_PRECEDING_CHARS

    # Kanji (or katakana) before る: the spelling alone cannot tell
    if verb in KNOWN_ICHIDAN_VERBS:
        return True
    if verb in FALSE_ICHIDAN_VERBS:
        return False
    return unknown_kanji_ru == VerbType.ICHIDAN


def _is_actually_ichidan(verb: str) -> bool:
    if verb in FALSE_ICHIDAN_VERBS:
        return False
    # Looks like ichidan and is not a known exception
    return True


def get_godan_map(ending: str) -> GodanEnding | None:
    """Get the vowel-row table for a godan ending."""
    return GODAN_ENDINGS.get(ending)


# ============================================================================
# Classification
# ============================================================================


def _verb_info(verb: str, verb_type: VerbType, stem: str, ending: str, **extra) -> VerbInfo:
    reading = jaconv.kata2hira(verb)
    return VerbInfo(
        dictionary_form=verb,
        reading=reading,
        romaji=to_romaji(reading),
        type=verb_type,
        stem=stem,
        ending=ending,
        **extra,
    )


def classify_verb(text: str, *, unknown_kanji_ru: str | None = None) -> VerbInfo:
    """Classify a Japanese verb and extract its components.

    Args:
        text: Verb in dictionary form (kanji, kana or mixed); surrounding
            whitespace is ignored
        unknown_kanji_ru: Class for kanji + る verbs found in neither
            disambiguation list ("godan" or "ichidan"); defaults to
            ``settings.UNKNOWN_KANJI_RU``

    Returns:
        VerbInfo describing the verb

    Raises:
        EmptyInputError: Input is empty or whitespace only
        InvalidCharactersError: Input contains non-Japanese characters
        UnknownVerbError: No classification rule matches

    Examples:
        >>> classify_verb("書く").type
        <VerbType.GODAN: 'godan'>
        >>> classify_verb("勉強する").compound_prefix
        '勉強'
    """
    if not text or not text.strip():
        raise EmptyInputError()

    verb = text.strip()
    if not is_japanese(verb):
        raise InvalidCharactersError()

    policy = unknown_kanji_ru or settings.UNKNOWN_KANJI_RU

    # Compounds must be checked before the bare irregular verbs
    if verb not in IRREGULAR_VERBS:
        suru_prefix = detect_suru_compound(verb)
        if suru_prefix is not None:
            return _verb_info(
                verb, VerbType.IRREGULAR, suru_prefix, verb[len(suru_prefix):],
                irregular_type=IrregularType.SURU, compound_prefix=suru_prefix,
            )

        kuru_prefix = detect_kuru_compound(verb)
        if kuru_prefix is not None:
            return _verb_info(
                verb, VerbType.IRREGULAR, kuru_prefix, verb[len(kuru_prefix):],
                irregular_type=IrregularType.KURU, compound_prefix=kuru_prefix,
            )

    irregular_type = IRREGULAR_VERBS.get(verb)
    if irregular_type is not None:
        return _verb_info(
            verb, VerbType.IRREGULAR, verb[:-1], verb[-1], irregular_type=irregular_type,
        )

    if _looks_like_ichidan(verb, policy) and _is_actually_ichidan(verb):
        return _verb_info(verb, VerbType.ICHIDAN, verb[:-1], ICHIDAN_ENDING)

    if verb[-1] in GODAN_ENDINGS:
        return _verb_info(verb, VerbType.GODAN, verb[:-1], verb[-1])

    logger.debug("No classification rule matched %r", verb)
    raise UnknownVerbError()
