"""Conjugation facade.

Validates input, classifies the verb, dispatches to the generator for its
class and assembles a ``ConjugationResult``. Failures come back as
``ConjugationError`` values; ``conjugate_or_raise`` is the exception-based
variant. Nothing here keeps state between calls.
"""

import logging
import time

from models import ConjugationError, ConjugationForm, ConjugationResult, VerbInfo, VerbType
from conjugator.classify import classify_verb
from conjugator.errors import ConjugationFailedError, ConjugatorError
from conjugator.godan import conjugate_godan
from conjugator.ichidan import colloquial_potential_form, conjugate_ichidan
from conjugator.irregular import conjugate_irregular

logger = logging.getLogger(__name__)

COLLOQUIAL_POTENTIAL_ID = "potential-colloquial"


def _now_ms() -> int:
    return int(time.time() * 1000)


def _generate_forms(verb: VerbInfo) -> list[ConjugationForm]:
    match verb.type:
        case VerbType.GODAN:
            return conjugate_godan(verb)
        case VerbType.ICHIDAN:
            return conjugate_ichidan(verb)
        case VerbType.IRREGULAR:
            return conjugate_irregular(verb)
        case _:
            raise ConjugationFailedError(f"Unknown verb type: {verb.type}")


def conjugate_or_raise(text: str) -> ConjugationResult:
    """Conjugate a verb, raising on failure.

    Args:
        text: Verb in dictionary form

    Returns:
        All 34 forms of the verb

    Raises:
        ConjugatorError: Any failure; unexpected exceptions from
            classification or the generators are wrapped in ``ConjugationFailedError``
    """
    try:
        verb = classify_verb(text)
        logger.debug(
            "Classified %r as %s (stem=%r, irregular=%s, prefix=%r)",
            verb.dictionary_form, verb.type, verb.stem, verb.irregular_type, verb.compound_prefix,
        )
        forms = _generate_forms(verb)
    except ConjugatorError:
        raise
    except Exception as e:
        raise ConjugationFailedError(str(e) or None) from e

    return ConjugationResult(verb=verb, forms=tuple(forms), timestamp=_now_ms())


def conjugate(text: str) -> ConjugationResult | ConjugationError:
    """Conjugate a verb to all forms.

    Args:
        text: Verb in dictionary form (kanji, kana or mixed)

    Returns:
        ConjugationResult on success, ConjugationError otherwise

    Examples:
        >>> result = conjugate("書く")
        >>> find_form(result, "te").kanji
        '書いて'
        >>> conjugate("   ").code
        <ErrorCode.EMPTY_INPUT: 'EMPTY_INPUT'>
    """
    try:
        return conjugate_or_raise(text)
    except ConjugationFailedError as e:
        logger.exception("Conjugation failed for %r", text)
        return e.to_error()
    except ConjugatorError as e:
        logger.debug("Rejected %r: %s", text, e.code)
        return e.to_error()


def find_form(result: ConjugationResult, form_id: str) -> ConjugationForm | None:
    """Find a form in a result by its ID.

    ``potential-colloquial`` is also accepted for ichidan verbs (食べれる).
    """
    if form_id == COLLOQUIAL_POTENTIAL_ID:
        if result.verb.type != VerbType.ICHIDAN:
            return None
        return colloquial_potential_form(result.verb)
    return next((form for form in result.forms if form.id == form_id), None)


def conjugate_to_form(text: str, form_id: str) -> ConjugationForm | None:
    """Conjugate a verb to a single form.

    Returns:
        The form, or None if the verb is invalid or has no such form
    """
    result = conjugate(text)
    if isinstance(result, ConjugationError):
        return None
    return find_form(result, form_id)


def is_valid_verb(text: str) -> bool:
    """Check whether a string can be conjugated."""
    return isinstance(conjugate(text), ConjugationResult)


def get_verb_info(text: str) -> VerbInfo | None:
    """Classify a verb without conjugating it; None if it is not valid."""
    try:
        return classify_verb(text)
    except ConjugatorError as e:
        logger.debug("Rejected %r: %s", text, e.code)
        return None


# ============================================================================
# Serialization
# ============================================================================


def serialize_result(result: ConjugationResult) -> str:
    """Serialize a result to JSON."""
    return result.model_dump_json()


def deserialize_result(data: str | bytes) -> ConjugationResult:
    """Rebuild a result from ``serialize_result`` output.

    Raises:
        pydantic.ValidationError: The payload is not a valid result
    """
    return ConjugationResult.model_validate_json(data)


def results_equivalent(a: ConjugationResult, b: ConjugationResult) -> bool:
    """Field-by-field equality of verb info, forms (in order) and timestamp."""
    return a.verb == b.verb and a.forms == b.forms and a.timestamp == b.timestamp
