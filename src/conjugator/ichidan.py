"""Ichidan (一段, Type II) verb conjugation.

The stem never changes: drop the final る and attach a suffix. The potential
has two spellings, the standard られる and the colloquial ら抜き れる; the
standard one fills ``potential-plain`` and the colloquial one is available
through its own helpers.
"""

from models import ConjugationForm, VerbInfo, VerbType
from conjugator.errors import ConjugationFailedError
from conjugator.forms import create_form

TRADITIONAL_POTENTIAL_SUFFIX = "られる"
COLLOQUIAL_POTENTIAL_SUFFIX = "れる"


def _require_ichidan(verb: VerbInfo, caller: str) -> None:
    if verb.type != VerbType.ICHIDAN:
        raise ConjugationFailedError(f"{caller} called with non-ichidan verb")


def get_ichidan_stem(verb: VerbInfo) -> str:
    """Get the invariant stem (食べる → 食べ)."""
    return verb.stem


def get_ichidan_traditional_potential(verb: VerbInfo) -> str:
    """Standard potential: stem + られる (食べられる)."""
    _require_ichidan(verb, "get_ichidan_traditional_potential")
    return verb.stem + TRADITIONAL_POTENTIAL_SUFFIX


def get_ichidan_colloquial_potential(verb: VerbInfo) -> str:
    """Colloquial ら抜き potential: stem + れる (食べれる)."""
    _require_ichidan(verb, "get_ichidan_colloquial_potential")
    return verb.stem + COLLOQUIAL_POTENTIAL_SUFFIX


def colloquial_potential_form(verb: VerbInfo) -> ConjugationForm:
    """The colloquial potential as a ``potential-colloquial`` form."""
    return create_form("potential-colloquial", get_ichidan_colloquial_potential(verb))


def is_colloquial_potential(form_text: str, stem: str) -> bool:
    """Check whether a potential form is the colloquial (れる) variant.

    Args:
        form_text: Potential form to inspect
        stem: Stem of the verb it was built from

    Returns:
        True for stem + れる, False for stem + られる; for other text, whether
        it ends in れる but not られる
    """
    if form_text == stem + COLLOQUIAL_POTENTIAL_SUFFIX:
        return True
    if form_text == stem + TRADITIONAL_POTENTIAL_SUFFIX:
        return False
    return form_text.endswith(COLLOQUIAL_POTENTIAL_SUFFIX) and not form_text.endswith(
        TRADITIONAL_POTENTIAL_SUFFIX
    )


def conjugate_ichidan(verb: VerbInfo) -> list[ConjugationForm]:
    """Conjugate an ichidan verb to all standard forms.

    Args:
        verb: Classified verb with type ``ichidan``

    Returns:
        The 34 forms in catalogue order

    Raises:
        ConjugationFailedError: Verb is not ichidan
    """
    _require_ichidan(verb, "conjugate_ichidan")

    dictionary = verb.dictionary_form
    stem = get_ichidan_stem(verb)
    te = stem + "て"

    return [
        create_form(form_id, text)
        for form_id, text in (
            ("dictionary", dictionary),
            ("te", te),
            ("masu", stem + "ます"),
            ("masen", stem + "ません"),
            ("mashita", stem + "ました"),
            ("masen-deshita", stem + "ませんでした"),
            ("nai", stem + "ない"),
            ("nakatta", stem + "なかった"),
            ("ta", stem + "た"),
            ("volitional-plain", stem + "よう"),
            ("volitional-polite", stem + "ましょう"),
            ("potential-plain", stem + "られる"),
            ("potential-polite", stem + "られます"),
            ("potential-negative", stem + "られない"),
            ("passive-plain", stem + "られる"),
            ("passive-polite", stem + "られます"),
            ("causative-plain", stem + "させる"),
            ("causative-polite", stem + "させます"),
            ("causative-passive-plain", stem + "させられる"),
            ("causative-passive-polite", stem + "させられます"),
            ("imperative-plain", stem + "ろ"),
            ("imperative-polite", te + "ください"),
            ("imperative-negative", dictionary + "な"),
            ("conditional-ba", stem + "れば"),
            ("conditional-tara", stem + "たら"),
            ("conditional-nara", dictionary + "なら"),
            ("tai", stem + "たい"),
            ("takunai", stem + "たくない"),
            ("takatta", stem + "たかった"),
            ("takunakatta", stem + "たくなかった"),
            ("progressive-present", te + "いる"),
            ("progressive-past", te + "いた"),
            ("honorific-respectful", "お" + stem + "になる"),
            ("honorific-humble", "お" + stem + "する"),
        )
    ]
