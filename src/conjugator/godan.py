"""Godan (五段, Type I) verb conjugation.

Every form is a vowel-row stem plus a fixed suffix. The te/ta forms use the
euphonic (音便) endings from ``GODAN_ENDINGS``; 行く is the one verb whose
te/ta forms break the く-row pattern (行って, not 行いて).
"""

from enum import StrEnum

from models import ConjugationForm, IrregularType, VerbInfo, VerbType
from conjugator.data import GODAN_ENDINGS, IKU_VERBS
from conjugator.errors import ConjugationFailedError
from conjugator.forms import create_form


class GodanGrade(StrEnum):
    """Stem grades of a godan verb."""

    A = "a"    # 未然形 (ない, れる, せる)
    I = "i"    # 連用形 (ます, たい)
    U = "u"    # 終止形 (dictionary)
    E = "e"    # 仮定形/命令形 (ば, potential)
    O = "o"    # 意志形 (う)
    TE = "te"  # て形
    TA = "ta"  # た形


def _is_iku_verb(verb: VerbInfo) -> bool:
    return verb.dictionary_form in IKU_VERBS or verb.irregular_type == IrregularType.IKU


def get_godan_stem(verb: VerbInfo, grade: GodanGrade) -> str:
    """Get the stem of a godan verb at the given grade.

    Args:
        verb: Classified godan verb
        grade: Vowel row (or te/ta euphonic form) to select

    Returns:
        Stem with the grade's kana attached; the dictionary form for U

    Raises:
        ConjugationFailedError: The verb's ending is not a godan ending

    Examples:
        >>> get_godan_stem(classify_verb("書く"), GodanGrade.I)
        '書き'
    """
    ending = GODAN_ENDINGS.get(verb.ending)
    if ending is None:
        raise ConjugationFailedError(f"Unknown godan ending: {verb.ending}")

    if grade == GodanGrade.U:
        return verb.dictionary_form
    return verb.stem + getattr(ending, grade.value)


def get_godan_te_form(verb: VerbInfo) -> str:
    """Get the te-form, applying the 行く exception (行って)."""
    if _is_iku_verb(verb):
        return verb.stem + "って"
    return get_godan_stem(verb, GodanGrade.TE)


def get_godan_ta_form(verb: VerbInfo) -> str:
    """Get the ta-form, applying the 行く exception (行った)."""
    if _is_iku_verb(verb):
        return verb.stem + "った"
    return get_godan_stem(verb, GodanGrade.TA)


def conjugate_godan(verb: VerbInfo) -> list[ConjugationForm]:
    """Conjugate a godan verb to all standard forms.

    Args:
        verb: Classified verb with type ``godan``

    Returns:
        The 34 forms in catalogue order

    Raises:
        ConjugationFailedError: Verb is not godan or has an unknown ending
    """
    if verb.type != VerbType.GODAN:
        raise ConjugationFailedError("conjugate_godan called with non-godan verb")

    dictionary = verb.dictionary_form
    a = get_godan_stem(verb, GodanGrade.A)
    i = get_godan_stem(verb, GodanGrade.I)
    e = get_godan_stem(verb, GodanGrade.E)
    o = get_godan_stem(verb, GodanGrade.O)
    te = get_godan_te_form(verb)
    ta = get_godan_ta_form(verb)

    return [
        create_form(form_id, text)
        for form_id, text in (
            ("dictionary", dictionary),
            ("te", te),
            ("masu", i + "ます"),
            ("masen", i + "ません"),
            ("mashita", i + "ました"),
            ("masen-deshita", i + "ませんでした"),
            ("nai", a + "ない"),
            ("nakatta", a + "なかった"),
            ("ta", ta),
            ("volitional-plain", o + "う"),
            ("volitional-polite", i + "ましょう"),
            ("potential-plain", e + "る"),
            ("potential-polite", e + "ます"),
            ("potential-negative", e + "ない"),
            ("passive-plain", a + "れる"),
            ("passive-polite", a + "れます"),
            ("causative-plain", a + "せる"),
            ("causative-polite", a + "せます"),
            ("causative-passive-plain", a + "せられる"),
            ("causative-passive-polite", a + "せられます"),
            ("imperative-plain", e),
            ("imperative-polite", te + "ください"),
            ("imperative-negative", dictionary + "な"),
            ("conditional-ba", e + "ば"),
            ("conditional-tara", ta + "ら"),
            ("conditional-nara", dictionary + "なら"),
            ("tai", i + "たい"),
            ("takunai", i + "たくない"),
            ("takatta", i + "たかった"),
            ("takunakatta", i + "たくなかった"),
            ("progressive-present", te + "いる"),
            ("progressive-past", te + "いた"),
            ("honorific-respectful", "お" + i + "になる"),
            ("honorific-humble", "お" + i + "する"),
        )
    ]
