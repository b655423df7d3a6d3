"""する/来る compound verbs (勉強する, 持ってくる).

Compounds are classified as irregular with ``compound_prefix`` set, so the
forms come from the する/来る tables in ``irregular``. The prefix must
survive in every form.
"""

from collections.abc import Iterable

from models import ConjugationForm, IrregularType, VerbInfo, VerbType
from conjugator.classify import classify_verb, detect_kuru_compound, detect_suru_compound
from conjugator.errors import ConjugationFailedError
from conjugator.irregular import conjugate_irregular

COMMON_SURU_COMPOUNDS = (
    "勉強する",    # to study
    "運動する",    # to exercise
    "料理する",    # to cook
    "掃除する",    # to clean
    "洗濯する",    # to do laundry
    "買い物する",  # to shop
    "散歩する",    # to take a walk
    "旅行する",    # to travel
    "結婚する",    # to marry
    "卒業する",    # to graduate
    "入学する",    # to enter school
    "出発する",    # to depart
    "到着する",    # to arrive
    "説明する",    # to explain
    "質問する",    # to ask a question
    "回答する",    # to answer
    "練習する",    # to practice
    "準備する",    # to prepare
    "心配する",    # to worry
    "安心する",    # to feel relieved
)

COMMON_KURU_COMPOUNDS = (
    "持ってくる",  # to bring
    "帰ってくる",  # to come back
    "戻ってくる",  # to return
    "連れてくる",  # to bring (a person)
    "送ってくる",  # to send (and it arrives)
    "飛んでくる",  # to come flying
    "走ってくる",  # to come running
    "歩いてくる",  # to come walking
)


def is_suru_compound(verb: str) -> bool:
    """Check if a verb is a する-compound (not bare する)."""
    return detect_suru_compound(verb) is not None


def is_kuru_compound(verb: str) -> bool:
    """Check if a verb is a 来る-compound (not bare 来る/くる)."""
    return detect_kuru_compound(verb) is not None


def get_suru_compound_prefix(verb: str) -> str:
    """Get the prefix of a する-compound.

    Raises:
        ValueError: The verb is not a する-compound
    """
    prefix = detect_suru_compound(verb)
    if prefix is None:
        raise ValueError(f"Not a する-compound verb: {verb}")
    return prefix


def get_kuru_compound_prefix(verb: str) -> str:
    """Get the prefix of a 来る-compound.

    Raises:
        ValueError: The verb is not a 来る-compound
    """
    prefix = detect_kuru_compound(verb)
    if prefix is None:
        raise ValueError(f"Not a 来る-compound verb: {verb}")
    return prefix


def conjugate_compound(verb: VerbInfo) -> list[ConjugationForm]:
    """Conjugate a classified compound verb.

    Raises:
        ConjugationFailedError: The verb is not an irregular compound
    """
    if verb.type != VerbType.IRREGULAR or verb.irregular_type not in (
        IrregularType.SURU, IrregularType.KURU,
    ):
        raise ConjugationFailedError("conjugate_compound called with non-compound verb")
    if not verb.compound_prefix:
        raise ConjugationFailedError("Verb does not have a compound prefix")

    return conjugate_irregular(verb)


def conjugate_compound_verb(verb: str) -> list[ConjugationForm]:
    """Classify and conjugate a compound verb given as text (勉強する)."""
    return conjugate_compound(classify_verb(verb))


def verify_prefix_preservation(forms: Iterable[ConjugationForm], prefix: str) -> bool:
    """Check that every form keeps the compound prefix.

    Honorific forms put お in front of the prefix (お勉強しになる), so the
    prefix only needs to appear somewhere in the reading.
    """
    return all(prefix in form.hiragana for form in forms)
