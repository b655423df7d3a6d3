"""Irregular verb conjugation.

Irregular verbs resist the productive rules, so each subtype keeps its own
table of all 34 forms. Templates use ``{p}`` for the compound prefix (する,
来る) or the stem (honorific verbs). 来る and 行く keep two spellings per
form since the reading of the kanji shifts between forms (来る くる, 来ない
こない, 来ます きます).
"""

from types import MappingProxyType

from models import ConjugationForm, IrregularType, VerbInfo, VerbType
from conjugator.data import HONORIFIC_VERBS
from conjugator.errors import ConjugationFailedError
from conjugator.forms import FORM_IDS, create_form


# ============================================================================
# Form Tables
# ============================================================================

# する: します uses し, the potential is a different verb (できる)
SURU_FORMS = MappingProxyType({
    "dictionary": "{p}する",
    "te": "{p}して",
    "masu": "{p}します",
    "masen": "{p}しません",
    "mashita": "{p}しました",
    "masen-deshita": "{p}しませんでした",
    "nai": "{p}しない",
    "nakatta": "{p}しなかった",
    "ta": "{p}した",
    "volitional-plain": "{p}しよう",
    "volitional-polite": "{p}しましょう",
    "potential-plain": "{p}できる",
    "potential-polite": "{p}できます",
    "potential-negative": "{p}できない",
    "passive-plain": "{p}される",
    "passive-polite": "{p}されます",
    "causative-plain": "{p}させる",
    "causative-polite": "{p}させます",
    "causative-passive-plain": "{p}させられる",
    "causative-passive-polite": "{p}させられます",
    "imperative-plain": "{p}しろ",
    "imperative-polite": "{p}してください",
    "imperative-negative": "{p}するな",
    "conditional-ba": "{p}すれば",
    "conditional-tara": "{p}したら",
    "conditional-nara": "{p}するなら",
    "tai": "{p}したい",
    "takunai": "{p}したくない",
    "takatta": "{p}したかった",
    "takunakatta": "{p}したくなかった",
    "progressive-present": "{p}している",
    "progressive-past": "{p}していた",
    "honorific-respectful": "お{p}しになる",
    "honorific-humble": "お{p}しする",
})

# 来る: (reading, kanji spelling)
KURU_FORMS = MappingProxyType({
    "dictionary": ("{p}くる", "{p}来る"),
    "te": ("{p}きて", "{p}来て"),
    "masu": ("{p}きます", "{p}来ます"),
    "masen": ("{p}きません", "{p}来ません"),
    "mashita": ("{p}きました", "{p}来ました"),
    "masen-deshita": ("{p}きませんでした", "{p}来ませんでした"),
    "nai": ("{p}こない", "{p}来ない"),
    "nakatta": ("{p}こなかった", "{p}来なかった"),
    "ta": ("{p}きた", "{p}来た"),
    "volitional-plain": ("{p}こよう", "{p}来よう"),
    "volitional-polite": ("{p}きましょう", "{p}来ましょう"),
    "potential-plain": ("{p}こられる", "{p}来られる"),
    "potential-polite": ("{p}こられます", "{p}来られます"),
    "potential-negative": ("{p}こられない", "{p}来られない"),
    "passive-plain": ("{p}こられる", "{p}来られる"),
    "passive-polite": ("{p}こられます", "{p}来られます"),
    "causative-plain": ("{p}こさせる", "{p}来させる"),
    "causative-polite": ("{p}こさせます", "{p}来させます"),
    "causative-passive-plain": ("{p}こさせられる", "{p}来させられる"),
    "causative-passive-polite": ("{p}こさせられます", "{p}来させられます"),
    "imperative-plain": ("{p}こい", "{p}来い"),
    "imperative-polite": ("{p}きてください", "{p}来てください"),
    "imperative-negative": ("{p}くるな", "{p}来るな"),
    "conditional-ba": ("{p}くれば", "{p}来れば"),
    "conditional-tara": ("{p}きたら", "{p}来たら"),
    "conditional-nara": ("{p}くるなら", "{p}来るなら"),
    "tai": ("{p}きたい", "{p}来たい"),
    "takunai": ("{p}きたくない", "{p}来たくない"),
    "takatta": ("{p}きたかった", "{p}来たかった"),
    "takunakatta": ("{p}きたくなかった", "{p}来たくなかった"),
    "progressive-present": ("{p}きている", "{p}来ている"),
    "progressive-past": ("{p}きていた", "{p}来ていた"),
    "honorific-respectful": ("お{p}きになる", "お{p}来になる"),
    "honorific-humble": ("お{p}きする", "お{p}来する"),
})

# ある: the negative is ない, not あらない
ARU_FORMS = MappingProxyType({
    "dictionary": "ある",
    "te": "あって",
    "masu": "あります",
    "masen": "ありません",
    "mashita": "ありました",
    "masen-deshita": "ありませんでした",
    "nai": "ない",
    "nakatta": "なかった",
    "ta": "あった",
    "volitional-plain": "あろう",
    "volitional-polite": "ありましょう",
    # No natural potential/passive; kept so every category has a form
    "potential-plain": "ありえる",
    "potential-polite": "ありえます",
    "potential-negative": "ありえない",
    "passive-plain": "あられる",
    "passive-polite": "あられます",
    "causative-plain": "あらせる",
    "causative-polite": "あらせます",
    "causative-passive-plain": "あらせられる",
    "causative-passive-polite": "あらせられます",
    "imperative-plain": "あれ",
    "imperative-polite": "あってください",
    "imperative-negative": "あるな",
    "conditional-ba": "あれば",
    "conditional-tara": "あったら",
    "conditional-nara": "あるなら",
    "tai": "ありたい",
    "takunai": "ありたくない",
    "takatta": "ありたかった",
    "takunakatta": "ありたくなかった",
    "progressive-present": "あっている",
    "progressive-past": "あっていた",
    "honorific-respectful": "おありになる",
    "honorific-humble": "おありする",
})

# 行く: regular く-row except te/ta (行って, 行った)
IKU_FORMS = MappingProxyType({
    "dictionary": ("いく", "行く"),
    "te": ("いって", "行って"),
    "masu": ("いきます", "行きます"),
    "masen": ("いきません", "行きません"),
    "mashita": ("いきました", "行きました"),
    "masen-deshita": ("いきませんでした", "行きませんでした"),
    "nai": ("いかない", "行かない"),
    "nakatta": ("いかなかった", "行かなかった"),
    "ta": ("いった", "行った"),
    "volitional-plain": ("いこう", "行こう"),
    "volitional-polite": ("いきましょう", "行きましょう"),
    "potential-plain": ("いける", "行ける"),
    "potential-polite": ("いけます", "行けます"),
    "potential-negative": ("いけない", "行けない"),
    "passive-plain": ("いかれる", "行かれる"),
    "passive-polite": ("いかれます", "行かれます"),
    "causative-plain": ("いかせる", "行かせる"),
    "causative-polite": ("いかせます", "行かせます"),
    "causative-passive-plain": ("いかせられる", "行かせられる"),
    "causative-passive-polite": ("いかせられます", "行かせられます"),
    "imperative-plain": ("いけ", "行け"),
    "imperative-polite": ("いってください", "行ってください"),
    "imperative-negative": ("いくな", "行くな"),
    "conditional-ba": ("いけば", "行けば"),
    "conditional-tara": ("いったら", "行ったら"),
    "conditional-nara": ("いくなら", "行くなら"),
    "tai": ("いきたい", "行きたい"),
    "takunai": ("いきたくない", "行きたくない"),
    "takatta": ("いきたかった", "行きたかった"),
    "takunakatta": ("いきたくなかった", "行きたくなかった"),
    "progressive-present": ("いっている", "行っている"),
    "progressive-past": ("いっていた", "行っていた"),
    "honorific-respectful": ("おいきになる", "お行きになる"),
    "honorific-humble": ("おいきする", "お行きする"),
})

# くださる, なさる, いらっしゃる, おっしゃる, ござる: ます-forms take い
# (くださいます, not くださります); {p} is the stem (くださ)
HONORIFIC_FORMS = MappingProxyType({
    "dictionary": "{p}る",
    "te": "{p}って",
    "masu": "{p}います",
    "masen": "{p}いません",
    "mashita": "{p}いました",
    "masen-deshita": "{p}いませんでした",
    "nai": "{p}らない",
    "nakatta": "{p}らなかった",
    "ta": "{p}った",
    "volitional-plain": "{p}ろう",
    "volitional-polite": "{p}いましょう",
    "potential-plain": "{p}れる",
    "potential-polite": "{p}れます",
    "potential-negative": "{p}れない",
    "passive-plain": "{p}られる",
    "passive-polite": "{p}られます",
    "causative-plain": "{p}らせる",
    "causative-polite": "{p}らせます",
    "causative-passive-plain": "{p}らせられる",
    "causative-passive-polite": "{p}らせられます",
    "imperative-plain": "{p}い",
    "imperative-polite": "{p}ってください",
    "imperative-negative": "{p}るな",
    "conditional-ba": "{p}れば",
    "conditional-tara": "{p}ったら",
    "conditional-nara": "{p}るなら",
    "tai": "{p}いたい",
    "takunai": "{p}いたくない",
    "takatta": "{p}いたかった",
    "takunakatta": "{p}いたくなかった",
    "progressive-present": "{p}っている",
    "progressive-past": "{p}っていた",
    "honorific-respectful": "お{p}いになる",
    "honorific-humble": "お{p}いする",
})


# ============================================================================
# Form Builders
# ============================================================================


def _render(templates: MappingProxyType, p: str = "") -> list[ConjugationForm]:
    return [create_form(form_id, templates[form_id].format(p=p)) for form_id in FORM_IDS]


def _render_dual(templates: MappingProxyType, p: str = "") -> list[ConjugationForm]:
    forms = []
    for form_id in FORM_IDS:
        reading, kanji = templates[form_id]
        forms.append(create_form(form_id, kanji.format(p=p), reading.format(p=p)))
    return forms


def conjugate_irregular(verb: VerbInfo) -> list[ConjugationForm]:
    """Conjugate an irregular verb (including する/来る compounds).

    Args:
        verb: Classified verb with type ``irregular``

    Returns:
        The 34 forms in catalogue order; a compound prefix is kept in every
        form (勉強する → 勉強して, お勉強しになる)

    Raises:
        ConjugationFailedError: Verb is not irregular
    """
    if verb.type != VerbType.IRREGULAR:
        raise ConjugationFailedError("conjugate_irregular called with non-irregular verb")

    prefix = verb.compound_prefix or ""

    match verb.irregular_type:
        case IrregularType.SURU:
            return _render(SURU_FORMS, prefix)
        case IrregularType.KURU:
            return _render_dual(KURU_FORMS, prefix)
        case IrregularType.ARU:
            return _render(ARU_FORMS)
        case IrregularType.IKU:
            return _render_dual(IKU_FORMS)
        case IrregularType.HONORIFIC:
            return _render(HONORIFIC_FORMS, verb.stem)
        case _:
            raise ConjugationFailedError(f"Unknown irregular type: {verb.irregular_type}")


# ============================================================================
# Helpers
# ============================================================================


def get_aru_negative() -> str:
    """Negative of ある: ない, not あらない."""
    return ARU_FORMS["nai"]


def get_iku_te_form() -> str:
    """Te-form of 行く: 行って, not 行いて."""
    return IKU_FORMS["te"][1]


def get_honorific_masu_stem(stem: str) -> str:
    """Masu stem of an honorific verb (くださ → ください)."""
    return stem + "い"


def is_honorific_verb(verb: str) -> bool:
    """Check if a verb is one of the five honorific verbs."""
    return verb in HONORIFIC_VERBS
