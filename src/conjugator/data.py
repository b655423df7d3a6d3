"""Static verb classification data.

- Irregular verb table (する, 来る, ある, 行く and the honorific verbs)
- Compound suffixes for する/来る compounds
- Godan ending → vowel-row and euphonic (音便) table
- Ichidan detection: preceding syllables and the two disambiguation lists

All tables are read-only after import.
"""

from dataclasses import dataclass
from types import MappingProxyType

from models import IrregularType


# ============================================================================
# Irregular Verbs
# ============================================================================

IRREGULAR_VERBS = MappingProxyType({
    "する": IrregularType.SURU,
    "来る": IrregularType.KURU,
    "くる": IrregularType.KURU,
    "ある": IrregularType.ARU,
    "行く": IrregularType.IKU,
    "いく": IrregularType.IKU,
    "くださる": IrregularType.HONORIFIC,
    "なさる": IrregularType.HONORIFIC,
    "いらっしゃる": IrregularType.HONORIFIC,
    "おっしゃる": IrregularType.HONORIFIC,
    "ござる": IrregularType.HONORIFIC,
})

HONORIFIC_VERBS = frozenset(
    verb for verb, kind in IRREGULAR_VERBS.items() if kind == IrregularType.HONORIFIC
)

# Spellings of 行く, the only godan verb with a te/ta exception
IKU_VERBS = frozenset({"行く", "いく"})

SURU_COMPOUND_SUFFIXES = ("する",)
KURU_COMPOUND_SUFFIXES = ("くる", "来る")


# ============================================================================
# Godan Endings
# ============================================================================


@dataclass(frozen=True, slots=True)
class GodanEnding:
    """Vowel rows and euphonic forms for one godan ending."""

    a: str   # あ段 (negative base)
    i: str   # い段 (masu base)
    u: str   # う段 (dictionary ending)
    e: str   # え段 (potential/imperative base)
    o: str   # お段 (volitional base)
    te: str  # て形 ending
    ta: str  # た形 ending


GODAN_ENDINGS = MappingProxyType({
    "う": GodanEnding("わ", "い", "う", "え", "お", "って", "った"),
    "く": GodanEnding("か", "き", "く", "け", "こ", "いて", "いた"),
    "ぐ": GodanEnding("が", "ぎ", "ぐ", "げ", "ご", "いで", "いだ"),
    "す": GodanEnding("さ", "し", "す", "せ", "そ", "して", "した"),
    "つ": GodanEnding("た", "ち", "つ", "て", "と", "って", "った"),
    "ぬ": GodanEnding("な", "に", "ぬ", "ね", "の", "んで", "んだ"),
    "ぶ": GodanEnding("ば", "び", "ぶ", "べ", "ぼ", "んで", "んだ"),
    "む": GodanEnding("ま", "み", "む", "め", "も", "んで", "んだ"),
    "る": GodanEnding("ら", "り", "る", "れ", "ろ", "って", "った"),
})

GODAN_ENDING_CHARS = tuple(GODAN_ENDINGS)


# ============================================================================
# Ichidan Detection
# ============================================================================

ICHIDAN_ENDING = "る"

# い段 and え段 syllables that can precede る in an ichidan verb
ICHIDAN_PRECEDING_CHARS = frozenset(
    "いきしちにひみりぎじぢびぴ"  # -iru
    "えけせてねへめれげぜでべぺ"  # -eru
)

# Godan verbs that look like ichidan (non-exhaustive)
FALSE_ICHIDAN_VERBS = frozenset({
    # -iru
    "要る", "いる",
    "入る", "はいる",
    "走る", "はしる",
    "知る", "しる",
    "切る", "きる",
    "帰る", "かえる",
    "限る", "かぎる",
    "握る", "にぎる",
    "参る", "まいる",
    "散る", "ちる",
    "混じる", "まじる",
    "嘲る",
    "滑る", "すべる",
    "蹴る", "ける",
    "照る", "てる",
    "練る", "ねる",
    "減る", "へる",
    # -eru
    "焦る", "あせる",
    "喋る", "しゃべる",
})

# Common verbs that are definitely ichidan
KNOWN_ICHIDAN_VERBS = frozenset({
    # -iru
    "見る", "みる",
    "着る",
    "起きる", "おきる",
    "降りる", "おりる",
    "借りる", "かりる",
    "居る",
    "信じる", "しんじる",
    "感じる", "かんじる",
    "落ちる", "おちる",
    "過ぎる", "すぎる",
    "生きる", "いきる",
    "浴びる", "あびる",
    # -eru
    "食べる", "たべる",
    "寝る",
    "出る", "でる",
    "開ける", "あける",
    "閉める", "しめる",
    "教える", "おしえる",
    "覚える", "おぼえる",
    "答える", "こたえる",
    "考える", "かんがえる",
    "変える",
    "始める", "はじめる",
    "止める", "とめる",
    "集める", "あつめる",
    "調べる", "しらべる",
    "比べる", "くらべる",
})
