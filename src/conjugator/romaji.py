"""Conversion between kana and romaji (Hepburn-style).

Katakana is folded to hiragana with jaconv before lookup, so a single set of
tables serves both scripts. Kanji and any other character pass through
unchanged.
"""

from types import MappingProxyType

import jaconv


# ============================================================================
# Tables
# ============================================================================

HIRAGANA_TO_ROMAJI = MappingProxyType({
    # Vowels
    "あ": "a", "い": "i", "う": "u", "え": "e", "お": "o",
    # K-row
    "か": "ka", "き": "ki", "く": "ku", "け": "ke", "こ": "ko",
    # S-row
    "さ": "sa", "し": "shi", "す": "su", "せ": "se", "そ": "so",
    # T-row
    "た": "ta", "ち": "chi", "つ": "tsu", "て": "te", "と": "to",
    # N-row
    "な": "na", "に": "ni", "ぬ": "nu", "ね": "ne", "の": "no",
    # H-row
    "は": "ha", "ひ": "hi", "ふ": "fu", "へ": "he", "ほ": "ho",
    # M-row
    "ま": "ma", "み": "mi", "む": "mu", "め": "me", "も": "mo",
    # Y-row
    "や": "ya", "ゆ": "yu", "よ": "yo",
    # R-row
    "ら": "ra", "り": "ri", "る": "ru", "れ": "re", "ろ": "ro",
    # W-row
    "わ": "wa", "ゐ": "i", "ゑ": "e", "を": "wo",
    "ん": "n",
    # Dakuten
    "が": "ga", "ぎ": "gi", "ぐ": "gu", "げ": "ge", "ご": "go",
    "ざ": "za", "じ": "ji", "ず": "zu", "ぜ": "ze", "ぞ": "zo",
    "だ": "da", "ぢ": "ji", "づ": "zu", "で": "de", "ど": "do",
    "ば": "ba", "び": "bi", "ぶ": "bu", "べ": "be", "ぼ": "bo",
    "ゔ": "vu",
    # Handakuten
    "ぱ": "pa", "ぴ": "pi", "ぷ": "pu", "ぺ": "pe", "ぽ": "po",
    # Small kana
    "ゃ": "ya", "ゅ": "yu", "ょ": "yo", "ゎ": "wa",
    "ぁ": "a", "ぃ": "i", "ぅ": "u", "ぇ": "e", "ぉ": "o",
    "っ": "",
})

HIRAGANA_COMBINATIONS = MappingProxyType({
    "きゃ": "kya", "きゅ": "kyu", "きょ": "kyo",
    "しゃ": "sha", "しゅ": "shu", "しょ": "sho", "しぇ": "she",
    "ちゃ": "cha", "ちゅ": "chu", "ちょ": "cho", "ちぇ": "che",
    "にゃ": "nya", "にゅ": "nyu", "にょ": "nyo",
    "ひゃ": "hya", "ひゅ": "hyu", "ひょ": "hyo",
    "みゃ": "mya", "みゅ": "myu", "みょ": "myo",
    "りゃ": "rya", "りゅ": "ryu", "りょ": "ryo",
    "ぎゃ": "gya", "ぎゅ": "gyu", "ぎょ": "gyo",
    "じゃ": "ja", "じゅ": "ju", "じょ": "jo", "じぇ": "je",
    "びゃ": "bya", "びゅ": "byu", "びょ": "byo",
    "ぴゃ": "pya", "ぴゅ": "pyu", "ぴょ": "pyo",
    # Loanword digraphs (mostly written in katakana)
    "てぃ": "ti", "でぃ": "di", "とぅ": "tu", "どぅ": "du",
    "ふぁ": "fa", "ふぃ": "fi", "ふぇ": "fe", "ふぉ": "fo",
    "うぃ": "wi", "うぇ": "we", "うぉ": "wo",
    "ゔぁ": "va", "ゔぃ": "vi", "ゔぇ": "ve", "ゔぉ": "vo",
})

SMALL_TSU = "っ"
LONG_VOWEL_MARK = "ー"
VOWELS = "aeiou"

# Consonants that may be doubled to spell っ in romaji input
_GEMINATE_CONSONANTS = frozenset("kstcfhmyrwgzdbpjv")


def _build_reverse_map() -> dict[str, str]:
    # First spelling wins: "ji" → じ (not ぢ), "a" → あ (not ぁ)
    reverse: dict[str, str] = {}
    for kana, rom in HIRAGANA_TO_ROMAJI.items():
        if rom:
            reverse.setdefault(rom, kana)
    for kana, rom in HIRAGANA_COMBINATIONS.items():
        reverse.setdefault(rom, kana)
    return reverse


ROMAJI_TO_HIRAGANA = MappingProxyType(_build_reverse_map())


# ============================================================================
# Kana → Romaji
# ============================================================================


def _last_vowel(romaji: str) -> str:
    for ch in reversed(romaji):
        if ch in VOWELS:
            return ch
    return ""


def hiragana_to_romaji(hiragana: str) -> str:
    """Convert hiragana to romaji, leaving other characters untouched.

    Digraphs (きゃ) are matched before single kana; っ doubles the first
    consonant of the following syllable and ー repeats the last vowel.

    Examples:
        >>> hiragana_to_romaji("きって")
        'kitte'
        >>> hiragana_to_romaji("書きます")
        '書kimasu'
    """
    out: list[str] = []
    i = 0
    n = len(hiragana)

    while i < n:
        ch = hiragana[i]

        if ch == SMALL_TSU and i + 1 < n:
            combo = HIRAGANA_COMBINATIONS.get(hiragana[i + 1:i + 3])
            following = combo or HIRAGANA_TO_ROMAJI.get(hiragana[i + 1], "")
            if following:
                out.append(following[0])
            i += 1
            continue

        if ch == LONG_VOWEL_MARK:
            out.append(_last_vowel("".join(out)))
            i += 1
            continue

        combo = HIRAGANA_COMBINATIONS.get(hiragana[i:i + 2])
        if combo is not None:
            out.append(combo)
            i += 2
            continue

        out.append(HIRAGANA_TO_ROMAJI.get(ch, ch))
        i += 1

    return "".join(out)


def katakana_to_romaji(katakana: str) -> str:
    """Convert katakana (including ー and loanword digraphs) to romaji."""
    return hiragana_to_romaji(jaconv.kata2hira(katakana))


def to_romaji(text: str) -> str:
    """Convert any mix of hiragana, katakana and other text to romaji.

    Examples:
        >>> to_romaji("コーヒーをのむ")
        'koohiiwonomu'
    """
    return hiragana_to_romaji(jaconv.kata2hira(text))


# ============================================================================
# Romaji → Kana
# ============================================================================


def romaji_to_hiragana(romaji: str) -> str:
    """Convert romaji to hiragana (case-insensitive).

    Longest match first (up to 4 letters). A doubled consonant becomes っ
    and "nn" becomes ん. Unmatched characters are kept as they are.

    Examples:
        >>> romaji_to_hiragana("konnichiwa")
        'こんにちわ'
        >>> romaji_to_hiragana("Kitte")
        'きって'
    """
    lower = romaji.lower()
    out: list[str] = []
    i = 0
    n = len(lower)

    while i < n:
        if lower.startswith("nn", i):
            out.append("ん")
            # "konnichiwa": the second n opens the next syllable
            next_char = lower[i + 2:i + 3]
            i += 1 if next_char and next_char in VOWELS + "y" else 2
            continue

        if i + 1 < n and lower[i] == lower[i + 1] and lower[i] in _GEMINATE_CONSONANTS:
            out.append(SMALL_TSU)
            i += 1
            continue

        for length in range(4, 0, -1):
            kana = ROMAJI_TO_HIRAGANA.get(lower[i:i + length])
            if kana is not None:
                out.append(kana)
                i += length
                break
        else:
            out.append(romaji[i])
            i += 1

    return "".join(out)


def romaji_to_katakana(romaji: str) -> str:
    """Convert romaji to katakana."""
    return jaconv.hira2kata(romaji_to_hiragana(romaji))
