"""Tests for kana ↔ romaji conversion."""

import pytest

from conjugator.romaji import (
    hiragana_to_romaji,
    katakana_to_romaji,
    romaji_to_hiragana,
    romaji_to_katakana,
    to_romaji,
)


class TestHiraganaToRomaji:
    """Hiragana → romaji, including digraphs and gemination."""

    @pytest.mark.parametrize("hiragana,expected", [
        ("たべる", "taberu"),
        ("しゃしん", "shashin"),
        ("きょう", "kyou"),
        ("きって", "kitte"),
        ("がっこう", "gakkou"),
        ("ちょっと", "chotto"),
        ("つくる", "tsukuru"),
        ("ほんを", "honwo"),
        ("じゃあ", "jaa"),
    ])
    def test_words(self, hiragana, expected):
        assert hiragana_to_romaji(hiragana) == expected

    def test_kanji_passes_through(self):
        assert hiragana_to_romaji("書きます") == "書kimasu"

    def test_ascii_and_punctuation_pass_through(self):
        assert hiragana_to_romaji("あ1、b") == "a1、b"

    def test_empty_string(self):
        assert hiragana_to_romaji("") == ""

    def test_trailing_small_tsu(self):
        # Nothing follows, so nothing to double
        assert hiragana_to_romaji("あっ") == "a"


class TestKatakanaToRomaji:
    """Katakana is folded to hiragana before conversion."""

    @pytest.mark.parametrize("katakana,expected", [
        ("カタカナ", "katakana"),
        ("コーヒー", "koohii"),
        ("ティー", "tii"),
        ("ファン", "fan"),
        ("サボって", "sabotte"),
    ])
    def test_words(self, katakana, expected):
        assert katakana_to_romaji(katakana) == expected

    def test_long_vowel_without_vowel(self):
        assert katakana_to_romaji("ー") == ""


class TestToRomaji:
    """Mixed-script conversion."""

    def test_mixed_scripts(self):
        assert to_romaji("コーヒーをのむ") == "koohiiwonomu"

    def test_kanji_only(self):
        assert to_romaji("漢字") == "漢字"


class TestRomajiToKana:
    """Romaji → hiragana/katakana."""

    @pytest.mark.parametrize("romaji,expected", [
        ("taberu", "たべる"),
        ("shashin", "しゃしん"),
        ("gakkou", "がっこう"),
        ("kitte", "きって"),
        ("konnichiwa", "こんにちわ"),
        ("konnyaku", "こんにゃく"),
        ("kanji", "かんじ"),
        ("hon", "ほん"),
        ("tsukuru", "つくる"),
        ("wo", "を"),
    ])
    def test_words(self, romaji, expected):
        assert romaji_to_hiragana(romaji) == expected

    def test_case_insensitive(self):
        assert romaji_to_hiragana("TaBeRu") == "たべる"

    def test_unmatched_characters_kept(self):
        assert romaji_to_hiragana("ta1") == "た1"

    @pytest.mark.parametrize("romaji,expected", [("a", "あ"), ("ki", "き"), ("tsu", "つ"), ("kyo", "きょ")])
    def test_syllable_at_end_of_input(self, romaji, expected):
        assert romaji_to_hiragana(romaji) == expected

    def test_empty_string(self):
        assert romaji_to_hiragana("") == ""

    def test_katakana(self):
        assert romaji_to_katakana("kamera") == "カメラ"

    def test_round_trip_plain_words(self):
        for word in ("たべる", "のむ", "はなす", "およぐ", "しんぶん"):
            assert romaji_to_hiragana(hiragana_to_romaji(word)) == word
