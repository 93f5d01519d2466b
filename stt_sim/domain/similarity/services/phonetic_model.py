"""
Domain Service: Korean Phonetic Model

A static jamo confusion table and a position-wise scorer built on it.

The model compares characters at equal index only. A single inserted or
dropped syllable misaligns everything after it; that is a known limitation
of the positional model, not something this module tries to repair.
"""

from types import MappingProxyType
from typing import Mapping, FrozenSet, Optional, Tuple

from ..entities import round_metric

CONFUSION_SCORE = 0.8

# Jamo pairs a recognizer commonly confuses. Lookup is bidirectional.
PHONETIC_CONFUSIONS: Mapping[str, FrozenSet[str]] = MappingProxyType({
    # consonants
    'ㅍ': frozenset({'ㅋ', 'ㅂ'}),
    'ㅋ': frozenset({'ㅍ', 'ㄱ', 'ㅌ'}),
    'ㅌ': frozenset({'ㄷ', 'ㅊ', 'ㅋ'}),
    'ㅊ': frozenset({'ㅌ', 'ㅈ', 'ㅅ'}),
    'ㅂ': frozenset({'ㅍ', 'ㅁ'}),
    'ㄷ': frozenset({'ㅌ', 'ㄴ'}),
    'ㄱ': frozenset({'ㅋ'}),
    'ㅈ': frozenset({'ㅊ'}),
    'ㅅ': frozenset({'ㅊ'}),
    # vowels
    'ㅓ': frozenset({'ㅗ', 'ㅡ'}),
    'ㅔ': frozenset({'ㅐ', 'ㅖ'}),
    'ㅚ': frozenset({'ㅞ', 'ㅙ', 'ㅗ'}),
    'ㅐ': frozenset({'ㅔ', 'ㅙ'}),
    'ㅗ': frozenset({'ㅓ', 'ㅚ', 'ㅜ'}),
    'ㅜ': frozenset({'ㅡ', 'ㅗ'}),
    'ㅡ': frozenset({'ㅜ', 'ㅓ'}),
    'ㅣ': frozenset({'ㅔ'}),
})

_HANGUL_BASE = 0xAC00
_HANGUL_LAST = 0xD7A3
_CHOSEONG = "ㄱㄲㄴㄷㄸㄹㅁㅂㅃㅅㅆㅇㅈㅉㅊㅋㅌㅍㅎ"
_JUNGSEONG = "ㅏㅐㅑㅒㅓㅔㅕㅖㅗㅘㅙㅚㅛㅜㅝㅞㅟㅠㅡㅢㅣ"
_JONGSEONG = (
    "", "ㄱ", "ㄲ", "ㄳ", "ㄴ", "ㄵ", "ㄶ", "ㄷ", "ㄹ", "ㄺ", "ㄻ", "ㄼ", "ㄽ", "ㄾ",
    "ㄿ", "ㅀ", "ㅁ", "ㅂ", "ㅄ", "ㅅ", "ㅆ", "ㅇ", "ㅈ", "ㅊ", "ㅋ", "ㅌ", "ㅍ", "ㅎ",
)


def decompose_syllable(char: str) -> Optional[Tuple[str, str, str]]:
    """
    Split a precomposed Hangul syllable into (initial, medial, final) jamo.

    Returns None for anything that is not a single Hangul syllable.
    """
    if len(char) != 1:
        return None
    code = ord(char)
    if not _HANGUL_BASE <= code <= _HANGUL_LAST:
        return None
    offset = code - _HANGUL_BASE
    return (
        _CHOSEONG[offset // 588],
        _JUNGSEONG[(offset % 588) // 28],
        _JONGSEONG[offset % 28],
    )


def are_confusable(jamo1: str, jamo2: str) -> bool:
    return (
        jamo2 in PHONETIC_CONFUSIONS.get(jamo1, ())
        or jamo1 in PHONETIC_CONFUSIONS.get(jamo2, ())
    )


def phonetic_char_score(char1: str, char2: str) -> float:
    """
    Score one aligned character pair.

    1.0 if identical; 0.8 if the jamo are confusable, or if both are Hangul
    syllables whose differing components are all confusable pairs; else 0.
    """
    if char1 == char2:
        return 1.0
    if are_confusable(char1, char2):
        return CONFUSION_SCORE

    parts1 = decompose_syllable(char1)
    parts2 = decompose_syllable(char2)
    if parts1 is None or parts2 is None:
        return 0.0
    for jamo1, jamo2 in zip(parts1, parts2):
        if jamo1 != jamo2 and not are_confusable(jamo1, jamo2):
            return 0.0
    return CONFUSION_SCORE


def korean_phonetic_similarity(s1: str, s2: str) -> float:
    """
    Position-aligned phonetic similarity of two strings.

    Averages phonetic_char_score over the first min(len) positions, then
    scales by 1 - 0.5 · (length difference / longer length).
    Empty or non-string input scores 0; identical strings score 1.
    """
    if not s1 or not s2 or not isinstance(s1, str) or not isinstance(s2, str):
        return 0.0
    if s1 == s2:
        return 1.0

    max_len = max(len(s1), len(s2))
    min_len = min(len(s1), len(s2))

    total = sum(phonetic_char_score(c1, c2) for c1, c2 in zip(s1, s2))
    length_penalty = (max_len - min_len) / max_len
    similarity = (total / min_len) * (1 - length_penalty * 0.5)

    return round_metric(similarity)
