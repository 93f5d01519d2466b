"""
Domain Service: String Metrics

Similarity measures over two transcripts that are sensitive to the kind of
errors speech recognition makes: partial matches (Jaro-Winkler), edit
distance (Levenshtein) and Korean phonetic confusions.

Every measure returns 0 for empty or non-string input and 1 for identical
strings without computing anything.
"""

from typing import Dict, Optional

from ....debug_utils import debug_stt_analysis
from ..entities import STTSimilarityResult, STTWeights, round_metric
from .phonetic_model import korean_phonetic_similarity


def _degenerate(s1, s2) -> bool:
    return not s1 or not s2 or not isinstance(s1, str) or not isinstance(s2, str)


def jaro_winkler_similarity(s1: str, s2: str) -> float:
    """
    Jaro-Winkler similarity.

    Match window is floor(max(len1, len2) / 2) - 1; a negative window
    scores 0. The Winkler boost adds 0.1 · prefix · (1 - jaro) for a common
    prefix of up to 4 characters.
    """
    if _degenerate(s1, s2):
        return 0.0
    if s1 == s2:
        return 1.0

    len1 = len(s1)
    len2 = len(s2)
    match_window = max(len1, len2) // 2 - 1
    if match_window < 0:
        return 0.0

    s1_matches = [False] * len1
    s2_matches = [False] * len2
    matches = 0

    for i in range(len1):
        start = max(0, i - match_window)
        end = min(i + match_window + 1, len2)
        for j in range(start, end):
            if s2_matches[j] or s1[i] != s2[j]:
                continue
            s1_matches[i] = True
            s2_matches[j] = True
            matches += 1
            break

    if matches == 0:
        return 0.0

    transpositions = 0
    k = 0
    for i in range(len1):
        if not s1_matches[i]:
            continue
        while not s2_matches[k]:
            k += 1
        if s1[i] != s2[k]:
            transpositions += 1
        k += 1

    jaro = (matches / len1 + matches / len2 + (matches - transpositions / 2) / matches) / 3

    prefix = 0
    for c1, c2 in zip(s1[:4], s2[:4]):
        if c1 != c2:
            break
        prefix += 1

    return round_metric(jaro + 0.1 * prefix * (1 - jaro))


def levenshtein_distance(s1: str, s2: str) -> int:
    """Edit distance with unit costs, using a single DP row over the shorter string."""
    if len(s1) < len(s2):
        s1, s2 = s2, s1
    if not s2:
        return len(s1)

    previous = list(range(len(s2) + 1))
    for i, c1 in enumerate(s1, start=1):
        current = [i] + [0] * len(s2)
        for j, c2 in enumerate(s2, start=1):
            cost = 0 if c1 == c2 else 1
            current[j] = min(
                current[j - 1] + 1,       # insertion
                previous[j] + 1,          # deletion
                previous[j - 1] + cost,   # substitution
            )
        previous = current
    return previous[-1]


def levenshtein_similarity(s1: str, s2: str) -> float:
    """1 - distance / max(len1, len2)."""
    if _degenerate(s1, s2):
        return 0.0
    if s1 == s2:
        return 1.0

    distance = levenshtein_distance(s1, s2)
    return round_metric(1 - distance / max(len(s1), len(s2)))


def calculate_stt_similarity(
    s1: str,
    s2: str,
    weights: Optional[Dict[str, float]] = None,
    base_weights: Optional[STTWeights] = None,
) -> STTSimilarityResult:
    """
    Composite STT similarity: weighted sum of Jaro-Winkler, Levenshtein and
    phonetic similarity.

    Args:
        s1: Expected text
        s2: Candidate text
        weights: Per-call overrides keyed by jaro_winkler/levenshtein/phonetic
        base_weights: Defaults the overrides apply on top of

    Returns:
        STTSimilarityResult with the fused score and each metric
    """
    final_weights = (base_weights or STTWeights()).merged(weights)

    jaro_winkler = jaro_winkler_similarity(s1, s2)
    levenshtein = levenshtein_similarity(s1, s2)
    phonetic = korean_phonetic_similarity(s1, s2)

    weighted = (
        final_weights.jaro_winkler * jaro_winkler
        + final_weights.levenshtein * levenshtein
        + final_weights.phonetic * phonetic
    )

    return STTSimilarityResult(
        jaro_winkler=jaro_winkler,
        levenshtein=levenshtein,
        phonetic=phonetic,
        weighted=round_metric(weighted),
    )


def analyze_stt_similarity(s1: str, s2: str) -> STTSimilarityResult:
    """Composite STT similarity with a verbose breakdown dump (DEBUG_VERBOSE)."""
    result = calculate_stt_similarity(s1, s2)
    debug_stt_analysis(s1, s2, {
        "Jaro-Winkler": result.jaro_winkler,
        "Levenshtein": result.levenshtein,
        "Phonetic": result.phonetic,
        "Weighted": result.weighted,
    })
    return result
