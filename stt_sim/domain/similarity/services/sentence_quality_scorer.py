"""
Domain Service: Sentence Quality Scorer

Sentence-specific composite score for one candidate utterance against one
expected sentence and a required keyword:

    final = min((0.4·keyword_weighted + 0.25·base + 0.2·stt_corrected
                 + 0.15·completeness) · length_penalty, 1.0)
"""

import re
from typing import List, Optional, Sequence

from ....debug_utils import debug_log
from ....models import ComponentType
from ..entities import (
    SentenceDiagnosis,
    SentenceQualityAnalysis,
    SentenceQualityComponents,
    SentenceQualityResult,
    SentenceWeights,
    QualityGrade,
)
from .error_pattern_corrector import ErrorPatternCorrector
from .string_metrics import calculate_stt_similarity, jaro_winkler_similarity
from .vector_metrics import (
    cosine_similarity,
    fast_cosine_similarity,
    is_unit_normalized,
)

SHORT_SENTENCE_CHARS = 10
SHORT_PENALTY = 0.5
LOW_RATIO = 0.3
KEYWORD_MATCH_THRESHOLD = 0.7
MISSING_KEYWORD_FACTOR = 0.3
CONTEXT_WINDOW = 3

COMPLETE_ENDINGS = ('습니다', '해요', '입니다', '드리겠습니다', '드릴게요', '됩니다')
POLITE_EXPRESSIONS = ('고객님', '부탁드립니다', '죄송합니다', '감사합니다', '안내', '도와드리겠습니다')

_SENTENCE_SPLIT = re.compile(r'[.!?]')
_TERMINAL_PUNCTUATION = re.compile(r'[.!?]')
_DIGIT = re.compile(r'[0-9]')


def _words(text: str) -> List[str]:
    return text.split()


class SentenceQualityScorer:
    """
    Domain service scoring sentence-level utterance quality.

    Stateless apart from its injected corrector and weights.
    """

    def __init__(
        self,
        corrector: Optional[ErrorPatternCorrector] = None,
        weights: Optional[SentenceWeights] = None,
    ):
        self.corrector = corrector or ErrorPatternCorrector()
        self.weights = weights or SentenceWeights()

    def length_penalty(self, expected_text: str, candidate_text: str) -> float:
        """
        Ratio of shorter to longer trimmed length, halved when the ratio is
        at most 0.3 and halved again for candidates under 10 characters.
        An empty candidate gets 0.
        """
        expected_len = len(expected_text.strip())
        candidate_len = len(candidate_text.strip())
        if candidate_len == 0:
            return 0.0

        length_ratio = min(candidate_len, expected_len) / max(candidate_len, expected_len)
        short_penalty = SHORT_PENALTY if candidate_len < SHORT_SENTENCE_CHARS else 1.0
        ratio_penalty = length_ratio if length_ratio > LOW_RATIO else length_ratio * 0.5

        return ratio_penalty * short_penalty

    def completeness_score(self, text: str, keyword: str) -> float:
        """
        Additive completeness points, capped at 1.0:

        - 0.2  polite/complete sentence ending
        - 0.15 at least 5 tokens, +0.1 more for at least 10
        - 0.25 keyword strictly inside the text
        - 0.1  terminal punctuation
        - 0.15 politeness marker
        - 0.05 any digit
        """
        if not text or not text.strip():
            return 0.0

        sentences = [s for s in _SENTENCE_SPLIT.split(text) if s.strip()]
        words = _words(text)
        score = 0.0

        if any(ending in sentence for sentence in sentences for ending in COMPLETE_ENDINGS):
            score += 0.2

        if len(words) >= 5:
            score += 0.15
        if len(words) >= 10:
            score += 0.1

        keyword_index = text.find(keyword) if keyword else -1
        if 0 < keyword_index < len(text) - len(keyword):
            score += 0.25

        if _TERMINAL_PUNCTUATION.search(text):
            score += 0.1

        if any(expression in text for expression in POLITE_EXPRESSIONS):
            score += 0.15

        if _DIGIT.search(text):
            score += 0.05

        return min(score, 1.0)

    @staticmethod
    def extract_keyword_context(text: str, keyword: str, window_size: int = CONTEXT_WINDOW) -> str:
        """Tokens within ±window_size of the first token containing the keyword."""
        words = _words(text)
        keyword_index = next((i for i, word in enumerate(words) if keyword in word), -1)
        if keyword_index == -1:
            return ''

        start = max(0, keyword_index - window_size)
        end = min(len(words), keyword_index + window_size + 1)
        return ' '.join(words[start:end])

    @staticmethod
    def context_similarity(context1: str, context2: str) -> float:
        """Jaccard similarity of the lower-cased token sets."""
        if not context1 or not context2:
            return 0.0

        words1 = set(context1.lower().split())
        words2 = set(context2.lower().split())
        union = words1 | words2
        if not union:
            return 0.0
        return len(words1 & words2) / len(union)

    def keyword_weighted_similarity(
        self,
        expected_text: str,
        candidate_text: str,
        keyword: str,
        base_similarity: float,
    ) -> float:
        """
        Base similarity reweighted around the keyword.

        Missing keyword with a Jaro-Winkler(keyword, candidate) score below
        0.7 keeps only 30% of the base similarity. Otherwise:
        min(0.6·base + 0.3·context_jaccard + 0.1·[keyword present], 1.0)
        """
        keyword_included = keyword.lower() in candidate_text.lower()

        if not keyword_included:
            closeness = jaro_winkler_similarity(keyword, candidate_text)
            if closeness < KEYWORD_MATCH_THRESHOLD:
                return base_similarity * MISSING_KEYWORD_FACTOR

        candidate_context = self.extract_keyword_context(candidate_text, keyword)
        expected_context = self.extract_keyword_context(expected_text, keyword)
        context = self.context_similarity(candidate_context, expected_context)
        keyword_bonus = 0.1 if keyword_included else 0.0

        return min(base_similarity * 0.6 + context * 0.3 + keyword_bonus, 1.0)

    def stt_corrected_similarity(self, expected_text: str, candidate_text: str) -> float:
        """
        Enhanced STT similarity, additionally probing every lexicon entry
        whose canonical form appears in the expected text.
        """
        best = self.corrector.enhanced_stt_similarity(expected_text, candidate_text).score
        penalty = self.corrector.penalties.sentence_substitution

        for _variant, _canonical, corrected in self.corrector.candidate_substitutions(
            expected_text, candidate_text
        ):
            corrected_score = calculate_stt_similarity(
                expected_text, corrected, base_weights=self.corrector.stt_weights
            ).weighted
            best = max(best, corrected_score * penalty)

        return best

    @staticmethod
    def base_similarity(expected_embedding: Sequence[float], candidate_embedding: Sequence[float]) -> float:
        """Embedding cosine; dot product only when both vectors are unit length."""
        if is_unit_normalized(expected_embedding) and is_unit_normalized(candidate_embedding):
            return max(-1.0, min(1.0, fast_cosine_similarity(expected_embedding, candidate_embedding)))
        return cosine_similarity(expected_embedding, candidate_embedding)

    def score(
        self,
        expected_embedding: Sequence[float],
        candidate_embedding: Sequence[float],
        expected_text: str,
        candidate_text: str,
        keyword: Optional[str] = None,
    ) -> SentenceQualityResult:
        """
        Score one candidate sentence.

        Args:
            expected_embedding: Embedding of the expected sentence
            candidate_embedding: Embedding of the candidate sentence
            expected_text: Expected sentence
            candidate_text: Candidate (recognized) sentence
            keyword: Required keyword ('' when absent)

        Returns:
            SentenceQualityResult with final score, components and text statistics

        Raises:
            DimensionMismatch: If the embeddings differ in length
        """
        expected_text = expected_text if isinstance(expected_text, str) else ''
        candidate_text = candidate_text if isinstance(candidate_text, str) else ''
        keyword = keyword if isinstance(keyword, str) else ''

        base = self.base_similarity(expected_embedding, candidate_embedding)
        length_penalty = self.length_penalty(expected_text, candidate_text)
        completeness = self.completeness_score(candidate_text, keyword)
        keyword_weighted = self.keyword_weighted_similarity(
            expected_text, candidate_text, keyword, base
        )
        stt_corrected = self.stt_corrected_similarity(expected_text, candidate_text)

        weighted_score = (
            keyword_weighted * self.weights.keyword_weighted
            + base * self.weights.base_similarity
            + stt_corrected * self.weights.stt_corrected
            + completeness * self.weights.completeness
        )
        final_score = min(weighted_score * length_penalty, 1.0)

        candidate_length = len(candidate_text.strip())
        expected_length = len(expected_text.strip())

        result = SentenceQualityResult(
            final_score=final_score,
            components=SentenceQualityComponents(
                base_similarity=base,
                keyword_weighted=keyword_weighted,
                stt_corrected=stt_corrected,
                completeness=completeness,
                length_penalty=length_penalty,
            ),
            analysis=SentenceQualityAnalysis(
                keyword_included=keyword.lower() in candidate_text.lower(),
                candidate_length=candidate_length,
                expected_length=expected_length,
                length_ratio=candidate_length / expected_length if expected_length else 0.0,
                word_count=len(_words(candidate_text)),
            ),
        )
        debug_log(ComponentType.SENTENCE_SCORER.value, "Sentence quality scored", result.to_dict())
        return result

    def diagnose(self, candidate_text: str, keyword: str) -> SentenceDiagnosis:
        """List quality issues of a candidate utterance with suggested fixes."""
        if not candidate_text or not candidate_text.strip():
            return SentenceDiagnosis(
                quality=QualityGrade.VERY_LOW,
                issues=['Utterance is empty'],
                suggestions=['Check that speech recognition captured the utterance'],
            )

        keyword = keyword or ''
        issues = []
        suggestions = []

        if keyword.lower() not in candidate_text.lower():
            issues.append('Keyword is missing')
            suggestions.append(f'Say a sentence that includes "{keyword}"')

        if len(candidate_text.strip()) < SHORT_SENTENCE_CHARS:
            issues.append('Utterance is too short')
            suggestions.append('Speak in a complete sentence')

        if len(_words(candidate_text)) < 3:
            issues.append('Too few words')
            suggestions.append('Add more detail to the utterance')

        if self.completeness_score(candidate_text, keyword) < 0.3:
            issues.append('Sentence is incomplete')
            suggestions.append('Use a polite, complete sentence')

        return SentenceDiagnosis(
            quality=QualityGrade.from_issue_count(len(issues)),
            issues=issues,
            suggestions=suggestions,
        )
