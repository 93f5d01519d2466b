"""
Domain Service: Error Pattern Corrector

Tries alternate readings of a transcript using a static lexicon of known
recognition errors, and picks the best-scoring reading of a text pair.
"""

from types import MappingProxyType
from typing import Dict, Iterator, List, Mapping, Optional, Tuple

from ..entities import (
    CorrectionConfiguration,
    CorrectionPenalties,
    CorrectionRecord,
    CorrectionResult,
    EnhancedSTTResult,
    STTWeights,
    round_metric,
)
from .string_metrics import calculate_stt_similarity

# canonical form -> variants the recognizer is known to produce instead
KOREAN_STT_ERROR_PATTERNS: Mapping[str, Tuple[str, ...]] = MappingProxyType({
    # final consonant confusions
    '끝나는': ('끊나는', '끈나는', '끙나는'),
    '도와드리겠습니다': ('보안드리겠습니다', '도안드리겠습니다', '도와드기겠습니다'),
    '준비': ('즌비', '준비해', '준배'),
    # vowel confusions
    '서류': ('서뤼', '설류', '셔류'),
    '확인': ('화긴', '확긴', '확인해'),
    '필요': ('핑요', '비료', '필료'),
    # consonant confusions
    '클라우드': ('클라우두', '클라우드로', '클라둣'),
    '인치': ('인치로', '인지', '인차'),
    '고객님': ('고객님께', '고객닙', '고객님이'),
    # compound errors
    '번거로우시겠지만': ('번거로우셨지만', '번거로시겠지만', '번거로우시겠습니다만'),
    '죄송하지만': ('죄송합니다만', '죄송하시만', '죄송하지만서'),
})


class ErrorPatternCorrector:
    """
    Domain service for lexicon-based correction of recognition errors.

    The lexicon is read-only after construction, so one instance can be
    shared across threads.
    """

    def __init__(
        self,
        lexicon: Optional[Mapping[str, Tuple[str, ...]]] = None,
        penalties: Optional[CorrectionPenalties] = None,
        stt_weights: Optional[STTWeights] = None,
    ):
        """
        Initialize corrector.

        Args:
            lexicon: canonical -> variants mapping (Korean STT patterns by default)
            penalties: Multipliers applied when a correction wins
            stt_weights: Weights of the composite STT similarity
        """
        source = KOREAN_STT_ERROR_PATTERNS if lexicon is None else lexicon
        self.lexicon: Mapping[str, Tuple[str, ...]] = MappingProxyType(
            {canonical: tuple(variants) for canonical, variants in source.items()}
        )
        self.penalties = penalties or CorrectionPenalties()
        self.stt_weights = stt_weights or STTWeights()

    @staticmethod
    def is_relevant(canonical: str, keyword: Optional[str]) -> bool:
        """A canonical form is relevant when it and the keyword contain one another."""
        if keyword is None:
            return True
        return keyword in canonical or canonical in keyword

    def find_corrections(self, text: str, keyword: Optional[str] = None) -> List[CorrectionRecord]:
        """
        Locate every known variant in `text`.

        Matches are found on the original text. Where matches overlap, the
        leftmost wins, then the longest.
        """
        if not text or not isinstance(text, str):
            return []

        candidates = []
        for canonical, variants in self.lexicon.items():
            if not self.is_relevant(canonical, keyword):
                continue
            for variant in variants:
                if not variant:
                    continue
                start = text.find(variant)
                while start != -1:
                    candidates.append((start, -len(variant), variant, canonical))
                    start = text.find(variant, start + len(variant))

        records = []
        covered_until = 0
        for start, neg_length, variant, canonical in sorted(candidates):
            if start < covered_until:
                continue
            records.append(CorrectionRecord(original=variant, corrected=canonical, position=start))
            covered_until = start - neg_length
        return records

    def correct(self, text: str, keyword: Optional[str] = None) -> CorrectionResult:
        """
        Produce a corrected copy of `text`.

        All substitutions are spliced into the original text in one pass,
        so no correction sees the output of another.
        """
        records = self.find_corrections(text, keyword)
        if not records:
            return CorrectionResult(text=text if isinstance(text, str) else "", corrections=[])

        pieces = []
        cursor = 0
        for record in records:
            pieces.append(text[cursor:record.position])
            pieces.append(record.corrected)
            cursor = record.position + len(record.original)
        pieces.append(text[cursor:])
        return CorrectionResult(text="".join(pieces), corrections=records)

    def enhanced_stt_similarity(
        self,
        expected: str,
        candidate: str,
        keyword: Optional[str] = None,
        weights: Optional[Dict[str, float]] = None,
    ) -> EnhancedSTTResult:
        """
        Best composite STT similarity over four readings of the pair.

        Configurations: raw; expected vs corrected candidate; corrected
        expected vs candidate; both corrected. One-sided corrections are
        multiplied by penalties.single_side, two-sided by
        penalties.both_sides. Ties go to the configuration tried first.

        Args:
            expected: Reference text
            candidate: Recognized text
            keyword: Optional filter restricting which lexicon entries apply
            weights: Overrides for the composite STT weights

        Returns:
            EnhancedSTTResult naming the winning configuration and its corrections
        """
        raw = calculate_stt_similarity(expected, candidate, weights, self.stt_weights)
        best = EnhancedSTTResult(
            score=raw.weighted,
            configuration=CorrectionConfiguration.RAW,
            breakdown=raw,
            corrections=[],
        )

        corrected_expected = self.correct(expected, keyword)
        corrected_candidate = self.correct(candidate, keyword)

        trials = []
        if corrected_candidate.changed:
            trials.append((
                CorrectionConfiguration.CANDIDATE_CORRECTED,
                expected,
                corrected_candidate.text,
                self.penalties.single_side,
                corrected_candidate.corrections,
            ))
        if corrected_expected.changed:
            trials.append((
                CorrectionConfiguration.EXPECTED_CORRECTED,
                corrected_expected.text,
                candidate,
                self.penalties.single_side,
                corrected_expected.corrections,
            ))
        if corrected_expected.changed and corrected_candidate.changed:
            trials.append((
                CorrectionConfiguration.BOTH_CORRECTED,
                corrected_expected.text,
                corrected_candidate.text,
                self.penalties.both_sides,
                corrected_expected.corrections + corrected_candidate.corrections,
            ))

        for configuration, left, right, penalty, corrections in trials:
            result = calculate_stt_similarity(left, right, weights, self.stt_weights)
            score = round_metric(result.weighted * penalty)
            if score > best.score:
                best = EnhancedSTTResult(
                    score=score,
                    configuration=configuration,
                    breakdown=result,
                    corrections=list(corrections),
                )

        return best

    def candidate_substitutions(self, expected: str, candidate: str) -> Iterator[Tuple[str, str, str]]:
        """
        Yield (variant, canonical, corrected_candidate) for every lexicon entry
        whose canonical form occurs in `expected` and whose variant occurs in
        `candidate`. Only the first occurrence of the variant is replaced.
        """
        if not expected or not candidate:
            return
        for canonical, variants in self.lexicon.items():
            if canonical not in expected:
                continue
            for variant in variants:
                if variant in candidate:
                    yield variant, canonical, candidate.replace(variant, canonical, 1)
