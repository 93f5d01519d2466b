"""
ScoreCandidateUseCase

Scores recognized (STT) transcripts against an expected sentence.

Flow for one candidate:
1. Vector metrics + STT string metrics (EnsembleScorer)
2. Error-pattern substitution check (stt_corrected)
3. Sentence quality score and diagnosis (only when a keyword is given)
4. Analysis summaries over all metrics and over semantic metrics only
5. Tier of the headline score (stt_ensemble)

Structural errors (DimensionMismatch, WeightLengthMismatch) propagate to the
caller unchanged.
"""

from typing import Any, Dict, List, Mapping, Optional

from stt_sim.application.dtos import (
    AnalysisSummaryModel,
    RankCandidatesRequest,
    RankCandidatesResponse,
    ScorePairRequest,
    ScorePairResponse,
    SimilarityOptionsModel,
)
from stt_sim.config import get_scoring_config
from stt_sim.debug_utils import debug_scoring_result
from stt_sim.domain.similarity.entities import (
    CorrectionConfiguration,
    CorrectionPenalties,
    EnsembleWeights,
    MetricCategory,
    MetricName,
    SentenceWeights,
    SimilarityOptions,
    SimilarityTier,
    STTEnsembleWeights,
    STTWeights,
    filter_metrics,
    weights_from_config,
)
from stt_sim.domain.similarity.services import (
    AnalysisAggregator,
    EnsembleScorer,
    ErrorPatternCorrector,
    SentenceQualityScorer,
)
from stt_sim.logging_utils import StructuredLogger
from stt_sim.models import ComponentType, EventType


class ScoreCandidateUseCase:
    """
    Use case for scoring and ranking candidate transcripts.

    Design Principles:
    - Pure orchestration (no HTTP, no framework dependencies)
    - Dependency injection for every domain service
    - Same code path for the CLI, the HTTP API and tests
    """

    def __init__(
        self,
        ensemble_scorer: EnsembleScorer,
        sentence_scorer: SentenceQualityScorer,
        aggregator: Optional[AnalysisAggregator] = None,
        default_ensemble_weights: Optional[EnsembleWeights] = None,
        default_jaccard_threshold: float = 0.5,
        tier_high: float = 0.8,
        tier_medium: float = 0.6,
        logger: Optional[StructuredLogger] = None,
    ):
        """
        Initialize the use case with injected dependencies.

        Args:
            ensemble_scorer: Produces the named-metric map
            sentence_scorer: Sentence quality scorer used when a keyword is given
            aggregator: Metric map reducer (default AnalysisAggregator)
            default_ensemble_weights: Vector ensemble weights when a request sets none
            default_jaccard_threshold: Jaccard threshold when a request sets none
            tier_high: Lower bound of the HIGH tier
            tier_medium: Lower bound of the MEDIUM tier
            logger: Optional structured logger (creates default if None)
        """
        self._ensemble_scorer = ensemble_scorer
        self._sentence_scorer = sentence_scorer
        self._aggregator = aggregator or AnalysisAggregator()
        self._default_ensemble_weights = default_ensemble_weights or EnsembleWeights()
        self._default_jaccard_threshold = default_jaccard_threshold
        self._tier_high = tier_high
        self._tier_medium = tier_medium
        self._logger = logger or StructuredLogger(ComponentType.SCORING_ENGINE)

    @classmethod
    def from_config(
        cls,
        config: Optional[Dict[str, Any]] = None,
        logger: Optional[StructuredLogger] = None,
    ) -> "ScoreCandidateUseCase":
        """
        Build the use case and its domain services from the scoring config.

        Args:
            config: Parsed config mapping (loads scoring_config.yaml when None)
            logger: Optional structured logger
        """
        config = config if config is not None else get_scoring_config()
        vector_cfg = config.get('vector', {}) or {}
        stt_cfg = config.get('stt', {}) or {}
        correction_cfg = config.get('correction', {}) or {}
        sentence_cfg = config.get('sentence', {}) or {}
        tier_cfg = config.get('tiers', {}) or {}

        penalties = CorrectionPenalties(
            single_side=float(correction_cfg.get('single_side_penalty', 0.95)),
            both_sides=float(correction_cfg.get('both_sides_penalty', 0.9)),
            sentence_substitution=float(correction_cfg.get('sentence_substitution_penalty', 0.9)),
        )
        corrector = ErrorPatternCorrector(
            penalties=penalties,
            stt_weights=weights_from_config(STTWeights, stt_cfg.get('weights')),
        )
        ensemble_scorer = EnsembleScorer(
            weights=weights_from_config(STTEnsembleWeights, stt_cfg.get('ensemble_weights')),
            corrector=corrector,
            normalization_tolerance=float(vector_cfg.get('normalization_tolerance', 1e-6)),
        )
        sentence_scorer = SentenceQualityScorer(
            corrector=corrector,
            weights=weights_from_config(SentenceWeights, sentence_cfg.get('weights')),
        )

        return cls(
            ensemble_scorer=ensemble_scorer,
            sentence_scorer=sentence_scorer,
            default_ensemble_weights=weights_from_config(
                EnsembleWeights, vector_cfg.get('ensemble_weights')
            ),
            default_jaccard_threshold=float(vector_cfg.get('jaccard_threshold', 0.5)),
            tier_high=float(tier_cfg.get('high', 0.8)),
            tier_medium=float(tier_cfg.get('medium', 0.6)),
            logger=logger,
        )

    def execute(self, request: ScorePairRequest) -> ScorePairResponse:
        """
        Score one candidate against one expected text.

        Raises:
            DimensionMismatch: If the embeddings differ in length
            WeightLengthMismatch: If options.weights does not match the embedding length
        """
        return self._score_candidate(
            trace_id=request.trace_id,
            candidate_id=request.candidate_id,
            expected_text=request.expected_text,
            candidate_text=request.candidate_text,
            expected_embedding=request.expected_embedding,
            candidate_embedding=request.candidate_embedding,
            keyword=request.keyword,
            options=self._resolve_options(request.options),
        )

    def rank(self, request: RankCandidatesRequest) -> RankCandidatesResponse:
        """
        Score every candidate against the expected text and order them by
        headline score, best first. Equal scores keep their input order.
        """
        options = self._resolve_options(request.options)
        results = [
            self._score_candidate(
                trace_id=request.trace_id,
                candidate_id=candidate.candidate_id,
                expected_text=request.expected_text,
                candidate_text=candidate.candidate_text,
                expected_embedding=request.expected_embedding,
                candidate_embedding=candidate.candidate_embedding,
                keyword=request.keyword,
                options=options,
            )
            for candidate in request.candidates
        ]
        ranked = sorted(results, key=lambda r: r.headline_score, reverse=True)

        return RankCandidatesResponse(
            trace_id=request.trace_id,
            expected_text=request.expected_text,
            ranked=ranked,
        )

    def analyze(self, similarities: Mapping[str, float]) -> AnalysisSummaryModel:
        """Summarize any metric map."""
        return AnalysisSummaryModel(**self._aggregator.analyze(similarities).to_dict())

    def _resolve_options(self, model: SimilarityOptionsModel) -> SimilarityOptions:
        options = model.to_options(self._default_ensemble_weights)
        if 'jaccard_threshold' in model.model_fields_set:
            return options
        return SimilarityOptions(
            jaccard_threshold=self._default_jaccard_threshold,
            ensemble_weights=options.ensemble_weights,
            weights=options.weights,
        )

    def _score_candidate(
        self,
        trace_id: str,
        candidate_id: Optional[str],
        expected_text: str,
        candidate_text: str,
        expected_embedding: List[float],
        candidate_embedding: List[float],
        keyword: Optional[str],
        options: SimilarityOptions,
    ) -> ScorePairResponse:
        self._logger.log_event(
            trace_id,
            EventType.SCORING_STARTED,
            {
                "candidate_id": candidate_id,
                "expected_text": expected_text,
                "candidate_text": candidate_text,
                "keyword": keyword,
            },
            metrics={"dimension": len(expected_embedding)},
        )

        similarities, enhanced = self._ensemble_scorer.score_detailed(
            expected_embedding,
            candidate_embedding,
            expected_text,
            candidate_text,
            options,
            keyword,
        )

        if enhanced is not None and enhanced.configuration != CorrectionConfiguration.RAW:
            self._logger.log_event(
                trace_id,
                EventType.CORRECTION_APPLIED,
                enhanced.to_dict(),
                metrics={
                    "configuration": enhanced.configuration.value,
                    "corrections": len(enhanced.corrections),
                    "score": enhanced.score,
                },
            )

        semantic = filter_metrics(similarities, MetricCategory.SEMANTIC)
        degraded = bool(semantic) and all(value == 0.0 for value in semantic.values())
        if degraded:
            self._logger.log_event(
                trace_id,
                EventType.SCORING_DEGRADED,
                {"candidate_id": candidate_id, "semantic": semantic},
            )

        sentence_quality = None
        diagnosis = None
        if keyword is not None:
            sentence_quality = self._sentence_scorer.score(
                expected_embedding,
                candidate_embedding,
                expected_text,
                candidate_text,
                keyword,
            ).to_dict()
            diagnosis = self._sentence_scorer.diagnose(candidate_text, keyword).to_dict()

        analysis = self._aggregator.analyze(similarities)
        semantic_analysis = self._aggregator.analyze(semantic)
        headline_score = similarities[MetricName.STT_ENSEMBLE.value]
        tier = SimilarityTier.classify(headline_score, self._tier_high, self._tier_medium)

        self._logger.log_event(
            trace_id,
            EventType.SCORING_COMPLETED,
            similarities,
            metrics={
                "candidate_id": candidate_id,
                "headline_score": headline_score,
                "tier": tier.value,
                "degraded": degraded,
            },
        )
        debug_scoring_result(
            trace_id,
            {MetricName(name).display_name: value for name, value in similarities.items()},
            degraded,
            analysis.to_dict(),
        )

        return ScorePairResponse(
            trace_id=trace_id,
            candidate_id=candidate_id,
            similarities=similarities,
            analysis=AnalysisSummaryModel(**analysis.to_dict()),
            semantic_analysis=AnalysisSummaryModel(**semantic_analysis.to_dict()),
            headline_score=headline_score,
            tier=tier.value,
            degraded=degraded,
            stt_correction=enhanced.to_dict() if enhanced is not None else None,
            sentence_quality=sentence_quality,
            diagnosis=diagnosis,
        )
