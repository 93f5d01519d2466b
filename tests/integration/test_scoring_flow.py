"""
Integration tests for ScoreCandidateUseCase.

Runs the full flow (vector metrics -> STT metrics -> lexicon substitution ->
sentence quality -> analysis -> tier) with the packaged configuration.
"""

import pytest
from unittest.mock import MagicMock, patch

from stt_sim.application.dtos import (
    CandidateInput,
    RankCandidatesRequest,
    ScorePairRequest,
    SimilarityOptionsModel,
)
from stt_sim.application.use_cases import ScoreCandidateUseCase
from stt_sim.domain.similarity.services import DimensionMismatch, WeightLengthMismatch
from stt_sim.models import EventType


@pytest.fixture
def logger():
    return MagicMock()


@pytest.fixture
def use_case(logger):
    return ScoreCandidateUseCase.from_config(logger=logger)


def logged_events(logger):
    return [call.args[1] for call in logger.log_event.call_args_list]


class TestExecute:

    def test_identical_pair(self, use_case, expected_sentence):
        request = ScorePairRequest(
            expected_text=expected_sentence,
            candidate_text=expected_sentence,
            expected_embedding=[1.0, 0.0],
            candidate_embedding=[1.0, 0.0],
            keyword="서류",
            candidate_id="c1",
        )

        response = use_case.execute(request)

        assert response.trace_id == request.trace_id
        assert response.candidate_id == "c1"
        assert response.headline_score == 1.0
        assert response.tier == "HIGH"
        assert response.degraded is False
        assert response.similarities["stt_corrected"] == 1.0
        assert response.sentence_quality["finalScore"] == pytest.approx(0.9775)
        assert response.diagnosis["quality"] == "high"
        assert response.semantic_analysis.highest["method"] == "cosine"

    def test_no_keyword_skips_sentence_quality(self, use_case):
        response = use_case.execute(ScorePairRequest(
            expected_text="서류",
            candidate_text="서류",
            expected_embedding=[1.0, 0.0],
            candidate_embedding=[1.0, 0.0],
        ))

        assert response.sentence_quality is None
        assert response.diagnosis is None

    def test_semantic_analysis_excludes_stt_metrics(self, use_case):
        response = use_case.execute(ScorePairRequest(
            expected_text="서류",
            candidate_text="전혀 다른 문장",
            expected_embedding=[1.0, 0.0],
            candidate_embedding=[1.0, 0.0],
        ))

        assert not response.semantic_analysis.lowest["method"].startswith("stt_")
        assert response.analysis.lowest["method"].startswith("stt_")

    def test_correction_is_logged(self, use_case, logger):
        use_case.execute(ScorePairRequest(
            expected_text="고객님 서류 부탁드립니다",
            candidate_text="고객님 셔류 부탁드립니다",
            expected_embedding=[1.0, 0.0],
            candidate_embedding=[1.0, 0.0],
        ))

        events = logged_events(logger)
        assert events[0] == EventType.SCORING_STARTED
        assert EventType.CORRECTION_APPLIED in events
        assert events[-1] == EventType.SCORING_COMPLETED

    def test_debug_dump_uses_display_names(self, use_case):
        target = "stt_sim.application.use_cases.score_candidate_use_case.debug_scoring_result"
        with patch(target) as dump:
            response = use_case.execute(ScorePairRequest(
                expected_text="서류",
                candidate_text="서류",
                expected_embedding=[1.0, 0.0],
                candidate_embedding=[1.0, 0.0],
            ))

        dumped = dump.call_args[0][1]
        assert dumped["STT Ensemble"] == response.similarities["stt_ensemble"]
        assert dumped["Cosine"] == 1.0
        assert "stt_ensemble" not in dumped

    def test_degraded_batch_is_flagged(self, use_case, logger):
        target = "stt_sim.domain.similarity.services.vector_metrics.pearson_correlation"
        with patch(target, side_effect=RuntimeError("boom")):
            response = use_case.execute(ScorePairRequest(
                expected_text="서류",
                candidate_text="서류",
                expected_embedding=[1.0, 0.0],
                candidate_embedding=[1.0, 0.0],
            ))

        assert response.degraded is True
        assert response.similarities["cosine"] == 0.0
        assert response.headline_score == 0.6
        assert EventType.SCORING_DEGRADED in logged_events(logger)

    def test_jaccard_threshold_zero_from_request(self, use_case):
        def score(options):
            return use_case.execute(ScorePairRequest(
                expected_text="a",
                candidate_text="a",
                expected_embedding=[0.2, 0.0],
                candidate_embedding=[0.3, 0.0],
                options=options,
            )).similarities["jaccard"]

        assert score(SimilarityOptionsModel()) == 0.0
        assert score(SimilarityOptionsModel(jaccardThreshold=0)) == 1.0

    def test_weights_option_adds_weighted_cosine(self, use_case):
        response = use_case.execute(ScorePairRequest(
            expected_embedding=[1.0, 0.0],
            candidate_embedding=[1.0, 1.0],
            options={"weights": [1.0, 0.0]},
        ))

        assert response.similarities["weighted_cosine"] == 1.0

    def test_structural_errors_propagate(self, use_case):
        with pytest.raises(DimensionMismatch):
            use_case.execute(ScorePairRequest(
                expected_embedding=[1.0, 0.0],
                candidate_embedding=[1.0],
            ))
        with pytest.raises(WeightLengthMismatch):
            use_case.execute(ScorePairRequest(
                expected_embedding=[1.0, 0.0],
                candidate_embedding=[1.0, 0.0],
                options={"weights": [1.0]},
            ))

    def test_tiers_come_from_config(self, logger):
        use_case = ScoreCandidateUseCase.from_config({"tiers": {"high": 2.0, "medium": 0.5}}, logger=logger)
        response = use_case.execute(ScorePairRequest(
            expected_text="서류",
            candidate_text="서류",
            expected_embedding=[1.0, 0.0],
            candidate_embedding=[1.0, 0.0],
        ))

        assert response.tier == "MEDIUM"


class TestRank:

    def test_orders_by_headline_score(self, use_case):
        expected = "고객님 서류 부탁드립니다"
        request = RankCandidatesRequest(
            expected_text=expected,
            expected_embedding=[1.0, 0.0],
            candidates=[
                CandidateInput(candidate_id="far", candidate_text="전혀 다른 말입니다", candidate_embedding=[0.0, 1.0]),
                CandidateInput(candidate_id="exact", candidate_text=expected, candidate_embedding=[1.0, 0.0]),
                CandidateInput(candidate_id="typo", candidate_text="고객님 셔류 부탁드립니다", candidate_embedding=[1.0, 0.0]),
            ],
        )

        response = use_case.rank(request)

        assert [r.candidate_id for r in response.ranked] == ["exact", "typo", "far"]
        assert response.ranked[0].tier == "HIGH"
        assert all(r.trace_id == request.trace_id for r in response.ranked)

    def test_ties_keep_input_order(self, use_case):
        request = RankCandidatesRequest(
            expected_text="서류",
            expected_embedding=[1.0, 0.0],
            candidates=[
                CandidateInput(candidate_id=name, candidate_text="서류", candidate_embedding=[1.0, 0.0])
                for name in ("b", "a", "c")
            ],
        )

        assert [r.candidate_id for r in use_case.rank(request).ranked] == ["b", "a", "c"]

    def test_empty_candidates(self, use_case):
        response = use_case.rank(RankCandidatesRequest(expected_embedding=[1.0, 0.0]))
        assert response.ranked == []


class TestAnalyze:

    def test_any_metric_map(self, use_case):
        summary = use_case.analyze({"a": 0.2, "b": 0.9, "c": 0.5})

        assert summary.highest == {"method": "b", "value": 0.9}
        assert summary.variance == 0.082
