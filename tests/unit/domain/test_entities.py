"""
Unit tests for the similarity value objects.
"""

import math
import pytest

from stt_sim.domain.similarity.entities import (
    MetricCategory,
    MetricName,
    QualityGrade,
    SentenceQualityAnalysis,
    SentenceQualityComponents,
    SentenceQualityResult,
    SimilarityTier,
    STTWeights,
    filter_metrics,
    metric_category,
    round_metric,
    weights_from_config,
)


class TestRoundMetric:

    def test_half_rounds_up(self):
        assert round_metric(0.0125) == 0.013
        assert round_metric(0.1234) == 0.123

    def test_negative_values(self):
        assert round_metric(-0.5004) == -0.5

    def test_non_finite_collapse_to_zero(self):
        assert round_metric(float("nan")) == 0.0
        assert round_metric(math.inf) == 0.0


class TestMetricCategories:

    def test_every_name_has_a_category(self):
        for name in MetricName:
            assert name.category in (MetricCategory.SEMANTIC, MetricCategory.STT)
            assert name.display_name

    def test_lookup(self):
        assert metric_category("cosine") == MetricCategory.SEMANTIC
        assert metric_category("ensemble") == MetricCategory.SEMANTIC
        assert metric_category("stt_corrected") == MetricCategory.STT
        assert MetricName.STT_PHONETIC.display_name == "STT Korean Phonetic"

    def test_unknown_name_raises(self):
        with pytest.raises(ValueError):
            metric_category("bleu")

    def test_filter(self):
        similarities = {"cosine": 0.1, "stt_phonetic": 0.2, "stt_ensemble": 0.3}

        assert filter_metrics(similarities, MetricCategory.STT) == {"stt_phonetic": 0.2, "stt_ensemble": 0.3}
        assert filter_metrics(similarities, MetricCategory.SEMANTIC) == {"cosine": 0.1}


class TestTiers:

    @pytest.mark.parametrize("score,tier", [
        (1.0, SimilarityTier.HIGH),
        (0.8, SimilarityTier.HIGH),
        (0.79, SimilarityTier.MEDIUM),
        (0.6, SimilarityTier.MEDIUM),
        (0.599, SimilarityTier.LOW),
        (-0.2, SimilarityTier.LOW),
    ])
    def test_classify(self, score, tier):
        assert SimilarityTier.classify(score) == tier

    @pytest.mark.parametrize("count,grade", [
        (0, QualityGrade.HIGH),
        (1, QualityGrade.MEDIUM),
        (2, QualityGrade.LOW),
        (3, QualityGrade.VERY_LOW),
        (4, QualityGrade.VERY_LOW),
    ])
    def test_quality_grade(self, count, grade):
        assert QualityGrade.from_issue_count(count) == grade


class TestSentenceQualityResult:

    def _parts(self):
        components = SentenceQualityComponents(1.0, 1.0, 1.0, 1.0, 1.0)
        analysis = SentenceQualityAnalysis(True, 10, 10, 1.0, 3)
        return components, analysis

    def test_final_score_above_one_rejected(self):
        components, analysis = self._parts()
        with pytest.raises(ValueError, match="must not exceed 1.0"):
            SentenceQualityResult(final_score=1.01, components=components, analysis=analysis)

    def test_valid_result(self):
        components, analysis = self._parts()
        result = SentenceQualityResult(final_score=1.0, components=components, analysis=analysis)
        assert result.to_dict()["finalScore"] == 1.0


class TestWeights:

    def test_merged_overrides(self):
        merged = STTWeights().merged({"phonetic": 0.5})

        assert merged.phonetic == 0.5
        assert merged.jaro_winkler == 0.4

    def test_merged_rejects_unknown_keys(self):
        with pytest.raises(ValueError, match="Unknown STT weight"):
            STTWeights().merged({"soundex": 0.1})

    def test_weights_from_config(self):
        weights = weights_from_config(STTWeights, {"levenshtein": "0.5", "extra": 1})

        assert weights.levenshtein == 0.5
        assert weights.jaro_winkler == 0.4
        assert weights_from_config(STTWeights, None) == STTWeights()
