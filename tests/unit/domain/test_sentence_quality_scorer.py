"""
Unit tests for SentenceQualityScorer.
"""

import pytest

from stt_sim.domain.similarity.entities import QualityGrade, SentenceWeights
from stt_sim.domain.similarity.services import SentenceQualityScorer, jaro_winkler_similarity


@pytest.fixture
def scorer():
    return SentenceQualityScorer()


class TestComponents:

    def test_length_penalty(self, scorer):
        assert scorer.length_penalty("a" * 20, "a" * 20) == 1.0
        assert scorer.length_penalty("a" * 20, "a" * 12) == pytest.approx(0.6)
        assert scorer.length_penalty("a" * 20, "") == 0.0

    def test_length_penalty_short_and_low_ratio(self, scorer):
        """Ratio 0.15 is halved, and a 3-character candidate is halved again."""
        assert scorer.length_penalty("a" * 20, "abc") == pytest.approx(0.0375)

    def test_short_candidate_halved_at_full_ratio(self, scorer):
        assert scorer.length_penalty("abc", "abc") == 0.5
        assert scorer.length_penalty("가나다라마바사아자", "가나다라마바사아자") == 0.5

    def test_completeness(self, scorer, expected_sentence):
        assert scorer.completeness_score(expected_sentence, "서류") == pytest.approx(0.85)
        assert scorer.completeness_score("", "서류") == 0.0
        assert scorer.completeness_score("   ", "서류") == 0.0

    def test_completeness_keyword_at_start_gets_no_credit(self, scorer):
        assert scorer.completeness_score("서류", "서류") == 0.0

    def test_completeness_is_capped(self, scorer):
        text = "고객님, 요청하신 서류 3부를 지금 바로 확인해서 안내 문자로 다시 보내 드리겠습니다."
        assert scorer.completeness_score(text, "서류") == 1.0

    def test_only_ascii_digits_count(self, scorer):
        assert scorer.completeness_score("3", "") == pytest.approx(0.05)
        assert scorer.completeness_score("３", "") == 0.0

    def test_extract_keyword_context(self, scorer):
        text = "one two three key four five six seven"
        assert scorer.extract_keyword_context(text, "key", 1) == "three key four"
        assert scorer.extract_keyword_context(text, "missing") == ""

    def test_context_similarity(self, scorer):
        assert scorer.context_similarity("a b c", "B C D") == pytest.approx(0.5)
        assert scorer.context_similarity("", "a") == 0.0

    def test_missing_keyword_keeps_thirty_percent(self, scorer):
        result = scorer.keyword_weighted_similarity(
            "클라우드 서비스를 안내해 드리겠습니다", "오늘 날씨가 정말 좋네요", "클라우드", 0.6
        )
        assert result == pytest.approx(0.18)

    def test_plausible_substitution_skips_penalty(self, scorer):
        """A near-miss keyword keeps 60% of base, with no context match and no keyword bonus."""
        assert jaro_winkler_similarity("클라우드", "클라우두 안내") >= 0.7

        result = scorer.keyword_weighted_similarity(
            "클라우드 서비스를 안내해 드리겠습니다", "클라우두 안내", "클라우드", 0.8
        )
        assert result == pytest.approx(0.48)

    def test_keyword_context_overlap(self, scorer):
        """Contexts {고객님, 서류, 확인} and {서류, 확인, 부탁} share half their tokens."""
        result = scorer.keyword_weighted_similarity("고객님 서류 확인", "서류 확인 부탁", "서류", 0.5)
        assert result == pytest.approx(0.6 * 0.5 + 0.3 * 0.5 + 0.1)

    def test_base_similarity(self, scorer):
        assert scorer.base_similarity([1.0, 0.0], [0.6, 0.8]) == pytest.approx(0.6)
        assert scorer.base_similarity([2.0, 0.0], [1.0, 1.0]) == pytest.approx(0.70710678)


class TestScore:

    def test_identical_sentence(self, scorer, expected_sentence):
        result = scorer.score([1.0, 0.0], [1.0, 0.0], expected_sentence, expected_sentence, "서류")

        assert result.components.completeness == pytest.approx(0.85)
        assert result.components.keyword_weighted == pytest.approx(1.0)
        assert result.components.stt_corrected == 1.0
        assert result.components.length_penalty == 1.0
        assert result.final_score == pytest.approx(0.9775)
        assert result.analysis.keyword_included is True
        assert result.analysis.length_ratio == 1.0

    def test_empty_candidate_scores_zero(self, scorer, expected_sentence):
        result = scorer.score([1.0, 0.0], [1.0, 0.0], expected_sentence, "", "서류")

        assert result.final_score == 0.0
        assert result.analysis.word_count == 0

    def test_empty_expected_text(self, scorer):
        result = scorer.score([1.0, 0.0], [1.0, 0.0], "", "서류를 드리겠습니다", "서류")

        assert result.analysis.length_ratio == 0.0
        assert result.final_score <= 1.0

    def test_custom_weights(self, expected_sentence):
        weights = SentenceWeights(keyword_weighted=0.0, base_similarity=1.0, stt_corrected=0.0, completeness=0.0)
        scorer = SentenceQualityScorer(weights=weights)
        result = scorer.score([1.0, 0.0], [0.6, 0.8], expected_sentence, expected_sentence, "서류")

        assert result.final_score == pytest.approx(0.6)

    def test_to_dict_uses_display_keys(self, scorer, expected_sentence):
        data = scorer.score([1.0, 0.0], [1.0, 0.0], expected_sentence, expected_sentence, "서류").to_dict()

        assert set(data) == {"finalScore", "components", "analysis"}
        assert "keywordWeighted" in data["components"]
        assert "lengthRatio" in data["analysis"]

    def test_lexicon_substitution_improves_stt_component(self, scorer):
        expected = "고객님 서류 부탁드립니다"
        candidate = "고객님 셔류 부탁드립니다"
        assert scorer.stt_corrected_similarity(expected, candidate) == 0.95


class TestDiagnose:

    def test_empty_candidate(self, scorer):
        diagnosis = scorer.diagnose("", "서류")

        assert diagnosis.quality == QualityGrade.VERY_LOW
        assert len(diagnosis.issues) == 1

    def test_clean_sentence(self, scorer, expected_sentence):
        diagnosis = scorer.diagnose(expected_sentence, "서류")

        assert diagnosis.quality == QualityGrade.HIGH
        assert diagnosis.issues == []

    def test_missing_keyword_only(self, scorer):
        diagnosis = scorer.diagnose("고객님, 요청하신 문서를 확인해 드리겠습니다.", "서류")

        assert diagnosis.quality == QualityGrade.MEDIUM
        assert diagnosis.issues == ["Keyword is missing"]

    def test_fragment(self, scorer):
        diagnosis = scorer.diagnose("서류", "서류")

        assert diagnosis.quality == QualityGrade.VERY_LOW
        assert len(diagnosis.issues) == 3
        assert len(diagnosis.suggestions) == 3
