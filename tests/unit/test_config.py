"""
Unit tests for the scoring configuration loader.
"""

from stt_sim.config import clear_config_cache, get_config_path, get_scoring_config


class TestScoringConfig:

    def test_packaged_defaults(self):
        config = get_scoring_config()

        assert config["vector"]["jaccard_threshold"] == 0.5
        assert config["stt"]["ensemble_weights"]["semantic"] == 0.4
        assert config["correction"]["both_sides_penalty"] == 0.9
        assert config["tiers"] == {"high": 0.8, "medium": 0.6}

    def test_config_is_cached(self):
        assert get_scoring_config() is get_scoring_config()

    def test_env_override(self, tmp_path, monkeypatch):
        path = tmp_path / "custom.yaml"
        path.write_text("tiers:\n  high: 0.9\n  medium: 0.7\n", encoding="utf-8")
        monkeypatch.setenv("STT_SIM_CONFIG", str(path))
        clear_config_cache()

        assert get_config_path() == path
        assert get_scoring_config() == {"tiers": {"high": 0.9, "medium": 0.7}}

    def test_empty_file_yields_empty_config(self, tmp_path, monkeypatch):
        path = tmp_path / "empty.yaml"
        path.write_text("", encoding="utf-8")
        monkeypatch.setenv("STT_SIM_CONFIG", str(path))
        clear_config_cache()

        assert get_scoring_config() == {}
