"""
Shared test fixtures for the scoring engine tests
"""

import pytest
import numpy as np

from stt_sim.config import clear_config_cache


EXPECTED_SENTENCE = "고객님, 요청하신 서류를 확인해 드리겠습니다."


@pytest.fixture(autouse=True)
def fresh_config(monkeypatch):
    """Every test starts from the packaged scoring_config.yaml."""
    monkeypatch.delenv("STT_SIM_CONFIG", raising=False)
    clear_config_cache()
    yield
    clear_config_cache()


@pytest.fixture
def rng():
    return np.random.default_rng(42)


@pytest.fixture
def expected_sentence():
    return EXPECTED_SENTENCE
