"""Tests for run configuration."""

import dataclasses

import pytest

from radius_analyzer.exceptions import ConfigurationError
from radius_analyzer.records import DEFAULT_CHUNK_SIZE, AnalysisConfig


class TestAnalysisConfig:
    def test_defaults(self):
        config = AnalysisConfig("iaslog.log")
        assert config.max_duration is None
        assert config.min_daily_count is None
        assert config.max_workers is None
        assert config.chunk_size == DEFAULT_CHUNK_SIZE
        assert config.validate() is config

    def test_is_immutable(self):
        config = AnalysisConfig("iaslog.log", max_duration=50)
        with pytest.raises(dataclasses.FrozenInstanceError):
            config.max_duration = 10

    @pytest.mark.parametrize(
        "kwargs",
        [
            {"input_path": ""},
            {"input_path": "a.log", "max_duration": -1},
            {"input_path": "a.log", "min_daily_count": -2},
            {"input_path": "a.log", "max_workers": 0},
            {"input_path": "a.log", "chunk_size": 0},
        ],
    )
    def test_invalid_values(self, kwargs):
        with pytest.raises(ConfigurationError):
            AnalysisConfig(**kwargs).validate()

    def test_zero_thresholds_are_valid(self):
        AnalysisConfig("a.log", max_duration=0, min_daily_count=0).validate()
