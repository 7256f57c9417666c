"""Tests for configuration models."""

import pytest
from pydantic import ValidationError

from isoline.config import (
    IsolineSettings,
    LoggingConfig,
    MarchConfig,
    OutputConfig,
    SimplifyConfig,
    get_default_settings,
)


class TestMarchConfig:
    """Tests for MarchConfig."""

    def test_defaults(self):
        """Test default tracing options."""
        config = MarchConfig()
        assert config.levels == 10
        assert config.thresholds is None
        assert config.frame_border is True
        assert config.close_border_cells is False

    def test_evenly_spaced_thresholds(self):
        """Test thresholds spread over the sample range inclusive."""
        assert MarchConfig(levels=3).resolve_thresholds(0.0, 10.0) == [0.0, 5.0, 10.0]

    def test_single_level_uses_midpoint(self):
        """Test that one level traces the middle of the range."""
        assert MarchConfig(levels=1).resolve_thresholds(2.0, 4.0) == [3.0]

    def test_explicit_thresholds_win(self):
        """Test that explicit thresholds ignore the range."""
        config = MarchConfig(levels=5, thresholds=[1.5, 0.5])
        assert config.resolve_thresholds(0.0, 100.0) == [1.5, 0.5]

    @pytest.mark.parametrize("levels", [0, 1001])
    def test_levels_bounds(self, levels: int):
        """Test that the level count is validated."""
        with pytest.raises(ValidationError):
            MarchConfig(levels=levels)


class TestOtherConfig:
    """Tests for simplify, output and logging config."""

    def test_negative_epsilon_rejected(self):
        """Test that the tolerance cannot be negative."""
        with pytest.raises(ValidationError):
            SimplifyConfig(epsilon=-1.0)

    def test_colour_pattern(self):
        """Test that fill colours must be '#rrggbb'."""
        assert OutputConfig(fill_low="#00FF00").fill_low == "#00FF00"
        with pytest.raises(ValidationError):
            OutputConfig(fill_high="green")

    def test_stroke_width_positive(self):
        """Test that the stroke width must be positive."""
        with pytest.raises(ValidationError):
            OutputConfig(stroke_width=0.0)

    def test_log_levels_normalized(self):
        """Test that log levels are upper-cased."""
        config = LoggingConfig(log_level="info", file_log_level="debug")
        assert config.log_level == "INFO"
        assert config.file_log_level == "DEBUG"

    def test_default_settings(self):
        """Test aggregated defaults."""
        settings = get_default_settings()
        assert isinstance(settings, IsolineSettings)
        assert settings.simplify.epsilon == 1e-9
        assert settings.output.fill is False
