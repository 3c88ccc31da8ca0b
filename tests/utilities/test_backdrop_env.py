"""Tests for :mod:`backdrop.utilities.env`."""

from __future__ import annotations

import pytest

from backdrop.utilities.env import ColorMapping, Configuration


class TestRenderingConfiguration:
    """Environment-driven rendering settings."""

    def test_defaults(self) -> None:
        assert Configuration.color_mapping() is ColorMapping.ANIMATED
        assert Configuration.render_executor_max_workers() is None
        assert Configuration.render_parallel_threshold() == 128 * 128
        assert Configuration.render_tile_rows() == 32
        assert Configuration.render_max_fps() == 60
        assert Configuration.render_min_interval_ms() == 0.0
        assert Configuration.viewport_scale() == 1.0
        assert Configuration.frame_stats_enabled() is False

    @pytest.mark.parametrize(
        ("value", "expected"),
        [("static", ColorMapping.STATIC), ("  ANIMATED ", ColorMapping.ANIMATED)],
    )
    def test_color_mapping_is_case_insensitive(
        self,
        monkeypatch: pytest.MonkeyPatch,
        value: str,
        expected: ColorMapping,
    ) -> None:
        monkeypatch.setenv("BACKDROP_COLOR_MAPPING", value)

        assert Configuration.color_mapping() is expected

    def test_color_mapping_rejects_unknown(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("BACKDROP_COLOR_MAPPING", "rainbow")

        with pytest.raises(ValueError, match="BACKDROP_COLOR_MAPPING"):
            Configuration.color_mapping()

    def test_max_workers_must_be_positive(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("BACKDROP_RENDER_MAX_WORKERS", "0")

        with pytest.raises(ValueError, match="at least 1"):
            Configuration.render_executor_max_workers()

    @pytest.mark.parametrize("value", ["0", "-1.5", "nan"])
    def test_viewport_scale_must_be_positive(
        self, monkeypatch: pytest.MonkeyPatch, value: str
    ) -> None:
        monkeypatch.setenv("BACKDROP_VIEWPORT_SCALE", value)

        with pytest.raises(ValueError, match="BACKDROP_VIEWPORT_SCALE"):
            Configuration.viewport_scale()

    def test_frame_stats_flag(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("BACKDROP_FRAME_STATS", "yes")

        assert Configuration.frame_stats_enabled() is True
