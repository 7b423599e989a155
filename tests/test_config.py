"""Tests for density settings and YAML loading."""

import logging

import pytest

from regionoutline import config as cfg
from regionoutline.config import DensityConfig, clear_cache, load_config
from regionoutline.errors import InvalidConfiguration


@pytest.fixture(autouse=True)
def _isolated_config(monkeypatch, tmp_path):
    monkeypatch.delenv(cfg.REGIONOUTLINE_CONFIG, raising=False)
    monkeypatch.setattr(cfg, "_user_config_path", lambda: tmp_path / "nope" / "config.yaml")
    clear_cache()
    yield
    clear_cache()


class TestDensityConfig:

    def test_defaults(self):
        c = DensityConfig()
        assert c.gap_between_points == 0.5
        assert c.vertical_gap == 1.0
        assert c.cuboid_lines and c.polygon_lines and c.cylinder_lines and c.ellipsoid_lines
        assert c.max_points is None

    @pytest.mark.parametrize("kwargs", [
        {"gap_between_points": 0},
        {"gap_between_points": -0.5},
        {"vertical_gap": 0.0},
        {"vertical_gap": -2},
        {"gap_between_points": "1"},
        {"vertical_gap": True},
        {"cuboid_lines": "yes"},
        {"max_points": -1},
        {"max_points": 2.5},
    ])
    def test_invalid_values_rejected(self, kwargs):
        with pytest.raises(InvalidConfiguration):
            DensityConfig(**kwargs)

    def test_invalid_configuration_is_value_error(self):
        with pytest.raises(ValueError):
            DensityConfig(gap_between_points=0)

    def test_mapping_round_trip(self):
        c = DensityConfig(gap_between_points=0.25, cylinder_lines=False, max_points=100)
        m = c.to_mapping()
        assert m["gapBetweenPoints"] == 0.25
        assert m["cylinderLines"] is False
        assert m["maxPoints"] == 100
        assert DensityConfig.from_mapping(m) == c

    def test_unknown_keys_ignored(self, caplog):
        with caplog.at_level(logging.WARNING, logger="regionoutline.config"):
            c = DensityConfig.from_mapping({"particleEffect": "REDSTONE", "verticalGap": 2})
        assert c.vertical_gap == 2
        assert "particleEffect" in caplog.text


class TestLoadConfig:

    def test_bundled_defaults(self):
        c = load_config()
        assert c.gap_between_points == 0.5
        assert c.vertical_gap == 1.0
        assert c.max_points == 20000

    def test_explicit_path(self, tmp_path):
        path = tmp_path / "wesv.yaml"
        path.write_text("gapBetweenPoints: 2\nellipsoidLines: false\n", encoding="utf-8")
        c = load_config(path)
        assert c.gap_between_points == 2
        assert c.ellipsoid_lines is False
        assert c.cuboid_lines is True

    def test_missing_explicit_path(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            load_config(tmp_path / "missing.yaml")

    def test_env_var_override(self, tmp_path, monkeypatch):
        path = tmp_path / "env.yaml"
        path.write_text("verticalGap: 3.5\n", encoding="utf-8")
        monkeypatch.setenv(cfg.REGIONOUTLINE_CONFIG, str(path))
        assert load_config().vertical_gap == 3.5

    def test_user_config_used_before_bundled(self, tmp_path, monkeypatch):
        path = tmp_path / "user.yaml"
        path.write_text("cuboidLines: false\n", encoding="utf-8")
        monkeypatch.setattr(cfg, "_user_config_path", lambda: path)
        assert load_config().cuboid_lines is False

    def test_empty_file_gives_defaults(self, tmp_path):
        path = tmp_path / "empty.yaml"
        path.write_text("", encoding="utf-8")
        assert load_config(path) == DensityConfig()

    def test_non_mapping_rejected(self, tmp_path):
        path = tmp_path / "list.yaml"
        path.write_text("- 1\n- 2\n", encoding="utf-8")
        with pytest.raises(InvalidConfiguration):
            load_config(path)

    def test_invalid_value_rejected(self, tmp_path):
        path = tmp_path / "bad.yaml"
        path.write_text("gapBetweenPoints: 0\n", encoding="utf-8")
        with pytest.raises(InvalidConfiguration):
            load_config(path)

    def test_results_cached_until_cleared(self, tmp_path):
        path = tmp_path / "cached.yaml"
        path.write_text("verticalGap: 1.5\n", encoding="utf-8")
        assert load_config(path).vertical_gap == 1.5
        path.write_text("verticalGap: 4\n", encoding="utf-8")
        assert load_config(path).vertical_gap == 1.5
        clear_cache()
        assert load_config(path).vertical_gap == 4
