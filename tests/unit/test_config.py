"""Unit tests for configuration loading."""

import pytest
import yaml

from edgebundle.config import CATEGORY10, BundleConfig, default_config_path, load_config
from edgebundle.core.exceptions import ConfigError


class TestBundleConfig:
    def test_defaults(self):
        config = BundleConfig()
        assert config.width == 800
        assert config.radius == 400
        assert config.leaf_radius == 300
        assert config.relationship_types == ["Member Of", "Contributes To", "Depends On", "Reviews"]
        assert config.palette == CATEGORY10
        assert config.opacity.dimmed == pytest.approx(0.05)
        assert config.bands is None

    def test_width_must_leave_room_for_ring(self):
        with pytest.raises(ValueError):
            BundleConfig(width=150)

    def test_opacity_range(self):
        with pytest.raises(ValueError):
            BundleConfig(opacity={"dimmed": 1.5})

    def test_beta_range(self):
        with pytest.raises(ValueError):
            BundleConfig(bundle_beta=2)


class TestLoadConfig:
    def test_no_file_gives_defaults(self, tmp_path, monkeypatch):
        monkeypatch.chdir(tmp_path)
        assert load_config() == BundleConfig()

    def test_project_file_is_picked_up(self, tmp_path, monkeypatch):
        monkeypatch.chdir(tmp_path)
        path = default_config_path(tmp_path)
        path.parent.mkdir()
        path.write_text(yaml.dump({"width": 1000, "title": "Org chart", "version": "1.0"}))

        config = load_config()
        assert config.width == 1000
        assert config.title == "Org chart"

    def test_explicit_missing_file(self, tmp_path):
        with pytest.raises(ConfigError, match="file not found"):
            load_config(tmp_path / "missing.yaml")

    def test_invalid_yaml(self, tmp_path):
        path = tmp_path / "config.yaml"
        path.write_text("width: [unclosed")
        with pytest.raises(ConfigError):
            load_config(path)

    def test_top_level_must_be_mapping(self, tmp_path):
        path = tmp_path / "config.yaml"
        path.write_text("- a\n- b\n")
        with pytest.raises(ConfigError, match="mapping"):
            load_config(path)

    def test_invalid_values(self, tmp_path):
        path = tmp_path / "config.yaml"
        path.write_text(yaml.dump({"palette": []}))
        with pytest.raises(ConfigError):
            load_config(path)

    def test_empty_file_gives_defaults(self, tmp_path):
        path = tmp_path / "config.yaml"
        path.write_text("")
        assert load_config(path) == BundleConfig()
