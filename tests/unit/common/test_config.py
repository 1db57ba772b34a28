"""Tests for common.config module."""

from pathlib import Path

import pytest

from common.config import (
    ClusterConfig,
    ConfigSingleton,
    PipelineConfig,
    TrendingConfig,
    find_config_path,
    load_config,
    parse_config,
)


class TestDefaults:
    def test_default_thresholds(self) -> None:
        config = PipelineConfig()
        assert config.cluster.min_overlap == 2
        assert config.cluster.jaccard_threshold == 0.20
        assert config.trending.min_sources == 3
        assert config.trending.hot_cutoff_hours == 4
        assert config.trending.max_stories == 10
        assert config.trending.inclusive_cutoff is True

    def test_invalid_jaccard_raises(self) -> None:
        with pytest.raises(ValueError):
            ClusterConfig(jaccard_threshold=0)

    def test_invalid_min_sources_raises(self) -> None:
        with pytest.raises(ValueError):
            TrendingConfig(min_sources=0)


class TestParseConfig:
    def test_partial_data_uses_defaults(self) -> None:
        config = parse_config({"trending": {"min_sources": 2}})
        assert config.trending.min_sources == 2
        assert config.trending.max_stories == 10
        assert config.cluster.min_overlap == 2

    def test_empty_sections(self) -> None:
        config = parse_config({"cluster": None})
        assert config.cluster.lookback_hours == 12


class TestLoadConfig:
    def test_loads_yaml_path(self, tmp_path: Path) -> None:
        path = tmp_path / "custom.yaml"
        path.write_text("cluster:\n  jaccard_threshold: 0.35\ntrending:\n  hot_cutoff_hours: 2\n")
        config = load_config(str(path))
        assert config.cluster.jaccard_threshold == 0.35
        assert config.trending.hot_cutoff_hours == 2

    def test_missing_file_raises(self, tmp_path: Path) -> None:
        with pytest.raises(FileNotFoundError):
            find_config_path("missing", config_dir=tmp_path)

    def test_env_var_selects_config(self, tmp_path: Path, monkeypatch) -> None:
        (tmp_path / "staging.yaml").write_text("{}\n")
        monkeypatch.setenv("CONFIG_ENV", "staging")
        assert find_config_path(None, config_dir=tmp_path) == tmp_path / "staging.yaml"

    def test_bundled_prod_config(self) -> None:
        config = load_config("prod")
        assert config.trending.min_sources == 3


class TestConfigSingleton:
    def test_lazy_load_set_and_reset(self) -> None:
        calls = []

        def loader() -> PipelineConfig:
            calls.append(1)
            return PipelineConfig()

        manager = ConfigSingleton(loader)
        first = manager.get()
        assert manager.get() is first
        assert len(calls) == 1

        custom = PipelineConfig(trending=TrendingConfig(min_sources=5))
        manager.set(custom)
        assert manager.get() is custom

        manager.reset()
        manager.get()
        assert len(calls) == 2

    def test_no_loader_raises(self) -> None:
        with pytest.raises(RuntimeError):
            ConfigSingleton().get()
