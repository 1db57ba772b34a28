"""Pipeline configuration loaded from YAML."""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Callable, Generic, TypeVar

import yaml

T = TypeVar("T")

# Config directory at the repository root
CONFIG_DIR = Path(__file__).resolve().parents[2] / "configs"


@dataclass
class ClusterConfig:
    min_overlap: int = 2
    jaccard_threshold: float = 0.20
    lookback_hours: float = 12

    def __post_init__(self) -> None:
        if self.min_overlap < 1:
            raise ValueError(f"min_overlap must be >= 1, got {self.min_overlap}")
        if not 0.0 < self.jaccard_threshold <= 1.0:
            raise ValueError(
                f"jaccard_threshold must be in (0, 1], got {self.jaccard_threshold}"
            )
        if self.lookback_hours <= 0:
            raise ValueError(f"lookback_hours must be > 0, got {self.lookback_hours}")


@dataclass
class TrendingConfig:
    min_sources: int = 3
    hot_cutoff_hours: float = 4
    max_stories: int = 10
    inclusive_cutoff: bool = True

    def __post_init__(self) -> None:
        if self.min_sources < 1:
            raise ValueError(f"min_sources must be >= 1, got {self.min_sources}")
        if self.hot_cutoff_hours <= 0:
            raise ValueError(f"hot_cutoff_hours must be > 0, got {self.hot_cutoff_hours}")
        if self.max_stories < 1:
            raise ValueError(f"max_stories must be >= 1, got {self.max_stories}")


@dataclass
class PromoConfig:
    enabled: bool = True
    threshold: int = 3


@dataclass
class OutputConfig:
    output_dir: str = "output"
    canonical_prefix: str = "canonical_records"
    trending_prefix: str = "trending_stories"


@dataclass
class PipelineConfig:
    cluster: ClusterConfig = field(default_factory=ClusterConfig)
    trending: TrendingConfig = field(default_factory=TrendingConfig)
    promo: PromoConfig = field(default_factory=PromoConfig)
    output: OutputConfig = field(default_factory=OutputConfig)


def find_config_path(
    config_name: str | None,
    config_dir: Path = CONFIG_DIR,
    default_name: str = "prod",
    env_var: str | None = "CONFIG_ENV",
) -> Path:
    """Find config file path, checking env var and defaults.

    Args:
        config_name: Name of config (without .yaml), a path to a YAML file, or None for default
        config_dir: Directory containing config files
        default_name: Default config name if config_name is None
        env_var: Environment variable to check for config name

    Returns:
        Path to the config file

    Raises:
        FileNotFoundError: If config file doesn't exist
    """
    if config_name is None:
        config_name = os.environ.get(env_var, default_name) if env_var else default_name

    if "/" in config_name or config_name.endswith((".yaml", ".yml")):
        config_path = Path(config_name)
    else:
        config_path = config_dir / f"{config_name}.yaml"

    if not config_path.exists():
        raise FileNotFoundError(f"Config file not found: {config_path}")

    return config_path


def load_yaml(path: Path) -> dict:
    """Load YAML file and return dict."""
    with open(path) as f:
        return yaml.safe_load(f) or {}


def parse_config(data: dict) -> PipelineConfig:
    """Parse config dictionary into PipelineConfig object."""
    cluster_data = data.get("cluster", {}) or {}
    trending_data = data.get("trending", {}) or {}
    promo_data = data.get("promo", {}) or {}
    output_data = data.get("output", {}) or {}

    cluster = ClusterConfig(
        min_overlap=cluster_data.get("min_overlap", 2),
        jaccard_threshold=cluster_data.get("jaccard_threshold", 0.20),
        lookback_hours=cluster_data.get("lookback_hours", 12),
    )

    trending = TrendingConfig(
        min_sources=trending_data.get("min_sources", 3),
        hot_cutoff_hours=trending_data.get("hot_cutoff_hours", 4),
        max_stories=trending_data.get("max_stories", 10),
        inclusive_cutoff=trending_data.get("inclusive_cutoff", True),
    )

    promo = PromoConfig(
        enabled=promo_data.get("enabled", True),
        threshold=promo_data.get("threshold", 3),
    )

    output = OutputConfig(
        output_dir=output_data.get("output_dir", "output"),
        canonical_prefix=output_data.get("canonical_prefix", "canonical_records"),
        trending_prefix=output_data.get("trending_prefix", "trending_stories"),
    )

    return PipelineConfig(cluster=cluster, trending=trending, promo=promo, output=output)


def load_config(config_name: str | None = None) -> PipelineConfig:
    """Load pipeline configuration from YAML file.

    Args:
        config_name: Name of config file (without .yaml extension) or a path.
                    If None, uses CONFIG_ENV env var or "prod".

    Returns:
        Loaded PipelineConfig object
    """
    return parse_config(load_yaml(find_config_path(config_name)))


class ConfigSingleton(Generic[T]):
    """Generic config singleton manager.

    Provides get/set/reset pattern for managing a global config instance.
    """

    def __init__(self, loader: Callable[[], T] | None = None):
        self._config: T | None = None
        self._loader = loader

    def get(self) -> T:
        """Get the config, loading it lazily if needed."""
        if self._config is None:
            if self._loader is None:
                raise RuntimeError("No config loaded and no loader set")
            self._config = self._loader()
        return self._config

    def set(self, config: T) -> None:
        """Set the config directly."""
        self._config = config

    def reset(self) -> None:
        """Reset the config, forcing reload on next get()."""
        self._config = None


_manager: ConfigSingleton[PipelineConfig] = ConfigSingleton(load_config)
get_config = _manager.get
set_config = _manager.set
reset_config = _manager.reset
