"""Engine configuration: dataclass defaults, TOML file and env overrides.

Example ``checkie.toml``::

    log_level = "DEBUG"

    [search]
    depth = 6
    time_limit_ms = 2000

    [rules]
    men_capture_backward = false
"""

from __future__ import annotations

import logging
import os
import tomllib
from dataclasses import dataclass, field, fields
from pathlib import Path
from typing import Any

from checkie.core.move_generator import Variant
from checkie.engine.search import DEFAULT_SEARCH_DEPTH, SearchLimits

_LOGGER = logging.getLogger(__name__)

CONFIG_PATH_ENV = "CHECKIE_CONFIG_TOML"
DEPTH_ENV = "CHECKIE_SEARCH_DEPTH"
LOG_LEVEL_ENV = "CHECKIE_LOG_LEVEL"
DEFAULT_CONFIG_PATH = "checkie.toml"


@dataclass
class SearchConfig:
    depth: int = DEFAULT_SEARCH_DEPTH
    time_limit_ms: int | None = None  # None means depth-only
    seed: int | None = None  # None means non-reproducible tie-breaks

    def limits(self) -> SearchLimits:
        return SearchLimits(max_depth=self.depth, time_limit_ms=self.time_limit_ms)


@dataclass
class RulesConfig:
    men_capture_backward: bool = False

    def variant(self) -> Variant:
        return Variant(men_capture_backward=self.men_capture_backward)


@dataclass
class Config:
    search: SearchConfig = field(default_factory=SearchConfig)
    rules: RulesConfig = field(default_factory=RulesConfig)
    log_level: str = "INFO"

    @staticmethod
    def load_from_toml(path: str | os.PathLike[str]) -> Config:
        """Defaults merged with the tables of the TOML file at *path*."""
        cfg = Config()
        config_path = Path(path)
        if not config_path.is_file():
            return cfg
        with config_path.open("rb") as f:
            raw = tomllib.load(f)

        _merge(cfg.search, raw.get("search", {}), "search")
        _merge(cfg.rules, raw.get("rules", {}), "rules")
        if "log_level" in raw:
            cfg.log_level = str(raw["log_level"])
        return cfg


def _merge(target: object, values: dict[str, Any], section: str) -> None:
    known = {f.name for f in fields(target)}  # type: ignore[arg-type]
    for key, value in values.items():
        if key not in known:
            _LOGGER.warning("Ignoring unknown config key %s.%s", section, key)
            continue
        setattr(target, key, value)


def load_config(path: str | os.PathLike[str] | None = None) -> Config:
    """Load configuration from *path* (or ``$CHECKIE_CONFIG_TOML``) plus env overrides."""
    if path is None:
        path = os.environ.get(CONFIG_PATH_ENV, DEFAULT_CONFIG_PATH)
    cfg = Config.load_from_toml(path)

    override_depth = os.environ.get(DEPTH_ENV)
    if override_depth:
        try:
            cfg.search.depth = int(override_depth)
        except ValueError:
            raise ValueError(f"{DEPTH_ENV} must be an integer: {override_depth!r}") from None

    override_level = os.environ.get(LOG_LEVEL_ENV)
    if override_level:
        cfg.log_level = override_level

    if cfg.search.depth <= 0:
        raise ValueError(f"Search depth must be >= 1, got {cfg.search.depth}")
    return cfg
