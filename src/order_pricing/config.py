from __future__ import annotations

import logging
import os
import sys
from dataclasses import dataclass
from functools import lru_cache
from pathlib import Path
from typing import Any, Dict

if sys.version_info >= (3, 11):
    import tomllib
else:
    import tomli as tomllib

from .errors import ConfigError

logger = logging.getLogger(__name__)

PACKAGE_LOGGER = "order_pricing"
LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


@dataclass(frozen=True)
class Config:
    currency: str = "USD"
    log_level: str = "WARNING"


_ENV_PREFIX = "ORDER_PRICING_"


def _find_pyproject(start_dir: Path) -> Path | None:
    for directory in (start_dir, *start_dir.parents):
        candidate = directory / "pyproject.toml"
        if candidate.exists():
            return candidate
    return None


def _load_toml(path: Path) -> Dict[str, Any]:
    try:
        return tomllib.loads(path.read_text(encoding="utf-8"))
    except (OSError, tomllib.TOMLDecodeError) as exc:
        logger.warning("Ignoring unreadable %s: %s", path, exc)
        return {}


def _to_str(value: Any, default: str) -> str:
    if value is None:
        return default
    text = str(value).strip()
    return text or default


def _from_sources(raw: Dict[str, Any]) -> Config:
    currency = _to_str(os.getenv(f"{_ENV_PREFIX}CURRENCY", raw.get("currency")), "USD")
    log_level = _to_str(os.getenv(f"{_ENV_PREFIX}LOG_LEVEL", raw.get("log_level")), "WARNING")
    return Config(currency=currency.upper(), log_level=log_level.upper())


@lru_cache(maxsize=32)
def load_config(start_dir: str | os.PathLike[str] | None = None) -> Config:
    root = Path(start_dir or os.getcwd()).resolve()
    pyproject = _find_pyproject(root)
    if pyproject is None:
        return _from_sources({})

    parsed = _load_toml(pyproject)
    tool = parsed.get("tool", {})
    section = tool.get("order_pricing", {}) if isinstance(tool, dict) else {}
    return _from_sources(section if isinstance(section, dict) else {})


def get_config() -> Config:
    return load_config(os.getcwd())


def refresh_config(start_dir: str | os.PathLike[str] | None = None) -> Config:
    load_config.cache_clear()
    return load_config(start_dir)


def configure_logging(config: Config | None = None) -> logging.Logger:
    """Apply ``config.log_level`` to the package logger.

    Attaches a single stderr handler the first time it runs; calling it again
    only updates the level.
    """
    config = config or get_config()
    if not isinstance(logging.getLevelName(config.log_level), int):
        raise ConfigError(f"Unknown log level {config.log_level!r}")

    package_logger = logging.getLogger(PACKAGE_LOGGER)
    package_logger.setLevel(config.log_level)
    if not any(isinstance(h, logging.StreamHandler) for h in package_logger.handlers):
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        package_logger.addHandler(handler)
    return package_logger
