from __future__ import annotations

import json
from dataclasses import dataclass, replace
from pathlib import Path
from typing import Any, Dict

import yaml

from ncquad.errors import ConfigError
from ncquad.logging_setup import LOG_LEVELS
from ncquad.quadrature.types import RULE_NAMES

DEFAULT_RULE = "trapezoidal"
DEFAULT_LOG_LEVEL = "warning"


@dataclass(frozen=True)
class CalcConfig:
    rule: str = DEFAULT_RULE
    log_level: str = DEFAULT_LOG_LEVEL
    json_logs: bool = False

    def with_overrides(self, **overrides: Any) -> "CalcConfig":
        values = {k: v for k, v in overrides.items() if v is not None}
        return _checked(replace(self, **values))


_CURRENT_CONFIG = CalcConfig()


def get_current_config() -> CalcConfig:
    return _CURRENT_CONFIG


def set_current_config(cfg: CalcConfig) -> None:
    global _CURRENT_CONFIG
    _CURRENT_CONFIG = _checked(cfg)


def _checked(cfg: CalcConfig) -> CalcConfig:
    if cfg.rule not in RULE_NAMES:
        raise ConfigError(f"Unknown rule {cfg.rule!r}; expected one of {', '.join(RULE_NAMES)}")
    if cfg.log_level.lower() not in LOG_LEVELS:
        raise ConfigError(f"Unknown log level {cfg.log_level!r}; expected one of {', '.join(LOG_LEVELS)}")
    return cfg


def _from_dict(d: Dict[str, Any]) -> CalcConfig:
    logging_section = d.get("logging", {}) or {}
    if not isinstance(logging_section, dict):
        raise ConfigError("'logging' section must be a mapping")
    cfg = CalcConfig(
        rule=str(d.get("rule", DEFAULT_RULE)),
        log_level=str(logging_section.get("level", DEFAULT_LOG_LEVEL)).lower(),
        json_logs=bool(logging_section.get("json", False)),
    )
    return _checked(cfg)


def load_calc_config(path: str | Path) -> CalcConfig:
    """Read a YAML (.yaml/.yml) or JSON config file.

    Expected shape::

        rule: simpson13
        logging:
          level: info
          json: false
    """
    p = Path(path)
    if not p.exists():
        raise FileNotFoundError(p)
    text = p.read_text(encoding="utf-8")

    try:
        if p.suffix.lower() in {".yaml", ".yml"}:
            data = yaml.safe_load(text)
        else:
            data = json.loads(text)
    except (yaml.YAMLError, json.JSONDecodeError) as exc:
        raise ConfigError(f"Config {p} could not be parsed: {exc}") from exc

    if data is None:
        data = {}
    if not isinstance(data, dict):
        raise ConfigError(f"Config {p} must contain a mapping at top level")

    return _from_dict(data)
