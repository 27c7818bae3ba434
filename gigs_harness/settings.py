"""Process-wide settings for a harness run.

Values come from built-in defaults, then an optional YAML file named by the
``GIGS_CONFIG`` environment variable (``gigs.yaml`` in the working directory
when unset), then individual environment variables.
The YAML file looks like::

    relative_tolerance: 1.0e-7
    report_dir: tests/gigs
    options:
      factory_preserving_user_values: false
    tests:
      "3204.66001":
        standard_alias_supported: false
"""
from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Any, Dict, Optional

import yaml
from pydantic import BaseModel, Field

from .configuration import OPTION_NAMES

logger = logging.getLogger(__name__)

DEFAULT_RELATIVE_TOLERANCE = 1e-7
DEFAULT_REPORT_DIR = Path("tests/gigs")
DEFAULT_CONFIG = Path("gigs.yaml")


class HarnessSettings(BaseModel):
    relative_tolerance: float = Field(DEFAULT_RELATIVE_TOLERANCE, gt=0)
    report_dir: Path = DEFAULT_REPORT_DIR
    options: Dict[str, bool] = Field(default_factory=dict)
    tests: Dict[str, Dict[str, bool]] = Field(default_factory=dict)

    def option_values(self, test_id: Optional[str] = None) -> Dict[str, bool]:
        """Global option values merged with the overrides of ``test_id``."""

        values = dict(self.options)
        if test_id is not None:
            values.update(self.tests.get(test_id, {}))
        return values


def filter_options(values: Dict[str, Any], where: str) -> Dict[str, bool]:
    kept: Dict[str, bool] = {}
    for key, value in values.items():
        if key not in OPTION_NAMES:
            logger.warning("Unknown configuration key %r in %s, ignored.", key, where)
            continue
        if not isinstance(value, bool):
            logger.warning("The %r option in %s is not a boolean, ignored.", key, where)
            continue
        kept[key] = value
    return kept


def _read_yaml(path: Path) -> Dict[str, Any]:
    try:
        with path.open("r", encoding="utf-8") as handle:
            data = yaml.safe_load(handle) or {}
    except OSError as exc:
        # More cases than intended may run; that only produces extra failures.
        logger.warning("Can not load %s: %s", path, exc)
        return {}
    if not isinstance(data, dict):
        logger.warning("Ignoring %s: top-level YAML value must be a mapping.", path)
        return {}
    return data


def load_settings(path: Optional[Path] = None) -> HarnessSettings:
    """Load settings from ``path`` (or ``$GIGS_CONFIG``) and the environment."""

    raw: Dict[str, Any] = {}
    config_path = path or (Path(os.environ["GIGS_CONFIG"]) if os.getenv("GIGS_CONFIG") else None)
    if config_path is None and DEFAULT_CONFIG.is_file():
        config_path = DEFAULT_CONFIG
    if config_path is not None:
        raw = _read_yaml(config_path)

    options = filter_options(raw.get("options") or {}, "options")
    tests: Dict[str, Dict[str, bool]] = {}
    for test_id, overrides in (raw.get("tests") or {}).items():
        if not isinstance(overrides, dict):
            logger.warning("Invalid syntax for test-specific options of %r, ignored.", test_id)
            continue
        tests[str(test_id)] = filter_options(overrides, f"tests.{test_id}")

    settings: Dict[str, Any] = {"options": options, "tests": tests}
    if raw.get("relative_tolerance") is not None:
        settings["relative_tolerance"] = raw["relative_tolerance"]
    if raw.get("report_dir") is not None:
        settings["report_dir"] = raw["report_dir"]

    env_tolerance = os.getenv("GIGS_RELATIVE_TOLERANCE")
    if env_tolerance:
        settings["relative_tolerance"] = float(env_tolerance)
    env_report_dir = os.getenv("GIGS_REPORT_DIR")
    if env_report_dir:
        settings["report_dir"] = env_report_dir

    return HarnessSettings(**settings)
