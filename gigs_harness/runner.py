"""Run registered GIGS cases against a library's factories.

Usage:
    python -m gigs_harness.runner [series ...]

Each case runs in its own fixture tree. Results are printed one per line and
written to ``gigs_report.json`` and ``gigs_report.html`` in the report
directory.
"""
from __future__ import annotations

import dataclasses
import datetime as dt
import logging
import sys
from typing import Any, Dict, Iterable, List, Optional, Sequence, Tuple

from .configuration import ConfigurationRegistry
from .errors import AssertionMismatch, ConstructionError, UnsupportedCapability
from .factories import Factories
from .registry import CaseEntry, cases
from .report import generate_html, generate_json
from .settings import HarnessSettings, load_settings

logger = logging.getLogger(__name__)


@dataclasses.dataclass
class TestResult:
    __test__ = False  # not a pytest class

    status: str  # "pass", "fail", "skip"
    message: str
    details: Optional[Dict[str, Any]] = None


def run_case(entry: CaseEntry, factories: Factories, settings: Optional[HarnessSettings] = None) -> TestResult:
    settings = settings or HarnessSettings()
    configuration = ConfigurationRegistry.defaults(settings, entry.case_id)
    fixture = entry.fixture_type(factories, configuration, tolerance=settings.relative_tolerance)
    try:
        entry.routine(fixture)
    except UnsupportedCapability as exc:
        result = TestResult("skip", f"Unsupported: {exc}", {"state": fixture.state.value})
    except AssertionMismatch as exc:
        result = TestResult(
            "fail",
            str(exc),
            {"field": exc.field, "expected": exc.expected, "actual": exc.actual, "assertions": fixture.total_assertions()},
        )
    except ConstructionError as exc:
        result = TestResult("fail", f"Construction failed: {exc}", {"state": fixture.state.value})
    else:
        assertions = fixture.total_assertions()
        result = TestResult("pass", f"{assertions} assertions", {"assertions": assertions, "state": fixture.state.value})
    logger.info("%s %s %s", entry.case_id, result.status, result.message)
    return result


def run_all(
    factories: Factories,
    series: Optional[Iterable[int]] = None,
    settings: Optional[HarnessSettings] = None,
    echo: bool = False,
) -> List[Tuple[CaseEntry, TestResult]]:
    settings = settings or HarnessSettings()
    results: List[Tuple[CaseEntry, TestResult]] = []
    for entry in cases(series):
        try:
            result = run_case(entry, factories, settings)
        except Exception as exc:  # pylint: disable=broad-except
            logger.exception("Case %s raised", entry.case_id)
            result = TestResult("fail", f"Exception: {exc}")
        results.append((entry, result))
        if echo:
            print(f"{entry.case_id:<12} {result.status.upper():<5} {result.message}")
    return results


def default_factories() -> Factories:
    from .pyproj_factories import pyproj_factories  # pylint: disable=import-outside-toplevel

    return pyproj_factories()


def main(argv: Optional[Sequence[str]] = None) -> None:
    args = list(sys.argv[1:] if argv is None else argv)
    try:
        series = [int(arg) for arg in args]
    except ValueError:
        raise SystemExit(f"Series numbers expected, got {args}") from None

    logging.basicConfig(level=logging.WARNING)
    settings = load_settings()
    generated_at = dt.datetime.now(dt.timezone.utc)
    results = run_all(default_factories(), series or None, settings, echo=True)
    html_path = generate_html(results, generated_at, settings.report_dir)
    json_path = generate_json(results, generated_at, settings.report_dir)
    print(f"\nHTML report written to {html_path}")
    print(f"JSON report written to {json_path}")


if __name__ == "__main__":
    main()
