"""Registry of case routines keyed by ``(series, code)``."""
from __future__ import annotations

import functools
import importlib
from dataclasses import dataclass
from typing import Callable, Dict, Iterable, List, Optional, Tuple, Type

from .errors import ConfigurationMisuseError

_CASES: Dict[Tuple[int, int], "CaseEntry"] = {}

FAMILY_MODULES = (
    "gigs_harness.fixtures.ellipsoid",
    "gigs_harness.fixtures.prime_meridian",
    "gigs_harness.fixtures.geodetic_datum",
    "gigs_harness.fixtures.geodetic_crs",
    "gigs_harness.fixtures.conversion",
    "gigs_harness.fixtures.projected_crs",
    "gigs_harness.fixtures.transformation",
    "gigs_harness.fixtures.vertical_datum",
    "gigs_harness.fixtures.vertical_crs",
    "gigs_harness.fixtures.vertical_transformation",
    "gigs_harness.fixtures.concatenated_operation",
    "gigs_harness.predefined",
)


@dataclass(frozen=True)
class CaseEntry:
    series: int
    code: int
    name: str
    fixture_type: Type
    routine: Callable

    @property
    def case_id(self) -> str:
        return f"{self.series}.{self.code}"

    @property
    def kind(self) -> str:
        return self.fixture_type.kind


def case(fixture_type: Type, code: int, name: str):
    """Register ``func`` as the routine building case ``code`` of ``fixture_type``.

    The wrapped routine sets the identity, lets ``func`` fill the defining
    values, then calls ``verify()`` (a no-op on skipped fixtures).
    """

    def decorator(func: Callable) -> Callable:
        @functools.wraps(func)
        def routine(fixture) -> None:
            fixture.set_identity(code, name)
            func(fixture)
            fixture.verify()

        routine.fixture_type = fixture_type  # type: ignore[attr-defined]
        routine.code = code  # type: ignore[attr-defined]
        register(CaseEntry(fixture_type.series, code, name, fixture_type, routine))
        return routine

    return decorator


def register(entry: CaseEntry) -> None:
    key = (entry.series, entry.code)
    existing = _CASES.get(key)
    if existing is not None and existing.name != entry.name:
        raise ConfigurationMisuseError(f"Case {entry.case_id} registered twice")
    _CASES[key] = entry


def load_families(modules: Iterable[str] = FAMILY_MODULES) -> None:
    for module in modules:
        importlib.import_module(module)


def cases(series: Optional[Iterable[int]] = None) -> List[CaseEntry]:
    load_families()
    wanted = set(series) if series else None
    return [entry for key, entry in sorted(_CASES.items()) if wanted is None or key[0] in wanted]


def get_case(series: int, code: int) -> CaseEntry:
    load_families()
    try:
        return _CASES[(series, code)]
    except KeyError:
        raise ConfigurationMisuseError(f"No case {series}.{code}") from None


def find_case(case_id: str) -> CaseEntry:
    """Look up ``"3204.66001"`` style identifiers."""

    try:
        series, code = (int(part) for part in case_id.split("."))
    except ValueError:
        raise ConfigurationMisuseError(f"Malformed case id: {case_id!r}") from None
    return get_case(series, code)
