"""Tolerance and identification checks applied to objects built by the library.

The accessors below read identification from any object exposing ``name`` and
either ``to_json_dict()`` (pyproj objects) or ``identifiers`` / ``aliases``
attributes.
"""
from __future__ import annotations

import logging
from typing import Any, Iterable, List, Optional, Sequence, Set, Tuple

import numpy as np
from pyproj import CRS
from pyproj.crs import Ellipsoid, PrimeMeridian

from .configuration import ConfigurationRegistry, Option
from .errors import AssertionMismatch
from .identity import GIGS

logger = logging.getLogger(__name__)

RELATIVE_TOLERANCE = 1e-7
GREENWICH_CODE = 8901


def within_tolerance(actual: float, expected: float, factor: float = RELATIVE_TOLERANCE) -> bool:
    """Return True if ``|actual - expected| <= factor * |expected|``.

    A zero ``expected`` therefore requires an exact match.
    """

    return bool(np.isclose(float(actual), float(expected), rtol=factor, atol=0.0))


def _json_of(obj: Any) -> dict:
    to_json = getattr(obj, "to_json_dict", None)
    if to_json is None:
        return {}
    try:
        data = to_json()
    except Exception:  # pylint: disable=broad-except
        logger.debug("to_json_dict() failed on %r", obj, exc_info=True)
        return {}
    return data if isinstance(data, dict) else {}


def name_of(obj: Any) -> Optional[str]:
    if obj is None:
        return None
    name = getattr(obj, "name", None)
    if name is None:
        name = _json_of(obj).get("name")
    return name


def identifiers_of(obj: Any) -> List[Tuple[str, str]]:
    """Return ``(codespace, code)`` pairs, codes as strings."""

    if obj is None:
        return []
    pairs: List[Tuple[str, str]] = []
    declared = getattr(obj, "identifiers", None)
    if declared is not None:
        for codespace, code in declared:
            pairs.append((str(codespace), str(code)))
        return pairs
    data = _json_of(obj)
    entries = list(data.get("ids") or [])
    if data.get("id"):
        entries.insert(0, data["id"])
    for entry in entries:
        pairs.append((str(entry.get("authority")), str(entry.get("code"))))
    return pairs


def aliases_of(obj: Any) -> Set[str]:
    if obj is None:
        return set()
    aliases = getattr(obj, "aliases", None)
    if aliases is None:
        aliases = _json_of(obj).get("aliases") or ()
    return {str(alias) for alias in aliases}


def anchor_of(obj: Any) -> Optional[str]:
    anchor = getattr(obj, "anchor", None)
    if anchor is None:
        anchor = _json_of(obj).get("anchor")
    return anchor


class Verifier:
    """Assertions for one fixture, gated by that fixture's configuration.

    ``context`` needs a ``configuration`` registry and an integer
    ``assertions`` counter; every executed check increments the counter.
    """

    def __init__(self, context: Any, tolerance: float = RELATIVE_TOLERANCE):
        self.context = context
        self.tolerance = tolerance

    @property
    def configuration(self) -> ConfigurationRegistry:
        return self.context.configuration

    def _tick(self) -> None:
        self.context.assertions += 1

    def fail(self, field: str, expected: Any, actual: Any, detail: Optional[str] = None) -> None:
        raise AssertionMismatch(field, expected, actual, detail)

    def not_none(self, field: str, actual: Any) -> Any:
        self._tick()
        if actual is None:
            self.fail(field, "a non-null object", None)
        return actual

    def equal(self, field: str, expected: Any, actual: Any) -> None:
        self._tick()
        if expected != actual:
            self.fail(field, expected, actual)

    def quantity(self, field: str, actual: Optional[float], expected: float, factor: Optional[float] = None) -> None:
        """Tolerance comparison that always runs, used on unit-converted values."""

        self._tick()
        factor = self.tolerance if factor is None else factor
        if actual is None:
            self.fail(field, expected, None)
        if not within_tolerance(actual, expected, factor):
            self.fail(field, expected, actual, f"relative tolerance {factor}")

    def numeric(self, field: str, actual: Optional[float], expected: float, factor: Optional[float] = None) -> None:
        """Compare a user-supplied value, skipped unless the factory preserves user values."""

        if not self.configuration.get(Option.FACTORY_PRESERVING_USER_VALUES):
            return
        self.quantity(field, actual, expected, factor)

    def identification(
        self,
        obj: Any,
        name: Optional[str] = None,
        code: Optional[int] = None,
        aliases: Optional[Iterable[str]] = None,
        codespace: str = GIGS,
    ) -> None:
        if obj is None or self.configuration.get(Option.SKIP_IDENTIFICATION_CHECK):
            return
        if name is not None:
            self.equal("name", name, name_of(obj))
        if aliases:
            self._check_aliases(obj, aliases)
        if code is not None:
            self._tick()
            expected = (codespace.upper(), str(code))
            found = [(space.upper(), value) for space, value in identifiers_of(obj)]
            if expected not in found:
                self.fail("identifiers", f"{codespace}:{code}", found)

    def authority_identification(
        self,
        obj: Any,
        name: Optional[str],
        code: int,
        aliases: Sequence[str] = (),
        codespace: str = "EPSG",
    ) -> None:
        """Identification of a predefined object, gated by the standard-name options."""

        if obj is None or self.configuration.get(Option.SKIP_IDENTIFICATION_CHECK):
            return
        if name is not None and self.configuration.get(Option.STANDARD_NAME_SUPPORTED):
            self.equal("name", name, name_of(obj))
        if aliases and self.configuration.get(Option.STANDARD_ALIAS_SUPPORTED):
            self._check_aliases(obj, aliases)
        self.identification(obj, code=code, codespace=codespace)

    def _check_aliases(self, obj: Any, aliases: Iterable[str]) -> None:
        self._tick()
        missing = sorted(set(aliases) - aliases_of(obj))
        if missing:
            self.fail("aliases", sorted(aliases), sorted(aliases_of(obj)), f"missing {missing}")

    def axes(self, field: str, actual_axes: Sequence[Any], expected: Sequence[Tuple[str, str]]) -> None:
        """Compare axis ``(direction, unit_name)`` pairs in order."""

        self.equal(f"{field}.dimension", len(expected), len(actual_axes))
        for index, (direction, unit_name) in enumerate(expected):
            axis = actual_axes[index]
            self.equal(f"{field}.axis[{index}].direction", direction, str(axis.direction).lower())
            self.equal(f"{field}.axis[{index}].unit", unit_name, axis.unit_name)


def crs_member_of(obj: Any, key: str) -> Any:
    """CRS member ``key`` of an operation, read back from PROJJSON when not an attribute."""

    value = getattr(obj, key, None)
    if value is not None:
        return value
    data = _json_of(obj).get(key)
    if not data:
        return None
    return CRS.from_json_dict(data)


def _member_of(datum: Any, key: str, json_type: str) -> Optional[dict]:
    data = _json_of(datum).get(key)
    if not data:
        return None
    # Nested PROJJSON members omit their type.
    return dict(data, type=data.get("type", json_type))


def ellipsoid_of(datum: Any) -> Any:
    """Ellipsoid of a datum or datum ensemble.

    When PROJ returns no ellipsoid for the datum object (an ensemble,
    typically), it is read back from the PROJJSON description.
    """

    if datum is None:
        return None
    value = getattr(datum, "ellipsoid", None)
    if value is not None:
        return value
    data = _member_of(datum, "ellipsoid", "Ellipsoid")
    return Ellipsoid.from_json_dict(data) if data else None


def prime_meridian_of(datum: Any) -> Any:
    """Prime meridian of a datum or datum ensemble; PROJJSON leaves out Greenwich."""

    if datum is None:
        return None
    value = getattr(datum, "prime_meridian", None)
    if value is not None:
        return value
    if not _json_of(datum):
        return None
    data = _member_of(datum, "prime_meridian", "PrimeMeridian")
    return PrimeMeridian.from_json_dict(data) if data else PrimeMeridian.from_epsg(GREENWICH_CODE)
