"""Series 3203: user-defined prime meridians."""
from __future__ import annotations

import logging
from typing import Any, Optional

from ..configuration import Option
from ..errors import NoSuchIdentifierError, UnsupportedCapability
from ..units import DEGREE, GRAD, Unit, is_sexagesimal, sexagesimal_to_degrees
from .base import FixtureNode

logger = logging.getLogger(__name__)


class PrimeMeridianFixture(FixtureNode[Any]):
    """Greenwich longitude, possibly in a unit only the unit authority knows.

    When ``unit_code`` names a unit the library cannot supply (sexagesimal
    degrees, typically), the meridian is built from ``longitude_degrees``.
    """

    series = 3203
    kind = "prime_meridian"

    def __init__(self, *args, **kwargs):
        super().__init__(*args, **kwargs)
        self.longitude = 0.0
        self.unit: Unit = DEGREE
        self.unit_code: Optional[int] = None
        self.longitude_degrees = 0.0
        self._built_longitude: Optional[float] = None
        self._built_unit: Optional[Unit] = None

    def define(self, longitude, unit=DEGREE, longitude_degrees=None, unit_code=None):
        self.longitude = longitude
        self.unit = unit
        self.unit_code = unit_code
        self.longitude_degrees = longitude if longitude_degrees is None else longitude_degrees

    def _unit(self):
        if self.unit_code is None:
            return self.longitude, self.unit
        try:
            return self.longitude, self.factories.require("unit_authority").create_unit(str(self.unit_code))
        except (NoSuchIdentifierError, UnsupportedCapability) as exc:
            logger.debug("Unit %s unavailable (%s); using decimal degrees", self.unit_code, exc)
            return self.longitude_degrees, DEGREE

    def construct(self):
        factory = self.factories.require("datum_factory")
        self._built_longitude, self._built_unit = self._unit()
        return factory.create_prime_meridian(self.properties(), self._built_longitude, self._built_unit)

    def check(self, obj) -> None:
        identity = self.identity
        v = self.verifier
        v.identification(obj, identity.name, identity.code)
        if self._built_unit is not None:
            v.numeric("greenwich_longitude", obj.longitude, self._built_longitude)
            if self.configuration.get(Option.FACTORY_PRESERVING_USER_VALUES):
                v.equal("angular_unit", self._built_unit.name, obj.unit_name)
        v.numeric("greenwich_longitude (degree)", _in_degrees(obj), self.longitude_degrees)


def _in_degrees(obj) -> float:
    if is_sexagesimal(obj.unit_name):
        return sexagesimal_to_degrees(obj.longitude)
    return obj.longitude * obj.unit_conversion_factor / DEGREE.factor


@PrimeMeridianFixture.case(68901, "GIGS PM A")
def gigs_68901(fixture: PrimeMeridianFixture) -> None:
    fixture.define(0.0)


@PrimeMeridianFixture.case(68908, "GIGS PM D")
def gigs_68908(fixture: PrimeMeridianFixture) -> None:
    fixture.define(106.482779, longitude_degrees=106.807719444444, unit_code=9110)


@PrimeMeridianFixture.case(68903, "GIGS PM H")
def gigs_68903(fixture: PrimeMeridianFixture) -> None:
    fixture.define(2.5969213, unit=GRAD, longitude_degrees=2.33722917)


@PrimeMeridianFixture.case(68904, "GIGS PM I")
def gigs_68904(fixture: PrimeMeridianFixture) -> None:
    fixture.define(-74.04513, longitude_degrees=-74.08091666667, unit_code=9110)
