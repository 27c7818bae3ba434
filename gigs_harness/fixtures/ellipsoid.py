"""Series 3202: user-defined ellipsoids."""
from __future__ import annotations

from typing import Any

from ..units import KILOMETRE, METRE, US_SURVEY_FOOT, Unit
from .base import FixtureNode


class EllipsoidFixture(FixtureNode[Any]):
    series = 3202
    kind = "ellipsoid"

    def __init__(self, *args, **kwargs):
        super().__init__(*args, **kwargs)
        self.semi_major_axis = 0.0
        self.semi_minor_axis = 0.0
        self.inverse_flattening = 0.0
        self.ivf_definitive = False
        self.unit: Unit = METRE

    def define(self, semi_major_axis, semi_minor_axis, inverse_flattening, unit=METRE, ivf_definitive=True):
        self.semi_major_axis = semi_major_axis
        self.semi_minor_axis = semi_minor_axis
        self.inverse_flattening = inverse_flattening
        self.unit = unit
        self.ivf_definitive = ivf_definitive

    def construct(self):
        factory = self.factories.require("datum_factory")
        properties = self.properties()
        if self.ivf_definitive:
            return factory.create_flattened_sphere(properties, self.semi_major_axis, self.inverse_flattening, self.unit)
        return factory.create_ellipsoid(properties, self.semi_major_axis, self.semi_minor_axis, self.unit)

    def check(self, obj) -> None:
        identity = self.identity
        v = self.verifier
        v.identification(obj, identity.name, identity.code)
        v.numeric("semi_major_axis", obj.semi_major_metre, self.unit.convert_to(self.semi_major_axis, METRE))
        if self.ivf_definitive:
            v.numeric("inverse_flattening", obj.inverse_flattening, self.inverse_flattening)
        else:
            v.numeric("semi_minor_axis", obj.semi_minor_metre, self.unit.convert_to(self.semi_minor_axis, METRE))


@EllipsoidFixture.case(67030, "GIGS ellipsoid A")
def gigs_67030(fixture: EllipsoidFixture) -> None:
    fixture.define(6378137.0, 6356752.3, 298.257223563)


@EllipsoidFixture.case(67001, "GIGS ellipsoid B")
def gigs_67001(fixture: EllipsoidFixture) -> None:
    fixture.define(6377563.396, 6356256.909, 299.3249646)


@EllipsoidFixture.case(67004, "GIGS ellipsoid C")
def gigs_67004(fixture: EllipsoidFixture) -> None:
    fixture.define(6377397.155, 6356078.963, 299.1528128)


@EllipsoidFixture.case(67022, "GIGS ellipsoid E")
def gigs_67022(fixture: EllipsoidFixture) -> None:
    fixture.define(6378388.0, 6356911.9, 297.0)


@EllipsoidFixture.case(67019, "GIGS ellipsoid F")
def gigs_67019(fixture: EllipsoidFixture) -> None:
    fixture.define(6378.137, 6356.752, 298.257222101, unit=KILOMETRE)


@EllipsoidFixture.case(67011, "GIGS ellipsoid H")
def gigs_67011(fixture: EllipsoidFixture) -> None:
    fixture.define(6378249.2, 6356515.0, 293.466, ivf_definitive=False)


@EllipsoidFixture.case(67008, "GIGS ellipsoid J")
def gigs_67008(fixture: EllipsoidFixture) -> None:
    fixture.define(20925832.164, 20854892.017, 294.978698214, unit=US_SURVEY_FOOT)


@EllipsoidFixture.case(67036, "GIGS ellipsoid K")
def gigs_67036(fixture: EllipsoidFixture) -> None:
    fixture.define(6378160.0, 6356774.5, 298.247167427)


@EllipsoidFixture.case(67003, "GIGS ellipsoid X")
def gigs_67003(fixture: EllipsoidFixture) -> None:
    fixture.define(6378160.0, 6356774.7, 298.25)


@EllipsoidFixture.case(67024, "GIGS ellipsoid Y")
def gigs_67024(fixture: EllipsoidFixture) -> None:
    fixture.define(6378245.0, 6356863.0, 298.3)
