"""Series 3210: user-defined vertical CRS."""
from __future__ import annotations

from typing import Any

from ..coordinate_systems import coordinate_system
from . import vertical_datum as datums
from .base import FixtureNode
from .resolver import user_defined


class VerticalCRSFixture(FixtureNode[Any]):
    series = 3210
    kind = "vertical_crs"

    def __init__(self, *args, **kwargs):
        super().__init__(*args, **kwargs)
        self.cs_code = 6499

    def construct(self):
        factory = self.factories.require("crs_factory")
        cs_factory = self.factories.require("cs_factory")
        datum = self.component("datum", self.lookup("datum_authority", "create_vertical_datum"))
        cs = cs_factory.create_coordinate_system(coordinate_system(self.cs_code))
        return factory.create_vertical_crs(self.properties(), datum, cs)

    def check(self, obj) -> None:
        identity = self.identity
        self.verifier.identification(obj, identity.name, identity.code)
        self.verify_component("datum", obj.datum)
        self.verifier.axes("coordinate_system", obj.axis_info, coordinate_system(self.cs_code).expected_axes())


def _define(fixture: VerticalCRSFixture, datum, cs_code: int) -> None:
    fixture.use("datum", user_defined(datum))
    fixture.cs_code = cs_code


@VerticalCRSFixture.case(64501, "GIGS vertCRS U1 height")
def gigs_64501(fixture: VerticalCRSFixture) -> None:
    _define(fixture, datums.gigs_66601, 6499)


@VerticalCRSFixture.case(64502, "GIGS vertCRS U1 depth")
def gigs_64502(fixture: VerticalCRSFixture) -> None:
    _define(fixture, datums.gigs_66601, 6498)


@VerticalCRSFixture.case(64503, "GIGS vertCRS U2 height")
def gigs_64503(fixture: VerticalCRSFixture) -> None:
    _define(fixture, datums.gigs_66601, 1030)


@VerticalCRSFixture.case(64504, "GIGS vertCRS U2 depth")
def gigs_64504(fixture: VerticalCRSFixture) -> None:
    _define(fixture, datums.gigs_66601, 6495)


@VerticalCRSFixture.case(64505, "GIGS vertCRS V1 height")
def gigs_64505(fixture: VerticalCRSFixture) -> None:
    _define(fixture, datums.gigs_66602, 6499)


@VerticalCRSFixture.case(64506, "GIGS vertCRS V1 depth")
def gigs_64506(fixture: VerticalCRSFixture) -> None:
    _define(fixture, datums.gigs_66602, 6498)


@VerticalCRSFixture.case(64509, "GIGS vertCRS V2 height")
def gigs_64509(fixture: VerticalCRSFixture) -> None:
    _define(fixture, datums.gigs_66602, 6497)


@VerticalCRSFixture.case(64507, "GIGS vertCRS W1 height")
def gigs_64507(fixture: VerticalCRSFixture) -> None:
    _define(fixture, datums.gigs_66603, 6499)


@VerticalCRSFixture.case(64508, "GIGS vertCRS W1 depth")
def gigs_64508(fixture: VerticalCRSFixture) -> None:
    _define(fixture, datums.gigs_66603, 6498)
