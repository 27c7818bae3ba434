"""Series 3204: user-defined geodetic datums.

Each datum pairs an ellipsoid and a prime meridian that come either from the
3202/3203 cases or from the authority factory (the "double letter" datums).
"""
from __future__ import annotations

from typing import Any, Optional

from ..verification import anchor_of, ellipsoid_of, prime_meridian_of
from . import ellipsoid, prime_meridian
from .base import FixtureNode
from .resolver import authority, user_defined


class GeodeticDatumFixture(FixtureNode[Any]):
    series = 3204
    kind = "geodetic_datum"

    def __init__(self, *args, **kwargs):
        super().__init__(*args, **kwargs)
        self.anchor: Optional[str] = None

    def construct(self):
        factory = self.factories.require("datum_factory")
        ellipsoid_ = self.component("ellipsoid", self.lookup("datum_authority", "create_ellipsoid"))
        meridian = self.component("prime_meridian", self.lookup("datum_authority", "create_prime_meridian"))
        return factory.create_geodetic_datum(self.properties(anchor=self.anchor), ellipsoid_, meridian)

    def check(self, obj) -> None:
        identity = self.identity
        self.verifier.identification(obj, identity.name, identity.code)
        self.verify_component("ellipsoid", ellipsoid_of(obj))
        self.verify_component("prime_meridian", prime_meridian_of(obj))
        if self.anchor is not None:
            self.verifier.equal("anchor", self.anchor, anchor_of(obj))


def _define(fixture: GeodeticDatumFixture, ellipsoid_source, meridian_source, anchor: Optional[str] = None) -> None:
    fixture.use("ellipsoid", ellipsoid_source)
    fixture.use("prime_meridian", meridian_source)
    fixture.anchor = anchor


GREENWICH = user_defined(prime_meridian.gigs_68901)


@GeodeticDatumFixture.case(66001, "GIGS geodetic datum A")
def gigs_66001(fixture: GeodeticDatumFixture) -> None:
    _define(fixture, user_defined(ellipsoid.gigs_67030), GREENWICH)


@GeodeticDatumFixture.case(66326, "GIGS geodetic datum AA")
def gigs_66326(fixture: GeodeticDatumFixture) -> None:
    _define(fixture, authority(7030), authority(8901))


@GeodeticDatumFixture.case(66002, "GIGS geodetic datum B")
def gigs_66002(fixture: GeodeticDatumFixture) -> None:
    _define(fixture, user_defined(ellipsoid.gigs_67001), GREENWICH)


@GeodeticDatumFixture.case(66277, "GIGS geodetic datum BB")
def gigs_66277(fixture: GeodeticDatumFixture) -> None:
    _define(fixture, authority(7001), authority(8901))


@GeodeticDatumFixture.case(66003, "GIGS geodetic datum C")
def gigs_66003(fixture: GeodeticDatumFixture) -> None:
    _define(fixture, user_defined(ellipsoid.gigs_67004), GREENWICH)


@GeodeticDatumFixture.case(66289, "GIGS geodetic datum CC")
def gigs_66289(fixture: GeodeticDatumFixture) -> None:
    _define(fixture, authority(7004), authority(8901))


@GeodeticDatumFixture.case(66004, "GIGS geodetic datum D")
def gigs_66004(fixture: GeodeticDatumFixture) -> None:
    _define(fixture, user_defined(ellipsoid.gigs_67004), user_defined(prime_meridian.gigs_68908))


@GeodeticDatumFixture.case(66813, "GIGS geodetic datum DD")
def gigs_66813(fixture: GeodeticDatumFixture) -> None:
    _define(fixture, authority(7004), authority(8908))


@GeodeticDatumFixture.case(66005, "GIGS geodetic datum E")
def gigs_66005(fixture: GeodeticDatumFixture) -> None:
    _define(fixture, user_defined(ellipsoid.gigs_67022), GREENWICH)


@GeodeticDatumFixture.case(66313, "GIGS geodetic datum EE")
def gigs_66313(fixture: GeodeticDatumFixture) -> None:
    _define(fixture, authority(7022), authority(8901))


@GeodeticDatumFixture.case(66006, "GIGS geodetic datum F")
def gigs_66006(fixture: GeodeticDatumFixture) -> None:
    _define(fixture, user_defined(ellipsoid.gigs_67019), GREENWICH, anchor="Origin F")


@GeodeticDatumFixture.case(66007, "GIGS geodetic datum G")
def gigs_66007(fixture: GeodeticDatumFixture) -> None:
    _define(fixture, user_defined(ellipsoid.gigs_67019), GREENWICH, anchor="Origin(s) G")


@GeodeticDatumFixture.case(66008, "GIGS geodetic datum H")
def gigs_66008(fixture: GeodeticDatumFixture) -> None:
    _define(fixture, user_defined(ellipsoid.gigs_67011), user_defined(prime_meridian.gigs_68903))


@GeodeticDatumFixture.case(66807, "GIGS geodetic datum HH")
def gigs_66807(fixture: GeodeticDatumFixture) -> None:
    _define(fixture, authority(7011), authority(8903))


@GeodeticDatumFixture.case(66009, "GIGS geodetic datum J")
def gigs_66009(fixture: GeodeticDatumFixture) -> None:
    _define(fixture, user_defined(ellipsoid.gigs_67008), GREENWICH)


@GeodeticDatumFixture.case(66012, "GIGS geodetic datum K")
def gigs_66012(fixture: GeodeticDatumFixture) -> None:
    _define(fixture, user_defined(ellipsoid.gigs_67036), GREENWICH)


@GeodeticDatumFixture.case(66011, "GIGS geodetic datum L")
def gigs_66011(fixture: GeodeticDatumFixture) -> None:
    _define(fixture, user_defined(ellipsoid.gigs_67004), GREENWICH, anchor="Origin L")


@GeodeticDatumFixture.case(66016, "GIGS geodetic datum M")
def gigs_66016(fixture: GeodeticDatumFixture) -> None:
    _define(fixture, user_defined(ellipsoid.gigs_67022), GREENWICH)


@GeodeticDatumFixture.case(66010, "GIGS geodetic datum T")
def gigs_66010(fixture: GeodeticDatumFixture) -> None:
    _define(fixture, user_defined(ellipsoid.gigs_67011), GREENWICH)


@GeodeticDatumFixture.case(66013, "GIGS geodetic datum X")
def gigs_66013(fixture: GeodeticDatumFixture) -> None:
    _define(fixture, user_defined(ellipsoid.gigs_67003), GREENWICH)


@GeodeticDatumFixture.case(66014, "GIGS geodetic datum Y")
def gigs_66014(fixture: GeodeticDatumFixture) -> None:
    _define(fixture, user_defined(ellipsoid.gigs_67024), GREENWICH)


@GeodeticDatumFixture.case(66015, "GIGS geodetic datum Z")
def gigs_66015(fixture: GeodeticDatumFixture) -> None:
    _define(fixture, user_defined(ellipsoid.gigs_67019), GREENWICH, anchor="Origin Z")


@GeodeticDatumFixture.case(66269, "GIGS geodetic datum ZZ")
def gigs_66269(fixture: GeodeticDatumFixture) -> None:
    _define(fixture, authority(7019), authority(8901))
