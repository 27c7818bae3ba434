"""Series 3205: user-defined geographic and geocentric CRS."""
from __future__ import annotations

from typing import Any

from ..coordinate_systems import coordinate_system
from . import geodetic_datum as datums
from .base import FixtureNode
from .resolver import authority, user_defined


class GeodeticCRSFixture(FixtureNode[Any]):
    series = 3205
    kind = "geodetic_crs"

    def __init__(self, *args, **kwargs):
        super().__init__(*args, **kwargs)
        self.cs_code = 6422
        self.geocentric = False

    def construct(self):
        factory = self.factories.require("crs_factory")
        cs_factory = self.factories.require("cs_factory")
        datum = self.component("datum", self.lookup("datum_authority", "create_geodetic_datum"))
        cs = cs_factory.create_coordinate_system(coordinate_system(self.cs_code))
        if self.geocentric:
            return factory.create_geocentric_crs(self.properties(), datum, cs)
        return factory.create_geographic_crs(self.properties(), datum, cs)

    def check(self, obj) -> None:
        identity = self.identity
        self.verifier.identification(obj, identity.name, identity.code)
        self.verify_component("datum", obj.datum)
        self.verifier.axes("coordinate_system", obj.axis_info, coordinate_system(self.cs_code).expected_axes())


def _define(fixture: GeodeticCRSFixture, datum_source, cs_code: int = 6422, geocentric: bool = False) -> None:
    fixture.use("datum", datum_source)
    fixture.cs_code = cs_code
    fixture.geocentric = geocentric


@GeodeticCRSFixture.case(64001, "GIGS geocenCRS A")
def gigs_64001(fixture: GeodeticCRSFixture) -> None:
    _define(fixture, user_defined(datums.gigs_66001), 6500, geocentric=True)


@GeodeticCRSFixture.case(64002, "GIGS geog3DCRS A")
def gigs_64002(fixture: GeodeticCRSFixture) -> None:
    _define(fixture, user_defined(datums.gigs_66001), 6423)


@GeodeticCRSFixture.case(64019, "GIGS geog3DCRS B")
def gigs_64019(fixture: GeodeticCRSFixture) -> None:
    _define(fixture, user_defined(datums.gigs_66002), 6423)


@GeodeticCRSFixture.case(64021, "GIGS geog3DCRS C")
def gigs_64021(fixture: GeodeticCRSFixture) -> None:
    _define(fixture, user_defined(datums.gigs_66003), 6423)


@GeodeticCRSFixture.case(64022, "GIGS geog3DCRS E")
def gigs_64022(fixture: GeodeticCRSFixture) -> None:
    _define(fixture, user_defined(datums.gigs_66005), 6423)


@GeodeticCRSFixture.case(64003, "GIGS geogCRS A")
def gigs_64003(fixture: GeodeticCRSFixture) -> None:
    _define(fixture, user_defined(datums.gigs_66001))


@GeodeticCRSFixture.case(64326, "GIGS geogCRS AA")
def gigs_64326(fixture: GeodeticCRSFixture) -> None:
    _define(fixture, authority(6326, cross_check=datums.gigs_66326))


@GeodeticCRSFixture.case(64033, "GIGS geogCRS Agr")
def gigs_64033(fixture: GeodeticCRSFixture) -> None:
    _define(fixture, user_defined(datums.gigs_66001), 6403)


@GeodeticCRSFixture.case(64004, "GIGS geogCRS Alonlat")
def gigs_64004(fixture: GeodeticCRSFixture) -> None:
    _define(fixture, user_defined(datums.gigs_66001), 6424)


@GeodeticCRSFixture.case(64005, "GIGS geogCRS B")
def gigs_64005(fixture: GeodeticCRSFixture) -> None:
    _define(fixture, user_defined(datums.gigs_66002))


@GeodeticCRSFixture.case(64277, "GIGS geogCRS BB")
def gigs_64277(fixture: GeodeticCRSFixture) -> None:
    _define(fixture, authority(6277, cross_check=datums.gigs_66277))


@GeodeticCRSFixture.case(64006, "GIGS geogCRS C")
def gigs_64006(fixture: GeodeticCRSFixture) -> None:
    _define(fixture, user_defined(datums.gigs_66003))


@GeodeticCRSFixture.case(64289, "GIGS geogCRS CC")
def gigs_64289(fixture: GeodeticCRSFixture) -> None:
    _define(fixture, authority(6289, cross_check=datums.gigs_66289))


@GeodeticCRSFixture.case(64007, "GIGS geogCRS D")
def gigs_64007(fixture: GeodeticCRSFixture) -> None:
    _define(fixture, user_defined(datums.gigs_66004))


@GeodeticCRSFixture.case(64813, "GIGS geogCRS DD")
def gigs_64813(fixture: GeodeticCRSFixture) -> None:
    _define(fixture, authority(6813, cross_check=datums.gigs_66813))


@GeodeticCRSFixture.case(64008, "GIGS geogCRS E")
def gigs_64008(fixture: GeodeticCRSFixture) -> None:
    _define(fixture, user_defined(datums.gigs_66005))


@GeodeticCRSFixture.case(64313, "GIGS geogCRS EE")
def gigs_64313(fixture: GeodeticCRSFixture) -> None:
    _define(fixture, authority(6313, cross_check=datums.gigs_66313))


@GeodeticCRSFixture.case(64009, "GIGS geogCRS F")
def gigs_64009(fixture: GeodeticCRSFixture) -> None:
    _define(fixture, user_defined(datums.gigs_66006))


@GeodeticCRSFixture.case(64010, "GIGS geogCRS G")
def gigs_64010(fixture: GeodeticCRSFixture) -> None:
    _define(fixture, user_defined(datums.gigs_66007))


@GeodeticCRSFixture.case(64011, "GIGS geogCRS H")
def gigs_64011(fixture: GeodeticCRSFixture) -> None:
    _define(fixture, user_defined(datums.gigs_66008), 6403)


@GeodeticCRSFixture.case(64807, "GIGS geogCRS HH")
def gigs_64807(fixture: GeodeticCRSFixture) -> None:
    _define(fixture, authority(6807, cross_check=datums.gigs_66807))


@GeodeticCRSFixture.case(64012, "GIGS geogCRS J")
def gigs_64012(fixture: GeodeticCRSFixture) -> None:
    _define(fixture, user_defined(datums.gigs_66009))


@GeodeticCRSFixture.case(64015, "GIGS geogCRS K")
def gigs_64015(fixture: GeodeticCRSFixture) -> None:
    _define(fixture, user_defined(datums.gigs_66012))


@GeodeticCRSFixture.case(64014, "GIGS geogCRS L")
def gigs_64014(fixture: GeodeticCRSFixture) -> None:
    _define(fixture, user_defined(datums.gigs_66011))


@GeodeticCRSFixture.case(64020, "GIGS geogCRS M")
def gigs_64020(fixture: GeodeticCRSFixture) -> None:
    _define(fixture, user_defined(datums.gigs_66016))


@GeodeticCRSFixture.case(64013, "GIGS geogCRS T")
def gigs_64013(fixture: GeodeticCRSFixture) -> None:
    _define(fixture, user_defined(datums.gigs_66010), 6403)


@GeodeticCRSFixture.case(64016, "GIGS geogCRS X")
def gigs_64016(fixture: GeodeticCRSFixture) -> None:
    _define(fixture, user_defined(datums.gigs_66013))


@GeodeticCRSFixture.case(64017, "GIGS geogCRS Y")
def gigs_64017(fixture: GeodeticCRSFixture) -> None:
    _define(fixture, user_defined(datums.gigs_66014))


@GeodeticCRSFixture.case(64018, "GIGS geogCRS Z")
def gigs_64018(fixture: GeodeticCRSFixture) -> None:
    _define(fixture, user_defined(datums.gigs_66015))


@GeodeticCRSFixture.case(64269, "GIGS geogCRS ZZ")
def gigs_64269(fixture: GeodeticCRSFixture) -> None:
    _define(fixture, authority(6269, cross_check=datums.gigs_66269))
