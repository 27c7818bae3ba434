"""Series 3208: user-defined coordinate transformations between geographic CRS."""
from __future__ import annotations

from typing import Any, List

from ..units import ARC_SECOND, GRAD, METRE, MICRORADIAN, PARTS_PER_MILLION, Parameter
from ..verification import crs_member_of
from . import geodetic_crs as geodetic
from .base import FixtureNode
from .conversion import check_parameters
from .resolver import authority, user_defined

GEOCENTRIC_TRANSLATIONS = "Geocentric translations (geog2D domain)"
POSITION_VECTOR = "Position Vector transformation (geog2D domain)"
COORDINATE_FRAME = "Coordinate Frame rotation (geog2D domain)"
VERSION = "GIGS Transformation"


class TransformationFixture(FixtureNode[Any]):
    series = 3208
    kind = "transformation"

    def __init__(self, *args, **kwargs):
        super().__init__(*args, **kwargs)
        self.method_name = ""
        self.parameters: List[Parameter] = []
        self.version = VERSION

    def define(self, source, target, method_name: str, *parameters: Parameter) -> None:
        """``source`` and ``target`` are 3205 routines or authority CRS codes."""

        for slot, crs in (("source_crs", source), ("target_crs", target)):
            self.use(slot, authority(crs) if isinstance(crs, int) else user_defined(crs))
        self.method_name = method_name
        self.parameters = list(parameters)

    def construct(self):
        factory = self.factories.require("operation_factory")
        lookup = self.lookup("crs_authority", "create_crs")
        source = self.component("source_crs", lookup)
        target = self.component("target_crs", lookup)
        properties = self.properties(operation_version=self.version)
        return factory.create_transformation(properties, source, target, self.method_name, self.parameters)

    def check(self, obj) -> None:
        identity = self.identity
        self.verifier.identification(obj, identity.name, identity.code)
        self.verify_component("source_crs", crs_member_of(obj, "source_crs"))
        self.verify_component("target_crs", crs_member_of(obj, "target_crs"))
        self.verifier.equal("method_name", self.method_name, obj.method_name)
        check_parameters(self.verifier, obj, self.parameters)


def translations(tx, ty, tz) -> List[Parameter]:
    return [
        Parameter("X-axis translation", tx, METRE),
        Parameter("Y-axis translation", ty, METRE),
        Parameter("Z-axis translation", tz, METRE),
    ]


def helmert(tx, ty, tz, rx, ry, rz, scale, rotation_unit=ARC_SECOND) -> List[Parameter]:
    return translations(tx, ty, tz) + [
        Parameter("X-axis rotation", rx, rotation_unit),
        Parameter("Y-axis rotation", ry, rotation_unit),
        Parameter("Z-axis rotation", rz, rotation_unit),
        Parameter("Scale difference", scale, PARTS_PER_MILLION),
    ]


@TransformationFixture.case(61001, "GIGS geogCRS A to WGS 84 (1)")
def gigs_61001(fixture: TransformationFixture) -> None:
    fixture.define(geodetic.gigs_64003, 4326, GEOCENTRIC_TRANSLATIONS, *translations(0.0, 0.0, 0.0))


@TransformationFixture.case(61196, "GIGS geogCRS B to GIGS geogCRS A (1)")
def gigs_61196(fixture: TransformationFixture) -> None:
    fixture.define(geodetic.gigs_64005, geodetic.gigs_64003, GEOCENTRIC_TRANSLATIONS, *translations(371.0, -112.0, 434.0))


@TransformationFixture.case(61314, "GIGS geogCRS B to GIGS geogCRS A (2)")
def gigs_61314(fixture: TransformationFixture) -> None:
    fixture.define(
        geodetic.gigs_64005,
        geodetic.gigs_64003,
        POSITION_VECTOR,
        *helmert(446.448, -125.157, 542.06, 0.15, 0.247, 0.842, -20.489),
    )


@TransformationFixture.case(61002, "GIGS geogCRS C to GIGS geogCRS A (1)")
def gigs_61002(fixture: TransformationFixture) -> None:
    fixture.define(geodetic.gigs_64006, geodetic.gigs_64003, GEOCENTRIC_TRANSLATIONS, *translations(593.0, 26.0, 479.0))


@TransformationFixture.case(15934, "GIGS geogCRS C to GIGS geogCRS A (2)")
def gigs_15934(fixture: TransformationFixture) -> None:
    fixture.define(
        geodetic.gigs_64006,
        geodetic.gigs_64003,
        COORDINATE_FRAME,
        *helmert(565.2369, 50.0087, 465.658, 1.9725, -1.7004, 9.0677, 4.0812, rotation_unit=MICRORADIAN),
    )


@TransformationFixture.case(61610, "GIGS geogCRS E to GIGS geogCRS A (1)")
def gigs_61610(fixture: TransformationFixture) -> None:
    fixture.define(geodetic.gigs_64008, geodetic.gigs_64003, GEOCENTRIC_TRANSLATIONS, *translations(-125.8, 79.9, -100.5))


@TransformationFixture.case(15929, "GIGS geogCRS E to GIGS geogCRS A (2)")
def gigs_15929(fixture: TransformationFixture) -> None:
    fixture.define(
        geodetic.gigs_64008,
        geodetic.gigs_64003,
        COORDINATE_FRAME,
        *helmert(-106.8686, 52.2978, -103.7239, -0.3366, 0.457, -1.8422, -1.2747),
    )


@TransformationFixture.case(61150, "GIGS geogCRS F to GIGS geogCRS A (1)")
def gigs_61150(fixture: TransformationFixture) -> None:
    fixture.define(geodetic.gigs_64009, geodetic.gigs_64003, GEOCENTRIC_TRANSLATIONS, *translations(0.0, 0.0, 0.0))


@TransformationFixture.case(61763, "GIGS geogCRS H to GIGS geogCRS T (1)")
def gigs_61763(fixture: TransformationFixture) -> None:
    fixture.define(
        geodetic.gigs_64011,
        geodetic.gigs_64013,
        "Longitude rotation",
        Parameter("Longitude offset", 2.5969213, GRAD),
    )


@TransformationFixture.case(61193, "GIGS geogCRS T to GIGS geogCRS A (1)")
def gigs_61193(fixture: TransformationFixture) -> None:
    fixture.define(geodetic.gigs_64013, geodetic.gigs_64003, GEOCENTRIC_TRANSLATIONS, *translations(-168.0, -60.0, 320.0))
