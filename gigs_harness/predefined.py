"""Series 2200: objects the library predefines under authority codes.

Nothing is built from user values here. Each case fetches an object by EPSG
code and compares it with reference values, so the numeric checks are not
gated by the factory-preserving-user-values option.
"""
from __future__ import annotations

from typing import Any, NamedTuple, Optional, Sequence, Tuple

from .configuration import Option
from .fixtures.base import FixtureNode
from .units import DEGREE, METRE
from .verification import ellipsoid_of, name_of


class EllipsoidRow(NamedTuple):
    code: int
    name: str
    semi_major: float
    inverse_flattening: Optional[float] = None
    semi_minor: Optional[float] = None
    aliases: Tuple[str, ...] = ()


class PrimeMeridianRow(NamedTuple):
    code: int
    name: str
    longitude_degrees: float
    aliases: Tuple[str, ...] = ()


class GeodeticCRSRow(NamedTuple):
    code: int
    name: str
    dimension: int
    semi_major: float
    aliases: Tuple[str, ...] = ()


class ProjectedCRSRow(NamedTuple):
    code: int
    name: str
    base_crs_name: str
    conversion_name: str
    method_name: str
    aliases: Tuple[str, ...] = ()


class ConversionRow(NamedTuple):
    code: int
    name: str
    method_name: str
    aliases: Tuple[str, ...] = ()


class VerticalDatumRow(NamedTuple):
    code: int
    name: str
    aliases: Tuple[str, ...] = ()


class VerticalCRSRow(NamedTuple):
    code: int
    name: str
    datum_name: str
    direction: str
    aliases: Tuple[str, ...] = ()


ELLIPSOIDS: Sequence[EllipsoidRow] = (
    EllipsoidRow(7001, "Airy 1830", 6377563.396, inverse_flattening=299.3249646),
    EllipsoidRow(7004, "Bessel 1841", 6377397.155, inverse_flattening=299.1528128),
    EllipsoidRow(7008, "Clarke 1866", 6378206.4, semi_minor=6356583.8),
    EllipsoidRow(7011, "Clarke 1880 (IGN)", 6378249.2, semi_minor=6356515.0),
    EllipsoidRow(7019, "GRS 1980", 6378137.0, inverse_flattening=298.257222101),
    EllipsoidRow(7022, "International 1924", 6378388.0, inverse_flattening=297.0),
    EllipsoidRow(7024, "Krassowsky 1940", 6378245.0, inverse_flattening=298.3),
    EllipsoidRow(7030, "WGS 84", 6378137.0, inverse_flattening=298.257223563, aliases=("WGS84",)),
    EllipsoidRow(7043, "WGS 72", 6378135.0, inverse_flattening=298.26),
)

PRIME_MERIDIANS: Sequence[PrimeMeridianRow] = (
    PrimeMeridianRow(8901, "Greenwich", 0.0),
    PrimeMeridianRow(8903, "Paris", 2.33722917),
    PrimeMeridianRow(8904, "Bogota", -74.08091666667),
    PrimeMeridianRow(8908, "Jakarta", 106.807719444444),
    PrimeMeridianRow(8913, "Oslo", 10.72291666667),
)

GEODETIC_CRS: Sequence[GeodeticCRSRow] = (
    GeodeticCRSRow(4326, "WGS 84", 2, 6378137.0),
    GeodeticCRSRow(4979, "WGS 84", 3, 6378137.0),
    GeodeticCRSRow(4978, "WGS 84", 3, 6378137.0),
    GeodeticCRSRow(4277, "OSGB36", 2, 6377563.396),
    GeodeticCRSRow(4289, "Amersfoort", 2, 6377397.155),
    GeodeticCRSRow(4258, "ETRS89", 2, 6378137.0),
)

PROJECTED_CRS: Sequence[ProjectedCRSRow] = (
    ProjectedCRSRow(32631, "WGS 84 / UTM zone 31N", "WGS 84", "UTM zone 31N", "Transverse Mercator"),
    ProjectedCRSRow(27700, "OSGB36 / British National Grid", "OSGB36", "British National Grid", "Transverse Mercator"),
    ProjectedCRSRow(28992, "Amersfoort / RD New", "Amersfoort", "RD New", "Oblique Stereographic"),
)

CONVERSIONS: Sequence[ConversionRow] = (
    ConversionRow(16031, "UTM zone 31N", "Transverse Mercator"),
    ConversionRow(19916, "British National Grid", "Transverse Mercator"),
    ConversionRow(19914, "RD New", "Oblique Stereographic"),
)

VERTICAL_DATUMS: Sequence[VerticalDatumRow] = (
    VerticalDatumRow(5100, "Mean Sea Level"),
    VerticalDatumRow(5105, "Baltic 1977"),
    VerticalDatumRow(5106, "Caspian Sea"),
    VerticalDatumRow(5111, "Australian Height Datum"),
    VerticalDatumRow(5129, "European Vertical Reference Frame 2000"),
    VerticalDatumRow(5171, "EGM96 geoid"),
)

VERTICAL_CRS: Sequence[VerticalCRSRow] = (
    VerticalCRSRow(5714, "MSL height", "Mean Sea Level", "up"),
    VerticalCRSRow(5715, "MSL depth", "Mean Sea Level", "down"),
    VerticalCRSRow(5705, "Baltic 1977 height", "Baltic 1977", "up"),
    VerticalCRSRow(5706, "Caspian depth", "Caspian Sea", "down"),
    VerticalCRSRow(5711, "AHD height", "Australian Height Datum", "up"),
)


class PredefinedFixture(FixtureNode[Any]):
    """Fetch by code, then compare identification and reference values."""

    factory_slot = "datum_authority"
    factory_method = ""

    def __init__(self, *args, **kwargs):
        super().__init__(*args, **kwargs)
        self.reference: Any = None

    def construct(self):
        factory = self.factories.require(self.factory_slot)
        return getattr(factory, self.factory_method)(str(self.identity.code))

    def check(self, obj) -> None:
        ref = self.reference
        self.verifier.authority_identification(obj, ref.name, ref.code, ref.aliases)
        self.check_values(obj)

    def check_values(self, obj) -> None:
        pass


class PredefinedEllipsoidFixture(PredefinedFixture):
    series = 2202
    kind = "ellipsoid"
    factory_method = "create_ellipsoid"

    def check_values(self, obj) -> None:
        ref = self.reference
        self.verifier.quantity("semi_major_axis", obj.semi_major_metre, ref.semi_major)
        if ref.semi_minor is not None:
            self.verifier.quantity("semi_minor_axis", obj.semi_minor_metre, ref.semi_minor)
        if ref.inverse_flattening is not None:
            self.verifier.quantity("inverse_flattening", obj.inverse_flattening, ref.inverse_flattening)


class PredefinedPrimeMeridianFixture(PredefinedFixture):
    series = 2203
    kind = "prime_meridian"
    factory_method = "create_prime_meridian"

    def check_values(self, obj) -> None:
        degrees = obj.longitude * obj.unit_conversion_factor / DEGREE.factor
        self.verifier.quantity("greenwich_longitude", degrees, self.reference.longitude_degrees)


class PredefinedGeodeticCRSFixture(PredefinedFixture):
    series = 2205
    kind = "geodetic_crs"
    factory_slot = "crs_authority"
    factory_method = "create_crs"

    def check_values(self, obj) -> None:
        self.verifier.equal("dimension", self.reference.dimension, len(obj.axis_info))
        self.verifier.quantity("ellipsoid.semi_major_axis", ellipsoid_of(obj).semi_major_metre, self.reference.semi_major)


class PredefinedProjectedCRSFixture(PredefinedFixture):
    series = 2207
    kind = "projected_crs"
    factory_slot = "crs_authority"
    factory_method = "create_crs"

    def check_values(self, obj) -> None:
        ref = self.reference
        base_crs = self.verifier.not_none("base_crs", obj.geodetic_crs)
        conversion = self.verifier.not_none("conversion", obj.coordinate_operation)
        if self.configuration.get(Option.STANDARD_NAME_SUPPORTED):
            self.verifier.equal("base_crs.name", ref.base_crs_name, name_of(base_crs))
            self.verifier.equal("conversion.name", ref.conversion_name, name_of(conversion))
        self.verifier.equal("conversion.method_name", ref.method_name, conversion.method_name)


class PredefinedConversionFixture(PredefinedFixture):
    series = 2206
    kind = "conversion"
    factory_slot = "operation_authority"
    factory_method = "create_coordinate_operation"

    def check_values(self, obj) -> None:
        self.verifier.equal("method_name", self.reference.method_name, obj.method_name)


class PredefinedVerticalDatumFixture(PredefinedFixture):
    series = 2209
    kind = "vertical_datum"
    factory_method = "create_vertical_datum"


class PredefinedVerticalCRSFixture(PredefinedFixture):
    series = 2210
    kind = "vertical_crs"
    factory_slot = "crs_authority"
    factory_method = "create_crs"

    def check_values(self, obj) -> None:
        ref = self.reference
        datum = self.verifier.not_none("datum", obj.datum)
        if self.configuration.get(Option.STANDARD_NAME_SUPPORTED):
            self.verifier.equal("datum.name", ref.datum_name, name_of(datum))
        self.verifier.axes("coordinate_system", obj.axis_info, [(ref.direction, METRE.name)])


def _register(fixture_type, rows) -> None:
    for row in rows:

        def routine(fixture, row=row) -> None:
            fixture.reference = row

        routine.__name__ = f"epsg_{row.code}"
        routine.__qualname__ = routine.__name__
        fixture_type.case(row.code, row.name)(routine)


_register(PredefinedEllipsoidFixture, ELLIPSOIDS)
_register(PredefinedPrimeMeridianFixture, PRIME_MERIDIANS)
_register(PredefinedGeodeticCRSFixture, GEODETIC_CRS)
_register(PredefinedProjectedCRSFixture, PROJECTED_CRS)
_register(PredefinedConversionFixture, CONVERSIONS)
_register(PredefinedVerticalDatumFixture, VERTICAL_DATUMS)
_register(PredefinedVerticalCRSFixture, VERTICAL_CRS)
