"""In-memory factories whose objects expose the pyproj attributes the fixtures read."""
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Tuple

from gigs_harness.errors import NoSuchIdentifierError
from gigs_harness.factories import Factories
from gigs_harness.units import DEGREE, METRE, Unit


def _ids(properties) -> List[Tuple[str, str]]:
    identifier = properties["identifier"]
    return [(identifier["codespace"], str(identifier["code"]))]


@dataclass
class FakeEllipsoid:
    name: str
    identifiers: List[Tuple[str, str]]
    semi_major_metre: float
    semi_minor_metre: float
    inverse_flattening: float
    aliases: Tuple[str, ...] = ()


@dataclass
class FakePrimeMeridian:
    name: str
    identifiers: List[Tuple[str, str]]
    longitude: float
    unit_name: str
    unit_conversion_factor: float


@dataclass
class FakeDatum:
    name: str
    identifiers: List[Tuple[str, str]]
    ellipsoid: Optional[FakeEllipsoid] = None
    prime_meridian: Optional[FakePrimeMeridian] = None
    anchor: Optional[str] = None


@dataclass
class FakeAxis:
    direction: str
    unit_name: str


@dataclass
class FakeCS:
    axis_info: List[FakeAxis]


@dataclass
class FakeParam:
    name: str
    value: float
    unit_conversion_factor: float


@dataclass
class FakeOperation:
    name: str
    identifiers: List[Tuple[str, str]]
    method_name: str
    params: List[FakeParam]
    source_crs: Any = None
    target_crs: Any = None
    operations: List[Any] = field(default_factory=list)


@dataclass
class FakeCRS:
    name: str
    identifiers: List[Tuple[str, str]]
    axis_info: List[FakeAxis]
    datum: Optional[FakeDatum] = None
    geodetic_crs: Any = None
    coordinate_operation: Optional[FakeOperation] = None

    @property
    def ellipsoid(self):
        datum = self.datum if self.datum is not None else getattr(self.geodetic_crs, "datum", None)
        return getattr(datum, "ellipsoid", None)


class FakeDatumFactory:
    """``scale`` multiplies every length, imitating a factory that does not preserve values."""

    def __init__(self, scale: float = 1.0):
        self.scale = scale
        self.calls: List[str] = []

    def create_ellipsoid(self, properties, semi_major_axis, semi_minor_axis, unit: Unit):
        self.calls.append("create_ellipsoid")
        a = unit.convert_to(semi_major_axis, METRE) * self.scale
        b = unit.convert_to(semi_minor_axis, METRE) * self.scale
        ivf = a / (a - b) if a != b else 0.0
        return FakeEllipsoid(properties["name"], _ids(properties), a, b, ivf)

    def create_flattened_sphere(self, properties, semi_major_axis, inverse_flattening, unit: Unit):
        self.calls.append("create_flattened_sphere")
        a = unit.convert_to(semi_major_axis, METRE) * self.scale
        b = a * (1 - 1 / inverse_flattening) if inverse_flattening else a
        return FakeEllipsoid(properties["name"], _ids(properties), a, b, inverse_flattening)

    def create_prime_meridian(self, properties, longitude, unit: Unit):
        self.calls.append("create_prime_meridian")
        return FakePrimeMeridian(properties["name"], _ids(properties), longitude, unit.name, unit.factor)

    def create_geodetic_datum(self, properties, ellipsoid, prime_meridian):
        self.calls.append("create_geodetic_datum")
        return FakeDatum(properties["name"], _ids(properties), ellipsoid, prime_meridian, properties.get("anchor"))

    def create_vertical_datum(self, properties):
        self.calls.append("create_vertical_datum")
        return FakeDatum(properties["name"], _ids(properties), anchor=properties.get("anchor"))


class FakeCSFactory:
    def create_coordinate_system(self, definition):
        return FakeCS([FakeAxis(axis.direction, axis.unit.name) for axis in definition.axes])


class FakeCRSFactory:
    def create_geographic_crs(self, properties, datum, cs):
        return FakeCRS(properties["name"], _ids(properties), cs.axis_info, datum=datum)

    create_geocentric_crs = create_geographic_crs
    create_vertical_crs = create_geographic_crs

    def create_projected_crs(self, properties, base_crs, conversion, cs):
        return FakeCRS(properties["name"], _ids(properties), cs.axis_info, geodetic_crs=base_crs, coordinate_operation=conversion)


def _params(parameters) -> List[FakeParam]:
    return [FakeParam(p.name, p.value, p.unit.factor) for p in parameters]


class FakeOperationFactory:
    """Knows every method unless it is listed in ``unsupported``."""

    def __init__(self, unsupported=()):
        self.unsupported = set(unsupported)

    def _check(self, method_name):
        if method_name in self.unsupported:
            raise NoSuchIdentifierError(f'Operation method "{method_name}" not found.', method_name)

    def create_defining_conversion(self, properties, method_name, parameters):
        self._check(method_name)
        return FakeOperation(properties["name"], _ids(properties), method_name, _params(parameters))

    def create_transformation(self, properties, source_crs, target_crs, method_name, parameters):
        self._check(method_name)
        return FakeOperation(
            properties["name"], _ids(properties), method_name, _params(parameters), source_crs, target_crs
        )

    def create_concatenated_operation(self, properties, steps):
        return FakeOperation(
            properties["name"],
            _ids(properties),
            "",
            [],
            steps[0].source_crs,
            steps[-1].target_crs,
            operations=list(steps),
        )


def _epsg(code) -> List[Tuple[str, str]]:
    return [("EPSG", str(code))]


def _ellipsoid(code, name, a, ivf, aliases=()):
    return FakeEllipsoid(name, _epsg(code), a, a * (1 - 1 / ivf), ivf, tuple(aliases))


def _meridian(code, name, degrees):
    return FakePrimeMeridian(name, _epsg(code), degrees, DEGREE.name, DEGREE.factor)


_LATLON = [FakeAxis("north", "degree"), FakeAxis("east", "degree")]


@dataclass
class FakeAuthority:
    """EPSG-like tables; unknown codes raise ``NoSuchIdentifierError``."""

    ellipsoids: Dict[str, Any] = field(default_factory=dict)
    meridians: Dict[str, Any] = field(default_factory=dict)
    datums: Dict[str, Any] = field(default_factory=dict)
    crs: Dict[str, Any] = field(default_factory=dict)
    operations: Dict[str, Any] = field(default_factory=dict)
    units: Dict[str, Any] = field(default_factory=dict)
    lookups: List[str] = field(default_factory=list)

    def _get(self, table, kind, code):
        self.lookups.append(f"{kind}:{code}")
        try:
            return table[str(code)]
        except KeyError:
            raise NoSuchIdentifierError(f"No {kind} for EPSG:{code}", str(code)) from None

    def create_ellipsoid(self, code):
        return self._get(self.ellipsoids, "ellipsoid", code)

    def create_prime_meridian(self, code):
        return self._get(self.meridians, "prime meridian", code)

    def create_geodetic_datum(self, code):
        return self._get(self.datums, "datum", code)

    def create_vertical_datum(self, code):
        return self._get(self.datums, "datum", code)

    def create_crs(self, code):
        return self._get(self.crs, "crs", code)

    def create_coordinate_operation(self, code):
        return self._get(self.operations, "operation", code)

    def create_unit(self, code):
        return self._get(self.units, "unit", code)


def epsg_authority() -> FakeAuthority:
    wgs84 = _ellipsoid(7030, "WGS 84", 6378137.0, 298.257223563, aliases=["WGS84"])
    airy = _ellipsoid(7001, "Airy 1830", 6377563.396, 299.3249646)
    bessel = _ellipsoid(7004, "Bessel 1841", 6377397.155, 299.1528128)
    greenwich = _meridian(8901, "Greenwich", 0.0)
    datum_6326 = FakeDatum("World Geodetic System 1984", _epsg(6326), wgs84, greenwich)
    datum_6277 = FakeDatum("Ordnance Survey of Great Britain 1936", _epsg(6277), airy, greenwich)
    crs_4326 = FakeCRS("WGS 84", _epsg(4326), _LATLON, datum=datum_6326)
    utm = FakeOperation("UTM zone 31N", _epsg(16031), "Transverse Mercator", [])
    msl = FakeDatum("Mean Sea Level", _epsg(5100))
    return FakeAuthority(
        ellipsoids={"7030": wgs84, "7001": airy, "7004": bessel},
        meridians={"8901": greenwich, "8908": _meridian(8908, "Jakarta", 106.807719444444)},
        datums={"6326": datum_6326, "6277": datum_6277, "5100": msl},
        crs={
            "4326": crs_4326,
            "32631": FakeCRS("WGS 84 / UTM zone 31N", _epsg(32631), _LATLON, geodetic_crs=crs_4326, coordinate_operation=utm),
            "5714": FakeCRS("MSL height", _epsg(5714), [FakeAxis("up", "metre")], datum=msl),
            "5715": FakeCRS("MSL depth", _epsg(5715), [FakeAxis("down", "metre")], datum=msl),
        },
        operations={"16031": utm},
    )


def fake_factories(scale: float = 1.0, unsupported=(), authority: Optional[FakeAuthority] = None) -> Factories:
    authority = authority or epsg_authority()
    return Factories(
        datum_factory=FakeDatumFactory(scale),
        cs_factory=FakeCSFactory(),
        crs_factory=FakeCRSFactory(),
        operation_factory=FakeOperationFactory(unsupported),
        datum_authority=authority,
        crs_authority=authority,
        operation_authority=authority,
        unit_authority=authority,
    )
