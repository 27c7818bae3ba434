"""Library-under-test adapter backed by pyproj.

User-defined objects are described as PROJJSON carrying the GIGS identifier
from the properties record, then instantiated by PROJ. Authority lookups go
through the EPSG database shipped with PROJ.
"""
from __future__ import annotations

import logging
from typing import Any, Callable, Dict, Iterable, Mapping, Tuple

from pyproj import CRS
from pyproj.crs import CoordinateOperation, CoordinateSystem, Datum, Ellipsoid, PrimeMeridian
from pyproj.database import get_units_map
from pyproj.exceptions import CRSError

from .coordinate_systems import CoordinateSystemDefinition
from .errors import NoSuchIdentifierError
from .factories import Factories
from .units import Parameter, Unit

logger = logging.getLogger(__name__)

PROJJSON_SCHEMA = "https://proj.org/schemas/v0.4/projjson.schema.json"

_NATURAL_ORIGIN = {
    "Latitude of natural origin": 8801,
    "Longitude of natural origin": 8802,
    "Scale factor at natural origin": 8805,
    "False easting": 8806,
    "False northing": 8807,
}
_FALSE_ORIGIN = {
    "Latitude of false origin": 8821,
    "Longitude of false origin": 8822,
    "Latitude of 1st standard parallel": 8823,
    "Latitude of 2nd standard parallel": 8824,
    "Easting at false origin": 8826,
    "Northing at false origin": 8827,
}
_HOTINE = {
    "Latitude of projection centre": 8811,
    "Longitude of projection centre": 8812,
    "Azimuth of initial line": 8813,
    "Angle from Rectified to Skew Grid": 8814,
    "Scale factor on initial line": 8815,
}
_HELMERT_3 = {
    "X-axis translation": 8605,
    "Y-axis translation": 8606,
    "Z-axis translation": 8607,
}
_HELMERT_7 = {
    **_HELMERT_3,
    "X-axis rotation": 8608,
    "Y-axis rotation": 8609,
    "Z-axis rotation": 8610,
    "Scale difference": 8611,
}

_NATURAL_ORIGIN_NO_SCALE = {name: code for name, code in _NATURAL_ORIGIN.items() if code != 8805}
_MERCATOR_B = {
    "Latitude of 1st standard parallel": 8823,
    "Longitude of natural origin": 8802,
    "False easting": 8806,
    "False northing": 8807,
}

# EPSG method name -> (method code, parameter name -> parameter code)
OPERATION_METHODS: Dict[str, Tuple[int, Dict[str, int]]] = {
    "Transverse Mercator": (9807, _NATURAL_ORIGIN),
    "Transverse Mercator (South Orientated)": (9808, _NATURAL_ORIGIN),
    "Mercator (variant A)": (9804, _NATURAL_ORIGIN),
    "Mercator (variant B)": (9805, _MERCATOR_B),
    "Oblique Stereographic": (9809, _NATURAL_ORIGIN),
    "Lambert Conic Conformal (1SP)": (9801, _NATURAL_ORIGIN),
    "Lambert Conic Conformal (2SP)": (9802, _FALSE_ORIGIN),
    "Albers Equal Area": (9822, _FALSE_ORIGIN),
    "American Polyconic": (9818, _NATURAL_ORIGIN_NO_SCALE),
    "Cassini-Soldner": (9806, _NATURAL_ORIGIN_NO_SCALE),
    "Lambert Azimuthal Equal Area": (9820, _NATURAL_ORIGIN_NO_SCALE),
    "Hotine Oblique Mercator (variant A)": (9812, {**_HOTINE, "False easting": 8806, "False northing": 8807}),
    "Hotine Oblique Mercator (variant B)": (
        9815,
        {**_HOTINE, "Easting at projection centre": 8816, "Northing at projection centre": 8817},
    ),
    "Geocentric translations (geog2D domain)": (9603, _HELMERT_3),
    "Position Vector transformation (geog2D domain)": (9606, _HELMERT_7),
    "Coordinate Frame rotation (geog2D domain)": (9607, _HELMERT_7),
    "Longitude rotation": (9601, {"Longitude offset": 8602}),
    "Vertical Offset": (9616, {"Vertical Offset": 8603}),
    "Vertical Offset and Slope": (
        1046,
        {
            "Ordinate 1 of evaluation point": 8617,
            "Ordinate 2 of evaluation point": 8618,
            "Vertical Offset": 8603,
            "Inclination in latitude": 8730,
            "Inclination in longitude": 8731,
        },
    ),
}


def _identified(object_type: str, properties: Mapping[str, Any]) -> Dict[str, Any]:
    identifier = properties["identifier"]
    data: Dict[str, Any] = {
        "$schema": PROJJSON_SCHEMA,
        "type": object_type,
        "name": properties["name"],
    }
    if properties.get("anchor"):
        data["anchor"] = properties["anchor"]
    data["id"] = {"authority": identifier["codespace"], "code": identifier["code"]}
    return data


def _component(obj: Any) -> Dict[str, Any]:
    data = dict(obj.to_json_dict())
    data.pop("$schema", None)
    return data


def _measure(value: float, unit: Unit) -> Dict[str, Any]:
    return {"value": value, "unit": unit.to_json()}


def _method(method_name: str, parameters: Iterable[Parameter]) -> Dict[str, Any]:
    try:
        method_code, codes = OPERATION_METHODS[method_name]
    except KeyError:
        raise NoSuchIdentifierError(f'Operation method "{method_name}" not found.', method_name) from None
    values = []
    for parameter in parameters:
        if parameter.name not in codes:
            raise NoSuchIdentifierError(
                f'Parameter "{parameter.name}" is not defined for "{method_name}".', parameter.name
            )
        values.append(
            {
                "name": parameter.name,
                "value": parameter.value,
                "unit": parameter.unit.to_json(),
                "id": {"authority": "EPSG", "code": codes[parameter.name]},
            }
        )
    return {
        "method": {"name": method_name, "id": {"authority": "EPSG", "code": method_code}},
        "parameters": values,
    }


class PyprojDatumFactory:
    def create_ellipsoid(self, properties, semi_major_axis: float, semi_minor_axis: float, unit: Unit) -> Ellipsoid:
        data = _identified("Ellipsoid", properties)
        data["semi_major_axis"] = _measure(semi_major_axis, unit)
        data["semi_minor_axis"] = _measure(semi_minor_axis, unit)
        return Ellipsoid.from_json_dict(data)

    def create_flattened_sphere(self, properties, semi_major_axis: float, inverse_flattening: float, unit: Unit) -> Ellipsoid:
        data = _identified("Ellipsoid", properties)
        data["semi_major_axis"] = _measure(semi_major_axis, unit)
        data["inverse_flattening"] = inverse_flattening
        return Ellipsoid.from_json_dict(data)

    def create_prime_meridian(self, properties, longitude: float, unit: Unit) -> PrimeMeridian:
        data = _identified("PrimeMeridian", properties)
        data["longitude"] = _measure(longitude, unit)
        return PrimeMeridian.from_json_dict(data)

    def create_geodetic_datum(self, properties, ellipsoid: Ellipsoid, prime_meridian: PrimeMeridian) -> Datum:
        data = _identified("GeodeticReferenceFrame", properties)
        data["ellipsoid"] = _component(ellipsoid)
        data["prime_meridian"] = _component(prime_meridian)
        return Datum.from_json_dict(data)

    def create_vertical_datum(self, properties) -> Datum:
        return Datum.from_json_dict(_identified("VerticalReferenceFrame", properties))


class PyprojCSFactory:
    def create_coordinate_system(self, definition: CoordinateSystemDefinition) -> CoordinateSystem:
        return CoordinateSystem.from_json_dict(definition.to_json())


class PyprojCRSFactory:
    def _crs(self, object_type: str, properties, **members: Any) -> CRS:
        data = _identified(object_type, properties)
        for key, value in members.items():
            member = _component(value)
            if key == "datum" and member.get("type") == "DatumEnsemble":
                key = "datum_ensemble"
            data[key] = member
        return CRS.from_json_dict(data)

    def create_geographic_crs(self, properties, datum, cs) -> CRS:
        return self._crs("GeographicCRS", properties, datum=datum, coordinate_system=cs)

    def create_geocentric_crs(self, properties, datum, cs) -> CRS:
        return self._crs("GeodeticCRS", properties, datum=datum, coordinate_system=cs)

    def create_projected_crs(self, properties, base_crs, conversion, cs) -> CRS:
        return self._crs("ProjectedCRS", properties, base_crs=base_crs, conversion=conversion, coordinate_system=cs)

    def create_vertical_crs(self, properties, datum, cs) -> CRS:
        return self._crs("VerticalCRS", properties, datum=datum, coordinate_system=cs)


class PyprojOperationFactory:
    def create_defining_conversion(self, properties, method_name: str, parameters) -> CoordinateOperation:
        data = _identified("Conversion", properties)
        data.update(_method(method_name, parameters))
        return CoordinateOperation.from_json_dict(data)

    def create_transformation(self, properties, source_crs, target_crs, method_name: str, parameters) -> CoordinateOperation:
        data = _identified("Transformation", properties)
        data["source_crs"] = _component(source_crs)
        data["target_crs"] = _component(target_crs)
        data.update(_method(method_name, parameters))
        return CoordinateOperation.from_json_dict(data)

    def create_concatenated_operation(self, properties, steps) -> CoordinateOperation:
        """Chain ``steps``; the target CRS of each step is the source CRS of the next."""

        data = _identified("ConcatenatedOperation", properties)
        members = [_component(step) for step in steps]
        data["source_crs"] = members[0]["source_crs"]
        data["target_crs"] = members[-1]["target_crs"]
        data["steps"] = members
        return CoordinateOperation.from_json_dict(data)


def _from_epsg(kind: str, builder: Callable[[int], Any], code: str) -> Any:
    try:
        return builder(int(code))
    except (CRSError, ValueError) as exc:
        raise NoSuchIdentifierError(f"{kind} EPSG:{code} not found: {exc}", str(code)) from exc


class PyprojAuthorityFactory:
    """EPSG lookups for datums, CRS, operations and units."""

    _UNIT_KINDS = {"linear": "linear", "angular": "angular", "scale": "scale"}

    def create_ellipsoid(self, code: str) -> Ellipsoid:
        return _from_epsg("Ellipsoid", Ellipsoid.from_epsg, code)

    def create_prime_meridian(self, code: str) -> PrimeMeridian:
        return _from_epsg("PrimeMeridian", PrimeMeridian.from_epsg, code)

    def create_geodetic_datum(self, code: str) -> Datum:
        return _from_epsg("GeodeticDatum", Datum.from_epsg, code)

    def create_vertical_datum(self, code: str) -> Datum:
        return _from_epsg("VerticalDatum", Datum.from_epsg, code)

    def create_crs(self, code: str) -> CRS:
        return _from_epsg("CRS", CRS.from_epsg, code)

    def create_coordinate_operation(self, code: str) -> CoordinateOperation:
        return _from_epsg("CoordinateOperation", CoordinateOperation.from_epsg, code)

    def create_unit(self, code: str) -> Unit:
        for unit in get_units_map(auth_name="EPSG").values():
            if str(unit.code) != str(code):
                continue
            kind = self._UNIT_KINDS.get(unit.category)
            # Sexagesimal units are not a scale of the radian.
            if kind is None or "sexagesimal" in unit.name.lower():
                break
            return Unit(unit.name, kind, float(unit.conv_factor), int(code))
        raise NoSuchIdentifierError(f"Unit EPSG:{code} not found.", str(code))


def pyproj_factories() -> Factories:
    """Factories bundle exercising pyproj as the library under test."""

    authority = PyprojAuthorityFactory()
    logger.debug("Using pyproj factories")
    return Factories(
        datum_factory=PyprojDatumFactory(),
        cs_factory=PyprojCSFactory(),
        crs_factory=PyprojCRSFactory(),
        operation_factory=PyprojOperationFactory(),
        datum_authority=authority,
        crs_authority=authority,
        operation_authority=authority,
        unit_authority=authority,
    )
