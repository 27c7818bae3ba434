"""EPSG coordinate systems referenced by the user-defined CRS cases."""
from __future__ import annotations

from typing import Dict, List, NamedTuple, Tuple

from .units import DEGREE, FOOT, GRAD, METRE, US_SURVEY_FOOT, Unit


class Axis(NamedTuple):
    name: str
    abbreviation: str
    direction: str
    unit: Unit

    def to_json(self) -> dict:
        return {
            "name": self.name,
            "abbreviation": self.abbreviation,
            "direction": self.direction,
            "unit": self.unit.to_json(),
        }


class CoordinateSystemDefinition(NamedTuple):
    code: int
    subtype: str
    axes: Tuple[Axis, ...]

    def to_json(self) -> dict:
        return {
            "type": "CoordinateSystem",
            "subtype": self.subtype,
            "axis": [axis.to_json() for axis in self.axes],
            "id": {"authority": "EPSG", "code": self.code},
        }

    def expected_axes(self) -> List[Tuple[str, str]]:
        """``(direction, unit name)`` pairs as reported by ``axis_info``."""

        return [(axis.direction.lower(), axis.unit.name) for axis in self.axes]


_LAT = Axis("Geodetic latitude", "Lat", "north", DEGREE)
_LON = Axis("Geodetic longitude", "Lon", "east", DEGREE)
_HEIGHT = Axis("Ellipsoidal height", "h", "up", METRE)


def _cs(code: int, subtype: str, *axes: Axis) -> CoordinateSystemDefinition:
    return CoordinateSystemDefinition(code, subtype, tuple(axes))


COORDINATE_SYSTEMS: Dict[int, CoordinateSystemDefinition] = {
    cs.code: cs
    for cs in (
        _cs(6422, "ellipsoidal", _LAT, _LON),
        _cs(6423, "ellipsoidal", _LAT, _LON, _HEIGHT),
        _cs(6424, "ellipsoidal", _LON, _LAT),
        _cs(
            6403,
            "ellipsoidal",
            Axis("Geodetic latitude", "Lat", "north", GRAD),
            Axis("Geodetic longitude", "Lon", "east", GRAD),
        ),
        _cs(
            6500,
            "Cartesian",
            Axis("Geocentric X", "X", "geocentricX", METRE),
            Axis("Geocentric Y", "Y", "geocentricY", METRE),
            Axis("Geocentric Z", "Z", "geocentricZ", METRE),
        ),
        _cs(4400, "Cartesian", Axis("Easting", "E", "east", METRE), Axis("Northing", "N", "north", METRE)),
        _cs(4500, "Cartesian", Axis("Northing", "N", "north", METRE), Axis("Easting", "E", "east", METRE)),
        _cs(4499, "Cartesian", Axis("Easting", "X", "east", METRE), Axis("Northing", "Y", "north", METRE)),
        _cs(4530, "Cartesian", Axis("Northing", "X", "north", METRE), Axis("Easting", "Y", "east", METRE)),
        _cs(4532, "Cartesian", Axis("Northing", "Y", "north", METRE), Axis("Easting", "X", "east", METRE)),
        _cs(4498, "Cartesian", Axis("Easting", "Y", "east", METRE), Axis("Northing", "X", "north", METRE)),
        _cs(4534, "Cartesian", Axis("Northing", "N", "north", METRE), Axis("Easting", "E", "east", METRE)),
        _cs(6503, "Cartesian", Axis("Westing", "Y", "west", METRE), Axis("Southing", "X", "south", METRE)),
        _cs(4495, "Cartesian", Axis("Easting", "X", "east", FOOT), Axis("Northing", "Y", "north", FOOT)),
        _cs(
            4497,
            "Cartesian",
            Axis("Easting", "X", "east", US_SURVEY_FOOT),
            Axis("Northing", "Y", "north", US_SURVEY_FOOT),
        ),
        _cs(6499, "vertical", Axis("Gravity-related height", "H", "up", METRE)),
        _cs(6498, "vertical", Axis("Gravity-related depth", "D", "down", METRE)),
        _cs(1030, "vertical", Axis("Gravity-related height", "H", "up", FOOT)),
        _cs(6495, "vertical", Axis("Gravity-related depth", "D", "down", FOOT)),
        _cs(6497, "vertical", Axis("Gravity-related height", "H", "up", US_SURVEY_FOOT)),
    )
}


def coordinate_system(code: int) -> CoordinateSystemDefinition:
    try:
        return COORDINATE_SYSTEMS[code]
    except KeyError:
        raise KeyError(f"Coordinate system EPSG:{code} is not defined") from None
