"""Units of measure and parameter values passed to construction factories."""
from __future__ import annotations

import math
from typing import NamedTuple, Optional


class Unit(NamedTuple):
    name: str
    kind: str  # "linear", "angular" or "scale"
    factor: float  # to metre, radian or unity
    epsg_code: Optional[int] = None

    def to_json(self) -> dict:
        """PROJJSON unit object."""

        unit_type = {"linear": "LinearUnit", "angular": "AngularUnit", "scale": "ScaleUnit"}[self.kind]
        data = {"type": unit_type, "name": self.name, "conversion_factor": self.factor}
        if self.epsg_code is not None:
            data["id"] = {"authority": "EPSG", "code": self.epsg_code}
        return data

    def convert_to(self, value: float, target: "Unit") -> float:
        if self.kind != target.kind:
            raise ValueError(f"Can not convert from {self.name} to {target.name}")
        return value * self.factor / target.factor


METRE = Unit("metre", "linear", 1.0, 9001)
KILOMETRE = Unit("kilometre", "linear", 1000.0, 9036)
FOOT = Unit("foot", "linear", 0.3048, 9002)
US_SURVEY_FOOT = Unit("US survey foot", "linear", 12 / 39.37, 9003)
DEGREE = Unit("degree", "angular", math.pi / 180, 9102)
GRAD = Unit("grad", "angular", math.pi / 200, 9105)
RADIAN = Unit("radian", "angular", 1.0, 9101)
ARC_SECOND = Unit("arc-second", "angular", math.pi / 648000, 9104)
MICRORADIAN = Unit("microradian", "angular", 1e-6, 9109)
UNITY = Unit("unity", "scale", 1.0, 9201)
PARTS_PER_MILLION = Unit("parts per million", "scale", 1e-6, 9202)


class Parameter(NamedTuple):
    name: str
    value: float
    unit: Unit


SEXAGESIMAL_DMS = "sexagesimal DMS"


def is_sexagesimal(unit_name: Optional[str]) -> bool:
    return bool(unit_name) and unit_name.lower().startswith("sexagesimal")


def sexagesimal_to_degrees(value: float) -> float:
    """Decimal degrees from the ``DDD.MMSSsss`` notation of EPSG unit 9110."""

    sign = -1.0 if value < 0 else 1.0
    whole, fraction = f"{abs(value):.10f}".split(".")
    minutes = int(fraction[:2])
    seconds = float(f"{fraction[2:4]}.{fraction[4:]}")
    return sign * (int(whole) + minutes / 60 + seconds / 3600)
