"""Series 3206: defining conversions (map projections)."""
from __future__ import annotations

from typing import Any, List, Optional

from ..units import DEGREE, FOOT, GRAD, METRE, UNITY, US_SURVEY_FOOT, Parameter, Unit
from .base import FixtureNode


def find_parameter(obj, name: str) -> Optional[Any]:
    for param in getattr(obj, "params", None) or ():
        if param.name.lower() == name.lower():
            return param
    return None


def check_parameters(verifier, obj, expected: List[Parameter]) -> None:
    """Every expected parameter must be present; extra parameters are ignored."""

    for parameter in expected:
        actual = find_parameter(obj, parameter.name)
        verifier.not_none(parameter.name, actual)
        value = actual.value * actual.unit_conversion_factor / parameter.unit.factor
        verifier.numeric(parameter.name, value, parameter.value)


class ConversionFixture(FixtureNode[Any]):
    series = 3206
    kind = "conversion"

    def __init__(self, *args, **kwargs):
        super().__init__(*args, **kwargs)
        self.method_name = ""
        self.parameters: List[Parameter] = []

    def define(self, method_name: str, *parameters: Parameter) -> None:
        self.method_name = method_name
        self.parameters = list(parameters)

    def construct(self):
        factory = self.factories.require("operation_factory")
        return factory.create_defining_conversion(self.properties(), self.method_name, self.parameters)

    def check(self, obj) -> None:
        identity = self.identity
        self.verifier.identification(obj, identity.name, identity.code)
        self.verifier.equal("method_name", self.method_name, obj.method_name)
        check_parameters(self.verifier, obj, self.parameters)


def natural_origin(lat, lon, k=None, fe=0.0, fn=0.0, angular: Unit = DEGREE, linear: Unit = METRE) -> List[Parameter]:
    params = [
        Parameter("Latitude of natural origin", lat, angular),
        Parameter("Longitude of natural origin", lon, angular),
    ]
    if k is not None:
        params.append(Parameter("Scale factor at natural origin", k, UNITY))
    params += [Parameter("False easting", fe, linear), Parameter("False northing", fn, linear)]
    return params


def false_origin(lat, lon, lat_1, lat_2, easting, northing, linear: Unit = METRE) -> List[Parameter]:
    return [
        Parameter("Latitude of false origin", lat, DEGREE),
        Parameter("Longitude of false origin", lon, DEGREE),
        Parameter("Latitude of 1st standard parallel", lat_1, DEGREE),
        Parameter("Latitude of 2nd standard parallel", lat_2, DEGREE),
        Parameter("Easting at false origin", easting, linear),
        Parameter("Northing at false origin", northing, linear),
    ]


def hotine(lat, lon, azimuth, skew, k, first, second, variant: str) -> List[Parameter]:
    names = ("False easting", "False northing")
    if variant == "B":
        names = ("Easting at projection centre", "Northing at projection centre")
    return [
        Parameter("Latitude of projection centre", lat, DEGREE),
        Parameter("Longitude of projection centre", lon, DEGREE),
        Parameter("Azimuth of initial line", azimuth, DEGREE),
        Parameter("Angle from Rectified to Skew Grid", skew, DEGREE),
        Parameter("Scale factor on initial line", k, UNITY),
        Parameter(names[0], first, METRE),
        Parameter(names[1], second, METRE),
    ]


TM = "Transverse Mercator"
LCC_1SP = "Lambert Conic Conformal (1SP)"
LCC_2SP = "Lambert Conic Conformal (2SP)"


@ConversionFixture.case(65001, "GIGS conversion 1")
def gigs_65001(fixture: ConversionFixture) -> None:
    fixture.define(TM, *natural_origin(0.0, 3.0, 0.9996, 500000.0, 0.0))


@ConversionFixture.case(65002, "GIGS conversion 2")
def gigs_65002(fixture: ConversionFixture) -> None:
    fixture.define(TM, *natural_origin(49.0, -2.0, 0.999601272, 400000.0, -100000.0))


@ConversionFixture.case(65021, "GIGS conversion 2 alt A")
def gigs_65021(fixture: ConversionFixture) -> None:
    fixture.define(TM, *natural_origin(0.0, -2.0, 0.999601272, 400000.0, -5527462.688))


@ConversionFixture.case(65022, "GIGS conversion 2 alt B")
def gigs_65022(fixture: ConversionFixture) -> None:
    fixture.define(TM, *natural_origin(0.0, -2.0, 0.999601272, 400000.0, -5527063.816))


@ConversionFixture.case(65004, "GIGS conversion 4")
def gigs_65004(fixture: ConversionFixture) -> None:
    fixture.define("Oblique Stereographic", *natural_origin(52.15616056, 5.387638889, 0.9999079, 155000.0, 463000.0))


@ConversionFixture.case(65005, "GIGS conversion 5")
def gigs_65005(fixture: ConversionFixture) -> None:
    fixture.define("Mercator (variant A)", *natural_origin(0.0, 3.192280556, 0.997, 3900000.0, 900000.0))


@ConversionFixture.case(65006, "GIGS conversion 6")
def gigs_65006(fixture: ConversionFixture) -> None:
    fixture.define(LCC_2SP, *false_origin(90.0, 4.367486667, 51.16666723, 49.8333339, 150000.013, 5400088.438))


@ConversionFixture.case(65007, "GIGS conversion 7")
def gigs_65007(fixture: ConversionFixture) -> None:
    fixture.define(TM, *natural_origin(0.0, 141.0, 0.9996, 500000.0, 10000000.0))


@ConversionFixture.case(65008, "GIGS conversion 8")
def gigs_65008(fixture: ConversionFixture) -> None:
    fixture.define(TM, *natural_origin(0.0, 147.0, 0.9996, 500000.0, 10000000.0))


@ConversionFixture.case(65009, "GIGS conversion 9")
def gigs_65009(fixture: ConversionFixture) -> None:
    fixture.define("Albers Equal Area", *false_origin(0.0, 132.0, -18.0, -36.0, 0.0, 0.0))


@ConversionFixture.case(65010, "GIGS conversion 10")
def gigs_65010(fixture: ConversionFixture) -> None:
    fixture.define("Transverse Mercator (South Orientated)", *natural_origin(0.0, 21.0, 1.0, 0.0, 0.0))


@ConversionFixture.case(65011, "GIGS conversion 11")
def gigs_65011(fixture: ConversionFixture) -> None:
    fixture.define(TM, *natural_origin(-90.0, -60.0, 1.0, 5500000.0, 0.0))


@ConversionFixture.case(65012, "GIGS conversion 12")
def gigs_65012(fixture: ConversionFixture) -> None:
    fixture.define("American Polyconic", *natural_origin(0.0, -54.0, fe=5000000.0, fn=10000000.0))


@ConversionFixture.case(65013, "GIGS conversion 13")
def gigs_65013(fixture: ConversionFixture) -> None:
    fixture.define(
        "Hotine Oblique Mercator (variant B)",
        *hotine(4.0, 115.0, 53.31580994, 53.13010236, 0.99984, 590521.147, 442890.861, variant="B"),
    )


@ConversionFixture.case(65014, "GIGS conversion 14")
def gigs_65014(fixture: ConversionFixture) -> None:
    fixture.define(
        "Hotine Oblique Mercator (variant A)",
        *hotine(4.0, 115.0, 53.31580994, 53.13010236, 0.99984, 0.0, 0.0, variant="A"),
    )


@ConversionFixture.case(65015, "GIGS conversion 15")
def gigs_65015(fixture: ConversionFixture) -> None:
    fixture.define("Cassini-Soldner", *natural_origin(2.121679722, 103.4279362, fe=-14810.562, fn=8758.32))


@ConversionFixture.case(65016, "GIGS conversion 16")
def gigs_65016(fixture: ConversionFixture) -> None:
    fixture.define("Lambert Azimuthal Equal Area", *natural_origin(52.0, 10.0, fe=4321000.0, fn=3210000.0))


@ConversionFixture.case(65017, "GIGS conversion 17")
def gigs_65017(fixture: ConversionFixture) -> None:
    fixture.define(
        LCC_2SP, *false_origin(40.33333333, -111.5, 41.78333333, 40.71666667, 1640419.948, 3280839.895, FOOT)
    )


@ConversionFixture.case(65018, "GIGS conversion 18")
def gigs_65018(fixture: ConversionFixture) -> None:
    fixture.define(
        LCC_2SP,
        *false_origin(40.33333333, -111.5, 41.78333333, 40.71666667, 1640416.667, 3280833.333, US_SURVEY_FOOT),
    )


@ConversionFixture.case(65019, "GIGS conversion 19")
def gigs_65019(fixture: ConversionFixture) -> None:
    fixture.define(LCC_1SP, *natural_origin(52.0, 0.0, 0.99987742, 600000.0, 2200000.0, angular=GRAD))


@ConversionFixture.case(65023, "GIGS conversion 23")
def gigs_65023(fixture: ConversionFixture) -> None:
    fixture.define(TM, *natural_origin(0.0, 3.0, 0.9996, 1640416.667, 0.0, linear=US_SURVEY_FOOT))


@ConversionFixture.case(65024, "GIGS conversion 24")
def gigs_65024(fixture: ConversionFixture) -> None:
    fixture.define(
        "Mercator (variant B)",
        Parameter("Latitude of 1st standard parallel", 42.0, DEGREE),
        Parameter("Longitude of natural origin", 51.0, DEGREE),
        Parameter("False easting", 0.0, METRE),
        Parameter("False northing", 0.0, METRE),
    )


@ConversionFixture.case(65025, "GIGS conversion 25")
def gigs_65025(fixture: ConversionFixture) -> None:
    fixture.define(LCC_1SP, *natural_origin(46.8, 2.337229167, 0.99987742, 600000.0, 2200000.0))


@ConversionFixture.case(65026, "GIGS conversion 26")
def gigs_65026(fixture: ConversionFixture) -> None:
    fixture.define(
        "Hotine Oblique Mercator (variant B)",
        *hotine(47.1443937, 19.0485718, 90.0, 90.0, 0.99993, 650000.0, 200000.0, variant="B"),
    )


@ConversionFixture.case(65027, "GIGS conversion 27")
def gigs_65027(fixture: ConversionFixture) -> None:
    fixture.define("Mercator (variant A)", *natural_origin(0.0, 110.0, 0.997, 3900000.0, 900000.0))


@ConversionFixture.case(65028, "GIGS conversion 28")
def gigs_65028(fixture: ConversionFixture) -> None:
    fixture.define(TM, *natural_origin(0.0, -135.0, 0.9996, 500000.0, 0.0))
