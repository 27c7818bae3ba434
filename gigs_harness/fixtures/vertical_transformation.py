"""Series 3211: user-defined transformations between vertical CRS.

Source and target CRS come from the 3210 cases, or from the authority for the
EPSG mean sea level CRS.
"""
from __future__ import annotations

from ..units import ARC_SECOND, DEGREE, METRE, Parameter
from . import vertical_crs as vertical
from .transformation import TransformationFixture

VERTICAL_OFFSET = "Vertical Offset"
VERTICAL_OFFSET_AND_SLOPE = "Vertical Offset and Slope"

MSL_HEIGHT = 5714
MSL_DEPTH = 5715


class VerticalTransformationFixture(TransformationFixture):
    series = 3211
    kind = "vertical_transformation"


def offset(metres: float) -> Parameter:
    return Parameter(VERTICAL_OFFSET, metres, METRE)


@VerticalTransformationFixture.case(61501, "GIGS_61501")
def gigs_61501(fixture: VerticalTransformationFixture) -> None:
    fixture.define(vertical.gigs_64505, MSL_HEIGHT, VERTICAL_OFFSET, offset(0.0))


@VerticalTransformationFixture.case(61502, "GIGS_61502")
def gigs_61502(fixture: VerticalTransformationFixture) -> None:
    fixture.define(vertical.gigs_64506, MSL_DEPTH, VERTICAL_OFFSET, offset(0.0))


@VerticalTransformationFixture.case(61503, "GIGS_61503")
def gigs_61503(fixture: VerticalTransformationFixture) -> None:
    fixture.define(
        vertical.gigs_64501,
        vertical.gigs_64505,
        VERTICAL_OFFSET_AND_SLOPE,
        Parameter("Ordinate 1 of evaluation point", 52.0, DEGREE),
        Parameter("Ordinate 2 of evaluation point", 3.0, DEGREE),
        offset(-0.486),
        Parameter("Inclination in latitude", -0.003, ARC_SECOND),
        Parameter("Inclination in longitude", 0.006, ARC_SECOND),
    )


@VerticalTransformationFixture.case(65400, "GIGS_65400")
def gigs_65400(fixture: VerticalTransformationFixture) -> None:
    fixture.define(vertical.gigs_64505, vertical.gigs_64508, VERTICAL_OFFSET, offset(-28.0))


@VerticalTransformationFixture.case(65438, "GIGS_65438")
def gigs_65438(fixture: VerticalTransformationFixture) -> None:
    fixture.define(vertical.gigs_64505, vertical.gigs_64507, VERTICAL_OFFSET, offset(28.0))


@VerticalTransformationFixture.case(65440, "GIGS_65440")
def gigs_65440(fixture: VerticalTransformationFixture) -> None:
    fixture.define(vertical.gigs_64506, vertical.gigs_64508, VERTICAL_OFFSET, offset(-28.0))


@VerticalTransformationFixture.case(65441, "GIGS_65441")
def gigs_65441(fixture: VerticalTransformationFixture) -> None:
    fixture.define(vertical.gigs_64506, vertical.gigs_64507, VERTICAL_OFFSET, offset(28.0))


@VerticalTransformationFixture.case(65447, "GIGS_65447")
def gigs_65447(fixture: VerticalTransformationFixture) -> None:
    fixture.define(vertical.gigs_64505, vertical.gigs_64501, VERTICAL_OFFSET, offset(0.4))
