"""Series 3207: user-defined projected CRS."""
from __future__ import annotations

from typing import Any

from ..coordinate_systems import coordinate_system
from . import conversion as conversions
from . import geodetic_crs as geodetic
from .base import FixtureNode
from .resolver import authority, user_defined


class ProjectedCRSFixture(FixtureNode[Any]):
    """Base CRS from 3205, conversion from 3206 or the authority factory."""

    series = 3207
    kind = "projected_crs"

    def __init__(self, *args, **kwargs):
        super().__init__(*args, **kwargs)
        self.cs_code = 4400

    def construct(self):
        factory = self.factories.require("crs_factory")
        cs_factory = self.factories.require("cs_factory")
        base_crs = self.component("base_crs", self.lookup("crs_authority", "create_crs"))
        conversion = self.component("conversion", self.lookup("operation_authority", "create_coordinate_operation"))
        cs = cs_factory.create_coordinate_system(coordinate_system(self.cs_code))
        return factory.create_projected_crs(self.properties(), base_crs, conversion, cs)

    def check(self, obj) -> None:
        identity = self.identity
        self.verifier.identification(obj, identity.name, identity.code)
        self.verify_component("base_crs", obj.geodetic_crs)
        self.verify_component("conversion", obj.coordinate_operation)
        self.verifier.axes("coordinate_system", obj.axis_info, coordinate_system(self.cs_code).expected_axes())


def _define(fixture: ProjectedCRSFixture, base_crs, conversion, cs_code: int) -> None:
    fixture.use("base_crs", user_defined(base_crs))
    if isinstance(conversion, int):
        fixture.use("conversion", authority(conversion))
    else:
        fixture.use("conversion", user_defined(conversion))
    fixture.cs_code = cs_code


@ProjectedCRSFixture.case(62001, "GIGS projCRS A1")
def gigs_62001(fixture: ProjectedCRSFixture) -> None:
    _define(fixture, geodetic.gigs_64003, conversions.gigs_65001, 4400)


@ProjectedCRSFixture.case(62002, "GIGS projCRS A1-2")
def gigs_62002(fixture: ProjectedCRSFixture) -> None:
    _define(fixture, geodetic.gigs_64003, conversions.gigs_65001, 4500)


@ProjectedCRSFixture.case(62003, "GIGS projCRS A1-3")
def gigs_62003(fixture: ProjectedCRSFixture) -> None:
    _define(fixture, geodetic.gigs_64003, conversions.gigs_65001, 4499)


@ProjectedCRSFixture.case(62004, "GIGS projCRS A1-4")
def gigs_62004(fixture: ProjectedCRSFixture) -> None:
    _define(fixture, geodetic.gigs_64003, conversions.gigs_65001, 4532)


@ProjectedCRSFixture.case(62005, "GIGS projCRS A1-5")
def gigs_62005(fixture: ProjectedCRSFixture) -> None:
    _define(fixture, geodetic.gigs_64003, conversions.gigs_65001, 4498)


@ProjectedCRSFixture.case(62006, "GIGS projCRS A1-6")
def gigs_62006(fixture: ProjectedCRSFixture) -> None:
    _define(fixture, geodetic.gigs_64003, conversions.gigs_65001, 4530)


@ProjectedCRSFixture.case(62007, "GIGS projCRS A2")
def gigs_62007(fixture: ProjectedCRSFixture) -> None:
    _define(fixture, geodetic.gigs_64003, conversions.gigs_65002, 4400)


@ProjectedCRSFixture.case(62008, "GIGS projCRS A21")
def gigs_62008(fixture: ProjectedCRSFixture) -> None:
    _define(fixture, geodetic.gigs_64003, conversions.gigs_65021, 4400)


@ProjectedCRSFixture.case(62027, "GIGS projCRS A23")
def gigs_62027(fixture: ProjectedCRSFixture) -> None:
    _define(fixture, geodetic.gigs_64003, conversions.gigs_65023, 4497)


@ProjectedCRSFixture.case(62028, "GIGS projCRS AA1")
def gigs_62028(fixture: ProjectedCRSFixture) -> None:
    _define(fixture, geodetic.gigs_64326, 16031, 4400)


@ProjectedCRSFixture.case(62009, "GIGS projCRS B2")
def gigs_62009(fixture: ProjectedCRSFixture) -> None:
    _define(fixture, geodetic.gigs_64005, conversions.gigs_65002, 4400)


@ProjectedCRSFixture.case(62010, "GIGS projCRS B22")
def gigs_62010(fixture: ProjectedCRSFixture) -> None:
    _define(fixture, geodetic.gigs_64005, conversions.gigs_65022, 4400)


@ProjectedCRSFixture.case(62029, "GIGS projCRS BB2")
def gigs_62029(fixture: ProjectedCRSFixture) -> None:
    _define(fixture, geodetic.gigs_64277, 19916, 4400)


@ProjectedCRSFixture.case(62011, "GIGS projCRS C4")
def gigs_62011(fixture: ProjectedCRSFixture) -> None:
    _define(fixture, geodetic.gigs_64006, conversions.gigs_65004, 4499)


@ProjectedCRSFixture.case(62030, "GIGS projCRS CC4")
def gigs_62030(fixture: ProjectedCRSFixture) -> None:
    _define(fixture, geodetic.gigs_64289, 19914, 4499)


@ProjectedCRSFixture.case(62012, "GIGS projCRS D5")
def gigs_62012(fixture: ProjectedCRSFixture) -> None:
    _define(fixture, geodetic.gigs_64007, conversions.gigs_65005, 4499)


@ProjectedCRSFixture.case(62013, "GIGS projCRS E6")
def gigs_62013(fixture: ProjectedCRSFixture) -> None:
    _define(fixture, geodetic.gigs_64008, conversions.gigs_65006, 4499)


@ProjectedCRSFixture.case(62031, "GIGS projCRS EE6")
def gigs_62031(fixture: ProjectedCRSFixture) -> None:
    _define(fixture, geodetic.gigs_64313, 19961, 4499)


@ProjectedCRSFixture.case(62014, "GIGS projCRS F7")
def gigs_62014(fixture: ProjectedCRSFixture) -> None:
    _define(fixture, geodetic.gigs_64009, conversions.gigs_65007, 4400)


@ProjectedCRSFixture.case(62015, "GIGS projCRS F8")
def gigs_62015(fixture: ProjectedCRSFixture) -> None:
    _define(fixture, geodetic.gigs_64009, conversions.gigs_65008, 4400)


@ProjectedCRSFixture.case(62016, "GIGS projCRS F9")
def gigs_62016(fixture: ProjectedCRSFixture) -> None:
    _define(fixture, geodetic.gigs_64009, conversions.gigs_65009, 4400)


@ProjectedCRSFixture.case(62017, "GIGS projCRS G10")
def gigs_62017(fixture: ProjectedCRSFixture) -> None:
    _define(fixture, geodetic.gigs_64010, conversions.gigs_65010, 6503)


@ProjectedCRSFixture.case(62018, "GIGS projCRS G11")
def gigs_62018(fixture: ProjectedCRSFixture) -> None:
    _define(fixture, geodetic.gigs_64010, conversions.gigs_65011, 4530)


@ProjectedCRSFixture.case(62019, "GIGS projCRS G12")
def gigs_62019(fixture: ProjectedCRSFixture) -> None:
    _define(fixture, geodetic.gigs_64010, conversions.gigs_65012, 4499)


@ProjectedCRSFixture.case(62020, "GIGS projCRS G13")
def gigs_62020(fixture: ProjectedCRSFixture) -> None:
    _define(fixture, geodetic.gigs_64010, conversions.gigs_65013, 4400)


@ProjectedCRSFixture.case(62021, "GIGS projCRS G14")
def gigs_62021(fixture: ProjectedCRSFixture) -> None:
    _define(fixture, geodetic.gigs_64010, conversions.gigs_65014, 4400)


@ProjectedCRSFixture.case(62022, "GIGS projCRS G15")
def gigs_62022(fixture: ProjectedCRSFixture) -> None:
    _define(fixture, geodetic.gigs_64010, conversions.gigs_65015, 4499)


@ProjectedCRSFixture.case(62023, "GIGS projCRS G16")
def gigs_62023(fixture: ProjectedCRSFixture) -> None:
    _define(fixture, geodetic.gigs_64010, conversions.gigs_65016, 4532)


@ProjectedCRSFixture.case(62024, "GIGS projCRS G17")
def gigs_62024(fixture: ProjectedCRSFixture) -> None:
    _define(fixture, geodetic.gigs_64010, conversions.gigs_65017, 4495)


@ProjectedCRSFixture.case(62025, "GIGS projCRS G18")
def gigs_62025(fixture: ProjectedCRSFixture) -> None:
    _define(fixture, geodetic.gigs_64010, conversions.gigs_65018, 4497)


@ProjectedCRSFixture.case(62026, "GIGS projCRS H19")
def gigs_62026(fixture: ProjectedCRSFixture) -> None:
    _define(fixture, geodetic.gigs_64011, conversions.gigs_65019, 4499)


@ProjectedCRSFixture.case(62033, "GIGS projCRS HH19")
def gigs_62033(fixture: ProjectedCRSFixture) -> None:
    _define(fixture, geodetic.gigs_64807, 18082, 4499)


@ProjectedCRSFixture.case(62038, "GIGS projCRS J28")
def gigs_62038(fixture: ProjectedCRSFixture) -> None:
    _define(fixture, geodetic.gigs_64012, conversions.gigs_65028, 4400)


@ProjectedCRSFixture.case(62036, "GIGS projCRS K26")
def gigs_62036(fixture: ProjectedCRSFixture) -> None:
    _define(fixture, geodetic.gigs_64015, conversions.gigs_65026, 4498)


@ProjectedCRSFixture.case(62037, "GIGS projCRS L27")
def gigs_62037(fixture: ProjectedCRSFixture) -> None:
    _define(fixture, geodetic.gigs_64014, conversions.gigs_65027, 4499)


@ProjectedCRSFixture.case(62035, "GIGS projCRS M25")
def gigs_62035(fixture: ProjectedCRSFixture) -> None:
    _define(fixture, geodetic.gigs_64003, conversions.gigs_65025, 4499)


@ProjectedCRSFixture.case(62034, "GIGS projCRS Y24")
def gigs_62034(fixture: ProjectedCRSFixture) -> None:
    _define(fixture, geodetic.gigs_64003, conversions.gigs_65024, 4534)


@ProjectedCRSFixture.case(62039, "GIGS projCRS Z28")
def gigs_62039(fixture: ProjectedCRSFixture) -> None:
    _define(fixture, geodetic.gigs_64012, conversions.gigs_65028, 4400)
