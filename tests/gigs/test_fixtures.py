"""Fixture engine: memoization, delegation, propagation and the reference scenarios."""
import pytest

from gigs_harness.configuration import ConfigurationRegistry, Option
from gigs_harness.errors import (
    AssertionMismatch,
    ConfigurationMisuseError,
    ConstructionError,
    DuplicateIdentityError,
    NoSuchIdentifierError,
    UnsupportedCapability,
)
from gigs_harness.factories import Factories
from gigs_harness.fixtures import (
    AuthorityFetched,
    Delegate,
    FixtureState,
    UserDefined,
    guarded_build,
)
from gigs_harness.fixtures import ellipsoid, geodetic_crs, geodetic_datum, prime_meridian
from gigs_harness.fixtures.ellipsoid import EllipsoidFixture
from gigs_harness.fixtures.geodetic_crs import GeodeticCRSFixture
from gigs_harness.fixtures.geodetic_datum import GeodeticDatumFixture
from gigs_harness.units import DEGREE, SEXAGESIMAL_DMS, Unit, is_sexagesimal, sexagesimal_to_degrees
from gigs_harness.verification import within_tolerance

from fakes import fake_factories


def _ellipsoid(factories, configuration=None):
    fixture = EllipsoidFixture(factories, configuration)
    fixture.set_identity(67030, "GIGS ellipsoid A")
    return fixture


def test_guarded_build_classifies_errors():
    def unknown():
        raise NoSuchIdentifierError("no such method")

    def broken():
        raise RuntimeError("boom")

    assert guarded_build(lambda: 42).unwrap() == 42
    assert isinstance(guarded_build(unknown).error, UnsupportedCapability)
    result = guarded_build(broken)
    assert not result.ok
    assert isinstance(result.error, ConstructionError)
    assert isinstance(result.error.__cause__, RuntimeError)
    def mismatch():
        raise AssertionMismatch("name", "a", "b")

    with pytest.raises(AssertionMismatch):
        guarded_build(mismatch)


def test_get_object_is_memoized(factories):
    fixture = _ellipsoid(factories)
    fixture.define(6378137.0, 6356752.314247833, 298.257223563)
    first = fixture.get_object()
    assert fixture.get_object() is first
    assert factories.datum_factory.calls == ["create_flattened_sphere"]
    assert fixture.state is FixtureState.BUILT


def test_none_result_is_cached(factories):
    calls = []

    class NothingFixture(EllipsoidFixture):
        def construct(self):
            calls.append(1)
            return None

    fixture = NothingFixture(factories)
    fixture.set_identity(67030, "GIGS ellipsoid A")
    assert fixture.get_object() is None
    assert fixture.get_object() is None
    assert calls == [1]
    with pytest.raises(AssertionMismatch):
        fixture.verify()


def test_identity_is_set_once(factories):
    fixture = _ellipsoid(factories)
    with pytest.raises(DuplicateIdentityError):
        fixture.set_identity(67001, "GIGS ellipsoid B")


def test_build_requires_identity(factories):
    with pytest.raises(ConfigurationMisuseError):
        EllipsoidFixture(factories).get_object()


def test_missing_factory_is_unsupported():
    fixture = _ellipsoid(Factories())
    with pytest.raises(UnsupportedCapability):
        fixture.get_object()
    assert fixture.state is FixtureState.UNSUPPORTED


def test_construction_failure_state(factories, monkeypatch):
    def explode(*args):
        raise ValueError("invalid ellipsoid")

    monkeypatch.setattr(factories.datum_factory, "create_flattened_sphere", explode)
    fixture = _ellipsoid(factories)
    fixture.define(6378137.0, 6356752.3, 298.257223563)
    with pytest.raises(ConstructionError):
        fixture.verify()
    assert fixture.state is FixtureState.CONSTRUCTION_FAILED


def test_nested_construction_failure_is_terminal_and_memoized(factories, monkeypatch):
    attempts = []

    def explode(*args):
        attempts.append(args)
        raise ValueError("invalid ellipsoid")

    monkeypatch.setattr(factories.datum_factory, "create_flattened_sphere", explode)
    datum = GeodeticDatumFixture(factories)
    with pytest.raises(ConstructionError):
        geodetic_datum.gigs_66001(datum)
    assert datum.state is FixtureState.CONSTRUCTION_FAILED
    with pytest.raises(ConstructionError):
        datum.get_object()
    assert len(attempts) == 1
    assert "create_geodetic_datum" not in factories.datum_factory.calls


def test_scenario_a_derived_inverse_flattening_passes(factories):
    fixture = _ellipsoid(factories)
    fixture.define(6378137.0, 6356752.314247833, 298.2572236, ivf_definitive=False)
    fixture.verify()
    assert fixture.state is FixtureState.VERIFIED
    assert within_tolerance(fixture.get_object().inverse_flattening, 298.2572236, 1e-7)


def test_scenario_b_numeric_checks_skipped_but_identification_runs(non_preserving):
    fixture = _ellipsoid(fake_factories(scale=1.001), non_preserving)
    fixture.define(6378137.0, 6356752.3, 298.257223563)
    fixture.verify()
    assert fixture.assertions == 3

    renamed = _ellipsoid(fake_factories(scale=1.001), non_preserving)
    renamed.define(6378137.0, 6356752.3, 298.257223563)
    renamed.get_object().name = "Renamed by the library"
    with pytest.raises(AssertionMismatch) as info:
        renamed.verify()
    assert info.value.field == "name"


def test_distorted_values_fail_when_preserving():
    fixture = _ellipsoid(fake_factories(scale=1.001))
    fixture.define(6378137.0, 6356752.3, 298.257223563)
    with pytest.raises(AssertionMismatch) as info:
        fixture.verify()
    assert info.value.field == "semi_major_axis"


def test_scenario_c_skipped_parent_delegates_without_assertions(factories):
    datum = GeodeticDatumFixture(factories)
    datum.skip = True
    geodetic_datum.gigs_66001(datum)
    obj = datum.get_object()

    children = [datum.context.components[slot].binding.child for slot in ("ellipsoid", "prime_meridian")]
    assert obj.ellipsoid is not None and obj.prime_meridian is not None
    assert all(child.assertions == 0 for child in children)
    assert all(child.skip for child in children)
    assert datum.total_assertions() == 0


def test_verified_parent_checks_embedded_children(factories):
    datum = GeodeticDatumFixture(factories)
    geodetic_datum.gigs_66001(datum)
    children = [datum.context.components[slot].binding.child for slot in ("ellipsoid", "prime_meridian")]
    assert all(child.assertions > 0 for child in children)
    assert datum.total_assertions() == datum.assertions + sum(child.assertions for child in children)


def test_dependency_sees_parent_configuration(factories):
    configuration = ConfigurationRegistry.defaults()
    configuration.set(Option.FACTORY_PRESERVING_USER_VALUES, False)
    configuration.set(Option.DEPENDENCY_IDENTIFICATION_SUPPORTED, False)
    datum = GeodeticDatumFixture(factories, configuration)
    datum.skip = True
    geodetic_datum.gigs_66001(datum)
    datum.get_object()

    child = datum.context.components["ellipsoid"].binding.child
    assert child.configuration.get(Option.FACTORY_PRESERVING_USER_VALUES) is False
    assert child.configuration.get(Option.SKIP_IDENTIFICATION_CHECK) is True


def test_skip_identification_is_never_cleared_by_a_child(factories):
    configuration = ConfigurationRegistry.defaults()
    configuration.set(Option.SKIP_IDENTIFICATION_CHECK, True)
    crs = GeodeticCRSFixture(factories, configuration)
    geodetic_crs.gigs_64003(crs)

    datum = crs.context.components["datum"].binding.child
    ellipsoid_child = datum.context.components["ellipsoid"].binding.child
    for node in (crs, datum, ellipsoid_child):
        assert node.configuration.get(Option.SKIP_IDENTIFICATION_CHECK) is True


def test_skipped_parent_keeps_children_skipped(factories):
    datum = GeodeticDatumFixture(factories)
    datum.skip = True
    geodetic_datum.gigs_66001(datum)
    obj = datum.get_object()
    binding = datum.context.components["ellipsoid"].binding
    binding.verify_against(obj.ellipsoid)
    assert binding.child.skip
    assert binding.child.assertions == 0


def test_delegate_of_registered_routine():
    delegate = Delegate.of(ellipsoid.gigs_67030)
    assert delegate.fixture_type is EllipsoidFixture
    assert delegate.name == "gigs_67030"


def test_dual_provenance_equivalence(factories):
    user = GeodeticDatumFixture(factories)
    geodetic_datum.gigs_66001(user)
    fetched = GeodeticDatumFixture(factories)
    geodetic_datum.gigs_66326(fetched)

    assert isinstance(user.context.components["ellipsoid"].provenance, UserDefined)
    assert isinstance(fetched.context.components["ellipsoid"].provenance, AuthorityFetched)
    assert fetched.context.components["ellipsoid"].binding is None
    for attribute in ("semi_major_metre", "inverse_flattening"):
        assert within_tolerance(
            getattr(user.get_object().ellipsoid, attribute),
            getattr(fetched.get_object().ellipsoid, attribute),
        )
    assert user.state is FixtureState.VERIFIED
    assert fetched.state is FixtureState.VERIFIED


def test_authority_components_are_fetched_once(factories):
    fetched = GeodeticDatumFixture(factories)
    geodetic_datum.gigs_66326(fetched)
    assert factories.datum_authority.lookups == ["ellipsoid:7030", "prime meridian:8901"]


def test_cross_check_twin_verified_against_authority_datum(factories):
    crs = GeodeticCRSFixture(factories)
    geodetic_crs.gigs_64326(crs)

    resolved = crs.context.components["datum"]
    assert isinstance(resolved.provenance, AuthorityFetched)
    twin = resolved.binding.child
    assert twin.identity.code == 66326
    assert not twin.context.built
    assert twin.configuration.get(Option.SKIP_IDENTIFICATION_CHECK) is True
    assert twin.state is FixtureState.VERIFIED


def test_cross_check_detects_a_mismatching_authority_datum(factories):
    factories.datum_authority.datums["6326"].ellipsoid = None
    crs = GeodeticCRSFixture(factories)
    with pytest.raises(AssertionMismatch):
        geodetic_crs.gigs_64326(crs)


def test_unknown_authority_code_is_unsupported(factories):
    datum = GeodeticDatumFixture(factories)
    with pytest.raises(UnsupportedCapability):
        geodetic_datum.gigs_66313(datum)  # 7022 is not in the fake authority
    assert datum.state is FixtureState.UNSUPPORTED


def test_prime_meridian_falls_back_to_degrees(factories):
    meridian = prime_meridian.PrimeMeridianFixture(factories)
    prime_meridian.gigs_68908(meridian)
    obj = meridian.get_object()
    assert obj.unit_name == "degree"
    assert obj.longitude == pytest.approx(106.807719444444)


def test_prime_meridian_in_sexagesimal_units(factories):
    factories.unit_authority.units["9110"] = Unit(SEXAGESIMAL_DMS, "angular", DEGREE.factor, 9110)
    meridian = prime_meridian.PrimeMeridianFixture(factories)
    prime_meridian.gigs_68908(meridian)

    obj = meridian.get_object()
    assert obj.unit_name == SEXAGESIMAL_DMS
    assert obj.longitude == 106.482779
    assert meridian.state is FixtureState.VERIFIED


def test_sexagesimal_to_degrees():
    assert sexagesimal_to_degrees(106.482779) == pytest.approx(106.807719444444)
    assert sexagesimal_to_degrees(-74.04513) == pytest.approx(-74.08091666667)
    assert is_sexagesimal("sexagesimal DMS") and not is_sexagesimal("degree")
