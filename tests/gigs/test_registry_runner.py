"""Case registry, runner outcomes and the JSON / HTML reports."""
import datetime as dt
import json

import pytest

from gigs_harness import registry
from gigs_harness.errors import ConfigurationMisuseError
from gigs_harness.fixtures.conversion import ConversionFixture
from gigs_harness.report import HTML_NAME, JSON_NAME, generate_html, generate_json, summarize, to_payload
from gigs_harness.runner import run_all, run_case

from fakes import fake_factories

SERIES = {2202, 2203, 2205, 2206, 2207, 2209, 2210, 3202, 3203, 3204, 3205, 3206, 3207, 3208, 3209, 3210, 3211, 3212}


def test_every_series_registers_cases():
    assert {entry.series for entry in registry.cases()} == SERIES


def test_case_ids_are_unique_and_routines_are_tagged():
    entries = registry.cases()
    assert len({entry.case_id for entry in entries}) == len(entries)
    for entry in entries:
        assert entry.routine.fixture_type is entry.fixture_type
        assert entry.routine.code == entry.code


def test_find_case():
    entry = registry.find_case("3204.66001")
    assert entry.name == "GIGS geodetic datum A"
    assert entry.kind == "geodetic_datum"
    with pytest.raises(ConfigurationMisuseError):
        registry.find_case("3204")
    with pytest.raises(ConfigurationMisuseError):
        registry.find_case("3204.1")


def test_series_filter():
    assert {entry.series for entry in registry.cases([3202, 3203])} == {3202, 3203}


def test_conflicting_registration_is_rejected():
    entry = registry.find_case("3202.67030")
    with pytest.raises(ConfigurationMisuseError):
        registry.register(registry.CaseEntry(3202, 67030, "Another name", entry.fixture_type, entry.routine))


def test_passing_case(settings):
    result = run_case(registry.find_case("3205.64003"), fake_factories(), settings)
    assert result.status == "pass", result.message
    assert result.details["assertions"] > 0
    assert result.details["state"] == "verified"


def test_scenario_d_unsupported_method_is_skipped(settings):
    entry = registry.find_case("3206.65001")
    sample = ConversionFixture(fake_factories())
    sample.skip = True
    entry.routine(sample)

    result = run_case(entry, fake_factories(unsupported={sample.method_name}), settings)
    assert result.status == "skip"
    assert summarize([(entry, result)]) == {"pass": 0, "fail": 0, "skip": 1, "total": 1}


def test_mismatch_is_a_failure(settings):
    result = run_case(registry.find_case("3202.67030"), fake_factories(scale=1.001), settings)
    assert result.status == "fail"
    assert result.details["field"] == "semi_major_axis"


def test_non_preserving_configuration_from_settings(settings):
    settings.tests["3202.67030"] = {"factory_preserving_user_values": False}
    result = run_case(registry.find_case("3202.67030"), fake_factories(scale=1.001), settings)
    assert result.status == "pass", result.message


def test_construction_error_is_a_failure(settings, monkeypatch):
    factories = fake_factories()

    def explode(*args):
        raise RuntimeError("boom")

    monkeypatch.setattr(factories.datum_factory, "create_vertical_datum", explode)
    result = run_case(registry.find_case("3209.66601"), factories, settings)
    assert result.status == "fail"
    assert "boom" in result.message


def test_no_case_fails_against_conforming_factories(settings):
    results = run_all(fake_factories(), settings=settings)
    failures = [(entry.case_id, result.message) for entry, result in results if result.status == "fail"]
    assert failures == []
    counts = summarize(results)
    assert counts["pass"] > counts["skip"]


def test_reports_are_written(settings, capsys):
    results = run_all(fake_factories(), [3202], settings, echo=True)
    generated_at = dt.datetime(2024, 1, 2, 5, 4, 5, tzinfo=dt.timezone(dt.timedelta(hours=2)))
    json_path = generate_json(results, generated_at, settings.report_dir)
    html_path = generate_html(results, generated_at, settings.report_dir)

    assert json_path.name == JSON_NAME
    payload = json.loads(json_path.read_text(encoding="utf-8"))
    assert payload["generated"] == "2024-01-02T03:04:05Z"
    assert payload["summary"]["total"] == len(results)
    assert payload["tests"][0]["id"].startswith("3202.")

    assert html_path.name == HTML_NAME
    page = html_path.read_text(encoding="utf-8")
    assert "GIGS Conformance Report" in page
    assert "3202.67030" in page
    assert "3202.67030" in capsys.readouterr().out


def test_naive_timestamps_are_reported_as_utc():
    payload = to_payload([], dt.datetime(2024, 1, 2, 3, 4, 5))
    assert payload["generated"] == "2024-01-02T03:04:05Z"
    assert payload["summary"]["total"] == 0
