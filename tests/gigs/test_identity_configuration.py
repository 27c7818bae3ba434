"""Identity records, option propagation and settings loading."""
import logging
import os

import pytest

from gigs_harness.configuration import ConfigurationRegistry, Option, Propagation
from gigs_harness.errors import ConfigurationMisuseError
from gigs_harness.identity import Identity
from gigs_harness.settings import HarnessSettings, load_settings


def test_properties_record_is_read_only():
    props = Identity(66001, "GIGS geodetic datum A").properties(anchor="Origin A", operation_version=None)
    assert props["name"] == "GIGS geodetic datum A"
    assert props["identifier"]["code"] == 66001
    assert props["identifier"]["codespace"] == "GIGS"
    assert props["anchor"] == "Origin A"
    assert "operation_version" not in props
    with pytest.raises(TypeError):
        props["name"] = "other"  # type: ignore[index]


@pytest.mark.parametrize("code,name", [(0, "x"), (-5, "x"), (True, "x"), (67030, ""), (67030, "  ")])
def test_identity_rejects_bad_values(code, name):
    with pytest.raises(ConfigurationMisuseError):
        Identity(code, name)


def test_option_styles():
    assert Option.SKIP_IDENTIFICATION_CHECK.propagation is Propagation.OR
    assert Option.FACTORY_PRESERVING_USER_VALUES.propagation is Propagation.OVERWRITE


def test_unset_option_reads_false():
    assert ConfigurationRegistry().get(Option.STANDARD_NAME_SUPPORTED) is False
    assert ConfigurationRegistry.defaults().get("standard_name_supported") is True


def test_unknown_option_and_non_boolean_value():
    registry = ConfigurationRegistry()
    with pytest.raises(ConfigurationMisuseError):
        registry.get("no_such_option")
    with pytest.raises(ConfigurationMisuseError):
        registry.set(Option.STANDARD_NAME_SUPPORTED, "yes")


def test_behavior_options_are_overwritten():
    parent = ConfigurationRegistry.defaults()
    parent.set(Option.FACTORY_PRESERVING_USER_VALUES, False)
    child = ConfigurationRegistry.defaults()
    child.copy_from(parent)
    assert child.get(Option.FACTORY_PRESERVING_USER_VALUES) is False

    parent.set(Option.FACTORY_PRESERVING_USER_VALUES, True)
    child.copy_from(parent)
    assert child.get(Option.FACTORY_PRESERVING_USER_VALUES) is True


@pytest.mark.parametrize(
    "child_value,parent_value,expected",
    [(False, False, False), (False, True, True), (True, False, True), (True, True, True)],
)
def test_skip_options_are_ored(child_value, parent_value, expected):
    parent = ConfigurationRegistry({Option.SKIP_IDENTIFICATION_CHECK: parent_value})
    child = ConfigurationRegistry({Option.SKIP_IDENTIFICATION_CHECK: child_value})
    child.copy_from(parent)
    assert child.get(Option.SKIP_IDENTIFICATION_CHECK) is expected


def test_copy_is_independent():
    registry = ConfigurationRegistry.defaults()
    clone = registry.copy()
    clone.set(Option.STANDARD_NAME_SUPPORTED, False)
    assert registry.get(Option.STANDARD_NAME_SUPPORTED) is True
    assert clone != registry


def test_defaults_apply_global_then_per_test_overrides():
    settings = HarnessSettings(
        options={"standard_alias_supported": False},
        tests={"3204.66001": {"standard_alias_supported": True, "factory_preserving_user_values": False}},
    )
    plain = ConfigurationRegistry.defaults(settings)
    assert plain.get(Option.STANDARD_ALIAS_SUPPORTED) is False
    tuned = ConfigurationRegistry.defaults(settings, "3204.66001")
    assert tuned.get(Option.STANDARD_ALIAS_SUPPORTED) is True
    assert tuned.get(Option.FACTORY_PRESERVING_USER_VALUES) is False


def test_load_settings_from_yaml(tmp_path, clean_env, caplog):
    config = tmp_path / "harness.yaml"
    config.write_text(
        "relative_tolerance: 1.0e-9\n"
        "options:\n"
        "  standard_name_supported: false\n"
        "  not_an_option: true\n"
        "tests:\n"
        "  '3202.67030':\n"
        "    factory_preserving_user_values: false\n",
        encoding="utf-8",
    )
    with caplog.at_level(logging.WARNING, logger="gigs_harness.settings"):
        settings = load_settings(config)
    assert settings.relative_tolerance == pytest.approx(1e-9)
    assert settings.options == {"standard_name_supported": False}
    assert settings.tests["3202.67030"] == {"factory_preserving_user_values": False}
    assert "not_an_option" in caplog.text


def test_environment_overrides_file(tmp_path, clean_env, monkeypatch):
    config = tmp_path / "harness.yaml"
    config.write_text("relative_tolerance: 1.0e-9\n", encoding="utf-8")
    monkeypatch.setenv("GIGS_CONFIG", str(config))
    monkeypatch.setenv("GIGS_RELATIVE_TOLERANCE", "1e-6")
    monkeypatch.setenv("GIGS_REPORT_DIR", os.fspath(tmp_path / "out"))
    settings = load_settings()
    assert settings.relative_tolerance == pytest.approx(1e-6)
    assert settings.report_dir == tmp_path / "out"


def test_missing_config_file_falls_back_to_defaults(tmp_path, clean_env):
    settings = load_settings(tmp_path / "absent.yaml")
    assert settings.options == {}
    assert settings.relative_tolerance == pytest.approx(1e-7)
