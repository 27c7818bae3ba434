"""Boolean conformance options and their propagation between fixtures."""
from __future__ import annotations

import enum
from typing import TYPE_CHECKING, Dict, Iterator, Mapping, Optional, Union

from .errors import ConfigurationMisuseError

if TYPE_CHECKING:  # pragma: no cover
    from .settings import HarnessSettings


class Propagation(enum.Enum):
    OVERWRITE = "overwrite"
    OR = "or"


class Option(enum.Enum):
    """Closed set of options understood by the harness.

    Each member carries its propagation style. Behavior options describe which
    assertion semantics apply to a whole sub-tree and are overwritten by the
    parent on copy. Skip options record that an ancestor already decided not to
    assert, so a descendant can only add to them.
    """

    FACTORY_PRESERVING_USER_VALUES = ("factory_preserving_user_values", Propagation.OVERWRITE, True)
    STANDARD_NAME_SUPPORTED = ("standard_name_supported", Propagation.OVERWRITE, True)
    STANDARD_ALIAS_SUPPORTED = ("standard_alias_supported", Propagation.OVERWRITE, True)
    DEPENDENCY_IDENTIFICATION_SUPPORTED = ("dependency_identification_supported", Propagation.OVERWRITE, True)
    DEPRECATED_OBJECT_CREATION_SUPPORTED = ("deprecated_object_creation_supported", Propagation.OVERWRITE, True)
    SKIP_IDENTIFICATION_CHECK = ("skip_identification_check", Propagation.OR, False)

    def __init__(self, key: str, propagation: Propagation, default: bool):
        self.key = key
        self.propagation = propagation
        self.default = default

    @classmethod
    def lookup(cls, key: Union[str, "Option"]) -> "Option":
        if isinstance(key, Option):
            return key
        for option in cls:
            if option.key == key:
                return option
        raise ConfigurationMisuseError(f"Unknown configuration option: {key}")


OPTION_NAMES = frozenset(option.key for option in Option)


class ConfigurationRegistry:
    """Current value of every option for one fixture."""

    def __init__(self, values: Optional[Mapping[Union[str, Option], bool]] = None):
        self._values: Dict[Option, bool] = {}
        for key, value in (values or {}).items():
            self.set(key, value)

    @classmethod
    def defaults(cls, settings: Optional["HarnessSettings"] = None, test_id: Optional[str] = None) -> "ConfigurationRegistry":
        """Build the process defaults, then apply global and per-test overrides."""

        registry = cls({option: option.default for option in Option})
        if settings is not None:
            for key, value in settings.option_values(test_id).items():
                registry.set(key, value)
        return registry

    def get(self, option: Union[str, Option]) -> bool:
        return self._values.get(Option.lookup(option), False)

    def set(self, option: Union[str, Option], value: bool) -> None:
        if not isinstance(value, bool):
            raise ConfigurationMisuseError(f"Option {option} expects a boolean, got {value!r}")
        self._values[Option.lookup(option)] = value

    def copy(self) -> "ConfigurationRegistry":
        clone = ConfigurationRegistry()
        clone._values = dict(self._values)
        return clone

    def copy_from(self, parent: "ConfigurationRegistry") -> None:
        """Seed this registry from a parent's values.

        Only options the parent holds are touched: overwrite for behavior
        options, logical OR for skip options.
        """

        for option, value in parent._values.items():
            if option.propagation is Propagation.OR:
                self._values[option] = self._values.get(option, False) or value
            else:
                self._values[option] = value

    def as_dict(self) -> Dict[str, bool]:
        return {option.key: value for option, value in self._values.items()}

    def __iter__(self) -> Iterator[Option]:
        return iter(self._values)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ConfigurationRegistry):
            return NotImplemented
        return self._values == other._values

    def __repr__(self) -> str:
        return f"ConfigurationRegistry({self.as_dict()!r})"
