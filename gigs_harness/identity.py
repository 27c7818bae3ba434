"""Identity of the reference object a fixture builds."""
from __future__ import annotations

from dataclasses import dataclass
from types import MappingProxyType
from typing import Any, Mapping

from .errors import ConfigurationMisuseError

GIGS = "GIGS"
EPSG = "EPSG"


@dataclass(frozen=True)
class Identity:
    code: int
    name: str

    def __post_init__(self) -> None:
        if isinstance(self.code, bool) or not isinstance(self.code, int) or self.code <= 0:
            raise ConfigurationMisuseError(f"Identity code must be a positive integer, got {self.code!r}")
        if not isinstance(self.name, str) or not self.name.strip():
            raise ConfigurationMisuseError(f"Identity name must be a non-empty string, got {self.name!r}")

    @property
    def case_id(self) -> str:
        return f"GIGS_{self.code}"

    def properties(self, codespace: str = GIGS, **extras: Any) -> Mapping[str, Any]:
        """Return the read-only properties record handed to construction factories.

        ``extras`` whose value is ``None`` are left out, so optional keys such as
        ``anchor`` only appear when the case defines them.
        """

        record = {
            "name": self.name,
            "identifier": MappingProxyType({"code": self.code, "codespace": codespace}),
        }
        for key, value in extras.items():
            if value is not None:
                record[key] = value
        return MappingProxyType(record)
