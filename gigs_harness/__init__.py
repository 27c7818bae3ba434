"""Conformance harness checking a geodetic library against the GIGS reference objects."""
from .configuration import ConfigurationRegistry, Option
from .errors import (
    AssertionMismatch,
    ConfigurationMisuseError,
    ConstructionError,
    DuplicateIdentityError,
    HarnessError,
    NoSuchIdentifierError,
    UnsupportedCapability,
)
from .factories import Factories
from .identity import Identity
from .settings import HarnessSettings, load_settings

__version__ = "0.1.0"

__all__ = [
    "AssertionMismatch",
    "ConfigurationMisuseError",
    "ConfigurationRegistry",
    "ConstructionError",
    "DuplicateIdentityError",
    "Factories",
    "HarnessError",
    "HarnessSettings",
    "Identity",
    "NoSuchIdentifierError",
    "Option",
    "UnsupportedCapability",
    "load_settings",
]
