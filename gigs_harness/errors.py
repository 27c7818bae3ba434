"""Error taxonomy shared by fixtures, factories and the runner."""
from typing import Any, Optional


class HarnessError(Exception):
    """Base class for every error raised by the harness."""


class NoSuchIdentifierError(HarnessError):
    """Raised by a factory which does not know an authority code or method name."""

    def __init__(self, message: str, identifier: Optional[str] = None):
        super().__init__(message)
        self.identifier = identifier


class UnsupportedCapability(HarnessError):
    """The library under test does not implement a code, method or factory.

    Reported as a coverage gap ("skip"), never as a defect.
    """


class ConstructionError(HarnessError):
    """Unexpected failure while the library was building an object."""


class AssertionMismatch(AssertionError):
    """A built object differs from the reference values."""

    def __init__(self, field: str, expected: Any, actual: Any, detail: Optional[str] = None):
        message = f"{field}: expected {expected!r} but got {actual!r}"
        if detail:
            message = f"{message} ({detail})"
        super().__init__(message)
        self.field = field
        self.expected = expected
        self.actual = actual


class DuplicateIdentityError(HarnessError):
    """Identity assigned twice to the same fixture."""


class ConfigurationMisuseError(HarnessError):
    """The harness itself was used against its contract."""
