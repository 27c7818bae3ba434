"""Fixture engine: lazily built, memoized objects under test."""
from __future__ import annotations

import enum
import logging
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any, Callable, ClassVar, Dict, Generic, Optional, TypeVar

from ..configuration import ConfigurationRegistry
from ..errors import (
    ConfigurationMisuseError,
    ConstructionError,
    DuplicateIdentityError,
    HarnessError,
    NoSuchIdentifierError,
    UnsupportedCapability,
)
from ..factories import Factories
from ..identity import Identity
from ..verification import RELATIVE_TOLERANCE, Verifier

if TYPE_CHECKING:  # pragma: no cover
    from .resolver import Provenance, ResolvedComponent

logger = logging.getLogger(__name__)

T = TypeVar("T")


class FixtureState(enum.Enum):
    UNINITIALIZED = "uninitialized"
    IDENTITY_SET = "identity_set"
    SKIPPED = "skipped"
    BUILDING = "building"
    BUILT = "built"
    VERIFIED = "verified"
    CONSTRUCTION_FAILED = "construction_failed"
    UNSUPPORTED = "unsupported"


_EMPTY = object()


@dataclass
class FixtureContext:
    """Everything one fixture owns: identity, options, memo slot and components."""

    factories: Factories
    configuration: ConfigurationRegistry
    identity: Optional[Identity] = None
    skip: bool = False
    slot: Any = _EMPTY
    failure: Optional[HarnessError] = None
    assertions: int = 0
    state: FixtureState = FixtureState.UNINITIALIZED
    sources: Dict[str, "Provenance"] = field(default_factory=dict)
    components: Dict[str, "ResolvedComponent"] = field(default_factory=dict)

    @property
    def built(self) -> bool:
        return self.slot is not _EMPTY


@dataclass(frozen=True)
class Result(Generic[T]):
    """Outcome of a guarded build: a value, or the classified error."""

    value: Optional[T] = None
    error: Optional[HarnessError] = None

    @property
    def ok(self) -> bool:
        return self.error is None

    def unwrap(self) -> Optional[T]:
        if self.error is not None:
            raise self.error
        return self.value


def guarded_build(build: Callable[[], T]) -> Result[T]:
    """Run ``build`` and classify whatever it raises.

    Unknown identifiers and absent factories become ``UnsupportedCapability``;
    harness errors and assertion mismatches are re-raised unchanged; anything
    else is wrapped in ``ConstructionError``.
    """

    try:
        return Result(value=build())
    except NoSuchIdentifierError as exc:
        error: HarnessError = UnsupportedCapability(str(exc))
        error.__cause__ = exc
    except UnsupportedCapability as exc:
        error = exc
    except (HarnessError, AssertionError):
        raise
    except Exception as exc:  # pylint: disable=broad-except
        error = ConstructionError(f"{type(exc).__name__}: {exc}")
        error.__cause__ = exc
    return Result(error=error)


class FixtureNode(Generic[T]):
    """One reference object under test.

    Concrete fixtures define ``construct()`` (one factory call using the
    current identity and bound components) and ``check(obj)`` (the per-kind
    assertions). Case routines set the identity and the literal defining
    values, then call ``verify()``.
    """

    series: ClassVar[int] = 0
    kind: ClassVar[str] = "object"

    def __init__(
        self,
        factories: Factories,
        configuration: Optional[ConfigurationRegistry] = None,
        tolerance: float = RELATIVE_TOLERANCE,
    ):
        registry = configuration.copy() if configuration is not None else ConfigurationRegistry.defaults()
        self.context = FixtureContext(factories=factories, configuration=registry)
        self.verifier = Verifier(self.context, tolerance)

    @classmethod
    def case(cls, code: int, name: str):
        """Decorator registering a build routine for this fixture type."""

        from ..registry import case  # pylint: disable=import-outside-toplevel

        return case(cls, code, name)

    @property
    def factories(self) -> Factories:
        return self.context.factories

    @property
    def configuration(self) -> ConfigurationRegistry:
        return self.context.configuration

    @property
    def identity(self) -> Optional[Identity]:
        return self.context.identity

    @property
    def state(self) -> FixtureState:
        return self.context.state

    @property
    def assertions(self) -> int:
        return self.context.assertions

    @property
    def skip(self) -> bool:
        return self.context.skip

    @skip.setter
    def skip(self, value: bool) -> None:
        self.context.skip = bool(value)

    def set_identity(self, code: int, name: str) -> None:
        if self.context.identity is not None:
            raise DuplicateIdentityError(
                f"{self.kind} already identified as {self.context.identity.code}; cannot set {code}"
            )
        self.context.identity = Identity(code, name)
        self.context.state = FixtureState.IDENTITY_SET

    def properties(self, **extras: Any):
        if self.context.identity is None:
            raise ConfigurationMisuseError(f"{self.kind} fixture has no identity")
        return self.context.identity.properties(**extras)

    def copy_configuration_from(self, parent: "FixtureNode") -> None:
        self.context.configuration.copy_from(parent.configuration)

    def use(self, slot: str, source: "Provenance") -> None:
        """Declare where a sub-component comes from; resolved at build time."""

        self.context.sources[slot] = source

    def component(self, slot: str, lookup: Callable[[str], Any]) -> Any:
        """Resolve a declared sub-component and return the object to build with."""

        from .resolver import resolve  # pylint: disable=import-outside-toplevel

        return resolve(self, slot, lookup)

    def lookup(self, factory: str, method: str) -> Callable[[str], Any]:
        """Authority lookup, requiring the factory only when a code is fetched."""

        return lambda code: getattr(self.factories.require(factory), method)(code)

    def construct(self) -> T:
        raise NotImplementedError

    def check(self, obj: T) -> None:
        raise NotImplementedError

    def build(self) -> Result[T]:
        """Build once and return the memoized outcome as a ``Result``.

        Failures are memoized as well: a failed fixture is not constructed again.
        """

        if self.context.built:
            return Result(value=self.context.slot)
        if self.context.failure is not None:
            return Result(error=self.context.failure)
        if self.context.identity is None:
            raise ConfigurationMisuseError(f"{self.kind} fixture built before its identity was set")
        self.context.state = FixtureState.BUILDING
        logger.debug("Building %s %s", self.kind, self.context.identity.code)
        try:
            result = guarded_build(self.construct)
        except ConstructionError as exc:
            # A delegated component failed to build.
            result = Result(error=exc)
        except HarnessError:
            self.context.state = FixtureState.CONSTRUCTION_FAILED
            raise
        if isinstance(result.error, UnsupportedCapability):
            self.context.state = FixtureState.UNSUPPORTED
        elif result.error is not None:
            self.context.state = FixtureState.CONSTRUCTION_FAILED
        else:
            self.context.slot = result.value
            self.context.state = FixtureState.BUILT
        self.context.failure = result.error
        return result

    def get_object(self) -> Optional[T]:
        return self.build().unwrap()

    def verify(self) -> None:
        if self.skip:
            if not self.context.built:
                self.context.state = FixtureState.SKIPPED
            return
        self.verify_object(self.get_object())

    def verify_object(self, obj: Optional[T]) -> None:
        """Assertions on ``obj``, which may be a sub-object embedded by a parent."""

        self.verifier.not_none(self.kind, obj)
        self.factories.validator.validate(obj)
        self.check(obj)
        self.context.state = FixtureState.VERIFIED

    def verify_component(self, slot: str, component: Any) -> None:
        """Verify the sub-object the library embedded for ``slot``."""

        from .resolver import verify_resolved  # pylint: disable=import-outside-toplevel

        verify_resolved(self, slot, component)

    def total_assertions(self) -> int:
        total = self.context.assertions
        for resolved in self.context.components.values():
            if resolved.binding is not None:
                total += resolved.binding.child.total_assertions()
        return total

    def __repr__(self) -> str:
        identity = self.context.identity
        label = f"{identity.code} {identity.name!r}" if identity else "unidentified"
        return f"<{type(self).__name__} {label} {self.context.state.value}>"


__all__ = [
    "FixtureContext",
    "FixtureNode",
    "FixtureState",
    "Result",
    "guarded_build",
]
