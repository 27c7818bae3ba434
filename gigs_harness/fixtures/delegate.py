"""Delegation of prerequisite construction to another fixture's build routine."""
from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any, Callable, Optional, Type

from ..configuration import Option
from .base import FixtureNode

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Delegate:
    """A named build routine of another fixture type, bound at the call site."""

    fixture_type: Type[FixtureNode]
    routine: Callable[[FixtureNode], None]

    @classmethod
    def of(cls, routine: Callable[[FixtureNode], None]) -> "Delegate":
        """Delegate to a routine registered with ``FixtureNode.case``."""

        return cls(routine.fixture_type, routine)  # type: ignore[attr-defined]

    @property
    def name(self) -> str:
        return getattr(self.routine, "__name__", repr(self.routine))

    def bind(
        self,
        parent: FixtureNode,
        reuse: bool = True,
        build: bool = True,
        skip_identification: bool = False,
    ) -> "DependencyBinding":
        """Instantiate the child, run the routine and (optionally) build it.

        With ``reuse`` the child's own checks are deferred to the parent,
        which later verifies the component it actually embedded.
        """

        child = self.fixture_type(parent.factories, tolerance=parent.verifier.tolerance)
        child.skip = reuse or parent.skip
        binding = DependencyBinding(parent, child, skip_identification=skip_identification)
        binding.propagate()
        logger.debug("%s delegates to %s", parent, self.name)
        self.routine(child)
        if build:
            binding.value = child.get_object()
        return binding


@dataclass
class DependencyBinding:
    parent: FixtureNode
    child: FixtureNode
    value: Any = None
    skip_identification: bool = field(default=False)

    def propagate(self) -> None:
        self.child.copy_configuration_from(self.parent)
        if self.skip_identification or not self.parent.configuration.get(Option.DEPENDENCY_IDENTIFICATION_SUPPORTED):
            self.child.configuration.set(Option.SKIP_IDENTIFICATION_CHECK, True)

    def verify_against(self, component: Optional[Any] = None) -> None:
        """Run the child's checks on ``component``, or on its own object when omitted."""

        self.propagate()
        if self.parent.skip:
            return
        self.child.skip = False
        if component is None:
            self.child.verify()
        else:
            self.child.verify_object(component)
