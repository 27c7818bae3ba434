"""Choice between an authority-fetched and a user-defined sub-component."""
from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Callable, Optional, Union

from ..errors import ConfigurationMisuseError
from .base import FixtureNode
from .delegate import Delegate, DependencyBinding

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class AuthorityFetched:
    """Looked up by authority code; trusted as-is unless a ``cross_check`` is given."""

    code: str
    cross_check: Optional[Delegate] = None


@dataclass(frozen=True)
class UserDefined:
    """Built from literal defining values by another fixture's routine."""

    delegate: Delegate


Provenance = Union[AuthorityFetched, UserDefined]


@dataclass
class ResolvedComponent:
    value: Any
    provenance: Provenance
    binding: Optional[DependencyBinding] = None


def authority(code: Union[int, str], cross_check: Optional[Callable] = None) -> AuthorityFetched:
    return AuthorityFetched(str(code), Delegate.of(cross_check) if cross_check is not None else None)


def user_defined(routine: Callable) -> UserDefined:
    return UserDefined(Delegate.of(routine))


def from_authority(
    parent: FixtureNode,
    code: Union[int, str],
    lookup: Callable[[str], Any],
    cross_check: Optional[Delegate] = None,
) -> ResolvedComponent:
    """Fetch ``code`` from the authority factory.

    When ``cross_check`` names the user-defined twin, that twin is prepared
    (not built) with identification checks off, so the parent can later check
    the fetched object against the twin's defining values.
    """

    value = lookup(str(code))
    binding = None
    if cross_check is not None:
        binding = cross_check.bind(parent, build=False, skip_identification=True)
        binding.value = value
    return ResolvedComponent(value, AuthorityFetched(str(code), cross_check), binding)


def from_user_definition(parent: FixtureNode, delegate: Delegate) -> ResolvedComponent:
    binding = delegate.bind(parent)
    return ResolvedComponent(binding.value, UserDefined(delegate), binding)


def resolve(parent: FixtureNode, slot: str, lookup: Callable[[str], Any]) -> Any:
    resolved = parent.context.components.get(slot)
    if resolved is not None:
        return resolved.value
    source = parent.context.sources.get(slot)
    if source is None:
        raise ConfigurationMisuseError(f"{parent.kind} has no source declared for {slot}")
    if isinstance(source, AuthorityFetched):
        logger.debug("%s.%s from authority code %s", parent.kind, slot, source.code)
        resolved = from_authority(parent, source.code, lookup, source.cross_check)
    else:
        resolved = from_user_definition(parent, source.delegate)
    parent.context.components[slot] = resolved
    return resolved.value


def verify_resolved(parent: FixtureNode, slot: str, component: Any) -> None:
    parent.verifier.not_none(slot, component)
    resolved = parent.context.components.get(slot)
    if resolved is None:
        # The parent was never built itself, e.g. a cross-check twin.
        source = parent.context.sources.get(slot)
        if not isinstance(source, UserDefined):
            return
        binding = source.delegate.bind(parent, build=False)
        resolved = ResolvedComponent(component, source, binding)
        parent.context.components[slot] = resolved
    if resolved.binding is not None:
        resolved.binding.verify_against(component)
