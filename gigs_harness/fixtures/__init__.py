"""Fixture engine and the user-defined (3200 series) fixture families."""
from .base import FixtureContext, FixtureNode, FixtureState, Result, guarded_build
from .delegate import Delegate, DependencyBinding
from .resolver import (
    AuthorityFetched,
    ResolvedComponent,
    UserDefined,
    authority,
    from_authority,
    from_user_definition,
    user_defined,
)

__all__ = [
    "AuthorityFetched",
    "Delegate",
    "DependencyBinding",
    "FixtureContext",
    "FixtureNode",
    "FixtureState",
    "ResolvedComponent",
    "Result",
    "UserDefined",
    "authority",
    "from_authority",
    "from_user_definition",
    "guarded_build",
    "user_defined",
]
