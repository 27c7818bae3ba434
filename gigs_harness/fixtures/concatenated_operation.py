"""Series 3212: user-defined concatenated transformations.

Each step is a 3208 transformation, which in turn delegates to 3205 for its
source and target CRS.
"""
from __future__ import annotations

from typing import Any, List

from . import transformation
from .base import FixtureNode
from .resolver import user_defined


class ConcatenatedOperationFixture(FixtureNode[Any]):
    series = 3212
    kind = "concatenated_operation"

    def __init__(self, *args, **kwargs):
        super().__init__(*args, **kwargs)
        self.step_slots: List[str] = []

    def define(self, *steps) -> None:
        """``steps`` are 3208 routines, applied in order."""

        self.step_slots = []
        for index, step in enumerate(steps, start=1):
            slot = f"step_{index}"
            self.use(slot, user_defined(step))
            self.step_slots.append(slot)

    def construct(self):
        factory = self.factories.require("operation_factory")
        lookup = self.lookup("operation_authority", "create_coordinate_operation")
        steps = [self.component(slot, lookup) for slot in self.step_slots]
        return factory.create_concatenated_operation(self.properties(), steps)

    def check(self, obj) -> None:
        identity = self.identity
        self.verifier.identification(obj, identity.name, identity.code)
        steps = list(getattr(obj, "operations", None) or ())
        self.verifier.equal("steps", len(self.step_slots), len(steps))
        for slot, step in zip(self.step_slots, steps):
            self.verify_component(slot, step)


@ConcatenatedOperationFixture.case(68094, "GIGS_68094")
def gigs_68094(fixture: ConcatenatedOperationFixture) -> None:
    fixture.define(transformation.gigs_61763, transformation.gigs_61193)
