"""Series 3209: user-defined vertical datums."""
from __future__ import annotations

from typing import Any, Optional

from ..verification import anchor_of
from .base import FixtureNode


class VerticalDatumFixture(FixtureNode[Any]):
    series = 3209
    kind = "vertical_datum"

    def __init__(self, *args, **kwargs):
        super().__init__(*args, **kwargs)
        self.anchor: Optional[str] = None

    def construct(self):
        factory = self.factories.require("datum_factory")
        return factory.create_vertical_datum(self.properties(anchor=self.anchor))

    def check(self, obj) -> None:
        identity = self.identity
        self.verifier.identification(obj, identity.name, identity.code)
        if self.anchor is not None:
            self.verifier.equal("anchor", self.anchor, anchor_of(obj))


@VerticalDatumFixture.case(66601, "GIGS vertical datum U")
def gigs_66601(fixture: VerticalDatumFixture) -> None:
    fixture.anchor = "Origin U"


@VerticalDatumFixture.case(66602, "GIGS vertical datum V")
def gigs_66602(fixture: VerticalDatumFixture) -> None:
    fixture.anchor = "Origin V"


@VerticalDatumFixture.case(66603, "GIGS vertical datum W")
def gigs_66603(fixture: VerticalDatumFixture) -> None:
    fixture.anchor = "Origin W"
