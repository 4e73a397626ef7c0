"""Table position model."""

from enum import Enum
from typing import List


class Position(str, Enum):
    UTG = "UTG"
    UTG1 = "UTG+1"
    UTG2 = "UTG+2"
    LJ = "LJ"
    HJ = "HJ"
    CO = "CO"
    BTN = "BTN"
    SB = "SB"
    BB = "BB"

    @property
    def display_name(self) -> str:
        return _DISPLAY_NAMES[self]

    @property
    def is_early(self) -> bool:
        return self in (Position.UTG, Position.UTG1, Position.UTG2)

    @property
    def is_middle(self) -> bool:
        return self in (Position.LJ, Position.HJ)

    @property
    def is_late(self) -> bool:
        return self in (Position.CO, Position.BTN)

    @property
    def is_blind(self) -> bool:
        return self in (Position.SB, Position.BB)

    @property
    def category(self) -> str:
        if self.is_early:
            return "Early"
        if self.is_middle:
            return "Middle"
        if self.is_late:
            return "Late"
        return "Blinds"


_DISPLAY_NAMES = {
    Position.UTG: "UTG",
    Position.UTG1: "UTG+1",
    Position.UTG2: "UTG+2",
    Position.LJ: "Lojack",
    Position.HJ: "Hijack",
    Position.CO: "Cutoff",
    Position.BTN: "Button",
    Position.SB: "Small Blind",
    Position.BB: "Big Blind",
}

# Seating order used when a full table is dealt in.
SIX_MAX_POSITIONS: List[Position] = [
    Position.UTG, Position.HJ, Position.CO,
    Position.BTN, Position.SB, Position.BB,
]

NINE_MAX_POSITIONS: List[Position] = [
    Position.UTG, Position.UTG1, Position.UTG2,
    Position.LJ, Position.HJ, Position.CO,
    Position.BTN, Position.SB, Position.BB,
]
