"""Card, Rank, and Suit models."""

from dataclasses import dataclass
from enum import Enum


class Suit(str, Enum):
    CLUBS = "c"
    DIAMONDS = "d"
    HEARTS = "h"
    SPADES = "s"

    @classmethod
    def from_symbol(cls, s: str) -> "Suit":
        mapping = {
            "c": cls.CLUBS, "Clubs": cls.CLUBS, "♣": cls.CLUBS,
            "d": cls.DIAMONDS, "Diamonds": cls.DIAMONDS, "♦": cls.DIAMONDS,
            "h": cls.HEARTS, "Hearts": cls.HEARTS, "♥": cls.HEARTS,
            "s": cls.SPADES, "Spades": cls.SPADES, "♠": cls.SPADES,
        }
        if s in mapping:
            return mapping[s]
        raise ValueError(f"Unknown suit: {s}")

    @property
    def symbol(self) -> str:
        return {"c": "♣", "d": "♦", "h": "♥", "s": "♠"}[self.value]


_RANK_SYMBOLS = {
    2: "2", 3: "3", 4: "4", 5: "5", 6: "6", 7: "7", 8: "8",
    9: "9", 10: "T", 11: "J", 12: "Q", 13: "K", 14: "A",
}


class Rank(int, Enum):
    TWO = 2
    THREE = 3
    FOUR = 4
    FIVE = 5
    SIX = 6
    SEVEN = 7
    EIGHT = 8
    NINE = 9
    TEN = 10
    JACK = 11
    QUEEN = 12
    KING = 13
    ACE = 14

    @property
    def symbol(self) -> str:
        return _RANK_SYMBOLS[self.value]

    @classmethod
    def from_char(cls, c: str) -> "Rank":
        if c == "10":
            return cls.TEN
        for value, symbol in _RANK_SYMBOLS.items():
            if symbol == c.upper():
                return cls(value)
        raise ValueError(f"Unknown rank: {c}")


@dataclass(frozen=True)
class Card:
    """A single playing card. Equality and hashing are by (rank, suit)."""
    rank: Rank
    suit: Suit

    @classmethod
    def parse(cls, s: str) -> "Card":
        """Parse a card string like 'Ah', 'Ts', '2c' or '10d'."""
        s = s.strip()
        if len(s) == 2:
            return cls(Rank.from_char(s[0]), Suit.from_symbol(s[1]))
        elif len(s) == 3 and s[:2] == "10":
            return cls(Rank.TEN, Suit.from_symbol(s[2]))
        raise ValueError(f"Cannot parse card: {s}")

    @classmethod
    def parse_many(cls, s: str) -> list:
        """Parse a run of cards, with or without spaces ('AhKd' or 'Ah Kd')."""
        compact = s.replace(" ", "").replace(",", "")
        if len(compact) % 2:
            raise ValueError(f"Cannot parse cards: {s}")
        return [cls.parse(compact[i:i + 2]) for i in range(0, len(compact), 2)]

    def __repr__(self) -> str:
        return f"Card({self.rank.symbol}{self.suit.value})"

    def __str__(self) -> str:
        return f"{self.rank.symbol}{self.suit.value}"

    def to_short(self) -> str:
        """Return short string like 'Ah'."""
        return f"{self.rank.symbol}{self.suit.value}"

    def to_pretty(self) -> str:
        """Return the card with a suit glyph, e.g. 'A♥'."""
        return f"{self.rank.symbol}{self.suit.symbol}"
