"""Deck management for scenario dealing."""

import random
from typing import List

from poker_drill.exceptions import DeckExhaustedError
from poker_drill.models.card import Card, Rank, Suit


class Deck:
    """A standard 52-card deck dealt from a cursor.

    Cards are never removed; dealing only advances the cursor, so the
    dealt prefix stays available for integrity checks.
    """

    def __init__(self):
        """Initialize an ordered deck: clubs, diamonds, hearts, spades, 2..A."""
        self.cards: List[Card] = [Card(rank, suit) for suit in Suit for rank in Rank]
        self._cursor = 0

    @classmethod
    def new_shuffled(cls, rng: random.Random) -> "Deck":
        """Build a fresh deck and shuffle it with ``rng`` as the only entropy source."""
        deck = cls()
        deck.shuffle(rng)
        return deck

    def shuffle(self, rng: random.Random):
        """Fisher-Yates shuffle in place and rewind the cursor.

        Draw order is fixed (i from 51 down to 1, one ``randint`` each) so the
        permutation is fully determined by the RNG state.
        """
        cards = self.cards
        for i in range(len(cards) - 1, 0, -1):
            j = rng.randint(0, i)
            cards[i], cards[j] = cards[j], cards[i]
        self._cursor = 0

    def deal(self) -> Card:
        """Deal the next card.

        Raises:
            DeckExhaustedError: All 52 cards have already been dealt.
        """
        if self._cursor >= len(self.cards):
            raise DeckExhaustedError("Deck exhausted")
        card = self.cards[self._cursor]
        self._cursor += 1
        return card

    def deal_n(self, count: int) -> List[Card]:
        """Deal ``count`` cards in dealing order.

        Args:
            count: Number of cards to deal.

        Returns:
            List of dealt cards.
        """
        if count > self.remaining:
            raise DeckExhaustedError(
                f"Not enough cards in deck. Need {count}, have {self.remaining}"
            )
        return [self.deal() for _ in range(count)]

    @property
    def remaining(self) -> int:
        """Get the number of cards left to deal."""
        return len(self.cards) - self._cursor

    @property
    def dealt_cards(self) -> List[Card]:
        """Cards dealt so far, in order."""
        return self.cards[:self._cursor]

    def __len__(self) -> int:
        return self.remaining

    def __repr__(self) -> str:
        return f"Deck(remaining={self.remaining})"
