"""Tests for card models and the deck."""

import random

import pytest

from poker_drill.engine.deck import Deck
from poker_drill.exceptions import DeckExhaustedError
from poker_drill.models.card import Card, Rank, Suit


class TestCard:
    def test_parse(self):
        c = Card.parse("Ah")
        assert c.rank == Rank.ACE
        assert c.suit == Suit.HEARTS

    def test_parse_ten(self):
        assert Card.parse("Ts") == Card.parse("10s")
        assert Card.parse("10s").rank == Rank.TEN

    def test_parse_invalid(self):
        with pytest.raises(ValueError):
            Card.parse("Xx")
        with pytest.raises(ValueError):
            Card.parse("Ahh")

    def test_parse_many(self):
        assert Card.parse_many("AhKd") == Card.parse_many("Ah Kd")
        assert [str(c) for c in Card.parse_many("Qc 7d 3h")] == ["Qc", "7d", "3h"]

    def test_str_and_pretty(self):
        c = Card(Rank.TEN, Suit.SPADES)
        assert str(c) == "Ts"
        assert c.to_pretty() == "T♠"

    def test_equality_and_hash(self):
        assert Card.parse("Ah") == Card(Rank.ACE, Suit.HEARTS)
        assert len({Card.parse("Ah"), Card.parse("Ah"), Card.parse("Kh")}) == 2


class TestDeck:
    def test_fresh_deck_is_ordered(self):
        deck = Deck()
        assert deck.remaining == 52
        assert deck.cards[0] == Card.parse("2c")
        assert deck.cards[-1] == Card.parse("As")

    def test_shuffle_is_permutation(self):
        deck = Deck.new_shuffled(random.Random(1))
        assert len(set(deck.cards)) == 52
        assert set(deck.cards) == set(Deck().cards)

    def test_same_seed_same_order(self):
        a = Deck.new_shuffled(random.Random(42))
        b = Deck.new_shuffled(random.Random(42))
        assert a.cards == b.cards

    def test_different_seed_different_order(self):
        a = Deck.new_shuffled(random.Random(1))
        b = Deck.new_shuffled(random.Random(2))
        assert a.cards != b.cards

    def test_shuffle_consumes_51_draws(self):
        rng = random.Random(7)
        Deck.new_shuffled(rng)
        reference = random.Random(7)
        for i in range(51, 0, -1):
            reference.randint(0, i)
        assert rng.random() == reference.random()

    def test_deal_advances_cursor(self):
        deck = Deck.new_shuffled(random.Random(3))
        first = deck.cards[0]
        assert deck.deal() == first
        assert deck.remaining == 51
        assert deck.dealt_cards == [first]

    def test_deal_n(self):
        deck = Deck.new_shuffled(random.Random(3))
        cards = deck.deal_n(5)
        assert cards == deck.cards[:5]
        assert len(deck) == 47

    def test_deal_exhausted(self):
        deck = Deck()
        deck.deal_n(52)
        with pytest.raises(DeckExhaustedError):
            deck.deal()

    def test_deal_n_too_many(self):
        deck = Deck()
        deck.deal_n(50)
        with pytest.raises(DeckExhaustedError):
            deck.deal_n(3)
        assert deck.remaining == 2
