"""Deterministic scenario engine: deck, evaluators, helpers and dispatcher."""

from poker_drill.engine.deck import Deck

__all__ = ["Deck"]
