"""Exceptions raised by the drill generator and its collaborators."""


class PokerDrillError(Exception):
    """Base class for all poker-drill errors."""
    pass


class DeckExhaustedError(PokerDrillError):
    """Raised when a deck is asked for more cards than it holds.

    Generators never deal more than seven cards, so this signals a bug
    in the caller rather than a recoverable condition.
    """
    pass


class InvalidSelectionError(PokerDrillError, ValueError):
    """Unknown topic, street, difficulty or text style name."""
    pass


class ScenarioNotFoundError(PokerDrillError, KeyError):
    """Answer submitted for a scenario that is not (or no longer) cached."""
    pass


class UnknownAnswerError(PokerDrillError, ValueError):
    """Answer id that the scenario does not offer."""
    pass


class SchemaVersionError(PokerDrillError):
    """Database file written by a newer schema than this release knows."""
    pass
