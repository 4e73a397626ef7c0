"""Training request and scenario models."""

from dataclasses import dataclass
from enum import Enum
from typing import Optional, Tuple, Union

from poker_drill.exceptions import InvalidSelectionError
from poker_drill.models.card import Card
from poker_drill.models.position import Position


def _lookup(enum_cls, name: str):
    """Case-insensitive match on an enum's value or member name."""
    key = name.strip().lower().replace(" ", "").replace("_", "").replace("-", "")
    for member in enum_cls:
        candidates = (member.value, member.name)
        if any(c.lower().replace("_", "").replace("-", "") == key for c in candidates):
            return member
    valid = ", ".join(m.value for m in enum_cls)
    raise InvalidSelectionError(
        f"Unknown {enum_cls.__name__}: {name!r} (expected one of: {valid})"
    )


class GameType(str, Enum):
    CASH_GAME = "CashGame"
    TOURNAMENT = "Tournament"

    @property
    def display_name(self) -> str:
        return "Cash Game" if self == GameType.CASH_GAME else "Tournament"


class DifficultyLevel(str, Enum):
    BEGINNER = "Beginner"
    INTERMEDIATE = "Intermediate"
    ADVANCED = "Advanced"

    @classmethod
    def from_name(cls, name: str) -> "DifficultyLevel":
        return _lookup(cls, name)


class TextStyle(str, Enum):
    """Simple is plain language; Technical adds poker jargon and numbers."""
    SIMPLE = "Simple"
    TECHNICAL = "Technical"

    @classmethod
    def from_name(cls, name: str) -> "TextStyle":
        return _lookup(cls, name)


class Street(str, Enum):
    PREFLOP = "Preflop"
    FLOP = "Flop"
    TURN = "Turn"
    RIVER = "River"

    @property
    def board_size(self) -> int:
        return {"Preflop": 0, "Flop": 3, "Turn": 4, "River": 5}[self.value]

    @property
    def topics(self) -> Tuple["TrainingTopic", ...]:
        """Topics drilled on this street, in a fixed order."""
        return tuple(t for t in TrainingTopic if t.street == self)

    @classmethod
    def from_name(cls, name: str) -> "Street":
        return _lookup(cls, name)


class TrainingTopic(str, Enum):
    PREFLOP_DECISION = "PreflopDecision"
    POSTFLOP_CONTINUATION_BET = "PostflopContinuationBet"
    POT_ODDS_AND_EQUITY = "PotOddsAndEquity"
    BLUFF_SPOT = "BluffSpot"
    ICM_AND_TOURNAMENT_DECISION = "ICMAndTournamentDecision"
    TURN_BARREL_DECISION = "TurnBarrelDecision"
    CHECK_RAISE_SPOT = "CheckRaiseSpot"
    SEMI_BLUFF_DECISION = "SemiBluffDecision"
    ANTI_LIMPER_ISOLATION = "AntiLimperIsolation"
    RIVER_VALUE_BET = "RiverValueBet"
    SQUEEZE_PLAY = "SqueezePlay"
    BIG_BLIND_DEFENSE = "BigBlindDefense"
    THREE_BET_POT_CBET = "ThreeBetPotCbet"
    RIVER_CALL_OR_FOLD = "RiverCallOrFold"
    TURN_PROBE_BET = "TurnProbeBet"
    DELAYED_CBET = "DelayedCbet"

    @property
    def display_name(self) -> str:
        return _TOPIC_INFO[self][0]

    @property
    def prefix(self) -> str:
        """Two-character scenario id prefix, e.g. 'PF'."""
        return _TOPIC_INFO[self][1]

    @property
    def street(self) -> Street:
        return _TOPIC_INFO[self][2]

    @classmethod
    def from_name(cls, name: str) -> "TrainingTopic":
        return _lookup(cls, name)


_TOPIC_INFO = {
    TrainingTopic.PREFLOP_DECISION: ("Preflop Decision", "PF", Street.PREFLOP),
    TrainingTopic.POSTFLOP_CONTINUATION_BET: ("Postflop Continuation Bet", "CB", Street.FLOP),
    TrainingTopic.POT_ODDS_AND_EQUITY: ("Pot Odds & Equity", "PO", Street.FLOP),
    TrainingTopic.BLUFF_SPOT: ("Bluff Spot", "BL", Street.RIVER),
    TrainingTopic.ICM_AND_TOURNAMENT_DECISION: ("ICM & Tournament Decision", "IC", Street.PREFLOP),
    TrainingTopic.TURN_BARREL_DECISION: ("Turn Barrel Decision", "TB", Street.TURN),
    TrainingTopic.CHECK_RAISE_SPOT: ("Check-Raise Spot", "CR", Street.FLOP),
    TrainingTopic.SEMI_BLUFF_DECISION: ("Semi-Bluff Decision", "SB", Street.FLOP),
    TrainingTopic.ANTI_LIMPER_ISOLATION: ("Anti-Limper Isolation", "AL", Street.PREFLOP),
    TrainingTopic.RIVER_VALUE_BET: ("River Value Bet", "RV", Street.RIVER),
    TrainingTopic.SQUEEZE_PLAY: ("Squeeze Play", "SQ", Street.PREFLOP),
    TrainingTopic.BIG_BLIND_DEFENSE: ("Big Blind Defense", "BD", Street.PREFLOP),
    TrainingTopic.THREE_BET_POT_CBET: ("3-Bet Pot C-Bet", "3B", Street.FLOP),
    TrainingTopic.RIVER_CALL_OR_FOLD: ("River Call or Fold", "RF", Street.RIVER),
    TrainingTopic.TURN_PROBE_BET: ("Turn Probe Bet", "PB", Street.TURN),
    TrainingTopic.DELAYED_CBET: ("Delayed C-Bet", "DC", Street.TURN),
}

# A request may name one topic, or a street to draw a random topic from.
TopicSelector = Union[TrainingTopic, Street]


def parse_selector(name: str) -> TopicSelector:
    """Parse a topic or street name into a selector."""
    try:
        return TrainingTopic.from_name(name)
    except InvalidSelectionError:
        pass
    try:
        return Street.from_name(name)
    except InvalidSelectionError:
        raise InvalidSelectionError(f"Unknown topic or street: {name!r}") from None


@dataclass(frozen=True)
class TrainingRequest:
    """Input to the generator. A seed makes the output reproducible."""
    topic: TopicSelector
    difficulty: DifficultyLevel = DifficultyLevel.BEGINNER
    rng_seed: Optional[int] = None
    text_style: TextStyle = TextStyle.SIMPLE


@dataclass(frozen=True)
class PlayerState:
    seat: int
    position: Position
    stack: int
    is_hero: bool
    is_active: bool = True


@dataclass(frozen=True)
class TableSetup:
    game_type: GameType
    hero_position: Position
    hero_hand: Tuple[Card, Card]
    board: Tuple[Card, ...]
    players: Tuple[PlayerState, ...]
    pot_size: int
    current_bet: int  # amount hero must call, 0 if none

    @property
    def hero(self) -> Optional[PlayerState]:
        return next((p for p in self.players if p.is_hero), None)

    @property
    def villain(self) -> Optional[PlayerState]:
        """First non-hero player."""
        return next((p for p in self.players if not p.is_hero), None)


@dataclass(frozen=True)
class AnswerOption:
    id: str
    text: str
    is_correct: bool
    explanation: str


@dataclass(frozen=True)
class TrainingScenario:
    """A generated multiple-choice drill with exactly one correct answer."""
    scenario_id: str
    topic: TrainingTopic
    branch_key: str
    table_setup: TableSetup
    question: str
    answers: Tuple[AnswerOption, ...]

    @property
    def correct_answer(self) -> AnswerOption:
        return next(a for a in self.answers if a.is_correct)

    def answer(self, answer_id: str) -> Optional[AnswerOption]:
        """Look up an answer by id, or None if the scenario has no such option."""
        wanted = answer_id.strip().upper()
        return next((a for a in self.answers if a.id == wanted), None)
