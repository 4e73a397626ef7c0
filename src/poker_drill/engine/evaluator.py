"""Situation evaluators: hand buckets, board texture, draws and card classes.

Every function here is pure and consumes no randomness. Topic generators
classify situations only through this module; nothing is re-derived per
topic.

The equity figures are heuristic constants, not computed probabilities.
"""

from collections import Counter
from enum import Enum
from typing import Iterable, List, Optional, Sequence

from poker_drill.models.card import Card


def _ranks(cards: Iterable[Card]) -> List[int]:
    return [int(c.rank) for c in cards]


def _unique_sorted_ranks(cards: Iterable[Card]) -> List[int]:
    return sorted(set(_ranks(cards)))


# ---------------------------------------------------------------------------
# Preflop hand categories
# ---------------------------------------------------------------------------

class HandCategory(str, Enum):
    PREMIUM = "premium"
    STRONG = "strong"
    PLAYABLE = "playable"
    MARGINAL = "marginal"
    TRASH = "trash"

    @property
    def label(self) -> str:
        """Capitalised name used in branch keys, e.g. 'Premium'."""
        return self.value.capitalize()


def classify_hand(hand: Sequence[Card]) -> HandCategory:
    """Bucket a two-card starting hand into one of five categories.

    This is a fixed lookup, not a formula:

        Premium   AA KK QQ, AKs
        Strong    JJ TT, AKo, AQ
        Playable  99-77, A9s+, KQs, suited connectors with a 9+ top card
        Marginal  66-22, KQo and the remaining broadway/ace hands
        Trash     unpaired hands with a top card of 9 or lower
    """
    r1, r2 = sorted(_ranks(hand), reverse=True)
    suited = hand[0].suit == hand[1].suit

    if r1 == r2:
        if r1 >= 12:
            return HandCategory.PREMIUM
        if r1 >= 10:
            return HandCategory.STRONG
        if r1 >= 7:
            return HandCategory.PLAYABLE
        return HandCategory.MARGINAL

    if r1 == 14 and r2 == 13:
        return HandCategory.PREMIUM if suited else HandCategory.STRONG
    if r1 == 14 and r2 == 12:
        return HandCategory.STRONG
    if r1 == 14 and r2 >= 9 and suited:
        return HandCategory.PLAYABLE
    if r1 == 13 and r2 == 12:
        return HandCategory.PLAYABLE if suited else HandCategory.MARGINAL
    if suited and r1 >= 9 and r1 - r2 == 1:
        return HandCategory.PLAYABLE
    if r1 <= 9:
        return HandCategory.TRASH
    return HandCategory.MARGINAL


# ---------------------------------------------------------------------------
# Board texture and draws
# ---------------------------------------------------------------------------

class BoardTexture(str, Enum):
    DRY = "dry"
    SEMI_WET = "semi-wet"
    WET = "wet"

    @property
    def label(self) -> str:
        return {"dry": "Dry", "semi-wet": "SemiWet", "wet": "Wet"}[self.value]


def has_flush_draw(board: Sequence[Card]) -> bool:
    """Two or more board cards share a suit."""
    return any(n >= 2 for n in Counter(c.suit for c in board).values())


def has_straight_draw(board: Sequence[Card]) -> bool:
    """Connected ranks: two exactly one apart, or three within a span of four."""
    ranks = _unique_sorted_ranks(board)
    if any(hi - lo == 1 for lo, hi in zip(ranks, ranks[1:])):
        return True
    return any(ranks[i + 2] - ranks[i] <= 4 for i in range(len(ranks) - 2))


def board_texture(board: Sequence[Card]) -> BoardTexture:
    """Dry with no draw signal, semi-wet with one, wet with both."""
    signals = int(has_flush_draw(board)) + int(has_straight_draw(board))
    if signals == 2:
        return BoardTexture.WET
    if signals == 1:
        return BoardTexture.SEMI_WET
    return BoardTexture.DRY


class DrawType(str, Enum):
    COMBO_DRAW = "ComboDraw"
    FLUSH_DRAW = "FlushDraw"
    OESD = "OESD"
    GUTSHOT = "GutShot"

    @property
    def description(self) -> str:
        return {
            "ComboDraw": "combo draw (flush + straight)",
            "FlushDraw": "flush draw",
            "OESD": "open-ended straight draw",
            "GutShot": "gutshot straight draw",
        }[self.value]

    @property
    def plain_description(self) -> str:
        return {
            "ComboDraw": "two-way draw (flush or straight possible)",
            "FlushDraw": "flush draw (you need one more card of the same suit to make a flush)",
            "OESD": "straight draw (you can complete a straight on either end)",
            "GutShot": "inside straight draw (only one card completes your straight)",
        }[self.value]


def classify_draw(board: Sequence[Card]) -> DrawType:
    """Draw bucket from board-level signals.

    GutShot doubles as the catch-all when the board shows no clean draw.
    """
    flush, straight = has_flush_draw(board), has_straight_draw(board)
    if flush and straight:
        return DrawType.COMBO_DRAW
    if flush:
        return DrawType.FLUSH_DRAW
    if straight:
        return DrawType.OESD
    return DrawType.GUTSHOT


_DRAW_EQUITY = {
    DrawType.FLUSH_DRAW: {2: 0.35, 1: 0.20},
    DrawType.OESD: {2: 0.32, 1: 0.17},
    DrawType.COMBO_DRAW: {2: 0.54, 1: 0.30},
    DrawType.GUTSHOT: {2: 0.17, 1: 0.09},
}


def draw_equity(draw: DrawType, streets_remaining: int) -> float:
    """Heuristic equity with one or two cards to come; 0.0 otherwise."""
    return _DRAW_EQUITY[draw].get(streets_remaining, 0.0)


def flush_draw_equity(streets_remaining: int) -> float:
    return draw_equity(DrawType.FLUSH_DRAW, streets_remaining)


def oesd_equity(streets_remaining: int) -> float:
    return draw_equity(DrawType.OESD, streets_remaining)


def combo_draw_equity(streets_remaining: int) -> float:
    return draw_equity(DrawType.COMBO_DRAW, streets_remaining)


def draw_equity_flop(draw: DrawType) -> float:
    """Equity on the flop, two streets to come."""
    return draw_equity(draw, 2)


def required_equity(call_amount: int, pot_before_call: int) -> float:
    """Break-even equity for a call: call / (pot + call)."""
    total = pot_before_call + call_amount
    if total == 0:
        return 0.0
    return call_amount / total


def required_fold_frequency(bet: int, pot_before_bet: int) -> float:
    """How often a bluff must succeed to break even: bet / (pot + bet)."""
    return required_equity(bet, pot_before_bet)


def hero_has_flush_draw(hand: Sequence[Card], board: Sequence[Card]) -> bool:
    """A hole card's suit already appears twice or more on the board."""
    counts = Counter(c.suit for c in board)
    return any(counts[c.suit] >= 2 for c in hand)


def hero_has_straight_draw(hand: Sequence[Card], board: Sequence[Card]) -> bool:
    """The board is connected and a hole card sits within three ranks of it."""
    if not has_straight_draw(board):
        return False
    board_ranks = _ranks(board)
    return any(abs(int(c.rank) - br) <= 3 for c in hand for br in board_ranks)


def is_combo_draw(hand: Sequence[Card], board: Sequence[Card]) -> bool:
    return hero_has_flush_draw(hand, board) and hero_has_straight_draw(hand, board)


# ---------------------------------------------------------------------------
# Check-raise spots
# ---------------------------------------------------------------------------

class BoardFavour(str, Enum):
    BB_FAVORABLE = "BBFav"
    IP_FAVORABLE = "IPFav"

    @property
    def description(self) -> str:
        if self == BoardFavour.BB_FAVORABLE:
            return "BB-favorable (low/connected)"
        return "IP-favorable (high/dry)"


def classify_board_favour(board: Sequence[Card]) -> BoardFavour:
    """Low flops (rank sum 20 or less) hit the big blind's range."""
    if sum(_ranks(board)) <= 20:
        return BoardFavour.BB_FAVORABLE
    return BoardFavour.IP_FAVORABLE


class HandInteraction(str, Enum):
    STRONG = "Strong"
    DRAW = "Draw"
    WEAK = "Weak"


def classify_hand_interaction(hand: Sequence[Card], board: Sequence[Card]) -> HandInteraction:
    """Draws take precedence over pairing the board."""
    if hero_has_flush_draw(hand, board) or hero_has_straight_draw(hand, board):
        return HandInteraction.DRAW
    board_ranks = set(_ranks(board))
    if any(int(c.rank) in board_ranks for c in hand):
        return HandInteraction.STRONG
    return HandInteraction.WEAK


# ---------------------------------------------------------------------------
# Turn cards
# ---------------------------------------------------------------------------

class TurnCard(str, Enum):
    BLANK = "Blank"
    SCARE = "Scare"


class BarrelTurnCard(str, Enum):
    BLANK = "Blank"
    SCARE_BROADWAY = "ScareBroadway"
    DRAW_COMPLETE = "DrawComplete"


def _completes_four_straight(flop: Sequence[Card], turn: Card) -> bool:
    ranks = _unique_sorted_ranks(list(flop) + [turn])
    return any(ranks[i + 3] - ranks[i] <= 4 for i in range(len(ranks) - 3))


def _completes_flush(flop: Sequence[Card], turn: Card) -> bool:
    return sum(1 for c in flop if c.suit == turn.suit) >= 2


def classify_turn_card(flop: Sequence[Card], turn: Card) -> TurnCard:
    """Scare if the turn overcards the flop, brings a third suited card,
    or puts four ranks within a span of four. Blank otherwise."""
    if int(turn.rank) > max(_ranks(flop), default=0):
        return TurnCard.SCARE
    if _completes_flush(flop, turn):
        return TurnCard.SCARE
    if _completes_four_straight(flop, turn):
        return TurnCard.SCARE
    return TurnCard.BLANK


def classify_barrel_turn(flop: Sequence[Card], turn: Card) -> BarrelTurnCard:
    """Three-way turn class used when deciding on a second barrel."""
    if _completes_flush(flop, turn) or _completes_four_straight(flop, turn):
        return BarrelTurnCard.DRAW_COMPLETE
    if int(turn.rank) >= 10:
        return BarrelTurnCard.SCARE_BROADWAY
    return BarrelTurnCard.BLANK


# ---------------------------------------------------------------------------
# Made-hand strength on a board
# ---------------------------------------------------------------------------

class MadeStrength(str, Enum):
    STRONG = "Strong"
    MEDIUM = "Medium"
    WEAK = "Weak"


def classify_turn_strength(hand: Sequence[Card], board: Sequence[Card]) -> MadeStrength:
    """Coarse made-hand strength from pairing checks only.

    Strong: set, overpair, two pair, top pair with a jack-or-better kicker.
    Medium: underpair, weaker top pair, any other pair.
    Weak: nothing paired.
    """
    h0, h1 = _ranks(hand)
    board_ranks = _ranks(board)
    board_max = max(board_ranks, default=0)
    hits0 = h0 in board_ranks
    hits1 = h1 in board_ranks

    if h0 == h1:
        if hits0 or h0 > board_max:
            return MadeStrength.STRONG
        return MadeStrength.MEDIUM

    if hits0 and hits1:
        return MadeStrength.STRONG
    if hits0 or hits1:
        paired, kicker = (h0, h1) if hits0 else (h1, h0)
        if paired == board_max and kicker >= 11:
            return MadeStrength.STRONG
        return MadeStrength.MEDIUM
    return MadeStrength.WEAK


# ---------------------------------------------------------------------------
# Tournament push/fold
# ---------------------------------------------------------------------------

class PushTier(str, Enum):
    PREMIUM = "Premium"
    STRONG = "Strong"
    PLAYABLE = "Playable"
    WEAK = "Weak"


class TournamentStage(str, Enum):
    EARLY_LEVELS = "Early"
    MIDDLE_STAGES = "Middle"
    BUBBLE = "Bubble"
    FINAL_TABLE = "FinalTable"

    @property
    def display_name(self) -> str:
        return {
            "Early": "Early Levels",
            "Middle": "Middle Stages",
            "Bubble": "Bubble",
            "FinalTable": "Final Table",
        }[self.value]


_PUSH_BASE_BB = {
    TournamentStage.EARLY_LEVELS: 20,
    TournamentStage.MIDDLE_STAGES: 15,
    TournamentStage.BUBBLE: 10,
    TournamentStage.FINAL_TABLE: 12,
}

_PUSH_TIER_ADJUST = {
    PushTier.PREMIUM: 8,
    PushTier.STRONG: 3,
    PushTier.PLAYABLE: 0,
    PushTier.WEAK: -4,
}


def classify_push_tier(hand: Sequence[Card]) -> PushTier:
    r1, r2 = sorted(_ranks(hand), reverse=True)
    suited = hand[0].suit == hand[1].suit
    pair = r1 == r2

    if (pair and r1 >= 12) or (r1 == 14 and r2 == 13 and suited):
        return PushTier.PREMIUM
    if (pair and r1 >= 10) or (r1 == 14 and r2 >= 12):
        return PushTier.STRONG
    if pair and r1 >= 7:
        return PushTier.PLAYABLE
    if suited and ((r1 == 14 and r2 >= 10) or (r1 >= 12 and r2 >= 11)):
        return PushTier.PLAYABLE
    return PushTier.WEAK


def push_threshold_bb(stage: TournamentStage, tier: PushTier) -> int:
    """Deepest stack (in BB) at which shoving is still correct."""
    return max(0, _PUSH_BASE_BB[stage] + _PUSH_TIER_ADJUST[tier])


# ---------------------------------------------------------------------------
# Preflop strength buckets for multi-player spots
# ---------------------------------------------------------------------------

class SqueezeStrength(str, Enum):
    PREMIUM = "Premium"
    SPECULATIVE = "Speculative"
    WEAK = "Weak"


class DefenseStrength(str, Enum):
    STRONG = "Strong"
    PLAYABLE = "Playable"
    WEAK = "Weak"


def squeeze_strength(category: HandCategory) -> SqueezeStrength:
    if category in (HandCategory.PREMIUM, HandCategory.STRONG):
        return SqueezeStrength.PREMIUM
    if category == HandCategory.PLAYABLE:
        return SqueezeStrength.SPECULATIVE
    return SqueezeStrength.WEAK


def defense_strength(category: HandCategory) -> DefenseStrength:
    if category in (HandCategory.PREMIUM, HandCategory.STRONG):
        return DefenseStrength.STRONG
    if category in (HandCategory.PLAYABLE, HandCategory.MARGINAL):
        return DefenseStrength.PLAYABLE
    return DefenseStrength.WEAK


# ---------------------------------------------------------------------------
# River buckets
# ---------------------------------------------------------------------------

class BluffType(str, Enum):
    MISSED_FLUSH_DRAW = "MissedFlushDraw"
    CAPPED_RANGE = "CappedRange"
    OVERCARD_BRICK = "OvercardBrick"

    @property
    def description(self) -> str:
        return {
            "MissedFlushDraw": "missed flush draw",
            "CappedRange": "capped / checked-back range",
            "OvercardBrick": "bricked overcards",
        }[self.value]


class ValueStrength(str, Enum):
    NUTS = "Nuts"
    STRONG = "Strong"
    MEDIUM = "Medium"
    WEAK = "Weak"

    @property
    def description(self) -> str:
        return {
            "Nuts": "nutted hand (top set / straight / flush)",
            "Strong": "strong hand (top two pair / second set)",
            "Medium": "medium hand (one pair / weak two pair)",
            "Weak": "no made hand (high card only)",
        }[self.value]


class CallerStrength(str, Enum):
    STRONG = "Strong"
    MARGINAL = "Marginal"
    WEAK = "Weak"

    @property
    def description(self) -> str:
        return {
            "Strong": "strong hand (two pair+ / top pair strong kicker)",
            "Marginal": "marginal hand (top pair weak kicker / middle pair)",
            "Weak": "weak hand (bottom pair / missed draw)",
        }[self.value]


def _suit_total(hand: Sequence[Card], board: Sequence[Card], suit) -> int:
    return sum(1 for c in list(hand) + list(board) if c.suit == suit)


def hero_has_flush(hand: Sequence[Card], board: Sequence[Card]) -> bool:
    """Five or more cards of a suit held by at least one hole card."""
    return any(_suit_total(hand, board, c.suit) >= 5 for c in hand)


def hero_has_straight(hand: Sequence[Card], board: Sequence[Card]) -> bool:
    """Five consecutive ranks that need at least one hole card (wheel included)."""

    def with_low_ace(ranks):
        ranks = set(ranks)
        if 14 in ranks:
            ranks.add(1)
        return ranks

    board_ranks = with_low_ace(_ranks(board))
    all_ranks = board_ranks | with_low_ace(_ranks(hand))
    for low in range(1, 11):
        run = set(range(low, low + 5))
        if run <= all_ranks and not run <= board_ranks:
            return True
    return False


def has_showdown_value(hand: Sequence[Card], board: Sequence[Card]) -> bool:
    """Hero makes a pair or better that uses at least one hole card."""
    h0, h1 = _ranks(hand)
    board_ranks = set(_ranks(board))
    return (h0 == h1 or h0 in board_ranks or h1 in board_ranks
            or hero_has_flush(hand, board) or hero_has_straight(hand, board))


def classify_bluff_type(hand: Sequence[Card], board: Sequence[Card]) -> Optional[BluffType]:
    """Why hero reached the river without showdown value.

    A hole-card suit showing twice or more on the board reads as a missed
    flush draw; two hole cards above the board as bricked overcards;
    anything else as a capped range that checked back earlier. Returns
    None when hero holds a made hand, which is not a bluffing hand at all.
    """
    if has_showdown_value(hand, board):
        return None
    board_suits = Counter(c.suit for c in board)
    for card in hand:
        if board_suits[card.suit] >= 2:
            return BluffType.MISSED_FLUSH_DRAW
    h0, h1 = _ranks(hand)
    if min(h0, h1) > max(_ranks(board), default=0):
        return BluffType.OVERCARD_BRICK
    return BluffType.CAPPED_RANGE


def classify_value_strength(hand: Sequence[Card], board: Sequence[Card]) -> ValueStrength:
    if hero_has_flush(hand, board) or hero_has_straight(hand, board):
        return ValueStrength.NUTS

    h0, h1 = _ranks(hand)
    board_ranks = _ranks(board)
    board_max = max(board_ranks, default=0)
    counts = Counter(board_ranks)

    if h0 == h1:
        if h0 in counts:
            return ValueStrength.NUTS if h0 == board_max else ValueStrength.STRONG
        if h0 > board_max:
            return ValueStrength.STRONG
        return ValueStrength.MEDIUM

    if any(counts[h] >= 2 for h in (h0, h1)):
        return ValueStrength.STRONG  # trips
    if h0 in counts and h1 in counts:
        return ValueStrength.STRONG if max(h0, h1) == board_max else ValueStrength.MEDIUM
    if h0 in counts or h1 in counts:
        return ValueStrength.MEDIUM
    return ValueStrength.WEAK


def classify_caller_strength(hand: Sequence[Card], board: Sequence[Card]) -> CallerStrength:
    if classify_turn_strength(hand, board) == MadeStrength.STRONG:
        return CallerStrength.STRONG

    h0, h1 = _ranks(hand)
    board_ranks = _ranks(board)
    if not board_ranks:
        return CallerStrength.WEAK
    board_min = min(board_ranks)

    if h0 == h1:
        return CallerStrength.MARGINAL if h0 > board_min else CallerStrength.WEAK

    paired = [h for h in (h0, h1) if h in board_ranks]
    if not paired:
        return CallerStrength.WEAK
    if paired[0] == board_min:
        return CallerStrength.WEAK
    return CallerStrength.MARGINAL
