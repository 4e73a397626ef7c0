"""Shared assembly helpers for topic generators.

Generators that draw nothing from the RNG before the shuffle use ``deal``;
those with pre-deck draws (preflop decision, ICM, turn barrel) build their
own ``Deck`` so that their draw order stays intact.
"""

import math
import random
from typing import List, Sequence, Tuple

from poker_drill.engine.deck import Deck
from poker_drill.models import (
    AnswerOption, Card, GameType, PlayerState, Position, TableSetup,
    TextStyle, TrainingScenario, TrainingTopic,
)

# Big blind in chips for every cash-game topic.
BB = 2


def deal(rng: random.Random, board_cards: int) -> Tuple[Tuple[Card, Card], List[Card]]:
    """Shuffle a fresh deck, then deal hero's two cards and the board.

    Args:
        rng: Random source; the shuffle is its next 51 draws.
        board_cards: Board size (0, 3, 4 or 5).

    Returns:
        Tuple of (hero_hand, board).
    """
    deck = Deck.new_shuffled(rng)
    hand = (deck.deal(), deck.deal())
    return hand, deck.deal_n(board_cards)


def hand_str(hand: Sequence[Card]) -> str:
    """Hole cards as one token, e.g. 'AcKs'."""
    return "".join(str(c) for c in hand)


def board_str(board: Sequence[Card]) -> str:
    """Board cards separated by spaces, e.g. 'Ac Ks 7h'."""
    return " ".join(str(c) for c in board)


def styled(text_style: TextStyle, simple: str, technical: str) -> str:
    """Pick the wording for the requested style."""
    return simple if text_style == TextStyle.SIMPLE else technical


def round_half_up(value: float) -> int:
    """Round to the nearest integer, halves away from zero."""
    if value < 0:
        return -int(math.floor(-value + 0.5))
    return int(math.floor(value + 0.5))


def pct_of(amount: int, fraction: float) -> int:
    """``fraction`` of ``amount`` in whole chips."""
    return round_half_up(amount * fraction)


def answer(
    answer_id: str,
    text: str,
    correct_id: str,
    text_style: TextStyle,
    simple: str,
    technical: str,
) -> AnswerOption:
    """Build one answer option; it is correct when its id matches ``correct_id``."""
    return AnswerOption(
        id=answer_id,
        text=text,
        is_correct=answer_id == correct_id,
        explanation=styled(text_style, simple, technical),
    )


def heads_up(
    hero_position: Position,
    villain_position: Position,
    hero_stack: int,
    villain_stack: int,
) -> Tuple[PlayerState, PlayerState]:
    """Two-handed player list: villain in seat 1, hero in seat 2."""
    return (
        PlayerState(seat=1, position=villain_position, stack=villain_stack, is_hero=False),
        PlayerState(seat=2, position=hero_position, stack=hero_stack, is_hero=True),
    )


def scenario(
    scenario_id: str,
    topic: TrainingTopic,
    branch_key: str,
    game_type: GameType,
    hero_position: Position,
    hero_hand: Sequence[Card],
    board: Sequence[Card],
    players: Sequence[PlayerState],
    pot: int,
    bet: int,
    question: str,
    answers: Sequence[AnswerOption],
) -> TrainingScenario:
    """Bundle every part of a drill into the frozen scenario value."""
    return TrainingScenario(
        scenario_id=scenario_id,
        topic=topic,
        branch_key=branch_key,
        table_setup=TableSetup(
            game_type=game_type,
            hero_position=hero_position,
            hero_hand=tuple(hero_hand),
            board=tuple(board),
            players=tuple(players),
            pot_size=pot,
            current_bet=bet,
        ),
        question=question,
        answers=tuple(answers),
    )
