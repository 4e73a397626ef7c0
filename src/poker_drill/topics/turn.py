"""Turn drills: second barrels, probe bets and delayed c-bets.

Draw orders:

    turn barrel     shuffle, hero 2, flop 3, turn 1, stack / pot, hero BTN-or-CO coin
    probe bet       shuffle, deal 6, pot / stack
    delayed c-bet   shuffle, deal 6, pot / stack
"""

import random

from poker_drill.engine.deck import Deck
from poker_drill.engine.evaluator import (
    BarrelTurnCard, BoardTexture, MadeStrength, TurnCard, board_texture,
    classify_barrel_turn, classify_turn_card, classify_turn_strength,
)
from poker_drill.engine.helpers import (
    BB, answer, board_str, deal, hand_str, heads_up, pct_of, scenario, styled,
)
from poker_drill.models import (
    DifficultyLevel, GameType, Position, TextStyle, TrainingScenario, TrainingTopic,
)

_STRENGTH_WORDS = {
    MadeStrength.STRONG: ("strong hand", "strong (set, two pair, overpair or top pair good kicker)"),
    MadeStrength.MEDIUM: ("medium hand", "medium (a weaker pair)"),
    MadeStrength.WEAK: ("weak hand", "weak (no pair)"),
}


# ---------------------------------------------------------------------------
# Turn barrel decision (TB)
# ---------------------------------------------------------------------------

_BARREL_DEPTHS = {
    DifficultyLevel.BEGINNER: (None, (14, 22)),
    DifficultyLevel.INTERMEDIATE: ((50, 130), (10, 28)),
    DifficultyLevel.ADVANCED: ((25, 200), (8, 40)),
}


def generate_barrel(
    rng: random.Random,
    difficulty: DifficultyLevel,
    scenario_id: str,
    text_style: TextStyle,
) -> TrainingScenario:
    """Fire a second barrel or check back after the flop c-bet was called."""
    deck = Deck.new_shuffled(rng)
    hand = (deck.deal(), deck.deal())
    flop = deck.deal_n(3)
    turn = deck.deal()

    stack_range, pot_range = _BARREL_DEPTHS[difficulty]
    stack_bb = 100 if stack_range is None else rng.randint(*stack_range)
    pot_bb = rng.randint(*pot_range)
    hero_pos = Position.BTN if rng.random() < 0.5 else Position.CO
    pot, stack = pot_bb * BB, stack_bb * BB
    medium, large = pot // 2, pot * 4 // 5

    texture = board_texture(flop)
    turn_type = classify_barrel_turn(flop, turn)
    wet_flop = texture != BoardTexture.DRY

    if turn_type == BarrelTurnCard.DRAW_COMPLETE:
        correct, branch_key = "A", "DrawComplete"
    elif turn_type == BarrelTurnCard.SCARE_BROADWAY:
        correct, branch_key = "C", "ScareBroadway"
    elif wet_flop:
        correct, branch_key = "B", "Blank:Wet"
    else:
        correct, branch_key = "A", "Blank:Dry"

    hs, fs, pos_name = hand_str(hand), board_str(flop), hero_pos.display_name
    turn_simple, turn_tech = {
        BarrelTurnCard.BLANK: ("a blank that changes little", "a blank"),
        BarrelTurnCard.SCARE_BROADWAY: ("a big card (T, J, Q, K or A)", "a Broadway scare card"),
        BarrelTurnCard.DRAW_COMPLETE: ("a card that may complete a draw", "a draw-completing card"),
    }[turn_type]
    question = styled(
        text_style,
        f"You bet on the flop and your opponent called. You have {hs} in the {pos_name} "
        f"seat. Flop: {fs}. Turn: {turn} ({turn_simple}). Pot: {pot} chips, your stack: "
        f"{stack} chips. Your opponent checks. What do you do?",
        f"You c-bet {fs} ({texture.value}) from {pos_name} with {hs} and BB called. "
        f"Turn {turn}: {turn_tech}. Pot {pot_bb} BB, {stack_bb} BB behind. BB checks. "
        f"Barrel half pot ({medium}), 80% pot ({large}), or check?",
    )

    if turn_type == BarrelTurnCard.DRAW_COMPLETE:
        check_simple = "Right. That card may have given your opponent a better hand. Check."
        check_tech = (f"Correct. The {turn} completes draws in BB's flop-calling range; your "
                      f"bluffs lose fold equity and thin value gets raised. Check back.")
        medium_simple = "Betting into a card that may have helped your opponent is risky."
        medium_tech = f"Barrelling the {turn} runs into the draws that just got there."
        large_simple = "A big bet here could run straight into a made hand."
        large_tech = f"An 80% barrel on the {turn} is called or raised by every completed draw."
    elif turn_type == BarrelTurnCard.SCARE_BROADWAY:
        check_simple = "Checking lets your opponent off the hook. That big card helps your story."
        check_tech = (f"Checking gives up the {turn}, which favours the preflop raiser's "
                      f"range far more than BB's calling range.")
        medium_simple = "A medium bet works, but a bigger bet puts more pressure on your opponent."
        medium_tech = (f"Half pot under-uses the {turn}; the scare card supports a larger, "
                       f"more polarised sizing.")
        large_simple = f"Right. Bet big. The {turn} looks scary for your opponent and fits your hand."
        large_tech = (f"Correct. The {turn} hits your range; an 80% barrel ({large}) "
                      f"puts BB's one-pair hands in a tough spot.")
    elif wet_flop:
        check_simple = "Checking gives a free card while draws are still out there."
        check_tech = (f"Checking a blank on a {texture.value} flop lets draws realise "
                      f"their equity for free.")
        medium_simple = "Right. Bet medium. Draws are still out there, so make them pay."
        medium_tech = (f"Correct. A half-pot barrel ({medium}) on a blank denies equity "
                       f"and gives draws a poor price (~20% with one card to come).")
        large_simple = "A big bet isn't needed; a medium one does the job for less."
        large_tech = "80% pot over-invests; half pot already prices out the draws."
    else:
        check_simple = "Right. Nothing changed on this quiet board. Check and keep the pot small."
        check_tech = (f"Correct. A blank on a dry {fs} adds no equity or fold equity; "
                      f"check back for pot control.")
        medium_simple = "Betting again without a reason on a quiet board wastes chips."
        medium_tech = "Barrelling a dry blank only folds out hands you already beat."
        large_simple = "Betting big here is too aggressive. Check instead."
        large_tech = "A large barrel on a dry blank is a bluff with no supporting equity."

    answers = [
        answer("A", "Check", correct, text_style, check_simple, check_tech),
        answer("B", f"Bet medium ({medium} chips ~50%)", correct, text_style,
               medium_simple, medium_tech),
        answer("C", f"Bet large ({large} chips ~80%)", correct, text_style,
               large_simple, large_tech),
    ]
    players = heads_up(hero_pos, Position.BB, stack, stack)
    return scenario(
        scenario_id, TrainingTopic.TURN_BARREL_DECISION, branch_key, GameType.CASH_GAME,
        hero_pos, hand, flop + [turn], players, pot, 0, question, answers,
    )


# ---------------------------------------------------------------------------
# Turn probe bet (PB) and delayed c-bet (DC)
# ---------------------------------------------------------------------------

_CHECKED_FLOP_DEPTHS = {
    DifficultyLevel.BEGINNER: ((6, 14), None),
    DifficultyLevel.INTERMEDIATE: ((4, 20), (40, 100)),
    DifficultyLevel.ADVANCED: ((4, 30), (20, 150)),
}


def _roll_checked_flop_depths(rng: random.Random, difficulty: DifficultyLevel):
    pot_range, stack_range = _CHECKED_FLOP_DEPTHS[difficulty]
    pot_bb = rng.randint(*pot_range)
    stack_bb = 80 if stack_range is None else rng.randint(*stack_range)
    return pot_bb, stack_bb


def generate_probe(
    rng: random.Random,
    difficulty: DifficultyLevel,
    scenario_id: str,
    text_style: TextStyle,
) -> TrainingScenario:
    """Lead the turn from the big blind after the flop checked through."""
    hand, board = deal(rng, 4)
    pot_bb, stack_bb = _roll_checked_flop_depths(rng, difficulty)
    pot, stack = pot_bb * BB, stack_bb * BB
    small, large = pct_of(pot, 0.40), pct_of(pot, 0.70)

    strength = classify_turn_strength(hand, board)
    correct, branch_key = {
        MadeStrength.STRONG: ("C", "Strong:ProbeLarge"),
        MadeStrength.MEDIUM: ("B", "Medium:ProbeSmall"),
        MadeStrength.WEAK: ("A", "Weak:Check"),
    }[strength]

    hs, bs = hand_str(hand), board_str(board)
    simple_word, tech_word = _STRENGTH_WORDS[strength]
    question = styled(
        text_style,
        f"Both players checked after the flop. The board is now {bs}. You have {hs} "
        f"({simple_word}) in the Big Blind and act first. Pot: {pot} chips, your stack: "
        f"{stack} chips. What do you do?",
        f"BB vs BTN, flop checked through. Turn board {bs}; you hold {hs}, {tech_word}. "
        f"Pot {pot_bb} BB, {stack_bb} BB effective. You are first to act.",
    )
    answers = [
        answer(
            "A", "Check", correct, text_style,
            f"Right. {hs} has nothing worth betting. Check and see what happens."
            if correct == "A" else
            "Checking wastes your hand. Your opponent showed weakness, so bet.",
            "Correct. With no pair, leading only folds out worse and gets called by "
            "better; BTN's flop check doesn't make a bluff profitable here."
            if correct == "A" else
            f"BTN's flop check caps their range; checking a {tech_word.split(' ')[0]} "
            f"hand forfeits value and protection.",
        ),
        answer(
            "B", f"Probe small ({small} chips ~40%)", correct, text_style,
            f"Right. A small bet with {hs} gets value from weaker hands and keeps the pot controlled."
            if correct == "B" else
            ("A small bet is too little. Your strong hand deserves a bigger bet."
             if correct == "C" else
             "Betting with nothing just gives your chips away."),
            f"Correct. A 40% probe ({small}) with a medium pair targets BTN's capped "
            f"range while keeping the pot small if raised."
            if correct == "B" else
            (f"40% undersizes a strong hand against a capped range; go larger."
             if correct == "C" else
             "Probing air into a range that still has pairs is a low-equity bluff."),
        ),
        answer(
            "C", f"Probe large ({large} chips ~70%)", correct, text_style,
            f"Right. {hs} is strong. Bet big to win more from your opponent's weaker hands."
            if correct == "C" else
            f"A big bet with {hs} risks too much with a hand that isn't strong enough.",
            f"Correct. A 70% probe ({large}) builds the pot with a strong hand while "
            f"BTN's range is capped by the flop check."
            if correct == "C" else
            "A 70% probe with this holding only gets called by better.",
        ),
    ]
    players = heads_up(Position.BB, Position.BTN, stack, stack)
    return scenario(
        scenario_id, TrainingTopic.TURN_PROBE_BET, branch_key, GameType.CASH_GAME,
        Position.BB, hand, board, players, pot, 0, question, answers,
    )


def generate_delayed_cbet(
    rng: random.Random,
    difficulty: DifficultyLevel,
    scenario_id: str,
    text_style: TextStyle,
) -> TrainingScenario:
    """Bet the turn as the preflop raiser after checking the flop back."""
    hand, board = deal(rng, 4)
    pot_bb, stack_bb = _roll_checked_flop_depths(rng, difficulty)
    pot, stack = pot_bb * BB, stack_bb * BB
    small, medium = pct_of(pot, 0.33), pct_of(pot, 0.60)

    strength = classify_turn_strength(hand, board)
    turn_card = classify_turn_card(board[:3], board[3])
    if strength == MadeStrength.STRONG:
        correct = "C"
    elif strength == MadeStrength.MEDIUM and turn_card == TurnCard.BLANK:
        correct = "B"
    else:
        correct = "A"
    branch_key = f"{strength.value}:{turn_card.value}"

    hs, bs = hand_str(hand), board_str(board)
    turn = board[3]
    simple_word, tech_word = _STRENGTH_WORDS[strength]
    scare = turn_card == TurnCard.SCARE
    question = styled(
        text_style,
        f"You raised before the flop on the Button, then both players checked the flop. "
        f"The board is now {bs}. You have {hs} ({simple_word}). Your opponent checks "
        f"again. Pot: {pot} chips. What do you do?",
        f"BTN vs BB, flop checked through. Turn {turn} is a "
        f"{'scare card' if scare else 'blank'} on {bs}. You hold {hs}, {tech_word}. "
        f"Pot {pot_bb} BB, {stack_bb} BB effective. BB checks.",
    )

    if correct == "A" and strength == MadeStrength.MEDIUM:
        check_simple = f"Right. The {turn} could have helped your opponent. Check with {hs}."
        check_tech = (f"Correct. The {turn} shifts equity toward BB's range; a medium hand "
                      f"wants showdown, not a bet that gets raised.")
    elif correct == "A":
        check_simple = f"Right. {hs} has nothing. Check and give up cheaply if needed."
        check_tech = ("Correct. Without a pair, a delayed c-bet has too little equity "
                      "when called; take the free river.")
    else:
        check_simple = f"Checking again wastes {hs}. Bet now that your opponent checked twice."
        check_tech = ("Checking twice with a betting hand lets BB realise equity for free "
                      "and forfeits value.")

    answers = [
        answer("A", "Check", correct, text_style, check_simple, check_tech),
        answer(
            "B", f"Small delayed c-bet ({small} chips ~33%)", correct, text_style,
            f"Right. A small bet with {hs} on a quiet card gets value from weaker hands."
            if correct == "B" else
            ("A small bet leaves money on the table with a strong hand."
             if correct == "C" else
             f"Betting {hs} here gets called mostly by better hands."),
            f"Correct. A 33% delayed c-bet ({small}) on a blank targets BB's weak "
            f"pairs and floats while risking little."
            if correct == "B" else
            ("33% undersizes a strong hand; size up for value."
             if correct == "C" else
             f"A delayed c-bet here {'on a scare card ' if scare else ''}is called "
             f"mostly by hands that beat you."),
        ),
        answer(
            "C", f"Medium delayed c-bet ({medium} chips ~60%)", correct, text_style,
            f"Right. {hs} is strong. Bet and make your opponent pay to see the river."
            if correct == "C" else
            f"A bigger bet with {hs} risks too much for the hand you have.",
            f"Correct. A 60% delayed c-bet ({medium}) builds the pot with a strong "
            f"hand after the flop check disguised it."
            if correct == "C" else
            f"A 60% bet turns {hs} into a bluff against BB's continuing range.",
        ),
    ]
    players = heads_up(Position.BTN, Position.BB, stack, stack)
    return scenario(
        scenario_id, TrainingTopic.DELAYED_CBET, branch_key, GameType.CASH_GAME,
        Position.BTN, hand, board, players, pot, 0, question, answers,
    )
