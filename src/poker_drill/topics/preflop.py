"""Preflop drills: opening decisions, ICM push/fold, isolation, squeeze, BB defense.

The board is always empty. Hand strength comes from ``classify_hand`` or one
of the buckets derived from it.

Draw orders (each is part of the topic's reproducible output):

    preflop decision   6-max coin, spot, hero position, hero stack,
                       shuffle, deal 2, one stack roll per other seat
    ICM                stage, hero BB, villain BB, players left, shuffle, deal 2
    anti-limper        shuffle, deal 2, position, limpers, stack
    squeeze            shuffle, deal 2, callers, open size / stack
    BB defense         shuffle, deal 2, villain position, raise size / stack
"""

import math
import random
from enum import Enum

from poker_drill.engine.deck import Deck
from poker_drill.engine.evaluator import (
    DefenseStrength, HandCategory, SqueezeStrength, TournamentStage,
    classify_hand, classify_push_tier, defense_strength, push_threshold_bb,
    squeeze_strength,
)
from poker_drill.engine.helpers import (
    BB, answer, deal, hand_str, heads_up, round_half_up, scenario, styled,
)
from poker_drill.models import (
    DifficultyLevel, GameType, PlayerState, Position, TextStyle,
    TrainingScenario, TrainingTopic,
)
from poker_drill.models.position import NINE_MAX_POSITIONS, SIX_MAX_POSITIONS


# ---------------------------------------------------------------------------
# Preflop decision (PF)
# ---------------------------------------------------------------------------

class PreflopSpot(str, Enum):
    OPEN_RAISE = "OpenRaise"
    FACING_OPEN = "FacingOpen"
    THREE_BET_POT = "ThreeBetPot"


_SPOTS = (PreflopSpot.OPEN_RAISE, PreflopSpot.FACING_OPEN, PreflopSpot.THREE_BET_POT)

_TABLE_STACK_BB = {
    DifficultyLevel.BEGINNER: (80, 120),
    DifficultyLevel.INTERMEDIATE: (40, 150),
    DifficultyLevel.ADVANCED: (15, 300),
}


def _roll_table_stack(rng: random.Random, difficulty: DifficultyLevel) -> int:
    low, high = _TABLE_STACK_BB[difficulty]
    return rng.randint(low, high)


def generate_preflop_decision(
    rng: random.Random,
    difficulty: DifficultyLevel,
    scenario_id: str,
    text_style: TextStyle,
) -> TrainingScenario:
    """Open, call, 3-bet or fold a starting hand at a full 6- or 9-handed table.

    Args:
        rng: Random source owned by this call.
        difficulty: Controls the stack-depth range.
        scenario_id: Id assigned by the dispatcher.
        text_style: Prose style for question and explanations.

    Returns:
        The generated scenario.
    """
    six_max = rng.random() < 0.5
    spot = _SPOTS[rng.randint(0, 2)]
    positions = SIX_MAX_POSITIONS if six_max else NINE_MAX_POSITIONS
    hero_pos = rng.choice(positions)
    stack_bb = _roll_table_stack(rng, difficulty)

    deck = Deck.new_shuffled(rng)
    hand = (deck.deal(), deck.deal())

    players = []
    for index, pos in enumerate(positions):
        seat_bb = stack_bb if pos == hero_pos else _roll_table_stack(rng, difficulty)
        players.append(PlayerState(
            seat=index + 1, position=pos, stack=seat_bb * BB, is_hero=pos == hero_pos,
        ))

    cat = classify_hand(hand)
    in_position = hero_pos.is_late
    side = "IP" if in_position else "OOP"
    if spot == PreflopSpot.THREE_BET_POT:
        branch_key = f"ThreeBetPot:{cat.value}"
    else:
        branch_key = f"{spot.value}:{cat.value}:{side}"

    builder = {
        PreflopSpot.OPEN_RAISE: _open_raise,
        PreflopSpot.FACING_OPEN: _facing_open,
        PreflopSpot.THREE_BET_POT: _three_bet_pot,
    }[spot]
    pot, bet, question, answers = builder(
        hand, cat, hero_pos, stack_bb, len(positions), text_style,
    )

    return scenario(
        scenario_id, TrainingTopic.PREFLOP_DECISION, branch_key, GameType.CASH_GAME,
        hero_pos, hand, [], players, pot, bet, question, answers,
    )


def _open_raise(hand, cat, pos, stack_bb, table_size, text_style):
    hs, pos_name, cat_name = hand_str(hand), pos.display_name, cat.value
    open_bb = 3 if stack_bb >= 40 else 2
    raise_it = (
        cat in (HandCategory.PREMIUM, HandCategory.STRONG)
        or (pos.is_late and cat in (HandCategory.PLAYABLE, HandCategory.MARGINAL))
    )
    correct = "B" if raise_it else "A"

    question = styled(
        text_style,
        f"You have {hs} in the {pos_name} seat at a {table_size}-player table with "
        f"{stack_bb} big blinds. Everyone before you folded. What do you do?",
        f"{table_size}-handed, folded to you in {pos_name} with {hs} ({cat_name}), "
        f"{stack_bb} BB effective. What is your action?",
    )
    answers = [
        answer(
            "A", "Fold", correct, text_style,
            f"Right. {hs} is not good enough to play from the {pos_name} seat. "
            f"Let it go and wait for a better hand."
            if correct == "A" else
            f"Too cautious. {hs} is worth playing from the {pos_name} seat when "
            f"nobody has entered the pot.",
            f"Correct. A {cat_name} holding from {pos_name} does not have the equity or "
            f"playability to open into the players still to act."
            if correct == "A" else
            f"Overly tight. {hs} ({cat_name}) from {pos_name} at {stack_bb} BB is a "
            f"profitable open; folding forfeits the blinds and initiative.",
        ),
        answer(
            "B", f"Raise to {open_bb} BB", correct, text_style,
            f"Right. {hs} is strong enough to raise from the {pos_name} seat. "
            f"A raise to {open_bb * BB} chips puts pressure on the blinds."
            if correct == "B" else
            f"Raising {hs} from the {pos_name} seat puts chips in with a hand "
            f"that will often be behind. Fold it.",
            f"Correct. Open to {open_bb} BB with {hs} ({cat_name}): you take the "
            f"initiative and isolate the blinds with a range that out-flops theirs."
            if correct == "B" else
            f"A {cat_name} hand from {pos_name} loses money as an open; too many "
            f"players behind can wake up with a dominating range.",
        ),
        answer(
            "C", "Call", correct, text_style,
            "Just calling the big blind lets everyone in cheaply and you give up "
            "control. Raise or fold instead.",
            f"Open-limping {hs} invites a multiway pot without initiative and hands "
            f"the blinds a free squeeze. It is not part of a sound opening strategy.",
        ),
    ]
    return BB + BB // 2, 0, question, answers


def _facing_open(hand, cat, pos, stack_bb, table_size, text_style):
    hs, pos_name, cat_name = hand_str(hand), pos.display_name, cat.value
    raise_bb = 3 if stack_bb >= 40 else 2
    three_bet_bb = raise_bb * 3
    if cat in (HandCategory.PREMIUM, HandCategory.STRONG):
        correct = "C"
    elif cat == HandCategory.PLAYABLE:
        correct = "C" if pos.is_late else "B"
    else:
        correct = "A"

    question = styled(
        text_style,
        f"You have {hs} in the {pos_name} seat with {stack_bb} big blinds. "
        f"A player raised to {raise_bb} big blinds. What do you do?",
        f"{table_size}-handed, {hs} ({cat_name}) in {pos_name}, {stack_bb} BB deep. "
        f"An earlier player opens to {raise_bb} BB. Your action?",
    )
    if correct == "B":
        call_simple = f"Right. {hs} is good enough to see a flop, but not to re-raise from here."
        call_tech = (f"Correct. Flatting keeps a {cat_name} hand in the pot cheaply and "
                     f"lets you realise equity without bloating it out of position.")
    elif correct == "A":
        call_simple = f"Calling with {hs} costs chips the hand can't win back. Fold."
        call_tech = (f"A {cat_name} hand is dominated by a standard opening range; "
                     f"calling bleeds chips over time.")
    else:
        call_simple = f"Calling is too passive. {hs} is strong enough to re-raise."
        call_tech = (f"Flatting under-realises {hs}; a 3-bet builds the pot while you "
                     f"are ahead of the opener's range.")
    answers = [
        answer(
            "A", "Fold", correct, text_style,
            f"Right. {hs} is too weak to continue against a raise."
            if correct == "A" else
            f"Folding {hs} here is too cautious. It plays well against a raise.",
            f"Correct. A {cat_name} hand has too little equity against a raising "
            f"range from {pos_name}."
            if correct == "A" else
            f"Overfolding. {hs} ({cat_name}) has enough equity against the open to continue.",
        ),
        answer("B", "Call", correct, text_style, call_simple, call_tech),
        answer(
            "C", f"Raise to {three_bet_bb} BB", correct, text_style,
            f"Right. Re-raise with {hs}. You have a better hand than most raisers, "
            f"so make the pot bigger."
            if correct == "C" else
            f"Re-raising {hs} puts a lot of chips in with a hand that can't "
            f"stand a big fight.",
            f"Correct. 3-bet to {three_bet_bb} BB for value and fold equity: {hs} "
            f"({cat_name}) is ahead of the opener's continuing range."
            if correct == "C" else
            f"3-betting a {cat_name} hand turns it into a bluff that folds out "
            f"worse and gets action only from better.",
        ),
    ]
    raise_chips = raise_bb * BB
    return BB // 2 + BB + raise_chips, raise_chips, question, answers


def _three_bet_pot(hand, cat, pos, stack_bb, table_size, text_style):
    hs, pos_name, cat_name = hand_str(hand), pos.display_name, cat.value
    open_bb = 3
    three_bet_bb = open_bb * 3
    four_bet_bb = three_bet_bb * 3
    if cat == HandCategory.PREMIUM:
        correct = "C"
    elif cat in (HandCategory.STRONG, HandCategory.PLAYABLE):
        correct = "B"
    else:
        correct = "A"

    question = styled(
        text_style,
        f"You raised to {open_bb} big blinds with {hs} from the {pos_name} seat "
        f"({stack_bb} big blinds). Another player re-raised to {three_bet_bb} big "
        f"blinds. What do you do?",
        f"You open {open_bb} BB with {hs} ({cat_name}) in {pos_name}, {stack_bb} BB "
        f"effective, and face a 3-bet to {three_bet_bb} BB. Your action?",
    )
    answers = [
        answer(
            "A", "Fold", correct, text_style,
            f"Right. {hs} can't handle a re-raise. Let it go."
            if correct == "A" else
            f"Folding {hs} to one re-raise gives up too easily.",
            f"Correct. A {cat_name} open is at the bottom of your range and cannot "
            f"continue profitably against a 3-bet range."
            if correct == "A" else
            f"Folding {hs} ({cat_name}) overfolds your opening range and lets "
            f"3-bets print money against you.",
        ),
        answer(
            "B", "Call", correct, text_style,
            f"Right. {hs} is good enough to call and see a flop, but not to go bigger."
            if correct == "B" else
            (f"Calling is too passive with {hs}. Re-raise again."
             if correct == "C" else
             f"Calling a re-raise with {hs} wastes chips. Fold."),
            f"Correct. {hs} ({cat_name}) has the equity and playability to flat the "
            f"3-bet, keeping dominated hands in the opponent's range."
            if correct == "B" else
            (f"Flatting {hs} wastes its equity edge; 4-betting gets value from "
             f"the hands the 3-bettor will continue with."
             if correct == "C" else
             f"A {cat_name} hand flatting a 3-bet is dominated too often to "
             f"realise its equity."),
        ),
        answer(
            "C", f"Raise to {four_bet_bb} BB", correct, text_style,
            f"Right. {hs} is one of the best hands. Raise again and build the pot."
            if correct == "C" else
            f"Raising again with {hs} risks your stack with a hand that isn't good enough.",
            f"Correct. 4-bet {hs} ({cat_name}) for value; you dominate the hands "
            f"that continue against it."
            if correct == "C" else
            f"A 4-bet with {hs} ({cat_name}) is called or jammed on by a range "
            f"that has you crushed.",
        ),
    ]
    hero_open = open_bb * BB
    three_bet = three_bet_bb * BB
    return BB // 2 + BB + hero_open + three_bet, three_bet, question, answers


# ---------------------------------------------------------------------------
# ICM and tournament push/fold (IC)
# ---------------------------------------------------------------------------

_STAGES = (
    TournamentStage.EARLY_LEVELS,
    TournamentStage.MIDDLE_STAGES,
    TournamentStage.BUBBLE,
    TournamentStage.FINAL_TABLE,
)

_ICM_HERO_BB = {
    DifficultyLevel.BEGINNER: (6, 18),
    DifficultyLevel.INTERMEDIATE: (4, 25),
    DifficultyLevel.ADVANCED: (3, 30),
}

_PLAYERS_LEFT = {
    TournamentStage.EARLY_LEVELS: (60, 120),
    TournamentStage.MIDDLE_STAGES: (25, 60),
    TournamentStage.BUBBLE: (10, 18),
    TournamentStage.FINAL_TABLE: (3, 9),
}

# Rough extra equity needed to call off a stack, by stage.
_RISK_PREMIUM_PCT = {
    TournamentStage.EARLY_LEVELS: 3,
    TournamentStage.MIDDLE_STAGES: 8,
    TournamentStage.BUBBLE: 20,
    TournamentStage.FINAL_TABLE: 15,
}


def generate_icm(
    rng: random.Random,
    difficulty: DifficultyLevel,
    scenario_id: str,
    text_style: TextStyle,
) -> TrainingScenario:
    """Shove or fold from the button, short-stacked in a tournament."""
    bb = 100  # tournament chips
    stage = _STAGES[rng.randint(0, 3)]
    hero_bb = rng.randint(*_ICM_HERO_BB[difficulty])
    villain_bb = rng.randint(20, 60)
    players_left = rng.randint(*_PLAYERS_LEFT[stage])
    paid = math.ceil(players_left * 0.15)

    deck = Deck.new_shuffled(rng)
    hand = (deck.deal(), deck.deal())

    tier = classify_push_tier(hand)
    threshold = push_threshold_bb(stage, tier)
    push = hero_bb <= threshold
    correct = "A" if push else "B"
    branch_key = f"{stage.value}:{'Push' if push else 'Fold'}"

    hs = hand_str(hand)
    stage_name = stage.display_name
    premium = _RISK_PREMIUM_PCT[stage]
    question = styled(
        text_style,
        f"Tournament, {stage_name.lower()}: {players_left} players left and "
        f"{paid} get paid. You have {hs} on the Button with {hero_bb} big blinds. "
        f"Everyone folds to you and the Big Blind has {villain_bb} big blinds. "
        f"Go all-in or fold?",
        f"MTT {stage_name}, {players_left} left, {paid} paid. {hs} on the BTN with "
        f"{hero_bb} BB ({hero_bb * bb} chips); BB covers with {villain_bb} BB. "
        f"Folded to you. Jam or fold?",
    )
    answers = [
        answer(
            "A", "All-in", correct, text_style,
            f"Right. With {hero_bb} big blinds, {hs} is strong enough to shove here. "
            f"Winning the blinds without a fight adds up."
            if push else
            f"Going all-in with {hs} risks your whole tournament. At {hero_bb} big "
            f"blinds you can wait for a better spot.",
            f"Correct. {hs} is a {tier.value.lower()} shove; at the {stage_name} "
            f"the jam threshold is {threshold} BB and you hold {hero_bb} BB, so fold "
            f"equity plus showdown equity beats the ~{premium}% ICM risk premium."
            if push else
            f"Jamming {hero_bb} BB exceeds the {threshold} BB threshold for a "
            f"{tier.value.lower()} hand at the {stage_name}. With a ~{premium}% risk "
            f"premium you bust too often against the calling range.",
        ),
        answer(
            "B", "Fold", correct, text_style,
            f"Right. {hs} is not strong enough to risk your tournament with "
            f"{hero_bb} big blinds. Fold and wait."
            if not push else
            f"Folding is too timid. With only {hero_bb} big blinds you need to "
            f"take this chance with {hs}.",
            f"Correct. {hero_bb} BB is above the {threshold} BB jam threshold for "
            f"this tier at the {stage_name}; preserving your stack is worth more "
            f"than the blinds."
            if not push else
            f"Folding {hs} at {hero_bb} BB wastes fold equity; blinding down "
            f"below {threshold} BB only makes future shoves weaker.",
        ),
    ]
    players = (
        PlayerState(seat=1, position=Position.BB, stack=villain_bb * bb, is_hero=False),
        PlayerState(seat=2, position=Position.BTN, stack=hero_bb * bb, is_hero=True),
    )
    return scenario(
        scenario_id, TrainingTopic.ICM_AND_TOURNAMENT_DECISION, branch_key,
        GameType.TOURNAMENT, Position.BTN, hand, [], players,
        bb + bb // 2, 0, question, answers,
    )


# ---------------------------------------------------------------------------
# Anti-limper isolation (AL)
# ---------------------------------------------------------------------------

_ISO_POSITIONS = (Position.CO, Position.BTN, Position.SB)

_ISO_STACK_BB = {
    DifficultyLevel.BEGINNER: (60, 120),
    DifficultyLevel.INTERMEDIATE: (30, 150),
    DifficultyLevel.ADVANCED: (15, 200),
}


def iso_raise_bb(limpers: int) -> int:
    """Isolation size: 4 BB over one limper, plus one BB per extra limper, capped at 6."""
    return {1: 4, 2: 5}.get(limpers, 6)


def generate_anti_limper(
    rng: random.Random,
    difficulty: DifficultyLevel,
    scenario_id: str,
    text_style: TextStyle,
) -> TrainingScenario:
    """Isolate, overlimp or fold behind one to three limpers."""
    hand, _ = deal(rng, 0)
    hero_pos = rng.choice(_ISO_POSITIONS)
    limpers = rng.randint(1, 3)
    stack_bb = rng.randint(*_ISO_STACK_BB[difficulty])
    stack = stack_bb * BB
    pot = BB + BB // 2 + BB * limpers

    cat = classify_hand(hand)
    in_position = hero_pos in (Position.CO, Position.BTN)
    iso_bb = iso_raise_bb(limpers)

    if cat in (HandCategory.PREMIUM, HandCategory.STRONG):
        correct = "C"
    elif cat == HandCategory.PLAYABLE:
        correct = "C" if in_position else "B"
    else:
        correct = "A"

    if cat == HandCategory.PLAYABLE:
        branch_key = f"Playable:{'IP' if in_position else 'OOP'}"
    else:
        branch_key = cat.label

    hs, pos_name, cat_name = hand_str(hand), hero_pos.display_name, cat.value
    limper_word = "player" if limpers == 1 else "players"
    where = "in position" if in_position else "out of position"
    question = styled(
        text_style,
        f"{limpers} {limper_word} just called the big blind (limped). You have {hs} "
        f"in the {pos_name} seat with {stack_bb} big blinds. What do you do?",
        f"{limpers} limper{'s' if limpers > 1 else ''} to you in {pos_name} ({where}). "
        f"You hold {hs} ({cat_name}), {stack_bb} BB effective. Pot is {pot} chips. "
        f"Your action?",
    )

    if correct == "B":
        call_simple = f"Right. {hs} plays well cheaply, but raising from the {pos_name} seat is risky."
        call_tech = (f"Correct. Out of position a {cat_name} hand realises its equity "
                     f"best by overlimping; an iso-raise gets called and played against OOP.")
    elif correct == "A":
        call_simple = f"Calling with {hs} just adds chips to a pot you rarely win. Fold."
        call_tech = (f"Overlimping a {cat_name} hand builds a multiway pot where it is "
                     f"dominated and rarely makes the best hand.")
    else:
        call_simple = f"Calling is too passive with {hs}. Raise and make the limpers pay."
        call_tech = (f"Overlimping {hs} wastes its edge: limpers have capped ranges and "
                     f"an iso-raise wins the pot outright or plays heads-up with initiative.")

    answers = [
        answer(
            "A", "Fold", correct, text_style,
            f"Right. {hs} isn't good enough to get involved, even against limpers."
            if correct == "A" else
            f"Folding {hs} is too tight when the limpers have shown weakness.",
            f"Correct. A {cat_name} hand has no edge against limping ranges once "
            f"the blinds are still to act."
            if correct == "A" else
            f"Folding {hs} ({cat_name}) passes on a profitable spot against weak, "
            f"capped limping ranges.",
        ),
        answer("B", "Call", correct, text_style, call_simple, call_tech),
        answer(
            "C", f"Raise to {iso_bb} BB", correct, text_style,
            f"Right. Raise to {iso_bb * BB} chips with {hs}. You want to play "
            f"against the limper alone, with the lead."
            if correct == "C" else
            f"Raising with {hs} builds a pot you'll often lose. Don't.",
            f"Correct. Iso to {iso_bb} BB ({iso_bb * BB} chips) with {hs} ({cat_name}) "
            f"{where}: you isolate a weak range and keep the initiative."
            if correct == "C" else
            f"Iso-raising a {cat_name} hand {where} bloats a pot you will play "
            f"without an edge.",
        ),
    ]
    players = heads_up(hero_pos, Position.UTG, stack, stack)
    return scenario(
        scenario_id, TrainingTopic.ANTI_LIMPER_ISOLATION, branch_key, GameType.CASH_GAME,
        hero_pos, hand, [], players, pot, BB, question, answers,
    )


# ---------------------------------------------------------------------------
# Squeeze play (SQ)
# ---------------------------------------------------------------------------

def _roll_raise_and_stack(rng: random.Random, difficulty: DifficultyLevel):
    """Opening size and stack in BB, shared by squeeze and BB defense."""
    if difficulty == DifficultyLevel.BEGINNER:
        return 3, 100
    if difficulty == DifficultyLevel.INTERMEDIATE:
        return rng.randint(2, 4), rng.randint(60, 120)
    return rng.randint(2, 5), rng.randint(25, 150)


def generate_squeeze(
    rng: random.Random,
    difficulty: DifficultyLevel,
    scenario_id: str,
    text_style: TextStyle,
) -> TrainingScenario:
    """Squeeze, call or fold on the button after an open and one or more calls."""
    hand, _ = deal(rng, 0)
    if difficulty == DifficultyLevel.BEGINNER:
        callers = 1
    elif difficulty == DifficultyLevel.INTERMEDIATE:
        callers = rng.randint(1, 2)
    else:
        callers = rng.randint(1, 3)
    open_bb, stack_bb = _roll_raise_and_stack(rng, difficulty)

    pot_bb = open_bb * (1 + callers) + 1
    squeeze_bb = open_bb * 3 + callers * open_bb
    pot, stack, squeeze = pot_bb * BB, stack_bb * BB, squeeze_bb * BB

    cat = classify_hand(hand)
    strength = squeeze_strength(cat)
    correct, branch_key = {
        SqueezeStrength.PREMIUM: ("C", "Premium:Squeeze"),
        SqueezeStrength.SPECULATIVE: ("B", "Speculative:Call"),
        SqueezeStrength.WEAK: ("A", "Weak:Fold"),
    }[strength]

    hs = hand_str(hand)
    caller_text = "one player called" if callers == 1 else f"{callers} players called"
    question = styled(
        text_style,
        f"A player in early position raised to {open_bb} big blinds and {caller_text}. "
        f"You have {hs} on the Button with {stack_bb} big blinds. What do you do?",
        f"UTG opens {open_bb} BB, {callers} cold-call{'s' if callers > 1 else ''}. "
        f"You hold {hs} ({cat.value}) on the BTN, {stack_bb} BB effective, pot "
        f"{pot_bb} BB. Squeeze, flat or fold?",
    )
    answers = [
        answer(
            "A", "Fold", correct, text_style,
            f"Right. {hs} is too weak to play against a raise and callers."
            if correct == "A" else
            f"Folding {hs} here misses a good chance to win a big pot.",
            f"Correct. {hs} has neither the raw equity to squeeze nor the "
            f"playability to flat into a multiway pot."
            if correct == "A" else
            f"Folding {hs} ({cat.value}) gives up a spot where the dead money "
            f"from {callers} caller{'s' if callers > 1 else ''} makes continuing profitable.",
        ),
        answer(
            "B", f"Call ({open_bb} BB)", correct, text_style,
            f"Right. {hs} can hit a big hand after the flop, and calling keeps it cheap."
            if correct == "B" else
            (f"Just calling lets everyone see a cheap flop. {hs} is strong enough to re-raise."
             if correct == "C" else
             f"Calling with {hs} puts chips into a crowded pot with a weak hand."),
            f"Correct. {hs} is a speculative hand with good implied odds in a "
            f"multiway pot and position on the field."
            if correct == "B" else
            (f"Flatting {hs} under-realises a premium; squeezing isolates and "
             f"charges dominated calling ranges."
             if correct == "C" else
             f"Flatting {hs} multiway plays a reverse-implied-odds hand out of "
             f"its depth."),
        ),
        answer(
            "C", f"Squeeze to {squeeze} chips ({squeeze_bb} BB)", correct, text_style,
            f"Right. Re-raise big with {hs}. The raiser and callers will often fold, "
            f"and when they call you have the better hand."
            if correct == "C" else
            f"Re-raising {hs} into several players is a costly bluff. Don't.",
            f"Correct. Squeeze to {squeeze_bb} BB (3x plus one open per caller). "
            f"The caller{'s' if callers > 1 else ''} capped their range and {hs} "
            f"dominates what continues."
            if correct == "C" else
            f"A {squeeze_bb} BB squeeze with {hs} ({cat.value}) is a bluff that is "
            f"only called by better; the dead money doesn't cover it.",
        ),
    ]
    players = heads_up(Position.BTN, Position.UTG, stack, stack)
    return scenario(
        scenario_id, TrainingTopic.SQUEEZE_PLAY, branch_key, GameType.CASH_GAME,
        Position.BTN, hand, [], players, pot, open_bb * BB, question, answers,
    )


# ---------------------------------------------------------------------------
# Big blind defense (BD)
# ---------------------------------------------------------------------------

_RAISER_POSITIONS = (Position.UTG, Position.CO, Position.BTN)


def generate_bb_defense(
    rng: random.Random,
    difficulty: DifficultyLevel,
    scenario_id: str,
    text_style: TextStyle,
) -> TrainingScenario:
    """3-bet, call or fold from the big blind against a single raise."""
    hand, _ = deal(rng, 0)
    villain_pos = rng.choice(_RAISER_POSITIONS)
    raise_bb, stack_bb = _roll_raise_and_stack(rng, difficulty)

    pot_bb = raise_bb + 1
    three_bet_bb = raise_bb * 3 + 1
    pot, stack, three_bet = pot_bb * BB, stack_bb * BB, three_bet_bb * BB

    cat = classify_hand(hand)
    strength = defense_strength(cat)
    correct, branch_key = {
        DefenseStrength.STRONG: ("C", "Strong:ThreeBet"),
        DefenseStrength.PLAYABLE: ("B", "Playable:Call"),
        DefenseStrength.WEAK: ("A", "Weak:Fold"),
    }[strength]

    hs, villain_name = hand_str(hand), villain_pos.display_name
    to_call = raise_bb - 1
    pot_odds_pct = round_half_up(to_call / (pot_bb + to_call) * 100)
    question = styled(
        text_style,
        f"You are in the Big Blind with {hs} and {stack_bb} big blinds. The {villain_name} "
        f"raised to {raise_bb} big blinds and everyone else folded. What do you do?",
        f"{villain_name} opens {raise_bb} BB, folded to you in the BB with {hs} "
        f"({cat.value}), {stack_bb} BB effective. You need {to_call} BB to call into "
        f"{pot_bb} BB (~{pot_odds_pct}% equity). Your action?",
    )
    answers = [
        answer(
            "A", "Fold", correct, text_style,
            f"Right. Even with the discount for already paying the big blind, {hs} "
            f"is too weak."
            if correct == "A" else
            f"Folding {hs} is too tight. You already have a big blind in the pot.",
            f"Correct. {hs} is trash against a {villain_name} open; even ~{pot_odds_pct}% "
            f"required equity is more than it realises out of position."
            if correct == "A" else
            f"Overfolding the BB. At ~{pot_odds_pct}% required equity {hs} "
            f"({cat.value}) is a clear continue.",
        ),
        answer(
            "B", f"Call ({raise_bb} BB)", correct, text_style,
            f"Right. You already paid part of the bet, so calling with {hs} is cheap "
            f"and you can see the flop."
            if correct == "B" else
            (f"Just calling is too passive. {hs} is strong enough to re-raise."
             if correct == "C" else
             f"Calling with {hs} costs chips you'll usually lose after the flop."),
            f"Correct. The BB discount gives {hs} the price to defend; it plays "
            f"well enough postflop to realise its equity."
            if correct == "B" else
            (f"Flatting {hs} misses value; a 3-bet to {three_bet_bb} BB is called "
             f"by worse and denies equity."
             if correct == "C" else
             f"Even at a discount {hs} under-realises too much equity out of "
             f"position to defend."),
        ),
        answer(
            "C", f"3-bet to {three_bet} chips ({three_bet_bb} BB)", correct, text_style,
            f"Right. {hs} is strong. Re-raise and make them pay to see a flop."
            if correct == "C" else
            f"Re-raising with {hs} puts too many chips in with a hand that "
            f"isn't good enough.",
            f"Correct. 3-bet to {three_bet_bb} BB (3x plus one for being out of "
            f"position). {hs} is well ahead of a {villain_name} opening range."
            if correct == "C" else
            f"3-betting {hs} ({cat.value}) turns a defendable or foldable hand "
            f"into a bluff against a range that continues with better.",
        ),
    ]
    players = heads_up(Position.BB, villain_pos, stack, stack)
    return scenario(
        scenario_id, TrainingTopic.BIG_BLIND_DEFENSE, branch_key, GameType.CASH_GAME,
        Position.BB, hand, [], players, pot, raise_bb * BB, question, answers,
    )
