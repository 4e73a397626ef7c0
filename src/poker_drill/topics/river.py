"""River drills: bluffing, value betting and bluff-catching.

All three deal a full five-card board and seat hero on the button against
the big blind with equal stacks.

Draw orders: shuffle, deal 7, pot / stack. Bluff spots repeat the shuffle and
deal until hero holds no made hand.
"""

import random

from poker_drill.engine.evaluator import (
    BluffType, CallerStrength, ValueStrength, classify_bluff_type,
    classify_caller_strength, classify_value_strength, required_fold_frequency,
)
from poker_drill.engine.helpers import (
    BB, answer, board_str, deal, hand_str, heads_up, pct_of, round_half_up,
    scenario, styled,
)
from poker_drill.models import (
    DifficultyLevel, GameType, Position, TextStyle, TrainingScenario, TrainingTopic,
)


def _roll_river_depths(rng: random.Random, difficulty: DifficultyLevel, table):
    pot_range, stack = table[difficulty]
    pot_bb = rng.randint(*pot_range)
    stack_bb = stack if isinstance(stack, int) else rng.randint(*stack)
    return pot_bb, stack_bb


def _river_scenario(scenario_id, topic, branch_key, hand, board, stack, pot, bet,
                    question, answers):
    players = heads_up(Position.BTN, Position.BB, stack, stack)
    return scenario(
        scenario_id, topic, branch_key, GameType.CASH_GAME, Position.BTN,
        hand, board, players, pot, bet, question, answers,
    )


# ---------------------------------------------------------------------------
# Bluff spot (BL)
# ---------------------------------------------------------------------------

_BLUFF_DEPTHS = {
    DifficultyLevel.BEGINNER: ((10, 16), 50),
    DifficultyLevel.INTERMEDIATE: ((8, 24), (30, 80)),
    DifficultyLevel.ADVANCED: ((6, 40), (15, 150)),
}


def generate_bluff(
    rng: random.Random,
    difficulty: DifficultyLevel,
    scenario_id: str,
    text_style: TextStyle,
) -> TrainingScenario:
    """Bluff or give up on the river with a hand that has no showdown value.

    Capped ranges always give up. Missed draws and bricked overcards bluff
    large when the stack-to-pot ratio is 2 or more, otherwise give up.
    """
    hand, board = deal(rng, 5)
    bluff_type = classify_bluff_type(hand, board)
    while bluff_type is None:
        hand, board = deal(rng, 5)
        bluff_type = classify_bluff_type(hand, board)

    pot_bb, stack_bb = _roll_river_depths(rng, difficulty, _BLUFF_DEPTHS)
    pot, stack = pot_bb * BB, stack_bb * BB
    small, large, shove = pct_of(pot, 0.40), pct_of(pot, 0.75), stack
    spr = stack / pot

    low_spr = spr < 2.0
    if bluff_type == BluffType.CAPPED_RANGE:
        correct, branch_key = "A", "CappedRange"
    else:
        correct = "A" if low_spr else "C"
        branch_key = f"{bluff_type.value}:{'LowSPR' if low_spr else 'HighSPR'}"

    hs, bs = hand_str(hand), board_str(board)
    small_fold_pct = round_half_up(required_fold_frequency(small, pot) * 100)
    large_fold_pct = round_half_up(required_fold_frequency(large, pot) * 100)
    story = {
        BluffType.MISSED_FLUSH_DRAW: "Your flush draw missed",
        BluffType.OVERCARD_BRICK: "Your two high cards never paired",
        BluffType.CAPPED_RANGE: "You checked earlier and have nothing",
    }[bluff_type]
    question = styled(
        text_style,
        f"River. The board is {bs} and you have {hs}. {story}. There are {pot} "
        f"chips in the pot and you have {stack} chips left. Your opponent checks to "
        f"you. Do you bluff?",
        f"BTN vs BB, river {bs}. You hold {hs}: {bluff_type.description}. Pot "
        f"{pot_bb} BB, {stack_bb} BB behind (SPR {spr:.1f}). BB checks. Choose your line.",
    )

    if bluff_type == BluffType.CAPPED_RANGE:
        check_simple = "Right. Your earlier checks told your opponent you're weak. A bluff now won't be believed."
        check_tech = ("Correct. Your range is capped after checking back; BB can call "
                      "down lightly, so a bluff has no credible value hands behind it.")
        large_simple = "A big bluff here isn't believable after you checked earlier."
        large_tech = "A capped range cannot represent the nuts; large bluffs get picked off."
    elif low_spr:
        check_simple = "Right. You have too few chips behind for a bluff to scare your opponent."
        check_tech = (f"Correct. At SPR {spr:.1f} a bluff risks most of your stack for "
                      f"limited fold equity; BB is priced into calling.")
        large_simple = "With so few chips left, a big bluff won't make your opponent fold."
        large_tech = f"At SPR {spr:.1f} there is not enough behind to apply real pressure."
    else:
        check_simple = f"Giving up wastes a good bluffing hand. {hs} can't win unless you bet."
        check_tech = (f"Checking a {bluff_type.description} surrenders the pot; it has "
                      f"zero showdown value and blocks nothing you want to call.")
        large_simple = (f"Right. Bet big. Your story is believable and you have chips to "
                        f"back it up. It only has to work {large_fold_pct}% of the time.")
        large_tech = (f"Correct. A 75% bluff ({large}) needs {large_fold_pct}% folds; "
                      f"with a {bluff_type.description} and SPR {spr:.1f} the polarised "
                      f"sizing is credible.")

    answers = [
        answer("A", "Check", correct, text_style, check_simple, check_tech),
        answer(
            "B", f"Bet small ({small} chips ~40%)", correct, text_style,
            "A small bluff is too easy to call. If you bluff, make it count.",
            f"A 40% bluff ({small}) needs only {small_fold_pct}% folds but BB calls "
            f"almost any pair at that price.",
        ),
        answer("C", f"Bet large ({large} chips ~75%)", correct, text_style,
               large_simple, large_tech),
        answer(
            "D", f"All-in ({shove} chips)", correct, text_style,
            "Risking all your chips on a bluff is too much here.",
            f"Shoving {shove} chips risks {spr:.1f}x the pot to win it; the required "
            f"fold frequency is far above what BB will give you.",
        ),
    ]
    return _river_scenario(
        scenario_id, TrainingTopic.BLUFF_SPOT, branch_key, hand, board, stack, pot, 0,
        question, answers,
    )


# ---------------------------------------------------------------------------
# River value bet (RV)
# ---------------------------------------------------------------------------

_VALUE_DEPTHS = {
    DifficultyLevel.BEGINNER: ((10, 18), 60),
    DifficultyLevel.INTERMEDIATE: ((8, 28), (30, 80)),
    DifficultyLevel.ADVANCED: ((6, 40), (15, 150)),
}


def generate_value_bet(
    rng: random.Random,
    difficulty: DifficultyLevel,
    scenario_id: str,
    text_style: TextStyle,
) -> TrainingScenario:
    """Size a river value bet, or check a hand too thin to bet."""
    hand, board = deal(rng, 5)
    pot_bb, stack_bb = _roll_river_depths(rng, difficulty, _VALUE_DEPTHS)
    pot, stack = pot_bb * BB, stack_bb * BB
    small, large, over = pct_of(pot, 0.33), pct_of(pot, 0.75), pct_of(pot, 1.25)

    strength = classify_value_strength(hand, board)
    correct, branch_key = {
        ValueStrength.NUTS: ("D", "Nuts:Overbet"),
        ValueStrength.STRONG: ("C", "Strong:LargeBet"),
        ValueStrength.MEDIUM: ("A", "Medium:Check"),
        ValueStrength.WEAK: ("A", "Weak:Check"),
    }[strength]

    hs, bs = hand_str(hand), board_str(board)
    question = styled(
        text_style,
        f"River. The board is {bs} and you have {hs}. Pot: {pot} chips, your stack: "
        f"{stack} chips. Your opponent checks. How much do you bet, if anything?",
        f"BTN vs BB, river {bs}. You hold {hs}: {strength.description}. Pot {pot_bb} BB, "
        f"{stack_bb} BB behind. BB checks. Pick a sizing.",
    )
    if strength == ValueStrength.WEAK:
        check_simple = (f"Right. {hs} has nothing, so no worse hand will call a bet. "
                        f"Check and take the free showdown.")
        check_tech = ("Correct. High card cannot bet for value; only better hands call, "
                      "so check and see a showdown.")
    elif strength == ValueStrength.MEDIUM:
        check_simple = f"Right. {hs} can win at showdown but is not strong enough to bet. Check."
        check_tech = ("Correct. A medium hand is a bluff-catcher here; betting only gets "
                      "called by better and folds out worse.")
    else:
        check_simple = f"Checking {hs} leaves money behind. Bet and get paid."
        check_tech = f"Checking a {strength.description} misses the value this river offers."

    answers = [
        answer("A", "Check", correct, text_style, check_simple, check_tech),
        answer(
            "B", f"Bet small ({small} chips ~33%)", correct, text_style,
            f"A small bet is the wrong choice with {hs}: it's either too little for a "
            f"great hand or an unnecessary risk for an okay one.",
            f"A 33% bet ({small}) neither maximises value with strong holdings nor "
            f"protects a showdown hand; it is dominated by the other options.",
        ),
        answer(
            "C", f"Bet large ({large} chips ~75%)", correct, text_style,
            f"Right. {hs} is strong. Bet big to get paid by worse hands."
            if correct == "C" else
            ("A big bet is good, but your hand is so strong you can bet even more."
             if correct == "D" else
             f"Betting big with {hs} only gets called by hands that beat you."),
            f"Correct. A 75% bet ({large}) targets BB's top pairs with a strong hand."
            if correct == "C" else
            ("75% undersizes the nuts; an overbet extracts more from BB's strong bluff-catchers."
             if correct == "D" else
             f"A large bet with a {strength.description} turns it into a bluff."),
        ),
        answer(
            "D", f"Overbet ({over} chips ~125%)", correct, text_style,
            f"Right. {hs} is about as good as it gets. Bet more than the pot."
            if correct == "D" else
            f"Betting more than the pot with {hs} risks too much. Your hand isn't strong enough.",
            f"Correct. With the nuts, a 125% overbet ({over}) maximises EV against "
            f"BB's capped range."
            if correct == "D" else
            f"Overbetting a {strength.description} isolates you against the hands that beat you.",
        ),
    ]
    return _river_scenario(
        scenario_id, TrainingTopic.RIVER_VALUE_BET, branch_key, hand, board, stack, pot, 0,
        question, answers,
    )


# ---------------------------------------------------------------------------
# River call or fold (RF)
# ---------------------------------------------------------------------------

_CALL_DEPTHS = {
    DifficultyLevel.BEGINNER: ((10, 20), 80),
    DifficultyLevel.INTERMEDIATE: ((8, 28), (30, 100)),
    DifficultyLevel.ADVANCED: ((6, 40), (15, 150)),
}


def generate_call_or_fold(
    rng: random.Random,
    difficulty: DifficultyLevel,
    scenario_id: str,
    text_style: TextStyle,
) -> TrainingScenario:
    """Fold, call or raise facing a river bet, sized to match hero's holding."""
    hand, board = deal(rng, 5)
    pot_bb, stack_bb = _roll_river_depths(rng, difficulty, _CALL_DEPTHS)
    pot, stack = pot_bb * BB, stack_bb * BB

    strength = classify_caller_strength(hand, board)
    if strength == CallerStrength.STRONG:
        bet, size_word = pct_of(pot, 0.33), "small"
        correct, branch_key = "C", "Strong:SmallBet:Raise"
    elif strength == CallerStrength.MARGINAL:
        bet, size_word = pct_of(pot, 0.67), "standard"
        correct, branch_key = "B", "Marginal:StdBet:Call"
    else:
        bet, size_word = pot, "pot-sized"
        correct, branch_key = "A", "Weak:LargeBet:Fold"
    raise_to = round_half_up(bet * 2.5)
    equity_pct = round_half_up(bet / (pot + 2 * bet) * 100)

    hs, bs = hand_str(hand), board_str(board)
    question = styled(
        text_style,
        f"River. The board is {bs} and you have {hs}. There were {pot} chips in the pot "
        f"and your opponent bets {bet} chips. What do you do?",
        f"BTN vs BB, river {bs}. You hold {hs}: {strength.description}. BB leads "
        f"{bet} into {pot} ({size_word}); calling needs {equity_pct}% equity. Your action?",
    )
    answers = [
        answer(
            "A", "Fold", correct, text_style,
            f"Right. A big bet like this is usually a strong hand, and {hs} can't beat it."
            if correct == "A" else
            f"Folding {hs} is too cautious. Your hand is good enough to continue.",
            f"Correct. A pot-sized lead is weighted to value; a {strength.description} "
            f"wins far less than the {equity_pct}% you need."
            if correct == "A" else
            f"Folding a {strength.description} to a {size_word} bet overfolds badly; "
            f"you only need {equity_pct}%.",
        ),
        answer(
            "B", f"Call ({bet} chips)", correct, text_style,
            f"Right. {hs} isn't great, but the bet is small enough that calling is worth it."
            if correct == "B" else
            ("Just calling misses a chance to win more. Raise."
             if correct == "C" else
             f"Calling with {hs} pays off a strong hand most of the time."),
            f"Correct. A {size_word} bet gives a bluff-catcher the price: you need "
            f"{equity_pct}% and beat enough of BB's bluffs."
            if correct == "B" else
            (f"Flatting a strong hand against a small bet misses value; raise to {raise_to}."
             if correct == "C" else
             f"A {strength.description} does not reach {equity_pct}% against a "
             f"pot-sized range."),
        ),
        answer(
            "C", f"Raise to {raise_to} chips", correct, text_style,
            f"Right. {hs} is strong and the bet was small. Raise to win more."
            if correct == "C" else
            f"Raising with {hs} here is too risky. You'd only get called by better.",
            f"Correct. Small river leads are often thin value or blocks; raising to "
            f"{raise_to} gets paid by worse made hands."
            if correct == "C" else
            f"Raising a {strength.description} turns it into a bluff against a range "
            f"that won't fold better.",
        ),
    ]
    return _river_scenario(
        scenario_id, TrainingTopic.RIVER_CALL_OR_FOLD, branch_key, hand, board, stack, pot,
        bet, question, answers,
    )
