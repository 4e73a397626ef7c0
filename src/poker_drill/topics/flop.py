"""Flop drills: c-betting, pot odds, check-raising, semi-bluffing, 3-bet pot c-bets.

Every topic deals hero two cards and a three-card flop from one shuffled
deck before drawing anything else.

Draw orders:

    c-bet              shuffle, deal 5, stack / pot, hero BTN-or-CO coin
    pot odds           shuffle, deal 5, pot, bet fraction
    check-raise        shuffle, deal 5, stack / pot, villain bet %
    semi-bluff         shuffle, deal 5, stack / pot, villain bet %, position coin
    3-bet pot c-bet    shuffle, deal 5, pot / stack
"""

import random

from poker_drill.engine.evaluator import (
    BoardFavour, BoardTexture, DrawType, HandInteraction, MadeStrength,
    board_texture, classify_board_favour, classify_draw,
    classify_hand_interaction, classify_turn_strength, draw_equity_flop,
    is_combo_draw, required_equity,
)
from poker_drill.engine.helpers import (
    BB, answer, board_str, deal, hand_str, heads_up, pct_of, round_half_up,
    scenario, styled,
)
from poker_drill.models import (
    DifficultyLevel, GameType, Position, TextStyle, TrainingScenario, TrainingTopic,
)


def _roll_depths(rng: random.Random, difficulty: DifficultyLevel, table):
    """Roll both depths of a (first, second) table entry; plain ints are fixed."""
    first, second = table[difficulty]
    first_bb = first if isinstance(first, int) else rng.randint(*first)
    second_bb = second if isinstance(second, int) else rng.randint(*second)
    return first_bb, second_bb


# ---------------------------------------------------------------------------
# Postflop continuation bet (CB)
# ---------------------------------------------------------------------------

_CBET_DEPTHS = {
    DifficultyLevel.BEGINNER: (100, (8, 14)),
    DifficultyLevel.INTERMEDIATE: ((60, 130), (6, 20)),
    DifficultyLevel.ADVANCED: ((20, 200), (4, 30)),
}


def generate_cbet(
    rng: random.Random,
    difficulty: DifficultyLevel,
    scenario_id: str,
    text_style: TextStyle,
) -> TrainingScenario:
    """Pick a c-bet size (or check) as the preflop raiser in position.

    Range advantage is simplified to: hero raised from late position and
    the flop's lowest card is 8 or below.
    """
    hand, board = deal(rng, 3)
    stack_bb, pot_bb = _roll_depths(rng, difficulty, _CBET_DEPTHS)
    hero_pos = Position.BTN if rng.random() < 0.5 else Position.CO
    pot, stack = pot_bb * BB, stack_bb * BB

    texture = board_texture(board)
    range_adv = hero_pos.is_late and min(int(c.rank) for c in board) <= 8

    if texture == BoardTexture.DRY:
        correct = "B" if range_adv else "A"
        branch_key = "Dry:RangeAdv" if range_adv else "Dry:NoRangeAdv"
    else:
        correct = "C"
        branch_key = texture.label

    hs, bs, pos_name = hand_str(hand), board_str(board), hero_pos.display_name
    small, large, over = pot // 3, pot * 3 // 4, pot * 5 // 4
    question = styled(
        text_style,
        f"You raised before the flop from the {pos_name} seat and the Big Blind called. "
        f"You have {hs}. The flop is {bs}. The pot has {pot} chips and you have "
        f"{stack} chips left. Your opponent checks. What do you do?",
        f"You open {pos_name}, BB calls. {hs} on {bs} ({texture.value} board). "
        f"Pot {pot_bb} BB, {stack_bb} BB behind (SPR {stack / pot:.1f}). BB checks. "
        f"Choose your c-bet strategy.",
    )

    if texture == BoardTexture.DRY and range_adv:
        check_simple = "Checking wastes your edge. This board favours you, so a small bet wins often."
        check_tech = (f"Checking forfeits your range advantage on a dry {bs}; a high-frequency "
                      f"small c-bet prints against BB's capped range.")
    elif texture == BoardTexture.DRY:
        check_simple = "Right. This board doesn't favour you, so check and keep the pot small."
        check_tech = (f"Correct. Without range advantage on {bs} the BB connects as often as "
                      f"you do; checking protects your checking range.")
    else:
        check_simple = "Checking gives your opponent a free card on a board full of draws."
        check_tech = (f"Checking a {texture.value} board hands BB free equity realisation; "
                      f"you need to charge draws.")

    answers = [
        answer("A", "Check", correct, text_style, check_simple, check_tech),
        answer(
            "B", f"Bet small ({small} chips ~33%)", correct, text_style,
            "Right. A small bet works great here: the board favours you and your "
            "opponent will fold a lot."
            if correct == "B" else
            ("A small bet doesn't charge the many draws on this board enough."
             if correct == "C" else
             "Betting here isn't needed. The board doesn't favour you."),
            f"Correct. Dry board plus range advantage: a 1/3-pot bet ({small} chips) "
            f"achieves the same folds as a large bet at a lower price."
            if correct == "B" else
            (f"1/3 pot lays draws on a {texture.value} board a good price; size up."
             if correct == "C" else
             f"No range advantage on {bs}; a small bet gets check-raised by a range "
             f"that hits this flop harder."),
        ),
        answer(
            "C", f"Bet large ({large} chips ~75%)", correct, text_style,
            f"Right. There are lots of possible draws on {bs}. Bet big so they pay to "
            f"chase."
            if correct == "C" else
            "A big bet is unnecessary on this quiet board. It risks chips for no reason.",
            f"Correct. On a {texture.value} board a 3/4-pot bet ({large} chips) denies "
            f"equity and gets value from pairs plus draws."
            if correct == "C" else
            f"A 3/4-pot bet on a dry board only gets called by hands that beat you; "
            f"it over-invests where a small bet or check is better.",
        ),
        answer(
            "D", f"Overbet ({over} chips ~125%)", correct, text_style,
            "Betting more than the pot is too much here. It only gets called by strong hands.",
            f"Overbetting {over} chips polarises you on a flop where your range is "
            f"not nutted enough to support it.",
        ),
    ]
    players = heads_up(hero_pos, Position.BB, stack, stack)
    return scenario(
        scenario_id, TrainingTopic.POSTFLOP_CONTINUATION_BET, branch_key,
        GameType.CASH_GAME, hero_pos, hand, board, players, pot, 0, question, answers,
    )


# ---------------------------------------------------------------------------
# Pot odds and equity (PO)
# ---------------------------------------------------------------------------

def _roll_pot_and_fraction(rng: random.Random, difficulty: DifficultyLevel):
    if difficulty == DifficultyLevel.BEGINNER:
        return rng.randint(8, 12), 0.50
    if difficulty == DifficultyLevel.INTERMEDIATE:
        pot_bb = rng.randint(6, 20)
        return pot_bb, 0.33 + rng.random() * (1.0 - 0.33)
    pot_bb = rng.randint(4, 30)
    return pot_bb, 0.25 + rng.random() * (1.5 - 0.25)


def generate_pot_odds(
    rng: random.Random,
    difficulty: DifficultyLevel,
    scenario_id: str,
    text_style: TextStyle,
) -> TrainingScenario:
    """Call or fold a flop bet by comparing draw equity to the price."""
    hand, board = deal(rng, 3)
    pot_bb, fraction = _roll_pot_and_fraction(rng, difficulty)
    pot = pot_bb * BB
    bet = round_half_up(pot * fraction)

    draw = classify_draw(board)
    equity = draw_equity_flop(draw)
    needed = required_equity(bet, pot)
    call = equity >= needed
    correct = "A" if call else "B"
    branch_key = f"{draw.value}:{'Call' if call else 'Fold'}"

    hs, bs = hand_str(hand), board_str(board)
    equity_pct, needed_pct = round_half_up(equity * 100), round_half_up(needed * 100)
    question = styled(
        text_style,
        f"You are in the Big Blind with {hs}. The flop is {bs} and you have a "
        f"{draw.plain_description}. There are {pot} chips in the pot and your opponent "
        f"bets {bet} chips. Do you call or fold?",
        f"BB vs BTN. {hs} on {bs}: {draw.description}. Pot {pot} chips, villain bets "
        f"{bet} ({bet / pot:.0%} pot). You need {needed_pct}% equity; your draw has "
        f"~{equity_pct}% with two cards to come. Call or fold?",
    )
    answers = [
        answer(
            "A", "Call", correct, text_style,
            f"Right. You win about {equity_pct}% of the time and only need "
            f"{needed_pct}% to make calling worth it."
            if call else
            f"Calling costs too much. You only win about {equity_pct}% of the time "
            f"but would need {needed_pct}%.",
            f"Correct. Pot odds: {bet} / ({pot} + {bet}) = {needed_pct}%. The "
            f"{draw.description} holds ~{equity_pct}% over two streets, so calling is +EV."
            if call else
            f"Calling is -EV: you need {needed_pct}% equity but the "
            f"{draw.description} realises only ~{equity_pct}%.",
        ),
        answer(
            "B", "Fold", correct, text_style,
            f"Right. The bet is too big for your draw. You'd need to win "
            f"{needed_pct}% of the time but only win about {equity_pct}%."
            if not call else
            f"Folding gives up a good price. You win about {equity_pct}% of the time, "
            f"more than the {needed_pct}% you need.",
            f"Correct. Required equity {needed_pct}% exceeds the ~{equity_pct}% of a "
            f"{draw.description}; without implied odds this is a fold."
            if not call else
            f"Folding with ~{equity_pct}% equity against a {needed_pct}% price "
            f"gives up a profitable call.",
        ),
    ]
    players = heads_up(Position.BB, Position.BTN, 200, 200)
    return scenario(
        scenario_id, TrainingTopic.POT_ODDS_AND_EQUITY, branch_key, GameType.CASH_GAME,
        Position.BB, hand, board, players, pot, bet, question, answers,
    )


# ---------------------------------------------------------------------------
# Check-raise spot (CR)
# ---------------------------------------------------------------------------

_CHECK_RAISE_DEPTHS = {
    DifficultyLevel.BEGINNER: (100, (8, 14)),
    DifficultyLevel.INTERMEDIATE: ((50, 130), (6, 20)),
    DifficultyLevel.ADVANCED: ((20, 200), (4, 30)),
}


def generate_check_raise(
    rng: random.Random,
    difficulty: DifficultyLevel,
    scenario_id: str,
    text_style: TextStyle,
) -> TrainingScenario:
    """Fold, call or check-raise from the big blind after the button c-bets."""
    hand, board = deal(rng, 3)
    stack_bb, pot_bb = _roll_depths(rng, difficulty, _CHECK_RAISE_DEPTHS)
    bet_pct = rng.randint(50, 70)
    pot, stack = pot_bb * BB, stack_bb * BB
    villain_bet = max(pot * bet_pct // 100, BB)
    raise_to = villain_bet * 5 // 2

    favour = classify_board_favour(board)
    interaction = classify_hand_interaction(hand, board)
    combo = is_combo_draw(hand, board)

    if favour == BoardFavour.BB_FAVORABLE and interaction == HandInteraction.STRONG:
        correct = "C"
    elif interaction == HandInteraction.DRAW and combo:
        correct = "C"
    elif favour == BoardFavour.IP_FAVORABLE and interaction == HandInteraction.WEAK:
        correct = "A"
    else:
        correct = "B"

    if interaction == HandInteraction.DRAW and combo:
        holding = "ComboDraw"
    else:
        holding = interaction.value
    branch_key = f"{favour.value}:{holding}"

    hs, bs = hand_str(hand), board_str(board)
    holding_text = {
        "Strong": "strong hand (pairs the board)",
        "ComboDraw": "combo draw",
        "Draw": "draw",
        "Weak": "weak/air",
    }[holding]
    question = styled(
        text_style,
        f"You are in the Big Blind with {hs} and checked on {bs}. The Button bets "
        f"{villain_bet} chips into {pot}. You have {stack} chips. What do you do?",
        f"BB vs BTN single-raised pot. {hs} on {bs}, a {favour.description} flop; "
        f"you hold a {holding_text}. You check, BTN bets {villain_bet} into {pot} "
        f"({bet_pct}% pot), {stack_bb} BB effective. Your action?",
    )
    answers = [
        answer(
            "A", "Fold", correct, text_style,
            f"Right. {hs} missed this board and it suits your opponent. Let it go."
            if correct == "A" else
            f"Folding {hs} here gives up too easily. You have enough to continue.",
            f"Correct. Air on an {favour.description} board has no equity and no "
            f"credible raising range; fold."
            if correct == "A" else
            f"Overfolding: a {holding_text} on a {favour.description} board is "
            f"too much equity to surrender to a {bet_pct}% c-bet.",
        ),
        answer(
            "B", "Check-call", correct, text_style,
            f"Right. Calling keeps the pot manageable with {hs}."
            if correct == "B" else
            (f"Just calling is too passive. {hs} is good enough to raise."
             if correct == "C" else
             f"Calling with {hs} means paying off with nothing. Fold."),
            f"Correct. A {holding_text} here plays best as a call: it keeps "
            f"BTN's bluffs in and avoids bloating the pot without a clear edge."
            if correct == "B" else
            (f"Flatting under-uses a {holding_text}; the check-raise builds the "
             f"pot and folds out equity."
             if correct == "C" else
             f"Calling with air on an {favour.description} board just burns "
             f"{villain_bet} chips."),
        ),
        answer(
            "C", f"Check-raise to {raise_to} chips (2.5x bet)", correct, text_style,
            f"Right. Raise with {hs}. The board helps you and your opponent will "
            f"often have to fold or pay more."
            if correct == "C" else
            f"Raising with {hs} here is too risky. It puts a lot of chips in without a "
            f"strong enough hand.",
            f"Correct. Check-raise to {raise_to}: your {holding_text} has value and "
            f"equity on a {favour.description} flop."
            if correct == "C" else
            f"A check-raise with a {holding_text} on this flop isolates you against "
            f"stronger continuing hands.",
        ),
    ]
    players = heads_up(Position.BB, Position.BTN, stack, stack)
    return scenario(
        scenario_id, TrainingTopic.CHECK_RAISE_SPOT, branch_key, GameType.CASH_GAME,
        Position.BB, hand, board, players, pot, villain_bet, question, answers,
    )


# ---------------------------------------------------------------------------
# Semi-bluff decision (SB)
# ---------------------------------------------------------------------------

_SEMI_BLUFF_DEPTHS = {
    DifficultyLevel.BEGINNER: (60, (8, 14)),
    DifficultyLevel.INTERMEDIATE: ((35, 120), (6, 20)),
    DifficultyLevel.ADVANCED: ((20, 200), (4, 30)),
}


def generate_semi_bluff(
    rng: random.Random,
    difficulty: DifficultyLevel,
    scenario_id: str,
    text_style: TextStyle,
) -> TrainingScenario:
    """Raise, call or fold a drawing hand facing a flop bet."""
    hand, board = deal(rng, 3)
    stack_bb, pot_bb = _roll_depths(rng, difficulty, _SEMI_BLUFF_DEPTHS)
    bet_pct = rng.randint(50, 75)
    in_position = rng.random() < 0.5
    pot, stack = pot_bb * BB, stack_bb * BB
    villain_bet = max(pot * bet_pct // 100, BB)
    raise_to = villain_bet * 5 // 2

    hero_pos = Position.BTN if in_position else Position.BB
    villain_pos = Position.BB if in_position else Position.CO

    draw = classify_draw(board)
    deep = stack_bb >= 40
    if draw == DrawType.COMBO_DRAW or (draw == DrawType.OESD and deep):
        correct = "C"
    elif draw in (DrawType.FLUSH_DRAW, DrawType.OESD):
        correct = "B"
    else:
        correct = "A"
    if draw == DrawType.OESD:
        branch_key = f"OESD:{'Deep' if deep else 'Short'}"
    else:
        branch_key = draw.value

    hs, bs = hand_str(hand), board_str(board)
    equity_pct = round_half_up(draw_equity_flop(draw) * 100)
    where = "in position" if in_position else "out of position"
    question = styled(
        text_style,
        f"You have {hs} on {bs}, giving you a {draw.plain_description}. Your opponent "
        f"bets {villain_bet} chips into {pot}. You have {stack} chips. What do you do?",
        f"{hero_pos.value} vs {villain_pos.value}, you are {where}. {hs} on {bs}: "
        f"{draw.description} (~{equity_pct}% equity). Villain bets {villain_bet} into "
        f"{pot} ({bet_pct}% pot), {stack_bb} BB effective. Your action?",
    )
    answers = [
        answer(
            "A", "Fold", correct, text_style,
            "Right. Your draw is too weak to keep paying. Fold and move on."
            if correct == "A" else
            "Folding gives up a good draw. You can win this pot in more than one way.",
            f"Correct. A {draw.description} with ~{equity_pct}% equity has neither "
            f"the price to call nor the fold equity to raise."
            if correct == "A" else
            f"Folding a {draw.description} (~{equity_pct}%) against a {bet_pct}% bet "
            f"gives up equity you are being paid to realise.",
        ),
        answer(
            "B", "Call", correct, text_style,
            "Right. Call and see the next card. Your draw is good enough, but not for a raise."
            if correct == "B" else
            ("Just calling is too passive. Raise and win the pot now or hit your draw later."
             if correct == "C" else
             "Calling to chase a weak draw costs more than it wins."),
            f"Correct. The {draw.description} has the equity to call; with "
            f"{stack_bb} BB behind a raise lacks the fold equity to justify it."
            if correct == "B" else
            (f"Flatting misses fold equity: a semi-bluff raise wins now or hits "
             f"~{equity_pct}% later."
             if correct == "C" else
             f"~{equity_pct}% equity is short of the price; calling is -EV."),
        ),
        answer(
            "C", f"Raise to {raise_to} chips", correct, text_style,
            "Right. Raise! Your opponent may fold right now, and if not you can still "
            "hit your draw."
            if correct == "C" else
            "Raising with this draw is too risky. Your hand isn't strong enough yet.",
            f"Correct. Semi-bluff to {raise_to}: fold equity plus ~{equity_pct}% when "
            f"called, {stack_bb} BB deep."
            if correct == "C" else
            f"A semi-bluff raise with a {draw.description} at {stack_bb} BB commits "
            f"too much without enough equity when called.",
        ),
    ]
    players = heads_up(hero_pos, villain_pos, stack, stack)
    return scenario(
        scenario_id, TrainingTopic.SEMI_BLUFF_DECISION, branch_key, GameType.CASH_GAME,
        hero_pos, hand, board, players, pot, villain_bet, question, answers,
    )


# ---------------------------------------------------------------------------
# 3-bet pot c-bet (3B)
# ---------------------------------------------------------------------------

_THREE_BET_DEPTHS = {
    DifficultyLevel.BEGINNER: ((10, 14), 100),
    DifficultyLevel.INTERMEDIATE: ((8, 18), (50, 100)),
    DifficultyLevel.ADVANCED: ((6, 22), (30, 150)),
}


def generate_3bet_cbet(
    rng: random.Random,
    difficulty: DifficultyLevel,
    scenario_id: str,
    text_style: TextStyle,
) -> TrainingScenario:
    """Size a c-bet in a 3-bet pot on the button."""
    hand, board = deal(rng, 3)
    pot_bb, stack_bb = _roll_depths(rng, difficulty, _THREE_BET_DEPTHS)
    pot, stack = pot_bb * BB, stack_bb * BB
    small, large = pct_of(pot, 0.33), pct_of(pot, 0.67)

    dry = board_texture(board) == BoardTexture.DRY
    strong = classify_turn_strength(hand, board) == MadeStrength.STRONG
    texture_key = "Dry" if dry else "Wet"
    if strong:
        correct = "B" if dry else "C"
        branch_key = f"{texture_key}:Strong:{'SmallCbet' if dry else 'LargeCbet'}"
    else:
        correct = "A"
        branch_key = f"{texture_key}:Weak:Check"

    hs, bs = hand_str(hand), board_str(board)
    spr = stack / pot
    strength_word = "strong" if strong else "weak"
    question = styled(
        text_style,
        f"You re-raised before the flop on the Button and the Big Blind called. You "
        f"have {hs} and the flop is {bs}. The pot is {pot} chips and you have {stack} "
        f"left. Your opponent checks. What do you do?",
        f"3-bet pot, BTN vs BB. {hs} ({strength_word} made hand) on {bs} "
        f"({texture_key.lower()} board). Pot {pot_bb} BB, {stack_bb} BB behind, "
        f"SPR {spr:.1f}. BB checks. Your play?",
    )
    answers = [
        answer(
            "A", "Check back", correct, text_style,
            f"Right. {hs} didn't connect well enough. Check and see the next card for free."
            if correct == "A" else
            f"Checking with {hs} wastes a strong hand. Bet to build the pot.",
            f"Correct. With a weak holding at SPR {spr:.1f}, checking back protects "
            f"your range and avoids getting check-raised off your equity."
            if correct == "A" else
            f"Checking a strong hand at low SPR misses value; the 3-bet range "
            f"should be betting here.",
        ),
        answer(
            "B", f"C-bet small ({small} chips ~33%)", correct, text_style,
            f"Right. A small bet with {hs} on this quiet board keeps worse hands in."
            if correct == "B" else
            (f"A small bet lets drawing hands in too cheaply on {bs}."
             if correct == "C" else
             f"Betting {hs} here puts chips in with a hand that won't hold up."),
            f"Correct. Dry board, strong hand: 1/3 pot ({small}) gets value from a "
            f"wide range and sets up stacks at SPR {spr:.1f}."
            if correct == "B" else
            (f"1/3 pot on a wet board gives draws the right price; size up with "
             f"a strong hand."
             if correct == "C" else
             "A weak hand gains nothing from a small c-bet that only gets called by better."),
        ),
        answer(
            "C", f"C-bet large ({large} chips ~67%)", correct, text_style,
            f"Right. There are draws on {bs}, so bet big with {hs} to make them pay."
            if correct == "C" else
            ("A big bet on this quiet board scares off the hands you want to call."
             if correct == "B" else
             f"Betting big with {hs} risks too much with a weak hand."),
            f"Correct. Wet board, strong hand: 2/3 pot ({large}) charges draws and "
            f"builds toward stacks at SPR {spr:.1f}."
            if correct == "C" else
            ("2/3 pot on a dry board folds out the worse hands you want to keep in."
             if correct == "B" else
             "A large c-bet with a weak hand is a bluff into the BB's defending range."),
        ),
    ]
    players = heads_up(Position.BTN, Position.BB, stack, stack)
    return scenario(
        scenario_id, TrainingTopic.THREE_BET_POT_CBET, branch_key, GameType.CASH_GAME,
        Position.BTN, hand, board, players, pot, 0, question, answers,
    )
