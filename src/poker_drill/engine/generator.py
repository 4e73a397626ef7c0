"""Dispatch a training request to exactly one topic generator."""

import logging
import random
import secrets
from typing import Callable, Dict

from poker_drill.models import (
    DifficultyLevel, Street, TextStyle, TopicSelector, TrainingRequest,
    TrainingScenario, TrainingTopic,
)
from poker_drill.topics import flop, preflop, river, turn

logger = logging.getLogger(__name__)

Generator = Callable[[random.Random, DifficultyLevel, str, TextStyle], TrainingScenario]

GENERATORS: Dict[TrainingTopic, Generator] = {
    TrainingTopic.PREFLOP_DECISION: preflop.generate_preflop_decision,
    TrainingTopic.ICM_AND_TOURNAMENT_DECISION: preflop.generate_icm,
    TrainingTopic.ANTI_LIMPER_ISOLATION: preflop.generate_anti_limper,
    TrainingTopic.SQUEEZE_PLAY: preflop.generate_squeeze,
    TrainingTopic.BIG_BLIND_DEFENSE: preflop.generate_bb_defense,
    TrainingTopic.POSTFLOP_CONTINUATION_BET: flop.generate_cbet,
    TrainingTopic.POT_ODDS_AND_EQUITY: flop.generate_pot_odds,
    TrainingTopic.CHECK_RAISE_SPOT: flop.generate_check_raise,
    TrainingTopic.SEMI_BLUFF_DECISION: flop.generate_semi_bluff,
    TrainingTopic.THREE_BET_POT_CBET: flop.generate_3bet_cbet,
    TrainingTopic.TURN_BARREL_DECISION: turn.generate_barrel,
    TrainingTopic.TURN_PROBE_BET: turn.generate_probe,
    TrainingTopic.DELAYED_CBET: turn.generate_delayed_cbet,
    TrainingTopic.BLUFF_SPOT: river.generate_bluff,
    TrainingTopic.RIVER_VALUE_BET: river.generate_value_bet,
    TrainingTopic.RIVER_CALL_OR_FOLD: river.generate_call_or_fold,
}

assert set(GENERATORS) == set(TrainingTopic), "every topic needs a generator"


def make_rng(seed=None) -> random.Random:
    """Seeded RNG, or one seeded from the OS entropy source."""
    if seed is None:
        seed = secrets.randbits(64)
    return random.Random(seed)


def resolve_topic(selector: TopicSelector, rng: random.Random) -> TrainingTopic:
    """A topic resolves to itself; a street draws one of its topics."""
    if isinstance(selector, Street):
        return rng.choice(selector.topics)
    return selector


def make_scenario_id(topic: TrainingTopic, rng: random.Random) -> str:
    """Topic prefix plus 8 uppercase hex digits, e.g. 'PF-3F2A9BD1'."""
    return f"{topic.prefix}-{rng.getrandbits(32):08X}"


def generate_training(request: TrainingRequest) -> TrainingScenario:
    """Generate one scenario.

    The same request with the same seed always produces the same scenario.

    Args:
        request: Topic selector, difficulty, optional seed and text style.

    Returns:
        The generated scenario.
    """
    rng = make_rng(request.rng_seed)
    topic = resolve_topic(request.topic, rng)
    scenario_id = make_scenario_id(topic, rng)
    result = GENERATORS[topic](rng, request.difficulty, scenario_id, request.text_style)
    logger.debug(
        "Generated %s topic=%s branch=%s seed=%s",
        result.scenario_id, topic.value, result.branch_key, request.rng_seed,
    )
    return result
