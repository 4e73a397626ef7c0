"""Tests for request dispatch, ids and selectors."""

import random
import re

import pytest

from poker_drill.engine.generator import (
    GENERATORS, generate_training, make_rng, make_scenario_id, resolve_topic,
)
from poker_drill.exceptions import InvalidSelectionError
from poker_drill.models import (
    DifficultyLevel, Street, TextStyle, TrainingRequest, TrainingTopic,
    parse_selector,
)

ID_PATTERN = re.compile(r"^[A-Z0-9]{2}-[0-9A-F]{8}$")


class TestDispatch:
    def test_every_topic_has_generator(self):
        assert set(GENERATORS) == set(TrainingTopic)

    def test_prefixes_unique(self):
        prefixes = [t.prefix for t in TrainingTopic]
        assert len(set(prefixes)) == 16
        assert TrainingTopic.PREFLOP_DECISION.prefix == "PF"
        assert TrainingTopic.BLUFF_SPOT.prefix == "BL"

    @pytest.mark.parametrize("topic", list(TrainingTopic))
    def test_scenario_id_format(self, topic):
        s = generate_training(TrainingRequest(topic=topic, rng_seed=5))
        assert ID_PATTERN.match(s.scenario_id)
        assert s.scenario_id.startswith(topic.prefix + "-")

    def test_make_scenario_id(self):
        rng = random.Random(0)
        expected = f"{random.Random(0).getrandbits(32):08X}"
        assert make_scenario_id(TrainingTopic.SQUEEZE_PLAY, rng) == f"SQ-{expected}"

    def test_seed_is_reproducible(self):
        request = TrainingRequest(topic=TrainingTopic.TURN_BARREL_DECISION,
                                  difficulty=DifficultyLevel.ADVANCED, rng_seed=77)
        assert generate_training(request) == generate_training(request)

    def test_different_seeds_differ(self):
        ids = {
            generate_training(TrainingRequest(topic=TrainingTopic.PREFLOP_DECISION,
                                              rng_seed=seed)).scenario_id
            for seed in range(20)
        }
        assert len(ids) == 20

    def test_unseeded(self):
        s = generate_training(TrainingRequest(topic=TrainingTopic.RIVER_VALUE_BET))
        assert ID_PATTERN.match(s.scenario_id)

    def test_make_rng(self):
        assert make_rng(3).random() == random.Random(3).random()
        assert isinstance(make_rng(), random.Random)


class TestSelectors:
    @pytest.mark.parametrize("street", list(Street))
    def test_street_resolves_to_its_topics(self, street):
        for seed in range(30):
            s = generate_training(TrainingRequest(topic=street, rng_seed=seed))
            assert s.topic in street.topics
            assert s.topic.street == street

    def test_street_selector_reaches_several_topics(self):
        topics = {
            generate_training(TrainingRequest(topic=Street.PREFLOP, rng_seed=seed)).topic
            for seed in range(60)
        }
        assert len(topics) > 1

    def test_topic_resolves_to_itself(self):
        rng = random.Random(0)
        assert resolve_topic(TrainingTopic.DELAYED_CBET, rng) == TrainingTopic.DELAYED_CBET
        assert rng.random() == random.Random(0).random()

    def test_street_topics_partition(self):
        all_topics = [t for street in Street for t in street.topics]
        assert sorted(all_topics) == sorted(TrainingTopic)
        assert Street.PREFLOP.topics and Street.RIVER.topics

    def test_parse_selector(self):
        assert parse_selector("SqueezePlay") == TrainingTopic.SQUEEZE_PLAY
        assert parse_selector("squeeze_play") == TrainingTopic.SQUEEZE_PLAY
        assert parse_selector("river") == Street.RIVER
        with pytest.raises(InvalidSelectionError):
            parse_selector("showdown")

    def test_enum_names(self):
        assert DifficultyLevel.from_name("advanced") == DifficultyLevel.ADVANCED
        assert TextStyle.from_name("TECHNICAL") == TextStyle.TECHNICAL
        with pytest.raises(ValueError):
            DifficultyLevel.from_name("expert")
