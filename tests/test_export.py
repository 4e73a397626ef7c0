"""Tests for JSON export and the client table state."""

import json

from poker_drill.engine.generator import generate_training
from poker_drill.export.scenario import ScenarioExporter
from poker_drill.models import Card, DifficultyLevel, TrainingRequest, TrainingTopic


def make(topic, seed=11):
    return generate_training(TrainingRequest(topic=topic, rng_seed=seed,
                                             difficulty=DifficultyLevel.INTERMEDIATE))


class TestToDict:
    def test_field_names(self):
        d = ScenarioExporter.to_dict(make(TrainingTopic.CHECK_RAISE_SPOT))
        assert set(d) == {"scenario_id", "topic", "branch_key", "table_setup",
                          "question", "answers"}
        assert set(d["table_setup"]) == {"game_type", "hero_position", "hero_hand", "board",
                                         "players", "pot_size", "current_bet"}
        assert set(d["answers"][0]) == {"id", "text", "is_correct", "explanation"}
        assert d["topic"] == "CheckRaiseSpot"
        assert d["table_setup"]["game_type"] == "CashGame"
        assert len(d["table_setup"]["board"]) == 3

    def test_json_serializable(self):
        for topic in TrainingTopic:
            json.dumps(ScenarioExporter.to_dict(make(topic)))

    def test_cards_as_short_strings(self):
        s = make(TrainingTopic.RIVER_VALUE_BET)
        d = ScenarioExporter.to_dict(s)
        assert [Card.parse(c) for c in d["table_setup"]["board"]] == list(s.table_setup.board)


class TestPublicView:
    def test_hides_answer(self):
        s = make(TrainingTopic.SQUEEZE_PLAY)
        view = ScenarioExporter.public_view(s)
        assert view["topic"] == "Squeeze Play"
        assert view["scenario_id"] == s.scenario_id
        for a in view["answers"]:
            assert set(a) == {"id", "text"}
        assert "is_correct" not in json.dumps(view)


class TestTableState:
    def test_hero_and_villain_seats(self):
        s = make(TrainingTopic.CHECK_RAISE_SPOT)
        state = ScenarioExporter.table_state(s, hero_player_id=7)
        data = state["data"]
        seats = data["seats_state"]
        assert state["nt_type"] == "NtTableState"
        assert state["player_id"] == 7
        assert len(seats) == 6
        assert seats[1]["name"] == "You"
        assert seats[1]["player_id"] == 7
        assert seats[2]["player_id"] == 8
        assert [c["card"] for c in seats[2]["cards"]] == ["b", "b"]
        assert seats[1]["action_option"]["call_amount"] == float(s.table_setup.current_bet)
        assert seats[2]["last_action"] == "Bet"
        assert all(not seats[i]["is_playing"] for i in (0, 3, 4, 5))

    def test_blind_seats(self):
        s = make(TrainingTopic.CHECK_RAISE_SPOT)  # hero BB vs BTN
        data = ScenarioExporter.table_state(s, 1)["data"]["data_state"]
        assert data["seat_idx_bb"] == 1
        assert data["seat_idx_button"] == 2
        assert data["seat_idx_sb"] == 0
        assert data["pot"] == [float(s.table_setup.pot_size)]

    def test_game_state_follows_board(self):
        expected = {
            TrainingTopic.BIG_BLIND_DEFENSE: "PreFlop",
            TrainingTopic.SEMI_BLUFF_DECISION: "Flop",
            TrainingTopic.DELAYED_CBET: "Turn",
            TrainingTopic.RIVER_CALL_OR_FOLD: "River",
        }
        for topic, state in expected.items():
            table = ScenarioExporter.table_state(make(topic), 1)["data"]["table_state"]
            assert table["game_state"] == state
            community = [c["card"] for c in table["community_cards"]]
            assert len(community) == 5
            assert community.count("") == 5 - topic.street.board_size

    def test_tens_spelled_out(self):
        assert ScenarioExporter._format_card(Card.parse("Th")) == "10h"
        assert ScenarioExporter._format_card(Card.parse("Ah")) == "Ah"


class TestExportFile:
    def test_export_scenarios(self, tmp_path):
        scenarios = [make(t) for t in list(TrainingTopic)[:3]]
        out = tmp_path / "drills.json"
        ScenarioExporter.export_scenarios(scenarios, str(out))
        data = json.loads(out.read_text(encoding="utf-8"))
        assert [d["scenario_id"] for d in data] == [s.scenario_id for s in scenarios]
