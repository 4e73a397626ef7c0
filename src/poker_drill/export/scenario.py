"""JSON exporter and client table-state adapter for training scenarios."""

import json
from typing import Any, Dict, List, Optional, Sequence

from poker_drill.models import Card, Position, TrainingScenario

# Client seat indexes; seats 0 and 3-5 are always empty.
HERO_SEAT = 1
VILLAIN_SEAT = 2
TABLE_SEATS = 6

_GAME_STATES = {0: "PreFlop", 3: "Flop", 4: "Turn"}


class ScenarioExporter:
    """Serializes scenarios for storage, APIs and the table client."""

    @staticmethod
    def to_dict(scenario: TrainingScenario) -> Dict[str, Any]:
        """Full JSON-ready view, including correctness and explanations.

        Args:
            scenario: The scenario to serialize.

        Returns:
            Dict using the scenario's field names; cards as short strings.
        """
        setup = scenario.table_setup
        return {
            "scenario_id": scenario.scenario_id,
            "topic": scenario.topic.value,
            "branch_key": scenario.branch_key,
            "table_setup": {
                "game_type": setup.game_type.value,
                "hero_position": setup.hero_position.value,
                "hero_hand": [str(c) for c in setup.hero_hand],
                "board": [str(c) for c in setup.board],
                "players": [
                    {
                        "seat": p.seat,
                        "position": p.position.value,
                        "stack": p.stack,
                        "is_hero": p.is_hero,
                        "is_active": p.is_active,
                    }
                    for p in setup.players
                ],
                "pot_size": setup.pot_size,
                "current_bet": setup.current_bet,
            },
            "question": scenario.question,
            "answers": [
                {
                    "id": a.id,
                    "text": a.text,
                    "is_correct": a.is_correct,
                    "explanation": a.explanation,
                }
                for a in scenario.answers
            ],
        }

    @staticmethod
    def public_view(scenario: TrainingScenario) -> Dict[str, Any]:
        """What a player may see before answering: no correctness, no explanations."""
        return {
            "scenario_id": scenario.scenario_id,
            "topic": scenario.topic.display_name,
            "branch_key": scenario.branch_key,
            "question": scenario.question,
            "answers": [{"id": a.id, "text": a.text} for a in scenario.answers],
        }

    @staticmethod
    def table_state(scenario: TrainingScenario, hero_player_id: int) -> Dict[str, Any]:
        """Build the ``NtTableState`` document the table client renders.

        Hero always sits in seat 1 and the first opponent in seat 2.

        Args:
            scenario: The scenario to render.
            hero_player_id: Player id of the viewing user; the villain gets id + 1.

        Returns:
            The table-state document.
        """
        setup = scenario.table_setup
        villain = setup.villain
        hero = setup.hero
        villain_pos = villain.position if villain else Position.BB
        villain_stack = villain.stack if villain else 100
        hero_stack = hero.stack if hero else 100
        bb_seat, sb_seat, btn_seat = ScenarioExporter._blind_seats(
            setup.hero_position, villain_pos,
        )
        pot = float(setup.pot_size)
        current_bet = float(setup.current_bet)

        hero_seat = ScenarioExporter._seat(
            HERO_SEAT,
            player_id=hero_player_id,
            name="You",
            stack=hero_stack,
            active=True,
            cards=[ScenarioExporter._card_slot(i, c) for i, c in enumerate(setup.hero_hand)],
            call_amount=current_bet,
        )
        villain_seat = ScenarioExporter._seat(
            VILLAIN_SEAT,
            player_id=hero_player_id + 1,
            name="Villain",
            stack=villain_stack,
            active=False,
            cards=[ScenarioExporter._card_slot(i, None, hidden=True) for i in range(2)],
            bet=current_bet,
            last_action="Bet" if setup.current_bet > 0 else "",
        )
        seats = [ScenarioExporter._empty_seat(i) for i in range(TABLE_SEATS)]
        seats[HERO_SEAT] = hero_seat
        seats[VILLAIN_SEAT] = villain_seat

        return {
            "nt_type": "NtTableState",
            "player_id": hero_player_id,
            "pool_id": 0,
            "data": {
                "data_state": {
                    "table_id": 9999,
                    "display_table_id": f"training/{scenario.scenario_id}",
                    "active_seat_idx": HERO_SEAT,
                    "seat_idx_bb": bb_seat,
                    "seat_idx_sb": sb_seat,
                    "seat_idx_button": btn_seat,
                    "pot": [pot],
                    "sb_amount": 1.0,
                    "bb_amount": 2.0,
                    "action_time_limit": {"secs": 0, "nanos": 0},
                    "delay_type": "UserActionDelay",
                    "pool_type": "CommonHoldem",
                    "blitz": False,
                    "spectating": False,
                    "pots": [[{
                        "pot_id": 0, "value": pot, "displayValue": pot, "position": "",
                    }]],
                },
                "table_state": {
                    "game_state": _GAME_STATES.get(len(setup.board), "River"),
                    "community_cards": ScenarioExporter._community_cards(setup.board),
                    "showdown_state": {"first_seat_idx_to_show": 0, "winners": {}},
                },
                "seats_state": seats,
            },
            "service_type": "free",
        }

    @staticmethod
    def export_scenarios(scenarios: List[TrainingScenario], output_file: str):
        """Write scenarios to a file as a JSON array.

        Args:
            scenarios: Scenarios to export.
            output_file: Path to the output file.
        """
        with open(output_file, 'w', encoding='utf-8') as f:
            json.dump([ScenarioExporter.to_dict(s) for s in scenarios], f, indent=2)
            f.write("\n")

    @staticmethod
    def _format_card(card: Card) -> str:
        """Client card string; the client spells tens out ('10h')."""
        if card.rank == 10:
            return f"10{card.suit.value}"
        return str(card)

    @staticmethod
    def _card_slot(slot: int, card: Optional[Card], hidden: bool = False) -> Dict[str, Any]:
        if hidden:
            text = "b"
        else:
            text = ScenarioExporter._format_card(card) if card else ""
        return {"id": slot, "card": text, "isCombination": False, "isNoCombination": False}

    @staticmethod
    def _community_cards(board: Sequence[Card]) -> List[Dict[str, Any]]:
        return [
            ScenarioExporter._card_slot(i, board[i] if i < len(board) else None)
            for i in range(5)
        ]

    @staticmethod
    def _blind_seats(hero_pos: Position, villain_pos: Position):
        """(bb, sb, button) seat indexes among hero and villain, 0 when neither."""
        seats = {"BB": 0, "SB": 0, "BTN": 0}
        for pos, seat in ((hero_pos, HERO_SEAT), (villain_pos, VILLAIN_SEAT)):
            if pos.value in seats:
                seats[pos.value] = seat
        return seats["BB"], seats["SB"], seats["BTN"]

    @staticmethod
    def _seat(seat_idx: int, player_id: int, name: str, stack: int, active: bool,
              cards: List[Dict[str, Any]], bet: float = 0, last_action: str = "",
              call_amount: float = 0) -> Dict[str, Any]:
        seat = ScenarioExporter._empty_seat(seat_idx)
        seat.update({
            "player_id": player_id,
            "is_playing": True,
            "is_active": active,
            "stack": {"value": stack, "currency": "xPKR"},
            "name": name,
            "bet": bet,
            "last_action": last_action,
            "cards": cards,
        })
        seat["action_option"]["call_amount"] = call_amount
        return seat

    @staticmethod
    def _empty_seat(seat_idx: int) -> Dict[str, Any]:
        return {
            "seat_idx": seat_idx,
            "player_id": 0,
            "is_playing": False,
            "is_active": False,
            "is_folded": False,
            "is_all_in": False,
            "is_in_sit_out": False,
            "rebuy_time": None,
            "stack": {"value": 0, "currency": "xPKR"},
            "name": "",
            "bet": 0,
            "last_action": "",
            "cards": [],
            "action_option": {"actions": [], "min_bet": 0, "max_bet": 0, "call_amount": 0},
            "pre_actions": {
                "check": False, "call": False, "fold": False, "raise": False, "bet": False,
            },
            "country": None,
            "image": None,
            "isShowdown": False,
            "emoji": None,
        }
