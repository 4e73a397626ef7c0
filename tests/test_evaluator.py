"""Tests for hand, board and draw classification."""

import pytest

from poker_drill.engine.evaluator import (
    BarrelTurnCard, BluffType, BoardFavour, BoardTexture, CallerStrength,
    DefenseStrength, DrawType, HandCategory, HandInteraction, MadeStrength,
    PushTier, SqueezeStrength, TournamentStage, TurnCard, ValueStrength,
    board_texture, classify_barrel_turn, classify_bluff_type,
    classify_board_favour, classify_caller_strength, classify_draw,
    classify_hand, classify_hand_interaction, classify_push_tier,
    classify_turn_card, classify_turn_strength, classify_value_strength,
    defense_strength, draw_equity, draw_equity_flop, hero_has_flush,
    has_showdown_value, hero_has_straight, is_combo_draw, push_threshold_bb,
    required_equity, required_fold_frequency, squeeze_strength,
)
from poker_drill.models.card import Card


def _cards(s):
    return Card.parse_many(s)


class TestClassifyHand:
    @pytest.mark.parametrize("hand", ["AhAd", "KsKc", "AhKh", "AsKs", "QdQc"])
    def test_premium(self, hand):
        assert classify_hand(_cards(hand)) == HandCategory.PREMIUM

    @pytest.mark.parametrize("hand", ["7h2d", "8c3s", "9h4c", "6d5c"])
    def test_trash(self, hand):
        assert classify_hand(_cards(hand)) == HandCategory.TRASH

    def test_strong(self):
        assert classify_hand(_cards("JhJd")) == HandCategory.STRONG
        assert classify_hand(_cards("TsTc")) == HandCategory.STRONG
        assert classify_hand(_cards("AhKd")) == HandCategory.STRONG
        assert classify_hand(_cards("AhQd")) == HandCategory.STRONG

    def test_playable(self):
        assert classify_hand(_cards("8h8d")) == HandCategory.PLAYABLE
        assert classify_hand(_cards("Ah9h")) == HandCategory.PLAYABLE
        assert classify_hand(_cards("KsQs")) == HandCategory.PLAYABLE
        assert classify_hand(_cards("Th9h")) == HandCategory.PLAYABLE

    def test_marginal(self):
        assert classify_hand(_cards("3h3d")) == HandCategory.MARGINAL
        assert classify_hand(_cards("KsQd")) == HandCategory.MARGINAL
        assert classify_hand(_cards("Jh8d")) == HandCategory.MARGINAL

    def test_order_independent(self):
        assert classify_hand(_cards("KhAh")) == classify_hand(_cards("AhKh"))

    def test_label(self):
        assert HandCategory.PREMIUM.label == "Premium"


class TestBoardTexture:
    def test_dry(self):
        assert board_texture(_cards("Kc7d2h")) == BoardTexture.DRY

    def test_semi_wet_flush(self):
        assert board_texture(_cards("Kh7h2c")) == BoardTexture.SEMI_WET

    def test_semi_wet_straight(self):
        assert board_texture(_cards("9c8d2h")) == BoardTexture.SEMI_WET

    def test_wet(self):
        assert board_texture(_cards("9h8h7c")) == BoardTexture.WET

    def test_labels(self):
        assert BoardTexture.DRY.label == "Dry"
        assert BoardTexture.SEMI_WET.label == "SemiWet"
        assert BoardTexture.WET.label == "Wet"


class TestDraws:
    def test_classify_draw(self):
        assert classify_draw(_cards("9h8h2c")) == DrawType.COMBO_DRAW
        assert classify_draw(_cards("Kh7h2c")) == DrawType.FLUSH_DRAW
        assert classify_draw(_cards("9c8d2h")) == DrawType.OESD
        assert classify_draw(_cards("Kc7d2h")) == DrawType.GUTSHOT

    def test_equity_table(self):
        assert draw_equity_flop(DrawType.COMBO_DRAW) == 0.54
        assert draw_equity_flop(DrawType.FLUSH_DRAW) == 0.35
        assert draw_equity_flop(DrawType.OESD) == 0.32
        assert draw_equity_flop(DrawType.GUTSHOT) == 0.17
        assert draw_equity(DrawType.FLUSH_DRAW, 1) == 0.20
        assert draw_equity(DrawType.FLUSH_DRAW, 0) == 0.0

    def test_required_equity(self):
        assert required_equity(10, 20) == pytest.approx(1 / 3)
        assert required_equity(0, 0) == 0.0
        assert required_fold_frequency(10, 10) == pytest.approx(0.5)

    def test_combo_draw_needs_both(self):
        assert is_combo_draw(_cards("JhTh"), _cards("9h8h2c"))
        assert not is_combo_draw(_cards("JcTd"), _cards("9h8h2c"))


class TestCheckRaiseBuckets:
    def test_board_favour(self):
        assert classify_board_favour(_cards("8c6d5h")) == BoardFavour.BB_FAVORABLE
        assert classify_board_favour(_cards("AcKd7h")) == BoardFavour.IP_FAVORABLE

    def test_hand_interaction(self):
        assert classify_hand_interaction(_cards("8s2c"), _cards("8c6d2h")) == HandInteraction.STRONG
        assert classify_hand_interaction(_cards("AhQh"), _cards("Kh7h2c")) == HandInteraction.DRAW
        assert classify_hand_interaction(_cards("AsQc"), _cards("Kh7d2c")) == HandInteraction.WEAK


class TestTurnCard:
    def test_blank(self):
        assert classify_turn_card(_cards("Qc7d3h"), Card.parse("5s")) == TurnCard.BLANK

    def test_overcard(self):
        assert classify_turn_card(_cards("Qc7d3h"), Card.parse("As")) == TurnCard.SCARE

    def test_flush(self):
        assert classify_turn_card(_cards("Qh7h3c"), Card.parse("5h")) == TurnCard.SCARE

    def test_four_straight(self):
        assert classify_turn_card(_cards("9c7dTh"), Card.parse("8s")) == TurnCard.SCARE

    def test_barrel_turn(self):
        assert classify_barrel_turn(_cards("Qh7h3c"), Card.parse("2h")) == BarrelTurnCard.DRAW_COMPLETE
        assert classify_barrel_turn(_cards("8c5d2h"), Card.parse("Ks")) == BarrelTurnCard.SCARE_BROADWAY
        assert classify_barrel_turn(_cards("Qc7d3h"), Card.parse("2s")) == BarrelTurnCard.BLANK


class TestMadeStrength:
    def test_set_and_overpair(self):
        assert classify_turn_strength(_cards("7s7c"), _cards("Kc7d3h2s")) == MadeStrength.STRONG
        assert classify_turn_strength(_cards("AsAc"), _cards("Kc7d3h2s")) == MadeStrength.STRONG

    def test_underpair(self):
        assert classify_turn_strength(_cards("5s5c"), _cards("Kc7d3h2s")) == MadeStrength.MEDIUM

    def test_top_pair_kicker(self):
        assert classify_turn_strength(_cards("KsJc"), _cards("Kc7d3h2s")) == MadeStrength.STRONG
        assert classify_turn_strength(_cards("Ks9c"), _cards("Kc7d3h2s")) == MadeStrength.MEDIUM

    def test_two_pair(self):
        assert classify_turn_strength(_cards("7s3c"), _cards("Kc7d3h2s")) == MadeStrength.STRONG

    def test_nothing(self):
        assert classify_turn_strength(_cards("AsQc"), _cards("Kc7d3h2s")) == MadeStrength.WEAK


class TestPushFold:
    def test_tiers(self):
        assert classify_push_tier(_cards("QhQd")) == PushTier.PREMIUM
        assert classify_push_tier(_cards("AhKh")) == PushTier.PREMIUM
        assert classify_push_tier(_cards("AhKd")) == PushTier.STRONG
        assert classify_push_tier(_cards("8h8d")) == PushTier.PLAYABLE
        assert classify_push_tier(_cards("AhTh")) == PushTier.PLAYABLE
        assert classify_push_tier(_cards("9h4d")) == PushTier.WEAK

    def test_thresholds(self):
        assert push_threshold_bb(TournamentStage.EARLY_LEVELS, PushTier.PLAYABLE) == 20
        assert push_threshold_bb(TournamentStage.MIDDLE_STAGES, PushTier.PLAYABLE) == 15
        assert push_threshold_bb(TournamentStage.BUBBLE, PushTier.PLAYABLE) == 10
        assert push_threshold_bb(TournamentStage.FINAL_TABLE, PushTier.PLAYABLE) == 12
        assert push_threshold_bb(TournamentStage.BUBBLE, PushTier.PREMIUM) == 18
        assert push_threshold_bb(TournamentStage.BUBBLE, PushTier.WEAK) == 6


class TestPreflopBuckets:
    def test_squeeze(self):
        assert squeeze_strength(HandCategory.PREMIUM) == SqueezeStrength.PREMIUM
        assert squeeze_strength(HandCategory.STRONG) == SqueezeStrength.PREMIUM
        assert squeeze_strength(HandCategory.PLAYABLE) == SqueezeStrength.SPECULATIVE
        assert squeeze_strength(HandCategory.MARGINAL) == SqueezeStrength.WEAK

    def test_defense(self):
        assert defense_strength(HandCategory.STRONG) == DefenseStrength.STRONG
        assert defense_strength(HandCategory.MARGINAL) == DefenseStrength.PLAYABLE
        assert defense_strength(HandCategory.TRASH) == DefenseStrength.WEAK


class TestRiverBuckets:
    def test_flush_and_straight(self):
        assert hero_has_flush(_cards("AhTh"), _cards("Kh7h2h9c3s"))
        assert not hero_has_flush(_cards("AcTd"), _cards("Kh7h2h9h3h"))
        assert hero_has_straight(_cards("Jc8d"), _cards("Th9s7h2c2d"))
        assert hero_has_straight(_cards("Ac2d"), _cards("3h4s5cKdQh"))
        assert not hero_has_straight(_cards("KcKd"), _cards("2h3s4c5d6h"))

    def test_bluff_type(self):
        assert classify_bluff_type(_cards("Ah5h"), _cards("Kh8h2c3d9s")) == BluffType.MISSED_FLUSH_DRAW
        assert classify_bluff_type(_cards("AcKd"), _cards("Qh8s2c3d9s")) == BluffType.OVERCARD_BRICK
        assert classify_bluff_type(_cards("6c4d"), _cards("Qh8s2c3d9s")) == BluffType.CAPPED_RANGE

    def test_bluff_type_none_with_made_hand(self):
        # Flush, straight, two pair, board pair and pocket pair all have showdown value.
        assert classify_bluff_type(_cards("AhKh"), _cards("Qh9h5h3c2d")) is None
        assert classify_bluff_type(_cards("JcTd"), _cards("Qh9h8s3c2d")) is None
        assert classify_bluff_type(_cards("4hAc"), _cards("8s4sAh9c7c")) is None
        assert classify_bluff_type(_cards("Kc5d"), _cards("Qh8s2c3d5s")) is None
        assert classify_bluff_type(_cards("2c2d"), _cards("Qh8s7c3d9s")) is None

    def test_showdown_value(self):
        assert has_showdown_value(_cards("AhKh"), _cards("Qh9h5h3c2d"))
        assert has_showdown_value(_cards("Kc5d"), _cards("Qh8s2c3d5s"))
        assert not has_showdown_value(_cards("AcKd"), _cards("Qh8s2c3d9s"))
        # Board pair alone does not count.
        assert not has_showdown_value(_cards("AcKd"), _cards("Qh8s8c3d9s"))

    def test_value_strength(self):
        assert classify_value_strength(_cards("AhTh"), _cards("Kh7h2h9c3s")) == ValueStrength.NUTS
        assert classify_value_strength(_cards("KcKd"), _cards("Kh7s2h9c3s")) == ValueStrength.NUTS
        assert classify_value_strength(_cards("7c7d"), _cards("Kh7s2h9c3s")) == ValueStrength.STRONG
        assert classify_value_strength(_cards("Kc9d"), _cards("Kh7s2h9c3s")) == ValueStrength.STRONG
        assert classify_value_strength(_cards("7c2d"), _cards("Kh7s2h9c3s")) == ValueStrength.MEDIUM
        assert classify_value_strength(_cards("Ac7d"), _cards("Kh7s2h9c3s")) == ValueStrength.MEDIUM
        assert classify_value_strength(_cards("AcQd"), _cards("Kh7s2h9c3s")) == ValueStrength.WEAK

    def test_caller_strength(self):
        assert classify_caller_strength(_cards("Kc7d"), _cards("Kh7s2h9c3d")) == CallerStrength.STRONG
        assert classify_caller_strength(_cards("9d4c"), _cards("Kh7s2h9c3d")) == CallerStrength.MARGINAL
        assert classify_caller_strength(_cards("2d4c"), _cards("Kh7s2h9c3d")) == CallerStrength.WEAK
        assert classify_caller_strength(_cards("5d5c"), _cards("Kh7s2h9c3d")) == CallerStrength.MARGINAL
        assert classify_caller_strength(_cards("AdQc"), _cards("Kh7s2h9c3d")) == CallerStrength.WEAK
