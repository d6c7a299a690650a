from filrouge.memory import MemoryCard, MemoryGame


def test_turn_card_flips_rotation():
    card = MemoryCard()
    assert card.turn_card() == 180.0
    assert card.rotation == 180.0
    assert card.turn_card() == 0.0


def test_turn_card_toggles_clickable():
    card = MemoryCard()
    card.turn_card()
    assert card.is_clickable is False
    card.turn_card()
    assert card.is_clickable is True


def test_turn_card_from_other_angle_resets():
    card = MemoryCard(rotation=90.0)
    assert card.turn_card() == 0.0


def test_double_turn_is_identity():
    card = MemoryCard(is_clickable=False, rotation=180.0)
    card.turn_card()
    card.turn_card()
    assert (card.is_clickable, card.rotation) == (False, 180.0)


def test_pair_matches_equal_values():
    game = MemoryGame()
    assert game.test_pair(3, 3) is True
    assert game.test_pair(3, 4) is False


def test_update_score_accumulates():
    game = MemoryGame()
    assert game.score == 0
    game.update_score(10)
    result = game.update_score(-3)
    assert result == game.score
    assert game.score == 10 - 3


def test_previous_card_is_kept():
    card = MemoryCard()
    game = MemoryGame(previous_card=card)
    card.turn_card()
    assert game.previous_card is card
    assert game.previous_card.is_clickable is False