"""Unit tests for cards and the playability rule."""

import pytest

from unotable.engine import Card, CardType, Color

COLORED = [
    Card(CardType.NUMBER, Color.RED, 0),
    Card(CardType.NUMBER, Color.GREEN, 7),
    Card(CardType.SKIP, Color.BLUE),
    Card(CardType.REVERSE, Color.YELLOW),
    Card(CardType.DRAW_TWO, Color.RED),
]
WILDS = [Card.wild(), Card.wild(CardType.DRAW_FOUR_WILDCARD)]


@pytest.mark.parametrize("card", COLORED + WILDS, ids=str)
def test_identical_cards_play_on_each_other(card: Card) -> None:
    twin = Card(card.card_type, card.color, card.number)
    assert card.is_playable_on(twin)
    assert twin.is_playable_on(card)


@pytest.mark.parametrize("wild", WILDS, ids=str)
def test_wild_plays_on_anything(wild: Card) -> None:
    for reference in COLORED + WILDS:
        assert wild.is_playable_on(reference)


@pytest.mark.parametrize("card", COLORED, ids=str)
def test_nothing_plays_on_unpicked_wild(card: Card) -> None:
    for wild in WILDS:
        assert not card.is_playable_on(wild)


def test_chosen_wild_color_matches(num) -> None:
    red_wild = Card.wild().with_color(Color.RED)
    assert red_wild == Card(CardType.WILDCARD, Color.RED)
    assert num(Color.RED, 3).is_playable_on(red_wild)
    assert not num(Color.BLUE, 3).is_playable_on(red_wild)


def test_number_matches_across_colors(num) -> None:
    assert num(Color.RED, 5).is_playable_on(num(Color.BLUE, 5))
    assert not num(Color.RED, 5).is_playable_on(num(Color.BLUE, 6))


def test_action_type_matches_across_colors(action) -> None:
    assert action(Color.RED, CardType.SKIP).is_playable_on(action(Color.GREEN, CardType.SKIP))
    assert action(Color.RED, CardType.DRAW_TWO).is_playable_on(
        action(Color.YELLOW, CardType.DRAW_TWO)
    )
    assert not action(Color.RED, CardType.SKIP).is_playable_on(
        action(Color.GREEN, CardType.REVERSE)
    )


def test_color_matches_across_types(num, action) -> None:
    assert num(Color.GREEN, 1).is_playable_on(action(Color.GREEN, CardType.REVERSE))
    assert action(Color.GREEN, CardType.SKIP).is_playable_on(num(Color.GREEN, 9))


def test_card_validation(num) -> None:
    with pytest.raises(ValueError):
        Card(CardType.NUMBER, Color.RED, 10)
    with pytest.raises(ValueError):
        Card(CardType.NUMBER, Color.RED)
    with pytest.raises(ValueError):
        Card(CardType.SKIP, Color.RED, 3)
    with pytest.raises(ValueError):
        Card(CardType.SKIP, Color.UNPICKED)
    with pytest.raises(ValueError):
        num(Color.RED, 1).with_color(Color.BLUE)


@pytest.mark.parametrize("color", ["Red", "Unpicked", None, 3])
def test_card_color_must_be_a_color(color) -> None:
    with pytest.raises(ValueError):
        Card(CardType.SKIP, color)
    with pytest.raises(ValueError):
        Card.wild().with_color(color)


def test_card_type_must_be_a_card_type() -> None:
    with pytest.raises(ValueError):
        Card("Skip", Color.RED)


def test_card_text(num, action) -> None:
    assert str(num(Color.BLUE, 7)) == "Blue 7"
    assert str(action(Color.RED, CardType.DRAW_TWO)) == "Red Draw 2"
    assert str(action(Color.YELLOW, CardType.SKIP)) == "Yellow Skip"
    assert str(Card.wild()) == "Wildcard"
    assert str(Card.wild(CardType.DRAW_FOUR_WILDCARD)) == "Draw 4 Wildcard"
    assert str(Card.wild().with_color(Color.GREEN)) == "Green Wildcard"
    assert str(Color.UNPICKED) == "Unpicked"
