"""Shared test fixtures."""

from typing import Iterable, List

import pytest

from unotable.engine import Card, CardType, Color, Game, Player


class ScriptedSource:
    """Card source that hands out a fixed list of cards, then repeats the last one."""

    def __init__(self, cards: Iterable[Card]):
        self._cards: List[Card] = list(cards)
        self.drawn = 0

    def draw(self) -> Card:
        self.drawn += 1
        if len(self._cards) > 1:
            return self._cards.pop(0)
        return self._cards[0]


def _num(color: Color, n: int) -> Card:
    return Card(CardType.NUMBER, color, n)


def _action(color: Color, card_type: CardType) -> Card:
    return Card(card_type, color)


def _make_game(hands, top_card, source_cards=(), current=0) -> Game:
    """Build a game directly, bypassing the lobby's random deal."""
    players = [Player(name=name, hand=list(cards)) for name, cards in hands]
    source = ScriptedSource(source_cards or [_num(Color.BLUE, 2)])
    return Game(players=players, source=source, current_player_index=current, top_card=top_card)


@pytest.fixture
def num():
    return _num


@pytest.fixture
def action():
    return _action


@pytest.fixture
def make_game():
    return _make_game


@pytest.fixture
def scripted_source():
    return ScriptedSource
