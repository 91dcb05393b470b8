"""Unit tests for player registration and game setup."""

import pytest

from unotable.engine import Card, CardType, Color, Lobby, NotEnoughPlayers


def test_add_player() -> None:
    lobby = Lobby()
    assert lobby.add_player("alice")
    assert lobby.number_of_players() == 1
    assert not lobby.add_player("alice")
    assert lobby.number_of_players() == 1
    # Names are case sensitive
    assert lobby.add_player("Alice")
    assert lobby.number_of_players() == 2
    assert lobby.player_names() == ["alice", "Alice"]


def test_empty_name_rejected() -> None:
    lobby = Lobby()
    assert not lobby.add_player("")
    assert not lobby.add_player("   ")
    assert lobby.number_of_players() == 0


@pytest.mark.parametrize("names", [[], ["solo"]])
def test_start_needs_two_players(names: list[str]) -> None:
    lobby = Lobby()
    for name in names:
        lobby.add_player(name)
    with pytest.raises(NotEnoughPlayers):
        lobby.start()
    # The lobby stays open so more players can join
    assert lobby.add_player("late")


@pytest.mark.parametrize("seed", range(30))
def test_start_deals_seven_and_valid_top(seed: int) -> None:
    lobby = Lobby(seed=seed)
    for name in ("A", "B", "C"):
        lobby.add_player(name)
    game = lobby.start()
    assert [p.name for p in game.players] == ["A", "B", "C"]
    assert all(p.number_of_cards() == 7 for p in game.players)
    assert game.top_card().card_type is not CardType.DRAW_FOUR_WILDCARD
    assert 0 <= game.current_player_index < 3
    assert game.winner is None


def test_start_redraws_draw_four(scripted_source, num) -> None:
    draw_four = Card.wild(CardType.DRAW_FOUR_WILDCARD)
    cards = [num(Color.RED, 1)] * 14 + [draw_four, draw_four, num(Color.GREEN, 3)]
    lobby = Lobby(seed=1, card_source=scripted_source(cards))
    lobby.add_player("A")
    lobby.add_player("B")
    game = lobby.start()
    assert game.top_card() == num(Color.GREEN, 3)
    assert all(p.hand == [num(Color.RED, 1)] * 7 for p in game.players)


def test_start_consumes_lobby() -> None:
    lobby = Lobby(seed=0)
    lobby.add_player("A")
    lobby.add_player("B")
    lobby.start()
    with pytest.raises(RuntimeError):
        lobby.add_player("C")
    with pytest.raises(RuntimeError):
        lobby.start()


def test_seeded_start_reproducible() -> None:
    games = []
    for _ in range(2):
        lobby = Lobby(seed=99)
        lobby.add_player("A")
        lobby.add_player("B")
        games.append(lobby.start())
    g1, g2 = games
    assert g1.current_player_index == g2.current_player_index
    assert g1.top_card() == g2.top_card()
    assert [p.hand for p in g1.players] == [p.hand for p in g2.players]
