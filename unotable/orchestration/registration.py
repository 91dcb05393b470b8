"""Lobby phase: collect player names before the game starts."""

from typing import Callable, Iterable

from unotable.engine import Game, Lobby

START_MENU = "Select an option:\n1. Add a player\n2. Start the game"


def _prompt_for_player(lobby: Lobby, ask: Callable[[str], str], echo: Callable[[str], None]) -> None:
    while True:
        username = ask("Enter a username").strip()
        if lobby.add_player(username):
            echo(f"Added player {username}!\n")
            return
        if not username:
            echo("A username cannot be empty\n")
        else:
            echo(f"Username '{username}' is already taken. Please choose a different username\n")


def register_players(
    lobby: Lobby,
    ask: Callable[[str], str],
    echo: Callable[[str], None],
    names: Iterable[str] = (),
) -> Game:
    """Fill the lobby and start the game.

    Names given up front are added without prompting; if they already make a
    full table the game starts straight away.
    """
    for name in names:
        if lobby.add_player(name):
            echo(f"Added player {name}!")
        else:
            echo(f"Skipping player '{name}': the name is empty or already taken")

    if lobby.number_of_players() < 2:
        echo("To start the game, you must add at least 2 players, then select 'start'\n")
        while True:
            if lobby.number_of_players() >= 2:
                echo(START_MENU)
                choice = ask("Choose an option").strip()
                if choice == "2":
                    break
                if choice != "1":
                    echo("Please enter an option in the range 1 - 2!\n")
                    continue
            _prompt_for_player(lobby, ask, echo)

    return lobby.start()
