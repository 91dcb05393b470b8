"""Single game runner."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Callable, Optional

import typer

from unotable.engine import (
    CardUnplayable,
    Game,
    InvalidCardIndex,
    PlayerView,
    choose_wildcard_color,
    finish_turn,
    get_legal_actions,
    resolve_starting_card,
    take_action,
)

if TYPE_CHECKING:
    from unotable.agent.protocol import AgentProtocol


@dataclass
class GameResult:
    """Result of a completed game."""

    winner: Optional[str]
    num_turns: int
    player_names: tuple[str, ...]


class GameRunner:
    """Runs a started UNO game to completion, one seat decision at a time."""

    def __init__(
        self,
        game: Game,
        agents: dict[str, "AgentProtocol"],
        echo: Callable[[str], None] = typer.echo,
        max_turns: Optional[int] = None,
    ):
        missing = [p.name for p in game.players if p.name not in agents]
        if missing:
            raise ValueError(f"No agent seated for: {', '.join(missing)}")
        self._game = game
        self._agents = agents
        self._echo = echo
        self._max_turns = max_turns
        self._events_shown = 0

    def _show_new_events(self) -> None:
        history = self._game.history
        for event in history[self._events_shown:]:
            self._echo(event + "\n")
        self._events_shown = len(history)

    def _pick_color(self) -> None:
        game = self._game
        agent = self._agents[game.player().name]
        color = agent.choose_color(PlayerView.from_game(game))
        choose_wildcard_color(game, color)

    def _start(self) -> None:
        game = self._game
        self._echo(
            f"\nStarting the game! The starting player is {game.player().name}\n"
            f"Turn order: {game}\n\n"
            f"The top card is a {game.top_card()}\n"
        )
        starting_player = game.player().name
        if resolve_starting_card(game):
            self._echo(str(game.player()))
            self._pick_color()
        self._show_new_events()
        if game.player().name != starting_player:
            self._echo(f"The new starting player is {game.player().name}\n")

    def _report_rejected_play(self, error: Exception) -> None:
        game = self._game
        if isinstance(error, InvalidCardIndex):
            self._echo(
                f"Please enter a card index in the range 1 - {game.player().number_of_cards()}, "
                "or type 'draw' to draw\n"
            )
        elif isinstance(error, CardUnplayable):
            self._echo(
                f"The card you picked cannot be played on a {game.top_card()}. "
                "Select a different card or choose the 'draw' option\n"
            )

    def run(self) -> GameResult:
        """Run the game and return the result."""
        game = self._game
        self._start()
        num_turns = 0

        while game.winner is None:
            if self._max_turns is not None and num_turns >= self._max_turns:
                break

            agent = self._agents[game.player().name]
            action = agent.get_action(PlayerView.from_game(game), get_legal_actions(game))
            try:
                outcome = take_action(game, action)
            except (InvalidCardIndex, CardUnplayable) as e:
                self._report_rejected_play(e)
                continue

            num_turns += 1
            if outcome.kept is not None:
                self._echo(f"You drew a {outcome.kept}! It's not playable on the current card!")
            elif outcome.drew:
                self._echo(f"You drew a {outcome.played}! It's playable on the current card!")

            if outcome.needs_color:
                self._show_new_events()
                self._pick_color()
            finish_turn(game, outcome)
            self._show_new_events()

        return GameResult(
            winner=game.winner,
            num_turns=num_turns,
            player_names=tuple(p.name for p in game.players),
        )
