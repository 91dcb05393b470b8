"""CLI entry point."""

from __future__ import annotations

from typing import List, Optional

import typer
from dotenv import load_dotenv

# Load environment variables from .env file
load_dotenv()

app = typer.Typer(help="Hot-seat UNO for players sharing one terminal")


@app.callback()
def main() -> None:
    """Hot-seat UNO for players sharing one terminal."""


def _check_names(names: List[str]) -> List[str]:
    cleaned = [n.strip() for n in names]
    if any(not n for n in cleaned):
        raise typer.BadParameter("Player names cannot be empty.")
    duplicates = sorted({n for n in cleaned if cleaned.count(n) > 1})
    if duplicates:
        raise typer.BadParameter(f"Duplicate player names: {', '.join(duplicates)}")
    return cleaned


@app.command()
def play(
    players: Optional[List[str]] = typer.Option(
        None,
        "--player",
        "-p",
        envvar="UNOTABLE_PLAYERS",
        help="Register a player without prompting (repeat for each player)",
    ),
    seed: Optional[int] = typer.Option(
        None, "--seed", "-s", envvar="UNOTABLE_SEED", help="Random seed"
    ),
) -> None:
    """Register players and run a single UNO game."""
    from unotable.agent.protocol import AgentProtocol
    from unotable.agents.human_agent import HumanAgent
    from unotable.engine import Lobby
    from unotable.orchestration.game_runner import GameRunner
    from unotable.orchestration.registration import register_players

    names = _check_names(players or [])
    game = register_players(Lobby(seed=seed), ask=typer.prompt, echo=typer.echo, names=names)
    agents: dict[str, AgentProtocol] = {p.name: HumanAgent(name=p.name) for p in game.players}
    result = GameRunner(game, agents).run()
    typer.echo(f"Winner: {result.winner or 'None'}")
    typer.echo(f"Turns: {result.num_turns}")


if __name__ == "__main__":
    app()
