"""Human agent - reads actions from terminal."""

from typing import Callable, Optional

import typer

from unotable.engine import Action, Color, PLAYABLE_COLORS, PlayerView
from unotable.engine.rules import DrawCard, PlayCard

COLOR_MENU = "\n".join(
    ["Select a color for the wildcard:"]
    + [f"{i} - {color}" for i, color in enumerate(PLAYABLE_COLORS, start=1)]
)


class HumanAgent:
    """Agent that prompts the human for input via terminal."""

    def __init__(
        self,
        name: str = "human",
        ask: Optional[Callable[[str], str]] = None,
        echo: Optional[Callable[[str], None]] = None,
    ):
        self._name = name
        self._ask = ask or typer.prompt
        self._echo = echo or typer.echo

    @property
    def name(self) -> str:
        return self._name

    def get_action(
        self,
        player_view: PlayerView,
        legal_actions: list[Action],
    ) -> Action:
        self._echo(f"It's {player_view.name}'s turn!")
        self._echo(f"The top card is a {player_view.top_card}\n")
        self._echo(player_view.render_hand())
        if not any(isinstance(a, PlayCard) for a in legal_actions):
            self._echo("None of your cards can be played, type 'draw' to draw")

        while True:
            raw = self._ask("Choose a card or type 'draw'").strip().lower()
            if raw == "draw":
                return DrawCard()
            try:
                return PlayCard(index=int(raw) - 1)
            except ValueError:
                self._echo(
                    f"Please enter a card index in the range 1 - {len(player_view.my_hand)}, "
                    "or type 'draw' to draw\n"
                )

    def choose_color(self, player_view: PlayerView) -> Color:
        while True:
            self._echo(COLOR_MENU)
            raw = self._ask("Your choice").strip()
            if raw.isdigit() and 1 <= int(raw) <= len(PLAYABLE_COLORS):
                return PLAYABLE_COLORS[int(raw) - 1]
            self._echo(f"Enter a value between 1 and {len(PLAYABLE_COLORS)}!\n")
