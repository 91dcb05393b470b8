"""Agent protocol - interface that a seat at the table implements."""

from typing import Protocol

from unotable.engine import Action, Color, PlayerView


class AgentProtocol(Protocol):
    """Interface for whoever decides a player's moves."""

    @property
    def name(self) -> str:
        """Display name for the agent."""
        ...

    def get_action(
        self,
        player_view: PlayerView,
        legal_actions: list[Action],
    ) -> Action:
        """Choose an action given the player view and legal actions.

        Args:
            player_view: Filtered view with only this player's hand and public info.
            legal_actions: Playable cards plus DrawCard. An agent may still
                return a play outside this list; the game rejects it and
                asks again.

        Returns:
            A PlayCard with a 0-based hand index, or DrawCard.
        """
        ...

    def choose_color(self, player_view: PlayerView) -> Color:
        """Pick the color for a wildcard this player just played."""
        ...
