"""Read-only view of a game for the player whose turn it is."""

from dataclasses import dataclass
from typing import Dict, List

from unotable.engine.card import Card
from unotable.engine.game import Game
from unotable.engine.player import Player


@dataclass
class PlayerView:
    """Snapshot of the table as seen by the current player.

    Contains only that player's hand and public info.
    """

    name: str
    my_hand: List[Card]
    top_card: Card
    direction: str
    turn_order: str
    num_cards_per_player: Dict[str, int]  # player name -> count
    history: List[str]  # Recent game events

    @classmethod
    def from_game(cls, game: Game) -> "PlayerView":
        player = game.player()
        return cls(
            name=player.name,
            my_hand=list(player.hand),
            top_card=game.top_card(),
            direction=game.turn_direction(),
            turn_order=game.turn_order(),
            num_cards_per_player={p.name: p.number_of_cards() for p in game.players},
            history=list(game.history[-10:]),  # Last 10 events
        )

    def render_hand(self) -> str:
        """Numbered hand listing, 1-based like the prompt expects."""
        return str(Player(name=self.name, hand=self.my_hand))
