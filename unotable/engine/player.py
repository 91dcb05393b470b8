"""Player type."""

from dataclasses import dataclass, field
from typing import List

from unotable.engine.card import Card


@dataclass
class Player:
    """A named seat at the table and the cards in their hand.

    Hand order is the order cards were dealt or drawn.
    """

    name: str
    hand: List[Card] = field(default_factory=list)

    def number_of_cards(self) -> int:
        return len(self.hand)

    def __str__(self) -> str:
        lines = [f"{self.name}'s Cards:"]
        lines.extend(f"{i}. {card}" for i, card in enumerate(self.hand, start=1))
        return "\n".join(lines) + "\n"
