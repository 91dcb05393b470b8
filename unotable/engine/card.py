"""Card, CardType and Color types for UNO."""

from dataclasses import dataclass, replace
from enum import Enum
from typing import Optional


class Color(str, Enum):
    """Card colors. UNPICKED only appears on a wildcard before its color is chosen."""

    RED = "Red"
    GREEN = "Green"
    BLUE = "Blue"
    YELLOW = "Yellow"
    UNPICKED = "Unpicked"

    def __str__(self) -> str:
        return self.value


PLAYABLE_COLORS = (Color.RED, Color.GREEN, Color.BLUE, Color.YELLOW)


class CardType(str, Enum):
    """Card types. NUMBER cards carry their value on Card.number."""

    NUMBER = "number"
    SKIP = "Skip"
    REVERSE = "Reverse"
    DRAW_TWO = "Draw 2"
    WILDCARD = "Wildcard"
    DRAW_FOUR_WILDCARD = "Draw 4 Wildcard"


WILD_TYPES = (CardType.WILDCARD, CardType.DRAW_FOUR_WILDCARD)


@dataclass(frozen=True)
class Card:
    """A UNO card.

    For number cards: card_type is NUMBER and number is 0-9.
    For skip/reverse/draw two: number is None, color is one of the four colors.
    For wild cards: color is UNPICKED until a player chooses one (see with_color).
    """

    card_type: CardType
    color: Color
    number: Optional[int] = None

    def __post_init__(self) -> None:
        if not isinstance(self.card_type, CardType):
            raise ValueError(f"Invalid card type: {self.card_type!r}")
        if not isinstance(self.color, Color):
            raise ValueError(f"Invalid card color: {self.color!r}")
        if self.card_type is CardType.NUMBER:
            if self.number is None or not 0 <= self.number <= 9:
                raise ValueError(f"Invalid card number: {self.number}")
        elif self.number is not None:
            raise ValueError(f"{self.card_type.value} cards do not carry a number")
        if self.card_type not in WILD_TYPES and self.color is Color.UNPICKED:
            raise ValueError("Non-wild cards must have a color")

    @classmethod
    def wild(cls, card_type: CardType = CardType.WILDCARD) -> "Card":
        return cls(card_type=card_type, color=Color.UNPICKED)

    @property
    def is_wild(self) -> bool:
        return self.card_type in WILD_TYPES

    def with_color(self, color: Color) -> "Card":
        """Return this wildcard with its color chosen."""
        if not self.is_wild:
            raise ValueError(f"Only wildcards can change color, not {self}")
        return replace(self, color=color)

    def is_playable_on(self, reference: "Card") -> bool:
        """Check if this card can be played on top of reference."""
        # Wild can always be played
        if self.is_wild:
            return True
        # Same action type
        if self.card_type is reference.card_type and self.card_type is not CardType.NUMBER:
            return True
        # Same number
        if self.card_type is CardType.NUMBER and reference.card_type is CardType.NUMBER:
            if self.number == reference.number:
                return True
        # Match by color (never matches an unpicked wildcard)
        return self.color == reference.color

    def type_name(self) -> str:
        if self.card_type is CardType.NUMBER:
            return str(self.number)
        return self.card_type.value

    def __str__(self) -> str:
        if self.color is Color.UNPICKED:
            return self.type_name()
        return f"{self.color.value} {self.type_name()}"
