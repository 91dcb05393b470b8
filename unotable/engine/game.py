"""Game state machine for UNO."""

from dataclasses import dataclass
from typing import List, Optional, Protocol, Union

from unotable.engine.card import Card, CardType, Color
from unotable.engine.player import Player


class PlayError(Exception):
    """A rejected play attempt. The player should pick again."""


class InvalidCardIndex(PlayError):
    def __init__(self, index: int, hand_size: int):
        super().__init__(f"Card index {index} is out of range for a hand of {hand_size}")
        self.index = index
        self.hand_size = hand_size


class CardUnplayable(PlayError):
    def __init__(self, card: Card, top_card: Card):
        super().__init__(f"{card} cannot be played on {top_card}")
        self.card = card
        self.top_card = top_card


class InvalidWildcardColor(ValueError):
    """Raised when a wildcard is given UNPICKED or something that is not a color."""


class CardSupply(Protocol):
    """Anything that hands out one card per draw."""

    def draw(self) -> Card:
        ...


@dataclass(frozen=True)
class AutoPlayed:
    """Result of draw_one: the drawn card was playable and is now the top card."""

    card: Card


@dataclass(frozen=True)
class AddedToHand:
    """Result of draw_one: the drawn card was not playable and went to the hand."""

    card: Card


DrawResult = Union[AutoPlayed, AddedToHand]


def next_index(index: int, length: int, reversed_: bool) -> int:
    """Step one seat around the table in the given direction."""
    step = -1 if reversed_ else 1
    return (index + step) % length


class Game:
    """A running UNO game.

    Created by Lobby.start(). Mutated in place by a single driver; the driver
    must stop calling it once `winner` is set.
    """

    def __init__(
        self,
        players: List[Player],
        source: CardSupply,
        current_player_index: int = 0,
        top_card: Optional[Card] = None,
    ):
        self.players = players
        self.current_player_index = current_player_index
        self.turn_direction_reversed = False
        self.source = source
        self._top_card = top_card
        self.winner: Optional[str] = None
        self.history: List[str] = []

    def deal(self, hand_size: int, starting_player_index: int) -> None:
        """Deal hands in seat order, seat the starting player and reveal a top card."""
        for player in self.players:
            for _ in range(hand_size):
                player.hand.append(self.source.draw())

        self.current_player_index = starting_player_index

        # The starting card may be anything except a draw four
        top = self.source.draw()
        while top.card_type is CardType.DRAW_FOUR_WILDCARD:
            top = self.source.draw()
        self._top_card = top

    def record(self, event: str) -> None:
        self.history.append(event)

    def number_of_players(self) -> int:
        return len(self.players)

    def player(self) -> Player:
        return self.players[self.current_player_index]

    def next_turn(self) -> None:
        self.current_player_index = next_index(
            self.current_player_index, len(self.players), self.turn_direction_reversed
        )

    def turn_direction(self) -> str:
        return "Counter Clockwise" if self.turn_direction_reversed else "Clockwise"

    def reverse(self) -> None:
        self.turn_direction_reversed = not self.turn_direction_reversed

    def top_card(self) -> Card:
        if self._top_card is None:
            raise RuntimeError("No top card has been revealed yet")
        return self._top_card

    def play(self, card_index: int) -> Card:
        """Play the card at card_index (0-based) from the current player's hand.

        Raises InvalidCardIndex or CardUnplayable without changing any state.
        """
        player = self.player()
        if not 0 <= card_index < len(player.hand):
            raise InvalidCardIndex(card_index, len(player.hand))

        card = player.hand[card_index]
        top = self.top_card()
        if not card.is_playable_on(top):
            raise CardUnplayable(card, top)

        self._top_card = card
        del player.hand[card_index]
        if not player.hand:
            self.winner = player.name
        return card

    def draw_one(self) -> DrawResult:
        """Draw a card for the current player, playing it at once if it can be played."""
        card = self.source.draw()
        if card.is_playable_on(self.top_card()):
            self._top_card = card
            return AutoPlayed(card)
        self.player().hand.append(card)
        return AddedToHand(card)

    def draw_multiple(self, number_of_cards: int) -> None:
        """Penalty draw: cards go to the current player's hand unconditionally."""
        hand = self.player().hand
        for _ in range(number_of_cards):
            hand.append(self.source.draw())

    def set_wildcard_color(self, color: Color) -> None:
        try:
            color = Color(color)
        except ValueError:
            raise InvalidWildcardColor(f"Unknown color: {color!r}") from None
        if color == Color.UNPICKED:
            raise InvalidWildcardColor("A wildcard color must be Red, Green, Blue or Yellow")
        top = self.top_card()
        if top.is_wild:
            self._top_card = top.with_color(color)

    def turn_order(self) -> str:
        """Render seat order starting from the current player, e.g. "[A] -> B -> C".

        When reversed the arrows point left and the current player comes last.
        """
        length = len(self.players)
        if self.turn_direction_reversed:
            start = next_index(self.current_player_index, length, False)
        else:
            start = self.current_player_index
        names = [self.players[(start + i) % length].name for i in range(length)]

        if self.turn_direction_reversed:
            names[-1] = f"[{names[-1]}]"
            return " <- ".join(names)
        names[0] = f"[{names[0]}]"
        return " -> ".join(names)

    def __str__(self) -> str:
        return self.turn_order()
