"""UNO rules: legal actions and the turn-resolution cycle."""

from dataclasses import dataclass
from typing import List, Optional, Union

from unotable.engine.card import Card, CardType, Color
from unotable.engine.game import AutoPlayed, Game


@dataclass
class PlayCard:
    """Action: play the card at index (0-based) in the current player's hand."""

    index: int


@dataclass
class DrawCard:
    """Action: draw a card (when no legal play or player chooses to draw)."""

    pass


Action = Union[PlayCard, DrawCard]


@dataclass
class TurnOutcome:
    """What happened when the current player acted.

    played is the card that became the top card (from the hand or from an
    auto-played draw); kept is a drawn card that went to the hand instead.
    """

    player: str
    played: Optional[Card] = None
    kept: Optional[Card] = None
    drew: bool = False
    needs_color: bool = False
    winner: Optional[str] = None


def get_legal_actions(game: Game) -> List[Action]:
    """Return all legal actions for the current player."""
    if game.winner is not None:
        return []

    top = game.top_card()
    actions: List[Action] = [
        PlayCard(index=i) for i, card in enumerate(game.player().hand) if card.is_playable_on(top)
    ]
    # Can always draw
    actions.append(DrawCard())
    return actions


def _announce_reverse(game: Game) -> None:
    game.reverse()
    game.record(
        f"Reversing the turn direction! The new direction is {game.turn_direction()}\n"
        f"New turn order: {game}"
    )


def _skip_turn(game: Game) -> None:
    game.record(f"{game.player().name} had their turn skipped!")
    game.next_turn()


def _penalty_draw(game: Game, number_of_cards: int) -> None:
    game.record(f"{game.player().name} drew {number_of_cards} cards")
    game.draw_multiple(number_of_cards)


def take_action(game: Game, action: Action) -> TurnOutcome:
    """Apply the current player's action.

    Raises PlayError for a rejected play; nothing changes in that case and the
    same player should act again.
    """
    name = game.player().name

    if isinstance(action, DrawCard):
        result = game.draw_one()
        if not isinstance(result, AutoPlayed):
            game.record(f"{name} was unable to play a card! Their turn is over")
            return TurnOutcome(player=name, kept=result.card, drew=True)
        card = result.card
        game.record(f"{name} drew a {card} and played it!")
    else:
        card = game.play(action.index)
        game.record(f"{name} played a {card}!")

    if game.winner is not None:
        game.record(f"{name} has played their last card! They are the winner!")
        return TurnOutcome(player=name, played=card, winner=name)

    if card.card_type is CardType.REVERSE:
        _announce_reverse(game)

    return TurnOutcome(
        player=name,
        played=card,
        drew=isinstance(action, DrawCard),
        needs_color=card.is_wild,
    )


def choose_wildcard_color(game: Game, color: Color) -> None:
    """Set the color of a freshly played wildcard on behalf of the current player."""
    game.set_wildcard_color(color)
    game.record(f"The wildcard color is now {color}")


def finish_turn(game: Game, outcome: TurnOutcome) -> None:
    """Pass the turn on and apply the played card's effect to the next player."""
    if outcome.winner is not None:
        return

    game.next_turn()
    if outcome.played is None:
        return

    card_type = game.top_card().card_type
    if card_type is CardType.SKIP:
        _skip_turn(game)
    elif card_type is CardType.REVERSE and game.number_of_players() == 2:
        _skip_turn(game)
    elif card_type is CardType.DRAW_TWO:
        _penalty_draw(game, 2)
        _skip_turn(game)
    elif card_type is CardType.DRAW_FOUR_WILDCARD:
        _penalty_draw(game, 4)
        _skip_turn(game)


def resolve_starting_card(game: Game) -> bool:
    """Apply the revealed top card's effect before the first turn.

    Returns True when the starting player must choose a color for a wildcard.
    """
    card_type = game.top_card().card_type
    if card_type is CardType.SKIP:
        _skip_turn(game)
    elif card_type is CardType.REVERSE:
        _announce_reverse(game)
        _skip_turn(game)
    elif card_type is CardType.DRAW_TWO:
        _penalty_draw(game, 2)
        _skip_turn(game)
    elif card_type is CardType.WILDCARD:
        return True
    return False
