"""Game engine for UNO."""

from unotable.engine.card import Card, CardType, Color, PLAYABLE_COLORS
from unotable.engine.deck import CardSource, card_from_seed
from unotable.engine.game import (
    AddedToHand,
    AutoPlayed,
    CardUnplayable,
    Game,
    InvalidCardIndex,
    InvalidWildcardColor,
    PlayError,
)
from unotable.engine.game_state import PlayerView
from unotable.engine.lobby import Lobby, NotEnoughPlayers
from unotable.engine.player import Player
from unotable.engine.rules import (
    Action,
    PlayCard,
    DrawCard,
    TurnOutcome,
    get_legal_actions,
    take_action,
    choose_wildcard_color,
    finish_turn,
    resolve_starting_card,
)

__all__ = [
    "Card",
    "CardType",
    "Color",
    "PLAYABLE_COLORS",
    "CardSource",
    "card_from_seed",
    "Game",
    "AutoPlayed",
    "AddedToHand",
    "PlayError",
    "InvalidCardIndex",
    "CardUnplayable",
    "InvalidWildcardColor",
    "PlayerView",
    "Lobby",
    "NotEnoughPlayers",
    "Player",
    "Action",
    "PlayCard",
    "DrawCard",
    "TurnOutcome",
    "get_legal_actions",
    "take_action",
    "choose_wildcard_color",
    "finish_turn",
    "resolve_starting_card",
]
