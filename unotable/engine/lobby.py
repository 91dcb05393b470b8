"""Pre-game player registration."""

import random
from typing import List, Optional

from unotable.engine.deck import CardSource
from unotable.engine.game import CardSupply, Game
from unotable.engine.player import Player

HAND_SIZE = 7
MIN_PLAYERS = 2


class NotEnoughPlayers(Exception):
    def __init__(self, number_of_players: int = 0):
        super().__init__(
            f"You cannot start the game until you have at least {MIN_PLAYERS} players!"
        )
        self.number_of_players = number_of_players


class Lobby:
    """Collects players until the game starts.

    A lobby is consumed by a successful start(): the players move into the
    returned Game and the lobby cannot be used again.
    """

    def __init__(self, seed: Optional[int] = None, card_source: Optional[CardSupply] = None):
        self._players: List[Player] = []
        self._rng = random.Random(seed)
        self._card_source = card_source
        self._started = False

    def _ensure_open(self) -> None:
        if self._started:
            raise RuntimeError("This lobby has already started a game")

    def add_player(self, name: str) -> bool:
        """Register a player. Returns False if the name is empty or already taken."""
        self._ensure_open()
        if not name.strip():
            return False
        if any(player.name == name for player in self._players):
            return False
        self._players.append(Player(name=name))
        return True

    def number_of_players(self) -> int:
        return len(self._players)

    def player_names(self) -> List[str]:
        return [player.name for player in self._players]

    def start(self) -> Game:
        """Deal 7 cards each, pick a random starting player and reveal the top card."""
        self._ensure_open()
        if len(self._players) < MIN_PLAYERS:
            raise NotEnoughPlayers(len(self._players))

        source = self._card_source
        if source is None:
            source = CardSource(seed=self._rng.getrandbits(32))

        game = Game(players=self._players, source=source)
        game.deal(HAND_SIZE, starting_player_index=self._rng.randrange(len(self._players)))

        self._players = []
        self._started = True
        return game
