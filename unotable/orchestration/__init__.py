"""Game orchestration."""

from unotable.orchestration.game_runner import GameResult, GameRunner
from unotable.orchestration.registration import register_players

__all__ = ["GameResult", "GameRunner", "register_players"]
