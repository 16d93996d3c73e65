from backend.engine.gameplay.game import GamePlay
from backend.engine.gameplay.rules import DIRECTIONS, MoveRules

__all__ = ["DIRECTIONS", "GamePlay", "MoveRules"]
