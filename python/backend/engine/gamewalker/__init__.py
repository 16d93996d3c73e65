from backend.engine.gamewalker.walker import RandomWalker

__all__ = ["RandomWalker"]
