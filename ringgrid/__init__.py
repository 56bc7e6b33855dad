"""
Ring Grid - Ring stacking strategy game engine

Players place small, medium and large rings of their color on a 3x3
board of stacking cells. The package provides:
- The rules engine (turns, legality, win detection)
- An in-memory session registry
- A REST API over both
"""

__version__ = "0.1.0"
