"""Game module for Polyomino Bridge.

Exports the core game engine and supporting classes:
- Polyomino / PolyominoGenerator: random connected shapes and their rotation
- BridgeTrack: placed cells and the contact test for the next piece
- ScoringRules / ScoreBoard: points, fall speed and the high score
- BridgeGame: per-frame game loop and state
- Session: title/game scene switching
"""

from .polyomino import Polyomino, PolyominoGenerator, is_placable
from .bridge import BridgeTrack, PlacementResult, touches
from .rules import ScoreBoard, ScoringRules
from .core import Action, BridgeGame, GameConfig
from .session import Scene, Session

__all__ = [
    "Polyomino",
    "PolyominoGenerator",
    "is_placable",
    "BridgeTrack",
    "PlacementResult",
    "touches",
    "ScoreBoard",
    "ScoringRules",
    "Action",
    "BridgeGame",
    "GameConfig",
    "Scene",
    "Session",
]
