from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, List, Optional, Tuple

from .polyomino import Coordinate, Polyomino


@dataclass(frozen=True)
class PlacementResult:
    accepted: bool
    right_edge: Tuple[int, ...] = ()


def touches(right_edge: Iterable[int], left_edge: Iterable[int]) -> bool:
    """True when the two row sets share at least one row."""
    return not set(right_edge).isdisjoint(left_edge)


class BridgeTrack:
    """The placed cells of the bridge and its current attachment surface.

    ``right_edge`` holds the absolute rows of the rightmost column of the most
    recently placed piece. A new piece is accepted only if its left column
    shares a row with it.
    """

    def __init__(self) -> None:
        self.cells: List[Coordinate] = []
        self.right_edge: Tuple[int, ...] = ()

    def reset(self) -> None:
        self.cells = []
        self.right_edge = ()

    @property
    def is_empty(self) -> bool:
        return not self.right_edge

    def left_edge_at(self, piece: Polyomino, position: Coordinate) -> List[int]:
        return [position[1] + y for y in piece.left_edge_rows()]

    def right_edge_at(self, piece: Polyomino, position: Coordinate) -> Tuple[int, ...]:
        return tuple(position[1] + y for y in piece.right_edge_rows())

    def can_place(self, piece: Polyomino, position: Coordinate, bridge_is_empty: Optional[bool] = None) -> bool:
        empty = self.is_empty if bridge_is_empty is None else bridge_is_empty
        return empty or touches(self.right_edge, self.left_edge_at(piece, position))

    def try_place(
        self,
        piece: Polyomino,
        position: Coordinate,
        bridge_is_empty: Optional[bool] = None,
    ) -> PlacementResult:
        """Attach ``piece`` at ``position`` if it touches the bridge.

        A rejected placement leaves the bridge untouched.
        """
        if not self.can_place(piece, position, bridge_is_empty):
            return PlacementResult(accepted=False)

        self.cells.extend(piece.cells_at(position[0], position[1]))
        self.right_edge = self.right_edge_at(piece, position)
        return PlacementResult(accepted=True, right_edge=self.right_edge)

    @staticmethod
    def next_origin(position: Coordinate, piece: Polyomino, next_height: int) -> Coordinate:
        """Where the following piece starts: right after ``piece``, just above the lane."""
        return position[0] + piece.width, -next_height
