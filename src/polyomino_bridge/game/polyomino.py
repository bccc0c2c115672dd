from __future__ import annotations

import random
from typing import List, Optional, Tuple

import numpy as np


Coordinate = Tuple[int, int]

# Expansion order used while growing a shape: up, left, right, down.
NEIGHBOR_OFFSETS: Tuple[Coordinate, ...] = ((0, -1), (-1, 0), (1, 0), (0, 1))


def is_placable(cell: Coordinate) -> bool:
    """Growth is limited to the half-plane y >= 0, with x >= 0 on the y == 0 row."""
    x, y = cell
    return y > 0 or (y == 0 and x >= 0)


class Polyomino:
    """A connected set of grid cells with its top-left corner at (0, 0).

    Cells are kept in generation order as an ``(n, 2)`` integer array of
    ``(x, y)`` rows. ``size`` is ``(width, height)`` of the bounding box.
    """

    def __init__(self, cells, size: Optional[Coordinate] = None) -> None:
        self.cells = np.asarray(cells, dtype=np.int64).reshape(-1, 2)
        if self.cells.shape[0] == 0:
            raise ValueError("a polyomino needs at least one cell")
        self._normalize()
        if size is None:
            bottom_right = self.bottom_right()
            size = (bottom_right[0] + 1, bottom_right[1] + 1)
        self.size: Coordinate = (int(size[0]), int(size[1]))

    def __len__(self) -> int:
        return int(self.cells.shape[0])

    def __repr__(self) -> str:
        return f"Polyomino(cells={self.points()}, size={self.size})"

    @property
    def width(self) -> int:
        return self.size[0]

    @property
    def height(self) -> int:
        return self.size[1]

    def points(self) -> List[Coordinate]:
        return [(int(x), int(y)) for x, y in self.cells]

    def top_left(self) -> Coordinate:
        mins = self.cells.min(axis=0)
        return int(mins[0]), int(mins[1])

    def bottom_right(self) -> Coordinate:
        maxs = self.cells.max(axis=0)
        return int(maxs[0]), int(maxs[1])

    def _normalize(self) -> None:
        self.cells = self.cells - np.array(self.top_left(), dtype=np.int64)

    def rotate_right(self) -> None:
        # (x, y) -> (-y, x)
        self.cells = np.column_stack((-self.cells[:, 1], self.cells[:, 0]))
        self._normalize()
        self.size = (self.size[1], self.size[0])

    def rotate_left(self) -> None:
        # (x, y) -> (y, -x)
        self.cells = np.column_stack((self.cells[:, 1], -self.cells[:, 0]))
        self._normalize()
        self.size = (self.size[1], self.size[0])

    def column_rows(self, column: int) -> List[int]:
        """Sorted local y values of the cells in ``column``."""
        rows = self.cells[self.cells[:, 0] == column, 1]
        return sorted(set(int(y) for y in rows))

    def left_edge_rows(self) -> List[int]:
        return self.column_rows(0)

    def right_edge_rows(self) -> List[int]:
        return self.column_rows(self.bottom_right()[0])

    def cells_at(self, origin_x: int, origin_y: int) -> List[Coordinate]:
        return [(origin_x + int(x), origin_y + int(y)) for x, y in self.cells]

    def to_mask(self, shape: Optional[Tuple[int, int]] = None) -> np.ndarray:
        """0/1 bitmap indexed ``[y, x]``; padded with zeros up to ``shape``."""
        h, w = shape if shape is not None else (self.height, self.width)
        mask = np.zeros((h, w), dtype=np.int8)
        for x, y in self.cells:
            if y < h and x < w:
                mask[y, x] = 1
        return mask


class PolyominoGenerator:
    """Grows random polyominoes by a forward-biased walk over a frontier list.

    The frontier is append-only. Each pick is drawn uniformly from the entries
    after the previously picked one, so growth keeps moving into freshly
    discovered cells.
    """

    def __init__(self, rng: Optional[random.Random] = None) -> None:
        self.rng = rng or random.Random()

    def generate(self, n: int) -> Polyomino:
        if n < 1:
            raise ValueError(f"polyomino cell count must be >= 1, got {n}")

        point: Coordinate = (0, 0)
        cells: List[Coordinate] = [point]
        placed = {point}
        frontier: List[Coordinate] = [point]
        known = {point}
        cursor = 0

        for _ in range(n - 1):
            px, py = point
            for dx, dy in NEIGHBOR_OFFSETS:
                candidate = (px + dx, py + dy)
                if is_placable(candidate) and candidate not in known:
                    frontier.append(candidate)
                    known.add(candidate)
            cursor = self._pick(frontier, placed, cursor)
            point = frontier[cursor]
            cells.append(point)
            placed.add(point)

        return Polyomino(cells)

    def _pick(self, frontier: List[Coordinate], placed: set, cursor: int) -> int:
        ahead = [i for i in range(cursor + 1, len(frontier)) if frontier[i] not in placed]
        if ahead:
            return self.rng.choice(ahead)
        # Every entry past the cursor is used up; fall back to any unplaced one.
        remaining = [i for i, cell in enumerate(frontier) if cell not in placed]
        return self.rng.choice(remaining)
