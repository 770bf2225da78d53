"""Frontier search and breadth-first path planning on a GridMap."""

from __future__ import annotations

from collections import deque

from gridbot.gridmap import Cell, GridMap, Point

# up, down, left, right
_DIRECTIONS = ((-1, 0), (1, 0), (0, -1), (0, 1))


class Explorer:
    """Chooses exploration targets and plans paths over free cells."""

    def __init__(self, grid_map: GridMap) -> None:
        self.grid_map = grid_map

    def _neighbours(self, row: int, col: int):
        for dr, dc in _DIRECTIONS:
            nr, nc = row + dr, col + dc
            if self.grid_map.in_bounds(nr, nc):
                yield nr, nc

    def _is_frontier(self, row: int, col: int) -> bool:
        return self.grid_map.get_cell(row, col) is Cell.FREE and any(
            self.grid_map.get_cell(nr, nc) is Cell.UNKNOWN
            for nr, nc in self._neighbours(row, col)
        )

    def find_nearest_frontier_cell(self, start: Point) -> Point:
        """Return the free cell next to unknown space nearest to start.

        Distance is Manhattan; ties go to the first cell in row-major order.
        If there is no frontier, start is returned.
        """
        best = start
        best_dist = self.grid_map.rows * self.grid_map.cols
        for r in range(self.grid_map.rows):
            for c in range(self.grid_map.cols):
                if not self._is_frontier(r, c):
                    continue
                dist = abs(r - start.row) + abs(c - start.col)
                if dist < best_dist:
                    best_dist = dist
                    best = Point(r, c)
        return best

    def plan_path_to(self, start: Point, goal: Point) -> list[Point]:
        """Return the shortest 4-connected path over free cells, or [] if none."""
        if start == goal:
            return [start]

        parents: dict[Point, Point] = {}
        visited = {start}
        queue = deque([start])
        found = False
        while queue:
            current = queue.popleft()
            if current == goal:
                found = True
                break
            for nr, nc in self._neighbours(current.row, current.col):
                nxt = Point(nr, nc)
                if nxt in visited or self.grid_map.get_cell(nr, nc) is not Cell.FREE:
                    continue
                visited.add(nxt)
                parents[nxt] = current
                queue.append(nxt)

        if not found:
            return []

        path = [goal]
        while path[-1] != start:
            path.append(parents[path[-1]])
        path.reverse()
        return path