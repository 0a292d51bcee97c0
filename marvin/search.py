"""Weighted A* search over a cost grid with four-way movement."""

from typing import Iterator, List, Optional, Tuple

from marvin.grid import Grid

_MOVES = {"U", "D", "L", "R"}


class _MinHeap:
    """Binary min-heap of (priority, cell) pairs ordered by priority only.

    Equal priorities are never swapped, which fixes the order in which
    tied cells are expanded.
    """

    def __init__(self) -> None:
        self._items: List[Tuple[int, int]] = []

    def __len__(self) -> int:
        return len(self._items)

    def _swap(self, first: int, second: int) -> None:
        items = self._items
        items[first], items[second] = items[second], items[first]

    def push(self, cell: int, priority: int) -> None:
        items = self._items
        items.append((priority, cell))
        pos = len(items) - 1
        while pos > 0:
            parent = (pos - 1) // 2
            if items[parent][0] <= items[pos][0]:
                break
            self._swap(pos, parent)
            pos = parent

    def pop(self) -> int:
        items = self._items
        top = items[0]
        last = items.pop()
        if items:
            items[0] = last
            size = len(items)
            pos = 0
            while True:
                left = 2 * pos + 1
                right = left + 1
                smallest = pos
                if left < size and items[left][0] < items[smallest][0]:
                    smallest = left
                if right < size and items[right][0] < items[smallest][0]:
                    smallest = right
                if smallest == pos:
                    break
                self._swap(pos, smallest)
                pos = smallest
        return top[1]


def _neighbours(cell: int, rows: int, columns: int) -> Iterator[int]:
    row, column = divmod(cell, columns)
    if row > 0:
        yield cell - columns
    if row < rows - 1:
        yield cell + columns
    if column > 0:
        yield cell - 1
    if column < columns - 1:
        yield cell + 1


def find_path(grid: Grid, weight: int) -> Optional[List[int]]:
    """Return the cells from start to goal found by weighted A*.

    The heuristic is weight times the Manhattan distance to the goal.
    Returns None when the goal cannot be reached.
    """
    goal_row, goal_column = divmod(grid.goal, grid.columns)

    def heuristic(cell: int) -> int:
        row, column = divmod(cell, grid.columns)
        return weight * (abs(row - goal_row) + abs(column - goal_column))

    dist: List[Optional[int]] = [None] * grid.size
    parent: List[Optional[int]] = [None] * grid.size
    dist[grid.start] = 0
    frontier = _MinHeap()
    frontier.push(grid.start, heuristic(grid.start))
    while frontier:
        current = frontier.pop()
        if current == grid.goal:
            break
        base = dist[current]
        for cell in _neighbours(current, grid.rows, grid.columns):
            candidate = base + grid.cost(cell)
            if dist[cell] is None or candidate < dist[cell]:
                dist[cell] = candidate
                parent[cell] = current
                frontier.push(cell, candidate + heuristic(cell))

    if parent[grid.goal] is None and grid.goal != grid.start:
        return None
    path = []
    cell: Optional[int] = grid.goal
    while cell is not None:
        path.append(cell)
        cell = parent[cell]
    path.reverse()
    return path


def path_to_moves(path: List[int], columns: int) -> str:
    """Spell a path of cell indexes as U, D, L and R moves.

    Steps between cells that are not neighbours are left out.
    """
    directions = {-columns: "U", columns: "D", -1: "L", 1: "R"}
    return "".join(
        directions.get(after - before, "")
        for before, after in zip(path, path[1:])
    )


def solve(grid: Grid, weight: int) -> Optional[str]:
    """Return the moves from start to goal, or None when there is no path."""
    path = find_path(grid, weight)
    if path is None:
        return None
    return path_to_moves(path, grid.columns)