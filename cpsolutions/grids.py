"""Solutions to contest problems on character and number grids."""


class UnionFind:
    """Disjoint sets over ``0..size-1`` with union by rank and path compression."""

    def __init__(self, size):
        self._parent = list(range(size))
        self._rank = [0] * size

    def find(self, x):
        """Representative of the set holding ``x``."""
        root = x
        while self._parent[root] != root:
            root = self._parent[root]
        while self._parent[x] != root:
            following = self._parent[x]
            self._parent[x] = root
            x = following
        return root

    def union(self, x, y):
        """Merge the sets of ``x`` and ``y``; return whether they were separate."""
        root_x, root_y = self.find(x), self.find(y)
        if root_x == root_y:
            return False
        if self._rank[root_x] < self._rank[root_y]:
            root_x, root_y = root_y, root_x
        self._parent[root_y] = root_x
        if self._rank[root_x] == self._rank[root_y]:
            self._rank[root_x] += 1
        return True


def _rectangular(grid):
    rows = [str(row) for row in grid]
    if rows and any(len(row) != len(rows[0]) for row in rows):
        raise ValueError("grid rows must have equal length")
    return rows


def reduce_grid(grid, k):
    """Shrink a grid made of ``k`` by ``k`` uniform blocks to one cell per block."""
    if k < 1:
        raise ValueError("factor must be positive")
    rows = _rectangular(grid)
    size = len(rows) // k
    return [row[:size * k:k] for row in rows[:size * k:k]]


def count_regions(grid):
    """Number of 4-connected regions of free (``'.'``) cells."""
    rows = _rectangular(grid)
    width = len(rows[0]) if rows else 0
    free = {(r, c) for r, row in enumerate(rows) for c, cell in enumerate(row) if cell == "."}
    sets = UnionFind(len(rows) * width)
    for r, c in free:
        for neighbour in ((r, c + 1), (r + 1, c)):
            if neighbour in free:
                sets.union(r * width + c, neighbour[0] * width + neighbour[1])
    return len({sets.find(r * width + c) for r, c in free})


def count_critical_cells(grid):
    """Free cells whose blocking splits the grid into exactly three regions."""
    rows = [list(row) for row in _rectangular(grid)]
    count = 0
    for row in rows:
        for c, cell in enumerate(row):
            if cell != ".":
                continue
            row[c] = "x"
            if count_regions("".join(line) for line in rows) == 3:
                count += 1
            row[c] = "."
    return count


def beautiful_matrix_moves(matrix):
    """Row and column swaps to move the single 1 of a 5x5 matrix to its centre."""
    rows = [list(row) for row in matrix]
    if len(rows) != 5 or any(len(row) != 5 for row in rows):
        raise ValueError("matrix must be 5x5")
    ones = [(r, c) for r, row in enumerate(rows) for c, value in enumerate(row) if value == 1]
    if len(ones) != 1:
        raise ValueError("matrix must hold exactly one 1")
    (r, c), = ones
    return abs(r - 2) + abs(c - 2)


def snake_pattern(rows, cols):
    """The snake drawn with ``#`` on a ``rows`` by ``cols`` board of ``.``."""
    if rows < 0 or cols < 1:
        raise ValueError("board size must be positive")
    full = "#" * cols
    dots = "." * (cols - 1)
    return [
        full if index % 2 == 0 else (dots + "#" if index % 4 == 1 else "#" + dots)
        for index in range(rows)
    ]