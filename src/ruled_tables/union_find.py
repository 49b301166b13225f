"""Disjoint-set over flat integer indices ``0..n-1``."""


class UnionFind:
    """Union-find with path compression and union by rank."""

    def __init__(self, n: int):
        self.parent: list[int] = list(range(n))
        self.rank: list[int] = [0] * n

    def __len__(self) -> int:
        return len(self.parent)

    def find(self, x: int) -> int:
        """Return the root of *x*, pointing every node on the path directly at it."""
        root = x
        while self.parent[root] != root:
            root = self.parent[root]
        while self.parent[x] != root:
            self.parent[x], x = root, self.parent[x]
        return root

    def union(self, a: int, b: int) -> bool:
        """Merge the sets holding *a* and *b*.  Returns False if already joined."""
        ra, rb = self.find(a), self.find(b)
        if ra == rb:
            return False
        if self.rank[ra] < self.rank[rb]:
            self.parent[ra] = rb
        elif self.rank[ra] > self.rank[rb]:
            self.parent[rb] = ra
        else:
            self.parent[rb] = ra
            self.rank[ra] += 1
        return True

    def groups(self) -> list[list[int]]:
        """Return the members of every set.

        Sets are ordered by the first index (ascending) that resolves to their
        root, and members within a set are ascending.
        """
        by_root: dict[int, list[int]] = {}
        for i in range(len(self.parent)):
            by_root.setdefault(self.find(i), []).append(i)
        return list(by_root.values())
