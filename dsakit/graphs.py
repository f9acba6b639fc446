"""Graph traversals, shortest paths, safe nodes and strongly connected components."""

from __future__ import annotations

import argparse
import sys
from collections import deque
from collections.abc import Iterable, Sequence

Adjacency = Sequence[Sequence[int]]

_UNVISITED, _ON_PATH, _SAFE, _UNSAFE = range(4)


def build_undirected(n: int, edges: Iterable[tuple[int, int]]) -> list[list[int]]:
    """Return the adjacency lists of an undirected graph on nodes ``0..n-1``."""
    if n < 0:
        raise ValueError("node count must not be negative")
    adj: list[list[int]] = [[] for _ in range(n)]
    for u, v in edges:
        if not (0 <= u < n and 0 <= v < n):
            raise ValueError(f"edge ({u}, {v}) has a node outside 0..{n - 1}")
        adj[u].append(v)
        adj[v].append(u)
    return adj


def _check_node(adj: Adjacency, node: int) -> None:
    if not 0 <= node < len(adj):
        raise IndexError(f"node {node} is not in the graph")


def bfs_distances(adj: Adjacency, source: int) -> list[int | None]:
    """Return the edge count from ``source`` to each node; None if unreachable."""
    _check_node(adj, source)
    dist: list[int | None] = [None] * len(adj)
    dist[source] = 0
    queue = deque([source])
    while queue:
        node = queue.popleft()
        for child in adj[node]:
            if dist[child] is None:
                dist[child] = dist[node] + 1
                queue.append(child)
    return dist


def bfs_order(adj: Adjacency, source: int) -> list[int]:
    """Return the nodes reachable from ``source`` in breadth-first order."""
    return [node for level in bfs_levels(adj, source) for node in level]


def bfs_levels(adj: Adjacency, source: int) -> list[list[int]]:
    """Return the reachable nodes grouped by their distance from ``source``."""
    _check_node(adj, source)
    visited = [False] * len(adj)
    visited[source] = True
    levels: list[list[int]] = []
    current = [source]
    while current:
        levels.append(current)
        following: list[int] = []
        for node in current:
            for child in adj[node]:
                if not visited[child]:
                    visited[child] = True
                    following.append(child)
        current = following
    return levels


def shortest_path(adj: Adjacency, source: int, target: int) -> list[int] | None:
    """Return a shortest path from ``source`` to ``target``, or None if there is none."""
    _check_node(adj, source)
    _check_node(adj, target)
    parent: list[int | None] = [None] * len(adj)
    reached = [False] * len(adj)
    reached[source] = True
    queue = deque([source])
    while queue:
        node = queue.popleft()
        for child in adj[node]:
            if not reached[child]:
                reached[child] = True
                parent[child] = node
                queue.append(child)
    if not reached[target]:
        return None
    path = [target]
    while path[-1] != source:
        path.append(parent[path[-1]])
    path.reverse()
    return path


def dfs(adj: Adjacency, source: int) -> list[int]:
    """Return the nodes reachable from ``source`` in depth-first preorder."""
    _check_node(adj, source)
    visited = [False] * len(adj)
    visited[source] = True
    order = [source]
    stack = [iter(adj[source])]
    while stack:
        for child in stack[-1]:
            if not visited[child]:
                visited[child] = True
                order.append(child)
                stack.append(iter(adj[child]))
                break
        else:
            stack.pop()
    return order


def eventual_safe_nodes(graph: Adjacency) -> list[int]:
    """Return, ascending, the nodes of a directed graph from which no cycle is reachable."""
    n = len(graph)
    state = [_UNVISITED] * n
    reaches_cycle = [False] * n
    for start in range(n):
        if state[start] != _UNVISITED:
            continue
        state[start] = _ON_PATH
        stack = [(start, iter(graph[start]))]
        while stack:
            node, children = stack[-1]
            for child in children:
                child_state = state[child]
                if child_state == _UNVISITED:
                    state[child] = _ON_PATH
                    stack.append((child, iter(graph[child])))
                    break
                if child_state in (_ON_PATH, _UNSAFE):
                    reaches_cycle[node] = True
            else:
                stack.pop()
                state[node] = _UNSAFE if reaches_cycle[node] else _SAFE
                if stack and state[node] == _UNSAFE:
                    reaches_cycle[stack[-1][0]] = True
    return [node for node in range(n) if state[node] == _SAFE]


def count_strongly_connected(adj: Adjacency) -> int:
    """Return the number of strongly connected components (Kosaraju's algorithm)."""
    n = len(adj)
    visited = [False] * n
    finished: list[int] = []
    for start in range(n):
        if visited[start]:
            continue
        visited[start] = True
        stack = [(start, iter(adj[start]))]
        while stack:
            node, children = stack[-1]
            for child in children:
                if not visited[child]:
                    visited[child] = True
                    stack.append((child, iter(adj[child])))
                    break
            else:
                stack.pop()
                finished.append(node)

    transposed: list[list[int]] = [[] for _ in range(n)]
    for node, children in enumerate(adj):
        for child in children:
            transposed[child].append(node)

    assigned = [False] * n
    components = 0
    for start in reversed(finished):
        if assigned[start]:
            continue
        components += 1
        assigned[start] = True
        pending = [start]
        while pending:
            node = pending.pop()
            for child in transposed[node]:
                if not assigned[child]:
                    assigned[child] = True
                    pending.append(child)
    return components


def main(argv: Sequence[str] | None = None) -> int:
    """Read ``n`` and ``n`` undirected edges; print a shortest path from 0 to n-1."""
    parser = argparse.ArgumentParser(
        description="Print a shortest path from node 1 to node n of an undirected graph."
    )
    parser.add_argument(
        "input", nargs="?", default="-", help="input file ('-' for standard input)"
    )
    args = parser.parse_args(argv)

    if args.input == "-":
        text = sys.stdin.read()
    else:
        with open(args.input, encoding="utf-8") as handle:
            text = handle.read()

    tokens = text.split()
    try:
        n = int(tokens[0])
        numbers = [int(token) for token in tokens[1 : 1 + 2 * n]]
    except (IndexError, ValueError):
        parser.error("input must start with a node count followed by integer edges")
    if n < 1 or len(numbers) < 2 * n:
        parser.error(f"expected a positive node count and {n} edges")

    try:
        adj = build_undirected(n, zip(numbers[::2], numbers[1::2]))
    except ValueError as exc:
        parser.error(str(exc))

    path = shortest_path(adj, 0, n - 1)
    if path is None:
        print("IMPOSSIBLE TO REACH n-1 node since no path available")
    else:
        print(len(path))
        print(" ".join(str(node + 1) for node in path))
    return 0


if __name__ == "__main__":
    sys.exit(main())