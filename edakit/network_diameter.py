"""All-pairs shortest paths and the diameter of a social network."""

from __future__ import annotations

from typing import Iterable, Sequence, Union

from edakit.intinf import INFINITY, IntInf

Cost = Union[IntInf, int]


def _as_intinf(value: Cost) -> IntInf:
    return value if isinstance(value, IntInf) else IntInf(value)


def floyd(
    graph: Sequence[Sequence[Cost]],
) -> tuple[list[list[IntInf]], list[list[int]]]:
    """Return shortest costs and predecessors for an adjacency matrix.

    Missing edges are ``INFINITY``. ``previous[i][j]`` is the vertex before
    ``j`` on a best path from ``i``, or -1 when there is none.
    """
    costs = [[_as_intinf(value) for value in row] for row in graph]
    previous = [
        [i if i != j and not cost.is_infinite else -1 for j, cost in enumerate(row)]
        for i, row in enumerate(costs)
    ]
    for k, row_k in enumerate(costs):
        prev_k = previous[k]
        for row_i, prev_i in zip(costs, previous):
            through = row_i[k]
            for j, onward in enumerate(row_k):
                candidate = through + onward
                if candidate < row_i[j]:
                    row_i[j] = candidate
                    prev_i[j] = prev_k[j]
    return costs, previous


def path(source: int, target: int, previous: Sequence[Sequence[int]]) -> list[int]:
    """Rebuild the vertices of the best path from ``source`` to ``target``."""
    route = [target]
    while target != source:
        target = previous[source][target]
        if target < 0:
            raise ValueError("no path between the given vertices")
        route.append(target)
    route.reverse()
    return route


def diameter(people: int, relations: Iterable[tuple[str, str]]) -> IntInf:
    """Largest separation between two of ``people``; ``INFINITY`` if disconnected."""
    ids: dict[str, int] = {}

    def vertex(name: str) -> int:
        if name not in ids:
            if len(ids) >= people:
                raise ValueError("more names than people in the network")
            ids[name] = len(ids)
        return ids[name]

    graph: list[list[IntInf]] = [
        [IntInf(0) if i == j else INFINITY for j in range(people)]
        for i in range(people)
    ]
    for first, second in relations:
        a, b = vertex(first), vertex(second)
        graph[a][b] = IntInf(1)
        graph[b][a] = IntInf(1)
    costs, _ = floyd(graph)
    return max([IntInf(0), *(cost for row in costs for cost in row)])


def run(text: str) -> str:
    """Solve each ``P R`` case with ``R`` name pairs until the input ends."""
    tokens = iter(text.split())
    out = []
    for token in tokens:
        people = int(token)
        count = int(next(tokens))
        relations = [(next(tokens), next(tokens)) for _ in range(count)]
        result = diameter(people, relations)
        out.append("DESCONECTADA\n" if result == INFINITY else f"{result}\n")
    return "".join(out)