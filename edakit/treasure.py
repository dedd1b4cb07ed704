"""Choose underwater chests that maximise gold within the air supply."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Sequence


@dataclass(frozen=True)
class Chest:
    """A chest at ``depth`` holding ``gold``; reaching it costs ``3 * depth`` air."""

    depth: int
    gold: int

    @property
    def cost(self) -> int:
        return 3 * self.depth


def best_treasure(chests: Sequence[Chest], air: int) -> tuple[int, list[Chest]]:
    """Return the greatest gold obtainable and the chests, in input order."""
    if air < 0:
        raise ValueError("air supply cannot be negative")
    table = [[0] * (air + 1)]
    for chest in chests:
        above = table[-1]
        row = [
            above[j]
            if chest.cost > j
            else max(above[j], above[j - chest.cost] + chest.gold)
            for j in range(air + 1)
        ]
        row[0] = 0
        table.append(row)
    chosen: list[Chest] = []
    remaining = air
    for i in range(len(chests), 0, -1):
        if remaining <= 0:
            break
        if table[i][remaining] != table[i - 1][remaining]:
            chest = chests[i - 1]
            chosen.append(chest)
            remaining -= chest.cost
    chosen.reverse()
    return table[-1][air], chosen


def run(text: str) -> str:
    """Solve each ``T N`` case with ``N`` depth/gold pairs until the input ends."""
    tokens = iter(text.split())
    out = []
    for token in tokens:
        air = int(token)
        count = int(next(tokens))
        chests = [Chest(int(next(tokens)), int(next(tokens))) for _ in range(count)]
        value, chosen = best_treasure(chests, air)
        out.append(f"{value}\n{len(chosen)}\n")
        out.extend(f"{chest.depth} {chest.gold}\n" for chest in chosen)
        out.append("---\n")
    return "".join(out)