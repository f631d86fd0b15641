#!/usr/bin/env python3
"""
Timed reveal schedule for animating a finished search.

Visited cell i is revealed at i * visit_ms; path cell j at
len(visited) * visit_ms + j * path_ms. Start and finish keep their own
marker, so their events are dropped, but they still occupy a time slot.
"""

from dataclasses import dataclass
from typing import List, Sequence

from gridpath.core.types import Cell, Coord


@dataclass(frozen=True)
class RevealEvent:
    at_ms: int
    kind: str        # "visited" | "path"
    coord: Coord


def reveal_schedule(visited: Sequence[Cell], path: Sequence[Cell],
                    start: Coord, finish: Coord,
                    visit_ms: int = 20, path_ms: int = 30) -> List[RevealEvent]:
    endpoints = {tuple(start), tuple(finish)}
    events: List[RevealEvent] = []
    for i, cell in enumerate(visited):
        if cell.coord in endpoints:
            continue
        events.append(RevealEvent(i * visit_ms, "visited", cell.coord))

    offset = len(visited) * visit_ms
    for j, cell in enumerate(path):
        if cell.coord in endpoints:
            continue
        events.append(RevealEvent(offset + j * path_ms, "path", cell.coord))

    # stable: a visited and a path event at the same instant keep visited first
    events.sort(key=lambda e: e.at_ms)
    return events


def events_due(schedule: Sequence[RevealEvent], elapsed_ms: float) -> List[RevealEvent]:
    return [e for e in schedule if e.at_ms <= elapsed_ms]


def total_duration(schedule: Sequence[RevealEvent]) -> int:
    return schedule[-1].at_ms if schedule else 0
