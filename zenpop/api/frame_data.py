from __future__ import annotations
from dataclasses import dataclass, field
from typing import Any, Dict, List


@dataclass
class Point:
    x: float
    y: float
    intensity: float = 1.0


@dataclass
class FrameData:
    timestamp: float
    # e.g. {"hand": [Point, ...], "mouse": [...]} (already mapped to screen coords)
    points_by_source: Dict[str, List[Point]] = field(default_factory=dict)
    # full hand skeletons in screen coords, for drawing only
    hands: List[List[Point]] = field(default_factory=list)
    # BGR camera frame the hand points came from, or None
    camera_frame: Any = None

    def all_points(self) -> List[Point]:
        out: List[Point] = []
        for pts in self.points_by_source.values():
            out.extend(pts)
        return out
