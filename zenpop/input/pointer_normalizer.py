from __future__ import annotations
import math
from dataclasses import dataclass
from typing import Iterable, List, Optional, Tuple

from zenpop.api.frame_data import Point


@dataclass(frozen=True)
class CoverFit:
    """
    Uniform scale + centered crop that makes a sensor frame fully cover a
    surface (CSS `object-fit: cover`). Offsets are <= 0: the part of the
    scaled frame hanging off each side.
    """
    scale: float
    scaled_w: float
    scaled_h: float
    offset_x: float
    offset_y: float

    @classmethod
    def compute(cls, sensor_size: Tuple[float, float] | None,
                surface_size: Tuple[float, float]) -> Optional["CoverFit"]:
        if sensor_size is None:
            return None
        sw, sh = sensor_size
        cw, ch = surface_size
        for v in (sw, sh, cw, ch):
            if v is None or not math.isfinite(v) or v <= 0:
                return None
        scale = max(cw / sw, ch / sh)
        scaled_w = sw * scale
        scaled_h = sh * scale
        return cls(
            scale=scale,
            scaled_w=scaled_w,
            scaled_h=scaled_h,
            offset_x=(cw - scaled_w) / 2.0,
            offset_y=(ch - scaled_h) / 2.0,
        )


class PointerNormalizer:
    """
    Maps normalized sensor coordinates (0..1, origin top-left of the camera
    image) to surface pixels, matching a camera preview drawn cover-fitted and
    mirrored. Returns None when the sensor size is not known yet so a missing
    frame never turns into a pointer at (0, 0).
    """

    def __init__(self, mirror: bool = True):
        self.mirror = mirror

    def normalize(self, nx: float, ny: float,
                  sensor_size: Tuple[float, float] | None,
                  surface_size: Tuple[float, float]) -> Optional[Tuple[float, float]]:
        if not (math.isfinite(nx) and math.isfinite(ny)):
            return None
        fit = CoverFit.compute(sensor_size, surface_size)
        if fit is None:
            return None
        u = (1.0 - nx) if self.mirror else nx
        x = u * fit.scaled_w + fit.offset_x
        y = ny * fit.scaled_h + fit.offset_y
        return x, y

    def normalize_many(self, points: Iterable[Tuple[float, float]],
                       sensor_size: Tuple[float, float] | None,
                       surface_size: Tuple[float, float]) -> List[Point]:
        out: List[Point] = []
        for nx, ny in points:
            m = self.normalize(nx, ny, sensor_size, surface_size)
            if m is not None:
                out.append(Point(m[0], m[1]))
        return out
