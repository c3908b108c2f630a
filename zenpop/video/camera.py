from __future__ import annotations
import sys
import cv2
from typing import Tuple, Optional


class Camera:
    def __init__(self, index: int, target_size: Tuple[int, int] = (1280, 720), fps: int = 30):
        self.index = index
        self.target_size = target_size
        self.fps = fps
        self.cap: Optional[cv2.VideoCapture] = None
        # size of the last frame actually delivered; (0, 0) until one arrives
        self.frame_size: Tuple[int, int] = (0, 0)

    def open(self) -> bool:
        backend = cv2.CAP_DSHOW if sys.platform.startswith("win") else 0
        self.cap = cv2.VideoCapture(self.index, backend)
        w, h = self.target_size
        self.cap.set(cv2.CAP_PROP_FRAME_WIDTH, w)
        self.cap.set(cv2.CAP_PROP_FRAME_HEIGHT, h)
        self.cap.set(cv2.CAP_PROP_FPS, self.fps)
        return bool(self.cap.isOpened())

    def read(self):
        if self.cap is None:
            return False, None
        ok, frame = self.cap.read()
        if ok and frame is not None:
            h, w = frame.shape[:2]
            self.frame_size = (w, h)
        return ok, frame

    def close(self):
        if self.cap is not None:
            self.cap.release()
            self.cap = None
