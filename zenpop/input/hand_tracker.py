from __future__ import annotations
import logging
import threading
import time
from dataclasses import dataclass, field
from typing import List, Sequence, Tuple

import cv2
import mediapipe as mp

from zenpop.sync.latest import LatestValue
from zenpop.video.camera import Camera

log = logging.getLogger(__name__)

INDEX_FINGER_TIP = 8


@dataclass
class HandResult:
    timestamp: float
    # (width, height) of the camera frame the landmarks refer to
    frame_size: Tuple[int, int]
    # normalized (x, y) of the tracked landmarks, all hands flattened
    tips: List[Tuple[float, float]] = field(default_factory=list)
    # every landmark of every hand, for drawing the skeleton
    hands: List[List[Tuple[float, float]]] = field(default_factory=list)
    frame: object = None


class HandTracker:
    """
    Runs camera capture + mediapipe Hands on a background thread and keeps
    only the newest HandResult in `latest`. The frame loop polls `latest`.
    """

    def __init__(self, camera: Camera, max_hands: int = 2,
                 landmarks: Sequence[int] = (INDEX_FINGER_TIP,),
                 min_detection_confidence: float = 0.5,
                 min_tracking_confidence: float = 0.5):
        self.camera = camera
        self.max_hands = max_hands
        self.landmarks = tuple(int(i) for i in landmarks)
        self.min_detection_confidence = min_detection_confidence
        self.min_tracking_confidence = min_tracking_confidence
        self.latest: LatestValue[HandResult] = LatestValue()
        self._stop = threading.Event()
        self._thread: threading.Thread | None = None

    def start(self) -> None:
        if self._thread is not None:
            return
        self._stop.clear()
        self._thread = threading.Thread(target=self._run, name="hand-tracker", daemon=True)
        self._thread.start()

    def stop(self) -> None:
        self._stop.set()
        if self._thread is not None:
            self._thread.join(timeout=2.0)
            self._thread = None

    def _run(self) -> None:
        mp_hands = mp.solutions.hands
        with mp_hands.Hands(
            model_complexity=0,
            max_num_hands=self.max_hands,
            min_detection_confidence=self.min_detection_confidence,
            min_tracking_confidence=self.min_tracking_confidence,
        ) as hands:
            while not self._stop.is_set():
                ok, frame = self.camera.read()
                if not ok or frame is None:
                    time.sleep(0.01)
                    continue
                try:
                    rgb = cv2.cvtColor(frame, cv2.COLOR_BGR2RGB)
                    results = hands.process(rgb)
                except Exception:
                    log.exception("Hand detection failed; skipping frame")
                    continue
                self.latest.put(self._to_result(results, frame))

    def _to_result(self, results, frame) -> HandResult:
        h, w = frame.shape[:2]
        out = HandResult(timestamp=time.time(), frame_size=(w, h), frame=frame)
        for hand in results.multi_hand_landmarks or []:
            pts = [(lm.x, lm.y) for lm in hand.landmark]
            out.hands.append(pts)
            for i in self.landmarks:
                if 0 <= i < len(pts):
                    out.tips.append(pts[i])
        return out
