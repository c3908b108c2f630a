import argparse
import logging
import sys
from pathlib import Path
import os
os.environ['PYGAME_HIDE_SUPPORT_PROMPT'] = "hide"

# Ensure repo root is on sys.path
ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from zenpop.api.config import EngineConfig
from zenpop.app.loop import run_game


def setup_logging(verbose: bool) -> None:
    level = logging.DEBUG if verbose else logging.INFO
    logging.basicConfig(
        level=level,
        format="%(asctime)s.%(msecs)03d %(levelname)s %(name)s: %(message)s",
        datefmt="%H:%M:%S",
    )


def main():
    parser = argparse.ArgumentParser(description="Zen Pop Launcher")
    parser.add_argument("--game", default="zen-bubbles", help="Game folder name under games/")
    parser.add_argument("--screen", default="1280x720", help="Window size WxH, e.g. 1280x720")
    parser.add_argument("--cam-index", type=int, default=0, help="OpenCV camera index")
    parser.add_argument("--max-hands", type=int, default=2, help="Hands to track")
    parser.add_argument("--no-hands", action="store_true", help="Disable camera hand tracking")
    parser.add_argument("--mouse", action="store_true", help="Pop bubbles with mouse / touch")
    parser.add_argument("--mirror-off", action="store_true", help="Do not mirror the camera view")
    parser.add_argument("--fps", type=int, default=60, help="Frame rate cap")
    parser.add_argument("--verbose", action="store_true", help="Verbose logging")
    args = parser.parse_args()

    setup_logging(args.verbose)
    w, h = map(int, args.screen.lower().split("x"))

    cfg = EngineConfig(
        screen_size=(w, h),
        cam_index=args.cam_index,
        hands=not args.no_hands,
        max_hands=args.max_hands,
        mirror=not args.mirror_off,
        mouse=args.mouse or args.no_hands,
        fps=args.fps,
    )
    run_game(args.game, cfg)


if __name__ == "__main__":
    main()
