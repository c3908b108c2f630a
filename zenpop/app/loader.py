from __future__ import annotations
import importlib.machinery
import importlib.util
import logging
import sys
from pathlib import Path
import yaml
from typing import Dict, Any

log = logging.getLogger(__name__)

GAMES_DIR = Path(__file__).resolve().parents[2] / "games"


def resolve_game_root(game_id: str, games_dir: Path | None = None) -> Path:
    root = (games_dir or GAMES_DIR) / game_id
    if not root.is_dir():
        raise FileNotFoundError(f"No game folder named {game_id!r} in {root.parent}")
    return root


def load_game_manifest(game_root: Path) -> Dict[str, Any]:
    manifest = game_root / "manifest.yaml"
    if not manifest.exists():
        raise FileNotFoundError(f"Missing manifest.yaml in {game_root}")
    with open(manifest, "r", encoding="utf-8") as f:
        data = yaml.safe_load(f) or {}
    if not isinstance(data, dict):
        raise ValueError(f"manifest.yaml in {game_root} must be a mapping")
    data.setdefault("options", {})
    data.setdefault("input", {})
    log.debug("Loaded manifest for %s: %s", game_root.name, data)
    return data


def load_game_module(game_root: Path):
    """
    Loads games/<id>/main.py module and returns the module object.
    The file must define a get_game() -> Game factory.

    The game folder is registered as a package first so main.py can use
    relative imports (``from .const import *``).
    """
    main_py = game_root / "main.py"
    if not main_py.exists():
        raise FileNotFoundError(f"Missing main.py in {game_root}")

    pkg_name = "game_" + game_root.name.replace("-", "_")
    pkg_spec = importlib.machinery.ModuleSpec(pkg_name, None, is_package=True)
    pkg_spec.submodule_search_locations = [str(game_root)]
    sys.modules[pkg_name] = importlib.util.module_from_spec(pkg_spec)

    spec = importlib.util.spec_from_file_location(f"{pkg_name}.main", main_py)
    assert spec and spec.loader
    module = importlib.util.module_from_spec(spec)
    sys.modules[spec.name] = module
    spec.loader.exec_module(module)  # type: ignore[attr-defined]
    if not hasattr(module, "get_game"):
        raise AttributeError("Game module must define get_game()")
    return module
