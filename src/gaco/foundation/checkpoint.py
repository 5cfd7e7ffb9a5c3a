"""
Checkpointing utilities for saving and resuming optimization engines.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, TYPE_CHECKING, cast

if TYPE_CHECKING:
    from numpy.random import Generator

CHECKPOINT_VERSION = 1


def save_checkpoint(path: str | Path, state: dict[str, Any]) -> Path:
    """
    Save an engine state dictionary to a JSON checkpoint file.

    Args:
        path: File path for checkpoint (will add .json extension if missing).
        state: JSON-compatible state, e.g. from ``GACO.to_dict()``.

    Returns:
        Path to saved checkpoint file.
    """
    path = Path(path)
    if not path.suffix:
        path = path.with_suffix(".json")

    path.parent.mkdir(parents=True, exist_ok=True)

    checkpoint = {"version": CHECKPOINT_VERSION, "state": state}
    path.write_text(json.dumps(checkpoint), encoding="utf-8")
    return path


def load_checkpoint(path: str | Path) -> dict[str, Any]:
    """
    Load an engine state dictionary from a checkpoint file.

    Raises:
        FileNotFoundError: If checkpoint file doesn't exist.
        ValueError: If checkpoint version is unsupported.
    """
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"Checkpoint not found: {path}")

    checkpoint = cast(dict[str, Any], json.loads(path.read_text(encoding="utf-8")))

    version = checkpoint.get("version", 0)
    if version != CHECKPOINT_VERSION:
        raise ValueError(f"Unsupported checkpoint version: {version}")

    return cast(dict[str, Any], checkpoint["state"])


def restore_rng(rng: "Generator", state: dict[str, Any]) -> None:
    """
    Restore RNG state from a checkpoint.

    Args:
        rng: NumPy random generator to restore.
        state: State dict from ``rng.bit_generator.state``.
    """
    rng.bit_generator.state = state


__all__ = ["save_checkpoint", "load_checkpoint", "restore_rng"]
