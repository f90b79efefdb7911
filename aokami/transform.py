"""Condense the data generator's output into compact JSON documents."""

from __future__ import annotations

import json
from os import PathLike
from pathlib import Path
from typing import Any


def get_output_path(root: str | PathLike[str]) -> Path:
    """Directory under ``root`` that receives transformed files."""
    return Path(root) / "transformed"


def _default_state_id(states: list[Any]) -> int:
    default = next(
        (state for state in states if isinstance(state, dict) and state.get("default") is True),
        None,
    )
    if default is not None:
        state_id = default.get("id")
        if isinstance(state_id, int) and not isinstance(state_id, bool):
            if -(2**63) <= state_id < 2**63:
                return state_id
    raise ValueError("no default state with an integer id")


def transform_blocks(path: str | PathLike[str]) -> dict[str, int]:
    """Map every block id in a blocks report to the id of its default state."""
    contents = Path(path).read_text(encoding="utf-8")
    try:
        blocks = json.loads(contents)
    except json.JSONDecodeError as exc:
        raise ValueError(f"failed to parse blocks: {exc}") from exc
    if not isinstance(blocks, dict):
        raise ValueError("failed to parse blocks: expected an object")

    transformed: dict[str, int] = {}
    for block_id, properties in blocks.items():
        states = properties.get("states") if isinstance(properties, dict) else None
        if not isinstance(states, list):
            continue
        transformed[block_id] = _default_state_id(states)
    return transformed


def transform_registries(
    root_dir: str | PathLike[str], registries: list[str]
) -> dict[str, dict[str, Any]]:
    """Collect the JSON entries of each named registry, keyed by namespaced names."""
    transformed: dict[str, dict[str, Any]] = {}
    for registry in registries:
        registry_dir = Path(root_dir) / "minecraft" / registry
        entries: dict[str, Any] = {}
        for entry_path in sorted(registry_dir.iterdir()):
            if not entry_path.is_file():
                print(f"Encountered a non-file registry: {entry_path}. It will be skipped.")
                print(
                    "Hint: if you want to transform a registry like worldgen/biome, "
                    "include its name as is."
                )
                continue
            entries[f"minecraft:{entry_path.stem}"] = json.loads(
                entry_path.read_text(encoding="utf-8")
            )
        transformed[f"minecraft:{registry}"] = entries
    return transformed