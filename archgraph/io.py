# archgraph/io.py
from __future__ import annotations

import json
from pathlib import Path
from typing import Any

import yaml

from .constants import MERGED_SECTIONS, MODEL_SUFFIXES


def _yaml_error_message(path: Path, error: yaml.YAMLError) -> str:
    """Point at the offending line; most failures are unquoted `a: b` text."""
    mark = getattr(error, "problem_mark", None)
    where = f"{path}:{mark.line + 1}:{mark.column + 1}" if mark is not None else str(path)
    problem = getattr(error, "problem", None) or str(error)
    hint = ""
    if "mapping values are not allowed" in problem:
        hint = " (quote descriptions or names that contain ': ')"
    return f"Failed to parse YAML {where}: {problem}{hint}"


def _load_yaml_mapping(path: Path) -> dict[str, Any]:
    try:
        data = yaml.safe_load(path.read_text(encoding="utf-8"))
    except yaml.YAMLError as e:
        raise ValueError(_yaml_error_message(path, e)) from e

    # An empty part file contributes nothing.
    if data is None:
        return {}
    if not isinstance(data, dict):
        raise TypeError(
            f"Top-level YAML must be a mapping in {path}, got {type(data).__name__}"
        )
    return data


def _load_json_mapping(path: Path) -> dict[str, Any]:
    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except json.JSONDecodeError as e:
        raise ValueError(f"Failed to parse JSON {path}: {e}") from e

    if not isinstance(data, dict):
        raise TypeError(
            f"Top-level JSON must be an object in {path}, got {type(data).__name__}"
        )
    return data


def _merge_part(model: dict[str, Any], part: dict[str, Any], *, part_path: Path) -> None:
    """Append a part's `nodes`/`links` to the model; other keys must agree."""
    for key, value in part.items():
        if key in MERGED_SECTIONS:
            if value is None:
                continue
            if not isinstance(value, list):
                raise TypeError(
                    f"{part_path}: `{key}` must be a list, got {type(value).__name__}"
                )
            model.setdefault(key, []).extend(value)
        elif key not in model:
            model[key] = value
        elif model[key] != value:
            raise ValueError(
                f"Model merge conflict on key {key!r} from {part_path}: "
                f"{model[key]!r} != {value!r}"
            )


def load_model(path: Path) -> dict[str, Any]:
    """Load a raw graph model from a YAML/JSON file or a directory of YAML parts.

    Parts of a directory are merged in filename order, so prefix them
    (e.g. 10_nodes.yaml, 20_links.yaml) to keep `nodes` and `links` ordered.
    """
    if not path.exists():
        raise FileNotFoundError(str(path))

    if path.is_dir():
        model: dict[str, Any] = {}
        for part_path in sorted(p for p in path.iterdir() if p.suffix in MODEL_SUFFIXES):
            _merge_part(model, _load_yaml_mapping(part_path), part_path=part_path)
        return model

    if path.suffix == ".json":
        return _load_json_mapping(path)
    return _load_yaml_mapping(path)
