"""
Loaders turn serialized line files into the shape VariantStore.bulk_load accepts:
a dict mapping each key to a set of unique line strings.

JSON:  {"combat.encounter": ["You encounter {{enemy}}!", "Oh no! It's {{enemy}}!"]}
TOML:  "combat.encounter" = ["You encounter {{enemy}}!", "Oh no! It's {{enemy}}!"]
"""

from __future__ import annotations

import json
import tomllib
from pathlib import Path
from typing import Any, Dict, Set, Union

from pydantic import TypeAdapter, ValidationError

from hottext.errors import LoaderError

LinePairs = Dict[str, Set[str]]

PathLike = Union[str, Path]

_LINE_PAIRS = TypeAdapter(Dict[str, Set[str]])


def normalize_line_pairs(payload: Any, source: str = "<memory>") -> LinePairs:
    try:
        return _LINE_PAIRS.validate_python(payload)
    except ValidationError as e:
        raise LoaderError(source, f"expected a table of string lists ({e.error_count()} errors)") from e


def load_json(path: PathLike) -> LinePairs:
    source = str(path)
    try:
        with open(path, "r", encoding="utf-8") as f:
            payload = json.load(f)
    except OSError as e:
        raise LoaderError(source, str(e)) from e
    except json.JSONDecodeError as e:
        raise LoaderError(source, f"invalid JSON: {e}") from e

    return normalize_line_pairs(payload, source)


def load_toml(path: PathLike) -> LinePairs:
    source = str(path)
    try:
        content = Path(path).read_text(encoding="utf-8")
    except OSError as e:
        raise LoaderError(source, str(e)) from e

    try:
        payload = tomllib.loads(content)
    except tomllib.TOMLDecodeError as e:
        raise LoaderError(source, f"invalid TOML: {e}") from e

    return normalize_line_pairs(payload, source)
