"""
Call-site helpers.

line() and lines() turn a missing key into KeyNotFoundError instead of None,
render_line() takes placeholder values as keyword arguments.
"""

from __future__ import annotations

import logging
from typing import Any, Set

from hottext.errors import KeyNotFoundError
from hottext.lines.store import VariantStore
from hottext.templates.engine import TemplateRenderer

logger = logging.getLogger(__name__)


def line(store: VariantStore, key: str) -> str:
    picked = store.get_one(key)
    if picked is None:
        logger.warning(f"Missing line key {key!r}")
        raise KeyNotFoundError(key, "line() needs at least one registered variant")
    return picked


def lines(store: VariantStore, key: str) -> Set[str]:
    found = store.get_all(key)
    if found is None:
        logger.warning(f"Missing line key {key!r}")
        raise KeyNotFoundError(key, "lines() needs the key to be registered")
    return found


def render_line(store: VariantStore, key: str, /, **data: Any) -> str:
    return TemplateRenderer().get_and_render(store, key, data)
