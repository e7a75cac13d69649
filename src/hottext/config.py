from __future__ import annotations

import os
from typing import Mapping, Optional

from pydantic import BaseModel, Field, field_validator


_FALSY = {"0", "false", "no", "off"}


class Settings(BaseModel):
    """
    Runtime knobs for the line store and renderer.
    Values come from HOTTEXT_* environment variables; anything unset keeps its default.
    """

    log_level: str = Field(
        "INFO",
        description="Level name passed to setup_logging()",
    )

    seed: Optional[int] = Field(
        None,
        description="Seed for default_random_source(); None means non-deterministic",
    )

    strict_render: bool = Field(
        True,
        description="Raise RenderError on missing placeholders instead of rendering them empty",
    )

    @field_validator("log_level")
    @classmethod
    def _upper_level(cls, value: str) -> str:
        return (value or "INFO").strip().upper() or "INFO"

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "Settings":
        env = os.environ if environ is None else environ

        raw_seed = (env.get("HOTTEXT_SEED") or "").strip()
        raw_strict = (env.get("HOTTEXT_STRICT_RENDER") or "").strip().lower()

        return cls(
            log_level=env.get("HOTTEXT_LOG_LEVEL") or "INFO",
            seed=raw_seed or None,
            strict_render=raw_strict not in _FALSY if raw_strict else True,
        )
