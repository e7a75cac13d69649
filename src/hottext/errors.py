from __future__ import annotations

from typing import Iterable


class LineError(Exception):
    """Base for every failure surfaced by the line store and renderer."""


class KeyNotFoundError(LineError, LookupError):
    def __init__(self, key: str, detail: str = ""):
        msg = f"No lines registered for key '{key}'"
        if detail:
            msg = f"{msg}: {detail}"
        super().__init__(msg)
        self.key = key


class TemplateCompileError(LineError):
    def __init__(self, source: str, detail: str):
        super().__init__(f"Malformed template {source!r}: {detail}")
        self.source = source
        self.detail = detail


class RenderError(LineError):
    def __init__(self, source: str, missing: Iterable[str]):
        self.source = source
        self.missing = sorted(set(missing))
        super().__init__(
            f"Missing render data for {', '.join(self.missing)} in template {source!r}"
        )


class LoaderError(LineError):
    def __init__(self, source: str, detail: str):
        super().__init__(f"Failed loading '{source}': {detail}")
        self.source = source
        self.detail = detail
