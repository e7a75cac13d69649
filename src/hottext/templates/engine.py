from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, List, Mapping, Optional, Tuple

import chevron
from chevron.tokenizer import ChevronError, tokenize

from hottext.errors import KeyNotFoundError, RenderError, TemplateCompileError
from hottext.utils.logging import line_key_context

Token = Tuple[str, str]

_SUBSTITUTIONS = {"variable", "no escape"}
_OPENERS = {"section", "inverted section"}
_KNOWN = _SUBSTITUTIONS | _OPENERS | {"literal", "end", "comment", "set delimiter"}


@dataclass(frozen=True)
class Template:
    source: str
    tokens: Tuple[Token, ...]

    def placeholders(self) -> List[str]:
        """Names substituted outside of any section, in order of appearance."""
        names: List[str] = []
        depth = 0
        for tag_type, key in self.tokens:
            if tag_type in _OPENERS:
                depth += 1
            elif tag_type == "end":
                depth -= 1
            elif depth == 0 and tag_type in _SUBSTITUTIONS and key not in names:
                names.append(key)
        return names


class TemplateRenderer:
    """
    Mustache rendering for raw lines.
    {{name}} HTML-escapes the value, {{{name}}} and {{& name}} insert it verbatim.
    Dotted names ({{enemy.name}}) are nested lookups into the render data.
    Templates are compiled per call; nothing is cached.
    """

    def __init__(self, strict: Optional[bool] = None, logger: Optional[logging.Logger] = None):
        if strict is None:
            from hottext.config import Settings

            strict = Settings.from_env().strict_render
        self.strict = strict
        self.logger = logger or logging.getLogger(__name__)

    def compile(self, raw: str) -> Template:
        try:
            tokens = tuple(tokenize(raw))
        except ChevronError as e:
            raise TemplateCompileError(raw, str(e)) from e

        for tag_type, key in tokens:
            if tag_type == "partial":
                raise TemplateCompileError(raw, "partials are not supported in lines")
            # chevron leaves "{{{name}}" as an unresolved tag instead of failing
            if tag_type == "no escape?":
                raise TemplateCompileError(raw, f"unbalanced triple mustache around {key!r}")
            if tag_type not in _KNOWN:
                raise TemplateCompileError(raw, f"unsupported tag {tag_type!r}")

        return Template(source=raw, tokens=tokens)

    def render(self, template: Template, data: Mapping[str, Any]) -> str:
        if self.strict:
            missing = [name for name in template.placeholders() if not _resolves(data, name)]
            if missing:
                raise RenderError(template.source, missing)

        out = chevron.render(list(template.tokens), dict(data))
        self.logger.debug(
            f"[TemplateRenderer] rendered | placeholders={len(template.placeholders())} | "
            f"length={len(out)}"
        )
        return out

    def get_and_render(self, store, key: str, data: Mapping[str, Any]) -> str:
        with line_key_context(key):
            raw = store.get_one(key)
            if raw is None:
                raise KeyNotFoundError(key)
            return self.render(self.compile(raw), data)


def _resolves(data: Mapping[str, Any], name: str) -> bool:
    """
    Mirrors chevron's lookup: a dotted name such as "enemy.name" is a nested
    lookup (data["enemy"]["name"]), never a flat key containing a dot.
    """
    if name == ".":
        return True
    scope: Any = data
    for part in name.split("."):
        if not isinstance(scope, Mapping) or part not in scope:
            return False
        scope = scope[part]
    return True


def get_and_render(store, key: str, data: Mapping[str, Any], *, strict: Optional[bool] = None) -> str:
    return TemplateRenderer(strict=strict).get_and_render(store, key, data)
