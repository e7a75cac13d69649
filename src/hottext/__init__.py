"""Keyed text variants: store alternative lines per key, pick one, render it."""

from hottext.errors import (
    KeyNotFoundError,
    LineError,
    LoaderError,
    RenderError,
    TemplateCompileError,
)
from hottext.lines import (
    PyRandomSource,
    RandomSource,
    SeededRandomSource,
    VariantStore,
    default_random_source,
)
from hottext.shortcuts import line, lines, render_line
from hottext.templates import Template, TemplateRenderer, get_and_render

__all__ = [
    "KeyNotFoundError",
    "LineError",
    "LoaderError",
    "PyRandomSource",
    "RandomSource",
    "RenderError",
    "SeededRandomSource",
    "Template",
    "TemplateCompileError",
    "TemplateRenderer",
    "VariantStore",
    "default_random_source",
    "get_and_render",
    "line",
    "lines",
    "render_line",
]
