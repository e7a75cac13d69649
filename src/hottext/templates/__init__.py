from .engine import Template, TemplateRenderer, get_and_render

__all__ = ["Template", "TemplateRenderer", "get_and_render"]
