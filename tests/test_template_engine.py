import pytest
from chevron.tokenizer import ChevronError

from hottext.errors import KeyNotFoundError, RenderError, TemplateCompileError
from hottext.lines.rng import SeededRandomSource
from hottext.lines.store import VariantStore
from hottext.templates.engine import TemplateRenderer, get_and_render
from hottext.utils.logging import line_key_var


class DummyStore:
    def __init__(self, line=None):
        self.line = line
        self.requested = []

    def get_one(self, key):
        self.requested.append(key)
        return self.line


def test_escaped_placeholder_renders_plain_value():
    renderer = TemplateRenderer(strict=True)
    tpl = renderer.compile("You were killed by {{enemy}}.")

    assert renderer.render(tpl, {"enemy": "your mom"}) == "You were killed by your mom."


def test_triple_brace_matches_escaped_form_for_plain_text():
    renderer = TemplateRenderer(strict=True)
    escaped = renderer.render(renderer.compile("You were killed by {{enemy}}."), {"enemy": "your mom"})
    verbatim = renderer.render(renderer.compile("You were killed by {{{enemy}}}."), {"enemy": "your mom"})

    assert escaped == verbatim == "You were killed by your mom."


def test_triple_brace_keeps_markup_and_double_brace_escapes_it():
    renderer = TemplateRenderer(strict=True)
    data = {"enemy": "Tom & <Jerry>"}

    escaped = renderer.render(renderer.compile("Killed by {{enemy}}."), data)
    verbatim = renderer.render(renderer.compile("Killed by {{{enemy}}}."), data)
    ampersand = renderer.render(renderer.compile("Killed by {{& enemy}}."), data)

    assert verbatim == "Killed by Tom & <Jerry>."
    assert ampersand == verbatim
    assert escaped != verbatim
    assert "&amp;" in escaped
    assert "&lt;Jerry" in escaped
    assert "<" not in escaped


def test_compile_rejects_unclosed_tag():
    renderer = TemplateRenderer(strict=True)

    with pytest.raises(TemplateCompileError) as exc:
        renderer.compile("Hello {{name")

    assert exc.value.source == "Hello {{name"
    assert isinstance(exc.value.__cause__, ChevronError)


def test_compile_rejects_partials():
    with pytest.raises(TemplateCompileError):
        TemplateRenderer(strict=True).compile("{{> header}} Hello")


def test_compile_is_pure():
    renderer = TemplateRenderer(strict=True)

    assert renderer.compile("Hi {{name}}!") == renderer.compile("Hi {{name}}!")


def test_placeholders_skip_section_scopes():
    tpl = TemplateRenderer(strict=True).compile(
        "{{#boss}}Beware {{title}}!{{/boss}} You meet {{enemy}} and {{{enemy}}}."
    )

    assert tpl.placeholders() == ["enemy"]


def test_strict_render_fails_on_missing_placeholder():
    renderer = TemplateRenderer(strict=True)
    tpl = renderer.compile("{{enemy}} hits you with {{weapon}}.")

    with pytest.raises(RenderError) as exc:
        renderer.render(tpl, {"enemy": "Goblin"})

    assert exc.value.missing == ["weapon"]


def test_lenient_render_substitutes_empty_string():
    renderer = TemplateRenderer(strict=False)
    tpl = renderer.compile("You were killed by {{enemy}}.")

    assert renderer.render(tpl, {}) == "You were killed by ."


def test_strict_default_comes_from_environment(monkeypatch):
    monkeypatch.setenv("HOTTEXT_STRICT_RENDER", "false")
    assert TemplateRenderer().strict is False

    monkeypatch.delenv("HOTTEXT_STRICT_RENDER")
    assert TemplateRenderer().strict is True


def test_get_and_render_picks_and_renders():
    store = VariantStore(SeededRandomSource(3))
    store.extend("combat.encounter", {"You encounter {{enemy}}!", "Oh no! It's {{enemy}}!"})

    out = get_and_render(store, "combat.encounter", {"enemy": "a slime"}, strict=True)

    assert out in {"You encounter a slime!", "Oh no! It's a slime!"}


def test_get_and_render_reports_missing_key():
    store = DummyStore(None)

    with pytest.raises(KeyNotFoundError) as exc:
        TemplateRenderer(strict=True).get_and_render(store, "nope", {})

    assert exc.value.key == "nope"
    assert store.requested == ["nope"]


def test_get_and_render_stops_at_compile_failure():
    with pytest.raises(TemplateCompileError):
        TemplateRenderer(strict=True).get_and_render(DummyStore("Hello {{name"), "greeting", {"name": "x"})


def test_get_and_render_stops_at_missing_data():
    with pytest.raises(RenderError):
        TemplateRenderer(strict=True).get_and_render(DummyStore("Hello {{name}}"), "greeting", {})


def test_get_and_render_restores_line_key_context():
    TemplateRenderer(strict=True).get_and_render(DummyStore("Hi {{name}}"), "greeting", {"name": "x"})

    assert line_key_var.get() == "-"


def test_compile_rejects_unbalanced_triple_brace():
    renderer = TemplateRenderer(strict=True)

    with pytest.raises(TemplateCompileError) as exc:
        renderer.compile("Killed by {{{enemy}}.")

    assert "enemy" in exc.value.detail


def test_get_and_render_never_blanks_an_unbalanced_triple_brace():
    with pytest.raises(TemplateCompileError):
        TemplateRenderer(strict=False).get_and_render(
            DummyStore("Killed by {{{enemy}}."), "combat.death", {"enemy": "A&B"}
        )


def test_dotted_placeholder_is_a_nested_lookup():
    renderer = TemplateRenderer(strict=True)
    tpl = renderer.compile("You meet {{enemy.name}}.")

    assert renderer.render(tpl, {"enemy": {"name": "a troll"}}) == "You meet a troll."

    with pytest.raises(RenderError) as exc:
        renderer.render(tpl, {"enemy.name": "a troll"})

    assert exc.value.missing == ["enemy.name"]
