"""Tests for the page renderer."""

import jinja2
import pytest

from webtutor.models import PageContext
from webtutor.services.catalog import get_basic_tutorials, get_code_examples
from webtutor.services.renderer import TemplateError, check_layout, render
from webtutor.templates import templates


def test_render_home_includes_title():
    html = render("home", PageContext(title="X marks the spot", active_nav="home"))

    assert isinstance(html, bytes)
    text = html.decode("utf-8")
    assert "X marks the spot" in text
    assert "<!DOCTYPE html>" in text


def test_render_accepts_html_suffix():
    html = render("home.html", PageContext(title="Suffix", active_nav="home"))
    assert b"Suffix" in html


def test_render_tutorials_keeps_rich_text_unescaped():
    context = PageContext(
        title="Basic",
        active_nav="basic",
        tutorials=get_basic_tutorials(),
    )
    text = render("basic", context).decode("utf-8")

    assert 'id="hello-world"' in text
    assert '<code class="language-go">' in text
    assert "<h4>How It Works:</h4>" in text


def test_render_examples_escapes_code():
    context = PageContext(
        title="Code Examples",
        active_nav="examples",
        examples=get_code_examples(),
    )
    text = render("examples", context).decode("utf-8")

    assert 'href="/download/simple_server.go"' in text
    # template_server.go embeds raw HTML inside its Go source
    assert "&lt;!DOCTYPE html&gt;" in text


def test_render_marks_active_nav():
    text = render("home", PageContext(title="Home", active_nav="restful")).decode("utf-8")
    assert 'href="/restful" class="text-cyan-300 font-semibold active"' in text


def test_render_missing_template():
    with pytest.raises(TemplateError) as exc_info:
        render("does-not-exist", PageContext(title="Missing", active_nav="home"))
    assert "does-not-exist.html" in str(exc_info.value)


def test_render_syntax_error(monkeypatch):
    loader = jinja2.DictLoader({"broken.html": "{% if %}"})
    monkeypatch.setattr(templates.env, "loader", loader)

    with pytest.raises(TemplateError):
        render("broken", PageContext(title="Broken", active_nav="home"))


def test_render_reloads_templates(monkeypatch):
    """Templates are not cached between renders."""
    loader = jinja2.DictLoader({"page.html": "first {{ title }}"})
    monkeypatch.setattr(templates.env, "loader", loader)
    context = PageContext(title="T", active_nav="home")

    assert render("page", context) == b"first T"
    loader.mapping["page.html"] = "second {{ title }}"
    assert render("page", context) == b"second T"


def test_check_layout_passes():
    check_layout()


def test_check_layout_missing(monkeypatch):
    monkeypatch.setattr(templates.env, "loader", jinja2.DictLoader({}))

    with pytest.raises(TemplateError):
        check_layout()


def test_line_count_filter():
    from webtutor.templates import line_count

    assert line_count("a\nb\nc\n") == 3
    assert line_count("") == 0


def test_broken_layout_aborts_startup(patched_settings, monkeypatch):
    """The application refuses to start when the layout does not compile."""
    from fastapi.testclient import TestClient
    from webtutor.main import app

    loader = jinja2.DictLoader({"layout.html": "{% if %}"})
    monkeypatch.setattr(templates.env, "loader", loader)

    with pytest.raises(TemplateError):
        with TestClient(app):
            pass
