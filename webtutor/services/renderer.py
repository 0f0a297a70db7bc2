"""Page renderer - composes the shared layout with a page template."""

import logging

import jinja2

from webtutor.models import PageContext
from webtutor.templates import templates

logger = logging.getLogger(__name__)

LAYOUT_TEMPLATE = "layout.html"


class TemplateError(Exception):
    """Raised when a template is missing or cannot be compiled or rendered."""

    pass


def _template_name(page: str) -> str:
    return page if page.endswith(".html") else f"{page}.html"


def _load(name: str) -> jinja2.Template:
    try:
        return templates.get_template(name)
    except jinja2.TemplateNotFound as e:
        raise TemplateError(f"template not found: {e.name}") from e
    except jinja2.TemplateSyntaxError as e:
        raise TemplateError(f"{e.name or name}:{e.lineno}: {e.message}") from e


def render(page: str, context: PageContext) -> bytes:
    """
    Render a page template with the given context.

    Page templates extend ``layout.html``; the context's fields are bound as
    template variables alongside the site globals.

    Args:
        page: Template name, with or without the ``.html`` suffix
        context: Data for this page

    Returns:
        UTF-8 encoded HTML document

    Raises:
        TemplateError: If the template (or one it extends) is missing or invalid
    """
    name = _template_name(page)
    template = _load(name)
    try:
        html = template.render(**context.template_vars())
    except jinja2.TemplateNotFound as e:
        raise TemplateError(f"template not found: {e.name}") from e
    except jinja2.TemplateError as e:
        raise TemplateError(f"{name}: {e}") from e
    return html.encode("utf-8")


def check_layout() -> None:
    """Compile the shared layout template; raises TemplateError if it is unusable."""
    _load(LAYOUT_TEMPLATE)
    logger.debug("Layout template %s compiled", LAYOUT_TEMPLATE)
