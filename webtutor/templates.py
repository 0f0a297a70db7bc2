"""Shared Jinja2Templates instance with globals configured."""

from pathlib import Path
from fastapi.templating import Jinja2Templates

from webtutor.settings import settings
from webtutor.version import __version__

# Shared templates instance
templates_path = Path(__file__).parent.parent / "templates"
templates = Jinja2Templates(directory=str(templates_path))

# Templates are re-loaded and re-compiled on every render
templates.env.cache = None

# Navigation entries as (tag, href, label)
NAV_ITEMS = [
    ("home", "/", "Home"),
    ("basic", "/basic", "Basic"),
    ("intermediate", "/intermediate", "Intermediate"),
    ("advanced", "/advanced", "Advanced"),
    ("restful", "/restful", "RESTful APIs"),
    ("examples", "/examples", "Examples"),
]

templates.env.globals["SITE_NAME"] = settings.SITE_NAME
templates.env.globals["APP_VERSION"] = __version__
templates.env.globals["NAV_ITEMS"] = NAV_ITEMS


def line_count(value: str) -> int:
    """Custom Jinja2 filter counting the lines of a code text."""
    if not value:
        return 0
    return len(str(value).splitlines())


# Register custom filters
templates.env.filters["line_count"] = line_count
