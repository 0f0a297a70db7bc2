"""Page routes - home, tutorial tiers and code examples."""

from fastapi import APIRouter
from fastapi.responses import HTMLResponse

from webtutor.models import PageContext, Tier
from webtutor.services.catalog import get_code_examples, get_tutorials
from webtutor.services.renderer import render

router = APIRouter()


@router.get("/", response_class=HTMLResponse)
async def home_page():
    """Render the landing page."""
    context = PageContext(title="Learn Go Web Development", active_nav="home")
    return HTMLResponse(render("home", context))


def _tier_page(tier: Tier) -> HTMLResponse:
    context = PageContext(
        title=tier.page_title,
        active_nav=tier.value,
        tutorials=get_tutorials(tier),
    )
    return HTMLResponse(render(tier.value, context))


@router.get("/basic", response_class=HTMLResponse)
async def basic_page():
    """Basic web server concepts."""
    return _tier_page(Tier.BASIC)


@router.get("/intermediate", response_class=HTMLResponse)
async def intermediate_page():
    """Intermediate web server concepts."""
    return _tier_page(Tier.INTERMEDIATE)


@router.get("/advanced", response_class=HTMLResponse)
async def advanced_page():
    """Advanced web server concepts."""
    return _tier_page(Tier.ADVANCED)


@router.get("/restful", response_class=HTMLResponse)
async def restful_page():
    """RESTful API development."""
    return _tier_page(Tier.RESTFUL)


@router.get("/examples", response_class=HTMLResponse)
async def examples_page():
    """List the downloadable code examples."""
    context = PageContext(
        title="Code Examples",
        active_nav="examples",
        examples=get_code_examples(),
    )
    return HTMLResponse(render("examples", context))
