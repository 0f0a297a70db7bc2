"""Diagnostics routes - health check."""

from fastapi import APIRouter
from fastapi.responses import JSONResponse

from webtutor.services.catalog import get_code_examples, get_tutorials
from webtutor.models import Tier
from webtutor.version import __version__ as APP_VERSION

router = APIRouter()


@router.get("/health")
async def health_check():
    """Health check endpoint returning JSON status."""
    return JSONResponse(
        content={
            "status": "ok",
            "version": APP_VERSION,
            "tutorials": {tier.value: len(get_tutorials(tier)) for tier in Tier},
            "examples": len(get_code_examples()),
        }
    )
