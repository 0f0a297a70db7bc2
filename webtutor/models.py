"""Pydantic models for catalog records and page rendering."""

from datetime import date
from enum import Enum

from markupsafe import Markup
from pydantic import BaseModel, ConfigDict, Field


class Tier(str, Enum):
    """Tutorial difficulty groupings."""

    BASIC = "basic"
    INTERMEDIATE = "intermediate"
    ADVANCED = "advanced"
    RESTFUL = "restful"

    @property
    def page_title(self) -> str:
        return TIER_TITLES[self]


TIER_TITLES = {
    Tier.BASIC: "Basic Web Server Concepts",
    Tier.INTERMEDIATE: "Intermediate Web Server Concepts",
    Tier.ADVANCED: "Advanced Web Server Concepts",
    Tier.RESTFUL: "RESTful API Development",
}


class Tutorial(BaseModel):
    """A single tutorial with its code listing and explanation."""
    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    id: str = Field(..., min_length=1)
    title: str = Field(..., min_length=1)
    description: Markup
    code: Markup
    explanation: Markup


class CodeExample(BaseModel):
    """A downloadable code example."""
    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    title: str
    description: Markup
    filename: str = Field(..., min_length=1)
    code: str


class PageContext(BaseModel):
    """Per-request data bound into page templates."""
    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    title: str
    active_nav: str
    tutorials: tuple[Tutorial, ...] = ()
    examples: tuple[CodeExample, ...] = ()
    content: Markup = Markup("")
    current_year: int = Field(default_factory=lambda: date.today().year)

    def template_vars(self) -> dict:
        """Template variables for this page, without re-validating nested models."""
        return {
            "title": self.title,
            "active_nav": self.active_nav,
            "tutorials": self.tutorials,
            "examples": self.examples,
            "content": self.content,
            "current_year": self.current_year,
        }
