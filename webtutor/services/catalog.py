"""Catalog service - read-only access to tutorials and code examples."""

from typing import Optional

from webtutor.content.examples import CODE_EXAMPLES
from webtutor.content.tutorials import (
    ADVANCED_TUTORIALS,
    BASIC_TUTORIALS,
    INTERMEDIATE_TUTORIALS,
    RESTFUL_TUTORIALS,
)
from webtutor.models import CodeExample, Tier, Tutorial


class NotFoundError(Exception):
    """Raised when a requested catalog entry or route target does not exist."""

    status_code = 404


_TUTORIALS_BY_TIER = {
    Tier.BASIC: BASIC_TUTORIALS,
    Tier.INTERMEDIATE: INTERMEDIATE_TUTORIALS,
    Tier.ADVANCED: ADVANCED_TUTORIALS,
    Tier.RESTFUL: RESTFUL_TUTORIALS,
}

_EXAMPLES_BY_FILENAME = {example.filename: example for example in CODE_EXAMPLES}


def get_basic_tutorials() -> tuple[Tutorial, ...]:
    return BASIC_TUTORIALS


def get_intermediate_tutorials() -> tuple[Tutorial, ...]:
    return INTERMEDIATE_TUTORIALS


def get_advanced_tutorials() -> tuple[Tutorial, ...]:
    return ADVANCED_TUTORIALS


def get_restful_tutorials() -> tuple[Tutorial, ...]:
    return RESTFUL_TUTORIALS


def get_code_examples() -> tuple[CodeExample, ...]:
    return CODE_EXAMPLES


def get_tutorials(tier) -> tuple[Tutorial, ...]:
    """Return the tutorials for a tier given as a ``Tier`` or its name."""
    try:
        return _TUTORIALS_BY_TIER[Tier(tier)]
    except ValueError:
        raise NotFoundError(f"Unknown tutorial tier: {tier}")


def find_tutorial(tutorial_id: str) -> Optional[Tutorial]:
    """Find a tutorial by id across all tiers."""
    for tutorials in _TUTORIALS_BY_TIER.values():
        for tutorial in tutorials:
            if tutorial.id == tutorial_id:
                return tutorial
    return None


def find_example(filename: str) -> Optional[CodeExample]:
    """Find a code example by exact filename."""
    return _EXAMPLES_BY_FILENAME.get(filename)
