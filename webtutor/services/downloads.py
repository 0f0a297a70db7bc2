"""Download service - resolves example filenames and writes example files."""

import logging
from dataclasses import dataclass
from pathlib import Path, PurePosixPath
from typing import Optional

from webtutor.services.catalog import NotFoundError, find_example, get_code_examples
from webtutor.settings import settings

logger = logging.getLogger(__name__)


class InvalidExampleName(NotFoundError):
    """Raised when a requested example name is empty or escapes the examples directory."""

    status_code = 400


@dataclass(frozen=True)
class Download:
    """Resolved download: the attachment filename and its raw content."""
    filename: str
    content: bytes


def _validate_name(name: str) -> PurePosixPath:
    if not name:
        raise InvalidExampleName("No example specified")
    if "\\" in name or "\x00" in name:
        raise InvalidExampleName(f"Invalid example name: {name!r}")

    path = PurePosixPath(name)
    if path.is_absolute() or ".." in path.parts:
        raise InvalidExampleName(f"Invalid example name: {name!r}")
    return path


def safe_join(root: Path, name: str) -> Path:
    """Join a relative name onto root, rejecting results that leave root."""
    relative = _validate_name(name)
    root_resolved = root.resolve()
    candidate = (root_resolved / relative).resolve()
    if root_resolved not in candidate.parents:
        raise InvalidExampleName(f"Invalid example name: {name!r}")
    return candidate


def _read_from_disk(name: str) -> Optional[bytes]:
    path = safe_join(settings.EXAMPLES_DIR, name)
    if not path.is_file():
        return None
    return path.read_bytes()


def resolve_download(name: str) -> Download:
    """
    Resolve a requested example name to downloadable content.

    Catalog entries are matched by exact filename first; other regular files
    under the examples directory are served as well.

    Raises:
        InvalidExampleName: If the name is empty or points outside the examples directory
        NotFoundError: If no example matches
    """
    relative = _validate_name(name)

    example = find_example(name)
    if example is not None:
        return Download(filename=relative.name, content=example.code.encode("utf-8"))

    content = _read_from_disk(name)
    if content is None:
        logger.info("Download not found: %s", name)
        raise NotFoundError(f"Example not found: {name}")
    return Download(filename=relative.name, content=content)


def materialize_examples(directory: Path) -> list[Path]:
    """
    Write each code example to the directory unless a file already exists.

    Returns:
        Paths of the files written on this call
    """
    directory.mkdir(parents=True, exist_ok=True)

    written = []
    for example in get_code_examples():
        path = safe_join(directory, example.filename)
        if path.exists():
            continue
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(example.code, encoding="utf-8")
        written.append(path)

    if written:
        logger.info("Wrote %d example file(s) to %s", len(written), directory)
    return written
