"""Download routes - code examples as plain-text attachments."""

from urllib.parse import quote

from fastapi import APIRouter
from fastapi.responses import Response

from webtutor.services.downloads import resolve_download

router = APIRouter()


def content_disposition(filename: str) -> str:
    """Attachment header value; non-token names use the RFC 5987 form."""
    quoted = quote(filename)
    if quoted != filename:
        return f"attachment; filename*=utf-8''{quoted}"
    return f'attachment; filename="{filename}"'


@router.get("/{filename:path}")
async def download_example(filename: str):
    """Serve a code example as an attachment."""
    download = resolve_download(filename)
    return Response(
        content=download.content,
        media_type="text/plain",
        headers={"Content-Disposition": content_disposition(download.filename)},
    )
