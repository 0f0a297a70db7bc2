"""Tests for example downloads and materialization."""

import pytest

from webtutor.services.catalog import NotFoundError, find_example, get_code_examples
from webtutor.services.downloads import (
    InvalidExampleName,
    materialize_examples,
    resolve_download,
    safe_join,
)


def test_download_catalog_example(client):
    response = client.get("/download/simple_server.go")

    assert response.status_code == 200
    assert response.text == find_example("simple_server.go").code
    assert response.headers["content-type"].startswith("text/plain")
    assert response.headers["content-disposition"] == 'attachment; filename="simple_server.go"'


def test_download_unknown_example(client):
    response = client.get("/download/does-not-exist.go")
    assert response.status_code == 404


def test_download_empty_name(client):
    response = client.get("/download/")
    assert response.status_code == 400


def test_download_file_on_disk(client, patched_settings):
    """Files placed under the examples directory are downloadable too."""
    nested = patched_settings.EXAMPLES_DIR / "complete_app"
    nested.mkdir(parents=True, exist_ok=True)
    (nested / "README.txt").write_text("run with go run .\n", encoding="utf-8")

    response = client.get("/download/complete_app/README.txt")

    assert response.status_code == 200
    assert response.text == "run with go run .\n"
    assert response.headers["content-disposition"] == 'attachment; filename="README.txt"'


def test_download_non_utf8_file_on_disk(client, patched_settings):
    """Disk files are served as raw bytes whatever their encoding."""
    patched_settings.EXAMPLES_DIR.mkdir(parents=True, exist_ok=True)
    (patched_settings.EXAMPLES_DIR / "latin1.txt").write_bytes(b"caf\xe9\n")

    response = client.get("/download/latin1.txt")

    assert response.status_code == 200
    assert response.content == b"caf\xe9\n"
    assert response.headers["content-type"].startswith("text/plain")


def test_download_name_with_spaces_uses_encoded_filename(client, patched_settings):
    patched_settings.EXAMPLES_DIR.mkdir(parents=True, exist_ok=True)
    (patched_settings.EXAMPLES_DIR / "my notes v2.txt").write_text("notes\n", encoding="utf-8")

    response = client.get("/download/my notes v2.txt")

    assert response.status_code == 200
    assert response.headers["content-disposition"] == (
        "attachment; filename*=utf-8''my%20notes%20v2.txt"
    )


def test_download_directory_is_not_found(client, patched_settings):
    (patched_settings.EXAMPLES_DIR / "somedir").mkdir(parents=True, exist_ok=True)

    response = client.get("/download/somedir")
    assert response.status_code == 404


@pytest.mark.parametrize(
    "name",
    ["../settings.py", "a/../../etc/passwd", "/etc/passwd", "..\\secret.go", ""],
)
def test_resolve_download_rejects_unsafe_names(patched_settings, name):
    with pytest.raises(InvalidExampleName):
        resolve_download(name)


def test_invalid_name_is_not_found_kind():
    assert issubclass(InvalidExampleName, NotFoundError)


def test_resolve_download_missing(patched_settings):
    with pytest.raises(NotFoundError):
        resolve_download("missing.go")


def test_safe_join_stays_in_root(temp_dir):
    assert safe_join(temp_dir, "a/b.go") == (temp_dir / "a" / "b.go").resolve()
    with pytest.raises(InvalidExampleName):
        safe_join(temp_dir, ".")


def test_lifespan_materializes_examples(client, patched_settings):
    for example in get_code_examples():
        path = patched_settings.EXAMPLES_DIR / example.filename
        assert path.read_text(encoding="utf-8") == example.code


def test_materialize_is_idempotent(temp_dir):
    target = temp_dir / "examples"

    first = materialize_examples(target)
    assert len(first) == len(get_code_examples())

    # Existing files are left untouched
    (target / "simple_server.go").write_text("edited\n", encoding="utf-8")
    second = materialize_examples(target)

    assert second == []
    assert (target / "simple_server.go").read_text(encoding="utf-8") == "edited\n"


def test_content_disposition_header_forms():
    from webtutor.routes.downloads import content_disposition

    assert content_disposition("rest_api.go") == 'attachment; filename="rest_api.go"'
    assert content_disposition("café.go") == "attachment; filename*=utf-8''caf%C3%A9.go"


def test_resolve_download_returns_bytes(patched_settings):
    download = resolve_download("middleware.go")

    assert download.filename == "middleware.go"
    assert download.content == find_example("middleware.go").code.encode("utf-8")
