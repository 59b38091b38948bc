import pytest

from sermon_ai_core.ingest import load_upload


def test_load_text_file(tmp_path):
    path = tmp_path / "sermon.txt"
    path.write_text("Hello world", encoding="utf-8")

    upload = load_upload(path)
    assert upload.filename == "sermon.txt"
    assert upload.content_type == "text/plain"
    assert upload.data == b"Hello world"
    assert upload.size == 11


@pytest.mark.parametrize(
    "name, media_type",
    [
        ("notes.pdf", "application/pdf"),
        ("notes.doc", "application/msword"),
        ("notes.docx", "application/vnd.openxmlformats-officedocument.wordprocessingml.document"),
        ("sermon.m4a", "audio/mp4"),
        ("sermon.MP3", "audio/mpeg"),
    ],
)
def test_media_type_from_extension(tmp_path, name, media_type):
    path = tmp_path / name
    path.write_bytes(b"x")
    assert load_upload(path).content_type == media_type


def test_unknown_extension_falls_back_to_octet_stream(tmp_path):
    path = tmp_path / "mystery.zzz"
    path.write_bytes(b"x")
    assert load_upload(path).content_type == "application/octet-stream"


def test_explicit_content_type_wins(tmp_path):
    path = tmp_path / "sermon.bin"
    path.write_bytes(b"x")
    assert load_upload(path, content_type="audio/ogg").content_type == "audio/ogg"


def test_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_upload(tmp_path / "nope.txt")
