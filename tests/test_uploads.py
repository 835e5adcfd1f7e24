import os
import re

from guit_county.database.config.config import settings

ONE_MB = 1024 * 1024


def stored_files():
    return sorted(os.listdir(settings.UPLOAD_DIR))


def test_image_upload_returns_public_url(client):
    res = client.post("/api/upload", files={"image": ("Photo.PNG", b"\x89PNG fake image", "image/png")})
    assert res.status_code == 200
    url = res.json()["url"]
    assert re.fullmatch(r"/uploads/image-\d{13}-[0-9a-f]+\.png", url)
    assert stored_files() == [url.rsplit("/", 1)[1]]
    served = client.get(url)
    assert served.status_code == 200
    assert served.content == b"\x89PNG fake image"


def test_video_and_audio_are_accepted(client):
    assert client.post("/api/upload", files={"image": ("clip.mp4", b"v", "video/mp4")}).status_code == 200
    assert client.post("/api/upload", files={"image": ("song.mp3", b"a", "audio/mpeg")}).status_code == 200
    assert len(stored_files()) == 2


def test_other_types_are_rejected_without_writing(client):
    res = client.post("/api/upload", files={"image": ("report.pdf", b"%PDF-1.4", "application/pdf")})
    assert res.status_code == 400
    assert res.json() == {"error": "Upload error: Only images, videos, and audio files are allowed"}
    assert stored_files() == []


def test_plain_text_is_rejected_without_writing(client):
    res = client.post("/api/upload", files={"image": ("notes.txt", b"hello", "text/plain")})
    assert res.status_code == 400
    assert res.json() == {"error": "Upload error: Only images, videos, and audio files are allowed"}
    assert stored_files() == []


def test_oversized_file_is_rejected_and_removed(client):
    assert settings.MAX_UPLOAD_MB == 1
    res = client.post("/api/upload", files={"image": ("big.jpg", b"0" * (ONE_MB + 10), "image/jpeg")})
    assert res.status_code == 400
    assert res.json() == {"error": "Upload error: File too large"}
    assert stored_files() == []


def test_file_at_the_limit_is_accepted(client):
    res = client.post("/api/upload", files={"image": ("exact.jpg", b"0" * ONE_MB, "image/jpeg")})
    assert res.status_code == 200


def test_missing_file(client):
    res = client.post("/api/upload")
    assert res.status_code == 400
    assert res.json() == {"error": "No file selected"}
