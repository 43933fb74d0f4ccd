from io import BytesIO

import pytest

import api_server
from quadrant_blur.config import TilingConfig

from .conftest import encode_png, solid_pixels


@pytest.fixture
def client(monkeypatch, tmp_path):
    monkeypatch.setattr(api_server, "tiling_config", TilingConfig(output_dir=tmp_path / "images"))
    api_server.app.config["TESTING"] = True
    with api_server.app.test_client() as client:
        yield client


def upload(client, payload: bytes, field="image"):
    return client.post(
        "/image/process",
        data={field: (BytesIO(payload), "upload.png")},
        content_type="multipart/form-data",
    )


def test_process_returns_result_path(client, solid_png, tmp_path):
    response = upload(client, solid_png)

    assert response.status_code == 200
    body = response.get_json()
    assert body == {"success": True, "path": str(tmp_path / "images" / "result.png")}
    assert (tmp_path / "images" / "result.png").exists()


def test_too_small_upload_is_a_client_error(client, tmp_path):
    response = upload(client, encode_png(solid_pixels(40, 40)))

    assert response.status_code == 400
    assert "Image too small" in response.get_json()["message"]
    assert not (tmp_path / "images").exists()


def test_undecodable_upload_is_a_client_error(client):
    response = upload(client, b"not an image")

    assert response.status_code == 400
    assert response.get_json()["success"] is False


def test_missing_file_field(client, solid_png):
    response = upload(client, solid_png, field="picture")

    assert response.status_code == 400
    assert response.get_json()["message"] == "No image provided"


def test_health(client):
    response = client.get("/api/health")

    assert response.status_code == 200
    assert response.get_json()["status"] == "healthy"
