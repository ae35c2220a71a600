import io

import pytest
from fastapi.testclient import TestClient
from PIL import Image

from textract_debug.textract import TextractAnalyzer
from config import settings
from web.backend.api import app, get_analyzer
from tests.helpers import RecordingClient, make_block, make_response

BOX = {"Left": 0.1, "Top": 0.1, "Width": 0.2, "Height": 0.2}


def png_bytes(size=(100, 100)):
    buffer = io.BytesIO()
    Image.new("RGB", size, (255, 255, 255)).save(buffer, format="PNG")
    return buffer.getvalue()


@pytest.fixture
def use_analyzer():
    def _use(analyzer):
        app.dependency_overrides[get_analyzer] = lambda: analyzer
        return TestClient(app)

    yield _use
    app.dependency_overrides.clear()


def test_health():
    response = TestClient(app).get("/health")

    assert response.status_code == 200
    assert response.json()["status"] == "ok"


def test_analyze_upload(use_analyzer):
    recorder = RecordingClient(make_response(make_block(confidence=95.0, box=BOX)))
    client = use_analyzer(TextractAnalyzer(client=recorder))
    content = png_bytes()

    response = client.post("/api/analyze", files={"file": ("page.png", content, "image/png")})

    assert response.status_code == 200
    body = response.json()
    assert body["filename"] == "page.png"
    assert body["statistics"]["total_blocks"] == 1
    assert body["analysis"]["Blocks"][0]["Confidence"] == 95.0
    assert recorder.calls[0]["Document"] == {"Bytes": content}


def test_analyze_s3(use_analyzer):
    recorder = RecordingClient()
    client = use_analyzer(TextractAnalyzer(client=recorder))

    response = client.post("/api/analyze-s3", json={"bucket": "scans", "key": "w9.png"})

    assert response.status_code == 200
    assert recorder.calls[0]["Document"] == {"S3Object": {"Bucket": "scans", "Name": "w9.png"}}


def test_service_error_maps_to_bad_gateway(use_analyzer, analyzer, stubber):
    stubber.add_client_error(
        "analyze_document",
        service_error_code="AccessDeniedException",
        service_message="not authorized",
    )
    client = use_analyzer(analyzer)

    response = client.post("/api/analyze-s3", json={"bucket": "scans", "key": "w9.png"})

    assert response.status_code == 502
    assert response.json()["detail"]["error"] == "AccessDeniedException"


def test_debug_image_returns_png(use_analyzer):
    recorder = RecordingClient(make_response(make_block(confidence=100.0, box=BOX)))
    client = use_analyzer(TextractAnalyzer(client=recorder))

    response = client.post("/api/debug-image", files={"file": ("page.png", png_bytes(), "image/png")})

    assert response.status_code == 200
    assert response.headers["content-type"] == "image/png"
    overlay = Image.open(io.BytesIO(response.content)).convert("RGB")
    assert overlay.size == (100, 100)
    assert overlay.getpixel((10, 20)) == (0, 255, 0)


def test_debug_image_rejects_unreadable_upload(use_analyzer):
    client = use_analyzer(TextractAnalyzer(client=RecordingClient()))

    response = client.post("/api/debug-image", files={"file": ("notes.txt", b"plain text", "text/plain")})

    assert response.status_code == 400


def test_lifespan_builds_analyzer_on_app_state():
    with TestClient(app) as client:
        analyzer = app.state.analyzer
        assert isinstance(analyzer, TextractAnalyzer)
        assert analyzer.client.meta.region_name == settings.aws_region
        assert client.get("/health").status_code == 200

    assert app.state.analyzer is None
