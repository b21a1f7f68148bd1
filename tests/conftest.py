import io

import httpx
import pytest
from fastapi.testclient import TestClient
from PIL import Image

from app import app
from prediction_client import PredictionClient
from session import SelectedImage, SessionController

PREDICT_URL = "http://inference.test/predict"


def make_png(size=(8, 6)):
    buffer = io.BytesIO()
    Image.new("L", size, color=128).save(buffer, format="PNG")
    return buffer.getvalue()


@pytest.fixture
def png_bytes():
    return make_png()


@pytest.fixture
def xray(png_bytes):
    return SelectedImage(filename="chest.png", content_type="image/png", content=png_bytes)


def mock_client(handler):
    return PredictionClient(PREDICT_URL, transport=httpx.MockTransport(handler))


def reply_json(payload, status_code=200):
    return lambda request: httpx.Response(status_code, json=payload)


@pytest.fixture
def server():
    """TestClient whose session talks to a mocked inference service.

    Tests swap ``replies["handler"]`` to change what the service returns.
    The client built at startup is closed before the mock replaces it.
    """
    replies = {"handler": reply_json({"prediction": [[0.7, 0.2, 0.1]]}), "requests": []}

    def handler(request):
        replies["requests"].append(request)
        return replies["handler"](request)

    with TestClient(app) as client:
        replies["startup_client"] = app.state.client
        client.portal.call(app.state.client.aclose)
        app.state.client = mock_client(handler)
        app.state.session = SessionController(app.state.client)
        yield client, replies
