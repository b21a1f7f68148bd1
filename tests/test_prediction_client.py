import asyncio
import json

import httpx
import pytest

from prediction_client import MalformedPredictionError, PredictionRequestError, parse_prediction
from tests.conftest import PREDICT_URL, mock_client, reply_json


def predict(handler, content=b"png-bytes"):
    async def run():
        client = mock_client(handler)
        try:
            return await client.predict("chest.png", content, "image/png")
        finally:
            await client.aclose()

    return asyncio.run(run())


def test_posts_multipart_file_field():
    seen = []

    def handler(request):
        seen.append(request)
        return httpx.Response(200, json={"prediction": [[0.7, 0.2, 0.1]]})

    assert predict(handler) == [0.7, 0.2, 0.1]

    request = seen[0]
    assert request.method == "POST"
    assert str(request.url) == PREDICT_URL
    assert request.headers["content-type"].startswith("multipart/form-data")
    assert b'name="file"; filename="chest.png"' in request.content
    assert b"png-bytes" in request.content


def test_non_success_status_raises_request_error():
    with pytest.raises(PredictionRequestError) as exc_info:
        predict(lambda request: httpx.Response(503))

    assert exc_info.value.status_code == 503
    assert str(exc_info.value) == "Server responded with 503: Service Unavailable"


def test_invalid_json_raises():
    with pytest.raises(json.JSONDecodeError):
        predict(lambda request: httpx.Response(200, content=b"<html>oops</html>"))


def test_missing_prediction_field_raises():
    with pytest.raises(MalformedPredictionError):
        predict(reply_json({"label": "COVID-19"}))


def test_transport_error_propagates():
    def handler(request):
        raise httpx.ConnectError("connection refused", request=request)

    with pytest.raises(httpx.ConnectError):
        predict(handler)


@pytest.mark.parametrize(
    "payload",
    [
        {"prediction": []},
        {"prediction": [[0.5, 0.5]]},
        {"prediction": [["a", "b", "c"]]},
        {"prediction": "nope"},
        [1, 2, 3],
    ],
)
def test_parse_prediction_rejects_malformed(payload):
    with pytest.raises(MalformedPredictionError):
        parse_prediction(payload)


def test_parse_prediction_uses_first_vector():
    assert parse_prediction({"prediction": [[1, 0, 0], [0, 1, 0]]}) == [1.0, 0.0, 0.0]
