import os

import httpx

PREDICT_URL = os.getenv("PREDICT_URL", "http://51.20.84.12:8000/predict")
PREDICT_TIMEOUT = float(os.environ["PREDICT_TIMEOUT"]) if os.getenv("PREDICT_TIMEOUT") else None
NUM_CLASSES = 3


class PredictionRequestError(Exception):
    def __init__(self, status_code: int, reason: str):
        super().__init__(f"Server responded with {status_code}: {reason}")
        self.status_code = status_code
        self.reason = reason


class MalformedPredictionError(ValueError):
    pass


def parse_prediction(data):
    try:
        vector = data["prediction"][0]
    except (KeyError, IndexError, TypeError) as exc:
        raise MalformedPredictionError(f"Response has no usable 'prediction' field: {exc!r}") from exc

    if not isinstance(vector, (list, tuple)) or len(vector) != NUM_CLASSES:
        raise MalformedPredictionError(
            f"Expected {NUM_CLASSES} probabilities, got {vector!r}"
        )
    try:
        return [float(p) for p in vector]
    except (TypeError, ValueError) as exc:
        raise MalformedPredictionError(f"Non-numeric probability in {vector!r}") from exc


class PredictionClient:
    """Posts one image to the remote inference service and returns its probability vector."""

    def __init__(self, url: str = PREDICT_URL, timeout=PREDICT_TIMEOUT, transport=None):
        self.url = url
        self._client = httpx.AsyncClient(timeout=timeout, transport=transport)

    async def predict(self, filename: str, content: bytes, content_type: str):
        files = {"file": (filename, content, content_type)}
        response = await self._client.post(self.url, files=files)

        if not response.is_success:
            raise PredictionRequestError(response.status_code, response.reason_phrase)

        # json.JSONDecodeError is a ValueError and surfaces as-is
        return parse_prediction(response.json())

    async def aclose(self):
        await self._client.aclose()
