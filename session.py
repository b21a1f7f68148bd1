import base64
import io
import logging
from dataclasses import dataclass, field, replace
from typing import List, Optional, Tuple

from PIL import Image, UnidentifiedImageError

from results import render_results, summarize

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SelectedImage:
    filename: str
    content_type: str
    content: bytes = field(repr=False)

    @property
    def size(self) -> int:
        return len(self.content)


@dataclass(frozen=True)
class Notification:
    title: str
    description: str
    variant: str = "default"


@dataclass(frozen=True)
class Idle:
    status = "idle"


@dataclass(frozen=True)
class Loading:
    status = "loading"


@dataclass(frozen=True)
class Succeeded:
    vector: Tuple[float, ...]
    status = "succeeded"


@dataclass(frozen=True)
class Failed:
    message: str
    status = "failed"


def is_image_type(content_type: Optional[str]) -> bool:
    return bool(content_type) and content_type.startswith("image/")


FORMAT_TO_MIME = {
    "JPEG": "image/jpeg",
    "JPG": "image/jpeg",
    "PNG": "image/png",
    "WEBP": "image/webp",
    "BMP": "image/bmp",
    "GIF": "image/gif",
}


def resolve_mime(content_type: str, content: bytes) -> str:
    # a generic "image/" or "image/*" is replaced by the decoded format
    subtype = content_type.partition("/")[2]
    if subtype and subtype != "*":
        return content_type
    try:
        with Image.open(io.BytesIO(content)) as img:
            fmt = (img.format or "").upper()
    except (UnidentifiedImageError, OSError):
        fmt = ""
    return FORMAT_TO_MIME.get(fmt, "image/png")


def to_data_url(image: SelectedImage) -> str:
    image_b64 = base64.b64encode(image.content).decode("ascii")
    return f"data:{image.content_type};base64,{image_b64}"


def image_dimensions(content: bytes):
    try:
        with Image.open(io.BytesIO(content)) as img:
            return img.size
    except (UnidentifiedImageError, OSError):
        return None


class SessionController:
    """Holds the upload state of the page and runs submissions against the prediction client.

    Every user action bumps a generation counter. A submission whose
    generation is stale by the time the server answers drops its outcome,
    so a newer selection, clear or submit always wins.
    """

    def __init__(self, client):
        self.client = client
        self.image: Optional[SelectedImage] = None
        self.preview: Optional[str] = None
        self.state = Idle()
        self._generation = 0
        self._notifications: List[Notification] = []

    @property
    def loading(self) -> bool:
        return isinstance(self.state, Loading)

    @property
    def results(self):
        return list(self.state.vector) if isinstance(self.state, Succeeded) else None

    @property
    def error(self):
        return self.state.message if isinstance(self.state, Failed) else None

    def notify(self, title: str, description: str, variant: str = "default"):
        self._notifications.append(Notification(title, description, variant))

    def drain_notifications(self) -> List[Notification]:
        pending, self._notifications = self._notifications, []
        return pending

    def select_file(self, candidate: Optional[SelectedImage]):
        if candidate is None:
            return

        if not is_image_type(candidate.content_type):
            logger.info("Rejected %s with type %r", candidate.filename, candidate.content_type)
            self.notify(
                "Invalid file type",
                "Please upload an image file (JPEG, PNG, etc.)",
                variant="destructive",
            )
            return

        self._generation += 1
        content_type = resolve_mime(candidate.content_type, candidate.content)
        candidate = replace(candidate, content_type=content_type)
        self.image = candidate
        self.preview = to_data_url(candidate)
        self.state = Idle()

    def clear(self):
        self._generation += 1
        self.image = None
        self.preview = None
        self.state = Idle()

    async def submit(self):
        if self.image is None:
            return

        self._generation += 1
        generation = self._generation
        image = self.image
        self.state = Loading()

        try:
            vector = await self.client.predict(image.filename, image.content, image.content_type)
        except Exception as exc:
            if generation != self._generation:
                logger.debug("Dropping failure of superseded submission: %s", exc)
                return
            logger.error("Error submitting image %s: %s", image.filename, exc, exc_info=True)
            self.state = Failed(str(exc) or exc.__class__.__name__)
            self.notify(
                "Error",
                "Failed to analyze the image. Please try again.",
                variant="destructive",
            )
            return

        if generation != self._generation:
            logger.debug("Dropping result of superseded submission for %s", image.filename)
            return

        self.state = Succeeded(tuple(vector))
        self.notify("Analysis complete", "Your X-ray has been successfully analyzed.")

    def file_info(self):
        if self.image is None:
            return None
        dims = image_dimensions(self.image.content)
        return {
            "name": self.image.filename,
            "type": self.image.content_type,
            "size": self.image.size,
            "size_kb": f"{self.image.size / 1024:.2f}",
            "width": dims[0] if dims else None,
            "height": dims[1] if dims else None,
        }

    def snapshot(self, drain: bool = True):
        """JSON view of the page state. Pending notifications are handed out only when ``drain`` is set."""
        results = self.results
        return {
            "status": self.state.status,
            "loading": self.loading,
            "error": self.error,
            "results": results,
            "summary": summarize(results) if results else None,
            "results_html": render_results(results, self.preview) if results else None,
            "preview": self.preview,
            "file": self.file_info(),
            "notifications": [vars(n) for n in self.drain_notifications()] if drain else [],
        }
