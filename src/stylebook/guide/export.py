"""Copy and download of the original style guide markdown.

``ClipboardCopier`` is the copy action for hosts that hand in a clipboard
writer; the bundled HTML page performs the same action in the browser and
shares its ``Feedback`` labels. Downloads are served by the API and saved by
the CLI.
"""
import logging
import re
import time
from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Callable
from urllib.parse import quote, unquote

logger = logging.getLogger(__name__)

DEFAULT_FILENAME = "vibecheck-style-guide.md"
MARKDOWN_MEDIA_TYPE = "text/markdown"

ClipboardWriter = Callable[[str], None]

UNSAFE_FILENAME_CHARS_RE = re.compile(r'["\\\x00-\x1f\x7f]')


class Feedback(str, Enum):
    IDLE = "idle"
    COPIED = "copied"
    ERROR = "error"


class TransientFeedback:
    """A feedback value that falls back to idle after ``duration`` seconds."""

    def __init__(self, duration: float = 2.0, clock: Callable[[], float] = time.monotonic):
        self.duration = duration
        self.clock = clock
        self._value = Feedback.IDLE
        self._expires_at = 0.0

    def show(self, value: Feedback) -> None:
        self._value = value
        self._expires_at = self.clock() + self.duration

    @property
    def value(self) -> Feedback:
        if self._value is not Feedback.IDLE and self.clock() >= self._expires_at:
            self._value = Feedback.IDLE
        return self._value


class ClipboardCopier:
    def __init__(self, writer: ClipboardWriter, feedback: TransientFeedback | None = None):
        self.writer = writer
        self.feedback = feedback or TransientFeedback()

    def copy(self, markdown: str) -> Feedback:
        """Copy the full original markdown; failures become an error signal."""
        try:
            self.writer(markdown)
        except Exception as e:
            logger.warning(f"Failed to copy style guide: {e}")
            self.feedback.show(Feedback.ERROR)
        else:
            self.feedback.show(Feedback.COPIED)
        return self.feedback.value


@dataclass(frozen=True)
class DownloadFile:
    filename: str
    content: bytes
    media_type: str = MARKDOWN_MEDIA_TYPE

    @property
    def content_disposition(self) -> str:
        """Header value for any filename; non-ASCII names also get filename*."""
        quoted = quote(self.filename, safe="")
        fallback = UNSAFE_FILENAME_CHARS_RE.sub("", self.filename)
        fallback = fallback.encode("ascii", "ignore").decode("ascii") or DEFAULT_FILENAME
        if quoted == self.filename:
            return f'attachment; filename="{fallback}"'
        return f"attachment; filename=\"{fallback}\"; filename*=UTF-8''{quoted}"


def filename_from_disposition(value: str) -> str | None:
    """Pick the filename out of a Content-Disposition header, preferring filename*."""
    extended = re.search(r"filename\*=UTF-8''([^;]+)", value, re.IGNORECASE)
    if extended:
        return unquote(extended.group(1).strip())
    plain = re.search(r'filename="([^"]*)"', value)
    if plain:
        return plain.group(1)
    return None


def build_download(markdown: str, filename: str | None = None) -> DownloadFile:
    return DownloadFile(
        filename=filename or DEFAULT_FILENAME,
        content=markdown.encode("utf-8"),
    )


def save_download(download: DownloadFile, output_path: Path) -> Path:
    """Write a download to disk, creating parent directories as needed."""
    if output_path.is_dir():
        output_path = output_path / (Path(download.filename).name or DEFAULT_FILENAME)

    try:
        output_path.parent.mkdir(parents=True, exist_ok=True)
    except OSError as e:
        raise ValueError(f"Failed to create directory {output_path.parent}: {e}") from e

    output_path.write_bytes(download.content)
    logger.info(f"Saved style guide to {output_path}")
    return output_path
