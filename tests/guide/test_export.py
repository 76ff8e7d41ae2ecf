import hashlib

import pytest

from stylebook.guide.export import (
    DEFAULT_FILENAME,
    ClipboardCopier,
    DownloadFile,
    Feedback,
    TransientFeedback,
    build_download,
    filename_from_disposition,
    save_download,
)

MARKDOWN = "## Color Palette\n- Primary: #5D5FEF — “brand”\n\n## Typography\n"


class FakeClock:
    def __init__(self):
        self.now = 100.0

    def __call__(self):
        return self.now


@pytest.fixture
def clock():
    return FakeClock()


def test_feedback_reverts_to_idle(clock):
    feedback = TransientFeedback(duration=2.0, clock=clock)

    feedback.show(Feedback.COPIED)
    assert feedback.value is Feedback.COPIED

    clock.now += 1
    assert feedback.value is Feedback.COPIED

    clock.now += 1
    assert feedback.value is Feedback.IDLE


def test_copy_writes_original_markdown(clock):
    written = []
    copier = ClipboardCopier(written.append, TransientFeedback(clock=clock))

    result = copier.copy(MARKDOWN)

    assert result is Feedback.COPIED
    assert written == [MARKDOWN]


def test_copy_failure_becomes_error_signal(clock):
    def denied(text):
        raise PermissionError("clipboard denied")

    copier = ClipboardCopier(denied, TransientFeedback(clock=clock))

    assert copier.copy(MARKDOWN) is Feedback.ERROR
    clock.now += 5
    assert copier.feedback.value is Feedback.IDLE


def test_copy_can_retry_after_failure(clock):
    calls = []

    def flaky(text):
        calls.append(text)
        if len(calls) == 1:
            raise OSError("busy")

    copier = ClipboardCopier(flaky, TransientFeedback(clock=clock))

    assert copier.copy(MARKDOWN) is Feedback.ERROR
    assert copier.copy(MARKDOWN) is Feedback.COPIED


def test_build_download_is_byte_identical():
    download = build_download(MARKDOWN)

    assert download.filename == DEFAULT_FILENAME
    assert download.media_type == "text/markdown"
    assert hashlib.sha256(download.content).digest() == hashlib.sha256(
        MARKDOWN.encode("utf-8")
    ).digest()


def test_build_download_custom_name():
    download = build_download(MARKDOWN, "mood-board.md")

    assert download.filename == "mood-board.md"
    assert download.content_disposition == 'attachment; filename="mood-board.md"'


def test_save_download_to_directory(tmp_path):
    path = save_download(build_download(MARKDOWN), tmp_path)

    assert path == tmp_path / DEFAULT_FILENAME
    assert path.read_text(encoding="utf-8") == MARKDOWN


def test_save_download_creates_parents(tmp_path):
    target = tmp_path / "out" / "nested" / "guide.md"

    path = save_download(DownloadFile(filename="ignored.md", content=b"## A\n"), target)

    assert path == target
    assert target.read_bytes() == b"## A\n"


def test_content_disposition_non_ascii_name():
    download = build_download(MARKDOWN, "指南.md")

    assert download.content_disposition == (
        "attachment; filename=\".md\"; filename*=UTF-8''%E6%8C%87%E5%8D%97.md"
    )
    download.content_disposition.encode("latin-1")


def test_content_disposition_strips_quotes():
    download = build_download(MARKDOWN, 'a"; x=".md')

    assert download.content_disposition == (
        "attachment; filename=\"a; x=.md\"; filename*=UTF-8''a%22%3B%20x%3D%22.md"
    )


def test_filename_from_disposition_prefers_extended():
    assert filename_from_disposition(
        "attachment; filename=\".md\"; filename*=UTF-8''%E6%8C%87%E5%8D%97.md"
    ) == "指南.md"
    assert filename_from_disposition('attachment; filename="guide.md"') == "guide.md"
    assert filename_from_disposition("inline") is None


def test_save_download_ignores_directories_in_name(tmp_path):
    path = save_download(DownloadFile(filename="../../escape.md", content=b"x"), tmp_path)

    assert path == tmp_path / "escape.md"
