from __future__ import annotations

from typing import Any, Dict

import pytest

from invoice_parser import text_extract


class FakeImage:
    def __init__(self, captured: Dict[str, Any], mode: str = "L") -> None:
        self.captured = captured
        self.mode = mode

    def __enter__(self) -> "FakeImage":
        return self

    def __exit__(self, *_: Any) -> None:
        self.captured["source_closed"] = True

    def load(self) -> None:
        self.captured["loaded"] = True

    def convert(self, mode: str) -> "FakeImage":
        self.captured["converted_to"] = mode
        return FakeImage(self.captured, mode=mode)

    def close(self) -> None:
        self.captured["converted_closed"] = True


class FakeTesseractError(Exception):
    pass


class FakeTesseractNotFoundError(OSError):
    pass


def _install_fake_ocr(monkeypatch: pytest.MonkeyPatch, captured: Dict[str, Any], result: Any) -> None:
    class FakeImageModule:
        @staticmethod
        def open(_: Any) -> FakeImage:
            captured["opened"] = True
            return FakeImage(captured)

    class FakePytesseract:
        TesseractError = FakeTesseractError
        TesseractNotFoundError = FakeTesseractNotFoundError

        @staticmethod
        def image_to_string(image: FakeImage, lang: str) -> str:
            captured["lang"] = lang
            captured["image_mode"] = image.mode
            if isinstance(result, Exception):
                raise result
            return result

    monkeypatch.setattr(text_extract, "Image", FakeImageModule)
    monkeypatch.setattr(text_extract, "pytesseract", FakePytesseract)


def test_extract_text_uses_pdf_pipeline(monkeypatch: pytest.MonkeyPatch) -> None:
    calls: Dict[str, int] = {"pdf": 0}

    def fake_pdf(stream: Any) -> str:
        calls["pdf"] += 1
        assert stream.read() == b"%PDF-1.4"
        return "Acme Corp\nTotal: 10.00"

    monkeypatch.setattr(text_extract, "pdfminer_extract_text", fake_pdf)

    text = text_extract.extract_text(b"%PDF-1.4", "application/pdf")

    assert calls["pdf"] == 1
    assert text == "Acme Corp\nTotal: 10.00"


def test_extract_text_wraps_pdf_failures(monkeypatch: pytest.MonkeyPatch) -> None:
    def broken_pdf(_: Any) -> str:
        raise ValueError("not a pdf")

    monkeypatch.setattr(text_extract, "pdfminer_extract_text", broken_pdf)

    with pytest.raises(text_extract.PDFExtractionError):
        text_extract.extract_text(b"garbage", "application/pdf")


@pytest.mark.parametrize("media_type", ["image/png", "image/jpeg"])
def test_extract_text_runs_english_ocr(monkeypatch: pytest.MonkeyPatch, media_type: str) -> None:
    captured: Dict[str, Any] = {}
    _install_fake_ocr(monkeypatch, captured, "Acme Corp")

    text = text_extract.extract_text(b"fake-bytes", media_type)

    assert text == "Acme Corp"
    assert captured["opened"] is True
    assert captured["loaded"] is True
    assert captured["converted_to"] == "RGB"
    assert captured["image_mode"] == "RGB"
    assert captured["lang"] == "eng"
    assert captured["source_closed"] is True
    assert captured["converted_closed"] is True


def test_ocr_releases_image_when_tesseract_fails(monkeypatch: pytest.MonkeyPatch) -> None:
    captured: Dict[str, Any] = {}
    _install_fake_ocr(monkeypatch, captured, FakeTesseractError("ocr failed"))

    with pytest.raises(text_extract.OCRServiceError) as excinfo:
        text_extract.extract_text(b"fake-bytes", "image/png")

    assert "tesseract_error" in str(excinfo.value)
    assert captured["source_closed"] is True
    assert captured["converted_closed"] is True


def test_ocr_reports_missing_tesseract(monkeypatch: pytest.MonkeyPatch) -> None:
    captured: Dict[str, Any] = {}
    _install_fake_ocr(monkeypatch, captured, FakeTesseractNotFoundError())

    with pytest.raises(text_extract.OCRServiceError, match="tesseract_not_found"):
        text_extract.extract_text(b"fake-bytes", "image/jpeg")


def test_ocr_rejects_invalid_images() -> None:
    with pytest.raises(text_extract.OCRDecodeError):
        text_extract.extract_text(b"definitely not an image", "image/png")


@pytest.mark.parametrize("raw_text", ["", "  \n\t\n"])
def test_extract_text_rejects_empty_output(monkeypatch: pytest.MonkeyPatch, raw_text: str) -> None:
    monkeypatch.setattr(text_extract, "pdfminer_extract_text", lambda _: raw_text)

    with pytest.raises(text_extract.EmptyExtractionError):
        text_extract.extract_text(b"%PDF-1.4", "application/pdf")


def test_extract_text_rejects_unknown_media_type() -> None:
    with pytest.raises(text_extract.UnsupportedMediaTypeError):
        text_extract.extract_text(b"GIF89a", "image/gif")


def test_all_errors_share_a_base_class() -> None:
    for error in (
        text_extract.UnsupportedMediaTypeError,
        text_extract.PDFExtractionError,
        text_extract.OCRServiceError,
        text_extract.OCRDecodeError,
        text_extract.EmptyExtractionError,
    ):
        assert issubclass(error, text_extract.TextExtractionError)
