"""Raw text extraction for uploaded invoices.

PDFs are read through their text layer with pdfminer. JPEG and PNG uploads are
run through a local Tesseract OCR pass with the English language data. The
caller picks the path through the declared media type; the bytes are never
sniffed.
"""
from __future__ import annotations

import logging
from io import BytesIO

import pytesseract
from pdfminer.high_level import extract_text as pdfminer_extract_text
from PIL import Image, UnidentifiedImageError

LOGGER = logging.getLogger(__name__)

OCR_LANGUAGE = "eng"

PDF_MEDIA_TYPE = "application/pdf"
IMAGE_MEDIA_TYPES = frozenset({"image/jpeg", "image/png"})
SUPPORTED_MEDIA_TYPES = frozenset({PDF_MEDIA_TYPE, *IMAGE_MEDIA_TYPES})


class TextExtractionError(RuntimeError):
    """Base class for failures while turning a document into text."""


class UnsupportedMediaTypeError(TextExtractionError):
    """Raised when no text source exists for the declared media type."""


class PDFExtractionError(TextExtractionError):
    """Raised when pdfminer cannot read the document."""


class OCRServiceError(TextExtractionError):
    """Raised when the Tesseract engine is missing or fails."""


class OCRDecodeError(TextExtractionError):
    """Raised when the image bytes cannot be decoded."""


class EmptyExtractionError(TextExtractionError):
    """Raised when the document yields no usable text."""


def extract_text(data: bytes, media_type: str) -> str:
    """Return the raw text of ``data`` using the source selected by ``media_type``."""

    if media_type == PDF_MEDIA_TYPE:
        LOGGER.info("Processing PDF...")
        raw_text = _extract_text_from_pdf(data)
    elif media_type in IMAGE_MEDIA_TYPES:
        LOGGER.info("Processing image...")
        raw_text = _ocr_image(data)
    else:
        raise UnsupportedMediaTypeError(f"unsupported_media_type:{media_type}")

    if not raw_text or not raw_text.strip():
        raise EmptyExtractionError("empty_text")
    return raw_text


def _extract_text_from_pdf(binary: bytes) -> str:
    try:
        return pdfminer_extract_text(BytesIO(binary))
    except Exception as exc:
        raise PDFExtractionError("pdf_text_extraction_failed") from exc


def _ocr_image(binary: bytes) -> str:
    # The image handle and the tesseract subprocess both live only for this call.
    try:
        with Image.open(BytesIO(binary)) as image:
            image.load()
            rgb = image.convert("RGB")
    except UnidentifiedImageError as exc:
        raise OCRDecodeError("unsupported_image_format") from exc
    except OSError as exc:
        raise OCRDecodeError("image_open_failed") from exc

    try:
        return pytesseract.image_to_string(rgb, lang=OCR_LANGUAGE)
    except pytesseract.TesseractNotFoundError as exc:
        raise OCRServiceError("tesseract_not_found") from exc
    except pytesseract.TesseractError as exc:
        raise OCRServiceError(f"tesseract_error:{exc}") from exc
    finally:
        rgb.close()


__all__ = [
    "EmptyExtractionError",
    "IMAGE_MEDIA_TYPES",
    "OCRDecodeError",
    "OCRServiceError",
    "PDFExtractionError",
    "PDF_MEDIA_TYPE",
    "SUPPORTED_MEDIA_TYPES",
    "TextExtractionError",
    "UnsupportedMediaTypeError",
    "extract_text",
]
