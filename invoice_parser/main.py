"""FastAPI application for the invoice parser service."""
from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional

from fastapi import FastAPI, File, HTTPException, Request, UploadFile, status
from fastapi.concurrency import run_in_threadpool
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from fastapi.staticfiles import StaticFiles
from pydantic import BaseModel
from starlette.exceptions import HTTPException as StarletteHTTPException

from .extractor import extract_invoice_data
from .settings import get_settings
from .text_extract import SUPPORTED_MEDIA_TYPES, EmptyExtractionError, extract_text

LOGGER = logging.getLogger(__name__)

MAX_UPLOAD_SIZE = 10 * 1024 * 1024
STATIC_DIR = Path(__file__).resolve().parent / "static"

NO_FILE_MESSAGE = "No file uploaded."
INVALID_TYPE_MESSAGE = "Invalid file type. Only PDF, JPG, and PNG are allowed."
TOO_LARGE_MESSAGE = "File too large. Maximum size is 10MB."
EMPTY_FILE_MESSAGE = "Uploaded file is empty."
NO_TEXT_MESSAGE = "Could not extract text from file."
PROCESSING_ERROR_MESSAGE = "An error occurred while processing the file."


def configure_logging(level: str = "INFO") -> None:
    """Install the root handler once and apply ``level`` to the root logger."""
    logging.basicConfig(level=level)
    logging.getLogger().setLevel(level)


configure_logging()

app = FastAPI(title="Invoice Parser")
app.add_middleware(CORSMiddleware, allow_origins=["*"], allow_methods=["*"], allow_headers=["*"])


class InvoiceResponse(BaseModel):
    invoiceNumber: Optional[str] = None
    date: Optional[str] = None
    vendor: Optional[str] = None
    total: Optional[str] = None


@app.exception_handler(StarletteHTTPException)
async def http_error_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    return JSONResponse(status_code=exc.status_code, content={"error": exc.detail})


async def _read_upload(file: Optional[UploadFile]) -> bytes:
    if file is None:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=NO_FILE_MESSAGE)
    if file.content_type not in SUPPORTED_MEDIA_TYPES:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=INVALID_TYPE_MESSAGE)
    data = await file.read()
    if len(data) > MAX_UPLOAD_SIZE:
        raise HTTPException(status_code=status.HTTP_413_REQUEST_ENTITY_TOO_LARGE, detail=TOO_LARGE_MESSAGE)
    if not data:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=EMPTY_FILE_MESSAGE)
    return data


@app.post("/upload", response_model=InvoiceResponse)
async def upload(invoice: Optional[UploadFile] = File(None)) -> InvoiceResponse:
    data = await _read_upload(invoice)

    try:
        raw_text = await run_in_threadpool(extract_text, data, invoice.content_type)
        extracted = extract_invoice_data(raw_text)
    except EmptyExtractionError as exc:
        LOGGER.warning("No text extracted from %s: %s", invoice.filename, exc)
        raise HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail=NO_TEXT_MESSAGE) from exc
    except Exception as exc:
        LOGGER.exception("Error processing file %s", invoice.filename)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail=PROCESSING_ERROR_MESSAGE
        ) from exc

    LOGGER.info("Extraction complete.")
    return InvoiceResponse(**extracted.as_dict())


app.mount("/", StaticFiles(directory=STATIC_DIR, html=True), name="static")


def run() -> None:
    """Start the service with uvicorn on the configured port."""
    import uvicorn

    settings = get_settings()
    configure_logging(settings.log_level)
    LOGGER.info("Invoice parser running at http://localhost:%s", settings.port)
    LOGGER.info("Send a POST request to /upload with a file attached (form-data key: 'invoice').")
    uvicorn.run(app, host=settings.host, port=settings.port, log_level=settings.log_level.lower())


__all__ = ["app", "configure_logging", "run"]
