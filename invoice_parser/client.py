"""Command-line client that uploads an invoice to a running parser service."""
from __future__ import annotations

import argparse
import json
import mimetypes
import sys
from pathlib import Path
from typing import Any, Dict, List, Optional

import requests

DEFAULT_URL = "http://localhost:3000/upload"
TIMEOUT = 120


class UploadError(RuntimeError):
    """Raised when the service rejects the upload or cannot be reached."""


def _guess_media_type(path: Path) -> str:
    media_type, _ = mimetypes.guess_type(path.name)
    return media_type or "application/octet-stream"


def upload_invoice(path: Path, url: str = DEFAULT_URL) -> Dict[str, Any]:
    """Post ``path`` under the ``invoice`` form key and return the decoded JSON."""
    with path.open("rb") as handle:
        files = {"invoice": (path.name, handle, _guess_media_type(path))}
        try:
            response = requests.post(url, files=files, timeout=TIMEOUT)
        except requests.RequestException as exc:
            raise UploadError(f"request_failed:{exc}") from exc

    try:
        payload = response.json()
    except ValueError:
        payload = {"error": response.text}
    if not response.ok:
        raise UploadError(f"{response.status_code}: {payload.get('error', payload)}")
    return payload


def main(argv: Optional[List[str]] = None) -> int:
    parser = argparse.ArgumentParser(description="Upload an invoice and print the extracted fields.")
    parser.add_argument("file", type=Path, help="PDF, JPG or PNG invoice")
    parser.add_argument("--url", default=DEFAULT_URL, help=f"upload endpoint (default: {DEFAULT_URL})")
    args = parser.parse_args(argv)

    if not args.file.is_file():
        print(f"File not found: {args.file}", file=sys.stderr)
        return 2
    try:
        result = upload_invoice(args.file, url=args.url)
    except UploadError as exc:
        print(f"Upload failed: {exc}", file=sys.stderr)
        return 1
    print(json.dumps(result, indent=2, ensure_ascii=False))
    return 0


__all__ = ["UploadError", "main", "upload_invoice"]


if __name__ == "__main__":
    sys.exit(main())
