"""plistlib wrappers that report parse failures as DocumentParseError."""

from __future__ import annotations

import plistlib
from pathlib import Path
from typing import Any
from xml.parsers.expat import ExpatError

from .errors import DocumentParseError


_PARSE_ERRORS = (plistlib.InvalidFileException, ExpatError, ValueError, TypeError, OverflowError)


def loads_document(data: bytes) -> Any:
    try:
        return plistlib.loads(data)
    except _PARSE_ERRORS as exc:
        raise DocumentParseError(exc) from exc


def load_document(path: str | Path) -> Any:
    try:
        with Path(path).open("rb") as fh:
            return plistlib.load(fh)
    except OSError as exc:
        raise DocumentParseError(exc) from exc
    except _PARSE_ERRORS as exc:
        raise DocumentParseError(exc) from exc
