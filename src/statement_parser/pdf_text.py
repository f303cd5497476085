from __future__ import annotations

import io
import logging
from typing import Dict, List, Tuple

import pdfplumber

from .errors import TextExtractionError
from .models import TextItem


logger = logging.getLogger(__name__)


def _page_items(height: float, words: List[Dict]) -> List[TextItem]:
    # pdfplumber mide "top"/"bottom" desde arriba; pasamos a origen abajo-izquierda
    return [
        TextItem(text=w["text"], x=float(w["x0"]), y=float(height) - float(w["bottom"]))
        for w in words
    ]


def _read_words(buffer: bytes) -> List[Tuple[float, List[Dict]]]:
    """Solo las llamadas a pdfplumber; sus fallos se propagan como TextExtractionError."""
    try:
        with pdfplumber.open(io.BytesIO(buffer)) as pdf:
            return [(page.height, page.extract_words(keep_blank_chars=False)) for page in pdf.pages]
    except Exception as e:
        raise TextExtractionError(f"Could not extract text from PDF: {e}") from e


def extract_pages(buffer: bytes) -> List[List[TextItem]]:
    """Colaborador de extracción: por cada página, la lista de fragmentos {text, x, y}."""
    pages = [_page_items(height, words) for height, words in _read_words(buffer)]
    logger.info("Extracted %d page(s), %d text item(s)", len(pages), sum(len(p) for p in pages))
    return pages
