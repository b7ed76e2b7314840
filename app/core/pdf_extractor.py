"""
PDF text-layer extraction.

Only the embedded text layer is read; scanned (image-only) PDFs come back
empty and OCR is not attempted.
"""

import logging
from io import BytesIO
from typing import List

import pdfplumber

logger = logging.getLogger(__name__)


def extract_pdf_text(pdf_bytes: bytes, *, x_tolerance: float = 1.5, y_tolerance: float = 3) -> str:
    """
    Extract text page by page and join it into one newline-delimited string.

    A small x_tolerance keeps words that sit close together from being glued
    into one token.
    """
    pages: List[str] = []
    with pdfplumber.open(BytesIO(pdf_bytes)) as pdf:
        for page_i, page in enumerate(pdf.pages, start=1):
            text = page.extract_text(x_tolerance=x_tolerance, y_tolerance=y_tolerance) or ""
            if not text.strip():
                logger.debug(f"PDF page {page_i} has no text layer")
                continue
            pages.append(text)
    return "\n".join(pages)
