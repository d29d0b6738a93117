"""Plain-text extraction from report PDFs."""

import logging
from pathlib import Path

import pdfplumber
import pypdf

logger = logging.getLogger(__name__)


def extract_text(pdf_path: Path | str) -> str | None:
    """
    Extract all text from a PDF.

    Tries pdfplumber first and falls back to pypdf when it yields nothing.

    Args:
        pdf_path: Path to the PDF file.

    Returns:
        The document text, or None if no text could be extracted.
    """
    pdf_path = Path(pdf_path)

    text = _extract_with_pdfplumber(pdf_path)
    if not text:
        logger.info("pdfplumber extracted no text, trying pypdf for %s", pdf_path.name)
        text = _extract_with_pypdf(pdf_path)

    if not text:
        logger.warning("Could not get text from PDF %s", pdf_path)
        return None

    logger.debug("Extracted %d characters from %s", len(text), pdf_path.name)
    return text


def _extract_with_pdfplumber(pdf_path: Path) -> str | None:
    """Extract text page by page using pdfplumber."""
    try:
        with pdfplumber.open(pdf_path) as pdf:
            text_parts = []
            for page in pdf.pages:
                page_text = page.extract_text()
                if page_text:
                    text_parts.append(page_text)
    except Exception as e:
        logger.warning("pdfplumber extraction failed for %s: %s", pdf_path.name, e)
        return None

    full_text = "\n".join(text_parts)
    return full_text if full_text.strip() else None


def _extract_with_pypdf(pdf_path: Path) -> str | None:
    """Extract text using pypdf (fallback)."""
    try:
        reader = pypdf.PdfReader(pdf_path)
        text_parts = [page.extract_text() or "" for page in reader.pages]
    except Exception as e:
        logger.warning("pypdf extraction failed for %s: %s", pdf_path.name, e)
        return None

    full_text = "\n".join(part for part in text_parts if part)
    return full_text if full_text.strip() else None
