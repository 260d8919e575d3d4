"""
PDF Loader Module
Turns a statement PDF into plain text with PyMuPDF (fitz).
"""

import fitz  # PyMuPDF
import logging
from pathlib import Path
from typing import Union

logger = logging.getLogger(__name__)


class DocumentLoadError(Exception):
    """Statement text could not be obtained from a document."""
    pass


class PDFLoadError(DocumentLoadError):
    """A statement PDF is missing, damaged or has no text layer."""
    pass


def load_pdf(file_path: Union[str, Path]) -> str:
    """
    Read the text layer of every page, one page after another.

    Pages without text (scanned images, blank separators) are skipped.

    Raises:
        PDFLoadError: Missing file, wrong extension, unreadable document,
            or no text on any page
    """
    pdf_path = Path(file_path)
    if not pdf_path.exists():
        raise PDFLoadError(f"PDF file not found: {file_path}")
    if pdf_path.suffix.lower() != '.pdf':
        raise PDFLoadError(f"File is not a PDF: {file_path}")

    try:
        with fitz.open(str(pdf_path)) as doc:
            if doc.page_count == 0:
                raise PDFLoadError(f"PDF has no pages: {file_path}")

            pages = [page.get_text() for page in doc]
    except PDFLoadError:
        raise
    except Exception as e:
        logger.error(f"Unreadable PDF {file_path}: {e}")
        raise PDFLoadError(f"Failed to load PDF {file_path}: {e}") from e

    text_pages = [text for text in pages if text.strip()]
    if not text_pages:
        raise PDFLoadError(f"No text could be extracted from PDF: {file_path}")

    logger.info(
        f"Loaded PDF {pdf_path.name}: {len(text_pages)}/{len(pages)} pages with text"
    )
    return "\n".join(text_pages)
