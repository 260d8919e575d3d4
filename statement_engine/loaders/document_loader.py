"""
Document Loader Module
Dispatches statement files to the right text source by extension.
"""

import logging
from pathlib import Path
from typing import Union

from ..config import config
from .pdf_loader import DocumentLoadError, load_pdf

logger = logging.getLogger(__name__)


def load_text_file(file_path: Union[str, Path]) -> bytes:
    """
    Read a plain-text statement export.

    The bytes are returned undecoded; the processor decodes them so that an
    undecodable file is reported as a document-level failure.

    Raises:
        DocumentLoadError: If the file cannot be read
    """
    try:
        data = Path(file_path).read_bytes()
    except OSError as e:
        logger.error(f"Cannot read text file {file_path}: {e}")
        raise DocumentLoadError(f"Cannot read text file {file_path}: {e}") from e

    logger.info(f"Loaded text file: {file_path} ({len(data)} bytes)")
    return data


def load_document(file_path: Union[str, Path]) -> Union[str, bytes]:
    """
    Load a statement document.

    Args:
        file_path: Path to a .pdf or .txt statement

    Returns:
        Extracted text for PDFs, raw bytes for text files

    Raises:
        DocumentLoadError: If the file is missing, rejected or unreadable
    """
    path = Path(file_path)
    if not path.is_file():
        logger.error(f"Statement file not found: {file_path}")
        raise DocumentLoadError(f"Statement file not found: {file_path}")

    is_valid, error = config.validate_file(path.name, path.stat().st_size)
    if not is_valid:
        logger.error(f"Rejected statement file {file_path}: {error}")
        raise DocumentLoadError(error)

    if path.suffix.lower() == '.pdf':
        return load_pdf(path)
    return load_text_file(path)
