"""
Loaders Module - Statement document to text conversion.
"""

from .pdf_loader import (
    load_pdf,
    DocumentLoadError,
    PDFLoadError
)

from .document_loader import (
    load_document,
    load_text_file
)

__all__ = [
    'load_pdf',
    'load_document',
    'load_text_file',
    'DocumentLoadError',
    'PDFLoadError',
]
