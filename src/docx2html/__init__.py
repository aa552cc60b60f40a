"""
docx2html - Convert Word documents to HTML.

A Python library and CLI tool for converting Word documents (.docx) into
standalone HTML pages with headings, inline formatting and tables.
"""

from .config import DEFAULT_CONFIG, DEFAULT_STYLESHEET, Config
from .converter import convert_file, convert_to_string
from .loader import DocumentLoadError, DocxProvider, load_document
from .model import Cell, Document, DocumentProvider, Paragraph, Row, Run, Table
from .renderer import escape_html, render, strip_ignored_text

__version__ = "0.1.0"
__all__ = [
    "Config",
    "DEFAULT_CONFIG",
    "DEFAULT_STYLESHEET",
    "Cell",
    "Document",
    "DocumentLoadError",
    "DocumentProvider",
    "DocxProvider",
    "Paragraph",
    "Row",
    "Run",
    "Table",
    "convert_file",
    "convert_to_string",
    "escape_html",
    "load_document",
    "render",
    "strip_ignored_text",
]
