"""
Document loading for docx2html.
Reads .docx packages with python-docx and builds the renderer's document model.
"""

from __future__ import annotations

import zipfile
from io import BytesIO
from pathlib import Path
from typing import IO, Union

import docx
import httpx
from docx.exceptions import InvalidXmlError
from docx.opc.exceptions import PackageNotFoundError
from docx.table import Table as DocxTable
from docx.table import _Cell
from docx.text.hyperlink import Hyperlink
from docx.text.paragraph import Paragraph as DocxParagraph

from .config import Config
from .model import Cell, Document, Paragraph, Row, Run, Table

DocumentSource = Union[str, Path, bytes, IO[bytes]]

# Failures python-docx surfaces for unreadable packages. lxml's XMLSyntaxError
# derives from SyntaxError.
_PACKAGE_ERRORS = (PackageNotFoundError, zipfile.BadZipFile, KeyError, ValueError, SyntaxError)

# Attribute values are parsed lazily, so bad values surface while the model is built.
_CONTENT_ERRORS = (InvalidXmlError, KeyError, ValueError, TypeError)


class DocumentLoadError(Exception):
    """Raised when a document cannot be fetched, opened or parsed."""


def is_url(source: object) -> bool:
    """Check whether source is an http(s) URL."""
    return isinstance(source, str) and source.lower().startswith(("http://", "https://"))


def convert_run(run) -> Run:
    """Collapse a python-docx run into a model Run."""
    underline = run.underline
    return Run(
        text=run.text,
        bold=bool(run.bold),
        italic=bool(run.italic),
        # python-docx reports an explicit "none" underline as False
        underline=underline is not None and underline is not False,
    )


def paragraph_style_id(paragraph: DocxParagraph) -> str | None:
    """Return the raw w:pStyle value, without falling back to the default style."""
    return paragraph._p.style


def paragraph_outline_level(paragraph: DocxParagraph) -> int | None:
    """Return the numbering indent level (w:numPr/w:ilvl) if the paragraph has one."""
    pPr = paragraph._p.pPr
    if pPr is None or pPr.numPr is None:
        return None
    ilvl = pPr.numPr.ilvl
    if ilvl is None:
        return None
    return ilvl.val


def convert_paragraph(paragraph: DocxParagraph) -> Paragraph:
    """Convert a python-docx paragraph, flattening hyperlink runs in place."""
    runs = []
    for item in paragraph.iter_inner_content():
        if isinstance(item, Hyperlink):
            runs.extend(convert_run(run) for run in item.runs)
        else:
            runs.append(convert_run(item))

    return Paragraph(
        runs=runs,
        style=paragraph_style_id(paragraph),
        outline_level=paragraph_outline_level(paragraph),
    )


def convert_table(table: DocxTable) -> Table:
    """Convert a python-docx table. Cells are taken as written, merges are not expanded."""
    rows = []
    for row in table.rows:
        cells = []
        for tc in row._tr.tc_lst:
            cell = _Cell(tc, table)
            cells.append(Cell(paragraphs=[convert_paragraph(p) for p in cell.paragraphs]))
        rows.append(Row(cells=cells))
    return Table(rows=rows)


def build_document(document) -> Document:
    """Build the model from an opened python-docx Document."""
    blocks = []
    for item in document.iter_inner_content():
        if isinstance(item, DocxParagraph):
            blocks.append(convert_paragraph(item))
        elif isinstance(item, DocxTable):
            blocks.append(convert_table(item))
    return Document(blocks=blocks)


class DocxProvider:
    """Document provider backed by python-docx, with httpx for remote sources."""

    def __init__(self, config: Config | None = None, transport: httpx.BaseTransport | None = None) -> None:
        self.config = config if config is not None else Config()
        self._transport = transport

    def download(self, url: str) -> bytes:
        """Download a document and return its raw bytes."""
        headers = {"User-Agent": self.config.download_user_agent}
        try:
            with httpx.Client(transport=self._transport) as client:
                response = client.get(url, timeout=self.config.download_timeout, headers=headers, follow_redirects=True)
                response.raise_for_status()
                return response.content
        except httpx.HTTPError as e:
            raise DocumentLoadError(f"Failed to download document {url}: {e}") from e

    def open(self, source: DocumentSource):
        """Open source with python-docx."""
        if is_url(source):
            stream = BytesIO(self.download(source))
        elif isinstance(source, (bytes, bytearray)):
            stream = BytesIO(source)
        elif isinstance(source, (str, Path)):
            path = Path(source)
            if not path.exists():
                raise FileNotFoundError(f"Input file not found: {path}")
            stream = str(path)
        else:
            stream = source

        try:
            return docx.Document(stream)
        except _PACKAGE_ERRORS as e:
            raise DocumentLoadError(f"Failed to open document: {e}") from e

    def load(self, source: DocumentSource) -> Document:
        """Load source into the document model."""
        document = self.open(source)
        try:
            return build_document(document)
        except _CONTENT_ERRORS as e:
            raise DocumentLoadError(f"Failed to read document content: {e}") from e


def load_document(source: DocumentSource, config: Config | None = None) -> Document:
    """
    Load a .docx document into the document model.

    Args:
        source: File path, http(s) URL, raw bytes or binary file object
        config: Configuration object (uses defaults if None)

    Returns:
        The document model

    Raises:
        FileNotFoundError: Local path does not exist
        DocumentLoadError: The document could not be fetched or parsed
    """
    return DocxProvider(config).load(source)
