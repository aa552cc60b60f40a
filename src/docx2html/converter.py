"""
Core converter module for docx2html.
Converts Word documents (.docx) to HTML pages.
"""

from __future__ import annotations

from pathlib import Path, PurePosixPath
from urllib.parse import urlparse

from .config import Config
from .loader import DocumentSource, DocxProvider, is_url
from .model import DocumentProvider
from .renderer import render


def print_info(message: str) -> None:
    """Print info message."""
    print(f"[INFO] {message}")


def print_error(message: str) -> None:
    """Print error message."""
    print(f"[ERROR] {message}")


def _resolve_config(config: Config | str | Path | None) -> Config:
    if config is None:
        return Config()
    if isinstance(config, (str, Path)):
        return Config.from_file(config)
    return config


def default_output_path(input_path: str | Path) -> Path:
    """Output path used when none is given: the input with an .html suffix."""
    if is_url(input_path):
        name = PurePosixPath(urlparse(str(input_path)).path).stem or "document"
        return Path(f"{name}.html")
    return Path(input_path).with_suffix(".html")


def convert_to_string(
    source: DocumentSource,
    config: Config | str | Path | None = None,
    provider: DocumentProvider | None = None,
) -> str:
    """
    Convert a Word document to HTML and return it as a string.

    Args:
        source: Input .docx path, URL, bytes or binary file object
        config: Configuration object or path to config file
        provider: Document provider (python-docx based if None)

    Returns:
        HTML content
    """
    config = _resolve_config(config)
    if provider is None:
        provider = DocxProvider(config)

    document = provider.load(source)
    return render(document, config)


def convert_file(
    input_path: str | Path,
    output_path: str | Path | None = None,
    config: Config | str | Path | None = None,
    provider: DocumentProvider | None = None,
) -> Path:
    """
    Convert a Word document file to an HTML file.

    Args:
        input_path: Input .docx file path or http(s) URL
        output_path: Output file path (defaults to input with .html extension)
        config: Configuration object or path to config file
        provider: Document provider (python-docx based if None)

    Returns:
        Path to the output file
    """
    if not is_url(input_path):
        input_path = Path(input_path)
        if not input_path.exists():
            raise FileNotFoundError(f"Input file not found: {input_path}")

    if output_path is None:
        output_path = default_output_path(input_path)
    else:
        output_path = Path(output_path)

    html = convert_to_string(input_path, config, provider)

    output_path.parent.mkdir(parents=True, exist_ok=True)
    output_path.write_text(html, encoding="utf-8")
    print_info(f"HTML saved: {output_path}")

    return output_path
