"""
CLI entry point for docx2html.
"""

from __future__ import annotations

import argparse
import sys
from pathlib import Path

from .config import DEFAULT_CONFIG, Config
from .converter import convert_file, default_output_path, print_error, print_info
from .loader import is_url


def main(argv: list[str] | None = None) -> int:
    """Main CLI entry point."""
    parser = argparse.ArgumentParser(
        prog="docx2html",
        description="Convert Word documents (.docx) to HTML",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  docx2html document.docx                     Convert to document.html
  docx2html document.docx -o page.html        Specify output file
  docx2html https://host/report.docx          Download and convert
  docx2html document.docx -c config.json      Use custom config file
  docx2html --init-config                     Generate default config file
        """,
    )
    parser.add_argument("input", nargs="?", help="Input .docx file path or http(s) URL")
    parser.add_argument("-o", "--output", help="Output HTML file path (default: input with .html extension)")
    parser.add_argument("-c", "--config", default="config.json", help="Config file path (default: config.json)")
    parser.add_argument("--init-config", action="store_true", help="Generate default config file")
    parser.add_argument("-v", "--version", action="store_true", help="Show version")

    args = parser.parse_args(argv)

    if args.version:
        from . import __version__

        print(f"docx2html {__version__}")
        return 0

    if args.init_config:
        import json

        config_path = Path(args.config)
        if config_path.exists():
            print_error(f"Config file already exists: {config_path}")
            return 1
        with open(config_path, "w", encoding="utf-8") as f:
            json.dump(DEFAULT_CONFIG, f, ensure_ascii=False, indent=4)
        print_info(f"Config file created: {config_path}")
        return 0

    if not args.input:
        parser.print_help()
        return 1

    if not is_url(args.input) and not Path(args.input).exists():
        print_error(f"Input file not found: {args.input}")
        return 1

    # Load config
    config_path = Path(args.config)
    if config_path.exists():
        config = Config.from_file(config_path)
    else:
        config = Config()

    output_path = Path(args.output) if args.output else default_output_path(args.input)

    print("Converting DOCX to HTML...")
    print(f"Input:  {args.input}")
    print(f"Output: {output_path}")

    try:
        convert_file(args.input, output_path, config)
    except Exception as e:
        print_error(f"Conversion failed: {e}")
        return 1

    print_info("Conversion completed successfully!")
    return 0


if __name__ == "__main__":
    sys.exit(main())
