"""Configuration classes for docx2html."""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

# Embedded stylesheet (selector -> declarations), emitted in this order.
# .bold/.italic/.underline are not referenced by the generated markup.
DEFAULT_STYLESHEET: dict[str, str] = {
    "body": "font-family: Arial, sans-serif; line-height: 1.6; margin: 20px;",
    "table": "border-collapse: collapse; width: 100%; margin: 20px 0;",
    "th, td": "border: 1px solid #ddd; padding: 8px; text-align: left;",
    "th": "background-color: #f2f2f2; font-weight: bold;",
    "h1, h2, h3, h4, h5, h6": "margin-top: 20px; margin-bottom: 10px;",
    "p": "margin: 10px 0;",
    ".bold": "font-weight: bold;",
    ".italic": "font-style: italic;",
    ".underline": "text-decoration: underline;",
}

DEFAULT_TITLE = "Converted Document"
DEFAULT_LANG = "en"
DEFAULT_USER_AGENT = "Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36"


@dataclass
class Config:
    """Global configuration for the docx2html converter."""

    title: str = DEFAULT_TITLE
    lang: str = DEFAULT_LANG
    strip_ignored_text: bool = True
    download_timeout: int = 30
    download_user_agent: str = DEFAULT_USER_AGENT
    styles: dict[str, str] = field(default_factory=lambda: dict(DEFAULT_STYLESHEET))

    @classmethod
    def from_file(cls, config_path: str | Path) -> Config:
        """Load configuration from JSON file."""
        config_path = Path(config_path)
        if not config_path.exists():
            print(f"Config file not found: {config_path}, using defaults")
            return cls()

        with open(config_path, encoding="utf-8") as f:
            data = json.load(f)

        return cls.from_dict(data)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Config:
        """Create Config from dictionary."""
        config = cls()

        # Document configuration
        doc_config = data.get("document", {})
        config.title = doc_config.get("title", config.title)
        config.lang = doc_config.get("lang", config.lang)
        config.strip_ignored_text = doc_config.get("strip_ignored_text", config.strip_ignored_text)

        # Download configuration
        download_config = data.get("download", {})
        config.download_timeout = download_config.get("timeout", config.download_timeout)
        config.download_user_agent = download_config.get("user_agent", config.download_user_agent)

        # Stylesheet rules replace the defaults wholesale when given
        styles_data = data.get("styles")
        if styles_data is not None:
            config.styles = {str(selector): str(rules) for selector, rules in styles_data.items()}

        return config

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary."""
        return {
            "document": {
                "title": self.title,
                "lang": self.lang,
                "strip_ignored_text": self.strip_ignored_text,
            },
            "download": {
                "timeout": self.download_timeout,
                "user_agent": self.download_user_agent,
            },
            "styles": dict(self.styles),
        }

    def save(self, path: str | Path) -> None:
        """Save configuration to JSON file."""
        with open(path, "w", encoding="utf-8") as f:
            json.dump(self.to_dict(), f, ensure_ascii=False, indent=4)


# Default configuration template
DEFAULT_CONFIG = {
    "document": {
        "title": DEFAULT_TITLE,
        "lang": DEFAULT_LANG,
        "strip_ignored_text": True,
    },
    "styles": dict(DEFAULT_STYLESHEET),
    "download": {
        "timeout": 30,
        "user_agent": DEFAULT_USER_AGENT,
    },
}
