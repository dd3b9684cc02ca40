"""Framework about/description block."""

from __future__ import annotations

from exsel.metadata import AUTHOR, PROJECT_NAME, REPOSITORY_URL, TAGLINE, VERSION


def build_about_text() -> str:
    return (
        f"{PROJECT_NAME} v{VERSION}\n"
        f"Author: {AUTHOR}\n"
        f"Repository: {REPOSITORY_URL}\n"
        f"Description: {TAGLINE}\n"
        "Capabilities: case/length/shuffle/reverse/replace text filters, word wrap and counting,\n"
        "Base64 and URL encoding, tag and whitespace stripping, MD5/SHA digests,\n"
        "XML/JSON/CSS/SQL formatting, configurable menu, history/clipboard/webhook notifications."
    )
