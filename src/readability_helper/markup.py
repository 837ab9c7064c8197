from __future__ import annotations

import re
from typing import Callable, List, Tuple

Stripper = Callable[[str], str]

# Every replacement keeps a group of the match (or nothing), so the stripped
# text is always a subsequence of the original and seams stay computable.
_MARKDOWN_RULES: List[Tuple[re.Pattern[str], str]] = [
    # Fenced code blocks
    (re.compile(r"^[ \t]*(```|~~~).*?^[ \t]*\1[ \t]*$", re.MULTILINE | re.DOTALL), ""),
    # HTML comments
    (re.compile(r"<!--.*?-->", re.DOTALL), ""),
    # Autolinks keep their target
    (re.compile(r"<((?:https?|mailto):[^>\s]+)>"), r"\1"),
    # HTML tags
    (re.compile(r"</?[A-Za-z][^>\n]*>"), ""),
    # Reference definitions
    (re.compile(r"^[ \t]{0,3}\[[^\]\n]+\]:[ \t]*\S.*$", re.MULTILINE), ""),
    # Images and links keep their alt / link text
    (re.compile(r"!\[([^\]\n]*)\](?:\([^)\n]*\)|\[[^\]\n]*\])"), r"\1"),
    (re.compile(r"\[([^\]\n]+)\](?:\([^)\n]*\)|\[[^\]\n]*\])"), r"\1"),
    # Horizontal rules
    (re.compile(r"^[ \t]*([-*_])(?:[ \t]*\1){2,}[ \t]*$", re.MULTILINE), ""),
    # Setext heading underlines
    (re.compile(r"^[ \t]*(?:=+|-{2,})[ \t]*$", re.MULTILINE), ""),
    # ATX heading markers, leading and closing
    (
        re.compile(r"^[ \t]{0,3}#{1,6}[ \t]+(.*?)(?:[ \t]+#+)?[ \t]*$", re.MULTILINE),
        r"\1",
    ),
    # Block quotes, nested included
    (re.compile(r"^[ \t]*(?:>[ \t]?)+", re.MULTILINE), ""),
    # Bullet and ordered list markers
    (re.compile(r"^[ \t]*(?:[-*+]|\d+[.)])[ \t]+", re.MULTILINE), ""),
    # Strong, emphasis, strikethrough
    (re.compile(r"(\*\*|__)(?=\S)(.+?)(?<=\S)\1"), r"\2"),
    (re.compile(r"(?<![\w*])\*(?=\S)(.+?)(?<=\S)\*(?![\w*])"), r"\1"),
    (re.compile(r"(?<!\w)_(?=\S)(.+?)(?<=\S)_(?!\w)"), r"\1"),
    (re.compile(r"~~(?=\S)(.+?)(?<=\S)~~"), r"\1"),
    # Inline code keeps its content
    (re.compile(r"`([^`\n]+)`"), r"\1"),
]


def strip_markdown(text: str) -> str:
    """Remove Markdown syntax while keeping the prose it wraps."""
    for pattern, replacement in _MARKDOWN_RULES:
        text = pattern.sub(replacement, text)
    return text


def strip_plain(text: str) -> str:
    """Plain text has no markup to remove."""
    return text


def build_stripper(name: str) -> Stripper:
    """Resolve a markup mode name to its stripping function."""
    normalized = name.lower().strip()
    if normalized in {"markdown", "md"}:
        return strip_markdown
    if normalized in {"plain", "plaintext", "text"}:
        return strip_plain
    raise ValueError(f"Unknown markup mode '{name}'.")
