"""
Response Formatter - Raw Model Text to Display Blocks
=====================================================

Gemini answers with loosely Markdown-flavoured text. The UI only needs two
kinds of block:

- Heading:   a section starting with "#", "##", ... and whitespace, or
             consisting of the marker alone
- Paragraph: everything else, kept line by line

Sections are separated by one or more blank lines. Bold markers ("**")
are dropped and the enclosed text kept. Paragraphs containing emoji are
flagged so the renderer can show them larger.

All functions here are pure: same text in, same blocks out.
"""

import re
from dataclasses import dataclass
from typing import Sequence, Union


SECTION_BREAK = re.compile(r"\n{2,}")
HEADING_MARKER = re.compile(r"^#+(\s|$)")
HEADING_PREFIX = re.compile(r"^#+\s*")
EMOJI = re.compile("[\U0001F300-\U0001F9FF]")
BOLD_MARKER = "**"


@dataclass(frozen=True)
class Heading:
    text: str

    kind = "heading"


@dataclass(frozen=True)
class Paragraph:
    lines: tuple[str, ...]
    emphasized: bool = False

    kind = "paragraph"

    @property
    def text(self) -> str:
        return "\n".join(self.lines)


DisplayBlock = Union[Heading, Paragraph]


def normalize(text: str) -> str:
    """Use "\\n" line endings and trim the whole text."""
    return text.replace("\r\n", "\n").replace("\r", "\n").strip()


def strip_bold(text: str) -> str:
    """Remove "**" delimiters, keeping the enclosed text."""
    return text.replace(BOLD_MARKER, "")


def split_sections(text: str) -> list[str]:
    normalized = normalize(text)
    if not normalized:
        return []
    return SECTION_BREAK.split(normalized)


def classify_section(section: str) -> DisplayBlock:
    """Turn one cleaned section into a Heading or a Paragraph."""
    candidate = section.lstrip()
    if HEADING_MARKER.match(candidate):
        return Heading(text=HEADING_PREFIX.sub("", candidate, count=1))

    return Paragraph(
        lines=tuple(section.split("\n")),
        emphasized=bool(EMOJI.search(section)),
    )


def format_description(raw_text: str) -> list[DisplayBlock]:
    """
    Format raw model output into display blocks.

    Args:
        raw_text: Text returned by the generative API.

    Returns:
        Blocks in source order. Empty input gives an empty list.
        Whitespace-only sections are kept as paragraphs.
    """
    return [
        classify_section(strip_bold(section))
        for section in split_sections(raw_text)
    ]


def blocks_to_text(blocks: Sequence[DisplayBlock]) -> str:
    """Rebuild plain text from blocks; formatting it again gives the same blocks."""
    parts = []
    for block in blocks:
        if isinstance(block, Heading):
            parts.append(f"# {block.text}")
        else:
            parts.append(block.text)
    return "\n\n".join(parts)
