"""
Lexical scanning of documentation text into sections and paragraphs.

A section starts at a line beginning with a single "# " heading marker and runs
until the next marker or the end of the text. Deeper headings ("## ...") stay
inside their section. Text before the first marker is kept as a preamble
section without a heading.
"""
from __future__ import annotations
import re
from dataclasses import dataclass
from typing import List, Optional

HEADING_MARKER = "# "

_HEADING_RE = re.compile(r"^# ", re.MULTILINE)
_BLANK_LINE_RE = re.compile(r"\n[ \t]*\n(?:[ \t]*\n)*")


@dataclass(frozen=True)
class Section:
    """One heading-delimited span; `text` is the verbatim source span."""
    heading: Optional[str]
    text: str

    @property
    def body(self) -> str:
        if self.heading is None:
            return self.text
        return self.text.partition("\n")[2]


def _to_section(span: str, headed: bool) -> Section:
    if not headed:
        return Section(heading=None, text=span)
    heading = span[len(HEADING_MARKER):].partition("\n")[0]
    return Section(heading=heading, text=span)


def split_into_sections(text: str) -> List[Section]:
    """
    Linear scan producing sections in source order.

    The newline that precedes a heading marker acts as the separator and is
    not part of either neighbouring section, so joining the section texts with
    "\\n" reproduces the input (minus a preamble made of a lone newline).
    """
    starts = [m.start() for m in _HEADING_RE.finditer(text)]
    sections: List[Section] = []

    preamble_end = starts[0] if starts else len(text)
    preamble = text[:preamble_end]
    if starts and preamble.endswith("\n"):
        preamble = preamble[:-1]
    if preamble:
        sections.append(_to_section(preamble, headed=False))

    for i, start in enumerate(starts):
        end = starts[i + 1] - 1 if i + 1 < len(starts) else len(text)
        sections.append(_to_section(text[start:end], headed=True))
    return sections


def split_into_paragraphs(text: str) -> List[str]:
    """Split on blank lines (empty or whitespace-only); empty spans are dropped."""
    return [p for p in _BLANK_LINE_RE.split(text) if p.strip()]
