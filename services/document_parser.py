"""
Parser for the AsciiDoc company table of the directory README.

The source table lists every company as a run of cell lines::

    |Acme Software Ltd.
    |House 12, Road 5,
    Dhanmondi, Dhaka
    |Python, Django, React
    |https://acme.example[Website] https://facebook.com/acme[Facebook]

The document is hand-maintained and irregular, so parsing is lenient: rows
that do not form a complete block are dropped instead of raising.
"""
from __future__ import annotations

import enum
import logging
import re
from typing import List, Optional, Sequence

from models.company_record import CompanyLink, CompanyRecord


DELIMITER = "|"
TABLE_SEPARATOR = "|==="
HEADER_MARKER = "Company Name"

LINK_PATTERN = re.compile(r"(https?://[^\[]+)\[([^\]]*)\]")


class _State(enum.Enum):
    EXPECT_NAME = "expect_name"
    EXPECT_LOCATION = "expect_location"
    EXPECT_TECH = "expect_tech"
    CONSUME_LINKS = "consume_links"


def _is_cell(line: str) -> bool:
    return line.startswith(DELIMITER)


def _cell_text(line: str) -> str:
    # Only the leading delimiter is structural
    return line[len(DELIMITER):].strip()


def extract_links(line: str) -> List[CompanyLink]:
    """Return every `<url>[<label>]` occurrence on the line, in order."""
    links: List[CompanyLink] = []
    for match in LINK_PATTERN.finditer(line):
        url = match.group(1).strip()
        if url:
            links.append(CompanyLink(url=url, label=match.group(2).strip()))
    return links


def split_technologies(cell: str) -> List[str]:
    return [tech.strip() for tech in cell.split(",") if tech.strip()]


def _prepare_lines(document_text: str) -> List[str]:
    lines = []
    for raw in document_text.splitlines():
        line = raw.strip()
        if HEADER_MARKER in line:
            continue
        lines.append(line)
    return lines


class _Block:
    def __init__(self, name: str) -> None:
        self.name = name
        self.location_parts: List[str] = []
        self.technologies: List[str] = []
        self.links: List[CompanyLink] = []

    def to_record(self) -> Optional[CompanyRecord]:
        if not self.name:
            return None
        return CompanyRecord(
            name=self.name,
            location=" ".join(self.location_parts).strip(),
            technologies=self.technologies,
            links=self.links,
        )


def parse_companies(document_text: Optional[str]) -> List[CompanyRecord]:
    """Parse the directory document into company records in document order.

    Never raises on malformed content; an empty or unparsable document yields
    an empty list.
    """
    if not document_text:
        return []

    lines: Sequence[str] = tuple(_prepare_lines(document_text))
    companies: List[CompanyRecord] = []
    state = _State.EXPECT_NAME
    block: Optional[_Block] = None
    dropped = 0

    def _finish() -> None:
        nonlocal dropped
        record = block.to_record() if block is not None else None
        if record is None:
            dropped += 1
        else:
            companies.append(record)

    pos = 0
    while pos < len(lines):
        line = lines[pos]

        if line == TABLE_SEPARATOR:
            if state is _State.CONSUME_LINKS:
                _finish()
            elif state is not _State.EXPECT_NAME:
                dropped += 1
            state, block = _State.EXPECT_NAME, None
            pos += 1
            continue

        if state is _State.EXPECT_NAME:
            if _is_cell(line):
                block = _Block(_cell_text(line))
                state = _State.EXPECT_LOCATION
            pos += 1

        elif state is _State.EXPECT_LOCATION:
            if _is_cell(line):
                block.location_parts.append(_cell_text(line))
                pos += 1
                while pos < len(lines) and not _is_cell(lines[pos]) and lines[pos] != TABLE_SEPARATOR:
                    if lines[pos]:
                        block.location_parts.append(lines[pos])
                    pos += 1
                state = _State.EXPECT_TECH
            else:
                pos += 1

        elif state is _State.EXPECT_TECH:
            if _is_cell(line):
                block.technologies = split_technologies(_cell_text(line))
                state = _State.CONSUME_LINKS
            pos += 1

        else:
            links = extract_links(line)
            if links:
                block.links.extend(links)
                pos += 1
            elif _is_cell(line):
                # A cell without a link opens the next block; do not advance
                _finish()
                state, block = _State.EXPECT_NAME, None
            else:
                pos += 1

    if state is _State.CONSUME_LINKS:
        _finish()
    elif state is not _State.EXPECT_NAME:
        dropped += 1

    if dropped:
        logging.debug(f"Skipped {dropped} incomplete or unnamed company blocks")
    return companies
