"""
Delimited text parser for reading tracker exports.

Knows nothing about books: it turns raw comma-delimited text into
header-keyed rows of plain strings.

Supported dialect:
- comma delimiter, double-quote quoting
- a quote toggles the in-quote state and is never emitted
- doubled quotes inside a quoted field are NOT treated as an escape
- records never span lines
"""

import logging
from typing import Dict, Iterator, List

from ..errors import ParseError

DELIMITER = ","
QUOTE = '"'

logger = logging.getLogger(__name__)


def split_fields(line: str) -> List[str]:
    """Split one line on commas that are outside quoted spans"""
    fields = []
    current = []
    in_quotes = False

    for char in line:
        if char == QUOTE:
            in_quotes = not in_quotes
        elif char == DELIMITER and not in_quotes:
            fields.append("".join(current).strip())
            current = []
        else:
            current.append(char)

    fields.append("".join(current).strip())
    return fields


class ParsedTable:
    """
    Lazy, restartable sequence of rows over an in-memory buffer.

    Every iteration re-reads the buffer from the start, so the table can be
    scanned more than once and always yields the same rows.
    """

    def __init__(self, text: str):
        self._text = text
        self.header = self._read_header()

    def _lines(self) -> Iterator[str]:
        for line in self._text.split("\n"):
            if line.strip():
                yield line

    def _read_header(self) -> List[str]:
        for line in self._lines():
            return split_fields(line)
        raise ParseError("Import file has no header row")

    def __iter__(self) -> Iterator[Dict[str, str]]:
        lines = self._lines()
        next(lines)  # header

        width = len(self.header)
        for line in lines:
            fields = split_fields(line)
            if len(fields) < width:
                fields.extend([""] * (width - len(fields)))
            yield dict(zip(self.header, fields[:width]))

    def __repr__(self) -> str:
        return f"ParsedTable(header={self.header!r})"


def parse_table(text: str) -> ParsedTable:
    """
    Parse raw export text.

    Args:
        text: Full contents of the export file

    Returns:
        ParsedTable whose header is the first non-blank line

    Raises:
        ParseError: if the text contains no non-blank line
    """
    table = ParsedTable(text)
    logger.debug(f"Parsed header with {len(table.header)} columns")
    return table
