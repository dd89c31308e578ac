"""
Gene list parser for uploaded delimited-text files.

The first non-empty row is treated as a header and discarded. The first
field of every later row is taken verbatim as a gene identifier; column
counts, duplicates and identifier formats are not checked.
"""

import csv
import io
import logging
from pathlib import PurePath
from typing import IO, Iterator, List, Optional, Union

from geneannot.core.errors import ParseError

logger = logging.getLogger(__name__)

TAB_SEPARATED_SUFFIXES = {".tsv", ".tab"}


def delimiter_for(filename: Optional[str]) -> str:
    """Return the field delimiter to use for an uploaded filename."""
    if filename and PurePath(filename).suffix.lower() in TAB_SEPARATED_SUFFIXES:
        return "\t"
    return ","


def _decode(data: Union[bytes, str]) -> str:
    if isinstance(data, str):
        return data
    try:
        # utf-8-sig drops a leading byte-order mark written by spreadsheet tools
        return data.decode("utf-8-sig")
    except UnicodeDecodeError as exc:
        raise ParseError(f"File is not valid UTF-8 text: {exc}") from exc


def _rows(reader) -> Iterator[List[str]]:
    """Yield non-empty rows, converting csv errors into ParseError."""
    while True:
        try:
            row = next(reader)
        except StopIteration:
            return
        except csv.Error as exc:
            raise ParseError(f"Malformed row at line {reader.line_num}: {exc}") from exc
        if row:
            yield row


def parse_genes(stream: IO, delimiter: str = ",") -> List[str]:
    """
    Parse an uploaded gene list.

    Args:
        stream: Binary or text file object positioned at the start of the upload
        delimiter: Field delimiter (see ``delimiter_for``)

    Returns:
        Gene identifiers in row order

    Raises:
        ParseError: If the stream is empty (no header row), is not UTF-8,
            or contains a structurally malformed row. Nothing read before
            the failure is returned.
    """
    text = _decode(stream.read())
    reader = csv.reader(io.StringIO(text, newline=""), delimiter=delimiter, strict=True)
    rows = _rows(reader)

    header = next(rows, None)
    if header is None:
        raise ParseError("File is empty: expected a header row")

    genes = [row[0] for row in rows]
    logger.debug(f"Parsed {len(genes)} gene(s) below header {header!r}")
    return genes
