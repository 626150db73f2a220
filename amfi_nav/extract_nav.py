"""
Record extraction for the AMFI NAV feed.

The feed is a semicolon-delimited text file laid out as:

    Scheme Code;ISIN;Scheme Name;Net Asset Value;Repurchase Price;Sale Price;Date
    <blank>
    Open Ended Schemes(Debt Scheme - Banking and PSU Fund)
    <blank>
    Aditya Birla Sun Life Mutual Fund
    <blank>
    119551;INF209KA12Z1;Aditya Birla Sun Life Banking & PSU Debt Fund;107.41;;;01-Jan-2024

Only the numbered rows are data. This module:
- classifies each line independently (no lookahead, no carried state),
- takes field 3 as the scheme name and field 4 as the asset value,
- trims both and drops rows where either is empty.

Asset values stay as text since the feed uses placeholders such as "N.A.".
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Iterable, Iterator, List, Optional, Sequence

from .config import SECTION_MARKERS

FIELD_DELIMITER = ";"
MIN_FIELDS = 4

_SCHEME_CODE_RE = re.compile(r"[0-9]+")
# Horizontal whitespace only, matching the feed's padding.
_EDGE_WS_RE = re.compile(r"^[ \t]+|[ \t]+$")
_CONTROL_WS_RE = re.compile(r"[\t\n\r]")


@dataclass(frozen=True)
class NavRecord:
    """One normalised (scheme name, asset value) pair."""

    scheme_name: str
    asset_value: str


@dataclass
class ExtractionResult:
    """Records in source order plus the accepted-record count."""

    records: List[NavRecord]
    count: int


def is_section_marker(line: str, markers: Sequence[str] = SECTION_MARKERS) -> bool:
    """Return True if `line` begins with one of the section-header prefixes."""
    return any(line.startswith(marker) for marker in markers)


def _trim(field: str) -> str:
    return _EDGE_WS_RE.sub("", field)


def parse_nav_line(line: str, markers: Sequence[str] = SECTION_MARKERS) -> Optional[NavRecord]:
    """
    Classify a single feed line and extract a record from it.

    Parameters
    ----------
    line : str
        One raw line of the feed. A trailing line terminator is ignored.
    markers : sequence of str
        Section-header prefixes to reject.

    Returns
    -------
    NavRecord or None
        None for blank lines, section headers, rows with fewer than four
        fields, rows whose first field is not all digits, and rows with an
        empty scheme name or asset value.
    """
    line = line.rstrip("\r\n")
    if not line:
        return None
    if is_section_marker(line, markers):
        return None

    fields = line.split(FIELD_DELIMITER)
    if len(fields) < MIN_FIELDS or not _SCHEME_CODE_RE.fullmatch(fields[0]):
        return None

    # Control characters become spaces before trimming, so a name made only of
    # them is treated as empty. Keeps the TSV output at exactly two columns.
    scheme_name = _trim(_CONTROL_WS_RE.sub(" ", fields[2]))
    asset_value = _trim(fields[3])
    if not scheme_name or not asset_value:
        return None

    return NavRecord(scheme_name=scheme_name, asset_value=asset_value)


def iter_nav_records(
    lines: Iterable[str],
    markers: Sequence[str] = SECTION_MARKERS,
) -> Iterator[NavRecord]:
    """Lazily yield records from `lines` in source order."""
    for line in lines:
        record = parse_nav_line(line, markers)
        if record is not None:
            yield record


def extract_nav_records(
    lines: Iterable[str],
    markers: Sequence[str] = SECTION_MARKERS,
) -> ExtractionResult:
    """
    Run the extractor over a whole feed and count what it accepted.

    Malformed lines are dropped silently; the count is the only signal.
    """
    records = list(iter_nav_records(lines, markers))
    return ExtractionResult(records=records, count=len(records))
