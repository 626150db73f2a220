"""
Output encodings for extracted NAV records.

Two interchangeable formats:
- TSV: a `Scheme_Name<TAB>Asset_Value` header, then one tab-joined line per
  record. The extractor has already replaced tabs and newlines in scheme
  names, so a plain join is enough.
- JSON: a single array of `{"scheme_name", "asset_value"}` objects, produced
  by the standard `json` encoder. Indentation is a pluggable formatting step;
  `compact_json` is the no-op fallback.

Both are derived from the record sequence alone.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Callable, Dict, Iterable, List, Optional, Sequence

import pandas as pd

from .extract_nav import NavRecord

TSV_HEADER = ("Scheme_Name", "Asset_Value")

JsonFormatter = Callable[[List[Dict[str, str]]], str]


def render_tsv(records: Iterable[NavRecord]) -> str:
    lines = ["\t".join(TSV_HEADER)]
    lines.extend(f"{r.scheme_name}\t{r.asset_value}" for r in records)
    return "\n".join(lines) + "\n"


def write_tsv(records: Sequence[NavRecord], path: Path) -> int:
    """Write records as TSV to `path`. Returns the number of records written."""
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(render_tsv(records), encoding="utf-8")
    return len(records)


def records_to_payload(records: Iterable[NavRecord]) -> List[Dict[str, str]]:
    return [{"scheme_name": r.scheme_name, "asset_value": r.asset_value} for r in records]


def pretty_json(payload: List[Dict[str, str]]) -> str:
    return json.dumps(payload, indent=2, ensure_ascii=False)


def compact_json(payload: List[Dict[str, str]]) -> str:
    return json.dumps(payload, ensure_ascii=False)


def select_json_formatter(pretty: bool = True) -> JsonFormatter:
    """Return the JSON formatting step: indented, or the unindented fallback."""
    return pretty_json if pretty else compact_json


def render_json(records: Iterable[NavRecord], formatter: JsonFormatter = pretty_json) -> str:
    return formatter(records_to_payload(records)) + "\n"


def write_json(
    records: Sequence[NavRecord],
    path: Path,
    formatter: JsonFormatter = pretty_json,
) -> int:
    """Write records as a JSON array to `path`. Returns the number of records written."""
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(render_json(records, formatter), encoding="utf-8")
    return len(records)


def records_to_frame(records: Iterable[NavRecord]) -> pd.DataFrame:
    """
    Build a tidy two-column DataFrame (`Scheme_Name`, `Asset_Value`).

    Values stay as strings; no numeric conversion is attempted.
    """
    rows = [(r.scheme_name, r.asset_value) for r in records]
    return pd.DataFrame(rows, columns=list(TSV_HEADER), dtype=str)


def format_sample(
    records: Sequence[NavRecord],
    output_format: str,
    n: Optional[int] = None,
) -> str:
    """
    Render a short preview of the extracted records.

    TSV mode shows the first 5 records as an aligned table; JSON mode shows the
    first 2 records as indented JSON.
    """
    if output_format == "tsv":
        head = records_to_frame(records[: n if n is not None else 5])
        if head.empty:
            return "\t".join(TSV_HEADER)
        return head.to_string(index=False, justify="left")
    if output_format == "json":
        return pretty_json(records_to_payload(records[: n if n is not None else 2]))
    raise ValueError(f"Unsupported output format: {output_format!r}")
