"""
AMFI NAV extraction helper package.

This package contains small, reusable utilities for:
- Downloading the AMFI `NAVAll.txt` feed (semicolon-delimited, multi-section)
- Extracting clean (scheme name, asset value) records from it
- Writing those records as a tab-separated file or a JSON array

EXPLAIN: The feed mixes fund-house headings, section labels and data rows.
Keeping the line classifier separate from download and output code means it
can be tested against plain lists of strings.
"""
