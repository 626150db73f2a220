"""
Configuration for the AMFI NAV extractor.

Centralises the feed URL, output locations and the section labels the feed
inserts between fund-house groupings.
"""

from pathlib import Path

# Project root = parent of this `amfi_nav` package
PROJECT_ROOT = Path(__file__).resolve().parents[1]

# Default directory for extracted output files
DATA_ROOT = PROJECT_ROOT / "amfi_nav_data"

AMFI_NAV_URL = "https://www.amfiindia.com/spages/NAVAll.txt"

TSV_OUTPUT = "amfi_nav_data.tsv"
JSON_OUTPUT = "amfi_nav_data.json"
TEMP_FEED_NAME = "nav_data_temp.txt"

OUTPUT_FORMATS = ("tsv", "json")
DEFAULT_OUTPUT_FORMAT = "tsv"

# Lines starting with any of these are section headers, never data rows.
# New labels can be appended here without touching the classifier.
SECTION_MARKERS = (
    "Scheme Code",
    "Open Ended Schemes",
    "Close Ended Schemes",
    "Interval Fund Schemes",
)

REQUEST_TIMEOUT = 60
USER_AGENT = "amfi-nav-extractor/0.1 (+https://www.amfiindia.com)"

# EXPLAIN: Output directories are created by the writers, not at import time,
# to keep module side effects minimal.
