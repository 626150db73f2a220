"""
Tools for fetching the AMFI NAV feed.

This module:
- Downloads `NAVAll.txt` from the AMFI website in a single blocking request
  (no retries; a failure aborts the run).
- Keeps the raw download in a run-scoped temporary file that is always
  removed, whether extraction succeeds or not.
- Reads a feed file lazily, line by line, for the extractor.

A local copy of the feed can be read with `read_feed_lines` directly, which
skips the network entirely.
"""

from __future__ import annotations

import shutil
import tempfile
from contextlib import contextmanager
from dataclasses import dataclass
from pathlib import Path
from typing import Iterator, Optional

import requests

from .config import AMFI_NAV_URL, REQUEST_TIMEOUT, TEMP_FEED_NAME, USER_AGENT
from .console import print_status


class FeedDownloadError(RuntimeError):
    """Raised when the feed cannot be fetched (transport error, bad status, empty body)."""


@dataclass
class FeedStats:
    """Size diagnostics for a downloaded feed."""

    size_bytes: int
    line_count: int


def _requests_session(user_agent: Optional[str] = None) -> requests.Session:
    s = requests.Session()
    s.headers.update({"User-Agent": user_agent or USER_AGENT, "Accept": "text/plain,*/*"})
    return s


def _fetch(session: requests.Session, url: str, timeout: float) -> requests.Response:
    try:
        resp = session.get(url, timeout=timeout)
        resp.raise_for_status()
    except requests.RequestException as exc:
        raise FeedDownloadError(f"Failed to download data from {url}: {exc}") from exc
    return resp


def download_nav_feed(
    url: str = AMFI_NAV_URL,
    dest: Optional[Path] = None,
    session: Optional[requests.Session] = None,
    timeout: float = REQUEST_TIMEOUT,
) -> Path:
    """
    Download the NAV feed from `url` to `dest`.

    Parameters
    ----------
    url : str
        Feed URL (defaults to the public AMFI `NAVAll.txt`).
    dest : Path, optional
        Destination file. Defaults to `TEMP_FEED_NAME` in the working directory.
    session : requests.Session, optional
        Session to issue the request with. A fresh one is created if omitted.
    timeout : float
        Request timeout in seconds.

    Returns
    -------
    Path
        Path to the downloaded file.

    Raises
    ------
    FeedDownloadError
        On any transport error, non-success HTTP status or empty response.
    """
    dest = Path(dest) if dest is not None else Path(TEMP_FEED_NAME)
    dest.parent.mkdir(parents=True, exist_ok=True)
    print_status(f"Downloading AMFI NAV data from: {url}")
    if session is None:
        with _requests_session() as owned:
            resp = _fetch(owned, url, timeout)
    else:
        resp = _fetch(session, url, timeout)

    if not resp.content:
        raise FeedDownloadError(f"Empty response when downloading NAV data from {url}")

    dest.write_bytes(resp.content)
    print_status("Data downloaded successfully.")
    return dest


def describe_feed(path: Path) -> FeedStats:
    """Return the byte size and line count of a feed file."""
    path = Path(path)
    size = path.stat().st_size
    with open(path, "rb") as f:
        line_count = sum(chunk.count(b"\n") for chunk in iter(lambda: f.read(1 << 16), b""))
    return FeedStats(size_bytes=size, line_count=line_count)


def read_feed_lines(path: Path) -> Iterator[str]:
    """
    Lazily yield the lines of a feed file.

    Lines are split on line feeds only and keep their terminators; a bare
    carriage return inside a row stays in the row for the extractor to
    replace. Bytes that are not valid UTF-8 are replaced rather than
    aborting the run.
    """
    with open(Path(path), "rb") as f:
        for raw in f:
            yield raw.decode("utf-8", errors="replace")


@contextmanager
def temporary_feed(
    url: str = AMFI_NAV_URL,
    work_dir: Optional[Path] = None,
    session: Optional[requests.Session] = None,
    timeout: float = REQUEST_TIMEOUT,
) -> Iterator[Path]:
    """
    Download the feed into a temporary file and remove it on exit.

    If `work_dir` is given the file is written there as `TEMP_FEED_NAME`;
    otherwise a private temporary directory is created and removed with it.
    Cleanup runs on every exit path, including a failed download.
    """
    owned_dir: Optional[Path] = None
    if work_dir is None:
        owned_dir = Path(tempfile.mkdtemp(prefix="amfi_nav_"))
        target = owned_dir / TEMP_FEED_NAME
    else:
        target = Path(work_dir) / TEMP_FEED_NAME

    try:
        yield download_nav_feed(url, dest=target, session=session, timeout=timeout)
    finally:
        removed = False
        if target.exists():
            target.unlink()
            removed = True
        if owned_dir is not None:
            shutil.rmtree(owned_dir, ignore_errors=True)
        if removed:
            print_status("Cleaned up temporary files.")
