"""Shared fixtures for the AMFI NAV extractor tests."""

from __future__ import annotations

from pathlib import Path

import pytest

SAMPLE_FEED = (
    "Scheme Code;ISIN Div Payout/ ISIN Growth;ISIN Div Reinvestment;Scheme Name;"
    "Net Asset Value;Date\r\n"
    "\r\n"
    "Open Ended Schemes(Debt Scheme - Banking and PSU Fund)\r\n"
    "\r\n"
    "Aditya Birla Sun Life Mutual Fund\r\n"
    "\r\n"
    "119551;INF209KA12Z1;Aditya Birla Sun Life Banking & PSU Debt Fund - DIRECT - IDCW;"
    "107.4138;;;01-Jan-2024\r\n"
    "119552;INF209K01LV9;Aditya Birla Sun Life Banking & PSU Debt Fund - Growth;"
    "340.1122;;;01-Jan-2024\r\n"
    "Close Ended Schemes(Income)\r\n"
    "120001;INF000000001; ;12.00;;;01-Jan-2024\r\n"
    "120002;INF000000002;Fund \"A\" Plan;10.00;;;01-Jan-2024\r\n"
    "Interval Fund Schemes(Income)\r\n"
    "ABC;INF000000003;Not A Data Row;11.00;;;01-Jan-2024\r\n"
    "120003;INF000000004;Too Short\r\n"
    "120004;INF000000005;Placeholder Fund;N.A.;;;01-Jan-2024\r\n"
)


class FakeResponse:
    def __init__(self, content: bytes, status_code: int = 200):
        self.content = content
        self.status_code = status_code

    def raise_for_status(self) -> None:
        import requests

        if self.status_code >= 400:
            raise requests.HTTPError(f"{self.status_code} Error")


class FakeSession:
    """Stands in for requests.Session; records the URLs requested."""

    def __init__(self, response=None, exc: Exception | None = None):
        self.response = response
        self.exc = exc
        self.calls: list[str] = []

    def get(self, url, timeout=None):
        self.calls.append(url)
        if self.exc is not None:
            raise self.exc
        return self.response


@pytest.fixture
def sample_feed_text() -> str:
    return SAMPLE_FEED


@pytest.fixture
def sample_feed_file(tmp_path: Path) -> Path:
    path = tmp_path / "NAVAll.txt"
    path.write_bytes(SAMPLE_FEED.encode("utf-8"))
    return path


@pytest.fixture
def ok_session() -> FakeSession:
    return FakeSession(FakeResponse(SAMPLE_FEED.encode("utf-8")))
