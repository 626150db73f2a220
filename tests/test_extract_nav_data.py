"""End-to-end tests for the amfi_nav.extract_nav_data command line."""

import json

import pytest
import requests

from amfi_nav import extract_nav_data
from amfi_nav.config import JSON_OUTPUT, TSV_OUTPUT

from conftest import FakeResponse, FakeSession


def test_help_exits_zero(capsys):
    with pytest.raises(SystemExit) as excinfo:
        extract_nav_data.main(["--help"])
    assert excinfo.value.code == 0
    out = capsys.readouterr().out
    assert "tsv" in out and "json" in out
    assert TSV_OUTPUT in out


def test_invalid_format_fails_before_download(tmp_path):
    session = FakeSession(FakeResponse(b"unused"))
    with pytest.raises(SystemExit) as excinfo:
        extract_nav_data.main(["xml", "--output-dir", str(tmp_path)], session=session)
    assert excinfo.value.code == 2
    assert session.calls == []
    assert list(tmp_path.iterdir()) == []


def test_default_mode_writes_tsv_from_download(tmp_path, ok_session, capsys):
    status = extract_nav_data.main(["--output-dir", str(tmp_path)], session=ok_session)
    assert status == 0
    assert len(ok_session.calls) == 1

    rows = (tmp_path / TSV_OUTPUT).read_text(encoding="utf-8").splitlines()
    assert rows[0] == "Scheme_Name\tAsset_Value"
    assert rows[1:] == [
        "Aditya Birla Sun Life Banking & PSU Debt Fund - DIRECT - IDCW\t107.4138",
        "Aditya Birla Sun Life Banking & PSU Debt Fund - Growth\t340.1122",
        'Fund "A" Plan\t10.00',
        "Placeholder Fund\tN.A.",
    ]

    captured = capsys.readouterr()
    assert "Total records processed: 4" in captured.err
    assert "Cleaned up temporary files." in captured.out


def test_json_mode_from_local_source(tmp_path, sample_feed_file):
    status = extract_nav_data.main(
        ["json", "--source", str(sample_feed_file), "--output-dir", str(tmp_path), "--no-sample"]
    )
    assert status == 0
    payload = json.loads((tmp_path / JSON_OUTPUT).read_text(encoding="utf-8"))
    assert len(payload) == 4
    assert payload[2] == {"scheme_name": 'Fund "A" Plan', "asset_value": "10.00"}
    # The local source is never deleted.
    assert sample_feed_file.exists()


def test_compact_json_is_unindented(tmp_path, sample_feed_file):
    extract_nav_data.main(
        ["json", "--compact", "--source", str(sample_feed_file), "--output-dir", str(tmp_path), "--no-sample"]
    )
    text = (tmp_path / JSON_OUTPUT).read_text(encoding="utf-8")
    assert text.count("\n") == 1
    assert len(json.loads(text)) == 4


def test_empty_feed_writes_empty_outputs(tmp_path):
    feed = tmp_path / "empty.txt"
    feed.write_text("", encoding="utf-8")
    out_dir = tmp_path / "out"

    assert extract_nav_data.main(["tsv", "--source", str(feed), "--output-dir", str(out_dir)]) == 0
    assert extract_nav_data.main(["json", "--source", str(feed), "--output-dir", str(out_dir)]) == 0

    assert (out_dir / TSV_OUTPUT).read_text(encoding="utf-8") == "Scheme_Name\tAsset_Value\n"
    assert json.loads((out_dir / JSON_OUTPUT).read_text(encoding="utf-8")) == []


def test_download_failure_exits_one_without_output(tmp_path, capsys):
    session = FakeSession(exc=requests.ConnectionError("host unreachable"))
    status = extract_nav_data.main(["--output-dir", str(tmp_path)], session=session)
    assert status == 1
    assert not (tmp_path / TSV_OUTPUT).exists()
    assert "[ERROR]" in capsys.readouterr().err


def test_missing_local_source_exits_one(tmp_path):
    status = extract_nav_data.main(["--source", str(tmp_path / "nope.txt"), "--output-dir", str(tmp_path)])
    assert status == 1
    assert not (tmp_path / TSV_OUTPUT).exists()


def test_output_dir_that_is_a_file_exits_one(tmp_path, sample_feed_file, capsys):
    blocker = tmp_path / "blocker"
    blocker.write_text("not a directory", encoding="utf-8")

    status = extract_nav_data.main(
        ["--source", str(sample_feed_file), "--output-dir", str(blocker), "--no-sample"]
    )
    assert status == 1
    assert "[ERROR]" in capsys.readouterr().err


def test_source_that_is_a_directory_exits_one(tmp_path):
    out_dir = tmp_path / "out"
    status = extract_nav_data.main(["--source", str(tmp_path), "--output-dir", str(out_dir)])
    assert status == 1
    assert not (out_dir / TSV_OUTPUT).exists()
