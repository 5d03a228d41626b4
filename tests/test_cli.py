from __future__ import annotations

import io
import sys
from pathlib import Path

import pytest

import cli
from conftest import build_header


def _feed_stdin(monkeypatch: pytest.MonkeyPatch, data: bytes) -> None:
    monkeypatch.setattr(sys, "stdin", io.TextIOWrapper(io.BytesIO(data)))


def test_cli_prints_header_from_stdin(
    monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str], header_bytes: bytes
) -> None:
    _feed_stdin(monkeypatch, header_bytes + b"\x00" * 16)

    code = cli.main([])

    out, err = capsys.readouterr()
    assert code == 0
    assert "num_channels: 2" in out
    assert "sample_rate: 44100" in out
    assert err == ""


def test_cli_reports_short_stdin(monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]) -> None:
    _feed_stdin(monkeypatch, b"RIFF" + b"\x00" * 26)

    code = cli.main(["-"])

    out, err = capsys.readouterr()
    assert code == 1
    assert out == ""
    assert err.strip() == "Error: WAVE header size must be 44-bytes long, but got 30."


def test_cli_reports_bad_magic_from_file(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    wav_path = tmp_path / "big_endian.wav"
    wav_path.write_bytes(build_header(chunk_id=b"RIFX"))

    code = cli.main([str(wav_path)])

    _, err = capsys.readouterr()
    assert code == 1
    assert err.strip() == "Error: Stream must have 'RIFF' header, but got 0x58464952."


def test_cli_reads_header_from_file(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    wav_path = tmp_path / "mono.wav"
    wav_path.write_bytes(build_header(num_channels=1, sample_rate=8_000))

    code = cli.main([str(wav_path)])

    out, _ = capsys.readouterr()
    assert code == 0
    assert "num_channels: 1" in out
    assert "sample_rate: 8000" in out


def test_cli_missing_file_exits_nonzero(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    code = cli.main([str(tmp_path / "missing.wav")])

    _, err = capsys.readouterr()
    assert code == 1
    assert err.startswith("Error: ")
