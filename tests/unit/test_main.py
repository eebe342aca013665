import json
from pathlib import Path

import pytest

from journal_capture.logging.logger import Log
from journal_capture.main import main, parse_args, read_file


class TestParseArgs:
    def test_defaults(self) -> None:
        args = parse_args([])
        assert args.files == []
        assert args.text == ""
        assert args.entry_type is None

    def test_type_choices(self) -> None:
        with pytest.raises(SystemExit):
            parse_args(["--type", "poem"])


class TestReadFile:
    def test_guesses_mime_type(self, tmp_path: Path) -> None:
        path = tmp_path / "scan.pdf"
        path.write_bytes(b"%PDF")
        incoming = read_file(path)
        assert incoming.file_name == "scan.pdf"
        assert incoming.mime_type == "application/pdf"
        assert incoming.raw_bytes == b"%PDF"

    def test_unknown_extension_has_empty_mime(self, tmp_path: Path) -> None:
        path = tmp_path / "blob.zzz"
        path.write_bytes(b"?")
        assert read_file(path).mime_type == ""


class TestMain:
    @pytest.fixture(autouse=True)
    def _example_provider(self, monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
        monkeypatch.setenv("AI_PROVIDER", "example")
        monkeypatch.setenv("ATTACHMENTS_ROOT", str(tmp_path / "store"))
        monkeypatch.setattr(Log, "configure", lambda log_level: None)

    def test_prints_draft_json(self, capsys: pytest.CaptureFixture[str]) -> None:
        assert main(["--text", "Coffee with Ana", "--type", "note"]) == 0
        draft = json.loads(capsys.readouterr().out)
        assert draft["content"] == "Coffee with Ana"
        assert draft["entry_type"] == "note"
        assert draft["type_source"] == "user_explicit"
        assert draft["metadata"]["device"] == "desktop"

    def test_empty_submission_exits_2(self) -> None:
        assert main([]) == 2

    def test_unsupported_file_exits_2(self, tmp_path: Path) -> None:
        path = tmp_path / "song.mp3"
        path.write_bytes(b"ID3")
        assert main([str(path)]) == 2

    def test_missing_file_exits_2(self, tmp_path: Path) -> None:
        assert main([str(tmp_path / "missing.png")]) == 2
