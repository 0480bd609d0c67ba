from pathlib import Path
from unittest.mock import patch

import pytest

from medisummarize.ai.example_client_adapter import ExampleClientAdapter
from medisummarize.main import main


class TestMain:
    @pytest.fixture(autouse=True)
    def _example_provider(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("AI_PROVIDER", "example")
        monkeypatch.setattr("medisummarize.main.Log.configure", lambda log_level: None)

    def test_summarizes_and_answers(
        self, tmp_path: Path, capsys: pytest.CaptureFixture[str]
    ) -> None:
        report = tmp_path / "report.txt"
        report.write_text("Hemoglobin 10.9 g/dL (low).")

        code = main([str(report), "--summarize", "--ask", "Is it low?"])

        out = capsys.readouterr().out
        assert code == 0
        assert "Summary:" in out
        assert ExampleClientAdapter.DEFAULT_RESPONSE in out
        assert "user: Is it low?" in out

    def test_unsupported_file_exits_with_error(
        self, tmp_path: Path, capsys: pytest.CaptureFixture[str]
    ) -> None:
        report = tmp_path / "report.unknownext"
        report.write_bytes(b"data")

        code = main([str(report)])

        assert code == 1
        assert "Unsupported File" in capsys.readouterr().out

    def test_blank_ocr_result_exits_with_error(
        self, tmp_path: Path, capsys: pytest.CaptureFixture[str]
    ) -> None:
        image = tmp_path / "scan.png"
        image.write_bytes(b"\x89PNG\r\n\x1a\n")

        with patch.object(ExampleClientAdapter, "DEFAULT_RESPONSE", ""):
            code = main([str(image)])

        assert code == 1
        assert "Text Recognition Failed" in capsys.readouterr().out
