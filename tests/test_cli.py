"""Tests for the CLI commands (generate, extract, config show/init)."""

from __future__ import annotations

import json
from unittest.mock import AsyncMock, MagicMock, patch

import pytest
from typer.testing import CliRunner

from flashdeck.cli import app
from flashdeck.errors import BackendFailureError
from flashdeck.llm.base import LLMProvider
from flashdeck.llm.client import ModelClient
from flashdeck.llm.models import LLMConfig, LLMResponse, TokenUsage
from flashdeck.pipeline.orchestrator import FlashcardPipeline

runner = CliRunner()

CARDS_OUTPUT = '```json\n[{"question":"What is ATP?","answer":"Cell energy"}]\n```'


# ---------------------------------------------------------------------------
# Fixtures
# ---------------------------------------------------------------------------


@pytest.fixture(autouse=True)
def _isolated_cwd(tmp_path, monkeypatch):
    """Run every command in an empty project dir with an empty home."""
    home = tmp_path / "home"
    home.mkdir()
    monkeypatch.chdir(tmp_path)
    with patch("pathlib.Path.home", return_value=home):
        yield


@pytest.fixture()
def provider():
    mock = MagicMock(spec=LLMProvider)
    mock.config = LLMConfig(provider="openai", model="test-model")
    mock.generate = AsyncMock(
        return_value=LLMResponse(
            content=CARDS_OUTPUT,
            usage=TokenUsage(input_tokens=10, output_tokens=5),
            model="test-model",
        )
    )
    return mock


@pytest.fixture()
def mock_pipeline(provider):
    """Patch pipeline construction so no real SDK client is built."""
    pipeline = FlashcardPipeline(ModelClient(provider))
    with patch("flashdeck.cli._build_pipeline", return_value=pipeline):
        yield pipeline


@pytest.fixture()
def notes(tmp_path):
    f = tmp_path / "notes.txt"
    f.write_text("ATP is the energy currency of the cell.", encoding="utf-8")
    return f


# ---------------------------------------------------------------------------
# flashdeck generate
# ---------------------------------------------------------------------------


class TestGenerateCommand:
    def test_shows_cards_table(self, mock_pipeline, notes):
        result = runner.invoke(app, ["generate", str(notes)])

        assert result.exit_code == 0, result.output
        assert "What is ATP?" in result.output
        assert "Cell energy" in result.output
        assert "Processed 1 of 1" in result.output

    def test_json_body(self, mock_pipeline, notes, tmp_path):
        quiet = tmp_path / "quiet.yaml"
        quiet.write_text("log_level: error\n")
        result = runner.invoke(app, ["-c", str(quiet), "generate", str(notes), "--json"])

        assert result.exit_code == 0, result.output
        body = json.loads(result.output)
        assert body == {
            "flashcards": [{"question": "What is ATP?", "answer": "Cell energy"}],
            "totalChunks": 1,
            "processedChunks": 1,
        }

    def test_writes_output_file(self, mock_pipeline, notes, tmp_path):
        out = tmp_path / "cards.json"
        result = runner.invoke(app, ["generate", str(notes), "-o", str(out)])

        assert result.exit_code == 0, result.output
        assert json.loads(out.read_text())["flashcards"][0]["answer"] == "Cell energy"
        assert "Written to" in result.output

    def test_declared_mime_type_wins(self, mock_pipeline, tmp_path, provider):
        f = tmp_path / "notes.dat"
        f.write_text("Plain words.", encoding="utf-8")
        result = runner.invoke(app, ["generate", str(f), "-m", "text/plain"])

        assert result.exit_code == 0, result.output
        assert "Plain words." in provider.generate.call_args.kwargs["user"]

    def test_unsupported_type_exits_with_400(self, mock_pipeline, tmp_path, provider):
        f = tmp_path / "photo.png"
        f.write_bytes(b"\x89PNG\r\n")
        result = runner.invoke(app, ["generate", str(f), "-m", "image/png"])

        assert result.exit_code == 1
        assert "400" in result.output
        assert "Unsupported file type: image/png" in result.output
        provider.generate.assert_not_called()

    def test_rate_limit_exits_with_429(self, mock_pipeline, notes, provider):
        provider.generate.side_effect = BackendFailureError(
            "openai", RuntimeError("rate_limit_exceeded"), rate_limited=True
        )
        result = runner.invoke(app, ["generate", str(notes)])

        assert result.exit_code == 1
        assert "429" in result.output

    def test_error_body_written_to_output(self, mock_pipeline, notes, provider, tmp_path):
        provider.generate.return_value = LLMResponse(
            content="not json", usage=TokenUsage(input_tokens=1, output_tokens=1), model="m"
        )
        out = tmp_path / "err.json"
        result = runner.invoke(app, ["generate", str(notes), "-o", str(out)])

        assert result.exit_code == 1
        assert json.loads(out.read_text()) == {
            "error": "Failed to generate flashcards. Please try again."
        }

    def test_missing_file(self, mock_pipeline):
        result = runner.invoke(app, ["generate", "nope.txt"])
        assert result.exit_code == 1
        assert "File not found" in result.output

    def test_file_over_size_limit(self, mock_pipeline, tmp_path, provider):
        cfg = tmp_path / "small.yaml"
        cfg.write_text("extraction:\n  max_file_size_mb: 1\n")
        big = tmp_path / "big.txt"
        big.write_bytes(b"a" * (2 * 1024 * 1024))

        out = tmp_path / "err.json"
        result = runner.invoke(app, ["-c", str(cfg), "generate", str(big), "-o", str(out)])

        assert result.exit_code == 1
        assert "Error (413)" in result.output
        assert json.loads(out.read_text()) == {
            "error": "Document is too large. Please try with a smaller document."
        }
        assert "Maximum size is 1 MB" in result.output
        provider.generate.assert_not_called()

    def test_provider_setup_error(self, notes):
        with patch("flashdeck.cli._build_pipeline", side_effect=ValueError("Missing API key")):
            result = runner.invoke(app, ["generate", str(notes)])
        assert result.exit_code == 1
        assert "Missing API key" in result.output


# ---------------------------------------------------------------------------
# flashdeck extract
# ---------------------------------------------------------------------------


class TestExtractCommand:
    def test_prints_text_and_summary(self, notes):
        result = runner.invoke(app, ["extract", str(notes)])

        assert result.exit_code == 0, result.output
        assert "ATP is the energy currency of the cell." in result.output
        assert "PLAIN_TEXT" in result.output

    def test_empty_file(self, tmp_path):
        f = tmp_path / "blank.txt"
        f.write_text("   \n")
        result = runner.invoke(app, ["extract", str(f)])

        assert result.exit_code == 1
        assert "No text could be extracted" in result.output


# ---------------------------------------------------------------------------
# flashdeck config
# ---------------------------------------------------------------------------


class TestConfigCommands:
    def test_init_creates_file(self, tmp_path):
        result = runner.invoke(app, ["config", "init"])

        assert result.exit_code == 0
        assert (tmp_path / "flashdeck.yaml").exists()

    def test_init_refuses_overwrite(self, tmp_path):
        (tmp_path / "flashdeck.yaml").write_text("log_level: debug\n")
        result = runner.invoke(app, ["config", "init"])

        assert result.exit_code == 1
        assert "already exists" in result.output
        assert (tmp_path / "flashdeck.yaml").read_text() == "log_level: debug\n"

    def test_init_force(self, tmp_path):
        (tmp_path / "flashdeck.yaml").write_text("log_level: debug\n")
        result = runner.invoke(app, ["config", "init", "--force"])

        assert result.exit_code == 0
        assert "gpt-4o-mini" in (tmp_path / "flashdeck.yaml").read_text()

    def test_show_reads_project_file(self, tmp_path):
        (tmp_path / "flashdeck.yaml").write_text("llm:\n  model: custom-model\n")
        result = runner.invoke(app, ["config", "show"])

        assert result.exit_code == 0
        assert "custom-model" in result.output

    def test_invalid_config_exits(self, tmp_path):
        bad = tmp_path / "bad.yaml"
        bad.write_text("llm:\n  max_tokens: -5\n")
        result = runner.invoke(app, ["-c", str(bad), "config", "show"])

        assert result.exit_code == 1
        assert "Invalid config" in result.output
