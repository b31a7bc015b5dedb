"""Tests for the reviewdesk CLI."""

from click.testing import CliRunner

from reviewdesk.cli import main


def _words_file(tmp_path, *words):
    path = tmp_path / "words.txt"
    path.write_text("\n".join(words) + "\n", encoding="utf-8")
    return str(path)


def test_check_accepts_clean_text(tmp_path):
    result = CliRunner().invoke(main, ["check", "lovely product", "--words", _words_file(tmp_path, "spam")])
    assert result.exit_code == 0
    assert "Accepted" in result.output


def test_check_rejects_banned_text(tmp_path):
    result = CliRunner().invoke(main, ["check", "SPAMtastic", "--words", _words_file(tmp_path, "spam")])
    assert result.exit_code == 2
    assert "Rejected" in result.output
    assert "spam" in result.output


def test_words_lists_lowercased_words(tmp_path):
    result = CliRunner().invoke(main, ["words", "-w", _words_file(tmp_path, "Spam", "", "scam")])
    assert result.exit_code == 0
    assert "spam" in result.output
    assert "scam" in result.output
    assert "Spam" not in result.output


def test_missing_word_file_exits_with_error(tmp_path):
    result = CliRunner().invoke(main, ["check", "text", "--words", str(tmp_path / "missing.txt")])
    assert result.exit_code == 1
    assert "Cannot load banned words" in result.output


def test_version():
    result = CliRunner().invoke(main, ["--version"])
    assert result.exit_code == 0
    assert "0.1.0" in result.output
