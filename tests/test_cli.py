# Area: CLI Tests
"""Tests for the command-line interface."""

import asyncio
import logging

import pytest

from trivia_engine.cli import get_ledger, get_source, main, parse_args
from trivia_engine.config import DEFAULT_CONFIG, ENV_MAPPINGS
from trivia_engine.ledgers import InMemoryScoreLedger, SqliteScoreLedger
from trivia_engine.sources import OpenTDBQuestionSource, StaticQuestionSource


@pytest.fixture(autouse=True)
def reset_logging():
    """Drop handlers main() attaches so later tests do not write to closed streams."""
    yield
    logger = logging.getLogger("trivia_engine")
    for handler in list(logger.handlers):
        handler.close()
        logger.removeHandler(handler)
    logger.propagate = True


@pytest.fixture
def fast_env(monkeypatch, tmp_path):
    """Short rounds, no pacing, logs and scores under tmp_path."""
    for key in ENV_MAPPINGS:
        monkeypatch.delenv(key, raising=False)
    monkeypatch.setenv("TRIVIA_ANSWER_WINDOW_SECONDS", "0.2")
    monkeypatch.setenv("TRIVIA_PACING_SECONDS", "0")
    monkeypatch.setenv("TRIVIA_LOG_FILE", str(tmp_path / "trivia.log"))
    monkeypatch.setenv("TRIVIA_DB_PATH", str(tmp_path / "scores.db"))
    return tmp_path


class TestParseArgs:
    """Tests for argument parsing."""

    def test_defaults(self):
        """Test default flags."""
        args = parse_args([])
        assert args.offline is False
        assert args.scores is False
        assert args.bots == 3
        assert args.count is None
        assert args.log_level == "INFO"

    def test_flags(self):
        """Test options are parsed."""
        args = parse_args(["--offline", "--count", "4", "--category", "22",
                           "--bots", "0", "--no-db", "--score", "p1"])
        assert (args.offline, args.count, args.category, args.bots) == (True, 4, 22, 0)
        assert args.no_db is True
        assert args.score == "p1"


class TestCollaboratorSelection:
    """Tests for picking sources and ledgers."""

    def test_offline_uses_builtin_questions(self):
        """Test --offline selects the static source."""
        source = get_source(parse_args(["--offline"]), dict(DEFAULT_CONFIG))
        assert isinstance(source, StaticQuestionSource)

    def test_online_uses_opentdb(self):
        """Test the default source is Open Trivia DB at the configured URL."""
        config = {**DEFAULT_CONFIG, "opentdb_url": "https://example.test"}
        source = get_source(parse_args([]), config)
        assert isinstance(source, OpenTDBQuestionSource)
        assert source.base_url == "https://example.test"

    def test_no_db_uses_memory(self):
        """Test --no-db keeps scores in memory."""
        assert isinstance(get_ledger(parse_args(["--no-db"]), dict(DEFAULT_CONFIG)),
                          InMemoryScoreLedger)

    def test_db_flag_overrides_config(self, tmp_path):
        """Test --db wins over the configured path."""
        path = str(tmp_path / "other.db")
        ledger = get_ledger(parse_args(["--db", path]), dict(DEFAULT_CONFIG))
        assert isinstance(ledger, SqliteScoreLedger)
        assert ledger.repository.db_path == path


class TestMain:
    """Tests for main()."""

    def test_offline_session(self, fast_env, capsys):
        """Test an offline session runs to the summary."""
        assert main(["--offline", "--count", "1", "--bots", "0"]) == 0
        out = capsys.readouterr().out
        assert "Trivia finished!" in out
        assert "Rounds played: 1" in out

    def test_list_categories_offline(self, fast_env, capsys):
        """Test --list-categories prints the built-in categories."""
        assert main(["--offline", "--list-categories"]) == 0
        assert "Geography" in capsys.readouterr().out

    def test_score_lookup(self, fast_env, capsys):
        """Test --score prints the stored total."""
        assert main(["--score", "nobody"]) == 0
        assert "nobody: 0" in capsys.readouterr().out

    def test_all_scores_listing(self, fast_env, capsys):
        """Test --scores prints every stored total."""
        db_path = str(fast_env / "scores.db")
        ledger = SqliteScoreLedger(db_path)
        asyncio.run(ledger.award("p1", "Alice", 5))
        asyncio.run(ledger.award("p2", "Bob", 20))

        assert main(["--scores", "--db", db_path]) == 0
        out = capsys.readouterr().out
        assert "p1  Alice: 5" in out
        assert "p2  Bob: 20" in out

    def test_invalid_config(self, fast_env, monkeypatch, capsys):
        """Test a bad configuration exits with status 1."""
        monkeypatch.setenv("TRIVIA_ANSWER_WINDOW_SECONDS", "0")
        assert main(["--offline"]) == 1
        assert "answer_window_seconds" in capsys.readouterr().err
