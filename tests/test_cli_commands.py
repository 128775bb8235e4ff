"""
Unit Tests for CLI Commands

Tests the CLI entry points against the built-in portfolio.

STAFF ENGINEER PATTERNS:
------------------------
1. Call main(argv) directly instead of spawning processes
2. Capture output with capsys
3. Verify exit codes
4. Test error handling
"""

import pytest
from unittest.mock import patch


# ---------------------------------------------------------------------------
# LOAD_ENV TESTS
# ---------------------------------------------------------------------------


class TestLoadEnv:
    """Test environment loading."""

    def test_load_env_reads_dotenv(self):
        """.env loading goes through python-dotenv."""
        from portfolio_concierge.cli import commands

        with patch.object(commands, "load_dotenv") as mock_load:
            commands._load_env()

        mock_load.assert_called_once_with()


# ---------------------------------------------------------------------------
# MAIN CLI DISPATCH TESTS
# ---------------------------------------------------------------------------


class TestMainCliDispatch:
    """Test main CLI dispatches to correct handlers."""

    def test_main_dispatches_to_ask(self):
        from portfolio_concierge.cli import commands

        with patch.object(commands, "run_ask", return_value=0) as mock_ask:
            result = commands.main(["ask", "hello"])

        mock_ask.assert_called_once()
        assert mock_ask.call_args.args[0].question == ["hello"]
        assert result == 0

    def test_main_dispatches_to_index(self):
        from portfolio_concierge.cli import commands

        with patch.object(commands, "run_index", return_value=0) as mock_index:
            result = commands.main(["index"])

        mock_index.assert_called_once()
        assert result == 0

    def test_main_dispatches_to_chat(self):
        from portfolio_concierge.cli import commands

        with patch.object(commands, "run_chat", return_value=0) as mock_chat:
            result = commands.main(["chat", "--no-notify"])

        assert mock_chat.call_args.args[0].no_notify is True
        assert result == 0

    def test_main_requires_command(self):
        from portfolio_concierge.cli import commands

        with pytest.raises(SystemExit):
            commands.main([])

    def test_main_handles_keyboard_interrupt(self):
        """Main should return 130 on KeyboardInterrupt."""
        from portfolio_concierge.cli import commands

        with patch.object(commands, "run_ask", side_effect=KeyboardInterrupt()):
            assert commands.main(["ask", "hi"]) == 130

    def test_main_reports_content_errors(self, tmp_path, capsys):
        from portfolio_concierge.cli import commands

        result = commands.main(["--content", str(tmp_path / "missing.json"), "ask", "hi"])

        assert result == 1
        assert "Content error" in capsys.readouterr().err

    def test_main_reports_config_errors(self, monkeypatch, capsys):
        """A bad numeric setting is reported, not raised as a traceback."""
        from portfolio_concierge.cli import commands
        from portfolio_concierge.notify import reset_config

        monkeypatch.setenv("CONCIERGE_NOTIFY_TIMEOUT", "soon")
        reset_config()
        try:
            result = commands.main(["chat"])
        finally:
            reset_config()

        assert result == 1
        err = capsys.readouterr().err
        assert "Configuration error" in err
        assert "CONCIERGE_NOTIFY_TIMEOUT" in err

    def test_main_sets_up_and_flushes_tracing(self):
        from portfolio_concierge.cli import commands

        with patch.object(commands, "init_tracing") as mock_init, \
                patch.object(commands, "shutdown_tracing") as mock_shutdown, \
                patch.object(commands, "run_index", return_value=0):
            assert commands.main(["index"]) == 0

        mock_init.assert_called_once_with()
        mock_shutdown.assert_called_once_with()


# ---------------------------------------------------------------------------
# COMMAND OUTPUT TESTS
# ---------------------------------------------------------------------------


class TestCommands:
    """Run the real commands on the built-in portfolio."""

    @pytest.fixture(autouse=True)
    def default_content(self, monkeypatch):
        monkeypatch.delenv("CONCIERGE_CONTENT_PATH", raising=False)

    def test_ask(self, capsys):
        from portfolio_concierge.cli.commands import main

        assert main(["ask", "Do", "you", "have", "a", "resume?"]) == 0
        assert capsys.readouterr().out.strip() == "The resume link will be added soon."

    def test_ask_explain(self, capsys):
        from portfolio_concierge.cli.commands import main

        main(["ask", "--explain", "abstract light graphics"])
        out = capsys.readouterr().out
        assert "Rule: vector" in out
        assert "Series One (graphics) [g1]" in out

    def test_index(self, capsys):
        from portfolio_concierge.cli.commands import main

        main(["index", "--vocab"])
        out = capsys.readouterr().out
        assert "Documents: 3" in out
        assert "arijit" in out

    def test_chat_session(self, capsys):
        from portfolio_concierge.cli.commands import main

        inputs = iter(["", "/close", "hello", "/open", "Can we connect?", "/quit"])
        with patch("builtins.input", lambda prompt="": next(inputs)):
            assert main(["chat", "--no-notify"]) == 0

        out = capsys.readouterr().out
        assert "Hi! I can answer questions about Arijit" in out
        assert "Chat is closed" in out
        assert "bot> You can reach Arijit" in out

    def test_chat_ends_on_eof(self):
        from portfolio_concierge.cli.commands import main

        def raise_eof(prompt=""):
            raise EOFError

        with patch("builtins.input", raise_eof):
            assert main(["chat", "--no-notify"]) == 0
