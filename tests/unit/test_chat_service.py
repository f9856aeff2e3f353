"""
Unit tests for the interactive chat loop.

This module tests command dispatch, prompt output and how per-message
failures are reported without ending the loop.
"""

import io
from unittest.mock import Mock

import pytest

from claude_cli.errors import NetworkError, RemoteApiError, UnrecognizedResponse
from claude_cli.services.chat_service import BANNER, HELP_LINES, PROMPT, ChatService, LoopState
from claude_cli.services.config_store import Config


@pytest.mark.unit
class TestChatService:
    """Test class for ChatService dispatch and loop behavior."""

    @pytest.fixture
    def mock_ai_service(self):
        mock_ai = Mock()
        mock_ai.send.return_value = "Hello from Claude"
        return mock_ai

    @pytest.fixture
    def make_chat_service(self, configured, mock_ai_service, stdout):
        def _make(input_text=""):
            return ChatService(configured, mock_ai_service, stdin=io.StringIO(input_text), stdout=stdout)
        return _make

    def test_empty_line_does_nothing(self, make_chat_service, mock_ai_service, stdout):
        chat_service = make_chat_service()

        assert chat_service.handle_line("   \n") is LoopState.RUNNING
        assert stdout.getvalue() == ""
        mock_ai_service.send.assert_not_called()

    def test_quit_terminates(self, make_chat_service, mock_ai_service, stdout):
        chat_service = make_chat_service()

        assert chat_service.handle_line("/quit\n") is LoopState.TERMINATED
        assert stdout.getvalue() == ""
        mock_ai_service.send.assert_not_called()

    def test_help_prints_two_lines(self, make_chat_service, mock_ai_service, stdout):
        chat_service = make_chat_service()

        assert chat_service.handle_line(" /help ") is LoopState.RUNNING
        assert stdout.getvalue().splitlines() == [
            "  /quit           Exit the program",
            "  /help           Show this help message",
        ]
        mock_ai_service.send.assert_not_called()

    def test_message_is_trimmed_and_sent(self, make_chat_service, mock_ai_service, stdout):
        chat_service = make_chat_service()

        chat_service.handle_line("  what is Python?  \n")

        mock_ai_service.send.assert_called_once_with("sk-test-key", "what is Python?")
        assert stdout.getvalue() == "🤖 Hello from Claude\n"

    @pytest.mark.parametrize("error", [
        RemoteApiError("bad key"),
        NetworkError("connection refused"),
        UnrecognizedResponse("Unknown error format. Response printed to terminal.", "{}"),
    ])
    def test_api_errors_are_reported(self, make_chat_service, mock_ai_service, stdout, error):
        mock_ai_service.send.side_effect = error
        chat_service = make_chat_service()

        assert chat_service.handle_line("hello") is LoopState.RUNNING
        assert stdout.getvalue() == f"Error: {error}\n"

    def test_run_stops_at_quit(self, make_chat_service, mock_ai_service, stdout):
        chat_service = make_chat_service("hello\n/quit\nnever sent\n")

        chat_service.run()

        assert chat_service.state is LoopState.TERMINATED
        mock_ai_service.send.assert_called_once_with("sk-test-key", "hello")
        assert stdout.getvalue() == f"{BANNER}\n{PROMPT}🤖 Hello from Claude\n{PROMPT}"

    def test_run_continues_after_error(self, make_chat_service, mock_ai_service, stdout):
        mock_ai_service.send.side_effect = [RemoteApiError("overloaded"), "second reply"]
        chat_service = make_chat_service("first\nsecond\n/quit\n")

        chat_service.run()

        assert mock_ai_service.send.call_count == 2
        output = stdout.getvalue()
        assert "Error: overloaded\n" in output
        assert "🤖 second reply\n" in output

    def test_run_ends_on_eof(self, make_chat_service, mock_ai_service, stdout):
        chat_service = make_chat_service("\n/help\n")

        chat_service.run()

        assert chat_service.state is LoopState.TERMINATED
        mock_ai_service.send.assert_not_called()
        expected = f"{BANNER}\n{PROMPT}{PROMPT}" + "".join(f"{line}\n" for line in HELP_LINES) + PROMPT
        assert stdout.getvalue() == expected

    def test_read_error_propagates(self, configured, mock_ai_service, stdout):
        stdin = Mock()
        stdin.readline.side_effect = OSError("stdin closed")
        chat_service = ChatService(configured, mock_ai_service, stdin=stdin, stdout=stdout)

        with pytest.raises(OSError):
            chat_service.run()

    def test_run_survives_unencodable_requests(self, config_path, make_ai_service, success_payload, stdout):
        """A non-ASCII key or undecodable input is reported and the loop keeps going."""
        config = Config(config_path, "unicode-ключ-🔑")
        chat_service = ChatService(config, make_ai_service(success_payload),
                                   stdin=io.StringIO("hello\n/quit\n"), stdout=stdout)

        chat_service.run()

        assert chat_service.state is LoopState.TERMINATED
        assert "Error: Request could not be encoded" in stdout.getvalue()

        config.api_key = "sk-test-key"
        chat_service = ChatService(config, make_ai_service(success_payload),
                                   stdin=io.StringIO("x\udcff\nhello\n/quit\n"), stdout=io.StringIO())

        chat_service.run()

        output = chat_service.stdout.getvalue()
        assert "Error: Message could not be encoded" in output
        assert "🤖 hi\n" in output
