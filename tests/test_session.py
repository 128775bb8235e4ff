"""
Unit Tests for ChatSession

Tests the submission flow with a mocked dispatcher.

STAFF ENGINEER PATTERNS:
------------------------
1. Dispatcher is a MagicMock - assert call counts, not side effects
2. Transcript order is asserted message by message
3. Dispatcher failures must never reach the caller
"""

import pytest
from unittest.mock import MagicMock

from portfolio_concierge.chat import (
    ChatMessage,
    ChatSession,
    QueryAnswerer,
    Sender,
    SessionState,
)
from portfolio_concierge.content import DEFAULT_CONTENT
from portfolio_concierge.core import SessionBusyError


# ---------------------------------------------------------------------------
# FIXTURES
# ---------------------------------------------------------------------------


@pytest.fixture
def answerer():
    return QueryAnswerer.from_content(DEFAULT_CONTENT)


@pytest.fixture
def dispatcher():
    return MagicMock()


@pytest.fixture
def session(answerer, dispatcher):
    return ChatSession(answerer, dispatcher)


# ---------------------------------------------------------------------------
# WIDGET STATE
# ---------------------------------------------------------------------------


class TestSessionState:
    """Open/closed toggling."""

    def test_starts_closed(self, session):
        assert session.state is SessionState.CLOSED

    def test_toggle(self, session):
        assert session.toggle() is SessionState.OPEN
        assert session.toggle() is SessionState.CLOSED

    def test_toggling_does_not_touch_log(self, session):
        before = session.messages
        session.open()
        session.close()
        assert session.messages == before


# ---------------------------------------------------------------------------
# SUBMISSION
# ---------------------------------------------------------------------------


class TestSubmit:
    """Submission flow."""

    def test_greeting(self, session):
        assert session.messages == (
            ChatMessage(Sender.BOT, "Hi! I can answer questions about Arijit and this portfolio."),
        )

    def test_appends_user_then_bot(self, session):
        reply = session.submit("  Do you have a resume?  ")

        assert reply == ChatMessage(Sender.BOT, "The resume link will be added soon.")
        assert session.messages[-2:] == (
            ChatMessage(Sender.USER, "Do you have a resume?"),
            reply,
        )

    def test_log_keeps_chronological_order(self, session):
        session.submit("first question about light")
        session.submit("second about motion")
        senders = [m.sender for m in session.messages]
        assert senders == [Sender.BOT, Sender.USER, Sender.BOT, Sender.USER, Sender.BOT]
        assert session.messages[1].text == "first question about light"
        assert session.messages[3].text == "second about motion"

    @pytest.mark.parametrize("draft", ["", "   ", "\n\t", None])
    def test_blank_draft_is_noop(self, session, dispatcher, draft):
        before = session.messages
        assert session.submit(draft) is None
        assert session.messages == before
        dispatcher.dispatch.assert_not_called()

    def test_messages_snapshot_is_immutable(self, session):
        snapshot = session.messages
        session.submit("hello there")
        assert len(snapshot) == 1
        assert isinstance(snapshot, tuple)


# ---------------------------------------------------------------------------
# LEAD NOTIFICATIONS
# ---------------------------------------------------------------------------


class TestLeadDispatch:
    """Intent detection and dispatch."""

    def test_lead_dispatches_once(self, session, dispatcher):
        session.submit("Can we connect for a project?")
        dispatcher.dispatch.assert_called_once_with(
            'Lead intent from site: "Can we connect for a project?"'
        )

    def test_non_lead_does_not_dispatch(self, session, dispatcher):
        session.submit("I like your graphics")
        dispatcher.dispatch.assert_not_called()

    def test_dispatcher_failure_is_swallowed(self, session, dispatcher):
        dispatcher.dispatch.side_effect = RuntimeError("smtp down")

        reply = session.submit("I want to hire you")

        assert reply is not None
        assert session.messages[-1] == reply
        assert "smtp" not in reply.text

    def test_no_dispatcher(self, answerer):
        session = ChatSession(answerer)
        assert session.submit("email?") is not None

    def test_reply_is_independent_of_lead(self, session):
        reply = session.submit("whatsapp?")
        assert reply.text == (
            "I can answer questions about Arijit, the work on this site, and how to connect."
        )


# ---------------------------------------------------------------------------
# RE-ENTRANCY
# ---------------------------------------------------------------------------


class TestReentrancy:
    """A session handles one submission at a time."""

    def test_nested_submit_raises(self, dispatcher):
        holder = {}

        class ReentrantAnswerer:
            def answer(self, query):
                with pytest.raises(SessionBusyError):
                    holder["session"].submit("again")
                return "ok"

        session = ChatSession(ReentrantAnswerer(), dispatcher, owner_name="Test")
        holder["session"] = session

        assert session.submit("first").text == "ok"
        assert [m.text for m in session.messages] == [
            "Hi! I can answer questions about Test and this portfolio.",
            "first",
            "ok",
        ]

    def test_lock_released_after_submit(self, session):
        session.submit("one")
        assert session.submit("two") is not None
