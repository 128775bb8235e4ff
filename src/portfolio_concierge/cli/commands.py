"""
CLI commands - entry points for poking at the concierge from a terminal.

Each command follows a consistent pattern:
1. Parse arguments
2. Load environment and content
3. Build the index
4. Print results
5. Return exit code

CLI commands are thin wrappers: answering, intent detection and dispatch
all live in the library, so the CLI holds nothing worth unit-testing
beyond argument handling and exit codes.
"""

from __future__ import annotations

import argparse
import logging
import sys

from dotenv import load_dotenv

from portfolio_concierge.core.errors import ConfigError, ContentError
from portfolio_concierge.observability import init_tracing, shutdown_tracing

EXIT_OK = 0
EXIT_CONTENT_ERROR = 1
EXIT_CONFIG_ERROR = 1
EXIT_INTERRUPTED = 130


def _load_env() -> None:
    """Load environment variables from .env file."""
    load_dotenv()


def _configure_logging(level: str) -> None:
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.WARNING),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )


def _build_answerer(content_path: str | None):
    """Load content and build a QueryAnswerer over it."""
    from portfolio_concierge.chat.answerer import QueryAnswerer
    from portfolio_concierge.content import load_content

    return QueryAnswerer.from_content(load_content(content_path))


# ---------------------------------------------------------------------------
# COMMANDS
# ---------------------------------------------------------------------------


def run_ask(args: argparse.Namespace) -> int:
    """Answer a single question and exit."""
    answerer = _build_answerer(args.content)
    question = " ".join(args.question)

    if args.explain:
        result = answerer.explain(question)
        print(result.text)
        print(f"\nRule: {result.rule}")
        for match in result.matches:
            print(f"  {match.score:.3f}  {answerer.label_for(match.id)} [{match.id}]")
    else:
        print(answerer.answer(question))
    return EXIT_OK


def run_index(args: argparse.Namespace) -> int:
    """Describe the corpus index."""
    index = _build_answerer(args.content).index

    print("=" * 60)
    print("CORPUS INDEX")
    print("=" * 60)
    for doc in index.documents:
        nonzero = int((index.vector_for(doc.id) > 0).sum())
        print(f"  {doc.id:<12} {nonzero:>4} distinct tokens")
    print(f"\nDocuments: {len(index)}")
    print(f"Vocabulary size: {len(index.vocabulary)}")

    if args.vocab:
        print("\nVocabulary:")
        for i, token in enumerate(index.vocabulary):
            print(f"  {i:>4}  {token}")
    return EXIT_OK


def run_chat(args: argparse.Namespace) -> int:
    """Interactive chat session on stdin/stdout."""
    from portfolio_concierge.chat.session import ChatSession
    from portfolio_concierge.notify import LoggingNotificationDispatcher, get_notification_dispatcher

    answerer = _build_answerer(args.content)
    dispatcher = LoggingNotificationDispatcher() if args.no_notify else get_notification_dispatcher()
    session = ChatSession(answerer, dispatcher)
    session.open()

    print("Commands: /open, /close, /quit")
    for message in session.messages:
        print(f"bot> {message.text}")

    try:
        while True:
            try:
                line = input("you> " if session.is_open else "(closed)> ")
            except EOFError:
                break

            command = line.strip().lower()
            if command == "/quit":
                break
            if command == "/open":
                session.open()
                continue
            if command == "/close":
                session.close()
                continue
            if not session.is_open:
                print("Chat is closed. Type /open to start again.")
                continue

            reply = session.submit(line)
            if reply is not None:
                print(f"bot> {reply.text}")
    finally:
        dispatcher.shutdown(wait=True)
    return EXIT_OK


# ---------------------------------------------------------------------------
# MAIN
# ---------------------------------------------------------------------------


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="concierge",
        description="Portfolio concierge - ask questions about a portfolio",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Commands:
  ask      Answer one question
  chat     Interactive chat session (lead notifications enabled)
  index    Show the corpus index

Examples:
  concierge ask "Do you have a resume?"
  concierge ask --explain abstract light graphics
  concierge --content portfolio.json chat
  concierge index --vocab
        """,
    )
    parser.add_argument("--content", default=None, help="Portfolio JSON file (default: built-in)")
    parser.add_argument("--log-level", default="WARNING", help="Logging level (default: WARNING)")

    sub = parser.add_subparsers(dest="command", required=True)

    ask = sub.add_parser("ask", help="Answer one question")
    ask.add_argument("question", nargs="+", help="Question text")
    ask.add_argument("--explain", action="store_true", help="Show rule and scores")
    ask.set_defaults(handler=run_ask)

    chat = sub.add_parser("chat", help="Interactive chat session")
    chat.add_argument("--no-notify", action="store_true", help="Log leads instead of posting them")
    chat.set_defaults(handler=run_chat)

    index = sub.add_parser("index", help="Show the corpus index")
    index.add_argument("--vocab", action="store_true", help="List every vocabulary token")
    index.set_defaults(handler=run_index)

    return parser


def main(argv: list[str] | None = None) -> int:
    """
    Main CLI entry point with subcommands.

    Usage:
        concierge ask QUESTION...   # One-shot answer
        concierge chat              # Interactive session
        concierge index             # Inspect the index
    """
    _load_env()

    args = build_parser().parse_args(argv)
    _configure_logging(args.log_level)

    try:
        init_tracing()
        return args.handler(args)
    except ContentError as e:
        print(f"Content error: {e}", file=sys.stderr)
        return EXIT_CONTENT_ERROR
    except ConfigError as e:
        print(f"Configuration error: {e}", file=sys.stderr)
        return EXIT_CONFIG_ERROR
    except KeyboardInterrupt:
        print("\nInterrupted")
        return EXIT_INTERRUPTED
    finally:
        shutdown_tracing()


if __name__ == "__main__":
    sys.exit(main())
