"""
CLI module - unified command-line interface.

Provides entry points for:
- Asking a single question
- Running an interactive chat session
- Inspecting the corpus index
"""

from portfolio_concierge.cli.commands import (
    build_parser,
    main,
    run_ask,
    run_chat,
    run_index,
)

__all__ = [
    "build_parser",
    "main",
    "run_ask",
    "run_chat",
    "run_index",
]
