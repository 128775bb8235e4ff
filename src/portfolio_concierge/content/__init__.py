"""
Content module - the portfolio record the concierge answers from.

Separating data from the engine enables:
- Content updates without code changes
- Different portfolios per deployment
- Easy testing with controlled data
"""

from portfolio_concierge.content.schemas import (
    UNSET_URL,
    About,
    PortfolioContent,
    WorkItem,
    Works,
)
from portfolio_concierge.content.portfolio import (
    DEFAULT_CONTENT,
    build_documents,
    load_content,
)

__all__ = [
    # Schemas
    "UNSET_URL",
    "About",
    "PortfolioContent",
    "WorkItem",
    "Works",
    # Data
    "DEFAULT_CONTENT",
    "build_documents",
    "load_content",
]
