"""
Brickset catalog queries - analytical queries over a LEGO set catalog.

This package loads a Brickset JSON export once into an immutable, in-memory
repository and answers a fixed set of analytical questions about it:

- Filtering (tag counts, name prefixes, name shapes)
- Aggregation (total pieces, universal piece-count checks)
- Grouping (packaging types, themes and their subthemes)
- Extrema (shortest theme name)

Queries are pure functions; printing is left to the reporter and the CLI.
"""

from __future__ import annotations

__version__ = "0.1.0"
__license__ = "MIT"

# Public API exports
from brickset.config import Settings, get_settings, resolve_data_file
from brickset.domain.models import Dimensions, LegoSet, PackagingType
from brickset.orchestrator import QueryResult, available_queries, run_queries
from brickset.repository import LegoSetRepository, Repository, RepositoryLoadError
from brickset.utils.logging import configure_logging, get_logger

__all__ = [
    # Version info
    "__version__",
    "__license__",
    # Configuration
    "Settings",
    "get_settings",
    "resolve_data_file",
    # Domain
    "Dimensions",
    "LegoSet",
    "PackagingType",
    # Record store
    "Repository",
    "LegoSetRepository",
    "RepositoryLoadError",
    # Query driver
    "QueryResult",
    "available_queries",
    "run_queries",
    # Logging
    "configure_logging",
    "get_logger",
]
