"""selectorkit -- fluent builder for CSS selector strings."""

from __future__ import annotations

__version__ = "0.1.0"

from selectorkit.category import Category  # noqa: E402
from selectorkit.config import SelectorkitConfig  # noqa: E402
from selectorkit.errors import DuplicateError, OrderError, SelectorError  # noqa: E402
from selectorkit.selector import COMBINATORS, Selector  # noqa: E402
from selectorkit.serialization import SerializationError, from_json, to_json  # noqa: E402
from selectorkit.shapes import Rectangle  # noqa: E402
from selectorkit import facade  # noqa: E402

__all__ = [
    "__version__",
    # builder
    "Category",
    "Selector",
    "COMBINATORS",
    "facade",
    # errors
    "SelectorError",
    "OrderError",
    "DuplicateError",
    # companions
    "Rectangle",
    "to_json",
    "from_json",
    "SerializationError",
    # config
    "SelectorkitConfig",
]
