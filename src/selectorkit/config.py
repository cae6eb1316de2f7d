from __future__ import annotations

import os
from dataclasses import dataclass

from selectorkit.selector import COMBINATORS

LOG_LEVELS: tuple[str, ...] = ("DEBUG", "INFO", "WARNING", "ERROR")


@dataclass(frozen=True)
class SelectorkitConfig:
    log_level: str = "WARNING"
    combinators: tuple[str, ...] = COMBINATORS

    @classmethod
    def from_env(cls) -> SelectorkitConfig:
        """Build a config from ``SELECTORKIT_*`` environment variables.

        Raises:
            ValueError: ``SELECTORKIT_LOG_LEVEL`` is not one of ``LOG_LEVELS``.
        """
        log_level = os.environ.get("SELECTORKIT_LOG_LEVEL", cls.log_level).strip().upper()
        if log_level not in LOG_LEVELS:
            raise ValueError(
                f"Invalid SELECTORKIT_LOG_LEVEL {log_level!r} "
                f"(expected one of: {', '.join(LOG_LEVELS)})"
            )
        return cls(log_level=log_level)
