"""User-facing message sink shared by all service handlers."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import List

logger = logging.getLogger(__name__)


@dataclass
class MessageCollector:
    """Collects error and informational messages for one invocation.

    Messages are additive and kept in the order they were added. Handlers only
    write to it; the caller reads ``errors`` / ``messages`` once the handler
    returns.
    """

    errors: List[str] = field(default_factory=list)
    messages: List[str] = field(default_factory=list)

    def add_error(self, text: str) -> None:
        logger.debug("error message added: %s", text)
        self.errors.append(text)

    def add_message(self, text: str) -> None:
        logger.debug("info message added: %s", text)
        self.messages.append(text)

    @property
    def has_errors(self) -> bool:
        return bool(self.errors)
