"""
Conversion Warnings
===================

Collector for user-facing diagnostics raised while converting nodes.
Identical messages are recorded once, in first-seen order.
"""

from typing import Dict, Iterator, List, Optional

from noderaster.config.logging import get_logger

logger = get_logger(__name__)


class ConversionWarnings:
    """Ordered, de-duplicated set of warning messages."""

    def __init__(self) -> None:
        self._messages: Dict[str, None] = {}

    def add(self, message: str) -> None:
        if message not in self._messages:
            logger.info("Conversion warning recorded", message=message)
        self._messages[message] = None

    def clear(self) -> None:
        self._messages.clear()

    def as_list(self) -> List[str]:
        return list(self._messages)

    def __iter__(self) -> Iterator[str]:
        return iter(list(self._messages))

    def __len__(self) -> int:
        return len(self._messages)

    def __contains__(self, message: object) -> bool:
        return message in self._messages


# Global warnings collector
_global_warnings: Optional[ConversionWarnings] = None


def get_conversion_warnings() -> ConversionWarnings:
    """Get the process-wide warnings collector."""
    global _global_warnings
    if _global_warnings is None:
        _global_warnings = ConversionWarnings()
    return _global_warnings


def add_warning(message: str) -> None:
    get_conversion_warnings().add(message)


def get_warnings() -> List[str]:
    return get_conversion_warnings().as_list()


def clear_warnings() -> None:
    get_conversion_warnings().clear()
