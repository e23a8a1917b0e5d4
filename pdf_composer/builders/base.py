#!/usr/bin/env python3
"""
base.py
-------------------
Base classes for builders in PDF Composer.

Provides:
- BuilderStats: Abstract base class for tracking build statistics
- BaseBuilder: Abstract base class for builder implementations
"""
from __future__ import annotations

from abc import ABC, abstractmethod
from datetime import datetime
from typing import Any, Optional

from pdf_composer.core.logging_manager import ComposerLogger, safe_logger


class BuilderStats(ABC):
    """
    Abstract base class for tracking builder statistics.

    Attributes:
        start_time: Timestamp when processing started
    """

    def __init__(self) -> None:
        self.start_time: datetime = datetime.now()
        self._end_time: Optional[datetime] = None

    def finish(self) -> float:
        """Stop the clock and return the final duration in seconds."""
        self._end_time = datetime.now()
        return self.duration()

    def duration(self) -> float:
        """
        Elapsed time in seconds.

        Measured up to finish() once it has been called, otherwise up to now.
        """
        end = self._end_time or datetime.now()
        return (end - self.start_time).total_seconds()

    @abstractmethod
    def summary(self) -> str:
        """Human-readable summary of the build."""


class BaseBuilder(ABC):
    """
    Abstract base class for builder implementations.

    Attributes:
        logger: Optional logger for operation tracking
    """

    def __init__(self, logger: Optional[ComposerLogger] = None):
        self.logger = logger

    @abstractmethod
    def build(self) -> Any:
        """Execute the build process."""

    def _log_operation(self, operation: str, details: Optional[dict] = None) -> None:
        safe_logger(self.logger).log_operation(operation, details or {})

    def _log_debug(self, message: str) -> None:
        safe_logger(self.logger).log_debug(message)

    def _log_info(self, message: str) -> None:
        safe_logger(self.logger).log_info(message)

    def _log_warning(self, message: str) -> None:
        safe_logger(self.logger).log_warning(message)

    def _log_error(self, error: Exception, context: Optional[dict] = None) -> None:
        safe_logger(self.logger).log_error(error, context or {})
