"""Metrics port for the scoring and award workflow.

Lets application services count domain events without depending on the
Prometheus implementation. The infrastructure MetricsCollector satisfies
this protocol structurally.
"""

from __future__ import annotations

from abc import abstractmethod
from typing import Protocol


class AwardMetricsProtocol(Protocol):
    """Counters for evaluations and award assignment runs."""

    @abstractmethod
    def increment_evaluations_recorded(self) -> None:
        """Count one stored evaluation."""
        ...

    @abstractmethod
    def increment_awards_auto_assigned(self, count: int) -> None:
        """Count the awards created by one auto-assignment run."""
        ...

    @abstractmethod
    def increment_award_assignment_conflicts(self) -> None:
        """Count one auto-assignment run rejected for existing awards."""
        ...
