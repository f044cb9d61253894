"""Domain entities for metric samples."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Optional


@dataclass(frozen=True, slots=True)
class MetricSample:
    """A single numeric observation returned by a metric source."""

    value: float
    timestamp: Optional[datetime] = None
