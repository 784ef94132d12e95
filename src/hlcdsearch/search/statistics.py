# src/hlcdsearch/search/statistics.py
"""Run statistics of a single search."""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, Optional

from ..parameters import CodeParameters


def format_elapsed(milliseconds: int) -> str:
    """Format a duration as ``HHh:MMm:SSs.mmm``.

    >>> format_elapsed(3_723_004)
    '01h:02m:03s.004'
    """
    millis = milliseconds % 1000
    seconds_total = milliseconds // 1000
    seconds = seconds_total % 60
    minutes = (seconds_total // 60) % 60
    hours = (seconds_total // 3600) % 24
    return f"{hours:02d}h:{minutes:02d}m:{seconds:02d}s.{millis:03d}"


@dataclass
class SearchStatistics:
    """Counters and timings collected by SearchEngine.

    Times are wall-clock milliseconds since the epoch.
    """
    params: CodeParameters
    recursive_calls: int = 0
    vectors_examined: int = 0
    rows_accepted: int = 0
    start_time_ms: int = 0
    end_time_ms: int = 0
    extra: Dict[str, Any] = field(default_factory=dict)

    @property
    def elapsed_ms(self) -> int:
        return self.end_time_ms - self.start_time_ms

    @property
    def elapsed(self) -> str:
        return format_elapsed(self.elapsed_ms)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "params": str(self.params),
            "label": self.params.label,
            "recursive_calls": self.recursive_calls,
            "vectors_examined": self.vectors_examined,
            "rows_accepted": self.rows_accepted,
            "elapsed_ms": self.elapsed_ms,
            "elapsed": self.elapsed,
            **self.extra,
        }

    def summary(self, found: Optional[bool] = None) -> str:
        status = ""
        if found is not None:
            status = " found" if found else " not found"
        return (
            f"{self.params}{status}: {self.recursive_calls:,} recursive calls, "
            f"{self.vectors_examined:,} vectors examined in {self.elapsed}"
        )
