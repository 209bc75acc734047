from __future__ import annotations

from abc import ABC, abstractmethod
from datetime import time

from ..common.datetime_utils import minutes_of_day


class DurationCalculator(ABC):
    """Calculator interface (Strategy Pattern for session length)."""

    @abstractmethod
    def minutes_between(self, check_in: time, check_out: time) -> int:
        raise NotImplementedError


class TimeOfDayDurationCalculator(DurationCalculator):
    """Standard rule: out - in on the same day, not below 0.

    Only times of day are stored, so a checkout past midnight yields 0
    instead of wrapping around.
    """

    def minutes_between(self, check_in: time, check_out: time) -> int:
        return max(minutes_of_day(check_out) - minutes_of_day(check_in), 0)
