"""Monthly compliance progress."""

import calendar
from dataclasses import dataclass
from datetime import date
from uuid import UUID

from recomp_tracker.domain.progress import DayProgress, DayStatus, MonthProgress
from recomp_tracker.services.compliance import bounds_for, classify
from recomp_tracker.services.daily_logs import DailyLogService
from recomp_tracker.services.profiles import ProfileService


@dataclass
class ProgressService:
    """Classifies cached daily totals against the user's current targets."""

    profile_service: ProfileService
    daily_log_service: DailyLogService

    def month_summary(self, user_id: UUID, year: int, month: int) -> MonthProgress:
        """Return every day of a month with its compliance status.

        Past days are judged against today's profile, not the profile that
        was active on that day.
        """
        lower, upper = bounds_for(self.profile_service.get_targets(user_id))
        calories_by_day = {
            row.day: row.totals.calories if row.totals else None
            for row in self.daily_log_service.list_daily_totals(user_id)
        }
        _, days_in_month = calendar.monthrange(year, month)
        days = []
        for day_number in range(1, days_in_month + 1):
            day = date(year, month, day_number)
            calories = calories_by_day.get(day)
            days.append(
                DayProgress(
                    day=day,
                    status=classify(calories, lower, upper),
                    calories=calories,
                )
            )
        return MonthProgress(
            year=year,
            month=month,
            lower_bound=lower,
            upper_bound=upper,
            days=days,
            compliant_days=_count(days, DayStatus.COMPLIANT),
            non_compliant_days=_count(days, DayStatus.NON_COMPLIANT),
            no_data_days=_count(days, DayStatus.NO_DATA),
        )


def _count(days: list[DayProgress], status: DayStatus) -> int:
    return sum(1 for day in days if day.status == status)
