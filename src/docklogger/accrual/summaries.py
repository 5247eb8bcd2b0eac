"""Once-per-period summaries of the half-year that just closed."""

from __future__ import annotations

from datetime import date, datetime, timezone
from decimal import Decimal

from docklogger.accrual.periods import previous_half_year_period
from docklogger.core.config import AccrualConfig
from docklogger.core.decimals import safe_div
from docklogger.core.exceptions import DuplicatePeriodSummaryError
from docklogger.core.logging_config import get_logger
from docklogger.core.protocols import IEntryStore, ISummaryStore
from docklogger.core.types import DateLike
from docklogger.models.accrual import PeriodSummary, PeriodType
from docklogger.stat_holidays.dates import coerce_date

logger = get_logger(__name__)


def render_period_report(summary: PeriodSummary, generated_on: date | None = None) -> str:
    """Plain-text summary document filed alongside the record."""
    data = summary.summary_data
    hours = summary.total_hours
    earnings = summary.total_earnings
    target = Decimal(str(data.get("target_hours", "600")))
    met = hours >= target
    days = summary.days_worked
    label = data.get("period", f"{summary.period_start} - {summary.period_end}")

    lines = [
        "DOCKLOGGER PERIOD SUMMARY",
        label,
        "========================",
        "",
        "HOURS WORKED",
        f"Total Hours: {hours:.1f} hrs",
        f"Target: {target:.0f} hrs",
        "TARGET MET!" if met else f"Shortfall: {target - hours:.1f} hrs",
        "",
        "EARNINGS",
        f"Total Earnings: ${earnings:.2f}",
        f"Average per Day: ${safe_div(earnings, days):.2f}",
        "",
        "DAYS WORKED",
        f"Total Days: {days}",
        f"Average Hours/Day: {safe_div(hours, days):.1f} hrs",
        "",
        "BOARD MOVE ELIGIBILITY",
        (
            "ELIGIBLE - Average hours target met!"
            if met
            else f"NOT ELIGIBLE - Did not meet {target:.0f} hour target"
        ),
    ]
    if generated_on is not None:
        lines += ["", f"Generated: {generated_on.isoformat()}"]
    return "\n".join(lines)


class PeriodSummaryService:
    """Creates the previous half-year's summary the first time it is asked to."""

    def __init__(
        self,
        entries: IEntryStore,
        summaries: ISummaryStore,
        config: AccrualConfig | None = None,
    ) -> None:
        self._entries = entries
        self._summaries = summaries
        self._config = config or AccrualConfig()

    def build_summary(self, reference_date: DateLike) -> PeriodSummary | None:
        """Summary of the previous half-year, or None if nothing was logged in it."""
        ref = coerce_date(reference_date)
        target = self._config.target_hours
        period = previous_half_year_period(ref, target)
        totals = self._entries.get_range_totals(period.start, period.end)
        if totals.entry_count == 0:
            return None

        hours = totals.total_hours
        earnings = totals.total_earnings
        days = totals.work_days
        summary_data = {
            "period": period.label,
            "total_hours": str(hours),
            "total_earnings": str(earnings),
            "days_worked": days,
            "entry_count": totals.entry_count,
            "average_hours_per_day": str(safe_div(hours, days)),
            "average_earnings_per_day": str(safe_div(earnings, days)),
            "target_hours": str(target),
            "target_met": hours >= target,
        }
        summary = PeriodSummary(
            period_type=PeriodType.HALF_YEAR,
            period_start=period.start,
            period_end=period.end,
            total_hours=hours,
            total_earnings=earnings,
            days_worked=days,
            summary_data=summary_data,
            created_at=datetime.now(timezone.utc),
        )
        report = render_period_report(summary, generated_on=ref)
        return summary.model_copy(update={"summary_data": {**summary_data, "report": report}})

    def check_and_create_period_summary(self, reference_date: DateLike) -> PeriodSummary | None:
        """Write the previous half-year's summary once; None when skipped.

        The existence check is only a fast path: the store's insert is an
        atomic check-and-insert, so a concurrent duplicate loses with
        ``DuplicatePeriodSummaryError`` and is reported as skipped.
        """
        ref = coerce_date(reference_date)
        period = previous_half_year_period(ref)
        if self._summaries.get_period_summary(period.start, period.end) is not None:
            logger.debug("period_summary_exists", period=period.label)
            return None

        summary = self.build_summary(ref)
        if summary is None:
            logger.debug("period_summary_no_entries", period=period.label)
            return None

        try:
            self._summaries.insert_period_summary(summary)
        except DuplicatePeriodSummaryError:
            logger.info("period_summary_race_lost", period=period.label)
            return None

        logger.info(
            "period_summary_created",
            period=period.label,
            total_hours=str(summary.total_hours),
            target_met=summary.summary_data["target_met"],
        )
        return summary
