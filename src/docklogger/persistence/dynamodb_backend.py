"""DynamoDB record store implementing IHolidayStore, IEntryStore and ISummaryStore."""

from __future__ import annotations

import json
import uuid
from datetime import date
from decimal import Decimal
from typing import Any

import boto3
from botocore.exceptions import ClientError

from docklogger.core.exceptions import DuplicatePeriodSummaryError, RecordStoreError
from docklogger.core.logging_config import get_logger
from docklogger.core.protocols import ICacheBackend
from docklogger.models.accrual import PeriodSummary
from docklogger.models.holiday import HolidayRecord
from docklogger.models.shift import RangeTotals, ShiftEntry

logger = get_logger(__name__)

HOLIDAYS_TABLE = "docklogger-stat-holidays"
ENTRIES_TABLE = "docklogger-entries"
SUMMARIES_TABLE = "docklogger-period-summaries"

ENTRIES_PK = "ENTRIES"
SUMMARIES_PK = "SUMMARY"


class _DecimalEncoder(json.JSONEncoder):
    """Encode Decimal values as strings so they round-trip exactly."""

    def default(self, o: Any) -> Any:
        if isinstance(o, Decimal):
            return str(o)
        return super().default(o)


def _entry_sk(day: date, entry_id: str) -> str:
    return f"DATE#{day.isoformat()}#{entry_id}"


def _summary_sk(start: date, end: date) -> str:
    return f"PERIOD#{start.isoformat()}#{end.isoformat()}"


class DynamoDBRecordStore:
    """Production record store backed by DynamoDB + optional cache for stat lookups."""

    def __init__(self, table_suffix: str = "", region: str = "ca-central-1",
                 endpoint_url: str | None = None, cache: ICacheBackend | None = None,
                 cache_ttl: int = 3600) -> None:
        self._table_suffix = table_suffix
        self._cache = cache
        self._cache_ttl = cache_ttl
        kwargs: dict = {"region_name": region}
        if endpoint_url:
            kwargs["endpoint_url"] = endpoint_url
        self._ddb = boto3.resource("dynamodb", **kwargs)

    def _table(self, base: str):
        return self._ddb.Table(f"{base}{self._table_suffix}")

    def _query(self, table_base: str, **kwargs: Any) -> list[dict[str, Any]]:
        """Run a query to completion, following pagination."""
        tbl = self._table(table_base)
        items: list[dict[str, Any]] = []
        try:
            while True:
                resp = tbl.query(**kwargs)
                items.extend(resp.get("Items", []))
                last = resp.get("LastEvaluatedKey")
                if not last:
                    return items
                kwargs["ExclusiveStartKey"] = last
        except ClientError as exc:
            logger.error("dynamodb_query_failed", table=table_base, error=str(exc))
            raise RecordStoreError(f"DynamoDB query on {table_base!r} failed: {exc}") from exc

    # ---- IHolidayStore ----

    def get_stat_holidays(self, year: int) -> list[dict[str, Any]]:
        cache_key = f"stat_holidays:{year}"

        if self._cache is not None:
            cached = self._cache.get(cache_key)
            if cached is not None:
                return json.loads(cached)

        rows = self._query(
            HOLIDAYS_TABLE,
            KeyConditionExpression="PK = :pk",
            ExpressionAttributeValues={":pk": f"YEAR#{year}"},
        )
        items = [
            {
                "name": row["name"],
                "date": row["date"],
                "qualification_start": row["qualification_start"],
                "qualification_end": row["qualification_end"],
                "pay_date": row.get("pay_date"),
            }
            for row in rows
        ]

        if self._cache is not None:
            self._cache.setex(cache_key, self._cache_ttl, json.dumps(items))

        return items

    def put_stat_holidays(self, year: int, holidays: list[HolidayRecord]) -> None:
        """Write an override table for ``year`` (replaces rows with the same date+name)."""
        tbl = self._table(HOLIDAYS_TABLE)
        try:
            with tbl.batch_writer() as batch:
                for holiday in holidays:
                    batch.put_item(Item={
                        "PK": f"YEAR#{year}",
                        "SK": f"HOLIDAY#{holiday.date.isoformat()}#{holiday.name}",
                        **holiday.to_item(),
                    })
        except ClientError as exc:
            raise RecordStoreError(f"DynamoDB write of {year} stat holidays failed: {exc}") from exc
        if self._cache is not None:
            self._cache.delete(f"stat_holidays:{year}")

    # ---- IEntryStore ----

    def add_entry(self, entry: ShiftEntry, entry_id: str | None = None) -> str:
        entry_id = entry_id or uuid.uuid4().hex
        item: dict[str, Any] = {
            "PK": ENTRIES_PK,
            "SK": _entry_sk(entry.date, entry_id),
            "date": entry.date.isoformat(),
            "shift_type": str(entry.shift_type),
            "job_type": str(entry.job_type),
            "hours": entry.hours,
        }
        if entry.earnings is not None:
            item["earnings"] = entry.earnings
        for field in ("hall_job_name", "location", "ship", "notes"):
            value = getattr(entry, field)
            if value:
                item[field] = value
        try:
            self._table(ENTRIES_TABLE).put_item(Item=item)
        except ClientError as exc:
            raise RecordStoreError(f"DynamoDB write of entry {entry_id!r} failed: {exc}") from exc
        return entry_id

    def _entries_between(self, start: date, end: date) -> list[dict[str, Any]]:
        # "~" sorts after every character used in entry ids, so the upper bound is inclusive.
        return self._query(
            ENTRIES_TABLE,
            KeyConditionExpression="PK = :pk AND SK BETWEEN :lo AND :hi",
            ExpressionAttributeValues={
                ":pk": ENTRIES_PK,
                ":lo": f"DATE#{start.isoformat()}",
                ":hi": f"DATE#{end.isoformat()}#~",
            },
        )

    def get_work_days_count(self, start: date, end: date) -> int:
        return len({row["date"] for row in self._entries_between(start, end)})

    def get_total_hours(self, start: date, end: date) -> Decimal:
        return sum((Decimal(row["hours"]) for row in self._entries_between(start, end)), Decimal("0"))

    def get_total_earnings(self, start: date, end: date) -> Decimal:
        rows = self._entries_between(start, end)
        return sum((Decimal(row.get("earnings", 0)) for row in rows), Decimal("0"))

    def get_range_totals(self, start: date, end: date) -> RangeTotals:
        rows = self._entries_between(start, end)
        return RangeTotals(
            entry_count=len(rows),
            work_days=len({row["date"] for row in rows}),
            total_hours=sum((Decimal(row["hours"]) for row in rows), Decimal("0")),
            total_earnings=sum((Decimal(row.get("earnings", 0)) for row in rows), Decimal("0")),
        )

    # ---- ISummaryStore ----

    @staticmethod
    def _summary_from_item(item: dict[str, Any]) -> PeriodSummary:
        return PeriodSummary(
            period_type=item["period_type"],
            period_start=item["period_start"],
            period_end=item["period_end"],
            total_hours=item["total_hours"],
            total_earnings=item["total_earnings"],
            days_worked=int(item["days_worked"]),
            summary_data=json.loads(item.get("summary_data") or "{}"),
            created_at=item.get("created_at"),
        )

    def get_period_summary(self, start: date, end: date) -> PeriodSummary | None:
        try:
            resp = self._table(SUMMARIES_TABLE).get_item(
                Key={"PK": SUMMARIES_PK, "SK": _summary_sk(start, end)},
            )
        except ClientError as exc:
            raise RecordStoreError(f"DynamoDB read of period summary failed: {exc}") from exc
        item = resp.get("Item")
        return self._summary_from_item(item) if item else None

    def insert_period_summary(self, summary: PeriodSummary) -> None:
        """Conditional put: fails with DuplicatePeriodSummaryError if the period exists."""
        item: dict[str, Any] = {
            "PK": SUMMARIES_PK,
            "SK": _summary_sk(summary.period_start, summary.period_end),
            "period_type": str(summary.period_type),
            "period_start": summary.period_start.isoformat(),
            "period_end": summary.period_end.isoformat(),
            "total_hours": summary.total_hours,
            "total_earnings": summary.total_earnings,
            "days_worked": summary.days_worked,
            "summary_data": json.dumps(summary.summary_data, cls=_DecimalEncoder),
        }
        if summary.created_at is not None:
            item["created_at"] = summary.created_at.isoformat()
        try:
            self._table(SUMMARIES_TABLE).put_item(
                Item=item, ConditionExpression="attribute_not_exists(PK)",
            )
        except ClientError as exc:
            if exc.response.get("Error", {}).get("Code") == "ConditionalCheckFailedException":
                raise DuplicatePeriodSummaryError(
                    summary.period_start.isoformat(), summary.period_end.isoformat(),
                ) from exc
            raise RecordStoreError(f"DynamoDB write of period summary failed: {exc}") from exc

    def list_period_summaries(self) -> list[PeriodSummary]:
        rows = self._query(
            SUMMARIES_TABLE,
            KeyConditionExpression="PK = :pk",
            ExpressionAttributeValues={":pk": SUMMARIES_PK},
            ScanIndexForward=False,
        )
        return [self._summary_from_item(row) for row in rows]

    def get_latest_summary(self) -> PeriodSummary | None:
        summaries = self.list_period_summaries()
        return summaries[0] if summaries else None
