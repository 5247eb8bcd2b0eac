"""Create DockLogger DynamoDB tables and seed curated stat holidays as overrides.

Usage:
    python scripts/seed_dynamodb.py --endpoint-url http://localhost:4566
"""

from __future__ import annotations

import argparse
from typing import Any

import boto3

from docklogger.stat_holidays.curated import CURATED_HOLIDAYS

TABLE_DEFINITIONS: list[dict[str, Any]] = [
    {"name": "docklogger-stat-holidays"},
    {"name": "docklogger-entries"},
    {"name": "docklogger-period-summaries"},
]


def create_tables(ddb: Any, suffix: str = "") -> None:
    """Create all DockLogger tables. Skips if table already exists."""
    client = ddb.meta.client
    existing = client.list_tables().get("TableNames", [])

    for defn in TABLE_DEFINITIONS:
        table_name = f"{defn['name']}{suffix}"
        if table_name in existing:
            print(f"  Table {table_name} already exists, skipping")
            continue
        client.create_table(
            TableName=table_name,
            KeySchema=[
                {"AttributeName": "PK", "KeyType": "HASH"},
                {"AttributeName": "SK", "KeyType": "RANGE"},
            ],
            AttributeDefinitions=[
                {"AttributeName": "PK", "AttributeType": "S"},
                {"AttributeName": "SK", "AttributeType": "S"},
            ],
            BillingMode="PAY_PER_REQUEST",
        )
        print(f"  Created table {table_name}")


def seed_stat_holidays(ddb: Any, suffix: str = "", years: list[int] | None = None) -> int:
    """Copy curated stat schedules into the override table. Returns rows written."""
    tbl = ddb.Table(f"docklogger-stat-holidays{suffix}")
    written = 0
    with tbl.batch_writer() as batch:
        for year in years or sorted(CURATED_HOLIDAYS):
            for holiday in CURATED_HOLIDAYS.get(year, ()):
                batch.put_item(Item={
                    "PK": f"YEAR#{year}",
                    "SK": f"HOLIDAY#{holiday.date.isoformat()}#{holiday.name}",
                    **holiday.to_item(),
                })
                written += 1
    print(f"  Seeded {written} stat holidays")
    return written


def main() -> None:
    parser = argparse.ArgumentParser(description="Seed DynamoDB tables for DockLogger")
    parser.add_argument("--endpoint-url", default=None, help="DynamoDB endpoint (e.g. http://localhost:4566)")
    parser.add_argument("--table-suffix", default="", help="Table name suffix (e.g. -dev)")
    parser.add_argument("--region", default="ca-central-1", help="AWS region")
    parser.add_argument("--year", type=int, action="append", help="Curated year to seed (repeatable)")
    args = parser.parse_args()

    kwargs: dict[str, Any] = {"region_name": args.region}
    if args.endpoint_url:
        kwargs["endpoint_url"] = args.endpoint_url

    ddb = boto3.resource("dynamodb", **kwargs)

    print("Creating tables...")
    create_tables(ddb, suffix=args.table_suffix)

    print("Seeding stat holidays...")
    seed_stat_holidays(ddb, suffix=args.table_suffix, years=args.year)

    print("Done!")


if __name__ == "__main__":
    main()
