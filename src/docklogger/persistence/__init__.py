"""Pluggable persistence backends behind Protocol interfaces."""

from __future__ import annotations

from docklogger.core.config import AppSettings
from docklogger.persistence.dynamodb_backend import DynamoDBRecordStore
from docklogger.persistence.redis_backend import RedisCacheBackend


def create_persistence(settings: AppSettings | None = None):
    """Create wired-up persistence backends from application settings.

    Returns:
        Tuple of (record_store, cache). ``cache`` is None unless Redis is enabled.
    """
    if settings is None:
        settings = AppSettings()

    cache = None
    if settings.redis.enabled:
        cache = RedisCacheBackend(
            host=settings.redis.host,
            port=settings.redis.port,
            db=settings.redis.db,
        )

    record_store = DynamoDBRecordStore(
        table_suffix=settings.dynamodb.table_suffix,
        region=settings.dynamodb.region,
        endpoint_url=settings.dynamodb.endpoint_url,
        cache=cache,
        cache_ttl=settings.redis.holiday_cache_ttl,
    )

    return record_store, cache
