"""
Tests for songfinder/core/cache.py.

The Redis client is a MagicMock; no server is needed.
"""

import json
from unittest.mock import MagicMock

import redis

from songfinder.core.cache import (
    RedisCache,
    get_analysis,
    get_json,
    make_analysis_cache_key,
    make_track_key,
    set_analysis,
    set_json,
)


def _cache(client: MagicMock = None) -> RedisCache:
    return RedisCache("redis://test:6379/0", client=client or MagicMock())


class TestKeys:
    """Logical track keys and cache keys."""

    def test_track_key_lowercased(self) -> None:
        assert make_track_key("Radiohead", "Creep") == "radiohead::creep"

    def test_track_key_trims(self) -> None:
        assert make_track_key("  Radiohead ", " Creep  ") == "radiohead::creep"

    def test_missing_artist(self) -> None:
        assert make_track_key(None, "Creep") == "unknown artist::creep"
        assert make_track_key("   ", "Creep") == "unknown artist::creep"

    def test_analysis_key(self) -> None:
        assert make_analysis_cache_key("radiohead::creep") == "analysis:radiohead::creep"


class TestRedisCache:
    """Connection handling."""

    def test_connected(self) -> None:
        cache = _cache()
        assert cache.is_connected
        assert cache.ping()

    def test_connection_failure_disables_cache(self) -> None:
        client = MagicMock()
        client.ping.side_effect = redis.ConnectionError("refused")
        cache = _cache(client)
        assert not cache.is_connected
        assert get_json(cache, "analysis:a::b") is None

    def test_ping_failure_after_connect(self) -> None:
        client = MagicMock()
        cache = _cache(client)
        client.ping.side_effect = redis.ConnectionError("gone")
        assert not cache.ping()


class TestJson:
    """JSON get / set helpers."""

    def test_get_hit(self) -> None:
        client = MagicMock()
        client.get.return_value = json.dumps({"a": 1})
        assert get_json(_cache(client), "k") == {"a": 1}

    def test_get_miss(self) -> None:
        client = MagicMock()
        client.get.return_value = None
        assert get_json(_cache(client), "k") is None

    def test_get_corrupt_is_miss(self) -> None:
        client = MagicMock()
        client.get.return_value = "not json"
        assert get_json(_cache(client), "k") is None

    def test_get_redis_error_is_miss(self) -> None:
        client = MagicMock()
        client.get.side_effect = redis.TimeoutError("slow")
        assert get_json(_cache(client), "k") is None

    def test_no_cache(self) -> None:
        assert get_json(None, "k") is None
        set_json(None, "k", {"a": 1}, 60)

    def test_set_with_ttl(self) -> None:
        client = MagicMock()
        set_json(_cache(client), "k", {"name": "Sigur Rós"}, 60)
        client.setex.assert_called_once_with("k", 60, json.dumps({"name": "Sigur Rós"}, ensure_ascii=False))
        client.set.assert_not_called()

    def test_set_without_ttl(self) -> None:
        client = MagicMock()
        set_json(_cache(client), "k", {"a": 1}, 0)
        client.set.assert_called_once_with("k", json.dumps({"a": 1}, ensure_ascii=False))
        client.setex.assert_not_called()

    def test_set_redis_error_swallowed(self) -> None:
        client = MagicMock()
        client.setex.side_effect = redis.ConnectionError("gone")
        set_json(_cache(client), "k", {"a": 1}, 60)


class TestAnalysisHelpers:
    """Track-key based wrappers."""

    def test_round_trip_uses_prefixed_key(self) -> None:
        client = MagicMock()
        cache = _cache(client)
        set_analysis(cache, "radiohead::creep", {"a": 1}, 60)
        client.setex.assert_called_once_with("analysis:radiohead::creep", 60, json.dumps({"a": 1}))

        client.get.return_value = json.dumps({"a": 1})
        assert get_analysis(cache, "radiohead::creep") == {"a": 1}
        client.get.assert_called_with("analysis:radiohead::creep")
