import pytest

from helix_hub.cache import TTLCache


class FakeClock:
    def __init__(self):
        self.now = 1000.0

    def __call__(self):
        return self.now


def test_set_and_get():
    cache = TTLCache()
    cache.set("team", ["AB"])

    assert cache.get("team") == ["AB"]
    assert cache.hits == 1


def test_missing_key_counts_as_miss():
    cache = TTLCache()

    assert cache.get("nope") is None
    assert cache.misses == 1


def test_expired_entry_is_a_miss():
    clock = FakeClock()
    cache = TTLCache(default_ttl=300, timer=clock)
    cache.set("team", ["AB"])

    clock.now += 299
    assert cache.get("team") == ["AB"]

    clock.now += 2
    assert cache.get("team") is None
    assert len(cache) == 0


def test_least_recently_used_is_evicted():
    cache = TTLCache(max_size=2)
    cache.set("a", 1)
    cache.set("b", 2)
    cache.get("a")
    cache.set("c", 3)

    assert cache.get("a") == 1
    assert cache.get("b") is None
    assert cache.get("c") == 3


def test_delete_and_clear():
    cache = TTLCache()
    cache.set("a", 1)
    cache.set("b", 2)

    assert cache.delete("a") is True
    assert cache.delete("a") is False
    cache.clear()
    assert len(cache) == 0


async def test_get_or_set_loads_once():
    cache = TTLCache()
    calls = []

    async def loader():
        calls.append(1)
        return {"AB": "Construction"}

    first = await cache.get_or_set("aow", loader)
    second = await cache.get_or_set("aow", loader)

    assert first == second == {"AB": "Construction"}
    assert len(calls) == 1


async def test_get_or_set_reloads_after_expiry():
    clock = FakeClock()
    cache = TTLCache(default_ttl=60, timer=clock)
    values = iter([["first"], ["second"]])

    async def loader():
        return next(values)

    assert await cache.get_or_set("leave", loader) == ["first"]
    clock.now += 61
    assert await cache.get_or_set("leave", loader) == ["second"]


async def test_get_or_set_does_not_cache_failures():
    cache = TTLCache()

    async def failing():
        raise RuntimeError("database down")

    async def loader():
        return [1]

    with pytest.raises(RuntimeError):
        await cache.get_or_set("leave", failing)

    assert await cache.get_or_set("leave", loader) == [1]
