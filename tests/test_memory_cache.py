from teambalancer.infrastructure.adapters.memory_cache import MemoryCacheStore


class _Clock:
    def __init__(self) -> None:
        self.now = 1000.0

    def __call__(self) -> float:
        return self.now


def test_entries_expire_after_ttl() -> None:
    clock = _Clock()
    cache = MemoryCacheStore(clock=clock)
    cache.set("profile:faker", b"{}", 3600)

    clock.now += 3599
    assert cache.get("profile:faker") == b"{}"
    clock.now += 1
    assert cache.get("profile:faker") is None
    assert len(cache) == 0


def test_missing_key_and_nonpositive_ttl() -> None:
    cache = MemoryCacheStore()
    cache.set("k", b"v", 0)
    assert cache.get("k") is None
    assert cache.get("never") is None


def test_full_cache_evicts_oldest() -> None:
    cache = MemoryCacheStore(max_entries=2)
    cache.set("a", b"1", 60)
    cache.set("b", b"2", 60)
    cache.set("c", b"3", 60)

    assert cache.get("a") is None
    assert cache.get("b") == b"2"
    assert cache.get("c") == b"3"
