from emojified.core.cache import Cache, cache


def test_incr_counts_from_one():
    assert cache.incr("rate:test") == 1
    assert cache.incr("rate:test") == 2
    assert cache.incr("rate:other") == 1


def test_clear_resets_counters():
    cache.incr("rate:test")
    cache.clear()
    assert cache.incr("rate:test") == 1


def test_counter_only_surface():
    # Fingerprints are never cached; the store only backs rate-limit counters
    assert not hasattr(Cache, "get")
    assert not hasattr(Cache, "set")
