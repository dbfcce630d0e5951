"""Unit tests for the optional nonce reuse tracker."""

import os
import threading

import pytest

from encbox.core.exceptions import NonceReuseError
from encbox.security.nonces import NonceTracker, key_fingerprint


@pytest.fixture
def tracker():
    return NonceTracker()


def test_register_and_seen(tracker):
    key, n = os.urandom(32), os.urandom(12)
    assert not tracker.seen(key, n)
    tracker.register(key, n)
    assert tracker.seen(key, n)
    assert len(tracker) == 1


def test_register_twice_raises(tracker):
    key, n = os.urandom(16), os.urandom(12)
    tracker.register(key, n)
    with pytest.raises(NonceReuseError):
        tracker.register(key, n)


def test_raw_key_is_not_stored(tracker):
    key = os.urandom(32)
    tracker.register(key, os.urandom(12))
    (entry,) = tracker._seen
    assert entry[0] == key_fingerprint(key)
    assert key not in entry


def test_clear(tracker):
    tracker.register(os.urandom(32), os.urandom(12))
    tracker.clear()
    assert len(tracker) == 0


def test_concurrent_registration_allows_exactly_one(tracker):
    key, n = os.urandom(32), os.urandom(12)
    results = []
    lock = threading.Lock()

    def worker():
        try:
            tracker.register(key, n)
            outcome = "ok"
        except NonceReuseError:
            outcome = "reuse"
        with lock:
            results.append(outcome)

    threads = [threading.Thread(target=worker) for _ in range(16)]
    for t in threads:
        t.start()
    for t in threads:
        t.join()

    assert results.count("ok") == 1
    assert results.count("reuse") == 15
