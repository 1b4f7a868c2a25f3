from __future__ import annotations

import threading

import pytest

from roster.core.locks import ReadWriteLock


def test_readers_share_the_lock() -> None:
    lock = ReadWriteLock()
    barrier = threading.Barrier(3, timeout=2.0)
    errors: list[BaseException] = []

    def reader() -> None:
        try:
            with lock.read_locked():
                # Only passes if all readers are inside at the same time.
                barrier.wait()
        except BaseException as ex:  # pragma: no cover
            errors.append(ex)

    threads = [threading.Thread(target=reader) for _ in range(3)]
    for t in threads:
        t.start()
    for t in threads:
        t.join(timeout=5.0)

    assert errors == []


def test_writer_excludes_readers() -> None:
    lock = ReadWriteLock()
    entered = threading.Event()

    def reader() -> None:
        with lock.read_locked():
            entered.set()

    with lock.write_locked():
        t = threading.Thread(target=reader)
        t.start()
        assert not entered.wait(timeout=0.2)

    t.join(timeout=2.0)
    assert entered.is_set()


def test_waiting_writer_blocks_new_readers() -> None:
    lock = ReadWriteLock()
    order: list[str] = []
    writer_done = threading.Event()
    late_reader_done = threading.Event()

    def writer() -> None:
        with lock.write_locked():
            order.append("writer")
        writer_done.set()

    def late_reader() -> None:
        with lock.read_locked():
            order.append("reader")
        late_reader_done.set()

    lock.acquire_read()
    try:
        w = threading.Thread(target=writer)
        w.start()
        # Wait until the writer is queued.
        for _ in range(200):
            with lock._cond:
                if lock._writers_waiting:
                    break
            writer_done.wait(timeout=0.01)
        r = threading.Thread(target=late_reader)
        r.start()
        assert not late_reader_done.wait(timeout=0.2)
        assert not writer_done.is_set()
    finally:
        lock.release_read()

    w.join(timeout=2.0)
    r.join(timeout=2.0)
    assert order == ["writer", "reader"]


def test_lock_released_when_body_raises() -> None:
    lock = ReadWriteLock()

    with pytest.raises(ValueError):
        with lock.write_locked():
            raise ValueError("boom")

    with pytest.raises(ValueError):
        with lock.read_locked():
            raise ValueError("boom")

    acquired = threading.Event()

    def writer() -> None:
        with lock.write_locked():
            acquired.set()

    t = threading.Thread(target=writer)
    t.start()
    t.join(timeout=2.0)
    assert acquired.is_set()


def test_unbalanced_release_raises() -> None:
    lock = ReadWriteLock()
    with pytest.raises(RuntimeError):
        lock.release_read()
    with pytest.raises(RuntimeError):
        lock.release_write()


def test_abandoned_writer_wakes_queued_readers() -> None:
    lock = ReadWriteLock()
    notified: list[bool] = []
    real_notify_all = lock._cond.notify_all

    def record_notify_all() -> None:
        notified.append(True)
        real_notify_all()

    def interrupted_wait(timeout: float | None = None) -> bool:
        raise RuntimeError("wait interrupted")

    lock.acquire_read()
    lock._cond.notify_all = record_notify_all  # type: ignore[method-assign]
    lock._cond.wait = interrupted_wait  # type: ignore[method-assign]
    try:
        with pytest.raises(RuntimeError, match="wait interrupted"):
            lock.acquire_write()
    finally:
        del lock._cond.wait

    assert notified
    assert lock._writers_waiting == 0
    assert not lock._writer

    entered = threading.Event()

    def reader() -> None:
        with lock.read_locked():
            entered.set()

    t = threading.Thread(target=reader)
    t.start()
    assert entered.wait(timeout=2.0)
    t.join(timeout=2.0)
    lock.release_read()
