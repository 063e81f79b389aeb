import threading

import pytest

from clientstack.utils.executor import WorkerPool


@pytest.fixture
def pool():
    pool = WorkerPool(max_workers=2, thread_name_prefix="test-pool")
    yield pool
    pool.shutdown(wait=True, timeout=5)


def test_submit_returns_result(pool):
    future = pool.submit(lambda a, b=0: a + b, 1, b=2)

    assert future.result(timeout=5) == 3


def test_exception_is_set_on_future(pool):
    def _fail():
        raise ValueError("oh no")

    future = pool.submit(_fail)

    with pytest.raises(ValueError, match="oh no"):
        future.result(timeout=5)
    # the worker survives the failed task
    assert pool.submit(lambda: "ok").result(timeout=5) == "ok"


def test_worker_threads_are_bounded(pool):
    release = threading.Event()
    futures = [pool.submit(release.wait, 5) for _ in range(5)]

    release.set()

    assert all(future.result(timeout=5) for future in futures)
    names = {thread.name for thread in pool._threads}
    assert names <= {"test-pool_0", "test-pool_1"}


def test_threads_are_started_lazily():
    pool = WorkerPool(max_workers=4)
    try:
        assert pool._threads == []
        pool.submit(lambda: None).result(timeout=5)
        assert len(pool._threads) == 1
        assert pool._threads[0].name.startswith("clientstack-worker-")
        assert pool._threads[0].daemon
    finally:
        pool.shutdown()


def test_shutdown_runs_queued_tasks(pool):
    release = threading.Event()
    results = []

    pool.submit(release.wait, 5)
    pool.submit(release.wait, 5)
    pool.submit(results.append, "queued")
    release.set()
    pool.shutdown(wait=True)

    assert results == ["queued"]
    assert pool.is_shutdown
    assert not any(thread.is_alive() for thread in pool._threads)


def test_shutdown_cancel_futures(pool):
    release = threading.Event()
    started = threading.Semaphore(0)

    def _block():
        started.release()
        return release.wait(5)

    running = [pool.submit(_block), pool.submit(_block)]
    assert started.acquire(timeout=5)
    assert started.acquire(timeout=5)
    queued = pool.submit(lambda: "never")

    pool.shutdown(wait=False, cancel_futures=True)
    release.set()

    assert queued.cancelled()
    assert all(future.result(timeout=5) for future in running)


def test_submit_after_shutdown(pool):
    pool.shutdown()
    pool.shutdown()

    with pytest.raises(RuntimeError):
        pool.submit(lambda: None)


def test_invalid_max_workers():
    with pytest.raises(ValueError):
        WorkerPool(max_workers=0)
