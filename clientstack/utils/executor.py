import itertools
import logging
import queue
import threading
import time
from concurrent.futures import Future, _base
from typing import Callable, List, NamedTuple, Optional

LOG = logging.getLogger(__name__)


class _Task(NamedTuple):
    future: Optional[Future]
    fn: Optional[Callable]
    args: Optional[tuple]
    kwargs: Optional[dict]


_SHUTDOWN = _Task(None, None, None, None)
"""Sentinel which tells a worker to exit."""


def _execute(task: _Task) -> None:
    """
    Runs the task's function and completes its future with the return value or the raised exception.

    :param task: the task to execute
    """
    if not task.future.set_running_or_notify_cancel():
        return

    try:
        result = task.fn(*task.args, **task.kwargs)
    except BaseException as e:
        task.future.set_exception(e)
    else:
        task.future.set_result(result)


def _work_loop(pool: "WorkerPool", tasks: "queue.Queue[_Task]") -> None:
    """
    Loop of a worker thread, which takes tasks from the pool's queue until it finds the shutdown sentinel.

    :param pool: the pool that owns the worker
    :param tasks: the shared task queue
    """
    try:
        while True:
            task = tasks.get(block=True)

            if task is not _SHUTDOWN:
                _execute(task)
                del task
                pool._idle.release()
                continue

            # pass the sentinel on so every other worker sees it too
            tasks.put(_SHUTDOWN)
            return
    except BaseException:
        LOG.exception("Unexpected error in worker %s", threading.current_thread().name)


class WorkerPool(_base.Executor):
    """
    A bounded pool of daemon threads which runs the callable and async variants of client operations.
    Threads are started lazily (only when no worker is idle) up to ``max_workers``. Since the threads are
    daemons, a pool that is never shut down does not keep the interpreter alive.
    """

    _pool_ids = itertools.count().__next__

    def __init__(self, max_workers: int, thread_name_prefix: str = ""):
        if max_workers <= 0:
            raise ValueError("max_workers must be greater than 0")
        self._max_workers = max_workers
        self._thread_name_prefix = thread_name_prefix or f"clientstack-worker-{self._pool_ids()}"
        self._tasks: "queue.Queue[_Task]" = queue.Queue()
        self._idle = threading.Semaphore(0)
        self._shutdown = False
        self._lock = threading.Lock()
        self._threads: List[threading.Thread] = []

    @property
    def max_workers(self) -> int:
        return self._max_workers

    @property
    def is_shutdown(self) -> bool:
        return self._shutdown

    def submit(self, fn: Callable, /, *args, **kwargs) -> Future:
        with self._lock:
            if self._shutdown:
                raise RuntimeError("cannot submit tasks to a pool that has been shut down")

            future = _base.Future()
            self._tasks.put(_Task(future, fn, args, kwargs))
            self._spawn_worker_if_needed()
            return future

    def _spawn_worker_if_needed(self) -> None:
        if self._idle.acquire(timeout=0):
            return

        if len(self._threads) >= self._max_workers:
            return

        name = f"{self._thread_name_prefix}_{len(self._threads)}"
        thread = threading.Thread(
            target=_work_loop, name=name, args=(self, self._tasks), daemon=True
        )
        thread.start()
        self._threads.append(thread)
        LOG.debug("Started worker thread %s", name)

    def shutdown(
        self, wait: bool = True, *, cancel_futures: bool = False, timeout: float = None
    ) -> None:
        """
        Stops accepting tasks and lets the workers exit once the queued tasks are done.

        :param wait: whether to block until the worker threads have exited
        :param cancel_futures: whether to cancel the tasks that have not started yet
        :param timeout: max time to wait for the workers, if ``wait`` is set
        """
        with self._lock:
            if self._shutdown:
                return
            self._shutdown = True
            if cancel_futures:
                while True:
                    try:
                        task = self._tasks.get_nowait()
                    except queue.Empty:
                        break
                    if task is not _SHUTDOWN:
                        task.future.cancel()

            self._tasks.put_nowait(_SHUTDOWN)

        if wait:
            self.join(timeout)

    def join(self, timeout: float = None) -> None:
        """
        Waits for all worker threads to exit.

        :param timeout: the max time to wait in total
        """
        if not timeout:
            for thread in self._threads:
                thread.join()
            return

        deadline = time.monotonic() + timeout
        for thread in self._threads:
            thread.join(timeout=max(0.0, deadline - time.monotonic()))
