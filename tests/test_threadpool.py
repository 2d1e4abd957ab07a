import threading

import pytest

from workbench.threadpool import ThreadPool


def test_all_jobs_run_before_shutdown_returns():
    results = []
    lock = threading.Lock()

    def make_job(n):
        def job():
            with lock:
                results.append(n)

        return job

    pool = ThreadPool(3)
    assert pool.size == 3
    for n in range(20):
        pool.execute(make_job(n))
    pool.shutdown()
    assert sorted(results) == list(range(20))
    with pytest.raises(RuntimeError):
        pool.execute(make_job(99))


def test_size_is_reported():
    with ThreadPool(2) as pool:
        assert pool.size == 2


def test_invalid_size_is_rejected():
    with pytest.raises(ValueError):
        ThreadPool(0)


def test_execute_after_shutdown_raises():
    pool = ThreadPool(1)
    pool.shutdown()
    with pytest.raises(RuntimeError):
        pool.execute(lambda: None)


def test_shutdown_is_idempotent():
    ran = []
    pool = ThreadPool(1)
    pool.execute(lambda: ran.append(1))
    pool.shutdown()
    pool.shutdown()
    assert ran == [1]


def test_failing_job_does_not_stop_worker():
    ran = []
    with ThreadPool(1) as pool:
        pool.execute(lambda: 1 / 0)
        pool.execute(lambda: ran.append("after"))
    assert ran == ["after"]


def test_context_manager_runs_jobs():
    done = threading.Event()
    with ThreadPool(2) as pool:
        pool.execute(done.set)
    assert done.is_set()