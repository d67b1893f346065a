"""Small jobs spread over threads."""

from __future__ import annotations

import threading
from concurrent.futures import ThreadPoolExecutor
from typing import Iterable, Sequence


def double_all(items: Iterable[int]) -> list[int]:
    """Double every item, one thread per item, printing each result.

    Lines are printed in whatever order the threads finish; the returned
    list keeps the order of the input.
    """
    values = list(items)

    def work(item: int) -> int:
        doubled = item * 2
        print(f"Processed: {doubled}")
        return doubled

    if not values:
        return []
    with ThreadPoolExecutor(max_workers=len(values)) as pool:
        return list(pool.map(work, values))


def count_concurrently(workers: int = 10) -> int:
    """Increment a shared, lock-protected counter once from each of the workers."""
    counter = 0
    lock = threading.Lock()

    def work() -> None:
        nonlocal counter
        with lock:
            counter += 1

    threads = [threading.Thread(target=work) for _ in range(workers)]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join()
    return counter


def sum_in_threads(data: Sequence[int], threads: int = 5) -> list[int]:
    """Sum the shared data in each of several threads, printing each sum.

    Returns the sum each thread computed, indexed by thread number.
    """
    shared = tuple(data)

    def work(index: int) -> int:
        local_sum = sum(shared)
        print(f"Thread {index} Sum: {local_sum}")
        return local_sum

    if threads <= 0:
        return []
    with ThreadPoolExecutor(max_workers=threads) as pool:
        return list(pool.map(work, range(threads)))