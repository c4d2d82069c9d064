"""Chained square matrix-multiply workload.

Each repetition queues ``c = a @ b`` on a single background worker and
hands the previous ``a`` back for disposal; ``c`` becomes the new ``a``.
The end-of-trial step reads ``a`` back, which blocks until every queued
multiply has run.
"""

from __future__ import annotations

import asyncio
import math
from concurrent.futures import Future, ThreadPoolExecutor
from typing import List, Optional

import numpy as np

from trialbench.utils.errors import ResourceReleaseError


class ArrayHandle:
    """Disposable handle to a (possibly still pending) numpy result."""

    def __init__(self, future: "Future[np.ndarray]"):
        self._future: Optional[Future] = future

    @classmethod
    def from_array(cls, array: np.ndarray) -> "ArrayHandle":
        future: Future = Future()
        future.set_result(array)
        return cls(future)

    @property
    def disposed(self) -> bool:
        return self._future is None

    @property
    def future(self) -> Future:
        if self._future is None:
            raise ResourceReleaseError("ArrayHandle used after dispose()")
        return self._future

    async def data(self) -> np.ndarray:
        """Wait for the result and return it (the readback)."""
        return await asyncio.wrap_future(self.future)

    def dispose(self) -> None:
        if self._future is None:
            raise ResourceReleaseError("ArrayHandle disposed twice")
        self._future = None


def _matmul(a: "Future[np.ndarray]", b: np.ndarray) -> np.ndarray:
    # Single-worker FIFO: the producer of `a` has already run.
    return a.result() @ b


class MatMulWorkload:
    """Benchmark workload: repeated ``size`` x ``size`` float32 matmul."""

    def __init__(self, size: int = 500, seed: int = 0):
        """Initialize workload.

        Args:
            size: Matrix dimension N for N x N operands
            seed: Seed for the random-normal operands
        """
        if size < 1:
            raise ValueError(f"size must be positive, got {size}")
        self.size = size
        rng = np.random.default_rng(seed)
        # b is scaled so repeated products stay bounded in magnitude.
        self._b = (rng.standard_normal((size, size)) / math.sqrt(size)).astype(np.float32)
        self._a = ArrayHandle.from_array(rng.standard_normal((size, size)).astype(np.float32))
        self._executor: Optional[ThreadPoolExecutor] = ThreadPoolExecutor(
            max_workers=1, thread_name_prefix="trialbench-matmul"
        )

    def do_rep(self) -> List[ArrayHandle]:
        if self._executor is None:
            raise RuntimeError("MatMulWorkload is closed")
        previous = self._a
        self._a = ArrayHandle(self._executor.submit(_matmul, previous.future, self._b))
        return [previous]

    async def end_trial(self) -> None:
        await self._a.data()

    def close(self) -> None:
        """Dispose the live operand and stop the worker, dropping queued multiplies."""
        if self._executor is None:
            return
        self._executor.shutdown(wait=True, cancel_futures=True)
        self._executor = None
        if not self._a.disposed:
            self._a.dispose()

    def __enter__(self) -> "MatMulWorkload":
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()
