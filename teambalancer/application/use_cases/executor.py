"""Shared thread pool for blocking adapter calls."""

import asyncio
from concurrent.futures import Executor, ThreadPoolExecutor
from functools import partial
from typing import Any, Callable, TypeVar

T = TypeVar("T")

# Thread pool for running blocking I/O operations
default_executor = ThreadPoolExecutor(max_workers=32, thread_name_prefix="balancer-io")


async def run_blocking(executor: Executor, func: Callable[..., T], *args: Any) -> T:
    """Run a blocking adapter call in ``executor`` without blocking the event loop."""
    loop = asyncio.get_running_loop()
    return await loop.run_in_executor(executor, partial(func, *args))
