import uuid
from time import time
from typing import Awaitable, Callable, Tuple, TypeVar

T = TypeVar("T")


async def measure_execution_time(fn: Callable[[], Awaitable[T]]) -> Tuple[T, int]:
    """
    Await fn() and report how long it took.

    :return: (result, elapsed milliseconds)
    """
    start_time = time()
    result = await fn()
    return result, int((time() - start_time) * 1000)


def generate_id() -> str:
    """Unique message identifier."""
    return f"{int(time() * 1000)}-{uuid.uuid4().hex[:9]}"
