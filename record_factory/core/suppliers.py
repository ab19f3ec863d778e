"""Ready-made value suppliers for registered defaults and overrides.

    register(User, {"id": sequence(), "email": sequence(fmt="user{}@example.com")})
"""

from __future__ import annotations

import itertools
import random
import threading
import uuid
from typing import Any, Callable, Optional, Sequence

from .values import Supplier


def sequence(start: int = 1, step: int = 1, fmt: Optional[str] = None) -> Supplier:
    counter = itertools.count(start, step)
    lock = threading.Lock()

    def _next() -> Any:
        with lock:
            n = next(counter)
        return fmt.format(n) if fmt is not None else n

    return Supplier(_next)


def cycle(values: Sequence[Any]) -> Supplier:
    if not values:
        raise ValueError("cycle() needs at least one value")
    it = itertools.cycle(list(values))
    lock = threading.Lock()

    def _next() -> Any:
        with lock:
            return next(it)

    return Supplier(_next)


def choice(values: Sequence[Any], seed: Optional[int] = None) -> Supplier:
    if not values:
        raise ValueError("choice() needs at least one value")
    pool = list(values)
    rng = random.Random(seed)
    return Supplier(lambda: rng.choice(pool))


def uuid4_str() -> Supplier:
    return Supplier(lambda: str(uuid.uuid4()))


def factory_of(cls: Callable[..., Any], *args: Any, **kwargs: Any) -> Supplier:
    """A new `cls(*args, **kwargs)` per call, e.g. factory_of(list) for a fresh list."""
    return Supplier(lambda: cls(*args, **kwargs))
