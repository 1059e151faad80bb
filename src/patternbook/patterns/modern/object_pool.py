"""Object Pool - reuse expensive objects instead of creating and destroying them."""
import threading
import time
from collections import deque
from contextlib import contextmanager
from typing import Callable, Deque, Dict, Generic, Iterator, List, Optional, TypeVar

from patternbook.application.decorators import pattern_example
from patternbook.domain.base.exceptions import DomainException, ValidationError
from patternbook.domain.catalog import PatternCategory

T = TypeVar("T")


class PoolExhaustedError(DomainException):
    """Raised when no object becomes available within the timeout."""
    def __init__(self, max_size: int, timeout: Optional[float]):
        super().__init__(f"All {max_size} pooled objects are in use (waited {timeout}s)")
        self.max_size = max_size
        self.timeout = timeout


class ObjectPool(Generic[T]):
    """
    Thread-safe bounded pool.

    Objects are created lazily by ``factory`` up to ``max_size``. Released
    objects are passed through ``reset`` and handed out again; objects that
    fail ``validate`` on checkout are discarded and replaced. An object whose
    ``reset`` or ``validate`` raises is dropped and its slot freed before the
    error propagates.
    """

    def __init__(self,
                 factory: Callable[[], T],
                 max_size: int,
                 reset: Optional[Callable[[T], None]] = None,
                 validate: Optional[Callable[[T], bool]] = None):
        if max_size < 1:
            raise ValidationError(f"Pool size must be at least 1, got {max_size}")
        self._factory = factory
        self._max_size = max_size
        self._reset = reset
        self._validate = validate
        self._available: Deque[T] = deque()
        self._in_use: Dict[int, T] = {}
        self._created = 0
        self._condition = threading.Condition()

    def acquire(self, timeout: Optional[float] = None) -> T:
        """
        Check an object out of the pool.

        Args:
            timeout: Seconds to wait for a free object; None waits forever

        Raises:
            PoolExhaustedError: If the pool stays exhausted for ``timeout`` seconds
        """
        deadline = None if timeout is None else time.monotonic() + timeout
        with self._condition:
            while True:
                while self._available:
                    obj = self._available.popleft()
                    if self._validate is not None and not self._check(obj):
                        continue
                    self._in_use[id(obj)] = obj
                    return obj

                if self._created < self._max_size:
                    obj = self._factory()
                    self._created += 1
                    self._in_use[id(obj)] = obj
                    return obj

                remaining = None if deadline is None else deadline - time.monotonic()
                if remaining is not None and remaining <= 0:
                    raise PoolExhaustedError(self._max_size, timeout)
                self._condition.wait(remaining)

    def release(self, obj: T) -> None:
        """Return an object to the pool; it must have come from ``acquire``."""
        with self._condition:
            if self._in_use.pop(id(obj), None) is None:
                raise ValueError("Object does not belong to this pool or was already released")
            if self._reset is not None:
                try:
                    self._reset(obj)
                except Exception:
                    self._discard()
                    raise
            self._available.append(obj)
            self._condition.notify()

    def _check(self, obj: T) -> bool:
        try:
            valid = self._validate(obj)
        except Exception:
            self._discard()
            raise
        if not valid:
            self._discard()
        return bool(valid)

    def _discard(self) -> None:
        # Caller holds the condition; the slot becomes free for a new object.
        self._created -= 1
        self._condition.notify()

    @contextmanager
    def lease(self, timeout: Optional[float] = None) -> Iterator[T]:
        """Acquire an object for the duration of a ``with`` block."""
        obj = self.acquire(timeout)
        try:
            yield obj
        finally:
            self.release(obj)

    @property
    def size(self) -> int:
        return self._created

    @property
    def available(self) -> int:
        with self._condition:
            return len(self._available)

    @property
    def in_use(self) -> int:
        with self._condition:
            return len(self._in_use)


class Connection:
    opened = 0

    def __init__(self):
        Connection.opened += 1
        self.number = Connection.opened
        self.queries: List[str] = []
        self.closed = False

    def execute(self, sql: str) -> str:
        self.queries.append(sql)
        return f"conn#{self.number} ran {sql!r}"


@pattern_example(
    name="Object Pool",
    category=PatternCategory.MODERN,
    intent="Keep a set of initialized objects ready for reuse rather than allocating and destroying them on demand.",
    aliases=("Resource Pool",),
    participants=(ObjectPool,),
    related=("singleton", "flyweight"),
)
def demo() -> List[str]:
    Connection.opened = 0
    pool = ObjectPool(Connection, max_size=2,
                      reset=lambda c: c.queries.clear(),
                      validate=lambda c: not c.closed)
    lines = []

    with pool.lease() as conn:
        lines.append(conn.execute("SELECT 1"))
    with pool.lease() as conn:
        lines.append(conn.execute("SELECT 2"))
    lines.append(f"connections opened for two sequential leases: {Connection.opened}")

    first, second = pool.acquire(), pool.acquire()
    try:
        pool.acquire(timeout=0)
    except PoolExhaustedError as e:
        lines.append(f"third acquire: {e}")

    second.closed = True
    pool.release(first)
    pool.release(second)
    with pool.lease() as a, pool.lease() as b:
        lines.append(f"stale connection replaced: {sorted([a.number, b.number])}")
    lines.append(f"pool size={pool.size} available={pool.available} in_use={pool.in_use}")
    return lines
