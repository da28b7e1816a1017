"""
Distributed lock for scheduled e-payment jobs.

Celery beat fires on a fixed interval whether or not the previous run has
finished. DistributedLock keeps two runs of the same job from overlapping
across workers.

Usage:
    from epayment.locks import DistributedLock

    try:
        with DistributedLock("epayment:expired-transactions", ttl=1800, blocking=False) as lock:
            for item in batch:
                process(item)
                lock.extend()
    except LockAcquisitionError:
        # Previous run still in progress
        ...
"""

from __future__ import annotations

import time
import uuid
from typing import TYPE_CHECKING

from django_redis import get_redis_connection

from epayment.exceptions import LockAcquisitionError

if TYPE_CHECKING:
    from typing import Any

    from redis import Redis

# Seconds between attempts while waiting on a held lock
POLL_INTERVAL = 0.05


class DistributedLock:
    """
    Redis lock stored under ``lock:<key>`` with a random owner token.

    The key expires after ``ttl`` seconds so a crashed holder cannot keep the
    job blocked. Release only deletes the key while it still carries our
    token.

    Args:
        key: Job identifier
        ttl: Seconds before Redis drops the lock on its own
        blocking: Wait for the lock instead of failing immediately
        timeout: How long to wait when blocking, in seconds
    """

    # Delete the key only if it still holds the caller's token
    RELEASE_SCRIPT = """
    if redis.call("get", KEYS[1]) == ARGV[1] then
        return redis.call("del", KEYS[1])
    else
        return 0
    end
    """

    # Reset the TTL only if the key still holds the caller's token
    EXTEND_SCRIPT = """
    if redis.call("get", KEYS[1]) == ARGV[1] then
        return redis.call("expire", KEYS[1], ARGV[2])
    else
        return 0
    end
    """

    def __init__(
        self,
        key: str,
        ttl: int = 30,
        blocking: bool = True,
        timeout: float = 10.0,
    ) -> None:
        self.key = f"lock:{key}"
        self.ttl = ttl
        self.blocking = blocking
        self.timeout = timeout
        self._token: str | None = None
        self._client: Redis | None = None

    @property
    def client(self) -> Redis:
        if self._client is None:
            self._client = get_redis_connection("default")
        return self._client

    @property
    def is_held(self) -> bool:
        return self._token is not None

    def acquire(self) -> bool:
        """
        Take the lock.

        Returns:
            True once the lock is held

        Raises:
            LockAcquisitionError: Lock owned by someone else (at once when
                non-blocking, after ``timeout`` otherwise)
        """
        token = uuid.uuid4().hex

        if not self.blocking:
            if self._set_if_absent(token):
                return True
            raise LockAcquisitionError(
                f"Lock '{self.key}' is already held",
                details={"key": self.key},
            )

        deadline = time.monotonic() + self.timeout
        while time.monotonic() < deadline:
            if self._set_if_absent(token):
                return True
            time.sleep(POLL_INTERVAL)

        raise LockAcquisitionError(
            f"Gave up waiting for lock '{self.key}' after {self.timeout}s",
            details={"key": self.key, "timeout": self.timeout},
        )

    def release(self) -> bool:
        """
        Give the lock back.

        Returns:
            False if we did not hold it or it had already expired
        """
        if self._token is None:
            return False

        token, self._token = self._token, None
        return bool(self.client.eval(self.RELEASE_SCRIPT, 1, self.key, token))

    def extend(self, ttl: int | None = None) -> bool:
        """
        Restart the expiry clock on a lock we still own.

        The key gets a fresh ``ttl`` (default: the lock's own) rather than
        extra time on top of what is left.

        Returns:
            False if we never held the lock or someone else owns it now
        """
        if self._token is None:
            return False

        seconds = ttl or self.ttl
        return bool(
            self.client.eval(self.EXTEND_SCRIPT, 1, self.key, self._token, seconds)
        )

    def _set_if_absent(self, token: str) -> bool:
        if self.client.set(self.key, token, nx=True, ex=self.ttl):
            self._token = token
            return True
        return False

    def __enter__(self) -> DistributedLock:
        self.acquire()
        return self

    def __exit__(self, exc_type: Any, exc_val: Any, exc_tb: Any) -> None:
        self.release()


__all__ = ["DistributedLock"]
