# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

"""Per-entry mutation locks shared by every request thread of the process."""

from __future__ import annotations

import threading
from collections.abc import Hashable, Iterator
from contextlib import contextmanager


class EntryLocks:
    """Registry of reentrant locks keyed by entry id.

    A key stays registered only while some thread holds or waits on its lock,
    so ids that never existed do not accumulate.
    """

    def __init__(self) -> None:
        self._locks: dict[Hashable, tuple[threading.RLock, int]] = {}
        self._guard = threading.Lock()

    @contextmanager
    def hold(self, key: Hashable) -> Iterator[None]:
        with self._guard:
            lk, holders = self._locks.get(key, (None, 0))
            if lk is None:
                lk = threading.RLock()
            self._locks[key] = (lk, holders + 1)
        try:
            with lk:
                yield
        finally:
            with self._guard:
                _, holders = self._locks[key]
                if holders <= 1:
                    del self._locks[key]
                else:
                    self._locks[key] = (lk, holders - 1)

    def __len__(self) -> int:
        with self._guard:
            return len(self._locks)
