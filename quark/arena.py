"""Bump-pointer arenas, a fixed pool of them, and a linear offset tracker."""

from __future__ import annotations

import threading
from dataclasses import dataclass
from typing import Iterable

KB = 1024
MB = 1024 * KB
GB = 1024 * MB

PTR_ALIGNMENT = 8
DEFAULT_COMMIT = 2 * MB
DEFAULT_RESERVE = 8 * GB
MAX_ARENA_COUNT = 32


class AllocationError(MemoryError):
    """Raised when an arena, pool or tracker cannot satisfy a request."""


def is_power_of_two(x: int) -> bool:
    """True if x has at most one bit set (zero counts, as with the bit trick)."""
    return (x & (x - 1)) == 0


def align_forward(ptr: int, align: int) -> int:
    """Round ptr up to the next multiple of align, which must be a power of two."""
    if align <= 0 or not is_power_of_two(align):
        raise ValueError(f"alignment must be a positive power of two, got {align}")
    modulo = ptr & (align - 1)
    if modulo:
        ptr += align - modulo
    return ptr


class Arena:
    """A growable byte region handed out by moving a position forward.

    Memory is committed lazily: the committed size doubles until it covers
    the current position, never beyond the reserved size.
    """

    def __init__(self, initial_commit: int = DEFAULT_COMMIT, reserve_size: int = DEFAULT_RESERVE) -> None:
        if initial_commit <= 0:
            raise ValueError("initial commit size must be positive")
        if reserve_size < initial_commit:
            raise ValueError("reserve size must cover the initial commit size")
        self.initial_commit = initial_commit
        self.reserve_size = reserve_size
        self.position = 0
        self._buffer = bytearray(initial_commit)

    @property
    def commit_size(self) -> int:
        return len(self._buffer)

    def _commit_to(self, position: int) -> None:
        while position > self.commit_size:
            grow = min(self.commit_size, self.reserve_size - self.commit_size)
            self._buffer.extend(bytes(grow))

    def push(self, size: int, alignment: int = PTR_ALIGNMENT) -> int:
        """Reserve size bytes and return their offset; the new end is aligned."""
        if size < 0:
            raise ValueError("size must not be negative")
        end = align_forward(self.position + size, alignment)
        if end > self.reserve_size:
            raise AllocationError(f"arena exhausted: {end} bytes exceeds reserve of {self.reserve_size}")
        offset = self.position
        self.position = end
        self._commit_to(end)
        return offset

    def push_zero(self, size: int, alignment: int = PTR_ALIGNMENT) -> int:
        """Like push, but the returned bytes are zeroed."""
        offset = self.push(size, alignment)
        self._buffer[offset:offset + size] = bytes(size)
        return offset

    def copy(self, data: bytes, alignment: int = PTR_ALIGNMENT) -> int:
        """Push room for data, copy it in and return its offset."""
        payload = bytes(data)
        offset = self.push(len(payload), alignment)
        self._buffer[offset:offset + len(payload)] = payload
        return offset

    def read(self, offset: int, size: int) -> bytes:
        """Return a copy of committed bytes."""
        if offset < 0 or size < 0 or offset + size > self.commit_size:
            raise IndexError(f"read of {size} bytes at {offset} is outside committed memory")
        return bytes(self._buffer[offset:offset + size])

    def pop(self, size: int) -> None:
        """Move the position back by size bytes, then align it forward."""
        if size > self.position:
            raise AllocationError(f"cannot pop {size} bytes from position {self.position}")
        self.position = align_forward(self.position - size, PTR_ALIGNMENT)

    def set_position(self, position: int, alignment: int = PTR_ALIGNMENT) -> None:
        if position < 0:
            raise ValueError("position must not be negative")
        self.position = align_forward(position, alignment)

    def clear(self) -> None:
        """Return the position to 0 without touching the contents."""
        self.position = 0

    def clear_zero(self) -> None:
        """Zero everything up to the position and return it to 0."""
        end = min(self.position, self.commit_size)
        self._buffer[:end] = bytes(end)
        self.position = 0

    def reset(self) -> None:
        """Drop committed memory back to the initial block, zeroed, at position 0."""
        self._buffer = bytearray(self.initial_commit)
        self.position = 0


@dataclass
class TempStack:
    """A saved arena position that can be restored; usable as a context manager."""

    arena: Arena
    restore_pos: int

    def end(self) -> None:
        self.arena.set_position(self.restore_pos)

    def __enter__(self) -> TempStack:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.end()


def begin_temp_stack(arena: Arena) -> TempStack:
    """Remember the arena's current position."""
    return TempStack(arena, arena.position)


class ArenaPool:
    """A fixed number of arena slots, each held by at most one thread at a time."""

    def __init__(
        self,
        capacity: int = MAX_ARENA_COUNT,
        initial_commit: int = DEFAULT_COMMIT,
        reserve_size: int = DEFAULT_RESERVE,
    ) -> None:
        if capacity <= 0:
            raise ValueError("pool capacity must be positive")
        self._initial_commit = initial_commit
        self._reserve_size = reserve_size
        self._arenas: list[Arena | None] = [None] * capacity
        self._owners: list[int | None] = [None] * capacity
        self._lock = threading.Lock()

    def _acquire(self, conflicts: Iterable[Arena], owner: int | None) -> Arena:
        conflicting = list(conflicts)
        thread = threading.get_ident()
        with self._lock:
            for slot, holder in enumerate(self._owners):
                if holder is not None and holder != owner:
                    continue
                arena = self._arenas[slot]
                if arena is not None and any(arena is c for c in conflicting):
                    continue
                if arena is None:
                    arena = Arena(self._initial_commit, self._reserve_size)
                    self._arenas[slot] = arena
                self._owners[slot] = thread
                return arena
        raise AllocationError("no arena available in the pool")

    def get_arena(self) -> Arena:
        """Take a free arena from the pool."""
        return self._acquire((), None)

    def free_arena(self, arena: Arena) -> None:
        """Reset an arena and return its slot to the pool."""
        with self._lock:
            for slot, held in enumerate(self._arenas):
                if held is arena:
                    arena.reset()
                    self._owners[slot] = None
                    return
        raise ValueError("arena does not belong to this pool")

    def begin_scratch(self, conflicts: Iterable[Arena] = ()) -> TempStack:
        """Borrow an arena free or held by this thread, other than the conflicts."""
        arena = self._acquire(conflicts, threading.get_ident())
        return begin_temp_stack(arena)


@dataclass
class LinearAllocationTracker:
    """Hands out increasing offsets within a fixed capacity."""

    capacity: int
    size: int = 0

    def alloc(self, size: int) -> int:
        """Return the offset of a new block of size units."""
        if self.size + size > self.capacity:
            raise AllocationError(
                f"cannot allocate {size} with {self.capacity - self.size} of {self.capacity} left"
            )
        offset = self.size
        self.size += size
        return offset

    def reset(self) -> None:
        self.size = 0

    def unused(self) -> int:
        return self.capacity - self.size