from __future__ import annotations

from typing import TYPE_CHECKING, TypeAlias

if TYPE_CHECKING:
    from collections.abc import Callable, Collection, Iterable, Iterator, Sequence

BackingAllocator: TypeAlias = "Callable[[int], list[str]]"


def allocate_backing_list(size: int) -> list[str]:
    """Allocate backing list of references with exact size, filled by placeholders."""
    return [""] * size


class ArgumentVector:
    """Ordered list of command line arguments that is being scanned.

    Entries are never modified in place, splice operations construct whole new backing list
    and swap it at once, so strings that were handed out earlier are still the same objects.
    Any failure while allocating new backing list leaves vector untouched.
    """

    # References to argument strings, first one is an program name
    _backing: list[str]

    # Allocates new backing list for splices (injectable to simulate allocation failure)
    _allocator: BackingAllocator

    def __init__(
        self,
        argv: Sequence[str],
        *,
        allocator: BackingAllocator = allocate_backing_list,
    ) -> None:
        self._backing = list(argv)
        self._allocator = allocator

    @property
    def program_name(self) -> str | None:
        """First argument of an vector (e.g `argv[0]`) if it is present."""
        return self._backing[0] if self._backing else None

    def as_list(self) -> list[str]:
        """Copy of current vector contents."""
        return list(self._backing)

    def append_range(self, strings: Iterable[str]) -> bool:
        """Append new entries at the end of an vector.

        :returns success: False if allocation failed, vector is untouched
        """
        strings = tuple(strings)
        return self._swap_backing(len(self._backing), len(self._backing), strings)

    def splice_replace(self, index: int, strings: Sequence[str]) -> bool:
        """Replace single entry at given index with new entries.

        Entries before index are preserved, entries after are shifted right by `len(strings) - 1`.
        Empty strings sequence effectively removes entry.

        :returns success: False if allocation failed, vector is untouched
        """
        assert 0 <= index < len(self._backing), f"Splice index {index} out of vector bounds"
        return self._swap_backing(index, index + 1, strings)

    def splice_insert(self, index: int, strings: Sequence[str]) -> bool:
        """Insert new entries before given index (or at the end if index is vector length).

        :returns success: False if allocation failed, vector is untouched
        """
        assert 0 <= index <= len(self._backing), f"Splice index {index} out of vector bounds"
        return self._swap_backing(index, index, strings)

    def remove_indices(self, indices: Collection[int]) -> bool:
        """Drop all entries with given indices at once.

        :returns success: False if allocation failed, vector is untouched
        """
        if not indices:
            return True

        kept = [arg for i, arg in enumerate(self._backing) if i not in indices]
        try:
            backing = self._allocator(len(kept))
        except MemoryError:
            return False

        backing[:] = kept
        self._backing = backing
        return True

    def _swap_backing(self, start: int, stop: int, strings: Sequence[str]) -> bool:
        """Construct new backing list with `[start, stop)` range replaced and swap it."""
        old = self._backing
        size = len(old) - (stop - start) + len(strings)
        try:
            backing = self._allocator(size)
        except MemoryError:
            return False
        assert len(backing) == size, "Backing allocator must return list of requested size"

        backing[:start] = old[:start]
        backing[start : start + len(strings)] = strings
        backing[start + len(strings) :] = old[stop:]

        self._backing = backing
        return True

    def __getitem__(self, index: int) -> str:
        return self._backing[index]

    def __len__(self) -> int:
        """Get amount of an arguments including program name."""
        return len(self._backing)

    def __iter__(self) -> Iterator[str]:
        return iter(self._backing)

    def __repr__(self) -> str:
        return f"ArgumentVector({self._backing!r})"
