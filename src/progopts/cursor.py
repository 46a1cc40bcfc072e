# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Forward-only token cursor that can undo its own pops."""

from __future__ import annotations

from collections.abc import Sequence

from .errors import CursorAtOriginalFillLevelError, CursorExhaustedError


class RewindableCursor:
    """Pop tokens from the front of a fixed sequence, with undo.

    The cursor starts at ``offset`` and can only move forward through
    :meth:`pop_front`. :meth:`undo` steps back one token at a time but never
    past the starting offset. The underlying sequence is never sliced, so
    every popped token is reported with its absolute index.
    """

    __slots__ = ("_original_count", "_remaining", "_tokens")

    def __init__(self, tokens: Sequence[str], offset: int = 0) -> None:
        """Create the cursor over ``tokens`` starting at ``offset``.

        Args:
            tokens: Token sequence to read.
            offset: Absolute index of the first token to hand out.

        Raises:
            ValueError: If ``offset`` lies outside ``[0, len(tokens)]``.
        """

        if offset < 0 or offset > len(tokens):
            raise ValueError(f"offset {offset} is outside the token sequence of length {len(tokens)}")
        self._tokens = tuple(tokens)
        self._original_count = len(self._tokens) - offset
        self._remaining = self._original_count

    @property
    def original_count(self) -> int:
        """Return the number of tokens available when the cursor was created."""

        return self._original_count

    @property
    def remaining(self) -> int:
        """Return how many tokens :meth:`pop_front` can still yield."""

        return self._remaining

    @property
    def is_empty(self) -> bool:
        """Return ``True`` when no tokens remain."""

        return self._remaining == 0

    @property
    def position(self) -> int:
        """Return the absolute index of the next token :meth:`pop_front` yields."""

        return len(self._tokens) - self._remaining

    def pop_front(self) -> tuple[str, int]:
        """Return the next token together with its absolute index.

        Raises:
            CursorExhaustedError: If no tokens remain.
        """

        if self._remaining == 0:
            raise CursorExhaustedError("No items remaining in the cursor")
        index = self.position
        self._remaining -= 1
        return self._tokens[index], index

    def undo(self) -> None:
        """Make the most recently popped token available again.

        Raises:
            CursorAtOriginalFillLevelError: If the cursor is back at its
                starting offset.
        """

        if self._remaining == self._original_count:
            raise CursorAtOriginalFillLevelError("Cannot undo - the cursor is at its original fill level.")
        self._remaining += 1

    def __len__(self) -> int:
        return self._remaining

    def __repr__(self) -> str:
        return f"RewindableCursor(position={self.position}, remaining={self._remaining})"


__all__ = ["RewindableCursor"]
