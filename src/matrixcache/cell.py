"""
Cache Matrix
A matrix value paired with a slot for its inverse.

The slot is cleared on every set(). Change detection is by replacement, not by
comparing elements: setting an equal (or the very same) matrix still empties
the slot. Callers that want to keep a cached inverse must not call set().
"""

from typing import Any, Optional


class CacheMatrix:
    """
    Holds a matrix and, once computed, its inverse.

    Cache states:
      EMPTY      no inverse stored (initial state, and after every set)
      POPULATED  inverse stored by cache_solve for the current value
    """

    def __init__(self, value: Any = None):
        self._value = value
        self._inverse: Optional[Any] = None

    def set(self, value: Any) -> None:
        """Replace the matrix and drop any cached inverse."""
        self._value = value
        self._inverse = None

    def get(self) -> Any:
        return self._value

    def set_inverse(self, inverse: Any) -> None:
        """
        Store the inverse of the current value.

        Not checked against the value; only cache_solve should call this.
        """
        self._inverse = inverse

    def get_inverse(self) -> Optional[Any]:
        return self._inverse

    @property
    def has_inverse(self) -> bool:
        return self._inverse is not None

    def __repr__(self) -> str:
        state = "POPULATED" if self.has_inverse else "EMPTY"
        return f"CacheMatrix(value={self._value!r}, cache={state})"
