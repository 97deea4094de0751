"""
Sequential finding identifiers for one audit run.
"""

ID_WIDTH = 5


class IdGenerator:
    """Монотонный счётчик id находок: 00001, 00002, ..."""

    def __init__(self, start: int = 1):
        if isinstance(start, bool) or not isinstance(start, int):
            raise TypeError(f"start must be int, got {type(start).__name__}")
        if start < 0:
            raise ValueError(f"start must be non-negative, got {start}")
        self._next = start

    @property
    def peek(self) -> str:
        """Следующий id без продвижения счётчика."""
        return format_id(self._next)

    def next_id(self) -> str:
        value = format_id(self._next)
        self._next += 1
        return value


def format_id(n: int) -> str:
    # Больше 99999 просто становится шире, без переполнения
    return str(n).zfill(ID_WIDTH)
