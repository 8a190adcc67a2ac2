from win_utility.constants import MAX_CHILD_NAME_LENGTH, REGISTRY_SEPARATOR, SUBKEY_BUFFER_SIZE
from win_utility.errors import PathTooLongError


class PathBuffer:
    """A bounded, mutable registry path used as scratch space during a subtree walk.

    The buffer grows and shrinks with the walk: a level appends a separator and a child
    name on the way down and truncates back to its own length on the way up. Its length
    never exceeds ``capacity``; an append that would overflow raises ``PathTooLongError``
    and leaves the buffer unchanged.
    """

    __slots__ = ("_capacity", "_max_child_name_length", "_separator", "_value")

    def __init__(
        self,
        initial: str = "",
        *,
        capacity: int = SUBKEY_BUFFER_SIZE,
        max_child_name_length: int = MAX_CHILD_NAME_LENGTH,
        separator: str = REGISTRY_SEPARATOR,
    ) -> None:
        """Initialize the buffer with ``initial``.

        Args:
            initial: The starting path.
            capacity: The maximum length of the path, in characters.
            max_child_name_length: The maximum length of a single child name.
            separator: The path separator.

        Raises:
            PathTooLongError: If ``initial`` plus a trailing separator would not fit.
        """
        if capacity < 1:
            msg = f"capacity must be positive, got {capacity}"
            raise ValueError(msg)

        self._capacity: int = capacity
        self._max_child_name_length: int = max_child_name_length
        self._separator: str = separator

        # Room for the separator appended when the walk descends into subkeys.
        required = len(initial) if initial.endswith(separator) else len(initial) + len(separator)
        if required > capacity:
            raise PathTooLongError(length=required, capacity=capacity, operation="copy_path")

        self._value: str = initial

    @property
    def capacity(self) -> int:
        return self._capacity

    @property
    def value(self) -> str:
        return self._value

    def __str__(self) -> str:
        return self._value

    def __len__(self) -> int:
        return len(self._value)

    def __repr__(self) -> str:
        return f"PathBuffer({self._value!r}, capacity={self._capacity})"

    def ensure_trailing_separator(self) -> int:
        """Make the path end with exactly one separator and return the resulting length."""
        if not self._value.endswith(self._separator):
            self._append(self._separator)

        return len(self._value)

    def append_child(self, name: str) -> None:
        """Append a child name to the path.

        Raises:
            PathTooLongError: If the name is longer than a child name may be, or the
                resulting path would exceed the capacity.
        """
        if len(name) > self._max_child_name_length:
            raise PathTooLongError(length=len(name), capacity=self._max_child_name_length, operation="enumerate_child")

        self._append(name)

    def truncate(self, length: int) -> None:
        """Cut the path back to its first ``length`` characters."""
        if not 0 <= length <= len(self._value):
            msg = f"cannot truncate a path of length {len(self._value)} to {length}"
            raise ValueError(msg)

        self._value = self._value[:length]

    def _append(self, text: str) -> None:
        new_length = len(self._value) + len(text)
        if new_length > self._capacity:
            raise PathTooLongError(length=new_length, capacity=self._capacity)

        self._value += text
