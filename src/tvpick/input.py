"""Query text buffer."""


class Input:
    """Single-line text buffer holding the current query."""

    def __init__(self, value: str = ""):
        self._value = value

    def __repr__(self) -> str:
        return f"Input({self._value!r})"

    @property
    def value(self) -> str:
        return self._value

    def insert(self, text: str) -> None:
        """Append printable text; control characters are dropped."""
        self._value += "".join(ch for ch in text if ch.isprintable())

    def backspace(self) -> bool:
        """Remove the last character. Returns True if the buffer changed."""
        if not self._value:
            return False
        self._value = self._value[:-1]
        return True

    def delete_word(self) -> bool:
        """Remove the trailing word, readline ctrl-w style."""
        if not self._value:
            return False
        trimmed = self._value.rstrip()
        cut = trimmed.rfind(" ") + 1
        self._value = trimmed[:cut]
        return True

    def reset(self) -> None:
        self._value = ""
