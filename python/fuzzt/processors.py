"""String processors applied to the query and every choice before scoring."""

from typing import Protocol, runtime_checkable


@runtime_checkable
class StringProcessor(Protocol):
    """Anything that maps a string to a transformed string."""

    def process(self, text: str) -> str: ...


class NullStringProcessor:
    """Returns its input unchanged."""

    def process(self, text: str) -> str:
        return text

    def __call__(self, text: str) -> str:
        return self.process(text)


class LowerAlphaNumStringProcessor:
    """Keeps letters, digits and whitespace, trims, and lowercases.

    Example:
        >>> LowerAlphaNumStringProcessor().process("  BRA-ZIL! ")
        'brazil'
    """

    def process(self, text: str) -> str:
        kept = "".join(ch for ch in text if ch.isalnum() or ch.isspace())
        return kept.strip().lower()

    def __call__(self, text: str) -> str:
        return self.process(text)


__all__ = ["StringProcessor", "NullStringProcessor", "LowerAlphaNumStringProcessor"]
