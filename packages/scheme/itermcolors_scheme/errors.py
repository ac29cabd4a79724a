"""Typed failures raised while loading and extracting a color scheme."""

from __future__ import annotations


class SchemeError(Exception):
    """Base class for every failure the scheme package raises."""

    def _fields(self) -> tuple:
        return ()

    def __eq__(self, other: object) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return self._fields() == other._fields()  # type: ignore[attr-defined]

    def __hash__(self) -> int:
        return hash((type(self).__name__, self._fields()))

    def __repr__(self) -> str:
        args = ", ".join(repr(f) for f in self._fields())
        return f"{type(self).__name__}({args})"


class DocumentParseError(SchemeError):
    def __init__(self, cause: BaseException) -> None:
        self.cause = cause
        super().__init__(f"PList parsing error: {cause}")

    def _fields(self) -> tuple:
        return (str(self.cause),)


class MissingKey(SchemeError):
    def __init__(self, key: str) -> None:
        self.key = key
        super().__init__(f"Dictionary did not contain key: {key}")

    def _fields(self) -> tuple:
        return (self.key,)


class InvalidType(SchemeError):
    def __init__(self, expected: str, actual: str) -> None:
        self.expected = expected
        self.actual = actual
        super().__init__(f"Expected value of type {expected}, but found value of type {actual}")

    def _fields(self) -> tuple:
        return (self.expected, self.actual)


class InvalidColorSpace(SchemeError):
    def __init__(self, expected: str, actual: str) -> None:
        self.expected = expected
        self.actual = actual
        super().__init__(f"Expected color space {expected}, but found {actual}")

    def _fields(self) -> tuple:
        return (self.expected, self.actual)


class UnknownColorSpace(SchemeError):
    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(f"Unknown color space {name}")

    def _fields(self) -> tuple:
        return (self.name,)


class InvalidChannel(SchemeError):
    """A channel value that has no byte representation (NaN or infinite)."""

    def __init__(self, value: float) -> None:
        self.value = value
        super().__init__(f"Color channel value is not finite: {value}")

    def _fields(self) -> tuple:
        # NaN != NaN, so compare on the textual form.
        return (repr(self.value),)
