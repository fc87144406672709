"""
Iridescent Errors
=================

Every error raised by the library derives from ``ColorError`` and from the
builtin exception that best describes it, so ``except ValueError`` keeps
working for callers that do not know about this module.
"""


class ColorError(Exception):
    """Base class for all iridescent errors."""


class InvalidArgumentCount(ColorError, TypeError):
    """A color was built or compared with a number of arguments other than 0, 1 or 3."""

    def __init__(self, count: int) -> None:
        self.count = count
        super().__init__(f"Expected 1 or 3 arguments, got {count}.")


class InvalidComponentCount(ColorError, ValueError):
    """A colorlike value resolved to something other than three bands."""

    def __init__(self, count: int) -> None:
        self.count = count
        super().__init__(
            f"Incorrect amount of values given to Color(): expected 3 and got {count}."
        )


class InvalidComponentValue(ColorError, ValueError):
    """A band could not be read as a number."""

    def __init__(self, value: object) -> None:
        self.value = value
        super().__init__(f"Cannot read {value!r} as a color band")


class UnsupportedColorlike(ColorError, TypeError):
    """A single argument of a type the normalizer does not accept."""

    def __init__(self, value: object) -> None:
        self.value = value
        super().__init__(
            f"Unsupported color input of type {type(value).__name__}: {value!r}"
        )


class UnresolvableColorName(ColorError, LookupError):
    """The name resolver could not map a string to a color."""

    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(f"Unknown color name or notation: {name!r}")


class InvalidStepCount(ColorError, ValueError):
    """A palette was requested with too few samples."""

    def __init__(self, count: int, minimum: int) -> None:
        self.count = count
        self.minimum = minimum
        super().__init__(f"Expected at least {minimum} colors, got {count}.")
