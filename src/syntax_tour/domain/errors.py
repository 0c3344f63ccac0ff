"""Domain-specific exceptions for typed error handling at boundaries."""

from __future__ import annotations


class InvalidArgumentError(TypeError):
    """Value that cannot be rendered as text under the menu coercion policy.

    Raised by :func:`syntax_tour.domain.menu.dinner_menu` when the food is
    neither text nor a plain number. Inherits from TypeError because the
    failure is about the kind of value, not its content.

    Example:
        >>> from syntax_tour.domain.errors import InvalidArgumentError
        >>> err = InvalidArgumentError("food must be text, got list")
        >>> str(err)
        'food must be text, got list'
        >>> isinstance(err, TypeError)
        True
    """


class MissingFieldError(LookupError):
    """Required field path absent from a source record.

    Carries the dotted path of the first field that could not be found so
    the CLI can name it in the error message.

    Attributes:
        path: Dotted field path, e.g. ``address.city``.

    Example:
        >>> err = MissingFieldError("address.city")
        >>> err.path
        'address.city'
        >>> str(err)
        "record has no field 'address.city'"
    """

    def __init__(self, path: str) -> None:
        super().__init__(f"record has no field {path!r}")
        self.path = path


class RecordShapeError(TypeError):
    """Record field present but holding the wrong kind of value.

    Raised by :func:`syntax_tour.domain.player.extract_player_fields` when
    every required name exists yet a container has the wrong type, for
    example an ``address`` given as plain text.

    Attributes:
        path: Dotted field path, or ``""`` for the record itself.
        expected: What the field should have been.
        actual: Type name of what was found.

    Example:
        >>> err = RecordShapeError("address", "a table", "str")
        >>> str(err)
        "field 'address' must be a table, got str"
        >>> str(RecordShapeError("", "a Player or a table", "int"))
        'record must be a Player or a table, got int'
    """

    def __init__(self, path: str, expected: str, actual: str) -> None:
        subject = f"field {path!r}" if path else "record"
        super().__init__(f"{subject} must be {expected}, got {actual}")
        self.path = path
        self.expected = expected
        self.actual = actual


class ConfigurationError(Exception):
    """Missing, invalid, or incomplete configuration.

    Raised when a configuration section is present but malformed. Typically
    caught at CLI boundaries to provide user-friendly error messages.

    Example:
        >>> err = ConfigurationError("[menu] dinner_food must be text")
        >>> str(err)
        '[menu] dinner_food must be text'
    """


__all__ = [
    "ConfigurationError",
    "InvalidArgumentError",
    "MissingFieldError",
    "RecordShapeError",
]
