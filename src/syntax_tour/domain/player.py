"""Nested field extraction demonstration.

A ``Player`` record carries a nested ``Address``. :func:`extract_player_fields`
binds ``user_name``, ``club`` and ``city`` in a single ``match`` statement,
accepting either the dataclass or a mapping of the same shape as loaded from
configuration. Absent paths fail with :class:`MissingFieldError`, containers
of the wrong type with :class:`RecordShapeError`; no placeholder is ever
substituted.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from typing import NamedTuple

from .errors import MissingFieldError, RecordShapeError

#: Top-level names every record must carry; ``address`` also needs ``city``.
TOP_LEVEL_FIELDS: tuple[str, ...] = ("user_name", "club", "address")


@dataclass(frozen=True, slots=True)
class Address:
    """Where a player lives."""

    city: str


@dataclass(frozen=True, slots=True)
class Player:
    """Player record with a nested address."""

    user_name: str
    club: str
    address: Address


class PlayerFields(NamedTuple):
    """Names bound by :func:`extract_player_fields`."""

    user_name: str
    club: str
    city: str


DEFAULT_PLAYER = Player(
    user_name="Lebron James",
    club="LA Lakers",
    address=Address(city="Los Angeles"),
)


def _diagnose(record: object) -> MissingFieldError | RecordShapeError:
    """Explain why ``record`` matched neither accepted shape."""
    match record:
        case Player(address=address):
            # a Player always has every name, so only the nested type can be off
            return RecordShapeError("address", "an Address", type(address).__name__)
        case Mapping():
            for name in TOP_LEVEL_FIELDS:
                if name not in record:
                    return MissingFieldError(name)
            address = record["address"]
            if not isinstance(address, Mapping):
                return RecordShapeError("address", "a table", type(address).__name__)
            return MissingFieldError("address.city")
        case _:
            return RecordShapeError("", "a Player or a table", type(record).__name__)


def extract_player_fields(record: Player | Mapping[str, object]) -> PlayerFields:
    """Bind ``user_name``, ``club`` and ``city`` from a player record.

    The record is only read, never modified.

    Args:
        record: A :class:`Player` or a mapping shaped like
            ``{"user_name": ..., "club": ..., "address": {"city": ...}}``.

    Returns:
        The three extracted values.

    Raises:
        MissingFieldError: When any of the required paths is absent.
        RecordShapeError: When the record or its address has the wrong type.

    Example:
        >>> extract_player_fields(DEFAULT_PLAYER)
        PlayerFields(user_name='Lebron James', club='LA Lakers', city='Los Angeles')
        >>> extract_player_fields({"user_name": "A", "club": "B", "address": {"city": "C"}}).city
        'C'
        >>> extract_player_fields({"user_name": "A", "club": "B", "address": {}})
        Traceback (most recent call last):
        ...
        syntax_tour.domain.errors.MissingFieldError: record has no field 'address.city'
    """
    match record:
        case Player(user_name=user_name, club=club, address=Address(city=city)):
            return PlayerFields(user_name, club, city)
        case {"user_name": user_name, "club": club, "address": {"city": city}}:
            return PlayerFields(user_name, club, city)
        case _:
            raise _diagnose(record)


def describe_residence(fields: PlayerFields) -> str:
    """Return ``"{user_name} lives in {city}"``.

    Example:
        >>> describe_residence(extract_player_fields(DEFAULT_PLAYER))
        'Lebron James lives in Los Angeles'
    """
    return f"{fields.user_name} lives in {fields.city}"


def describe_club(fields: PlayerFields) -> str:
    """Return ``"{user_name} plays for {club}"``.

    Example:
        >>> describe_club(extract_player_fields(DEFAULT_PLAYER))
        'Lebron James plays for LA Lakers'
    """
    return f"{fields.user_name} plays for {fields.club}"


__all__ = [
    "DEFAULT_PLAYER",
    "TOP_LEVEL_FIELDS",
    "Address",
    "Player",
    "PlayerFields",
    "describe_club",
    "describe_residence",
    "extract_player_fields",
]
