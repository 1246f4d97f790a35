"""Encoding policies that map flag values onto environment variable text."""

from __future__ import annotations

from enum import StrEnum

import msgspec

ENABLED_TEXT = "1"


class FlagEncoding(StrEnum):
    """How a flag's logical value is stored in its environment variable.

    ``PLAIN_BOOLEAN``
        ``"1"`` when enabled, unset when disabled. Reads true only for ``"1"``.
    ``INVERTED_BOOLEAN``
        Unset when enabled, ``"1"`` when disabled. Reads true for anything
        other than ``"1"``, including an unset variable.
    ``PRESENCE_BOOLEAN``
        A fixed value when enabled, unset when disabled. Reads true whenever
        the variable is present, whatever its content.
    ``RAW_STRING``
        The value is stored verbatim; ``None`` removes the variable.
    """

    PLAIN_BOOLEAN = "plain_boolean"
    INVERTED_BOOLEAN = "inverted_boolean"
    PRESENCE_BOOLEAN = "presence_boolean"
    RAW_STRING = "raw_string"


type FlagValue = bool | str | None


class FlagDefinition(msgspec.Struct, frozen=True, kw_only=True):
    """Static binding between a named flag and one environment variable."""

    name: str
    key: str
    encoding: FlagEncoding
    enabled_value: str | None = None

    def __post_init__(self) -> None:
        """Validate the enabled value against the encoding.

        Raises
        ------
        ValueError
            Raised when a presence flag has no enabled value, or when any
            other encoding is given one.
        """
        if self.encoding is FlagEncoding.PRESENCE_BOOLEAN:
            if self.enabled_value is None:
                msg = f"Presence flag {self.name!r} requires an enabled_value."
                raise ValueError(msg)
        elif self.enabled_value is not None:
            msg = f"Only presence flags accept an enabled_value; {self.name!r} is {self.encoding}."
            raise ValueError(msg)

    @property
    def is_boolean(self) -> bool:
        """Return whether this flag decodes to a boolean."""
        return self.encoding is not FlagEncoding.RAW_STRING

    def decode(self, raw: str | None) -> FlagValue:
        """Decode the raw variable value into the flag's logical value.

        Parameters
        ----------
        raw
            Current variable value, or ``None`` when unset.

        Returns
        -------
        bool | str | None
            Boolean for boolean encodings, the raw text for string flags.
        """
        match self.encoding:
            case FlagEncoding.PLAIN_BOOLEAN:
                return raw == ENABLED_TEXT
            case FlagEncoding.INVERTED_BOOLEAN:
                return raw != ENABLED_TEXT
            case FlagEncoding.PRESENCE_BOOLEAN:
                return raw is not None
            case FlagEncoding.RAW_STRING:
                return raw

    def encode(self, value: FlagValue) -> str | None:
        """Encode a logical value into the text to write, or ``None`` to clear.

        Boolean encodings use the truthiness of ``value``; string flags store
        it unchanged.

        Returns
        -------
        str | None
            Text to bind, or ``None`` to remove the variable.
        """
        match self.encoding:
            case FlagEncoding.PLAIN_BOOLEAN:
                return ENABLED_TEXT if value else None
            case FlagEncoding.INVERTED_BOOLEAN:
                return None if value else ENABLED_TEXT
            case FlagEncoding.PRESENCE_BOOLEAN:
                return self.enabled_value if value else None
            case FlagEncoding.RAW_STRING:
                return None if value is None else str(value)


__all__ = ["ENABLED_TEXT", "FlagDefinition", "FlagEncoding", "FlagValue"]
