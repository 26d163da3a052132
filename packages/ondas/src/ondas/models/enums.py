"""Enumerations for ondas domain models."""

from enum import StrEnum


class ProfileId(StrEnum):
    """Built-in station search profiles.

    Each profile is a named preset of genre tags, country preference,
    codecs and quality floor. See ``ondas.profiles.RADIO_PROFILES``.
    """

    AGENCY = "agency"  # Pop / dance / house for the office floor
    FOCUS = "focus"  # Lo-fi and ambient
    CHILL = "chill"  # Lounge and chillout

    @classmethod
    def parse(cls, value: object) -> "ProfileId":
        """Parse a profile identifier, falling back to AGENCY.

        Unknown, blank or non-string values never raise.
        """
        if isinstance(value, str):
            try:
                return cls(value.strip().lower())
            except ValueError:
                pass
        return cls.AGENCY
