"""Exceptions raised by pokestats."""


class PokestatsError(Exception):
    """Base class for all pokestats errors."""


class DatasetError(PokestatsError):
    """A species or move record could not be decoded.

    Raised while loading the dataset; the message names the file, the record
    and the offending field.
    """

    def __init__(self, message: str, source: str | None = None, record: str | None = None):
        self.source = source
        self.record = record
        prefix = ""
        if source:
            prefix += f"{source}: "
        if record:
            prefix += f"record {record!r}: "
        super().__init__(prefix + message)


class TeamSheetError(PokestatsError):
    """A single team-sheet block could not be turned into a Pokemon."""


class PartySizeError(PokestatsError, ValueError):
    """A party would end up with fewer than 1 or more than 6 members."""
