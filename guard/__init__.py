"""Brand isolation, trademark blocklist and the Data Guardian content checks."""

from .isolation import (
    PROTECTED_SLOGANS,
    PROTECTED_ARTISTS,
    check_isolation,
    check_trademark_and_artist_blocklist,
)
from .data_guardian import DataGuardian

__all__ = [
    "PROTECTED_SLOGANS",
    "PROTECTED_ARTISTS",
    "check_isolation",
    "check_trademark_and_artist_blocklist",
    "DataGuardian",
]
