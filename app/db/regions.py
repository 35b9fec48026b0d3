"""Region tags of the persisted layout. Never renumber: existing data depends on them."""

from enum import IntEnum


class RegionTag(IntEnum):
    ID_COUNTER = 0
    VENDORS = 10
    SERVICES = 11
    CONTRACTS = 12
    FEEDBACK = 13
