from enum import IntEnum
from typing import Optional


class ClientApplicationAssetType(IntEnum):
    # member order is the wire order, raw type i is the (i-1)th member
    SMALL = 1
    BIG = 2

    @classmethod
    def from_index(cls, index: int) -> Optional['ClientApplicationAssetType']:
        members = list(cls)
        if not 1 <= index <= len(members):
            return None
        return members[index - 1]

    @classmethod
    def from_name(cls, name: str) -> 'ClientApplicationAssetType':
        """Case insensitive lookup, raises :class:`KeyError` for unknown names"""
        return cls[name.upper()]


class OwnerType(IntEnum):
    NONE = 0
    USER = 1
    TEAM = 2


class TeamMembershipState(IntEnum):
    INVITED = 1
    ACCEPTED = 2
