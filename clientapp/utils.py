import datetime
from typing import TYPE_CHECKING, Union, Optional

if TYPE_CHECKING:
    from .client import BaseClient

VERSION = '0.1.0a'
API_VERSION = 9
DISCORD_EPOCH = 1420070400000


def snowflake_timestamp(id: int) -> int:
    """Returns the creation time of the given snowflake in milliseconds since the unix epoch"""
    return (int(id) >> 22) + DISCORD_EPOCH


def snowflake_time(id: int) -> datetime.datetime:
    return datetime.datetime.fromtimestamp(snowflake_timestamp(id) / 1000, tz=datetime.timezone.utc)


class Snowflake:

    __slots__ = [
        'id',
        '_client'
    ]

    def __init__(self, **args):
        self.id: int = int(args.get('id')) if args.get('id') is not None else None
        self._client: 'BaseClient' = args.get('_client')

    def __eq__(self, other):
        if isinstance(other, Snowflake):
            return self.id == other.id
        else:
            return False

    def __ne__(self, other):
        return not self.__eq__(other)

    def __hash__(self):
        return hash((self.__class__.__name__, self.id))

    def _fields(self):
        seen = []
        for cls in reversed(type(self).__mro__):
            for name in getattr(cls, '__slots__', ()):
                if name.startswith('_') or name in seen:
                    continue
                seen.append(name)
        return seen

    def to_dict(self, *computed: str) -> dict:
        """Serializes all public fields, related entities are flattened to their id.

        Names passed in ``computed`` are read as properties and included as well."""
        result = {}
        for name in list(self._fields()) + list(computed):
            result[name] = _flatten(getattr(self, name, None))
        return result


def _flatten(value):
    if isinstance(value, Snowflake):
        return value.id
    if isinstance(value, (list, tuple)):
        return [_flatten(v) for v in value]
    return value


def snowflake_id(s: Optional[Union[int, Snowflake]]) -> Optional[int]:
    if s is None:
        return None
    return s.id if isinstance(s, Snowflake) else int(s)


def snowflake_or_none(id):
    return Snowflake(id=id) if id is not None else None
