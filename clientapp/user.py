from typing import Optional

from .flags import UserFlags
from .utils import Snowflake


class User(Snowflake):

    __slots__ = [
        'username',
        'discriminator',
        'global_name',
        'avatar_hash',
        'flags',
        'public_flags',
        'accent_color',
        'banner',
        'bot',
        'system'
    ]

    def __init__(self, **args):
        super(User, self).__init__(**args)
        self._patch(args)

    def _patch(self, data: dict):
        self.username: str = data.get('username')
        self.discriminator: str = data.get('discriminator')
        self.global_name: Optional[str] = data.get('global_name')
        self.avatar_hash: Optional[str] = data.get('avatar')
        self.flags: UserFlags = UserFlags(data.get('flags') if data.get('flags') is not None else 0)
        self.public_flags: UserFlags = UserFlags(data.get('public_flags') if data.get('public_flags') is not None else 0)
        self.accent_color: Optional[int] = data.get('accent_color')
        self.banner: Optional[str] = data.get('banner')
        self.bot: bool = data.get('bot', False)
        self.system: bool = data.get('system', False)

    def __str__(self):
        if self.discriminator in (None, '0'):
            return self.username
        return f'{self.username}#{self.discriminator}'

    def __repr__(self):
        return f'<User id={self.id} username={self.username!r} bot={self.bot}>'

    def avatar_url(self, format: Optional[str] = None, size: Optional[int] = None) -> Optional[str]:
        if not self.avatar_hash:
            return None
        return self._client.cdn.avatar(self.id, self.avatar_hash, format=format, size=size)
