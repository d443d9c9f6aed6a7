import logging
from typing import Optional, Union, Dict, TYPE_CHECKING

from clientapp.cache import BaseUserCache
from clientapp.user import User
from clientapp.utils import snowflake_id

if TYPE_CHECKING:
    from clientapp.utils import Snowflake


class NoUserCache(BaseUserCache):
    """Strategy: never keep users, every payload becomes a new user object"""

    def __init__(self):
        self._client = None

    def add_or_get(self, data: dict) -> User:
        return User(**data, _client=self._client)

    def get_user(self, user_id: Union[int, 'Snowflake']) -> Optional[User]:
        return None

    def user_removed(self, user_id: Union[int, 'Snowflake']) -> Optional[User]:
        return None

    def clear(self):
        pass


class RamUserCache(BaseUserCache):
    """Strategy: keep every user seen till the client is closed"""

    def __init__(self):
        self._client = None
        self.cache: Dict[int, User] = {}

    def __len__(self):
        return len(self.cache)

    def add_or_get(self, data: dict) -> User:
        uid = snowflake_id(data.get('id'))
        if uid is None:
            return User(**data, _client=self._client)
        existing = self.cache.get(uid)
        if existing is not None:
            # last payload wins
            existing._patch(data)
            return existing
        logging.debug(f'caching user {uid}')
        user = User(**data, _client=self._client)
        self.cache[uid] = user
        return user

    def get_user(self, user_id: Union[int, 'Snowflake']) -> Optional[User]:
        return self.cache.get(snowflake_id(user_id))

    def user_removed(self, user_id: Union[int, 'Snowflake']) -> Optional[User]:
        return self.cache.pop(snowflake_id(user_id), None)

    def clear(self):
        self.cache.clear()
