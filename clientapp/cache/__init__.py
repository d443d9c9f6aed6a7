from abc import ABC, abstractmethod
from typing import Optional, Union, TYPE_CHECKING


if TYPE_CHECKING:
    from clientapp.user import User
    from clientapp.utils import Snowflake


class BaseUserCache(ABC):

    @abstractmethod
    def add_or_get(self, data: dict) -> 'User':
        """Returns the cached user for the given payload, updated with it, or creates and caches a new one"""
        pass

    @abstractmethod
    def get_user(self, user_id: Union[int, 'Snowflake']) -> Optional['User']:
        """Call this to get a user from the cache"""
        pass

    @abstractmethod
    def user_removed(self, user_id: Union[int, 'Snowflake']) -> Optional['User']:
        """Drops a user from the cache, returns it if it was cached"""
        pass

    @abstractmethod
    def clear(self):
        pass

    def bind(self, client):
        """Called by the client that owns this cache"""
        self._client = client
