import logging
from typing import Union, Optional

from .application import ClientApplication
from .cache import BaseUserCache
from .cache.user_cache import RamUserCache
from .cdn import CDN
from .errors import ClientException
from .http import HTTPClient
from .route import Route
from .user import User
from .utils import Snowflake


class BaseClient:

    user: User = None

    def __init__(self, *, cdn_url: str = None, user_cache: BaseUserCache = None):
        self.http: HTTPClient = HTTPClient(self)
        self.cdn: CDN = CDN(cdn_url)
        self._users: BaseUserCache = user_cache if user_cache is not None else RamUserCache()
        self._users.bind(self)
        self.application: Optional[ClientApplication] = None
        self._closed = False

    @property
    def users(self) -> BaseUserCache:
        return self._users

    def is_closed(self) -> bool:
        """Returns whether or not this client is closing down"""
        return self._closed

    async def login(self, token: str, bot: bool = True):
        data = await self.http.do_login(token, bot=bot)
        if data is None:
            raise ClientException('Failed to log in')
        self.user = self._users.add_or_get(data)
        logging.debug(f'Logged in as user {self.user}')

    async def close(self):
        if self._closed:
            return
        self._closed = True
        await self.http.close()
        self._users.clear()

    async def __aenter__(self):
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        await self.close()

    async def fetch_application(self) -> ClientApplication:
        data = await self.http.get_current_application()
        self.application = ClientApplication(**data, _client=self)
        return self.application

    async def fetch_user(self, uid: Union[Snowflake, int]) -> User:
        data = await self.http.request(Route('GET', '/users/{user_id}', user_id=uid))
        return self._users.add_or_get(data)

    def get_user(self, s: Union[Snowflake, int]) -> Optional[User]:
        return self._users.get_user(s)
