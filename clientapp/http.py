import asyncio
import json
import logging
import typing
from typing import Optional, Dict, List

from aiohttp import ClientSession, ClientResponse

from . import utils
from .errors import HTTPException, Forbidden, NotFound, DiscordServerError
from .route import Route

if typing.TYPE_CHECKING:
    from .client import BaseClient


async def get_json_or_str(response: ClientResponse):
    text = await response.text(encoding='utf-8')
    ct = response.headers.get('content-type')
    if ct is not None and ct.startswith('application/json'):
        return json.loads(text)
    return text


class MaybeUnlock:

    def __init__(self, lock):
        self.lock = lock
        self._unlock = True

    def __enter__(self):
        return self

    def defer(self):
        self._unlock = False

    def __exit__(self, exc_type, exc_val, exc_tb):
        if self._unlock:
            self.lock.release()


class HTTPClient:

    request_listener = None

    def __init__(self, client: 'BaseClient'):
        self.client: 'BaseClient' = client
        self.user_agent = 'DiscordBot (https://github.com/Teekeks/DisTee.py clientapp v{version})'.format(version=utils.VERSION)
        self.__session: Optional[ClientSession] = None
        self.token: Optional[str] = None
        self.bot_token: bool = True
        self._locks: Dict[str, asyncio.Lock] = {}
        self._global_lock_over = asyncio.Event()
        self._global_lock_over.set()

    async def close(self):
        if self.__session:
            await self.__session.close()
            self.__session = None

    async def do_login(self, token: str, bot: bool = True):
        if self.__session is not None:
            await self.__session.close()
        self.__session = ClientSession()
        self.token = token
        self.bot_token = bot
        try:
            data = await self.request(Route('GET', '/users/@me'))
        except HTTPException:
            logging.exception('Exception on login')
            return None
        return data

    def _authorization(self) -> str:
        return f'Bot {self.token}' if self.bot_token else self.token

########################################################################################################################
# APPLICATIONS
########################################################################################################################

    async def get_current_application(self) -> dict:
        return await self.request(Route('GET', '/oauth2/applications/@me'))

    async def get_application_assets(self, application_id) -> List[dict]:
        return await self.request(Route('GET',
                                        '/oauth2/applications/{application_id}/assets',
                                        application_id=application_id))

    async def create_application_asset(self, application_id, name: str, type: int, image: str) -> dict:
        return await self.request(Route('POST',
                                        '/oauth2/applications/{application_id}/assets',
                                        application_id=application_id),
                                  json={'name': name, 'type': type, 'image': image})

    async def reset_application_secret(self, application_id) -> dict:
        return await self.request(Route('POST',
                                        '/oauth2/applications/{application_id}/reset',
                                        application_id=application_id))

    async def reset_bot_token(self, application_id) -> dict:
        return await self.request(Route('POST',
                                        '/oauth2/applications/{application_id}/bot/reset',
                                        application_id=application_id))

########################################################################################################################
# REQUEST
########################################################################################################################

    async def request(self,
                      route: Route,
                      **kwargs):
        if self.request_listener is not None:
            asyncio.ensure_future(self.request_listener(route))
        method = route.method
        bucket = route.bucket
        url = route.url

        lock = self._locks.get(bucket)
        if lock is None:
            lock = asyncio.Lock()
            self._locks[bucket] = lock

        headers = {
            'User-Agent': self.user_agent,
            'X-RateLimit-Precision': 'millisecond',
            'Authorization': self._authorization()
        }

        if kwargs.get('reason'):
            headers['X-Audit-Log-Reason'] = kwargs.pop('reason')
        kwargs.pop('reason', None)

        kwargs['headers'] = headers

        if 'json' in kwargs:
            headers['Content-Type'] = 'application/json'
            kwargs['data'] = json.dumps(kwargs.pop('json'))

        # wait for a global api lock to be over
        if not self._global_lock_over.is_set():
            await self._global_lock_over.wait()

        await lock.acquire()
        with MaybeUnlock(lock) as maybe_unlock:
            for tries in range(5):
                try:
                    async with self.__session.request(method=method, url=url, **kwargs) as r:
                        logging.debug(f'{method} {url} has returned {r.status}')
                        data = await get_json_or_str(r)

                        remaining = r.headers.get('X-Ratelimit-Remaining')

                        if remaining == '0' and r.status != 429:
                            delta = float(r.headers.get('X-Ratelimit-Reset-After'))
                            logging.debug(f'A rate limit bucket has been exhausted (bucket: {bucket}, retry: {delta})')
                            maybe_unlock.defer()
                            asyncio.get_running_loop().call_later(delta, lock.release)

                        if 300 > r.status >= 200:
                            return data

                        if r.status == 429:
                            if not r.headers.get('Via'):
                                # not from the api, most likely cloudflare
                                raise HTTPException(r, data)

                            retry_after = float(data['retry_after'])
                            logging.warning(f'We are being rate limited. Retrying in {retry_after:.2f} seconds. Bucket: {bucket}')
                            is_global = data.get('global', False)
                            if is_global:
                                logging.warning(f'Global rate limit has been hit. Retrying in {retry_after:.2f} seconds.')
                                self._global_lock_over.clear()
                            await asyncio.sleep(retry_after)
                            logging.debug('Done waiting for rate limit, retrying now...')
                            if is_global:
                                self._global_lock_over.set()
                                logging.debug('Global rate limit is over!')
                            continue

                        # server error -> retry
                        if r.status in (500, 502):
                            await asyncio.sleep(1 + tries * 2)
                            continue

                        if r.status == 403:
                            raise Forbidden(r, data)

                        if r.status == 404:
                            raise NotFound(r, data)

                        if r.status == 503:
                            raise DiscordServerError(r, data)
                        else:
                            raise HTTPException(r, data)
                except OSError as e:
                    if tries < 4 and e.errno in (54, 10054):
                        continue
                    raise

            if r.status >= 500:
                raise DiscordServerError(r, data)
            raise HTTPException(r, data)
