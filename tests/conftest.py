import pytest

from clientapp.client import BaseClient


class FakeHTTP:
    """Stands in for :class:`clientapp.http.HTTPClient`, answers with canned payloads and records every call"""

    def __init__(self):
        self.calls = []
        self.responses = {}
        self.errors = {}

    async def _answer(self, name, *args):
        self.calls.append((name, args))
        if name in self.errors:
            raise self.errors[name]
        return self.responses.get(name)

    async def get_current_application(self):
        return await self._answer('get_current_application')

    async def get_application_assets(self, application_id):
        return await self._answer('get_application_assets', application_id)

    async def create_application_asset(self, application_id, name, type, image):
        return await self._answer('create_application_asset', application_id, name, type, image)

    async def reset_application_secret(self, application_id):
        return await self._answer('reset_application_secret', application_id)

    async def reset_bot_token(self, application_id):
        return await self._answer('reset_bot_token', application_id)

    async def close(self):
        pass


@pytest.fixture
def client():
    c = BaseClient()
    c.http = FakeHTTP()
    return c


@pytest.fixture
def http(client):
    return client.http


@pytest.fixture
def app_payload():
    return {
        'id': '661720302316814366',
        'name': 'My App',
        'description': 'does things',
        'icon': 'abc123',
        'cover_image': 'cov456',
        'rpc_origins': ['https://a.example', 'https://b.example'],
        'bot_require_code_grant': False,
        'bot_public': True,
        'owner': {'id': '80351110224678912', 'username': 'Nelly', 'discriminator': '0'},
        'rpc_application_state': 0,
        'bot': {'id': '661720302316814366', 'username': 'My App', 'bot': True},
        'flags': 1 << 23,
        'secret': 'shh',
    }
