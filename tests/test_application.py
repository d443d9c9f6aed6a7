# -*- coding: utf-8 -*-

"""

Tests for clientapp.application

"""

import datetime

import pytest

from clientapp.application import ClientApplication, Owner, resolve_owner
from clientapp.enums import OwnerType
from clientapp.team import Team
from clientapp.user import User


def make(client, **data):
    return ClientApplication(**data, _client=client)


def test_patch_reads_all_fields(client, app_payload):
    app = make(client, **app_payload)

    assert app.id == 661720302316814366
    assert app.name == 'My App'
    assert app.description == 'does things'
    assert app.icon == 'abc123'
    assert app.cover == 'cov456'
    assert app.rpc_origins == ['https://a.example', 'https://b.example']
    assert app.bot_require_code_grant is False
    assert app.bot_public is True
    assert app.rpc_application_state == 0
    assert app.bot == app_payload['bot']
    assert app.flags == 1 << 23
    assert app.secret == 'shh'


def test_defaults_for_missing_keys(client):
    app = make(client, id='42')

    assert app.cover is None
    assert app.rpc_origins == []
    assert app.bot_require_code_grant is None
    assert app.bot_public is None
    assert app.owner is None
    assert app.owner_type == OwnerType.NONE
    assert app.rpc_application_state is None
    assert app.bot is None
    assert app.flags is None
    assert app.secret is None


@pytest.mark.parametrize(
    ('origins',),
    [
        (['https://one.example'],),
        (['c', 'a', 'b'],),
    ],
)
def test_rpc_origins_keep_order(client, origins):
    app = make(client, id='1', rpc_origins=origins)
    assert app.rpc_origins == origins


def test_rpc_origins_null_is_empty(client):
    app = make(client, id='1', rpc_origins=None)
    assert app.rpc_origins == []


@pytest.mark.parametrize('key', ['bot_public', 'bot_require_code_grant'])
def test_explicit_false_is_not_absent(client, key):
    present = make(client, id='1', **{key: False})
    absent = make(client, id='1')

    assert getattr(present, key) is False
    assert getattr(absent, key) is None


def test_team_owner(client):
    app = make(client, id='1', team={'id': '111', 'name': 'Team', 'members': []})

    assert isinstance(app.owner, Team)
    assert app.owner_type == OwnerType.TEAM
    assert app.team is app.owner
    assert app.owner.id == 111
    # teams never go through the user cache
    assert len(client.users) == 0


def test_user_owner_goes_through_cache(client):
    first = make(client, id='1', owner={'id': '5', 'username': 'a'})
    second = make(client, id='2', owner={'id': '5', 'username': 'b'})

    assert isinstance(first.owner, User)
    assert first.owner_type == OwnerType.USER
    assert first.team is None
    assert first.owner is second.owner
    assert client.users.get_user(5).username == 'b'


def test_owner_key_wins_over_team(client):
    # a raw owner always decides, even next to a team payload
    app = make(client, id='1', team={'id': '11'}, owner={'id': '77'})

    assert isinstance(app.owner, User)
    assert not isinstance(app.owner, Team)
    assert app.owner is client.users.get_user(77)


def test_resolve_owner_calls_cache_once(client):
    calls = []
    add_or_get = client.users.add_or_get

    def counting(data):
        calls.append(data['id'])
        return add_or_get(data)

    client.users.add_or_get = counting
    owner = resolve_owner(client, {'team': {'id': '1'}, 'owner': {'id': '21'}})

    assert calls == ['21']
    assert owner.type == OwnerType.USER


def test_resolve_owner_none(client):
    assert resolve_owner(client, {}) == Owner(OwnerType.NONE, None)


@pytest.mark.parametrize(
    'data',
    [
        {},
        {'team': {'id': '1'}},
        {'owner': {'id': '2'}},
        {'team': {'id': '1'}, 'owner': {'id': '2'}},
    ],
)
def test_exactly_one_owner_kind(client, data):
    app = make(client, id='9', **data)
    kinds = [isinstance(app.owner, Team), isinstance(app.owner, User), app.owner is None]
    assert kinds.count(True) == 1


def test_created_timestamp_depends_only_on_id(client, app_payload):
    a = make(client, **app_payload)
    b = make(client, id=app_payload['id'], name='other', icon=None)

    assert a.created_timestamp == b.created_timestamp
    assert a.created_timestamp == (661720302316814366 >> 22) + 1420070400000
    assert a.created_at.timetuple()[:6] == (2020, 1, 1, 0, 0, 14)
    assert a.created_at.tzinfo == datetime.timezone.utc


def test_icon_url(client):
    assert make(client, id='42').icon_url() is None

    url = make(client, id='42', icon='abc123').icon_url()
    assert '42' in url
    assert 'abc123' in url
    assert url == 'https://cdn.discordapp.com/app-icons/42/abc123.webp'


def test_icon_url_options(client):
    app = make(client, id='42', icon='abc123')
    assert app.icon_url(format='png', size=128) == 'https://cdn.discordapp.com/app-icons/42/abc123.png?size=128'


def test_cover_image(client):
    assert make(client, id='42', icon='abc123').cover_image() is None

    app = make(client, id='42', cover_image='cov456')
    assert app.cover_image(size=1024) == 'https://cdn.discordapp.com/app-icons/42/cov456.webp?size=1024'


def test_str_is_name(client, app_payload):
    assert str(make(client, **app_payload)) == 'My App'
    assert f'Application name: {make(client, **app_payload)}' == 'Application name: My App'


def test_to_dict(client, app_payload):
    app = make(client, **app_payload)
    data = app.to_dict()

    assert data['id'] == 661720302316814366
    assert data['name'] == 'My App'
    assert data['rpc_origins'] == app_payload['rpc_origins']
    assert data['owner'] == 80351110224678912
    assert data['created_timestamp'] == app.created_timestamp
    assert '_owner' not in data
    assert '_client' not in data


def test_with_payload_replaces_fields(client, app_payload):
    app = make(client, **app_payload)
    newer = app.with_payload({'name': 'Renamed'})

    assert newer is not app
    assert newer.id == app.id
    assert newer.name == 'Renamed'
    assert newer.cover is None
    assert newer.rpc_origins == []
    assert newer.bot_public is None
    assert newer.owner is None
    # the old snapshot is untouched
    assert app.name == 'My App'
    assert app.cover == 'cov456'


def test_id_is_kept_on_repatch(client):
    app = make(client, id='1')
    app._patch({'id': '2', 'name': 'x'})
    assert app.id == 1
