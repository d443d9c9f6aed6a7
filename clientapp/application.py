import datetime
import logging
from typing import Optional, List, Union, NamedTuple, TYPE_CHECKING

from .enums import ClientApplicationAssetType, OwnerType
from .errors import UnknownAssetType
from .file import ImageData, resolve_image
from .team import Team
from .user import User
from .utils import Snowflake, snowflake_timestamp, snowflake_time

if TYPE_CHECKING:
    from .client import BaseClient


__all__ = ['Application', 'ClientApplication', 'ApplicationAsset', 'Owner', 'resolve_owner']


class Owner(NamedTuple):
    type: OwnerType
    entity: Optional[Union[User, Team]] = None


NO_OWNER = Owner(OwnerType.NONE)


def resolve_owner(client: 'BaseClient', data: dict) -> Owner:
    """Works out who owns the application described by ``data``.

    A ``team`` payload gives a :class:`Team` owner. If an ``owner`` payload is present it is resolved through
    the user cache of the client and always wins, even when a team was given as well.
    """
    if data.get('owner'):
        return Owner(OwnerType.USER, client.users.add_or_get(data['owner']))
    if data.get('team'):
        return Owner(OwnerType.TEAM, Team(**data['team'], _client=client))
    return NO_OWNER


class ApplicationAsset(NamedTuple):
    id: int
    name: str
    type: Optional[str]


class Application(Snowflake):

    __slots__ = [
        'name',
        'description',
        'icon'
    ]

    def __init__(self, **data):
        super(Application, self).__init__(**data)
        self._patch(data)

    def _patch(self, data: dict):
        # the id is fixed once set
        if self.id is None and data.get('id') is not None:
            self.id = int(data['id'])
        self.name: str = data.get('name')
        self.description: str = data.get('description')
        self.icon: Optional[str] = data.get('icon')

    def __str__(self):
        return self.name

    @property
    def created_timestamp(self) -> Optional[int]:
        """Creation time of the application in milliseconds since the unix epoch"""
        return snowflake_timestamp(self.id) if self.id is not None else None

    @property
    def created_at(self) -> Optional[datetime.datetime]:
        return snowflake_time(self.id) if self.id is not None else None

    def icon_url(self, format: Optional[str] = None, size: Optional[int] = None) -> Optional[str]:
        if not self.icon:
            return None
        return self._client.cdn.app_icon(self.id, self.icon, format=format, size=size)

    def to_dict(self, *computed: str) -> dict:
        return super(Application, self).to_dict('created_timestamp', *computed)


class ClientApplication(Application):
    """The OAuth2 application of a client.

    Instances are snapshots: none of the api calls change the object they are called on, the ones that
    change the application return a new object instead.
    """

    __slots__ = [
        'cover',
        'rpc_origins',
        'bot_require_code_grant',
        'bot_public',
        'rpc_application_state',
        'bot',
        'flags',
        'secret',
        '_owner'
    ]

    def _patch(self, data: dict):
        super(ClientApplication, self)._patch(data)
        self.cover: Optional[str] = data.get('cover_image') or None
        self.rpc_origins: List[str] = data.get('rpc_origins') or []
        # None means not reported, False is kept as is
        self.bot_require_code_grant: Optional[bool] = data['bot_require_code_grant'] \
            if 'bot_require_code_grant' in data else None
        self.bot_public: Optional[bool] = data['bot_public'] if 'bot_public' in data else None
        self._owner: Owner = resolve_owner(self._client, data)
        logging.debug(f'application {self.id} is owned by {self._owner.type.name}')
        self.rpc_application_state = data.get('rpc_application_state')
        self.bot: Optional[dict] = data.get('bot')
        self.flags: Optional[int] = data.get('flags')
        self.secret: Optional[str] = data.get('secret')

    def __repr__(self):
        return f'<ClientApplication id={self.id} name={self.name!r} owner_type={self._owner.type.name}>'

    @property
    def owner(self) -> Optional[Union[User, Team]]:
        """The user or team that owns this application, None if unknown"""
        return self._owner.entity

    @property
    def owner_type(self) -> OwnerType:
        return self._owner.type

    @property
    def team(self) -> Optional[Team]:
        return self._owner.entity if self._owner.type == OwnerType.TEAM else None

    def cover_image(self, format: Optional[str] = None, size: Optional[int] = None) -> Optional[str]:
        if not self.cover:
            return None
        return self._client.cdn.app_icon(self.id, self.cover, format=format, size=size)

    def to_dict(self, *computed: str) -> dict:
        return super(ClientApplication, self).to_dict('owner', *computed)

    def with_payload(self, data: dict) -> 'ClientApplication':
        """Returns a new snapshot built from ``data``, fields missing in ``data`` fall back to their defaults"""
        if data.get('id') is None:
            data = {**data, 'id': self.id}
        return ClientApplication(**data, _client=self._client)

    def _replace(self, **fields) -> 'ClientApplication':
        app = ClientApplication.__new__(ClientApplication)
        for cls in type(self).__mro__:
            for name in getattr(cls, '__slots__', ()):
                value = fields[name] if name in fields else getattr(self, name)
                # lists are copied so the snapshots do not share them
                setattr(app, name, list(value) if isinstance(value, list) else value)
        return app

########################################################################################################################
# ASSETS
########################################################################################################################

    async def fetch_assets(self) -> List[ApplicationAsset]:
        """Fetches the rich presence assets of this application"""
        data = await self._client.http.get_application_assets(self.id)
        assets = []
        for a in data:
            asset_type = ClientApplicationAssetType.from_index(a.get('type') or 0)
            assets.append(ApplicationAsset(id=int(a['id']),
                                           name=a.get('name'),
                                           type=asset_type.name if asset_type is not None else None))
        return assets

    async def create_asset(self, name: str, data: ImageData, type: str) -> dict:
        """Creates a rich presence asset.

        :param name: name of the asset
        :param data: the image, see :func:`~clientapp.file.resolve_image` for what is accepted
        :param type: ``big`` or ``small``, case insensitive
        :raises UnknownAssetType: if ``type`` is not a known asset type, no request is made in that case
        """
        try:
            asset_type = ClientApplicationAssetType.from_name(type)
        except KeyError:
            raise UnknownAssetType(type) from None
        image = await resolve_image(data)
        logging.debug(f'creating {asset_type.name} asset {name} for application {self.id}')
        return await self._client.http.create_application_asset(self.id, name, asset_type.value, image)

########################################################################################################################
# RESETS
########################################################################################################################

    async def reset_secret(self) -> 'ClientApplication':
        """Resets the OAuth2 secret of this application.

        Only works for the owner of the application, the api answers with :class:`~clientapp.errors.Forbidden`
        otherwise."""
        data = await self._client.http.reset_application_secret(self.id)
        return ClientApplication(**data, _client=self._client)

    async def reset_token(self) -> 'ClientApplication':
        """Resets the token of the bot of this application.

        Returns a copy of this application with only ``bot`` replaced by the response."""
        data = await self._client.http.reset_bot_token(self.id)
        return self._replace(bot=data)
