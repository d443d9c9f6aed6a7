from .utils import VERSION as __version__
from .application import Application, ClientApplication, ApplicationAsset, Owner
from .client import BaseClient
from .enums import ClientApplicationAssetType, OwnerType
from .errors import HTTPException, Forbidden, NotFound, DiscordServerError, ClientException, InvalidArgument, \
    UnknownAssetType
from .team import Team, TeamMember
from .user import User
