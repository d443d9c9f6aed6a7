from typing import Optional, Union

from .errors import InvalidArgument
from .utils import Snowflake, snowflake_id

ALLOWED_IMAGE_FORMATS = ('webp', 'png', 'jpg', 'jpeg', 'gif')
ALLOWED_IMAGE_SIZES = tuple(2 ** i for i in range(4, 13))
DEFAULT_IMAGE_FORMAT = 'webp'


class CDN:
    """Builds links to images hosted on the Discord CDN.

    All methods are pure, nothing is requested from the network.
    """

    BASE_URL = 'https://cdn.discordapp.com'

    def __init__(self, base_url: str = None):
        self.base_url: str = (base_url or self.BASE_URL).rstrip('/')

    def _make_url(self, path: str, format: Optional[str] = None, size: Optional[int] = None) -> str:
        fmt = (format or DEFAULT_IMAGE_FORMAT).lower()
        if fmt not in ALLOWED_IMAGE_FORMATS:
            raise InvalidArgument(f'invalid image format {format!r}, must be one of {", ".join(ALLOWED_IMAGE_FORMATS)}')
        if size is not None and size not in ALLOWED_IMAGE_SIZES:
            raise InvalidArgument(f'invalid image size {size!r}, must be a power of 2 between 16 and 4096')
        url = f'{self.base_url}{path}.{fmt}'
        if size is not None:
            url += f'?size={size}'
        return url

    def app_icon(self,
                 app_id: Union[int, Snowflake],
                 hash: str,
                 format: Optional[str] = None,
                 size: Optional[int] = None) -> str:
        return self._make_url(f'/app-icons/{snowflake_id(app_id)}/{hash}', format=format, size=size)

    def avatar(self,
               user_id: Union[int, Snowflake],
               hash: str,
               format: Optional[str] = None,
               size: Optional[int] = None) -> str:
        return self._make_url(f'/avatars/{snowflake_id(user_id)}/{hash}', format=format, size=size)

    def team_icon(self,
                  team_id: Union[int, Snowflake],
                  hash: str,
                  format: Optional[str] = None,
                  size: Optional[int] = None) -> str:
        return self._make_url(f'/team-icons/{snowflake_id(team_id)}/{hash}', format=format, size=size)
