import asyncio
import io
import logging
import os
from base64 import b64encode
from typing import Union

import aiohttp

from .errors import InvalidArgument

ImageData = Union[bytes, bytearray, memoryview, str, os.PathLike, io.BufferedIOBase]


def get_mime_type_for_image(data: bytes) -> str:
    if data.startswith(b'\x89\x50\x4E\x47\x0D\x0A\x1A\x0A'):
        return 'image/png'
    elif data[0:3] == b'\xff\xd8\xff' or data[6:10] in (b'JFIF', b'Exif'):
        return 'image/jpeg'
    elif data.startswith((b'\x47\x49\x46\x38\x37\x61', b'\x47\x49\x46\x38\x39\x61')):
        return 'image/gif'
    elif data.startswith(b'RIFF') and data[8:12] == b'WEBP':
        return 'image/webp'
    # unknown content, the api decides if it accepts it
    return 'image/png'


def bytes_to_base64_data(data: bytes) -> str:
    mime = get_mime_type_for_image(data)
    b64 = b64encode(data).decode('ascii')
    return f'data:{mime};base64,{b64}'


def _read_path(path) -> bytes:
    with open(path, 'rb') as f:
        return f.read()


async def _download(url: str) -> bytes:
    async with aiohttp.ClientSession() as session:
        async with session.get(url) as r:
            r.raise_for_status()
            return await r.read()


async def resolve_file(data: ImageData) -> bytes:
    """Turns the given image data into raw bytes.

    Accepts raw bytes, a binary file object, a path on disk or a http(s) url."""
    if isinstance(data, (bytes, bytearray, memoryview)):
        return bytes(data)
    if isinstance(data, io.IOBase):
        content = data.read()
        if not isinstance(content, (bytes, bytearray)):
            raise InvalidArgument('file objects must be opened in binary mode')
        return bytes(content)
    if isinstance(data, str) and data.startswith(('http://', 'https://')):
        logging.debug(f'downloading image data from {data}')
        return await _download(data)
    if isinstance(data, (str, os.PathLike)):
        return await asyncio.get_running_loop().run_in_executor(None, _read_path, data)
    raise InvalidArgument(f'can not resolve image data of type {type(data).__name__}')


async def resolve_image(data: ImageData) -> str:
    """Resolves image data to a base64 ``data:`` URI as accepted by the api.

    Strings that already are a ``data:`` URI are returned unchanged."""
    if isinstance(data, str) and data.startswith('data:'):
        return data
    return bytes_to_base64_data(await resolve_file(data))
