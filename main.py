import asyncio
import json
import logging

from clientapp.client import BaseClient

logging.basicConfig(level=logging.DEBUG)

with open('config.json', 'r', encoding='utf-8') as f:
    cfg = json.load(f)


async def main():
    async with BaseClient(cdn_url=cfg.get('cdn_url')) as client:
        await client.login(cfg['token'], bot=cfg.get('bot', True))
        app = await client.fetch_application()
        print(f'Application name: {app}')
        print(f'created at {app.created_at}, owned by {app.owner_type.name.lower()} {app.owner}')
        print(app.icon_url(format='png', size=256))
        for asset in await app.fetch_assets():
            print(f'{asset.type} {asset.name} ({asset.id})')


asyncio.run(main())
