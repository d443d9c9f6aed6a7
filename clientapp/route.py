from .utils import API_VERSION, Snowflake


class Route:
    BASE_URL = f'https://discord.com/api/v{API_VERSION}'

    def __init__(self, method: str, path: str, **parameters):
        self.path = path
        self.method = method
        self.url = self.BASE_URL + self.path

        if parameters:
            for k, v in parameters.items():
                self.url = self.url.replace('{'+k+'}', str(v.id) if isinstance(v, Snowflake) else str(v))

        self.application_id = parameters.get('application_id')
        if isinstance(self.application_id, Snowflake):
            self.application_id = self.application_id.id

    @property
    def bucket(self):
        return f'{self.application_id}:{self.path}'
