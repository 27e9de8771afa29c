from paylib.backend import Backend
from paylib.config import get_default_config


class Client:
    """
    Base for the resource clients.

    ``backend`` and ``key`` default to the process-wide configuration (see
    paylib.config.configure); pass either to override it for this client.
    """

    def __init__(self, backend: Backend | None = None, key: str | None = None) -> None:
        if backend is None or key is None:
            defaults = get_default_config()
            backend = backend if backend is not None else defaults.backend
            key = key if key is not None else defaults.api_key
        self.backend: Backend = backend
        self.key: str = key
