from typing import Generic, TypeVar

from cardsmith.mock_api.base import MockApi
from cardsmith.services.http_client import LiveApiClient

ApiT = TypeVar("ApiT", bound=MockApi)


class BackendService(Generic[ApiT]):
    """
    Service backed by exactly one of: a mock API, or the live HTTP client.

    Subclasses expose one async method per operation and never branch on
    anything but ``mock``.
    """

    def __init__(self, *, mock: ApiT | None = None, client: LiveApiClient | None = None) -> None:
        if (mock is None) == (client is None):
            raise ValueError("Provide exactly one of mock or client")
        self.mock = mock
        self._client = client

    @property
    def client(self) -> LiveApiClient:
        if self._client is None:
            raise RuntimeError(f"{type(self).__name__} is running against the mock API")
        return self._client
