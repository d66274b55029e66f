"""IndexNow client notifying search engines about new or updated URLs."""

from logging import getLogger
from urllib.parse import urlsplit

from httpx import AsyncBaseTransport, AsyncClient, HTTPError, Response

from inkwell.configs import file_logger, settings
from inkwell.decorators.with_retry import with_retry
from inkwell.errors.indexnow import IndexNowConfigurationError
from inkwell.schemas.indexnow import IndexNowRequest

logger = file_logger(getLogger(__name__))


class IndexNowClient:
    """
    Ping every configured IndexNow endpoint with a changed URL.

    Targets are bare host names such as ``api.indexnow.org``; the request
    goes to ``https://<target>/indexnow``.
    """

    def __init__(
        self,
        api_key: str | None = None,
        ping_targets: list[str] | None = None,
        timeout: float | None = None,
        transport: AsyncBaseTransport | None = None,
    ) -> None:
        """
        Initialize the client; omitted values come from settings.

        Args:
            api_key: IndexNow key published at ``/indexnowkey.txt``.
            ping_targets: Search engine hosts to notify.
            timeout: Per-request timeout in seconds.
            transport: httpx transport override, used by tests.
        """
        self.api_key = api_key if api_key is not None else settings.INDEXNOW_API_KEY
        self.ping_targets = ping_targets if ping_targets is not None else settings.INDEXNOW_PING_TARGETS
        self.timeout = timeout if timeout is not None else settings.INDEXNOW_TIMEOUT
        self._transport = transport

    @staticmethod
    def build_request(url: str, api_key: str) -> IndexNowRequest:
        host = urlsplit(url).hostname or ""
        return IndexNowRequest(
            host=host,
            key=api_key,
            key_location=f"https://{host}/indexnowkey.txt",
            url_list=[url],
        )

    async def send_request(self, url: str) -> dict[str, int | None]:
        """
        Submit a URL to every ping target.

        Args:
            url: Absolute URL of the changed page.

        Returns:
            Status code per target, None where the request failed outright.
            Empty when no API key is configured.

        Raises:
            IndexNowConfigurationError: If an API key is set but no targets are.
        """
        if not self.api_key:
            logger.warning("IndexNow API key is not configured.")
            return {}

        if not self.ping_targets:
            raise IndexNowConfigurationError

        payload = self.build_request(url, self.api_key).model_dump(by_alias=True)
        results: dict[str, int | None] = {}

        async with AsyncClient(timeout=self.timeout, transport=self._transport) as client:
            for target in self.ping_targets:
                try:
                    response = await self._post(client, target, payload)
                except HTTPError as e:
                    logger.error(f"IndexNow ping to {target} failed: {e}")  # noqa: TRY400
                    results[target] = None
                    continue

                results[target] = response.status_code
                if response.is_success:
                    logger.info(f"IndexNow ping to {target} accepted ({response.status_code}) for {url}")
                else:
                    logger.warning(
                        f"IndexNow ping to {target} rejected with {response.status_code}: {response.text}",
                    )
        return results

    @staticmethod
    @with_retry(max_retries=3, base_delay=0.5, max_delay=4.0)
    async def _post(client: AsyncClient, target: str, payload: dict[str, object]) -> Response:
        return await client.post(
            f"https://{target}/indexnow",
            json=payload,
            headers={"Content-Type": "application/json; charset=utf-8"},
        )
