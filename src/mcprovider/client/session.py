"""boto3 client construction and account endpoint resolution."""

import threading
from typing import Any, Optional

import boto3
from botocore.config import Config as BotoConfig

from .errors import classify_error
from ..config.models import ProviderConfig
from ..utils.errors import AuthError
from ..utils.logging import get_logger

logger = get_logger("client.session")

SERVICE_NAME = "mediaconvert"


class ClientFactory:
    """
    Callable returning a fresh ``mediaconvert`` client per operation.

    The account-specific endpoint, when requested, is resolved once with
    DescribeEndpoints and reused for later clients.
    """

    def __init__(self, config: Optional[ProviderConfig] = None):
        self.config = config or ProviderConfig()
        self._endpoint_url = self.config.endpoint_url
        self._lock = threading.Lock()

    def _session(self) -> boto3.session.Session:
        return boto3.session.Session(profile_name=self.config.profile, region_name=self.config.region)

    def _botocore_config(self) -> BotoConfig:
        # Retries are driven by call_with_retry only.
        return BotoConfig(
            connect_timeout=self.config.connect_timeout,
            read_timeout=self.config.read_timeout,
            retries={"max_attempts": 1, "mode": "standard"},
        )

    def _make_client(self, endpoint_url: Optional[str]) -> Any:
        kwargs = {"config": self._botocore_config()}
        if endpoint_url:
            kwargs["endpoint_url"] = endpoint_url
        return self._session().client(SERVICE_NAME, **kwargs)

    def endpoint_url(self) -> Optional[str]:
        """
        Endpoint used for new clients.

        Raises:
            AuthError: If the account endpoint cannot be resolved
        """
        if self._endpoint_url or not self.config.resolve_account_endpoint:
            return self._endpoint_url
        with self._lock:
            if self._endpoint_url is None:
                try:
                    response = self._make_client(None).describe_endpoints(Mode="DEFAULT")
                    self._endpoint_url = response["Endpoints"][0]["Url"]
                except (KeyError, IndexError) as e:
                    raise AuthError(f"DescribeEndpoints returned no endpoint: {e}", operation="DescribeEndpoints") from e
                except Exception as e:
                    error = classify_error(e, operation="DescribeEndpoints")
                    raise AuthError(f"could not resolve account endpoint: {error.message}",
                                    operation="DescribeEndpoints", code=error.code,
                                    status_code=error.status_code) from e
                logger.info(f"Resolved MediaConvert endpoint {self._endpoint_url}")
        return self._endpoint_url

    def __call__(self) -> Any:
        return self._make_client(self.endpoint_url())
