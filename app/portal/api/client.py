"""Single network boundary to the auth backend

One attempt per call: no retries, no timeout, no cancellation. Failures
are normalized into two exceptions:

- TransportError: no response at all, or a body that is not a JSON object
- ApplicationError: a response with a status outside 2xx
"""
import logging
from typing import Any, Dict, Optional

import requests
from requests.exceptions import RequestException

from portal.config.constants import API_BASE_URL, MUTATING_METHODS
from portal.error.exceptions import ApplicationError, TransportError

from .api_response import ApiResponse

logger = logging.getLogger(__name__)


class ApiClient:
    """JSON client bound to a fixed base origin"""

    def __init__(self, base_url: str = API_BASE_URL):
        self.base_url = base_url.rstrip("/")

    def get_headers(self) -> Dict[str, str]:
        return {
            "Content-Type": "application/json",
            "Accept": "application/json",
        }

    def build_url(self, endpoint: str) -> str:
        if not endpoint.startswith("/"):
            endpoint = f"/{endpoint}"
        return f"{self.base_url}{endpoint}"

    def call(
        self,
        endpoint: str,
        method: str = "GET",
        body: Optional[Dict[str, Any]] = None
    ) -> ApiResponse:
        """Send one request and return the decoded response

        Args:
            endpoint: Path appended to the base origin
            method: HTTP verb; the body is only sent for mutating verbs
            body: JSON-serializable payload

        Raises:
            TransportError: No response, or the body is not a JSON object
            ApplicationError: Non-2xx status
        """
        method = method.upper()
        url = self.build_url(endpoint)
        payload = body if body is not None and method in MUTATING_METHODS else None

        logger.debug(f"Making API request: {method} {url}")

        try:
            response = requests.request(
                method,
                url,
                headers=self.get_headers(),
                json=payload
            )
        except RequestException as e:
            logger.error(f"API call failed: {e}")
            raise TransportError(
                message=f"Unable to connect to {self.base_url}: {e}",
                code="CONNECTION_FAILED",
                service="api_client",
                action=f"{method}_{endpoint}"
            ) from e

        logger.debug(f"API Response Status: {response.status_code}")

        data = self._parse_body(response, method, endpoint)

        if not response.ok:
            message = None
            if isinstance(data, dict):
                message = data.get("message")
            if not message:
                message = f"HTTP error! status: {response.status_code}"
            logger.info(f"Non-2xx response: {response.status_code}, message: {message}")
            raise ApplicationError(
                message=message,
                status_code=response.status_code,
                payload=data if isinstance(data, dict) else None
            )

        if not isinstance(data, dict):
            logger.error("Response data is not a JSON object")
            raise TransportError(
                message="Invalid JSON response",
                code="PARSE_ERROR",
                service="api_client",
                action=f"{method}_{endpoint}"
            )

        return ApiResponse.from_dict(data)

    def _parse_body(self, response: requests.Response, method: str, endpoint: str) -> Any:
        """Decode the body as JSON

        A 2xx body that fails to decode is a transport failure. For error
        statuses the body is best effort and None is returned instead.
        """
        try:
            return response.json()
        except ValueError as e:
            if not response.ok:
                logger.debug(f"Error response body is not JSON: {e}")
                return None
            logger.error(f"Failed to parse response JSON: {e}")
            raise TransportError(
                message="Invalid JSON response",
                code="PARSE_ERROR",
                service="api_client",
                action=f"{method}_{endpoint}"
            ) from e
