# Copyright Amazon.com, Inc. or its affiliates. All Rights Reserved.
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.

"""Connection management for the iku control-plane API."""

import httpx
from ..common.config import Settings
from ..constants import API_PREFIX, CLI_VERSION, ERROR_DECODE
from ..exceptions import (
    ApiError,
    BadRequestError,
    DecodeError,
    IkuError,
    NotFoundError,
    NotMemberError,
    TransportError,
    UnexpectedStatusError,
)
from loguru import logger
from pydantic import BaseModel, ValidationError, model_validator
from typing import Any, Container, Dict, Optional, Type, TypeVar
from urllib.parse import quote


M = TypeVar('M', bound=BaseModel)

ERROR_CLASSES: Dict[int, Type[ApiError]] = {
    400: BadRequestError,
    404: NotFoundError,
}


class CaseInsensitiveModel(BaseModel):
    """Model whose fields match JSON keys regardless of case, so `Uuid` fills `uuid`."""

    @model_validator(mode='before')
    @classmethod
    def fold_keys(cls, data: Any) -> Any:
        """Rename keys that match a field name case-insensitively."""
        if not isinstance(data, dict):
            return data
        names = {name.lower(): name for name in cls.model_fields}
        return {
            names.get(key.lower(), key) if isinstance(key, str) else key: value
            for key, value in data.items()
        }


class ErrorBody(CaseInsensitiveModel):
    """Structured error returned by the API."""

    error: str = ''


def quote_segment(value: str) -> str:
    """Escape a value used as a single URL path segment."""
    return quote(value, safe='')


class ApiClient:
    """Authenticated HTTP client for the iku API.

    Every request carries the bearer token. Resource paths can be scoped to an
    organization with `prefix()`. Responses are classified by `check_response`
    and decoded into pydantic models by `decode`.
    """

    def __init__(
        self,
        base_url: str,
        token: str,
        organization: Optional[str] = None,
        transport: Optional[httpx.BaseTransport] = None,
    ):
        """Initialize the client.

        Args:
            base_url: Base URL of the API
            token: Bearer token
            organization: Optional organization scoping resource paths
            transport: Optional httpx transport, used to stub the network
        """
        self._base_url = base_url.rstrip('/')
        self._organization = organization
        self._client = httpx.Client(
            base_url=self._base_url,
            headers={
                'Authorization': f'Bearer {token}',
                'User-Agent': f'iku-cli/{CLI_VERSION}',
            },
            transport=transport,
            # wait holds the request open until the instance is ready
            timeout=None,
        )

    @classmethod
    def from_settings(
        cls, settings: Settings, transport: Optional[httpx.BaseTransport] = None
    ) -> 'ApiClient':
        """Create a client from the CLI settings.

        Raises:
            MissingTokenError: If no token is configured
        """
        return cls(
            base_url=settings.api_hostname,
            token=settings.require_token(),
            organization=settings.organization,
            transport=transport,
        )

    @property
    def organization(self) -> Optional[str]:
        """Get the organization scoping the resource paths."""
        return self._organization

    @property
    def base_url(self) -> str:
        """Get the base URL of the API."""
        return self._base_url

    def prefix(self) -> str:
        """Get the path prefix for organization-scoped resources."""
        if self._organization:
            return f'{API_PREFIX}/organizations/{quote_segment(self._organization)}'
        return API_PREFIX

    def request(
        self, method: str, path: str, operation: str, json: Optional[Any] = None
    ) -> httpx.Response:
        """Send a single request.

        Args:
            method: HTTP method
            path: Path relative to the base URL
            operation: Description of the operation, used in transport errors
            json: Optional JSON body

        Returns:
            httpx.Response: The response, whatever its status code

        Raises:
            TransportError: If no response was received
        """
        logger.debug(f'{method} {self._base_url}{path}')
        try:
            response = self._client.request(method, path, json=json)
        except httpx.HTTPError as error:
            logger.error(f'{operation}: {error}')
            raise TransportError(operation, error) from error
        logger.debug(f'{method} {path} -> {response.status_code}')
        return response

    def get(self, path: str, operation: str) -> httpx.Response:
        """Send a GET request."""
        return self.request('GET', path, operation)

    def post(self, path: str, operation: str, json: Optional[Any] = None) -> httpx.Response:
        """Send a POST request."""
        return self.request('POST', path, operation, json=json)

    def delete(self, path: str, operation: str) -> httpx.Response:
        """Send a DELETE request."""
        return self.request('DELETE', path, operation)

    def check_response(
        self,
        response: httpx.Response,
        scoped: bool = True,
        error_statuses: Optional[Container[int]] = (),
        message: Optional[str] = None,
    ) -> None:
        """Raise the error matching a non-200 response.

        Args:
            response: The response to check
            scoped: Whether the request path was organization-scoped
            error_statuses: Status codes whose body carries an error message,
                None when every non-200 status does
            message: Prefix for the unexpected status message, which then
                includes the full status line

        Raises:
            NotMemberError: For 401/403 on an organization-scoped request
            ApiError: For a status listed in error_statuses
            UnexpectedStatusError: For any other non-200 status
        """
        status = response.status_code
        if status == 200:
            return

        if scoped and self._organization and status in (401, 403):
            logger.warning(f'Request rejected for organization {self._organization}')
            raise NotMemberError(self._organization)

        if error_statuses is None or status in error_statuses:
            raise self.error_from_body(response, message)

        raise self.unexpected_status(response, message)

    @classmethod
    def error_from_body(cls, response: httpx.Response, message: Optional[str] = None) -> IkuError:
        """Build the error described by the response body.

        Falls back to an unexpected status error when the body has no message.
        """
        try:
            body = ErrorBody.model_validate_json(response.content)
        except ValidationError:
            body = ErrorBody()

        if not body.error:
            return cls.unexpected_status(response, message)

        logger.warning(f'API error {response.status_code}: {body.error}')
        error_class = ERROR_CLASSES.get(response.status_code, ApiError)
        return error_class(response.status_code, body.error)

    @staticmethod
    def unexpected_status(
        response: httpx.Response, message: Optional[str] = None
    ) -> UnexpectedStatusError:
        """Build the error for a status code with no specific handling."""
        if message:
            status_line = f'{response.status_code} {response.reason_phrase}'.strip()
            return UnexpectedStatusError(response.status_code, f'{message}: {status_line}')
        return UnexpectedStatusError(response.status_code)

    @staticmethod
    def decode(response: httpx.Response, model: Type[M]) -> M:
        """Decode a JSON response body into a model.

        Raises:
            DecodeError: If the body is not valid JSON for the model
        """
        try:
            return model.model_validate_json(response.content)
        except ValidationError as error:
            raise DecodeError(ERROR_DECODE.format(error)) from error

    def close(self) -> None:
        """Close the underlying HTTP connection pool."""
        self._client.close()

    def __enter__(self) -> 'ApiClient':
        """Enter the client context."""
        return self

    def __exit__(self, *exc_info: Any) -> None:
        """Close the client on exit."""
        self.close()
