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

"""Custom exceptions for the iku CLI."""

from .constants import ERROR_MISSING_TOKEN, ERROR_NOT_MEMBER, ERROR_UNEXPECTED_STATUS
from typing import Optional


class IkuError(Exception):
    """Base exception for the iku CLI."""

    pass


class ConfigurationError(IkuError):
    """Exception raised when the command cannot run with the given configuration."""

    pass


class MissingTokenError(ConfigurationError):
    """Exception raised when no API token is configured."""

    def __init__(self):
        """Initialize the MissingTokenError."""
        super().__init__(ERROR_MISSING_TOKEN)


class NotMemberError(IkuError):
    """Exception raised when an organization-scoped request is rejected."""

    def __init__(self, organization: str):
        """Initialize the NotMemberError.

        Args:
            organization: The organization the request was scoped to
        """
        self.organization = organization
        super().__init__(ERROR_NOT_MEMBER.format(organization))


class ApiError(IkuError):
    """Exception raised when the API answers with a structured error body."""

    def __init__(self, status_code: int, message: str):
        """Initialize the ApiError.

        Args:
            status_code: The HTTP status code of the response
            message: The error message taken from the response body
        """
        self.status_code = status_code
        self.message = message
        super().__init__(message)


class BadRequestError(ApiError):
    """Exception raised for a 400 response."""

    pass


class NotFoundError(ApiError):
    """Exception raised for a 404 response."""

    pass


class UnexpectedStatusError(IkuError):
    """Exception raised for a status code with no specific handling."""

    def __init__(self, status_code: int, message: Optional[str] = None):
        """Initialize the UnexpectedStatusError.

        Args:
            status_code: The HTTP status code of the response
            message: Optional message replacing the default one
        """
        self.status_code = status_code
        super().__init__(message or ERROR_UNEXPECTED_STATUS.format(status_code))


class TransportError(IkuError):
    """Exception raised when the request never got a response."""

    def __init__(self, operation: str, cause: Exception):
        """Initialize the TransportError.

        Args:
            operation: Description of the operation that failed
            cause: The underlying transport error
        """
        self.operation = operation
        self.cause = cause
        super().__init__(f'{operation}: {cause}')


class DecodeError(IkuError):
    """Exception raised when a response body does not have the expected shape."""

    pass


class ShellLaunchError(IkuError):
    """Exception raised when the SQL shell cannot be started or fails."""

    pass
