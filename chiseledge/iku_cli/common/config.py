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

"""Configuration for the iku CLI."""

import os
from ..constants import (
    DEFAULT_API_HOSTNAME,
    ENV_API_HOSTNAME,
    ENV_API_TOKEN,
    ENV_ORGANIZATION,
)
from ..exceptions import MissingTokenError
from pydantic import BaseModel, Field
from typing import Mapping, Optional


class Settings(BaseModel):
    """Settings shared by every command of a single CLI invocation."""

    api_token: Optional[str] = Field(None, description='Bearer token for the API')
    api_hostname: str = Field(DEFAULT_API_HOSTNAME, description='Base URL of the API')
    organization: Optional[str] = Field(
        None, description='Organization scoping the resource paths'
    )

    @classmethod
    def from_env(
        cls, environ: Optional[Mapping[str, str]] = None, organization: Optional[str] = None
    ) -> 'Settings':
        """Build the settings from the environment.

        Args:
            environ: Environment mapping, defaults to os.environ
            organization: Organization given on the command line, overrides the environment

        Returns:
            Settings: The resolved settings
        """
        if environ is None:
            environ = os.environ

        return cls(
            api_token=environ.get(ENV_API_TOKEN) or None,
            api_hostname=(environ.get(ENV_API_HOSTNAME) or DEFAULT_API_HOSTNAME).rstrip('/'),
            organization=organization or environ.get(ENV_ORGANIZATION) or None,
        )

    def require_token(self) -> str:
        """Get the API token.

        Returns:
            str: The API token

        Raises:
            MissingTokenError: If no token is configured
        """
        if not self.api_token:
            raise MissingTokenError()
        return self.api_token
