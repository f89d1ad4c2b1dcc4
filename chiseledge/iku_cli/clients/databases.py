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

"""Client for the databases resource."""

from ..common.connection import ApiClient
from ..constants import (
    DATABASE_TYPE_REPLICA,
    DATABASES_PATH,
    DEFAULT_DATABASE_PORT,
    ERROR_CREATE_DATABASE,
    OPERATION_CREATE_DATABASE,
    OPERATION_REPLICATE_DATABASE,
)
from loguru import logger
from pydantic import BaseModel, ConfigDict, Field
from typing import Any, Dict, Optional


class Database(BaseModel):
    """Database as returned by the provisioning call."""

    model_config = ConfigDict(populate_by_name=True)

    host: str = Field(alias='Host', description='Hostname serving the database')
    type: str = Field(alias='Type', description='Database engine type')
    region: str = Field(alias='Region', description='Region code the database lives in')
    name: Optional[str] = Field(None, alias='Name', description='Database name')

    def connection_url(self, port: int = DEFAULT_DATABASE_PORT) -> str:
        """Get the Postgres connection URL of the database."""
        return f'postgresql://{self.host}:{port}'


class CreateDatabaseResponse(BaseModel):
    """Response of the database provisioning call."""

    database: Database


class DatabaseClient:
    """Maps the databases resource to methods."""

    def __init__(self, client: ApiClient):
        """Initialize the client.

        Args:
            client: The API client used for requests
        """
        self.client = client

    def create(self, name: str, region: str) -> Database:
        """Create a primary database.

        The API provisions the database synchronously, so the returned host is
        ready to accept connections.
        """
        logger.info(f'Creating database {name} in {region}')
        database = self._provision(
            {'name': name, 'region': region}, OPERATION_CREATE_DATABASE.format(name)
        )
        logger.success(f'Created database {name}')
        return database

    def replicate(self, name: str, region: str) -> Database:
        """Create a replica of an existing database in another region."""
        logger.info(f'Replicating database {name} to {region}')
        database = self._provision(
            {'name': name, 'region': region, 'type': DATABASE_TYPE_REPLICA},
            OPERATION_REPLICATE_DATABASE.format(name, region),
        )
        logger.success(f'Replicated database {name} to {region}')
        return database

    def _provision(self, body: Dict[str, Any], operation: str) -> Database:
        response = self.client.post(DATABASES_PATH, operation, json=body)
        self.client.check_response(
            response, scoped=False, error_statuses=(400, 404), message=ERROR_CREATE_DATABASE
        )
        return self.client.decode(response, CreateDatabaseResponse).database
