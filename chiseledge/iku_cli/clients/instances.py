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

"""Client for the instances (replicas) of a database."""

from ..common.connection import ApiClient, CaseInsensitiveModel, quote_segment
from ..constants import (
    ERROR_INSTANCE_USAGE,
    INSTANCE_USAGE_PATH,
    OPERATION_CREATE_INSTANCE,
    OPERATION_DELETE_INSTANCE,
    OPERATION_INSTANCE_USAGE,
    OPERATION_LIST_INSTANCES,
    OPERATION_WAIT_INSTANCE,
)
from loguru import logger
from pydantic import Field
from typing import Any, Dict, List, Optional


class Instance(CaseInsensitiveModel):
    """Instance of a database in one region."""

    uuid: str = Field(description='Unique identifier of the instance')
    name: str = Field(description='Instance name')
    type: str = Field(description='Instance type, primary or replica')
    region: str = Field(description='Region code the instance runs in')
    hostname: str = Field(description='Hostname serving the instance')


class InstanceList(CaseInsensitiveModel):
    """Response of the list call."""

    instances: List[Instance]


class CreateInstanceResponse(CaseInsensitiveModel):
    """Response of the create call."""

    instance: Instance


class InstanceUsage(CaseInsensitiveModel):
    """Usage counters of an instance."""

    rows_read_count: int = Field(ge=0, description='Number of rows read')


class InstancesClient:
    """Maps the instances resource of a database to methods.

    Every call is a single request. Nothing is retried.
    """

    def __init__(self, client: ApiClient):
        """Initialize the client.

        Args:
            client: The API client used for requests
        """
        self.client = client

    def url(self, database: str, suffix: str = '') -> str:
        """Get the path of the instances of a database."""
        return f'{self.client.prefix()}/databases/{quote_segment(database)}/instances{suffix}'

    def list(self, database: str) -> List[Instance]:
        """List the instances of a database."""
        response = self.client.get(
            self.url(database), OPERATION_LIST_INSTANCES.format(database)
        )
        self.client.check_response(response)
        return self.client.decode(response, InstanceList).instances

    def create(
        self, database: str, instance_name: Optional[str], region: str, image: str
    ) -> Instance:
        """Create an instance of a database.

        The instance is still provisioning when this returns. Use `wait` to
        block until it is ready.
        """
        body: Dict[str, Any] = {'region': region, 'image': image}
        if instance_name:
            body['instance_name'] = instance_name

        logger.info(f'Creating instance of {database} in {region}')
        response = self.client.post(
            self.url(database), OPERATION_CREATE_INSTANCE.format(database), json=body
        )
        self.client.check_response(response, error_statuses=None)
        instance = self.client.decode(response, CreateInstanceResponse).instance
        logger.success(f'Created instance {instance.name} of {database}')
        return instance

    def delete(self, database: str, instance: str) -> None:
        """Delete an instance of a database."""
        logger.info(f'Destroying instance {instance} of {database}')
        response = self.client.delete(
            self.url(database, f'/{quote_segment(instance)}'),
            OPERATION_DELETE_INSTANCE.format(instance, database),
        )
        self.client.check_response(response, error_statuses=(400, 404))
        logger.success(f'Destroyed instance {instance} of {database}')

    def wait(self, database: str, instance: str) -> None:
        """Block until an instance is ready.

        The server holds the request open until the instance leaves the
        provisioning state.
        """
        logger.info(f'Waiting for instance {instance} of {database}')
        response = self.client.get(
            self.url(database, f'/{quote_segment(instance)}/wait'),
            OPERATION_WAIT_INSTANCE.format(instance, database),
        )
        self.client.check_response(response, error_statuses=(400, 404))

    def get_usage(self, instance_id: str) -> int:
        """Get the number of rows read by an instance.

        This path is never scoped to an organization.
        """
        path = INSTANCE_USAGE_PATH.format(instance_id=quote_segment(instance_id))
        response = self.client.get(path, OPERATION_INSTANCE_USAGE)
        self.client.check_response(response, scoped=False, message=ERROR_INSTANCE_USAGE)
        return self.client.decode(response, InstanceUsage).rows_read_count
