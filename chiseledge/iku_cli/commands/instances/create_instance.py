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

"""Command to create an instance (replica) of a database."""

from ...clients.instances import InstancesClient
from ...clients.regions import to_location
from ...common.cli import argument, command
from ...common.config import Settings
from ...common.connection import ApiClient
from ...common.decorator import handle_exceptions
from ...constants import DEFAULT_INSTANCE_IMAGE, SUCCESS_CREATED_INSTANCE
from typing import Optional


CREATE_INSTANCE_HELP = 'Create an instance of a database and wait until it is ready.'


@command(
    'db instances create',
    help=CREATE_INSTANCE_HELP,
    arguments=[
        argument('database', help='Database name'),
        argument('region', metavar='region-id', help='Region ID of the new instance'),
        argument(
            '--name',
            dest='instance_name',
            help='Instance name. If no name is specified, the server picks one.',
        ),
        argument(
            '--image',
            default=DEFAULT_INSTANCE_IMAGE,
            help=f'Server image of the instance (default: {DEFAULT_INSTANCE_IMAGE})',
        ),
    ],
)
@handle_exceptions
def create_instance(
    settings: Settings,
    database: str,
    region: str,
    instance_name: Optional[str] = None,
    image: str = DEFAULT_INSTANCE_IMAGE,
) -> None:
    """Create an instance and block until the server reports it ready.

    Args:
        settings: The CLI settings
        database: Name of the database
        region: Region code of the new instance
        instance_name: Optional instance name
        image: Server image of the instance
    """
    with ApiClient.from_settings(settings) as client:
        instances = InstancesClient(client)
        instance = instances.create(database, instance_name, region, image)
        instances.wait(database, instance.name)

    print(SUCCESS_CREATED_INSTANCE.format(instance.name, to_location(instance.region)))
