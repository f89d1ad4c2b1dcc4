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

"""Command to wait for an instance of a database to be ready."""

from ...clients.instances import InstancesClient
from ...common.cli import argument, command
from ...common.config import Settings
from ...common.connection import ApiClient
from ...common.decorator import handle_exceptions
from ...constants import SUCCESS_INSTANCE_READY


@command(
    'db instances wait',
    help='Wait until an instance of a database is ready.',
    arguments=[
        argument('database', help='Database name'),
        argument('instance', help='Instance name'),
    ],
)
@handle_exceptions
def wait_instance(settings: Settings, database: str, instance: str) -> None:
    """Block until an instance of a database is ready.

    Args:
        settings: The CLI settings
        database: Name of the database
        instance: Name of the instance
    """
    with ApiClient.from_settings(settings) as client:
        InstancesClient(client).wait(database, instance)

    print(SUCCESS_INSTANCE_READY.format(instance))
