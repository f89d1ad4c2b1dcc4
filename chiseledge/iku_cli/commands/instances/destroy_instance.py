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

"""Command to destroy an instance of a database."""

from ...clients.instances import InstancesClient
from ...common.cli import argument, command
from ...common.config import Settings
from ...common.connection import ApiClient
from ...common.decorator import handle_exceptions
from ...constants import SUCCESS_DESTROYED_INSTANCE


@command(
    'db instances destroy',
    help='Destroy an instance of a database.',
    arguments=[
        argument('database', help='Database name'),
        argument('instance', help='Instance name'),
    ],
)
@handle_exceptions
def destroy_instance(settings: Settings, database: str, instance: str) -> None:
    """Destroy an instance of a database.

    There is no confirmation step, and destroying an instance that is already
    gone reports the server's error.
    """
    with ApiClient.from_settings(settings) as client:
        InstancesClient(client).delete(database, instance)

    print(SUCCESS_DESTROYED_INSTANCE.format(instance, database))
