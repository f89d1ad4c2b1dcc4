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

"""Commands for database instance operations."""

from .list_instances import list_instances
from .create_instance import create_instance
from .destroy_instance import destroy_instance
from .wait_instance import wait_instance
from .instance_usage import instance_usage

__all__ = [
    'list_instances',
    'create_instance',
    'destroy_instance',
    'wait_instance',
    'instance_usage',
]
