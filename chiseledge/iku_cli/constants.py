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

"""Constants for the iku CLI."""

# Version
CLI_VERSION = '0.1.0'

# Environment variables
ENV_API_TOKEN = 'IKU_API_TOKEN'
ENV_API_HOSTNAME = 'IKU_API_HOSTNAME'
ENV_ORGANIZATION = 'IKU_ORGANIZATION'
ENV_LOG_LEVEL = 'IKU_LOG_LEVEL'

# Default config values
DEFAULT_API_HOSTNAME = 'https://api.chiseledge.com'
DEFAULT_LOG_LEVEL = 'WARNING'
LOG_LEVELS = ('TRACE', 'DEBUG', 'INFO', 'SUCCESS', 'WARNING', 'ERROR', 'CRITICAL')
DEFAULT_DATABASE_REGION = 'fra'
DEFAULT_INSTANCE_IMAGE = 'latest'
DEFAULT_DATABASE_PORT = 5000
SQL_SHELL_COMMAND = 'psql'
SQL_SHELL_CONNECT_DELAY = 2

# Database types
DATABASE_TYPE_REPLICA = 'replica'

# API paths
API_PREFIX = '/v1'
DATABASES_PATH = '/v1/databases'
INSTANCE_USAGE_PATH = '/v1/instances/{instance_id}/usage'

# Error Messages
ERROR_MISSING_TOKEN = (
    f'please set the `{ENV_API_TOKEN}` environment variable to your access token'
)
ERROR_MISSING_REPLICATE_NAME = 'You must specify a database name to replicate it.'
ERROR_MISSING_REPLICATE_REGION = 'You must specify a database region ID to replicate it.'
ERROR_NOT_MEMBER = 'you are not a member of organization {}'
ERROR_UNEXPECTED_STATUS = 'response with status code {}'
ERROR_CREATE_DATABASE = 'Failed to create database'
ERROR_INSTANCE_USAGE = 'failed to get instance usage'
ERROR_DECODE = 'failed to deserialize response: {}'
ERROR_SHELL_NOT_FOUND = 'could not find `{}` in PATH; connect manually with: {} {}'
ERROR_SHELL_FAILED = '`{}` exited with status {}'
ERROR_LOG_LEVEL = 'invalid log level {!r} in {}, choose from {}'

# Transport error contexts
OPERATION_CREATE_DATABASE = 'failed to create database {}'
OPERATION_REPLICATE_DATABASE = 'failed to replicate database {} to {}'
OPERATION_LIST_INSTANCES = 'failed to list instances of {}'
OPERATION_CREATE_INSTANCE = 'failed to create new instances for {}'
OPERATION_DELETE_INSTANCE = 'failed to destroy instances {} of {}'
OPERATION_WAIT_INSTANCE = 'failed to wait for instance {} of {} to be ready'
OPERATION_INSTANCE_USAGE = 'failed to get instance usage'

# Success Messages
SUCCESS_CREATED_DATABASE = 'Created database `{}` in {} seconds.'
SUCCESS_REPLICATED_DATABASE = 'Replicated database `{}` to {} in {} seconds.'
SUCCESS_CREATED_INSTANCE = 'Created instance {} in {}.'
SUCCESS_DESTROYED_INSTANCE = 'Destroyed instance {} of database {}.'
SUCCESS_INSTANCE_READY = 'Instance {} is ready.'
MESSAGE_NO_INSTANCES = 'No instances found for database {}.'
MESSAGE_CONNECTING_SHELL = 'Connecting SQL shell to the server...'

# Region table, in display order
REGIONS = {
    'ams': 'Amsterdam, Netherlands',
    'cdg': 'Paris, France',
    'den': 'Denver, Colorado (US)',
    'dfw': 'Dallas, Texas (US)',
    'ewr': 'Secaucus, NJ (US)',
    'fra': 'Frankfurt, Germany',
    'gru': 'São Paulo',
    'hkg': 'Hong Kong, Hong Kong',
    'iad': 'Ashburn, Virginia (US)',
    'jnb': 'Johannesburg, South Africa',
    'lax': 'Los Angeles, California (US)',
    'lhr': 'London, United Kingdom',
    'maa': 'Chennai (Madras), India',
    'mad': 'Madrid, Spain',
    'mia': 'Miami, Florida (US)',
    'nrt': 'Tokyo, Japan',
    'ord': 'Chicago, Illinois (US)',
    'otp': 'Bucharest, Romania',
    'scl': 'Santiago, Chile',
    'sea': 'Seattle, Washington (US)',
    'sin': 'Singapore',
    'sjc': 'Sunnyvale, California (US)',
    'syd': 'Sydney, Australia',
    'waw': 'Warsaw, Poland',
    'yul': 'Montreal, Canada',
    'yyz': 'Toronto, Canada',
}
UNKNOWN_REGION = 'Region ID: {}'
