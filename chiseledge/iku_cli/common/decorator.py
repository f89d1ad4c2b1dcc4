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

"""Decorators used by the iku CLI commands."""

import sys
from ..exceptions import ConfigurationError, IkuError, NotMemberError
from functools import wraps
from loguru import logger
from typing import Any, Callable


EXIT_SUCCESS = 0
EXIT_FAILURE = 1


def handle_exceptions(func: Callable) -> Callable[..., int]:
    """Decorator to turn the errors of a command into an exit code.

    Wraps the command in a try-catch block. Errors are logged, their message is
    printed to stderr and the wrapper returns a non-zero exit code.

    Args:
        func: The command to wrap

    Returns:
        The wrapped command returning the process exit code
    """

    @wraps(func)
    def wrapper(*args: Any, **kwargs: Any) -> int:
        try:
            func(*args, **kwargs)
            return EXIT_SUCCESS
        except Exception as error:
            if isinstance(error, ConfigurationError):
                logger.debug(f'{func.__name__} is not configured: {error}')
            elif isinstance(error, NotMemberError):
                logger.warning(f'Not a member of organization {error.organization}')
            elif isinstance(error, IkuError):
                logger.error(f'{func.__name__} failed with {type(error).__name__}: {error}')
            else:
                logger.exception(f'Failed with unexpected error: {str(error)}')

            print(f'Error: {error}', file=sys.stderr)
            return EXIT_FAILURE

    return wrapper
