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

"""Global pytest fixtures for iku CLI tests."""

import httpx
import os
import pytest
import threading
import time
from chiseledge.iku_cli.common.config import Settings
from chiseledge.iku_cli.common.connection import ApiClient
from http.server import BaseHTTPRequestHandler, ThreadingHTTPServer
from loguru import logger
from typing import Any, Dict, List, Optional, Tuple
from unittest.mock import patch


TEST_HOSTNAME = 'https://api.test.chiseledge.com'
TEST_TOKEN = 'test-token'  # pragma: allowlist secret
TEST_ORG = 'acme'
# longer than the httpx default read timeout of 5 seconds
SLOW_RESPONSE_DELAY = 6


class MockApi:
    """In-memory stand-in for the iku API that records every request."""

    def __init__(self):
        """Initialize with no routes."""
        self.routes: Dict[Tuple[str, str], Tuple[int, Any]] = {}
        self.failures: Dict[Tuple[str, str], Exception] = {}
        self.requests: List[httpx.Request] = []

    def add(self, method: str, path: str, status_code: int = 200, json: Any = None):
        """Answer a method and path with a status code and JSON body."""
        self.routes[(method, path)] = (status_code, json)

    def fail(self, method: str, path: str, error: Exception):
        """Raise a transport error for a method and path."""
        self.failures[(method, path)] = error

    def handler(self, request: httpx.Request) -> httpx.Response:
        """Handle a request sent through the mock transport."""
        self.requests.append(request)
        key = (request.method, request.url.path)
        if key in self.failures:
            raise self.failures[key]
        if key not in self.routes:
            return httpx.Response(500)
        status_code, body = self.routes[key]
        if body is None:
            return httpx.Response(status_code)
        return httpx.Response(status_code, json=body)

    def transport(self) -> httpx.MockTransport:
        """Get a transport routing requests to this mock."""
        return httpx.MockTransport(self.handler)

    def client(self, organization: Optional[str] = None) -> ApiClient:
        """Create an API client talking to this mock."""
        return ApiClient(TEST_HOSTNAME, TEST_TOKEN, organization, transport=self.transport())


@pytest.fixture(scope='session', autouse=True)
def tests_setup_and_teardown():
    """Remove the iku environment for testing."""
    # Will be executed before the first test
    old_environ = dict(os.environ)
    for name in list(os.environ):
        if name.startswith('IKU_'):
            del os.environ[name]

    yield
    # Will be executed after the last test
    os.environ.clear()
    os.environ.update(old_environ)


@pytest.fixture(autouse=True)
def reset_logger():
    """Remove every log handler so output only holds what commands print."""
    logger.remove()
    yield
    logger.remove()


@pytest.fixture
def mock_api():
    """Fixture providing the mock API.

    Clients built by commands through ApiClient.from_settings are routed to it.
    """
    api = MockApi()

    def from_settings(settings, transport=None):
        return ApiClient(
            settings.api_hostname,
            settings.require_token(),
            settings.organization,
            transport=api.transport(),
        )

    with patch.object(ApiClient, 'from_settings', side_effect=from_settings):
        yield api


@pytest.fixture
def settings():
    """Return settings with a token and the test host."""
    return Settings(api_token=TEST_TOKEN, api_hostname=TEST_HOSTNAME)


@pytest.fixture
def org_settings():
    """Return settings scoped to the test organization."""
    return Settings(api_token=TEST_TOKEN, api_hostname=TEST_HOSTNAME, organization=TEST_ORG)


@pytest.fixture
def no_token_settings():
    """Return settings without a token."""
    return Settings(api_hostname=TEST_HOSTNAME)


@pytest.fixture
def sample_database():
    """Return a sample database provisioning response."""
    return {
        'database': {
            'Name': 'brave-otter',
            'Host': 'brave-otter.fra.chiseledge.io',
            'Type': 'primary',
            'Region': 'fra',
        }
    }


@pytest.fixture
def sample_instance():
    """Return a sample instance."""
    return {
        'uuid': '6a4c5d1e-7f2b-4c3a-9e8d-1b2c3d4e5f60',
        'name': 'lhr-replica',
        'type': 'replica',
        'region': 'lhr',
        'hostname': 'lhr-replica-brave-otter.chiseledge.io',
    }


class SlowHandler(BaseHTTPRequestHandler):
    """Answers every GET with an empty JSON object after a delay."""

    def do_GET(self):
        """Hold the request open like the instance wait endpoint."""
        time.sleep(SLOW_RESPONSE_DELAY)
        body = b'{}'
        self.send_response(200)
        self.send_header('Content-Type', 'application/json')
        self.send_header('Content-Length', str(len(body)))
        self.end_headers()
        self.wfile.write(body)

    def log_message(self, format, *args):
        """Keep the test output clean."""


@pytest.fixture
def slow_server():
    """Fixture providing the URL of a local HTTP server that answers slowly."""
    server = ThreadingHTTPServer(('127.0.0.1', 0), SlowHandler)
    thread = threading.Thread(target=server.serve_forever, daemon=True)
    thread.start()

    yield f'http://127.0.0.1:{server.server_port}'

    server.shutdown()
    server.server_close()
    thread.join()
