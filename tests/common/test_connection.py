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

"""Tests for connection module."""

import httpx
import json
import pytest
from chiseledge.iku_cli.common.config import Settings
from chiseledge.iku_cli.common.connection import ApiClient
from chiseledge.iku_cli.exceptions import (
    ApiError,
    BadRequestError,
    DecodeError,
    MissingTokenError,
    NotFoundError,
    NotMemberError,
    TransportError,
    UnexpectedStatusError,
)
from pydantic import BaseModel


class Payload(BaseModel):
    """Model used to test decoding."""

    count: int


class TestApiClient:
    """Test cases for ApiClient class."""

    def test_request_sends_bearer_token(self, mock_api):
        """Test that every request carries the bearer token."""
        mock_api.add('GET', '/v1/ping', json={})

        with mock_api.client() as client:
            client.get('/v1/ping', 'ping')

        request = mock_api.requests[0]
        assert request.headers['Authorization'] == 'Bearer test-token'
        assert str(request.url) == 'https://api.test.chiseledge.com/v1/ping'

    def test_post_sends_json_body(self, mock_api):
        """Test that POST bodies are sent as JSON."""
        mock_api.add('POST', '/v1/things', json={})

        with mock_api.client() as client:
            client.post('/v1/things', 'create thing', json={'name': 'a'})

        request = mock_api.requests[0]
        assert request.headers['Content-Type'] == 'application/json'
        assert json.loads(request.content) == {'name': 'a'}

    def test_prefix_without_organization(self, mock_api):
        """Test the unscoped path prefix."""
        assert mock_api.client().prefix() == '/v1'

    def test_prefix_with_organization(self, mock_api):
        """Test the organization-scoped path prefix."""
        assert mock_api.client('acme').prefix() == '/v1/organizations/acme'

    def test_prefix_escapes_organization(self, mock_api):
        """Test that the organization is a single path segment."""
        assert mock_api.client('a/b').prefix() == '/v1/organizations/a%2Fb'

    def test_no_read_deadline(self):
        """Test that requests wait for the server as long as it takes."""
        with ApiClient('https://api.test.chiseledge.com', 'test-token') as client:
            assert client._client.timeout == httpx.Timeout(None)

    def test_from_settings(self, settings):
        """Test that from_settings carries host and organization."""
        scoped = settings.model_copy(update={'organization': 'acme'})
        with ApiClient.from_settings(scoped) as client:
            assert client.base_url == 'https://api.test.chiseledge.com'
            assert client.organization == 'acme'

    def test_from_settings_requires_token(self):
        """Test that from_settings fails without a token."""
        with pytest.raises(MissingTokenError, match='IKU_API_TOKEN'):
            ApiClient.from_settings(Settings())

    def test_transport_error_names_operation(self, mock_api):
        """Test that transport failures are wrapped with the operation."""
        mock_api.fail('GET', '/v1/ping', httpx.ConnectError('connection refused'))

        with pytest.raises(TransportError) as excinfo:
            mock_api.client().get('/v1/ping', 'failed to ping')

        assert str(excinfo.value) == 'failed to ping: connection refused'
        assert isinstance(excinfo.value.cause, httpx.ConnectError)


class TestCheckResponse:
    """Test cases for response classification."""

    def test_ok(self, mock_api):
        """Test that 200 passes."""
        mock_api.client().check_response(httpx.Response(200))

    @pytest.mark.parametrize('status_code', [401, 403])
    def test_not_member(self, mock_api, status_code):
        """Test that scoped 401/403 become a membership error."""
        with pytest.raises(NotMemberError, match='not a member of organization acme'):
            mock_api.client('acme').check_response(httpx.Response(status_code))

    def test_forbidden_without_organization(self, mock_api):
        """Test that 403 without an organization is an unexpected status."""
        with pytest.raises(UnexpectedStatusError, match='response with status code 403'):
            mock_api.client().check_response(httpx.Response(403))

    def test_forbidden_unscoped_path(self, mock_api):
        """Test that 403 on an unscoped path ignores the organization."""
        with pytest.raises(UnexpectedStatusError):
            mock_api.client('acme').check_response(httpx.Response(403), scoped=False)

    def test_bad_request_and_not_found_are_distinct(self, mock_api):
        """Test that 400 and 404 map to separate error classes."""
        client = mock_api.client()

        with pytest.raises(BadRequestError) as bad_request:
            client.check_response(
                httpx.Response(400, json={'error': 'bad name'}), error_statuses=(400, 404)
            )
        with pytest.raises(NotFoundError) as not_found:
            client.check_response(
                httpx.Response(404, json={'error': 'no such thing'}), error_statuses=(400, 404)
            )

        assert str(bad_request.value) == 'bad name'
        assert bad_request.value.status_code == 400
        assert str(not_found.value) == 'no such thing'
        assert not isinstance(not_found.value, BadRequestError)

    def test_error_body_ignored_when_status_not_listed(self, mock_api):
        """Test that error bodies are only read for listed statuses."""
        with pytest.raises(UnexpectedStatusError, match='response with status code 400'):
            mock_api.client().check_response(httpx.Response(400, json={'error': 'ignored'}))

    def test_any_status_error_body(self, mock_api):
        """Test that error_statuses=None reads the body of any status."""
        with pytest.raises(ApiError) as excinfo:
            mock_api.client().check_response(
                httpx.Response(422, json={'error': 'region not available'}), error_statuses=None
            )

        assert type(excinfo.value) is ApiError
        assert excinfo.value.status_code == 422
        assert str(excinfo.value) == 'region not available'

    def test_capitalized_error_key(self, mock_api):
        """Test that the error message is read regardless of key case."""
        with pytest.raises(NotFoundError, match='^no such database$'):
            mock_api.client().check_response(
                httpx.Response(404, json={'Error': 'no such database'}), error_statuses=(404,)
            )

    def test_missing_error_body_falls_back(self, mock_api):
        """Test that an undecodable error body gives an unexpected status error."""
        with pytest.raises(UnexpectedStatusError, match='response with status code 404'):
            mock_api.client().check_response(
                httpx.Response(404, text='not json'), error_statuses=(404,)
            )

    def test_unexpected_status_with_message(self, mock_api):
        """Test that a message prefix includes the status line."""
        with pytest.raises(UnexpectedStatusError) as excinfo:
            mock_api.client().check_response(httpx.Response(500), message='failed to do it')

        assert str(excinfo.value) == 'failed to do it: 500 Internal Server Error'
        assert excinfo.value.status_code == 500


class TestDecode:
    """Test cases for typed decoding."""

    def test_decode(self):
        """Test decoding a valid body."""
        payload = ApiClient.decode(httpx.Response(200, json={'count': 3}), Payload)

        assert payload.count == 3

    def test_decode_missing_field(self):
        """Test that a missing field raises a decode error."""
        with pytest.raises(DecodeError, match='failed to deserialize response'):
            ApiClient.decode(httpx.Response(200, json={}), Payload)

    def test_decode_invalid_json(self):
        """Test that invalid JSON raises a decode error."""
        with pytest.raises(DecodeError):
            ApiClient.decode(httpx.Response(200, text='{'), Payload)
