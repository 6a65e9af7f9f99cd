"""Tests for the shared Foursquare transport."""
from __future__ import annotations

from unittest.mock import AsyncMock, Mock, patch

import httpx
import pytest

from fsq_venues.core.config import ApiSettings
from fsq_venues.services.foursquare import (
    FoursquareApiError,
    FoursquareCore,
    FoursquareError,
    create_foursquare_core,
)


def _response(payload, status_code=200):
    response = Mock()  # httpx Response methods are sync
    response.status_code = status_code
    response.json.return_value = payload
    return response


def _envelope(response, code=200, **meta):
    return {"meta": {"code": code, **meta}, "response": response}


class TestFoursquareCore:
    """Test suite for the FoursquareCore invoker."""

    @pytest.fixture
    def mock_client(self):
        mock_client = AsyncMock(spec=httpx.AsyncClient)
        mock_client.get.return_value = _response(_envelope({}))
        return mock_client

    @pytest.fixture
    def core(self, mock_client):
        with patch("httpx.AsyncClient", return_value=mock_client):
            core = FoursquareCore("client-id", "client-secret")
            core._client = mock_client
            return core

    async def test_init_with_defaults(self):
        with patch("httpx.AsyncClient") as mock_httpx:
            core = FoursquareCore("id", "secret")
            mock_httpx.assert_called_once()
            assert core.api_url == "https://api.foursquare.com/v2"
            assert core.api_version == "20140806"
            assert mock_httpx.call_args.kwargs["base_url"] == "https://api.foursquare.com/v2"

    async def test_init_strips_trailing_slash(self):
        with patch("httpx.AsyncClient"):
            core = FoursquareCore("id", "secret", base_url="https://proxy.local/v2/", api_version="20200101")
            assert core.api_url == "https://proxy.local/v2"
            assert core.api_version == "20200101"

    async def test_single_key_is_unwrapped(self, core, mock_client):
        mock_client.get.return_value = _response(_envelope({"venue": {"id": "v1", "name": "Cafe"}}))

        result = await core.call_api("/venues/v1", "tok", "venue", None)

        assert result == {"id": "v1", "name": "Cafe"}

    async def test_multiple_keys_skip_absent_fields(self, core, mock_client):
        mock_client.get.return_value = _response(
            _envelope({"keywords": {"count": 0}, "groups": [{"items": []}]})
        )

        result = await core.call_api("/venues/explore", "tok", ("keywords", "groups", "warning"), {})

        assert result == {"keywords": {"count": 0}, "groups": [{"items": []}]}

    async def test_oauth_token_is_sent(self, core, mock_client):
        mock_client.get.return_value = _response(_envelope({"groups": []}))

        await core.call_api("/venues/search", "tok", "groups", {"ll": "10,20", "query": None})

        path = mock_client.get.call_args[0][0]
        params = mock_client.get.call_args[1]["params"]
        assert path == "/venues/search"
        assert params == {"ll": "10,20", "oauth_token": "tok", "v": "20140806"}

    async def test_userless_auth_without_token(self, core, mock_client):
        mock_client.get.return_value = _response(_envelope({"categories": []}))

        await core.call_api("/venues/categories", None, "categories", {})

        params = mock_client.get.call_args[1]["params"]
        assert params["client_id"] == "client-id"
        assert params["client_secret"] == "client-secret"
        assert "oauth_token" not in params

    async def test_params_are_not_mutated(self, core, mock_client):
        mock_client.get.return_value = _response(_envelope({"tips": {}}))
        params = {"limit": 5}

        await core.call_api("/venues/v1/tips", "tok", "tips", params)

        assert params == {"limit": 5}

    async def test_error_envelope(self, core, mock_client):
        mock_client.get.return_value = _response(
            _envelope({}, code=400, errorType="param_error", errorDetail="Must provide a valid venue ID"),
            status_code=400,
        )

        with pytest.raises(FoursquareApiError) as exc_info:
            await core.call_api("/venues/nope", "tok", "venue", None)

        error = exc_info.value
        assert str(error) == "HTTP 400: param_error: Must provide a valid venue ID"
        assert error.code == 400
        assert error.error_type == "param_error"
        assert error.error_detail == "Must provide a valid venue ID"

    async def test_missing_metadata(self, core, mock_client):
        mock_client.get.return_value = _response({"response": {"venue": {}}})

        with pytest.raises(FoursquareApiError, match="Response had no metadata."):
            await core.call_api("/venues/v1", "tok", "venue", None)

    async def test_missing_single_field(self, core, mock_client):
        mock_client.get.return_value = _response(_envelope({"other": 1}))

        with pytest.raises(FoursquareApiError, match="Response had no venue field."):
            await core.call_api("/venues/v1", "tok", "venue", None)

    async def test_deprecation_notice_is_logged(self, core, mock_client, caplog):
        mock_client.get.return_value = _response(
            _envelope({"venues": []}, errorType="deprecated", errorDetail="Please use a newer version")
        )

        with caplog.at_level("WARNING", logger="fsq_venues.services.foursquare.client"):
            result = await core.call_api("/venues/trending", "tok", "venues", {})

        assert result == []
        assert "deprecated" in caplog.text

    async def test_non_json_body(self, core, mock_client):
        response = _response(None, status_code=502)
        response.json.side_effect = ValueError("Expecting value")
        mock_client.get.return_value = response

        with pytest.raises(FoursquareError, match="HTTP 502"):
            await core.call_api("/venues/v1", "tok", "venue", None)

    async def test_transport_error_is_wrapped(self, core, mock_client):
        cause = httpx.ConnectError("connection refused")
        mock_client.get.side_effect = cause

        with pytest.raises(FoursquareError) as exc_info:
            await core.call_api("/venues/v1", "tok", "venue", None)

        assert not isinstance(exc_info.value, FoursquareApiError)
        assert exc_info.value.__cause__ is cause

    async def test_context_manager_usage(self):
        with patch("httpx.AsyncClient") as mock_httpx:
            mock_client = AsyncMock()
            mock_httpx.return_value = mock_client

            async with FoursquareCore("id", "secret") as core:
                assert isinstance(core, FoursquareCore)

            mock_client.aclose.assert_called_once()

    async def test_close_method(self, core, mock_client):
        await core.aclose()
        mock_client.aclose.assert_called_once()


def test_create_foursquare_core_from_settings():
    settings = ApiSettings(
        foursquare_client_id="id",
        foursquare_client_secret="secret",
        foursquare_api_version="20230101",
        foursquare_base_url="https://example.test/v2",
    )
    with patch("httpx.AsyncClient"):
        core = create_foursquare_core(settings)

    assert core.client_id == "id"
    assert core.client_secret == "secret"
    assert core.api_version == "20230101"
    assert core.api_url == "https://example.test/v2"


def test_create_foursquare_core_requires_secret():
    settings = ApiSettings(foursquare_client_id="id")
    with pytest.raises(RuntimeError, match="Missing configuration value: foursquare_client_secret"):
        create_foursquare_core(settings)
