import unittest

import httpx

from adapters.http_client import RedfishHttpClient, build_http_client
from core.config import AppSettings
from core.services.fetcher import get_subprocessor

from tests.fixtures import SUBPROCESSOR_URI, subprocessor_body


def _settings(**overrides) -> AppSettings:
    values = {
        "endpoint": "https://bmc.example",
        "username": "admin",
        "password": "secret",
        "verify_tls": False,
        "http_timeout_seconds": 5.0,
    }
    values.update(overrides)
    return AppSettings(_env_file=None, **values)


class RecordingTransport(httpx.MockTransport):
    def __init__(self, routes: dict[str, httpx.Response]):
        self.requests: list[httpx.Request] = []
        self.routes = routes
        super().__init__(self._handle)

    def _handle(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        return self.routes.get(request.url.path, httpx.Response(404, json={"error": "not found"}))


class BuildHttpClientTests(unittest.TestCase):
    def test_headers_auth_and_base_url(self):
        transport = RecordingTransport({"/redfish/v1/": httpx.Response(200, json={})})

        with build_http_client(_settings(), transport=transport) as client:
            client.get("/redfish/v1/")

        request = transport.requests[0]
        self.assertEqual(str(request.url), "https://bmc.example/redfish/v1/")
        self.assertEqual(request.headers["Accept"], "application/json")
        self.assertEqual(request.headers["OData-Version"], "4.0")
        self.assertEqual(request.headers["User-Agent"], "redfish-inventory/0.1")
        self.assertTrue(request.headers["Authorization"].startswith("Basic "))

    def test_no_auth_without_credentials(self):
        transport = RecordingTransport({"/redfish/v1/": httpx.Response(200, json={})})

        with build_http_client(_settings(username=None, password=None), transport=transport) as client:
            client.get("/redfish/v1/")

        self.assertNotIn("Authorization", transport.requests[0].headers)

    def test_extra_headers(self):
        transport = RecordingTransport({"/": httpx.Response(200)})

        with build_http_client(_settings(), extra_headers={"X-Auth-Token": "t"}, transport=transport) as client:
            client.get("/")

        self.assertEqual(transport.requests[0].headers["X-Auth-Token"], "t")


class RedfishHttpClientTests(unittest.TestCase):
    def _client(self, routes: dict[str, httpx.Response]) -> RedfishHttpClient:
        http = build_http_client(_settings(), transport=RecordingTransport(routes))
        return RedfishHttpClient(http)

    def test_get_returns_open_response(self):
        with self._client({"/a": httpx.Response(200, content=b"{}")}) as client:
            response = client.get("/a")
            try:
                self.assertEqual(response.read(), b"{}")
            finally:
                response.close()
            self.assertTrue(response.is_closed)

    def test_error_status_raises_and_closes(self):
        with self._client({}) as client:
            with self.assertRaises(httpx.HTTPStatusError) as ctx:
                client.get("/missing")

        self.assertEqual(ctx.exception.response.status_code, 404)
        self.assertTrue(ctx.exception.response.is_closed)

    def test_transport_error_propagates(self):
        def refuse(request: httpx.Request) -> httpx.Response:
            raise httpx.ConnectError("refused", request=request)

        http = build_http_client(_settings(), transport=httpx.MockTransport(refuse))
        with RedfishHttpClient(http) as client:
            with self.assertRaises(httpx.ConnectError):
                get_subprocessor(client, SUBPROCESSOR_URI)

    def test_get_subprocessor_end_to_end(self):
        routes = {SUBPROCESSOR_URI: httpx.Response(200, content=subprocessor_body(MaxSpeedMHz="3500"))}

        with self._client(routes) as client:
            entity = get_subprocessor(client, SUBPROCESSOR_URI)

        self.assertIs(entity.client, client)
        self.assertEqual(entity.max_speed_mhz, 3500.0)
        self.assertEqual(entity.odata_id, SUBPROCESSOR_URI)
