"""
Pytest configuration and fixtures
"""
import textwrap
from unittest.mock import AsyncMock, patch

import pytest

from soapbridge.config import soap_endpoint_loader
from soapbridge.core import config as core_config
from soapbridge.core.config import AppSettings
from tests.mocks import MockSOAPResponses, make_zeep_client

WSDL_URL = "http://soap.example.com/StockService?wsdl"


@pytest.fixture(autouse=True)
def reset_globals():
    """Drop cached settings and endpoint loader between tests"""
    core_config.reset_settings()
    soap_endpoint_loader._soap_endpoint_loader = None
    yield
    core_config.reset_settings()
    soap_endpoint_loader._soap_endpoint_loader = None


@pytest.fixture
def app_settings():
    """Settings isolated from any local .env file"""
    return AppSettings(
        _env_file=None,
        soap_wsdl_url=WSDL_URL,
        soap_timeout=10.0,
        soap_strict=False,
        soap_xml_huge_tree=True
    )


@pytest.fixture
def price_operation():
    """GetPrice operation returning the structured price"""
    return AsyncMock(return_value=MockSOAPResponses.get_price_result())


@pytest.fixture
def zeep_client(price_operation):
    """Fake zeep client exposing GetPrice"""
    return make_zeep_client({"GetPrice": price_operation})


@pytest.fixture
def patched_transport():
    """Patch zeep's AsyncTransport as seen by the adapter"""
    with patch("soapbridge.data.soap_adapter.AsyncTransport") as mock_transport:
        mock_transport.return_value.aclose = AsyncMock()
        yield mock_transport


@pytest.fixture
def patched_async_client(zeep_client, patched_transport):
    """Patch zeep.AsyncClient as seen by the adapter"""
    with patch("soapbridge.data.soap_adapter.AsyncClient", return_value=zeep_client) as mock_cls:
        yield mock_cls


@pytest.fixture
def endpoints_yaml(tmp_path):
    """Write a soap_endpoints.yaml catalogue and return its path"""
    path = tmp_path / "soap_endpoints.yaml"
    path.write_text(textwrap.dedent("""
        default_wsdl_url: "${STOCK_WSDL_URL:-http://soap.example.com/StockService?wsdl}"
        timeout: 15
        verify_ssl: false

        authentication:
          username_env_var: STOCK_SOAP_USER
          password_env_var: STOCK_SOAP_PASSWORD

        soap_endpoints:
          - name: get_price
            description: Get the latest price for a stock symbol
            operation: GetPrice
            parameters:
              - name: symbol
                required: true
              - name: currency
                default: USD

          - name: get_case
            description: Look up a case in the legacy case service
            wsdl_url: "http://${CASE_HOST:-cases.example.com}/CaseService?wsdl"
            operation: GetCase
            service_name: CaseService
            port_name: CaseServiceSoap12
            requires_auth: true
            parameters:
              - name: caseId
                type: string
                required: true
    """))
    return path
