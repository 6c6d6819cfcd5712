import logging

import httpx
import pytest

from app.schemas.auth import SendSmsRequest
from app.services.sms_client import SmsClient, otp_sms_content

SMS_URL = "https://sms.example.test/v1/messages/send"


def _client(handler, mode="live"):
    http_client = httpx.AsyncClient(transport=httpx.MockTransport(handler))
    return SmsClient(
        http_client=http_client,
        base_url=SMS_URL,
        client_id="client",
        client_secret="secret",
        sender_id="OTPAuth",
        otp_expiry_minutes=5,
        mode=mode,
    )


def test_sms_content_carries_prefix_code_and_expiry():
    content = otp_sms_content(SendSmsRequest(code=654321, prefix="ABCD"), 5)
    assert "ABCD-654321" in content
    assert "5 minutes" in content


@pytest.mark.asyncio
async def test_send_uses_gateway_query_params():
    seen = {}

    def handler(request: httpx.Request) -> httpx.Response:
        seen.update(request.url.params)
        return httpx.Response(200, json={"status": 0})

    client = _client(handler)
    assert await client.send("233200000000", SendSmsRequest(code=654321, prefix="ABCD")) is True
    assert seen["clientid"] == "client"
    assert seen["clientsecret"] == "secret"
    assert seen["from"] == "OTPAuth"
    assert seen["to"] == "233200000000"
    assert "ABCD-654321" in seen["content"]


@pytest.mark.asyncio
async def test_send_returns_false_on_gateway_rejection():
    client = _client(lambda request: httpx.Response(401, text="invalid credentials"))
    assert await client.send("233200000000", SendSmsRequest(code=654321, prefix="ABCD")) is False


@pytest.mark.asyncio
async def test_send_returns_false_on_network_error():
    def handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectError("unreachable", request=request)

    client = _client(handler)
    assert await client.send("233200000000", SendSmsRequest(code=654321, prefix="ABCD")) is False


@pytest.mark.asyncio
async def test_mock_mode_skips_the_gateway():
    def handler(request: httpx.Request) -> httpx.Response:
        raise AssertionError("gateway should not be called")

    client = _client(handler, mode="mock")
    assert await client.send("233200000000", SendSmsRequest(code=654321, prefix="ABCD")) is True


@pytest.mark.asyncio
async def test_live_mode_without_client_id_fails_without_calling_gateway():
    calls = []

    def handler(request: httpx.Request) -> httpx.Response:
        calls.append(request)
        return httpx.Response(200)

    client = SmsClient(
        http_client=httpx.AsyncClient(transport=httpx.MockTransport(handler)),
        base_url=SMS_URL,
        client_id=None,
        client_secret=None,
        sender_id="OTPAuth",
        otp_expiry_minutes=5,
        mode="live",
    )
    assert await client.send("233200000000", SendSmsRequest(code=654321, prefix="ABCD")) is False
    assert calls == []


@pytest.mark.asyncio
async def test_mock_mode_logs_code_for_local_verification(caplog):
    client = _client(lambda request: httpx.Response(500), mode="mock")

    with caplog.at_level(logging.DEBUG, logger="app.services.sms_client"):
        await client.send("233200000000", SendSmsRequest(code=654321, prefix="ABCD"))

    assert "ABCD-654321" in caplog.text


@pytest.mark.asyncio
async def test_send_returns_false_on_invalid_gateway_url():
    client = _client(lambda request: httpx.Response(200))
    client.base_url = "http://[invalid"
    assert await client.send("233200000000", SendSmsRequest(code=654321, prefix="ABCD")) is False
