import json

import httpx
import pytest

from transvoucher import ConversionRate, Payment, ValidationError

from conftest import BASE_URL

PAYMENT = {
    "id": "1",
    "reference_id": "ref-123",
    "amount": 100,
    "currency": "USD",
    "status": "pending",
    "payment_url": "https://pay.transvoucher.com/p/1",
}

VALID_CREATE = {
    "amount": 100,
    "currency": "USD",
    "title": "Test Payment",
    "description": "Test payment description",
    "multiple_use": True,
    "customer_details": {
        "email": "test@example.com",
        "first_name": "Test",
        "last_name": "User",
    },
}


async def test_create_payment(client, respx_mock):
    route = respx_mock.post(f"{BASE_URL}/payments").mock(
        return_value=httpx.Response(201, json={"success": True, "data": PAYMENT})
    )

    payment = await client.payments.create(VALID_CREATE)

    assert isinstance(payment, Payment)
    assert payment.id == "1"
    assert payment.reference_id == "ref-123"
    assert payment.payment_url == PAYMENT["payment_url"]
    assert json.loads(route.calls.last.request.content)["title"] == "Test Payment"


async def test_create_validates_before_sending(client, respx_mock):
    with pytest.raises(ValidationError) as exc_info:
        await client.payments.create({"amount": 0, "title": ""})

    errors = exc_info.value.errors
    assert "amount" in errors
    assert "title" in errors
    assert "currency" in errors
    assert not respx_mock.calls


@pytest.mark.parametrize(
    "field,value",
    [
        ("multiple_use", "yes"),
        ("currency", "US"),
        ("title", "x" * 256),
        ("description", "x" * 1001),
        ("theme", "blue"),
        ("lang", "xx"),
        ("success_url", "not a url"),
        ("expires_at", "tomorrow"),
        ("metadata", ["not", "a", "dict"]),
    ],
)
async def test_create_rejects_bad_field(client, field, value):
    with pytest.raises(ValidationError) as exc_info:
        await client.payments.create({**VALID_CREATE, field: value})
    assert field in exc_info.value.errors


async def test_create_rejects_bad_customer_email(client):
    data = {**VALID_CREATE, "customer_details": {"email": "nope"}}
    with pytest.raises(ValidationError) as exc_info:
        await client.payments.create(data)
    assert "customer_details.email" in exc_info.value.errors


async def test_dynamic_price_needs_no_amount(client, respx_mock):
    respx_mock.post(f"{BASE_URL}/payments").mock(
        return_value=httpx.Response(201, json={"success": True, "data": PAYMENT})
    )
    data = {"currency": "USD", "title": "Tip jar", "is_price_dynamic": True}

    payment = await client.payments.create(data)

    assert payment.id == "1"


async def test_unsuccessful_envelope_is_validation_error(client, respx_mock):
    respx_mock.post(f"{BASE_URL}/payments").mock(
        return_value=httpx.Response(200, json={"success": False, "message": "no"})
    )

    with pytest.raises(ValidationError, match="Invalid response from payment creation"):
        await client.payments.create(VALID_CREATE)


async def test_transaction_status(client, respx_mock):
    transaction = {"id": "tx_1", "status": "completed", "fiat_total_amount": 10.5}
    respx_mock.get(f"{BASE_URL}/payment/status/tx_1").mock(
        return_value=httpx.Response(200, json={"success": True, "data": transaction})
    )

    result = await client.payments.get_transaction_status("tx_1")

    assert result.id == "tx_1"
    assert result.fiat_total_amount == 10.5
    assert client.payments.is_completed(result)


async def test_payment_link_status(client, respx_mock):
    respx_mock.get(f"{BASE_URL}/payment-link/status/pl_1").mock(
        return_value=httpx.Response(200, json={"success": True, "data": PAYMENT})
    )

    payment = await client.payments.get_payment_link_status("pl_1")

    assert client.payments.is_pending(payment)


@pytest.mark.parametrize("bad_id", ["", None, 42])
async def test_status_lookups_require_string_ids(client, bad_id):
    with pytest.raises(ValidationError):
        await client.payments.get_transaction_status(bad_id)
    with pytest.raises(ValidationError):
        await client.payments.get_payment_link_status(bad_id)


async def test_list_passes_filters(client, respx_mock):
    route = respx_mock.get(f"{BASE_URL}/payments").mock(
        return_value=httpx.Response(
            200,
            json={
                "success": True,
                "data": {"payments": [PAYMENT], "has_more": True, "count": 1},
            },
        )
    )

    result = await client.payments.list(
        {"status": "completed", "per_page": 5, "from_date": "2024-01-01", "page_token": None}
    )

    assert result.has_more is True
    assert result.payments[0].id == "1"
    params = route.calls.last.request.url.params
    assert params["status"] == "completed"
    assert params["per_page"] == "5"
    assert params["from_date"] == "2024-01-01"
    assert "page_token" not in params


@pytest.mark.parametrize(
    "params",
    [
        {"page": 0},
        {"per_page": 101},
        {"limit": 0},
        {"status": "unknown"},
        {"currency": "EURO"},
        {"from_date": "2024-13-01"},
        {"to_date": "01/02/2024"},
        {"customer_email": "bad@"},
    ],
)
async def test_list_rejects_bad_params(client, params):
    with pytest.raises(ValidationError) as exc_info:
        await client.payments.list(params)
    assert set(params) <= set(exc_info.value.errors)


async def test_get_by_reference(client, respx_mock):
    route = respx_mock.get(f"{BASE_URL}/payments").mock(
        side_effect=[
            httpx.Response(200, json={"success": True, "data": {"payments": [PAYMENT]}}),
            httpx.Response(200, json={"success": True, "data": {"payments": []}}),
        ]
    )

    assert (await client.payments.get_by_reference("ref-123")).id == "1"
    assert await client.payments.get_by_reference("missing") is None
    assert route.calls[0].request.url.params["reference"] == "ref-123"


async def test_conversion_rate(client, respx_mock):
    route = respx_mock.get(f"{BASE_URL}/conversion-rate").mock(
        return_value=httpx.Response(200, json={"success": True, "data": {"rate": "0.98"}})
    )

    rate = await client.payments.get_conversion_rate("POL", "USDT", "EUR", "card")

    assert rate == ConversionRate(rate="0.98")
    params = route.calls.last.request.url.params
    assert dict(params) == {
        "network": "POL",
        "commodity": "USDT",
        "fiat_currency": "EUR",
        "payment_method": "card",
    }


async def test_conversion_rate_requires_codes(client):
    with pytest.raises(ValidationError) as exc_info:
        await client.payments.get_conversion_rate("", "USDT", "EUR")
    assert "network" in exc_info.value.errors


async def test_status_predicates(client):
    payment = {"id": "1", "status": "completed"}
    assert client.payments.is_completed(payment)
    assert not client.payments.is_pending(payment)
    assert not client.payments.is_failed(payment)
    assert not client.payments.is_expired(payment)
    assert client.payments.is_expired(Payment(id="2", status="expired"))
