import pytest
from fastapi.testclient import TestClient

from zcash_gateway.core.config import OperationSettings, SecuritySettings, Settings, get_settings
from zcash_gateway.core.container import ApplicationContainer, get_container
from zcash_gateway.main import create_app
from zcash_gateway.modules.common import NetworkError, RPCError

API_KEY = "test-api-key-12345"
OPID = "opid-7f1e"
TXID = "5d1c4b0e8a6f2d9c3b7e1a4f0c8d2b6e9a3f7c1d5b0e4a8c2f6d9b3e7a1c5f0d"


@pytest.fixture
def container(rpc):
    settings = Settings(
        security=SecuritySettings(api_key=API_KEY),
        operations=OperationSettings(poll_interval_ms=0, max_attempts=3),
    )
    return ApplicationContainer(settings=settings, rpc=rpc)


@pytest.fixture
def app(container):
    app = create_app()
    app.dependency_overrides[get_container] = lambda: container
    app.dependency_overrides[get_settings] = lambda: container.settings
    return app


@pytest.fixture
def client(app):
    return TestClient(app, headers={"x-api-key": API_KEY})


def test_health_does_not_require_api_key(app):
    response = TestClient(app).get("/health")

    assert response.status_code == 200
    assert response.json()["success"] is True
    assert response.json()["message"] == "ZCash API Server is running"


@pytest.mark.parametrize("headers", [{}, {"x-api-key": "wrong"}, {"x-api-key": ""}])
def test_api_routes_require_matching_key(app, rpc, headers):
    response = TestClient(app, headers=headers).get("/api/zcash/blockchain/blockcount")

    assert response.status_code == 401
    assert response.json() == {"success": False, "error": "Unauthorized: Invalid or missing API key"}
    assert rpc.calls == []


def test_unknown_route_uses_error_envelope(client):
    response = client.get("/api/zcash/nope")

    assert response.status_code == 404
    assert response.json()["success"] is False


def test_z_sendmany_returns_operation_id(client, rpc):
    rpc.reply("z_sendmany", OPID)

    response = client.post(
        "/api/zcash/transaction/z_sendmany",
        json={
            "fromAddress": "zs1sender",
            "recipients": [{"address": "zs1dest", "amount": 0.5, "memo": "cafe"}],
            "fee": 0.0001,
        },
    )

    assert response.status_code == 200
    assert response.json() == {"success": True, "data": {"operationId": OPID}}
    assert rpc.calls_to("z_sendmany") == [
        ["zs1sender", [{"address": "zs1dest", "amount": 0.5, "memo": "cafe"}], 10, 0.0001]
    ]


def test_z_sendmany_forwards_privacy_policy(client, rpc):
    rpc.reply("z_sendmany", OPID)

    client.post(
        "/api/zcash/transaction/z_sendmany",
        json={
            "fromAddress": "zs1sender",
            "recipients": [{"address": "t1dest", "amount": 1}],
            "privacyPolicy": "AllowRevealedRecipients",
        },
    )

    assert rpc.calls_to("z_sendmany")[0][2:] == [10, None, "AllowRevealedRecipients"]


@pytest.mark.parametrize(
    "body, message",
    [
        ({"recipients": [{"address": "zs1dest", "amount": 1}]}, "fromAddress and recipients array are required"),
        ({"fromAddress": "zs1sender", "recipients": []}, "fromAddress and recipients array are required"),
        ({"fromAddress": "zs1sender", "recipients": [{"amount": 1}]}, "Each recipient must have address and amount"),
    ],
)
def test_z_sendmany_validation_errors(client, rpc, body, message):
    response = client.post("/api/zcash/transaction/z_sendmany", json=body)

    assert response.status_code == 400
    assert response.json() == {"success": False, "error": message}
    assert rpc.calls == []


def test_unknown_privacy_policy_is_bad_request(client, rpc):
    response = client.post(
        "/api/zcash/transaction/z_sendmany",
        json={"fromAddress": "zs1sender", "recipients": [{"address": "zs1dest", "amount": 1}], "privacyPolicy": "Max"},
    )

    assert response.status_code == 400
    assert rpc.calls == []


@pytest.mark.parametrize("amount", ["NaN", "Infinity", "-Infinity"])
def test_z_sendmany_rejects_non_finite_amount(client, rpc, amount):
    body = '{"fromAddress": "zs1sender", "recipients": [{"address": "zs1dest", "amount": ' + amount + "}]}"

    response = client.post(
        "/api/zcash/transaction/z_sendmany",
        content=body,
        headers={"content-type": "application/json"},
    )

    assert response.status_code == 400
    assert response.json()["success"] is False
    assert rpc.calls == []


def test_operation_status_without_body_lists_everything(client, rpc, status_entry):
    rpc.reply("z_getoperationstatus", [status_entry(OPID, "executing")])

    response = client.post("/api/zcash/transaction/z_getoperationstatus")

    assert response.status_code == 200
    assert response.json()["data"][0]["status"] == "executing"
    assert rpc.calls == [("z_getoperationstatus", [])]


def test_operation_result_with_ids(client, rpc, status_entry):
    rpc.reply("z_getoperationresult", [status_entry(OPID, "success", result={"txid": TXID})])

    response = client.post("/api/zcash/transaction/z_getoperationresult", json={"operationIds": [OPID]})

    assert response.json()["data"][0]["result"] == {"txid": TXID}
    assert rpc.calls == [("z_getoperationresult", [[OPID]])]


def test_operation_ids_must_be_a_list(client, rpc):
    response = client.post("/api/zcash/transaction/z_getoperationstatus", json={"operationIds": OPID})

    assert response.status_code == 400
    assert rpc.calls == []


def test_wait_returns_successful_operation(client, rpc, status_entry):
    rpc.reply_sequence(
        "z_getoperationstatus",
        [[status_entry(OPID, "executing")], [status_entry(OPID, "success", result={"txid": TXID})]],
    )

    response = client.post(f"/api/zcash/transaction/operations/{OPID}/wait")

    assert response.status_code == 200
    data = response.json()["data"]
    assert data["status"] == "success"
    assert data["result"] == {"txid": TXID}
    assert data["creation_time"] == 1700000000


def test_wait_reports_failed_operation(client, rpc, status_entry):
    rpc.reply(
        "z_getoperationstatus",
        [status_entry(OPID, "failed", error={"code": -6, "message": "insufficient funds"})],
    )

    response = client.post(f"/api/zcash/transaction/operations/{OPID}/wait", json={"maxAttempts": 2})

    assert response.status_code == 422
    assert response.json() == {"success": False, "error": "insufficient funds"}


def test_wait_times_out(client, rpc, status_entry):
    rpc.reply("z_getoperationstatus", [status_entry(OPID, "queued")])

    response = client.post(f"/api/zcash/transaction/operations/{OPID}/wait", json={"pollIntervalMs": 0})

    assert response.status_code == 504
    assert len(rpc.calls) == 3


@pytest.mark.parametrize("body", [{"maxAttempts": 151}, {"pollIntervalMs": 2001}, {"maxAttempts": 0}])
def test_wait_limits_are_bounded(client, rpc, body):
    response = client.post(f"/api/zcash/transaction/operations/{OPID}/wait", json=body)

    assert response.status_code == 400
    assert rpc.calls == []


def test_balance_for_account(client, rpc):
    rpc.reply(
        "z_getbalanceforaccount",
        {
            "pools": {"transparent": {"valueZat": 100000000}, "sapling": {"valueZat": 50000000}},
            "minimum_confirmations": 1,
        },
    )

    response = client.post("/api/zcash/wallet/getbalanceforaccount", json={"account": 0, "asOfHeight": 2000000})

    assert response.status_code == 200
    assert response.json()["data"] == {
        "pools": {"transparent": {"valueZat": 100000000}, "sapling": {"valueZat": 50000000}},
        "minimum_confirmations": 1,
        "total": 1.5,
    }
    assert rpc.calls == [("z_getbalanceforaccount", [0, 2000000])]


def test_balance_for_account_requires_account(client, rpc):
    response = client.post("/api/zcash/wallet/getbalanceforaccount", json={})

    assert response.status_code == 400
    assert response.json() == {"success": False, "error": "Account number is required"}
    assert rpc.calls == []


def test_new_account_includes_its_address(client, rpc):
    rpc.reply("z_getnewaccount", {"account": 2})
    rpc.reply(
        "z_getaddressforaccount",
        {"account": 2, "diversifier_index": 0, "receiver_types": ["p2pkh", "sapling", "orchard"], "address": "u1qx"},
    )

    response = client.post("/api/zcash/wallet/newaccount")

    assert response.json()["data"] == {
        "account": 2,
        "address": "u1qx",
        "receiverTypes": ["p2pkh", "sapling", "orchard"],
    }
    assert rpc.calls_to("z_getaddressforaccount") == [[2]]


def test_address_for_account_with_diversifier(client, rpc):
    rpc.reply("z_getaddressforaccount", {"account": 1, "receiver_types": ["orchard"], "address": "u1zz"})

    response = client.post(
        "/api/zcash/wallet/getaddressforaccount",
        json={"account": 1, "diversifierIndex": 7, "receiverTypes": ["orchard"]},
    )

    assert response.json()["data"]["address"] == "u1zz"
    assert rpc.calls_to("z_getaddressforaccount") == [[1, [7]]]


def test_openapi_documents_error_envelope(app):
    schema = TestClient(app).get("/openapi.json").json()

    responses = schema["paths"]["/api/zcash/wallet/getbalanceforaccount"]["post"]["responses"]
    assert responses["401"]["content"]["application/json"]["schema"] == {"$ref": "#/components/schemas/ErrorResponse"}
    assert "ErrorResponse" in schema["components"]["schemas"]


def test_wallet_balance_defaults(client, rpc):
    rpc.reply("getbalance", 3.25)

    response = client.get("/api/zcash/wallet/balance")

    assert response.json()["data"] == {"balance": 3.25, "minConfirmations": 1}
    assert rpc.calls == [("getbalance", ["*", 1])]


def test_block_hash_requires_numeric_height(client, rpc):
    response = client.get("/api/zcash/blockchain/blockhash/tip")

    assert response.status_code == 400
    assert response.json()["error"] == "Valid block height is required"
    assert rpc.calls == []


def test_pass_through_parameters(client, rpc):
    rpc.reply("listtransactions", [])
    rpc.reply("getrawtransaction", {"txid": TXID})
    rpc.reply("estimatefee", 0.0001)
    rpc.reply("listunspent", [])

    client.get("/api/zcash/transactions", params={"count": 20})
    client.get(f"/api/zcash/transaction/{TXID}/raw", params={"verbose": "true"})
    fee = client.get("/api/zcash/fee/estimate").json()["data"]
    client.get("/api/zcash/wallet/unspent", params={"minConfirmations": 0})

    assert fee == {"fee": 0.0001, "nblocks": 6}
    assert rpc.calls == [
        ("listtransactions", ["*", 20, 0]),
        ("getrawtransaction", [TXID, 1]),
        ("estimatefee", [6]),
        ("listunspent", [0, 9999999]),
    ]


def test_send_to_address_requires_address_and_amount(client, rpc):
    response = client.post("/api/zcash/transaction/send", json={"address": "t1dest"})

    assert response.status_code == 400
    assert response.json()["error"] == "Address and amount are required"
    assert rpc.calls == []


def test_send_to_address(client, rpc):
    rpc.reply("sendtoaddress", TXID)

    response = client.post("/api/zcash/transaction/send", json={"address": "t1dest", "amount": 0.25})

    assert response.json() == {"success": True, "data": {"txid": TXID}}
    assert rpc.calls == [("sendtoaddress", ["t1dest", 0.25, ""])]


@pytest.mark.parametrize(
    "error, status_code",
    [(RPCError("RPC Error: Method not found", code=-32601), 502), (NetworkError("Network Error: refused"), 503)],
)
def test_node_failures_map_to_gateway_statuses(client, rpc, error, status_code):
    rpc.reply("getnetworkinfo", error)

    response = client.get("/api/zcash/network/info")

    assert response.status_code == status_code
    assert response.json() == {"success": False, "error": str(error)}
