import json

import pytest

from bundle_sim.exceptions import SerializationError
from bundle_sim.request import (
    SIMULATE_BUNDLE_METHOD,
    build_simulation_request,
    encode_block_id,
    encode_request,
)
from bundle_sim.types import (
    AccountOverride,
    BlockOverrides,
    BuiltinTracer,
    CallRequest,
    EmulateOptions,
    TracingOptions,
)


def _params(request) -> list:
    return json.loads(encode_request(request))["params"]


def test_build_simulation_request(call_request):
    request = build_simulation_request([call_request], block_id="pending")
    payload = json.loads(encode_request(request))
    assert payload["jsonrpc"] == "2.0"
    assert payload["method"] == SIMULATE_BUNDLE_METHOD == "cgp_simulateTransactionsBundle"
    assert payload["id"] == 0
    assert payload["params"][1] == "pending"


def test_build_simulation_request_custom_id(call_request):
    request = build_simulation_request([call_request], request_id=42)
    assert json.loads(encode_request(request))["id"] == 42


def test_params_all_options_unset(call_request):
    params = _params(build_simulation_request([call_request]))
    assert len(params) == 5
    assert params[1:] == [None, None, None, None]


def test_params_order(call_request, sender):
    options = EmulateOptions(
        tracing_options=TracingOptions.for_tracer(BuiltinTracer.CALL),
        state_overrides={sender: AccountOverride(balance=1)},
        block_overrides=BlockOverrides(number=100),
    )
    params = _params(build_simulation_request([call_request], "latest", options))
    transactions, block_id, block_overrides, state_overrides, tracing_options = params
    assert len(transactions) == 1
    assert block_id == "latest"
    assert block_overrides == {"number": "0x64"}
    assert state_overrides == {sender: {"balance": "0x1"}}
    assert tracing_options == {"tracer": "callTracer"}


def test_params_keep_null_slots_between_set_options(call_request):
    options = EmulateOptions(tracing_options=TracingOptions.for_tracer(BuiltinTracer.PRESTATE))
    params = _params(build_simulation_request([call_request], None, options))
    assert params[1] is None
    assert params[2] is None
    assert params[3] is None
    assert params[4] == {"tracer": "prestateTracer"}


def test_emulate_options_omit_unset_keys_but_tuple_keeps_nulls(call_request, sender):
    options = EmulateOptions(state_overrides={sender: AccountOverride(balance=10)})

    # Standalone, the unset options are not there at all.
    assert options.model_dump() == {"stateOverrides": {sender: {"balance": "0xa"}}}
    assert json.loads(options.model_dump_json()) == {
        "stateOverrides": {sender: {"balance": "0xa"}}
    }

    # In the request, they keep their slots as nulls.
    params = _params(build_simulation_request([call_request], None, options))
    assert params[2] is None
    assert params[3] == {sender: {"balance": "0xa"}}
    assert params[4] is None


def test_emulate_options_empty():
    assert EmulateOptions().model_dump() == {}


def test_options_as_dict(call_request, sender):
    options = {
        "tracingOptions": {"tracer": "callTracer", "tracerConfig": {"onlyTopCall": True}},
        "stateOverrides": {sender: {"balance": "0x5af3107a400fff0"}},
    }
    params = _params(build_simulation_request([call_request], "pending", options))
    assert params[3] == {sender: {"balance": "0x5af3107a400fff0"}}
    assert params[4] == {"tracer": "callTracer", "tracerConfig": {"onlyTopCall": True}}


def test_empty_state_overrides_is_not_null(call_request):
    options = EmulateOptions(state_overrides={})
    assert _params(build_simulation_request([call_request], None, options))[3] == {}


def test_transactions_pass_through(call_request):
    transactions = _params(build_simulation_request([call_request]))[0]
    assert transactions == [
        {
            "accessList": [],
            "from": call_request["from"],
            "gasLimit": "0x092a1b00000000",
            "value": "0x0",
            "data": "",
        }
    ]


def test_transactions_order(sender):
    calls = [CallRequest(sender=sender, nonce=i) for i in range(3)]
    transactions = _params(build_simulation_request(calls))[0]
    assert [tx["nonce"] for tx in transactions] == ["0x0", "0x1", "0x2"]


def test_empty_bundle():
    params = _params(build_simulation_request([]))
    assert params == [[], None, None, None, None]


def test_invalid_transaction():
    with pytest.raises(SerializationError, match="Unable to build simulation request"):
        build_simulation_request(["not a call request"])


def test_invalid_override_value(call_request, sender):
    options = {"stateOverrides": {sender: {"balance": "lots"}}}
    with pytest.raises(SerializationError):
        build_simulation_request([call_request], options=options)


def test_unserializable_extra_value(call_request):
    call_request["custom"] = object()
    with pytest.raises(SerializationError):
        build_simulation_request([call_request])


def test_invalid_block_id(call_request):
    with pytest.raises(SerializationError):
        build_simulation_request([call_request], block_id=1.5)  # type: ignore[arg-type]


@pytest.mark.parametrize(
    "block_id,expected",
    [
        (None, None),
        (0, "0x0"),
        (17_000_000, "0x1036640"),
        ("pending", "pending"),
        ("finalized", "finalized"),
        (b"\x12\x34", "0x1234"),
        ({"blockHash": "0xabc"}, {"blockHash": "0xabc"}),
    ],
)
def test_encode_block_id(block_id, expected):
    assert encode_block_id(block_id) == expected


@pytest.mark.parametrize("block_id", (True, -1))
def test_encode_block_id_invalid(block_id):
    with pytest.raises((TypeError, ValueError)):
        encode_block_id(block_id)
