from collections.abc import Iterable
from typing import Any, Optional, Union

from eth_utils import to_hex
from pydantic import ValidationError
from pydantic_core import PydanticSerializationError

from bundle_sim.exceptions import SerializationError
from bundle_sim.logging import logger
from bundle_sim.types.basic import BlockID
from bundle_sim.types.rpc import DEFAULT_REQUEST_ID, RPCRequest
from bundle_sim.types.simulation import EmulateOptions
from bundle_sim.types.transactions import CallRequest
from bundle_sim.utils.misc import to_quantity

SIMULATE_BUNDLE_METHOD = "cgp_simulateTransactionsBundle"

SimulationParams = tuple[
    list[dict[str, Any]],
    Optional[Any],
    Optional[dict[str, Any]],
    Optional[dict[str, Any]],
    Optional[dict[str, Any]],
]
"""
``[transactions, blockId, blockOverrides, stateOverrides, tracingOptions]``.
The node reads these by position: the order is part of the wire format.
"""


def build_simulation_request(
    transactions: Iterable[Union[CallRequest, dict]],
    block_id: Optional[BlockID] = None,
    options: Optional[Union[EmulateOptions, dict]] = None,
    request_id: int = DEFAULT_REQUEST_ID,
) -> RPCRequest[SimulationParams]:
    """
    Build the ``cgp_simulateTransactionsBundle`` request.

    Args:
        transactions (Iterable[Union[CallRequest, dict]]): The bundle, in execution order.
        block_id (Optional[BlockID]): The block whose state to simulate on.
          Defaults to the node's choice.
        options (Optional[Union[EmulateOptions, dict]]): Overrides and tracing.
        request_id (int): The JSON-RPC ``id``. Defaults to ``0``.

    Raises:
        :class:`~bundle_sim.exceptions.SerializationError`: When any part of the
          bundle or options cannot be represented as JSON.

    Returns:
        :class:`~bundle_sim.types.rpc.RPCRequest`
    """
    try:
        calls = [CallRequest.model_validate(tx) for tx in transactions]
        emulate_options = EmulateOptions.model_validate(options or {})
        params = _create_params(calls, block_id, emulate_options)
        request = RPCRequest[SimulationParams](
            method=SIMULATE_BUNDLE_METHOD, params=params, id=request_id
        )
    except (ValidationError, PydanticSerializationError, TypeError, ValueError) as err:
        raise SerializationError(f"Unable to build simulation request: {err}") from err

    logger.debug(
        f"Built '{SIMULATE_BUNDLE_METHOD}' request (id={request_id}) "
        f"for {len(calls)} transaction(s)."
    )
    return request


def _create_params(
    calls: list[CallRequest], block_id: Optional[BlockID], options: EmulateOptions
) -> SimulationParams:
    # Every slot is always present. An unset option is an explicit null,
    # never a missing element.
    state_overrides = (
        None
        if options.state_overrides is None
        else {
            address: override.model_dump()
            for address, override in options.state_overrides.items()
        }
    )
    block_overrides = (
        None if options.block_overrides is None else options.block_overrides.model_dump()
    )
    tracing_options = (
        None if options.tracing_options is None else options.tracing_options.model_dump()
    )
    return (
        [call.model_dump() for call in calls],
        encode_block_id(block_id),
        block_overrides,
        state_overrides,
        tracing_options,
    )


def encode_block_id(block_id: Optional[BlockID]) -> Optional[Any]:
    """
    Encode a block ID for the wire: numbers become hex quantities,
    hashes become hex strings, tags and EIP-1898 objects pass through.

    Raises:
        TypeError: When the value is not a block ID.
    """
    if block_id is None:
        return None

    elif isinstance(block_id, bool):
        # ``bool`` is an ``int``, but never a block number.
        raise TypeError(f"Invalid block ID '{block_id}'.")

    elif isinstance(block_id, int):
        if block_id < 0:
            raise ValueError(f"Block number must be non-negative, got '{block_id}'.")

        return to_quantity(block_id)

    elif isinstance(block_id, bytes):
        return to_hex(block_id)

    elif isinstance(block_id, (str, dict)):
        return block_id

    raise TypeError(f"Invalid block ID type '{type(block_id).__name__}'.")


def encode_request(request: RPCRequest) -> str:
    """
    Render a request as JSON text, keeping ``null`` positional parameters.

    Raises:
        :class:`~bundle_sim.exceptions.SerializationError`: When the request
          holds a value with no JSON form.
    """
    try:
        return request.model_dump_json()
    except (PydanticSerializationError, TypeError, ValueError) as err:
        raise SerializationError(f"Unable to encode request: {err}") from err
