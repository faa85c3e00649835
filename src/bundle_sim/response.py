from typing import Optional, Union

from pydantic import ValidationError

from bundle_sim.exceptions import DecodeError, RPCError
from bundle_sim.logging import logger
from bundle_sim.types.rpc import RPCErrorResponse, RPCResponse
from bundle_sim.types.simulation import TransactionSimulationInfo

SimulationResponse = RPCResponse[TransactionSimulationInfo]


def decode_simulation_response(
    body: Union[str, bytes], bundle_size: Optional[int] = None
) -> SimulationResponse:
    """
    Decode the body of a ``cgp_simulateTransactionsBundle`` response.

    Missing ``trieHashBefore`` / ``trieHashAfter`` decode to ``"0x"``.
    A missing ``traceDebugInfo`` decodes to ``None``. The response ``id``
    is not checked against the request. Only receipts are counted against
    the bundle size; one transaction may emit any number of logs.

    Args:
        body (Union[str, bytes]): The raw response body.
        bundle_size (Optional[int]): The number of transactions sent. When
          given, a response with more receipts than that is rejected.

    Raises:
        :class:`~bundle_sim.exceptions.RPCError`: When the node returned an
          ``error`` object.
        :class:`~bundle_sim.exceptions.DecodeError`: When the body is not valid
          JSON or not shaped like a simulation response.

    Returns:
        :class:`~bundle_sim.types.rpc.RPCResponse` of
        :class:`~bundle_sim.types.simulation.TransactionSimulationInfo`.
    """
    try:
        response = SimulationResponse.model_validate_json(body)
    except ValidationError as err:
        raise _get_decode_error(body, err) from err

    info = response.result
    if bundle_size is not None and len(info.tx_receipts) > bundle_size:
        raise DecodeError(
            f"Received {len(info.tx_receipts)} receipts "
            f"for a bundle of {bundle_size} transaction(s)."
        )

    if not info.is_state_unchanged:
        logger.warning(
            "Simulation reported a state change "
            f"(trieHashBefore={info.trie_hash_before}, trieHashAfter={info.trie_hash_after})."
        )

    return response


def _get_decode_error(body: Union[str, bytes], err: ValidationError) -> DecodeError:
    try:
        error_response = RPCErrorResponse.model_validate_json(body)
    except ValidationError:
        return DecodeError(f"Invalid simulation response: {err}")

    error = error_response.error
    return RPCError(error.message, code=error.code, data=error.data)
