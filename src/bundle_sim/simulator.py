"""
Simulate transaction bundles with ``cgp_simulateTransactionsBundle``.

A call is one linear pass: build the request, POST it once, decode the body.
Nothing is kept between calls, so calls may run concurrently.
"""

from collections.abc import Iterable
from typing import Optional, Union

from bundle_sim.config import SimulatorConfig
from bundle_sim.logging import logger, sanitize_url
from bundle_sim.request import build_simulation_request, encode_request
from bundle_sim.response import SimulationResponse, decode_simulation_response
from bundle_sim.transport import AsyncHTTPTransport, HTTPTransport
from bundle_sim.types.basic import BlockID
from bundle_sim.types.rpc import DEFAULT_REQUEST_ID
from bundle_sim.types.simulation import EmulateOptions
from bundle_sim.types.transactions import CallRequest

Transactions = Iterable[Union[CallRequest, dict]]


async def simulate_transactions_bundle(
    rpc_url: str,
    transactions: Transactions,
    block_id: Optional[BlockID] = None,
    options: Optional[Union[EmulateOptions, dict]] = None,
    request_id: int = DEFAULT_REQUEST_ID,
    transport: Optional[AsyncHTTPTransport] = None,
) -> SimulationResponse:
    """
    Simulate a bundle of transactions on top of the given block's state.

    Usage example::

        response = await simulate_transactions_bundle(
            "http://localhost:8545",
            [{"from": sender, "to": None, "value": "0x0", "data": bytecode}],
            block_id="pending",
            options=EmulateOptions(
                tracing_options=TracingOptions.for_tracer(BuiltinTracer.CALL),
                state_overrides={sender: AccountOverride(balance=10**18)},
            ),
        )
        gas = response.result.total_gas_used

    Args:
        rpc_url (str): The node's HTTP endpoint.
        transactions (Iterable[Union[CallRequest, dict]]): The bundle, in order.
        block_id (Optional[BlockID]): The block to simulate on.
        options (Optional[Union[EmulateOptions, dict]]): Overrides and tracing.
        request_id (int): The JSON-RPC ``id``. Defaults to ``0``.
        transport (Optional[AsyncHTTPTransport]): The transport to use.
          Defaults to a new one owning its own client.

    Raises:
        :class:`~bundle_sim.exceptions.SerializationError`: When the request
          cannot be built.
        :class:`~bundle_sim.exceptions.TransportError`: When the HTTP round
          trip fails.
        :class:`~bundle_sim.exceptions.DecodeError`: When the response is invalid.

    Returns:
        :class:`~bundle_sim.types.rpc.RPCResponse` of
        :class:`~bundle_sim.types.simulation.TransactionSimulationInfo`.
    """
    request = build_simulation_request(transactions, block_id, options, request_id=request_id)
    body = encode_request(request)
    transport = transport or AsyncHTTPTransport()
    raw_response = await transport.send(rpc_url, body)
    return _decode(rpc_url, raw_response, len(request.params[0]))


def simulate_transactions_bundle_sync(
    rpc_url: str,
    transactions: Transactions,
    block_id: Optional[BlockID] = None,
    options: Optional[Union[EmulateOptions, dict]] = None,
    request_id: int = DEFAULT_REQUEST_ID,
    transport: Optional[HTTPTransport] = None,
) -> SimulationResponse:
    """
    The blocking counterpart of :func:`simulate_transactions_bundle`.
    """
    request = build_simulation_request(transactions, block_id, options, request_id=request_id)
    body = encode_request(request)
    transport = transport or HTTPTransport()
    raw_response = transport.send(rpc_url, body)
    return _decode(rpc_url, raw_response, len(request.params[0]))


def _decode(rpc_url: str, raw_response: str, bundle_size: int) -> SimulationResponse:
    response = decode_simulation_response(raw_response, bundle_size=bundle_size)
    logger.debug(
        f"Simulated {bundle_size} transaction(s) on '{sanitize_url(rpc_url)}': "
        f"gas used {response.result.total_gas_used}, "
        f"{len(response.result.tx_receipts)} receipt(s)."
    )
    return response


class BundleSimulator:
    """
    Simulates bundles against the node in a :class:`~bundle_sim.config.SimulatorConfig`.

    Usage example::

        simulator = BundleSimulator(SimulatorConfig(uri="https://node.example"))
        info = simulator.simulate_bundle(txs, block_id="latest").result

    Args:
        config (Optional[SimulatorConfig]): The settings. Defaults to
          ``SimulatorConfig()``, which reads ``BUNDLE_SIM_*`` environment variables.
    """

    def __init__(self, config: Optional[SimulatorConfig] = None):
        self.config = config or SimulatorConfig()

    @property
    def uri(self) -> str:
        return self.config.uri

    def simulate_bundle(
        self,
        transactions: Transactions,
        block_id: Optional[BlockID] = None,
        options: Optional[Union[EmulateOptions, dict]] = None,
    ) -> SimulationResponse:
        return simulate_transactions_bundle_sync(
            self.uri,
            transactions,
            block_id=block_id,
            options=options,
            request_id=self.config.request_id,
            transport=HTTPTransport(headers=self.config.request_headers),
        )

    async def simulate_bundle_async(
        self,
        transactions: Transactions,
        block_id: Optional[BlockID] = None,
        options: Optional[Union[EmulateOptions, dict]] = None,
    ) -> SimulationResponse:
        return await simulate_transactions_bundle(
            self.uri,
            transactions,
            block_id=block_id,
            options=options,
            request_id=self.config.request_id,
            transport=AsyncHTTPTransport(headers=self.config.request_headers),
        )
