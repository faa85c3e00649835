from bundle_sim.config import SimulatorConfig
from bundle_sim.exceptions import (
    BundleSimException,
    ConfigError,
    DecodeError,
    RPCError,
    SerializationError,
    TransportError,
)
from bundle_sim.request import SIMULATE_BUNDLE_METHOD, build_simulation_request, encode_request
from bundle_sim.response import decode_simulation_response
from bundle_sim.simulator import (
    BundleSimulator,
    simulate_transactions_bundle,
    simulate_transactions_bundle_sync,
)
from bundle_sim.transport import AsyncHTTPTransport, HTTPTransport
from bundle_sim.types import (
    AccountOverride,
    BlockOverrides,
    BuiltinTracer,
    CallRequest,
    EmulateOptions,
    TracingOptions,
    TransactionSimulationInfo,
)

__all__ = [
    "AccountOverride",
    "AsyncHTTPTransport",
    "BlockOverrides",
    "BuiltinTracer",
    "BundleSimException",
    "BundleSimulator",
    "CallRequest",
    "ConfigError",
    "DecodeError",
    "EmulateOptions",
    "HTTPTransport",
    "RPCError",
    "SIMULATE_BUNDLE_METHOD",
    "SerializationError",
    "SimulatorConfig",
    "TracingOptions",
    "TransactionSimulationInfo",
    "TransportError",
    "build_simulation_request",
    "decode_simulation_response",
    "encode_request",
    "simulate_transactions_bundle",
    "simulate_transactions_bundle_sync",
]
