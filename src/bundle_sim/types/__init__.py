from bundle_sim.types.basic import BlockID, BlockTag, HexQuantity
from bundle_sim.types.overrides import AccountOverride, BlockOverrides, StateOverride
from bundle_sim.types.rpc import (
    DEFAULT_REQUEST_ID,
    JSONRPC_VERSION,
    RPCErrorDetail,
    RPCErrorResponse,
    RPCRequest,
    RPCResponse,
)
from bundle_sim.types.simulation import (
    EMPTY_TRIE_HASH,
    EmulateOptions,
    TransactionSimulationInfo,
)
from bundle_sim.types.trace import BuiltinTracer, TracingOptions
from bundle_sim.types.transactions import CallRequest

__all__ = [
    "AccountOverride",
    "BlockID",
    "BlockOverrides",
    "BlockTag",
    "BuiltinTracer",
    "CallRequest",
    "DEFAULT_REQUEST_ID",
    "EMPTY_TRIE_HASH",
    "EmulateOptions",
    "HexQuantity",
    "JSONRPC_VERSION",
    "RPCErrorDetail",
    "RPCErrorResponse",
    "RPCRequest",
    "RPCResponse",
    "StateOverride",
    "TracingOptions",
    "TransactionSimulationInfo",
]
