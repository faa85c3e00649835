from typing import Annotated, Any, Optional

from pydantic import BeforeValidator, Field, StrictInt

from bundle_sim.types.overrides import AccountOverride, BlockOverrides
from bundle_sim.types.trace import TracingOptions
from bundle_sim.utils.basemodel import BaseModel
from bundle_sim.utils.misc import to_int

EMPTY_TRIE_HASH = "0x"
"""
The trie hash a read-only simulation reports before and after execution.
"""


class EmulateOptions(BaseModel):
    """
    Optional overrides and tracing for a bundle simulation.
    Unset options are left out of this model's own JSON.
    """

    tracing_options: Optional[TracingOptions] = Field(None, alias="tracingOptions")
    """
    Debug tracing to run. When unset, no traces are returned.
    """

    state_overrides: Optional[dict[str, AccountOverride]] = Field(None, alias="stateOverrides")
    """
    Account address to state override. Use this to fund the bundle's sender.
    """

    block_overrides: Optional[BlockOverrides] = Field(None, alias="blockOverrides")
    """
    Block context overrides.
    """


class TransactionSimulationInfo(BaseModel):
    """
    The result of ``cgp_simulateTransactionsBundle``.
    """

    trace_debug_info: Optional[list[Any]] = Field(None, alias="traceDebugInfo")
    """
    One trace per call. ``None`` when no tracer was requested, which is not
    the same as an empty list (a tracer ran but produced nothing).
    """

    # Hex quantities are parsed first; booleans and numeric strings are rejected.
    total_gas_used: Annotated[StrictInt, BeforeValidator(to_int)] = Field(
        alias="totalGasUsed", ge=0
    )

    trie_hash_after: str = Field(EMPTY_TRIE_HASH, alias="trieHashAfter")
    """
    Always ``"0x"``: the state was not persisted.
    """

    trie_hash_before: str = Field(EMPTY_TRIE_HASH, alias="trieHashBefore")
    """
    Always ``"0x"``: the state was not persisted.
    """

    tx_logs: list[Any] = Field(alias="txLogs")
    tx_receipts: list[Any] = Field(alias="txReceipts")

    @property
    def is_state_unchanged(self) -> bool:
        return self.trie_hash_before == EMPTY_TRIE_HASH and self.trie_hash_after == EMPTY_TRIE_HASH
