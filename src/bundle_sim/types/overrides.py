from typing import Optional

from eth_typing import HexStr
from pydantic import Field

from bundle_sim.types.basic import HexQuantity
from bundle_sim.utils.basemodel import PassThroughModel


class AccountOverride(PassThroughModel):
    """
    Replaces parts of an account's state for the duration of the simulation.
    """

    balance: Optional[HexQuantity] = None
    """
    The balance, in wei. Useful for funding the sender of a bundle.
    """

    nonce: Optional[HexQuantity] = None
    code: Optional[HexStr] = None

    state: Optional[dict[HexStr, HexStr]] = None
    """
    Replaces the whole storage of the account.
    """

    state_diff: Optional[dict[HexStr, HexStr]] = Field(None, alias="stateDiff")
    """
    Replaces only the given storage slots.
    """


StateOverride = dict[str, AccountOverride]
"""
Account address to the override applied to that account.
"""


class BlockOverrides(PassThroughModel):
    """
    Replaces fields of the block context the bundle executes in.
    """

    number: Optional[HexQuantity] = None
    difficulty: Optional[HexQuantity] = None
    time: Optional[HexQuantity] = None
    gas_limit: Optional[HexQuantity] = Field(None, alias="gasLimit")
    coinbase: Optional[HexStr] = None
    random: Optional[HexStr] = None
    base_fee: Optional[HexQuantity] = Field(None, alias="baseFee")
    block_hash: Optional[dict[str, HexStr]] = Field(None, alias="blockHash")
