from typing import Any, Optional

from eth_typing import HexStr
from pydantic import Field

from bundle_sim.types.basic import HexQuantity
from bundle_sim.utils.basemodel import PassThroughModel


class CallRequest(PassThroughModel):
    """
    A single call in a simulation bundle, shaped like an ``eth_call`` request.
    Keys not declared here (e.g. ``gasLimit``, ``blobVersionedHashes``) are
    sent to the node unchanged.
    """

    sender: Optional[HexStr] = Field(None, alias="from")
    to: Optional[HexStr] = None
    gas: Optional[HexQuantity] = None
    gas_price: Optional[HexQuantity] = Field(None, alias="gasPrice")
    max_fee_per_gas: Optional[HexQuantity] = Field(None, alias="maxFeePerGas")
    max_priority_fee_per_gas: Optional[HexQuantity] = Field(None, alias="maxPriorityFeePerGas")
    value: Optional[HexQuantity] = None
    data: Optional[str] = None
    input: Optional[str] = None
    nonce: Optional[HexQuantity] = None
    chain_id: Optional[HexQuantity] = Field(None, alias="chainId")
    access_list: Optional[list[dict[str, Any]]] = Field(None, alias="accessList")
    transaction_type: Optional[HexQuantity] = Field(None, alias="type")
