from typing import Annotated, Any, Literal, Union

from eth_typing import HexStr
from pydantic import BeforeValidator, PlainSerializer

from bundle_sim.utils.misc import to_int, to_quantity

HexQuantity = Annotated[
    int,
    BeforeValidator(to_int),
    PlainSerializer(to_quantity, return_type=str, when_used="json"),
]
"""
An integer that the node reads and writes as a hex quantity (``"0x5208"``).
Both forms are accepted on input.
"""

BlockTag = Literal["earliest", "latest", "pending", "safe", "finalized"]

BlockID = Union[int, HexStr, bytes, BlockTag, dict[str, Any]]
"""
An ID that selects the state to simulate against: a block number, a block hash,
one of the tags ``"earliest"``, ``"latest"``, ``"pending"``, ``"safe"``, or
``"finalized"``, or an EIP-1898 object such as ``{"blockHash": "0x..."}``.
"""
