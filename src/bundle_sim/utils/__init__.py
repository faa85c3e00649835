from bundle_sim.utils.basemodel import BaseModel
from bundle_sim.utils.misc import (
    __version__,
    to_int,
    to_quantity,
)
from bundle_sim.utils.rpc import USER_AGENT, RPCHeaders

__all__ = [
    "__version__",
    "BaseModel",
    "RPCHeaders",
    "to_int",
    "to_quantity",
    "USER_AGENT",
]
