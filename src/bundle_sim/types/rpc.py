from typing import Any, Generic, Literal, Optional, TypeVar

from pydantic import StrictInt

from bundle_sim.utils.basemodel import BaseModel

JSONRPC_VERSION = "2.0"
DEFAULT_REQUEST_ID = 0

ParamsType = TypeVar("ParamsType")
ResultType = TypeVar("ResultType")


class RPCRequest(BaseModel, Generic[ParamsType]):
    """
    A JSON-RPC 2.0 request.

    Unlike other models, ``None`` values are kept when dumping
    so that positional ``params`` never lose a slot.
    """

    jsonrpc: Literal["2.0"] = JSONRPC_VERSION
    method: str
    params: ParamsType
    id: int = DEFAULT_REQUEST_ID

    def model_dump(self, *args, **kwargs) -> dict[str, Any]:
        kwargs.setdefault("exclude_none", False)
        return super().model_dump(*args, **kwargs)

    def model_dump_json(self, *args, **kwargs) -> str:
        kwargs.setdefault("exclude_none", False)
        return super().model_dump_json(*args, **kwargs)


class RPCResponse(BaseModel, Generic[ResultType]):
    """
    A successful JSON-RPC 2.0 response.
    """

    jsonrpc: str
    result: ResultType
    id: StrictInt


class RPCErrorDetail(BaseModel):
    code: StrictInt
    message: str
    data: Optional[Any] = None


class RPCErrorResponse(BaseModel):
    """
    A JSON-RPC 2.0 response carrying an ``error`` object.
    """

    jsonrpc: str
    error: RPCErrorDetail
    id: Optional[StrictInt] = None
