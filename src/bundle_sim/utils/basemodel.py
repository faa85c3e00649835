from typing import Any

from pydantic import BaseModel as RootBaseModel
from pydantic import ConfigDict


class BaseModel(RootBaseModel):
    """
    A bundle-sim pydantic BaseModel.

    Dumps use the wire (camelCase) aliases, JSON-compatible values,
    and drop unset (``None``) fields unless told otherwise.
    """

    model_config = ConfigDict(populate_by_name=True)

    def model_dump(self, *args, **kwargs) -> dict[str, Any]:
        kwargs.setdefault("by_alias", True)
        kwargs.setdefault("mode", "json")
        kwargs.setdefault("exclude_none", True)
        return super().model_dump(*args, **kwargs)

    def model_dump_json(self, *args, **kwargs) -> str:
        kwargs.setdefault("by_alias", True)
        kwargs.setdefault("exclude_none", True)
        return super().model_dump_json(*args, **kwargs)


class PassThroughModel(BaseModel):
    """
    A model for node-owned JSON shapes. Unknown keys are kept and
    sent back unchanged.
    """

    model_config = ConfigDict(populate_by_name=True, extra="allow")
