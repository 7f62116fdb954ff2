"""Response envelopes: {"success": true, "data": {...}}."""

from typing import Generic, List, Optional, TypeVar

from pydantic import BaseModel

DataT = TypeVar("DataT")
ItemT = TypeVar("ItemT")


class Envelope(BaseModel, Generic[DataT]):
    success: bool = True
    data: Optional[DataT] = None


class ItemList(BaseModel, Generic[ItemT]):
    items: List[ItemT]
    total: int


class SuccessResponse(BaseModel):
    success: bool = True


def ok(**data):
    return {"success": True, "data": data}


def item_list(items) -> dict:
    items = list(items)
    return {"items": items, "total": len(items)}
