"""JSON-RPC 2.0 envelopes."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict

JSONRPC_VERSION = "2.0"


class RPCRequest(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: int
    jsonrpc: str = JSONRPC_VERSION
    method: str
    params: Any = None


class RPCErrorBody(BaseModel):
    code: int = 0
    message: str = ""
    data: Any = None


class RPCResponse(BaseModel):
    jsonrpc: str = JSONRPC_VERSION
    id: int | None = None
    result: Any = None
    error: RPCErrorBody | None = None
