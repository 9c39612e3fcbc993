"""
Pydantic models for echoed requests and responses.
"""
from enum import Enum  # Crear enumeraciones con valores fijos
from typing import Dict, List, Tuple  # Type hints para colecciones

from pydantic import BaseModel, ConfigDict, Field


class ServerState(str, Enum):
    """Lifecycle state of an echo server."""
    STOPPED = "stopped"
    RUNNING = "running"


class InboundRequest(BaseModel):
    """Request as delivered by the listener."""

    model_config = ConfigDict(frozen=True)

    method: str = Field(..., description="HTTP verb")
    uri: str = Field(..., description="Path and query string as received")
    headers: List[Tuple[str, str]] = Field(
        default_factory=list,
        description="Header (name, value) pairs in receipt order, duplicates kept"
    )
    body: bytes = Field(b"", description="Raw request body")

    @property
    def body_size(self) -> int:
        return len(self.body)

    def header_map(self) -> Dict[str, List[str]]:
        """Group header values by lower-cased name, keeping receipt order."""
        grouped: Dict[str, List[str]] = {}
        for name, value in self.headers:
            grouped.setdefault(name.lower(), []).append(value)
        return grouped


class OutboundResponse(BaseModel):
    """Response handed back to the listener."""

    model_config = ConfigDict(frozen=True)

    status_code: int = Field(..., description="HTTP status code")
    headers: Dict[str, str] = Field(default_factory=dict, description="Response headers")
    body: bytes = Field(b"", description="Response body")


class EchoPayload(BaseModel):
    """JSON document mirroring a request."""
    method: str
    uri: str
    headers: Dict[str, List[str]] = Field(default_factory=dict)
    body: str = ""
