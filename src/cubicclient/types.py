"""Wire models for the Cubicler orchestrator API."""

from __future__ import annotations

from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field

ServiceState = Literal["healthy", "unhealthy"]


class _WireModel(BaseModel):
    model_config = ConfigDict(frozen=True, populate_by_name=True)


class MessageSender(_WireModel):
    """Who sent a message: a stable id plus an optional display name."""

    id: str
    name: str | None = None


class Message(_WireModel):
    """A single chat message sent to an agent."""

    model_config = ConfigDict(frozen=True, populate_by_name=True, extra="allow")

    sender: MessageSender
    type: Literal["text"] = "text"
    content: str
    timestamp: str | None = Field(default=None, description="ISO-8601 timestamp")

    def to_wire(self) -> dict[str, Any]:
        """Fields the caller gave, explicit nulls and extras included, plus ``type``."""
        data = self.model_dump(mode="json", by_alias=True, exclude_unset=True)
        data["type"] = self.type
        return data


class CallRequest(_WireModel):
    """Request body for the dispatch endpoints."""

    messages: list[Message]

    def to_payload(self) -> dict[str, Any]:
        return {"messages": [m.to_wire() for m in self.messages]}


class CallResponseMetadata(_WireModel):
    used_token: int = Field(default=0, alias="usedToken")
    used_tools: int = Field(default=0, alias="usedTools")


class CallResponse(_WireModel):
    """Response body of the dispatch endpoints."""

    model_config = ConfigDict(frozen=True, populate_by_name=True, extra="allow")

    sender: MessageSender | None = None
    timestamp: str | None = None
    type: Literal["text"] = "text"
    content: str
    metadata: CallResponseMetadata | None = None


class AgentsResponse(_WireModel):
    available_agents: list[str] = Field(alias="availableAgents")


class ServiceStatus(_WireModel):
    """Status of one orchestrator subsystem."""

    model_config = ConfigDict(frozen=True, populate_by_name=True, extra="allow")

    status: ServiceState
    error: str | None = None
    count: int | None = None
    agents: list[str] | None = None
    providers: list[str] | None = None


class HealthServices(_WireModel):
    """Per-service entries. Entries the server omits stay unset."""

    model_config = ConfigDict(frozen=True, populate_by_name=True, extra="allow")

    prompt: ServiceStatus | None = None
    agents: ServiceStatus | None = None
    providers: ServiceStatus | None = None
    spec: ServiceStatus | None = None


class HealthStatus(_WireModel):
    """Response body of ``GET /health``."""

    model_config = ConfigDict(frozen=True, populate_by_name=True, extra="allow")

    status: ServiceState
    timestamp: str
    services: HealthServices = Field(default_factory=HealthServices)
