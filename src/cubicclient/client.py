"""Async client for the Cubicler orchestrator REST API."""

from __future__ import annotations

import asyncio
import logging
from typing import Any
from urllib.parse import quote

import httpx

from .config import ClientOptions, get_settings
from .errors import MissingArgumentError
from .normalizer import MessagesInput, prepare_call_request
from .retry import RetryPolicy
from .types import AgentsResponse, CallResponse, HealthStatus

logger = logging.getLogger(__name__)


class CubicClient:
    """
    Typed bridge from application code to Cubicler agents.

    Each instance owns its own ``httpx.AsyncClient`` built from one
    connection profile (base URL, timeout, default headers). The profile is
    fixed at construction, so independently configured clients can coexist.

    ``timeout_ms`` is a deadline for a single attempt, from sending the
    request to parsing the body; an attempt that overruns it raises
    ``asyncio.TimeoutError``. With retries enabled the worst
    case for one call is ``timeout * (max_retries + 1)`` plus the backoff
    delays (1s + 2s + ... + max_retries s); nothing caps the total.

    Args:
        base_url: Orchestrator origin, e.g. ``http://localhost:1503``
        timeout_ms: Per-attempt timeout in milliseconds (default 90000)
        max_retries: Extra attempts for transient failures (default 0, disabled)
        headers: Extra default headers for every request
        transport: Optional httpx transport, mainly for tests
    """

    def __init__(
        self,
        base_url: str | None,
        *,
        timeout_ms: int | None = None,
        max_retries: int | None = None,
        headers: dict[str, str] | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        self._options = ClientOptions.build(
            base_url=base_url,
            timeout_ms=timeout_ms,
            max_retries=max_retries,
            headers=headers,
        )
        self._http = httpx.AsyncClient(
            base_url=self._options.base_url,
            timeout=self._options.timeout_seconds,
            headers=self._options.request_headers(),
            transport=transport,
        )
        self._retry = RetryPolicy(self._options.max_retries) if self._options.retry_enabled else None

        logger.debug(
            f"CubicClient created - base_url: {self._options.base_url}, "
            f"timeout: {self._options.timeout_ms}ms, max_retries: {self._options.max_retries}"
        )

    @classmethod
    def from_options(
        cls,
        options: ClientOptions,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> CubicClient:
        return cls(
            options.base_url,
            timeout_ms=options.timeout_ms,
            max_retries=options.max_retries,
            headers=dict(options.headers),
            transport=transport,
        )

    @classmethod
    def from_env(cls, transport: httpx.AsyncBaseTransport | None = None) -> CubicClient:
        """Build a client from ``CUBIC_BASE_URL``, ``CUBIC_TIMEOUT_MS`` and ``CUBIC_MAX_RETRIES``."""
        return cls.from_options(get_settings().to_options(), transport=transport)

    @property
    def options(self) -> ClientOptions:
        return self._options

    @property
    def retry_policy(self) -> RetryPolicy | None:
        return self._retry

    async def __aenter__(self) -> CubicClient:
        return self

    async def __aexit__(self, *exc_info: Any) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        await self._http.aclose()

    async def dispatch_default(self, messages: MessagesInput) -> str:
        """
        Send messages to the default agent.

        Args:
            messages: A single message or a list of messages

        Returns:
            The agent's reply text
        """
        response = await self.dispatch(messages)
        return response.content

    async def dispatch_to(self, agent_name: str, messages: MessagesInput) -> str:
        """
        Send messages to a named agent.

        Args:
            agent_name: Name of the agent, sent percent-encoded in the path
            messages: A single message or a list of messages

        Returns:
            The agent's reply text
        """
        if not agent_name:
            raise MissingArgumentError("agentName is required")
        response = await self.dispatch(messages, agent_name=agent_name)
        return response.content

    async def dispatch(
        self,
        messages: MessagesInput,
        agent_name: str | None = None,
    ) -> CallResponse:
        """Send messages and return the full agent response.

        Routes to the default agent when ``agent_name`` is None.
        """
        if agent_name is not None and not agent_name:
            raise MissingArgumentError("agentName is required")
        request = prepare_call_request(messages)
        path = "/dispatch" if agent_name is None else f"/dispatch/{_encode_segment(agent_name)}"
        data = await self._request("POST", path, json=request.to_payload())
        return CallResponse.model_validate(data)

    async def list_agents(self) -> list[str]:
        """Return the names of the agents the orchestrator can route to."""
        data = await self._request("GET", "/agents")
        return AgentsResponse.model_validate(data).available_agents

    async def check_health(self) -> HealthStatus:
        """Return the orchestrator health status as reported, without unwrapping."""
        data = await self._request("GET", "/health")
        return HealthStatus.model_validate(data)

    async def _request(self, method: str, path: str, json: Any = None) -> Any:
        async def attempt() -> Any:
            logger.debug(f"{method} {path}")
            response = await self._http.request(method, path, json=json)
            response.raise_for_status()
            return response.json()

        async def bounded_attempt() -> Any:
            return await asyncio.wait_for(attempt(), self._options.timeout_seconds)

        if self._retry is None:
            return await bounded_attempt()
        return await self._retry.run(bounded_attempt)


def _encode_segment(value: str) -> str:
    # RFC 2396 unreserved marks stay literal; everything else is escaped.
    return quote(value, safe="!'()*")
