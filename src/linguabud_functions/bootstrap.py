"""Client bootstrap: one explicit handle to the Lingua Bud backend.

Front-end code and scripts build a single ``LinguaBudClient`` with
``build_client`` and pass it where it is needed. When the current host is a
loopback or private address, all calls go to the local emulators instead of
production.
"""

import ipaddress
from dataclasses import dataclass

import httpx
from supabase import Client, create_client

from linguabud_functions.errors import CallableError, ErrorKind

EMULATOR_HOST = "127.0.0.1"
EMULATOR_API_PORT = 54321
EMULATOR_FUNCTIONS_PORT = 5001


@dataclass(frozen=True)
class ClientConfig:
    """Static project identifiers for the backend services."""

    project_id: str
    supabase_url: str
    supabase_anon_key: str
    functions_url: str
    emulator_anon_key: str | None = None


@dataclass(frozen=True)
class ServiceEndpoints:
    """Resolved endpoints for one client."""

    supabase_url: str
    supabase_key: str
    functions_url: str
    emulated: bool


def is_local_host(host: str | None) -> bool:
    """Return True for localhost, loopback and private network addresses."""
    if not host:
        return False
    hostname = _strip_port(host.strip().lower())
    if hostname == "localhost" or hostname.endswith(".localhost"):
        return True
    try:
        address = ipaddress.ip_address(hostname)
    except ValueError:
        return False
    return address.is_loopback or address.is_private


def resolve_endpoints(config: ClientConfig, host: str | None) -> ServiceEndpoints:
    """Pick production or emulator endpoints for the given host."""
    if is_local_host(host):
        return ServiceEndpoints(
            supabase_url=f"http://{EMULATOR_HOST}:{EMULATOR_API_PORT}",
            supabase_key=config.emulator_anon_key or config.supabase_anon_key,
            functions_url=f"http://{EMULATOR_HOST}:{EMULATOR_FUNCTIONS_PORT}",
            emulated=True,
        )
    return ServiceEndpoints(
        supabase_url=config.supabase_url,
        supabase_key=config.supabase_anon_key,
        functions_url=config.functions_url.rstrip("/"),
        emulated=False,
    )


@dataclass
class LinguaBudClient:
    """Shared handle to the database, auth and callable functions."""

    endpoints: ServiceEndpoints
    supabase: Client
    http_client: httpx.AsyncClient

    async def call(
        self,
        name: str,
        data: dict[str, object] | None = None,
        access_token: str | None = None,
    ) -> dict[str, object]:
        """Invoke a callable function and return its result.

        Error envelopes are raised as ``CallableError``.
        """
        headers = {"Authorization": f"Bearer {access_token}"} if access_token else {}
        response = await self.http_client.post(
            f"{self.endpoints.functions_url}/callable/{name}",
            json={"data": data or {}},
            headers=headers,
            timeout=30,
        )
        try:
            body = response.json()
        except ValueError as exc:
            raise CallableError(
                ErrorKind.INTERNAL, f"Invalid response from {name}"
            ) from exc
        error = body.get("error") if isinstance(body, dict) else None
        if error:
            raise CallableError(
                ErrorKind.from_status(str(error.get("status", ""))),
                str(error.get("message", "")),
            )
        if not response.is_success or not isinstance(body, dict):
            raise CallableError(
                ErrorKind.INTERNAL, f"Unexpected status {response.status_code}"
            )
        return body.get("result") or {}

    async def close(self) -> None:
        """Close the underlying HTTP session."""
        await self.http_client.aclose()


def build_client(config: ClientConfig, host: str | None = None) -> LinguaBudClient:
    """Construct the client handle for the current host."""
    endpoints = resolve_endpoints(config, host)
    return LinguaBudClient(
        endpoints=endpoints,
        supabase=create_client(endpoints.supabase_url, endpoints.supabase_key),
        http_client=httpx.AsyncClient(),
    )


def _strip_port(host: str) -> str:
    if host.startswith("["):
        return host[1:].split("]", 1)[0]
    if host.count(":") == 1:
        return host.split(":", 1)[0]
    return host
