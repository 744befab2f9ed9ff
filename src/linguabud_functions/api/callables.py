"""Callable endpoints speaking the ``{data}`` / ``{result}`` protocol."""

from __future__ import annotations

import inspect
import logging
from collections.abc import Callable
from typing import TYPE_CHECKING

from fastapi import APIRouter, Header, Request
from fastapi.responses import JSONResponse

from linguabud_functions.api.models import CallableRequest
from linguabud_functions.errors import CallableError, ErrorKind

if TYPE_CHECKING:
    from linguabud_functions.containers import AppContainer

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/callable", tags=["callable"])


@router.post("/generateAgoraToken")
async def generate_agora_token(
    body: CallableRequest, request: Request
) -> JSONResponse:
    """Issue a video call token for a channel."""
    container = _container(request)

    def handle() -> dict[str, object]:
        token = container.call_token_service.generate(
            _optional_str(body.data.get("channelName")),
            _optional_int(body.data.get("uid"), "uid"),
        )
        return {
            "token": token.token,
            "uid": token.uid,
            "appId": token.app_id,
            "expiresAt": token.expires_at,
        }

    return await _respond("generateAgoraToken", handle)


@router.post("/sendContactEmail")
async def send_contact_email(body: CallableRequest, request: Request) -> JSONResponse:
    """Forward a contact form submission to the operator."""
    container = _container(request)
    return await _respond(
        "sendContactEmail",
        lambda: container.contact_service.send_contact_email(
            _optional_str(body.data.get("name")),
            _optional_str(body.data.get("email")),
            _optional_str(body.data.get("message")),
        ),
    )


@router.post("/createConnectAccount")
async def create_connect_account(
    body: CallableRequest,
    request: Request,
    authorization: str | None = Header(default=None),
) -> JSONResponse:
    """Return an onboarding link for the caller's connected account."""
    container = _container(request)

    def handle() -> dict[str, object]:
        caller = container.auth_service.require_caller(authorization)
        return container.payment_service.create_connect_account(caller)

    return await _respond("createConnectAccount", handle)


@router.post("/getConnectAccountStatus")
async def get_connect_account_status(
    body: CallableRequest,
    request: Request,
    authorization: str | None = Header(default=None),
) -> JSONResponse:
    """Return the live status of the caller's connected account."""
    container = _container(request)

    def handle() -> dict[str, object]:
        caller = container.auth_service.require_caller(authorization)
        return container.payment_service.get_connect_status(caller)

    return await _respond("getConnectAccountStatus", handle)


@router.post("/createPaymentIntent")
async def create_payment_intent(
    body: CallableRequest,
    request: Request,
    authorization: str | None = Header(default=None),
) -> JSONResponse:
    """Create a payment intent for a lesson with an instructor."""
    container = _container(request)

    def handle() -> dict[str, object]:
        caller = container.auth_service.require_caller(authorization)
        return container.payment_service.create_payment_intent(
            caller, _optional_str(body.data.get("instructorId"))
        )

    return await _respond("createPaymentIntent", handle)


async def _respond(name: str, handler: Callable[[], object]) -> JSONResponse:
    """Run a handler and wrap its outcome in the callable envelope."""
    try:
        result = handler()
        if inspect.isawaitable(result):
            result = await result
    except CallableError as exc:
        logger.info("%s failed: %s %s", name, exc.kind, exc.message)
        return JSONResponse(exc.to_payload(), status_code=exc.kind.http_status)
    except Exception as exc:
        logger.exception("Unhandled error in %s", name)
        error = CallableError(ErrorKind.INTERNAL, str(exc) or "Internal error")
        return JSONResponse(error.to_payload(), status_code=error.kind.http_status)
    return JSONResponse({"result": result})


def _container(request: Request) -> AppContainer:
    return request.app.state.container


def _optional_str(value: object) -> str | None:
    if value is None:
        return None
    text = str(value).strip()
    return text or None


def _optional_int(value: object, field_name: str) -> int | None:
    if value is None or value == "":
        return None
    if isinstance(value, bool):
        raise CallableError(ErrorKind.INVALID_ARGUMENT, f"{field_name} must be a number")
    try:
        return int(value)
    except (TypeError, ValueError) as exc:
        raise CallableError(
            ErrorKind.INVALID_ARGUMENT, f"{field_name} must be a number"
        ) from exc
