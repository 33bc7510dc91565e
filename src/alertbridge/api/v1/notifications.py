from __future__ import annotations

from fastapi import APIRouter, HTTPException, status
from fastapi.responses import JSONResponse

from alertbridge.dependencies import NotificationServiceDep
from alertbridge.schemas.notification import (
    NotificationConfig,
    NotificationResult,
    NotificationSendRequest,
)
from alertbridge.utils.exceptions import NotificationDeliveryError, UnknownProviderError

router = APIRouter()


def _delivery_failed(exc: NotificationDeliveryError) -> JSONResponse:
    return JSONResponse(
        status_code=status.HTTP_502_BAD_GATEWAY,
        content=NotificationResult(ok=False, msg=str(exc)).model_dump(),
    )


@router.post("/test", response_model=NotificationResult)
async def test_notification(
    notification: NotificationConfig,
    service: NotificationServiceDep,
) -> NotificationResult | JSONResponse:
    """Send a test message through a notification config."""
    try:
        msg = await service.send_test(notification)
    except UnknownProviderError as exc:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(exc))
    except NotificationDeliveryError as exc:
        return _delivery_failed(exc)

    return NotificationResult(ok=True, msg=msg)


@router.post("/send", response_model=NotificationResult)
async def send_notification(
    request: NotificationSendRequest,
    service: NotificationServiceDep,
) -> NotificationResult | JSONResponse:
    """Send an alert, rich when a heartbeat is attached."""
    try:
        msg = await service.send(
            request.notification,
            request.message,
            monitor=request.monitor,
            heartbeat=request.heartbeat,
        )
    except UnknownProviderError as exc:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(exc))
    except NotificationDeliveryError as exc:
        return _delivery_failed(exc)

    return NotificationResult(ok=True, msg=msg)
