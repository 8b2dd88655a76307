from __future__ import annotations

import logging

from fastapi import APIRouter, Depends, Response, status
from fastapi.responses import JSONResponse

from app.api.deps import get_current_user
from app.api.v1.presenters import appointment_to_schema, notifications_to_schema
from app.api.v1.schemas import (
    AppointmentActionResponse,
    AppointmentFilter,
    AppointmentListResponse,
    RedirectResponseSchema,
)
from app.application.exceptions import NotAuthenticatedError
from app.domain.entities.user import User
from app.infrastructure.navigation.recording_navigator import RecordingNavigator
from app.infrastructure.notifications.recording_sink import RecordingNotificationSink
from app.wiring.dependencies import get_appointments_use_case

router = APIRouter()
logger = logging.getLogger(__name__)


def _redirect(e: NotAuthenticatedError, sink: RecordingNotificationSink) -> JSONResponse:
    body = RedirectResponseSchema(
        detail=str(e),
        redirect_to=e.redirect_to,
        notifications=notifications_to_schema(sink.drain()),
    )
    return JSONResponse(status_code=status.HTTP_401_UNAUTHORIZED, content=body.model_dump())


@router.get(
    "",
    response_model=AppointmentListResponse,
    responses={401: {"model": RedirectResponseSchema}},
)
def list_appointments(
    filter: AppointmentFilter = AppointmentFilter.all,
    user: User | None = Depends(get_current_user),
):
    sink = RecordingNotificationSink()
    uc = get_appointments_use_case(user, sink, RecordingNavigator())
    try:
        appointments = uc.list_appointments(filter.value)
    except NotAuthenticatedError as e:
        return _redirect(e, sink)
    return AppointmentListResponse(
        filter=filter,
        appointments=[appointment_to_schema(a) for a in appointments],
    )


@router.post(
    "/{appointment_id}/cancel",
    response_model=AppointmentActionResponse,
    responses={401: {"model": RedirectResponseSchema}},
)
def cancel_appointment(
    appointment_id: str,
    response: Response,
    user: User | None = Depends(get_current_user),
):
    sink = RecordingNotificationSink()
    uc = get_appointments_use_case(user, sink, RecordingNavigator())
    try:
        cancelled = uc.cancel(appointment_id)
    except NotAuthenticatedError as e:
        return _redirect(e, sink)
    if cancelled is None:
        response.status_code = status.HTTP_409_CONFLICT
    return AppointmentActionResponse(
        appointment=appointment_to_schema(cancelled) if cancelled else None,
        notifications=notifications_to_schema(sink.drain()),
    )
