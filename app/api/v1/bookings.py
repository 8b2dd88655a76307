from __future__ import annotations

import logging

from fastapi import APIRouter, Depends, HTTPException, Response, status
from fastapi.responses import JSONResponse

from app.api.deps import get_current_user
from app.api.v1.presenters import notifications_to_schema, session_response
from app.api.v1.schemas import (
    BookingSessionResponse,
    RedirectResponseSchema,
    SelectDateRequest,
    SelectDoctorRequest,
    SelectSpecializationRequest,
    SelectTimeRequest,
)
from app.application.exceptions import BookingSessionNotFoundError, NotAuthenticatedError
from app.application.use_cases.booking_wizard import WizardResult
from app.domain.entities.user import User
from app.infrastructure.store.booking_sessions import BookingSession
from app.wiring.dependencies import build_booking_session, get_session_registry

router = APIRouter()
logger = logging.getLogger(__name__)

_STATUS_BY_ACTION = {
    "rejected": 422,
    "payment_failed": status.HTTP_402_PAYMENT_REQUIRED,
    "payment_cancelled": status.HTTP_409_CONFLICT,
}


def _session(session_id: str, user: User | None) -> BookingSession:
    try:
        return get_session_registry().get(session_id, user.id if user else None)
    except BookingSessionNotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))


def _respond(session: BookingSession, result: WizardResult, response: Response) -> BookingSessionResponse:
    response.status_code = _STATUS_BY_ACTION.get(result.action, status.HTTP_200_OK)
    return session_response(session, result)


@router.post(
    "",
    response_model=BookingSessionResponse,
    status_code=status.HTTP_201_CREATED,
    responses={401: {"model": RedirectResponseSchema}},
)
def open_booking(user: User | None = Depends(get_current_user)):
    session = build_booking_session(user)
    try:
        result = session.wizard.mount()
    except NotAuthenticatedError as e:
        body = RedirectResponseSchema(
            detail=str(e),
            redirect_to=e.redirect_to,
            notifications=notifications_to_schema(session.notifications.drain()),
        )
        return JSONResponse(status_code=status.HTTP_401_UNAUTHORIZED, content=body.model_dump())

    get_session_registry().add(session)
    logger.info("Booking session opened", extra={"session_id": session.session_id, "user_id": session.user_id})
    return session_response(session, result)


@router.get("/{session_id}", response_model=BookingSessionResponse)
def get_booking(session_id: str, user: User | None = Depends(get_current_user)):
    session = _session(session_id, user)
    wizard = session.wizard
    return session_response(session, WizardResult(action="current", selection=wizard.selection))


@router.post("/{session_id}/specialization", response_model=BookingSessionResponse)
def choose_specialization(
    session_id: str,
    req: SelectSpecializationRequest,
    response: Response,
    user: User | None = Depends(get_current_user),
):
    session = _session(session_id, user)
    return _respond(session, session.wizard.select_specialization(req.specialization), response)


@router.post("/{session_id}/doctor", response_model=BookingSessionResponse)
def choose_doctor(
    session_id: str,
    req: SelectDoctorRequest,
    response: Response,
    user: User | None = Depends(get_current_user),
):
    session = _session(session_id, user)
    return _respond(session, session.wizard.select_doctor(req.doctor_id), response)


@router.post("/{session_id}/date", response_model=BookingSessionResponse)
def choose_date(
    session_id: str,
    req: SelectDateRequest,
    response: Response,
    user: User | None = Depends(get_current_user),
):
    session = _session(session_id, user)
    return _respond(session, session.wizard.select_date(req.date), response)


@router.post("/{session_id}/time", response_model=BookingSessionResponse)
def choose_time(
    session_id: str,
    req: SelectTimeRequest,
    response: Response,
    user: User | None = Depends(get_current_user),
):
    session = _session(session_id, user)
    return _respond(session, session.wizard.select_time(req.time), response)


@router.post("/{session_id}/back", response_model=BookingSessionResponse)
def go_back(session_id: str, response: Response, user: User | None = Depends(get_current_user)):
    session = _session(session_id, user)
    return _respond(session, session.wizard.go_back(), response)


@router.post("/{session_id}/confirm", response_model=BookingSessionResponse)
async def confirm(session_id: str, response: Response, user: User | None = Depends(get_current_user)):
    session = _session(session_id, user)
    result = await session.wizard.confirm_and_pay()
    if result.action == "payment_succeeded":
        get_session_registry().remove(session_id)
        logger.info("Booking session completed", extra={"session_id": session_id, "user_id": session.user_id})
    return _respond(session, result, response)


@router.delete("/{session_id}", status_code=status.HTTP_204_NO_CONTENT)
async def close_booking(session_id: str, user: User | None = Depends(get_current_user)) -> Response:
    session = _session(session_id, user)
    session.wizard.unmount()
    get_session_registry().remove(session_id)
    logger.info("Booking session closed", extra={"session_id": session_id, "user_id": session.user_id})
    return Response(status_code=status.HTTP_204_NO_CONTENT)
