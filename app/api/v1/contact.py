from fastapi import APIRouter

from app.api.v1.presenters import notifications_to_schema
from app.api.v1.schemas import ContactRequestSchema, ContactResponseSchema
from app.domain.entities.contact_message import ContactMessage
from app.infrastructure.notifications.recording_sink import RecordingNotificationSink
from app.wiring.dependencies import get_contact_use_case

router = APIRouter()


@router.post("", response_model=ContactResponseSchema)
async def submit_contact(req: ContactRequestSchema):
    sink = RecordingNotificationSink()
    uc = get_contact_use_case(sink)
    await uc.submit(ContactMessage(**req.model_dump()))
    return ContactResponseSchema(notifications=notifications_to_schema(sink.drain()))
