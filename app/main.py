import logging

from fastapi import FastAPI

from app.api.v1.appointments import router as appointments_router
from app.api.v1.bookings import router as bookings_router
from app.api.v1.catalog import router as catalog_router
from app.api.v1.contact import router as contact_router
from app.core.config import settings

class ContextFormatter(logging.Formatter):
    def format(self, record: logging.LogRecord) -> str:
        extras = []
        for key in (
            "session_id",
            "user_id",
            "step",
            "action",
            "reason",
            "route",
            "notification",
            "payment_id",
            "appointment_id",
        ):
            value = getattr(record, key, None)
            if value not in (None, ""):
                extras.append(f"{key}={value}")
        base = super().format(record)
        if extras:
            return f"{base} | " + " ".join(extras)
        return base


handler = logging.StreamHandler()
handler.setFormatter(ContextFormatter("%(levelname)s:%(name)s:%(message)s"))

root = logging.getLogger()
root.setLevel(getattr(logging, settings.LOG_LEVEL.upper(), logging.INFO))
root.handlers.clear()
root.addHandler(handler)

app = FastAPI(title=f"{settings.APP_NAME} Booking", version="1.0.0")

app.include_router(catalog_router, prefix="/api/v1/catalog", tags=["catalog"])
app.include_router(bookings_router, prefix="/api/v1/bookings", tags=["bookings"])
app.include_router(appointments_router, prefix="/api/v1/appointments", tags=["appointments"])
app.include_router(contact_router, prefix="/api/v1/contact", tags=["contact"])


@app.get("/health")
def health() -> dict[str, str]:
    return {"status": "ok"}
