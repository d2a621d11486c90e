import secrets
import time
from datetime import datetime, timezone
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


def new_record_id() -> str:
    """Millisecond clock prefix plus a random suffix, so same-tick records never collide."""
    return f"{time.time_ns() // 1_000_000}-{secrets.token_hex(4)}"


def utc_now_iso() -> str:
    return datetime.now(timezone.utc).isoformat(timespec="milliseconds").replace("+00:00", "Z")


# --- Incoming form bodies ---
# Every field is optional here; presence and shape are checked by the intake
# service so that failures produce the form-level error messages.

class BookingForm(BaseModel):
    name: Optional[str] = None
    phone: Optional[str] = None
    tests: Optional[str] = None
    address: Optional[str] = None
    time: Optional[str] = None


class ContactForm(BaseModel):
    name: Optional[str] = None
    msg: Optional[str] = None
    email: Optional[str] = None


# --- Persisted records ---

class Record(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    id: str = Field(default_factory=new_record_id)
    created_at: str = Field(default_factory=utc_now_iso, alias="createdAt")

    def to_document(self) -> dict:
        return self.model_dump(by_alias=True)


class Booking(Record):
    name: str
    phone: str
    tests: str
    address: str
    time: Optional[str] = None


class Contact(Record):
    name: str
    msg: str
    email: Optional[str] = None


# --- Responses ---

class SubmitResponse(BaseModel):
    ok: bool = True


class BookingSubmitResponse(SubmitResponse):
    id: str
