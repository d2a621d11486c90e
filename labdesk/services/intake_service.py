from typing import Any, Dict, List

from labdesk.core.errors import StorageError, ValidationError
from labdesk.core.logger import logger
from labdesk.core.validators import is_non_empty_text, is_optional_date, is_phone_like
from labdesk.models.records import Booking, BookingForm, Contact, ContactForm
from labdesk.services.collection_store import BOOKINGS, CONTACTS, CollectionStore

BOOKING_FIELDS_ERROR = "Missing or invalid fields: name, phone, tests, address are required."
BOOKING_TIME_ERROR = "Invalid preferred time format."
CONTACT_FIELDS_ERROR = "Missing fields"


def _clean(value) -> str:
    return (value or "").strip()


class IntakeService:
    def __init__(self, store: CollectionStore):
        self.store = store

    async def submit_booking(self, form: BookingForm) -> Booking:
        """
        Validate a booking form and append it to the booking collection.
        Nothing is written when validation fails.
        """
        name = _clean(form.name)
        phone = _clean(form.phone)
        tests = _clean(form.tests)
        address = _clean(form.address)
        time = _clean(form.time)

        if not (is_non_empty_text(name) and is_phone_like(phone)
                and is_non_empty_text(tests) and is_non_empty_text(address)):
            raise ValidationError(BOOKING_FIELDS_ERROR)
        if not is_optional_date(time):
            raise ValidationError(BOOKING_TIME_ERROR)

        booking = Booking(name=name, phone=phone, tests=tests, address=address, time=time or None)

        try:
            self.store.append(BOOKINGS, booking.to_document())
        except StorageError as e:
            raise StorageError("Failed to save booking") from e

        logger.info(f"📅 New booking {booking.id}: {booking.name}, tests='{booking.tests}', time={booking.time}")
        return booking

    async def submit_contact(self, form: ContactForm) -> Contact:
        name = _clean(form.name)
        msg = _clean(form.msg)

        if not (is_non_empty_text(name) and is_non_empty_text(msg)):
            raise ValidationError(CONTACT_FIELDS_ERROR)

        # email is stored as given, without validation
        contact = Contact(name=name, msg=msg, email=form.email or None)

        try:
            self.store.append(CONTACTS, contact.to_document())
        except StorageError as e:
            raise StorageError("Failed to save contact") from e

        logger.info(f"✉️ Contact message from {contact.name}")
        return contact

    async def list_bookings(self) -> List[Dict[str, Any]]:
        try:
            return self.store.load(BOOKINGS)
        except StorageError as e:
            raise StorageError("Failed to read bookings") from e

    async def delete_booking(self, booking_id: str) -> int:
        """
        Remove the booking(s) with this id. Succeeds even when no record matched;
        raises NotFoundError only if the booking collection was never created.
        """
        try:
            removed = self.store.remove_by_id(BOOKINGS, booking_id)
        except StorageError as e:
            raise StorageError("Failed to delete") from e

        if removed:
            logger.info(f"🗑️ Booking {booking_id} deleted.")
        else:
            logger.info(f"Booking {booking_id} not present, nothing deleted.")
        return removed
