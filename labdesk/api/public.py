from fastapi import APIRouter, Depends

from labdesk.api.dependencies import get_intake_service
from labdesk.models.records import BookingForm, BookingSubmitResponse, ContactForm, SubmitResponse
from labdesk.services.intake_service import IntakeService

router = APIRouter()


@router.post("/book", response_model=BookingSubmitResponse)
async def submit_booking(form: BookingForm, service: IntakeService = Depends(get_intake_service)):
    booking = await service.submit_booking(form)
    return BookingSubmitResponse(id=booking.id)


@router.post("/contact", response_model=SubmitResponse)
async def submit_contact(form: ContactForm, service: IntakeService = Depends(get_intake_service)):
    await service.submit_contact(form)
    return SubmitResponse()
