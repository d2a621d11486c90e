from fastapi import APIRouter, Depends

from labdesk.api.dependencies import get_intake_service
from labdesk.core.security import verify_admin_pass
from labdesk.models.records import SubmitResponse
from labdesk.services.intake_service import IntakeService

router = APIRouter(dependencies=[Depends(verify_admin_pass)])


@router.get("/bookings")
async def list_bookings(service: IntakeService = Depends(get_intake_service)):
    # Stored documents are returned as-is, no response model
    return await service.list_bookings()


@router.delete("/bookings/{booking_id}", response_model=SubmitResponse)
async def delete_booking(booking_id: str, service: IntakeService = Depends(get_intake_service)):
    await service.delete_booking(booking_id)
    return SubmitResponse()
