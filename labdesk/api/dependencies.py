from fastapi import Depends, Request

from labdesk.services.collection_store import CollectionStore
from labdesk.services.intake_service import IntakeService


def get_store(request: Request) -> CollectionStore:
    return request.app.state.store


def get_intake_service(store: CollectionStore = Depends(get_store)) -> IntakeService:
    return IntakeService(store)
