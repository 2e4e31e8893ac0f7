"""GET /v1/catalog/cancel-url - cancellation link lookup by service name"""

from fastapi import APIRouter, Query

from subtrack.api.v1.schemas import CancelUrlResponse
from subtrack.domain.catalog import get_cancel_url

router = APIRouter()


@router.get("/catalog/cancel-url", response_model=CancelUrlResponse)
def lookup_cancel_url(name: str = Query(..., min_length=1, description="Subscription name as entered")):
    """Suggest a cancellation page for a service, e.g. "Spotify Premium" -> spotify"""
    url = get_cancel_url(name)
    return CancelUrlResponse(name=name, cancel_url=url, matched=url is not None)
