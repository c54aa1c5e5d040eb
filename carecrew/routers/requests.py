from typing import Optional

from fastapi import APIRouter, Depends, Query
from pymongo.collection import Collection

from ..db import get_request_collection, get_volunteer_collection
from ..models.request_model import RequestCreate, RequestUpdate
from ..services import request_ledger
from ..services.auth_service import require_owner
from ..utils import serialize_doc, write_result

router = APIRouter(tags=["requests"])


@router.post("/requests", status_code=201)
def create_request(
    data: RequestCreate,
    volunteers: Collection = Depends(get_volunteer_collection),
    requests: Collection = Depends(get_request_collection),
):
    result = request_ledger.create_request(volunteers, requests, data)
    return write_result(result)


@router.get("/requests")
def organizer_requests(email: str = Depends(require_owner), requests: Collection = Depends(get_request_collection)):
    """Requests made against posts organised by ?email=."""
    return [serialize_doc(r) for r in request_ledger.list_for_organizer(requests, email)]


@router.put("/requests/{request_id}")
def update_request(
    request_id: str,
    data: RequestUpdate,
    requests: Collection = Depends(get_request_collection),
):
    result = request_ledger.update_request(requests, request_id, data.model_dump(exclude_unset=True))
    return write_result(result)


@router.get("/my_requests")
def my_requests(email: str = Depends(require_owner), requests: Collection = Depends(get_request_collection)):
    return [serialize_doc(r) for r in request_ledger.list_for_volunteer(requests, email)]


@router.delete("/requests/{request_id}")
def withdraw_request(
    request_id: str,
    id: Optional[str] = Query(None, description="id of the post the request was made against"),
    volunteers: Collection = Depends(get_volunteer_collection),
    requests: Collection = Depends(get_request_collection),
):
    return request_ledger.withdraw_request(volunteers, requests, request_id, post_id=id)
