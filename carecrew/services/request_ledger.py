"""
Volunteer request ledger.

Creating a request takes one unit of ``volunteersNeeded`` from the post,
withdrawing it gives the unit back.  The counter is only ever moved by a
single conditional ``$inc`` so concurrent applications cannot drive it
below zero, and the unique ``(postId, volunteer.email)`` index is what
finally decides duplicates.  When the second half of either operation
fails, the first half is undone before the error propagates.
"""

import logging
from datetime import datetime, timezone

from fastapi import HTTPException
from pymongo import ReturnDocument
from pymongo.collection import Collection
from pymongo.errors import DuplicateKeyError, PyMongoError

from ..errors import AlreadyRequested, NoVolunteersNeeded
from ..models.request_model import RequestCreate
from ..utils import parse_object_id

logger = logging.getLogger(__name__)

# fields fixed at creation time; only the organizer-facing ones may be $set later
PROTECTED_FIELDS = {"_id", "postId", "volunteer", "organizer"}


def _restore_capacity(volunteers: Collection, post_oid) -> None:
    volunteers.update_one({"_id": post_oid}, {"$inc": {"volunteersNeeded": 1}})


def create_request(volunteers: Collection, requests: Collection, payload: RequestCreate):
    post_oid = parse_object_id(payload.postId)
    # one spelling per post, so the unique index compares posts and not strings
    post_id = str(post_oid)
    volunteer_email = payload.volunteer.email

    if requests.find_one({"postId": post_id, "volunteer.email": volunteer_email}):
        logger.warning("Duplicate request for post %s by %s", post_id, volunteer_email)
        raise AlreadyRequested()

    post = volunteers.find_one_and_update(
        {"_id": post_oid, "volunteersNeeded": {"$gte": 1}},
        {"$inc": {"volunteersNeeded": -1}},
        return_document=ReturnDocument.AFTER,
    )
    if post is None:
        logger.warning("Post %s has no capacity left (or does not exist)", post_id)
        raise NoVolunteersNeeded()

    doc = payload.model_dump(exclude_none=True)
    doc["postId"] = post_id
    doc["organizer"] = {"email": (post.get("organizer") or {}).get("email")}
    doc["requestedAt"] = datetime.now(timezone.utc).isoformat()

    try:
        result = requests.insert_one(doc)
    except DuplicateKeyError:
        _restore_capacity(volunteers, post_oid)
        logger.warning("Concurrent duplicate request for post %s by %s", post_id, volunteer_email)
        raise AlreadyRequested()
    except PyMongoError:
        logger.exception("Inserting request for post %s failed, restoring capacity", post_id)
        _restore_capacity(volunteers, post_oid)
        raise

    logger.info(
        "Request %s created for post %s (%s still needed)",
        result.inserted_id, post_id, post.get("volunteersNeeded"),
    )
    return result


def withdraw_request(volunteers: Collection, requests: Collection, request_id: str, post_id: str | None = None) -> dict:
    request_oid = parse_object_id(request_id)

    deleted = requests.find_one_and_delete({"_id": request_oid})
    if deleted is None:
        raise HTTPException(status_code=404, detail="Request not found")

    stored_post_id = deleted.get("postId")
    if not stored_post_id:
        logger.warning("Request %s had no postId, no capacity restored", request_id)
        return {"acknowledged": True, "deletedCount": 1}
    if post_id is not None and post_id.lower() != stored_post_id:
        logger.warning(
            "Request %s names post %s but caller passed %s; using the stored post",
            request_id, stored_post_id, post_id,
        )

    try:
        _restore_capacity(volunteers, parse_object_id(stored_post_id))
    except PyMongoError:
        logger.exception("Restoring capacity on post %s failed, putting request %s back", stored_post_id, request_id)
        requests.insert_one(deleted)
        raise

    logger.info("Request %s withdrawn, post %s regained a slot", request_id, stored_post_id)
    return {"acknowledged": True, "deletedCount": 1}


def _settable(key: str) -> bool:
    """False for operators and for any path into a field fixed at creation."""
    if any(part.startswith("$") for part in key.split(".")):
        return False
    return key.split(".", 1)[0] not in PROTECTED_FIELDS


def update_request(requests: Collection, request_id: str, changes: dict):
    request_oid = parse_object_id(request_id)
    changes = {k: v for k, v in changes.items() if _settable(k)}
    if not changes:
        raise HTTPException(status_code=400, detail="Nothing to update")

    result = requests.update_one({"_id": request_oid}, {"$set": changes})
    if result.matched_count == 0:
        raise HTTPException(status_code=404, detail="Request not found")
    return result


def list_for_organizer(requests: Collection, email: str) -> list[dict]:
    return list(requests.find({"organizer.email": email}))


def list_for_volunteer(requests: Collection, email: str) -> list[dict]:
    return list(requests.find({"volunteer.email": email}))
