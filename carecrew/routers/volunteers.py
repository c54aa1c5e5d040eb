import re
from datetime import datetime, timezone
from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, Query
from pymongo.collection import Collection

from ..db import get_volunteer_collection
from ..models.post_model import PostCreate, PostUpdate
from ..schemas import Count
from ..services.auth_service import optional_owner, require_owner
from ..utils import parse_object_id, serialize_doc, write_result

router = APIRouter(tags=["volunteers"])


@router.post("/volunteers")
def create_post(post: PostCreate, volunteers: Collection = Depends(get_volunteer_collection)):
    doc = post.model_dump(exclude_none=True)
    doc["createdAt"] = datetime.now(timezone.utc).isoformat()
    result = volunteers.insert_one(doc)
    return write_result(result)


@router.put("/volunteers/{post_id}")
def update_post(post_id: str, data: PostUpdate, volunteers: Collection = Depends(get_volunteer_collection)):
    changes = data.model_dump(exclude_unset=True)
    changes.pop("_id", None)
    if not changes:
        raise HTTPException(400, "Nothing to update")

    result = volunteers.update_one(
        {"_id": parse_object_id(post_id)},
        {"$set": changes},
        upsert=True,
    )
    return write_result(result)


@router.delete("/volunteers/{post_id}")
def delete_post(post_id: str, volunteers: Collection = Depends(get_volunteer_collection)):
    result = volunteers.delete_one({"_id": parse_object_id(post_id)})
    return write_result(result)


@router.get("/volunteers")
def list_posts(
    page: Optional[int] = Query(None, ge=0),
    size: Optional[int] = Query(None, ge=1),
    email: Optional[str] = Depends(optional_owner),
    volunteers: Collection = Depends(get_volunteer_collection),
):
    q = {"organizer.email": email} if email else {}
    cursor = volunteers.find(q)
    if size is not None:
        cursor = cursor.skip((page or 0) * size).limit(size)
    return [serialize_doc(p) for p in cursor]


@router.get("/volunteers_count", response_model=Count)
def count_posts(volunteers: Collection = Depends(get_volunteer_collection)):
    return {"count": volunteers.count_documents({})}


@router.get("/my_post")
def my_posts(email: str = Depends(require_owner), volunteers: Collection = Depends(get_volunteer_collection)):
    return [serialize_doc(p) for p in volunteers.find({"organizer.email": email})]


@router.get("/volunteers/{post_id}")
def get_post(post_id: str, volunteers: Collection = Depends(get_volunteer_collection)):
    post = volunteers.find_one({"_id": parse_object_id(post_id)})
    if not post:
        raise HTTPException(404, "Post not found")
    return serialize_doc(post)


@router.get("/AllVolunteer")
def search_posts(search: str = Query(""), volunteers: Collection = Depends(get_volunteer_collection)):
    pattern = re.escape(search.strip())
    q = {
        "$or": [
            {"postTitle": {"$regex": pattern, "$options": "i"}},
            {"title": {"$regex": pattern, "$options": "i"}},
            {"category": {"$regex": pattern, "$options": "i"}},
        ]
    }
    return [serialize_doc(p) for p in volunteers.find(q)]
