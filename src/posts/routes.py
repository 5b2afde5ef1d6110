import logging
import math

from fastapi import APIRouter, Depends, HTTPException, Response, status
from pymongo import DESCENDING, ReturnDocument
from src.models.schemas import PostCreate, PostUpdate
from src.posts.deps import get_post_id, get_posts

logger = logging.getLogger(__name__)

router = APIRouter()

PAGE_SIZE = 10
BODY_PREVIEW_LENGTH = 200

def _doc_to_dict(doc):
    if not doc:
        return None
    doc["id"] = str(doc["_id"])
    doc.pop("_id", None)
    return doc

def _limit_body_length(doc):
    body = doc.get("body", "")
    if len(body) > BODY_PREVIEW_LENGTH:
        doc["body"] = body[:BODY_PREVIEW_LENGTH] + "..."
    return doc

@router.post("", status_code=201)
def write_post(payload: PostCreate, posts=Depends(get_posts)):
    doc = payload.model_dump()
    res = posts.insert_one(doc)
    logger.info("Created post %s", res.inserted_id)
    return _doc_to_dict(doc)

@router.get("")
def list_posts(response: Response, page: int = 1, posts=Depends(get_posts)):
    # page is 1-based
    if page < 1:
        raise HTTPException(status_code=400, detail="Invalid page")
    docs = list(
        posts.find()
        .sort("_id", DESCENDING)
        .skip((page - 1) * PAGE_SIZE)
        .limit(PAGE_SIZE)
    )
    total = posts.count_documents({})
    response.headers["Last-Page"] = str(math.ceil(total / PAGE_SIZE))
    return [_limit_body_length(_doc_to_dict(d)) for d in docs]

@router.get("/{post_id}")
def read_post(oid=Depends(get_post_id), posts=Depends(get_posts)):
    doc = posts.find_one({"_id": oid})
    if not doc:
        raise HTTPException(status_code=404, detail="Post not found")
    return _doc_to_dict(doc)

@router.delete("/{post_id}", status_code=204)
def remove_post(oid=Depends(get_post_id), posts=Depends(get_posts)):
    # 204 whether or not the post existed
    result = posts.delete_one({"_id": oid})
    logger.info("Deleted post %s (matched %d)", oid, result.deleted_count)
    return Response(status_code=status.HTTP_204_NO_CONTENT)

@router.put("/{post_id}", status_code=501)
def replace_post(oid=Depends(get_post_id)):
    raise HTTPException(status_code=501, detail="Not implemented")

@router.patch("/{post_id}")
def update_post(payload: PostUpdate, oid=Depends(get_post_id), posts=Depends(get_posts)):
    doc = payload.model_dump(exclude_unset=True, exclude_none=True)
    if not doc:
        updated = posts.find_one({"_id": oid})
    else:
        updated = posts.find_one_and_update(
            {"_id": oid},
            {"$set": doc},
            return_document=ReturnDocument.AFTER,
        )
    if not updated:
        raise HTTPException(status_code=404, detail="Post not found")
    logger.info("Updated post %s: %s", oid, ", ".join(sorted(doc)) or "no changes")
    return _doc_to_dict(updated)
