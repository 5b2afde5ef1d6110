from bson import ObjectId
from fastapi import Depends, HTTPException, status
from src.database.connection import get_db

invalid_id_exception = HTTPException(
    status_code=status.HTTP_400_BAD_REQUEST,
    detail="Invalid post id",
)

def get_post_id(post_id: str) -> ObjectId:
    if not ObjectId.is_valid(post_id):
        raise invalid_id_exception
    return ObjectId(post_id)

def get_posts(db=Depends(get_db)):
    return db.posts
