from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session
from app.core.errors import storage_errors
from app.db.session import get_db
from app.schemas.post_schema import PostCreate, PostUpdate, ResponsePost, MessageResponse
from app.services import post as post_service

router = APIRouter(prefix="/posts", tags=["posts"])

# Get all posts, newest first

@router.get("", response_model=list[ResponsePost])

def get_all_posts(db: Session = Depends(get_db)):
    with storage_errors(db, "fetching posts"):
        return post_service.list_posts(db)

# Get a post by id

@router.get("/{post_id}", response_model=ResponsePost)

def get_post(post_id: int, db: Session = Depends(get_db)):
    with storage_errors(db, "fetching post by ID"):
        post = post_service.get_post(db, post_id)
    if post is None:
        raise HTTPException(status_code=404, detail="Post not found")
    return post

# Create a new post

@router.post("", response_model=ResponsePost, status_code=status.HTTP_201_CREATED)

def create_post(post: PostCreate, db: Session = Depends(get_db)):
    with storage_errors(db, "inserting new post"):
        post_id = post_service.create_post(db, post)
    return ResponsePost(id=post_id, **post.model_dump())

# Update title, content and date. A missing id is not reported.

@router.put("/{post_id}", response_model=MessageResponse)

def update_post(post_id: int, post_data: PostUpdate, db: Session = Depends(get_db)):
    with storage_errors(db, "updating post"):
        post_service.update_post(db, post_id, post_data)
    return {"message": "Post updated successfully"}

# Delete. A missing id is not reported either.

@router.delete("/{post_id}", response_model=MessageResponse)

def delete_post(post_id: int, db: Session = Depends(get_db)):
    with storage_errors(db, "deleting post"):
        post_service.delete_post(db, post_id)
    return {"message": "Post deleted successfully"}
