"""Mappers for converting between database rows and domain models.

Nested collections are written with ``model_dump(mode="json")`` so the
JSONB columns hold plain strings for ids and dates, and are validated
back into domain models on the way out.
"""

from typing import Any, Dict

from connector.domain.model import Post, Profile, User


def row_to_user(row: Dict[str, Any]) -> User:
    """Convert database row to User domain model."""
    return User(
        id=row["id"],
        name=row["name"],
        email=row["email"],
        avatar=row.get("avatar"),
        password_hash=row["password_hash"],
        created_at=row["created_at"],
    )


def user_to_dict(user: User) -> Dict[str, Any]:
    """Convert User domain model to database dict."""
    data = user.model_dump()
    data["email"] = user.email.root
    return data


def row_to_post(row: Dict[str, Any]) -> Post:
    """Convert database row to Post domain model."""
    return Post.model_validate(
        {
            "id": row["id"],
            "author_id": row["author_id"],
            "name": row["name"],
            "avatar": row.get("avatar"),
            "text": row["text"],
            "likes": row.get("likes") or [],
            "comments": row.get("comments") or [],
            "created_at": row["created_at"],
        }
    )


def post_to_dict(post: Post) -> Dict[str, Any]:
    """Convert Post domain model to database dict."""
    return {
        "id": post.id,
        "author_id": post.author_id,
        "name": post.name,
        "avatar": post.avatar,
        "text": post.text,
        "likes": [like.model_dump(mode="json") for like in post.likes],
        "comments": [comment.model_dump(mode="json") for comment in post.comments],
        "created_at": post.created_at,
    }


def row_to_profile(row: Dict[str, Any]) -> Profile:
    """Convert database row to Profile domain model."""
    return Profile.model_validate(
        {
            "id": row["id"],
            "user_id": row["user_id"],
            "status": row["status"],
            "skills": row.get("skills") or [],
            "company": row.get("company"),
            "website": row.get("website"),
            "location": row.get("location"),
            "bio": row.get("bio"),
            "github_username": row.get("github_username"),
            "social": row.get("social") or {},
            "experience": row.get("experience") or [],
            "education": row.get("education") or [],
            "created_at": row["created_at"],
            "updated_at": row["updated_at"],
        }
    )


def profile_to_dict(profile: Profile) -> Dict[str, Any]:
    """Convert Profile domain model to database dict."""
    return {
        "id": profile.id,
        "user_id": profile.user_id,
        "status": profile.status,
        "skills": list(profile.skills),
        "company": profile.company,
        "website": profile.website,
        "location": profile.location,
        "bio": profile.bio,
        "github_username": profile.github_username,
        "social": profile.social.model_dump(mode="json"),
        "experience": [e.model_dump(mode="json") for e in profile.experience],
        "education": [e.model_dump(mode="json") for e in profile.education],
        "created_at": profile.created_at,
        "updated_at": profile.updated_at,
    }
