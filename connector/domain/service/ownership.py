"""Ownership policy for mutating posts, comments and profiles."""

from typing import Union

import logfire

from connector.domain.error import NotAuthorizedError
from connector.domain.model import Comment, Education, Experience, Post, Profile
from connector.domain.value import UserId

from .base import Service

OwnedResource = Union[Post, Comment, Profile, Experience, Education]


class OwnershipPolicy(Service):
    """Decides whether a user may change or delete a resource.

    - Post: only its author.
    - Comment: only the comment's author. Owning the post grants nothing.
    - Profile: only its owner.
    - Experience / Education: only the owner of the enclosing profile,
      which must be passed as ``parent``.

    Existence is the caller's concern: look the resource up first so a
    missing resource is reported as not found rather than not authorized.
    """

    def may_mutate(
        self,
        user_id: UserId,
        resource: OwnedResource,
        parent: Profile | None = None,
    ) -> bool:
        """Check whether ``user_id`` may mutate ``resource``.

        Raises:
            ValueError: If a profile entry is checked without its profile
            TypeError: If the resource type has no ownership rule
        """
        if isinstance(resource, (Post, Comment)):
            return resource.author_id == user_id
        if isinstance(resource, Profile):
            return resource.user_id == user_id
        if isinstance(resource, (Experience, Education)):
            if parent is None:
                raise ValueError(
                    f"{type(resource).__name__} ownership requires its profile"
                )
            return parent.user_id == user_id
        raise TypeError(f"No ownership rule for {type(resource).__name__}")

    def ensure_may_mutate(
        self,
        user_id: UserId,
        resource: OwnedResource,
        parent: Profile | None = None,
    ) -> None:
        """Raise unless ``user_id`` may mutate ``resource``.

        Raises:
            NotAuthorizedError: If the user does not own the resource
        """
        if self.may_mutate(user_id, resource, parent=parent):
            return

        kind = type(resource).__name__.lower()
        logfire.warn(
            "Ownership check denied",
            resource=kind,
            resource_id=str(resource.id),
            user_id=str(user_id),
        )
        raise NotAuthorizedError(kind, str(resource.id), str(user_id))
