"""Domain layer errors."""


class DomainError(Exception):
    """Base domain error."""

    pass


class ValidationError(DomainError):
    """Domain validation error."""

    pass


class UnauthenticatedError(DomainError):
    """Raised when a request carries no usable identity.

    The message is identical for a missing token and a rejected one.
    """

    def __init__(self) -> None:
        super().__init__("Not authenticated")


class InvalidCredentialsError(DomainError):
    """Raised when an email/password pair does not match an identity."""

    def __init__(self) -> None:
        super().__init__("Invalid credentials")


class NotAuthorizedError(DomainError):
    """Raised when a user attempts to mutate a resource they don't own."""

    def __init__(self, resource: str, resource_id: str, user_id: str):
        self.resource = resource
        self.resource_id = resource_id
        self.user_id = user_id
        super().__init__(
            f"User {user_id} is not authorized to modify {resource} {resource_id}"
        )


class NotFoundError(DomainError):
    """Raised when a requested resource is not found."""

    def __init__(self, resource: str, identifier: str):
        self.resource = resource
        self.identifier = identifier
        super().__init__(f"{resource} not found: {identifier}")


class ConflictError(DomainError):
    """Raised when an operation conflicts with the current resource state."""

    pass


class AlreadyLikedError(ConflictError):
    """Raised when a user likes a post they already like."""

    def __init__(self, post_id: str):
        self.post_id = post_id
        super().__init__("Post already liked")


class NotYetLikedError(ConflictError):
    """Raised when a user unlikes a post they never liked."""

    def __init__(self, post_id: str):
        self.post_id = post_id
        super().__init__("Post has not yet been liked")


class EmailAlreadyRegisteredError(ConflictError):
    """Raised when registering an email that already belongs to an identity."""

    def __init__(self, email: str):
        self.email = email
        super().__init__("User already exists")


class ProfileAlreadyExistsError(ConflictError):
    """Raised when a second profile is created for the same user."""

    def __init__(self, user_id: str):
        self.user_id = user_id
        super().__init__("Profile already exists")
