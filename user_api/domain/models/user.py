from dataclasses import dataclass


@dataclass(frozen=True)
class User:
    """
    Pure domain model for User entity.

    The ID is assigned by the system when the user is created; users are
    never mutated afterwards.
    """
    id: str
    name: str
