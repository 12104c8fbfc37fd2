"""Custom Dishka scopes for FNG."""

from dishka import BaseScope, new_scope


class Scope(BaseScope):  # type: ignore[misc]  # BaseScope is designed to be subclassed
    """FNG dependency injection scopes.

    Hierarchy: APP -> UOW

    - APP: Application lifetime (HTTP client, engine, Firebase app)
    - UOW: Unit of Work (one manual HTTP call or one scheduled fire)
    """

    APP = new_scope("APP")
    UOW = new_scope("UOW")
