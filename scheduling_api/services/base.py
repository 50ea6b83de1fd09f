from __future__ import annotations

from scheduling_api.repositories.base import BaseRepository


class BaseService:
    """
    Base class for services. Holds the repository bound to the current request.

    Services keep business logic and authorization, delegating data access to the
    repository. They know nothing about HTTP.
    """

    def __init__(self, repository: BaseRepository) -> None:
        self.repository = repository
