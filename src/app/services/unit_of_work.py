from abc import ABC, abstractmethod

from src.app.repositories.user_repository import IUserRepository


class StoreFailure(Exception):
    """The user store is unreachable or rejected a write."""


class UnitOfWork(ABC):
    """Abstract UnitOfWork - defines repository access and transaction management"""

    # Repository properties (initialized in __aenter__)
    users: IUserRepository

    @abstractmethod
    async def __aenter__(self):
        pass

    @abstractmethod
    async def __aexit__(self, *args):
        pass

    @abstractmethod
    async def commit(self):
        """Commit the transaction, raising StoreFailure if the store rejects it"""
        pass

    @abstractmethod
    async def rollback(self):
        pass
