"""Repository interface for order operations."""

from abc import ABC, abstractmethod


class OrdersRepo(ABC):
    """Contract for the order store.

    ``place`` and ``set_status`` are the only mutators; every other method is
    a read over the current contents.
    """

    @abstractmethod
    def place(self, draft):
        """Validate a draft and store it as a new pending order."""
        raise NotImplementedError

    @abstractmethod
    def set_status(self, order_id, status):
        """Move an order to ``status`` if the lifecycle allows it."""
        raise NotImplementedError

    @abstractmethod
    def get(self, order_id):
        """Return a single order."""
        raise NotImplementedError

    @abstractmethod
    def all(self):
        """Return a read-only snapshot of every order, newest first."""
        raise NotImplementedError
