"""Client domain service."""

from typing import Optional

from fleetledger.domain.entities import Client
from fleetledger.domain.selection import Selection, SelectionResolver
from fleetledger.domain.store import LedgerStore


class ClientService:
    """Service for managing clients and the selections that point at them."""

    def __init__(self, store: LedgerStore, resolver: Optional[SelectionResolver] = None):
        """Initialize client service.

        Args:
            store: LedgerStore instance
            resolver: Selection resolver; defaults to one selecting the first client
        """
        self.store = store
        self.resolver = resolver if resolver is not None else SelectionResolver.initial(store.clients)

    @property
    def selection(self) -> Selection:
        return self.resolver.selection

    def add_client(self, name: str) -> Client:
        """Add a client and select it for the next order.

        Args:
            name: Client name

        Returns:
            The new client

        Raises:
            EmptyNameError: If the name is blank
            DuplicateNameError: If the name exists, ignoring case
        """
        previous = self.store.clients
        client = self.store.add_client(name)
        self.resolver.client_added(client, previous)
        return client

    def remove_client(self, client_id: str) -> Client:
        """Remove a client. Their past orders are kept.

        Args:
            client_id: Client ID

        Returns:
            The removed client

        Raises:
            NotFoundError: If the client doesn't exist
        """
        client = self.store.remove_client(client_id)
        self.resolver.client_removed(client, self.store.clients)
        return client

    def get_client(self, client_id: str) -> Optional[Client]:
        """Get client by ID, or None if not found."""
        return self.store.get_client(client_id)

    def find_client_by_name(self, name: str) -> Optional[Client]:
        """Get client by name (case-insensitive), or None if not found."""
        return self.store.find_client_by_name(name)

    def list_clients(self) -> list[Client]:
        """List all clients in the order they were added."""
        return list(self.store.clients)
