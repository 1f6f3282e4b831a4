"""Utility for resolving client names to clients."""

from fleetledger.domain.client import ClientService
from fleetledger.domain.entities import Client
from fleetledger.domain.errors import NotFoundError


def resolve_client(client_service: ClientService, client: str) -> Client:
    """Resolve a client ID or name to a client.

    IDs are tried first, then names (case-insensitive).

    Args:
        client_service: ClientService instance
        client: Client ID or name

    Returns:
        The matching client

    Raises:
        NotFoundError: If no client matches
    """
    found = client_service.get_client(client.strip())
    if found is not None:
        return found

    found = client_service.find_client_by_name(client)
    if found is not None:
        return found

    raise NotFoundError(f"Client '{client}' not found")
