"""Keeps the current client selections consistent with the client list.

Orders name their client by string, so removing a client never touches an
order. What does need fixing up is the transient selection state: the
client chosen for invoicing and the client on the order being drafted.
"""

import logging
from dataclasses import dataclass
from typing import Optional, Sequence

from fleetledger.domain.entities import Client

logger = logging.getLogger(__name__)


@dataclass
class Selection:
    """Currently selected client names; empty string means none."""

    invoice_client: str = ""
    draft_client: str = ""


def _first_name(clients: Sequence[Client]) -> str:
    return clients[0].name if clients else ""


class SelectionResolver:
    """Re-derives the selection after the client list changes."""

    def __init__(self, selection: Optional[Selection] = None):
        self.selection = selection if selection is not None else Selection()

    @classmethod
    def initial(cls, clients: Sequence[Client]) -> "SelectionResolver":
        """Start with the first client selected everywhere."""
        name = _first_name(clients)
        return cls(Selection(invoice_client=name, draft_client=name))

    def client_removed(self, removed: Client, remaining: Sequence[Client]) -> Selection:
        """Move any selection pointing at a removed client to the first remaining one.

        Args:
            removed: The client that was removed
            remaining: Client list after removal

        Returns:
            The updated selection
        """
        fallback = _first_name(remaining)
        if self.selection.invoice_client == removed.name:
            self.selection.invoice_client = fallback
            logger.debug("Invoice client reset to %r", fallback)
        if self.selection.draft_client == removed.name:
            self.selection.draft_client = fallback
            logger.debug("Draft client reset to %r", fallback)
        return self.selection

    def client_added(self, added: Client, previous: Sequence[Client]) -> Selection:
        """Select a newly added client.

        The new client becomes the invoice client when nothing was selected or
        the list was empty before, and always becomes the draft client.

        Args:
            added: The client that was added
            previous: Client list before the addition

        Returns:
            The updated selection
        """
        if not self.selection.invoice_client or not previous:
            self.selection.invoice_client = added.name
        self.selection.draft_client = added.name
        return self.selection
