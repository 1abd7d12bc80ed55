"""Infrastructure-level errors raised by Shipping collaborators.

Domain outcomes (missing order, insufficient funds, expired window, ...) are
never raised; they are returned as a WorkflowResult. The exceptions here mean
a collaborator could not be reached and always propagate to the caller.
"""


class CollaboratorUnavailable(Exception):
    """A collaborator could not complete a call."""


class LedgerUnavailable(CollaboratorUnavailable):
    """The account ledger could not be reached."""


class CatalogUnavailable(CollaboratorUnavailable):
    """The order catalog could not be reached."""
