from __future__ import annotations


class LivedeckError(Exception):
    """Base class for livedeck errors."""


class RejectedCommand(LivedeckError):  # noqa: N818
    """A command was refused (bad argument, unauthorized actor, unknown set).

    Never surfaced to the sender; clients disable controls instead of handling
    error replies.
    """


class DeckLoadError(LivedeckError):
    """The deck source for a set is missing or malformed."""


class PersistenceError(LivedeckError):
    """The slide index snapshot could not be read or written."""
