from typing import Protocol, runtime_checkable


@runtime_checkable
class RevisionProviderProtocol(Protocol):
    """Contract for anything able to report the current commit identifier."""

    def get_revision(self) -> str: ...
