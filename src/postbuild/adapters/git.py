"""
adapters.git – Fixed-value revision provider for dry runs and tests.
"""

from dataclasses import dataclass

from postbuild.core.interfaces.git import RevisionProviderProtocol


@dataclass
class StaticRevisionProvider(RevisionProviderProtocol):
    """Return a preset revision instead of asking git.

    The engine accepts any RevisionProviderProtocol; this one is handy when
    the revision is already known (e.g. exported by CI as an env variable).
    """

    revision: str

    def get_revision(self) -> str:  # type: ignore[override]
        return self.revision.strip()
