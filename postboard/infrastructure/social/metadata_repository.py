"""
Adapter: Service metadata.

Implements MetadataRepository port.
Reports the configured service name and version.
"""

from postboard.domain.social.entities import Metadata
from postboard.domain.social.ports import MetadataRepository


class StaticMetadataRepository(MetadataRepository):
    """Metadata adapter returning a fixed name and version."""

    def __init__(self, name: str, version: str) -> None:
        self._metadata = Metadata(name=name, version=version)

    async def fetch_metadata(self) -> Metadata:
        """Return the configured service metadata."""
        return self._metadata
