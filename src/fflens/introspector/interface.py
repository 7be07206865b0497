"""MediaIntrospector interface for reading stream information."""

from pathlib import Path
from typing import Protocol

from fflens.domain.models import MediaDescriptor


class MediaIntrospectionError(Exception):
    """Raised when a file's stream information cannot be read at all."""

    pass


class MediaIntrospector(Protocol):
    """Protocol for media introspection implementations."""

    def get_file_info(self, path: Path) -> MediaDescriptor:
        """Read stream information from a media file.

        Raises:
            MediaIntrospectionError: If the file cannot be introspected.
        """
        ...

    def read(self, path: Path) -> MediaDescriptor:
        """Read stream information, returning an empty descriptor on failure."""
        ...
