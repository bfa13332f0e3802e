# Standard library imports
from dataclasses import dataclass
from typing import Optional


@dataclass
class Camera:
    """
    Pure domain model for Camera entity - no external dependencies.

    Cameras are configured externally; the capture pipeline only reads them.
    The slug is used as the storage key prefix for every snapshot image.
    """
    id: Optional[str]
    name: str
    slug: str
    source_type: str
    source_url: str
    is_active: bool = True
    display_order: int = 0
    description: Optional[str] = None
    elevation_ft: Optional[int] = None

    def __post_init__(self) -> None:
        """Business validations"""
        if not isinstance(self.name, str) or len(self.name.strip()) < 1:
            raise ValueError("Camera name is required")
        if not isinstance(self.slug, str) or len(self.slug.strip()) < 1:
            raise ValueError("Camera slug is required")
        if not isinstance(self.source_type, str) or not self.source_type:
            raise ValueError("Camera source type is required")
        if not isinstance(self.source_url, str) or len(self.source_url.strip()) < 1:
            raise ValueError("Camera source URL is required")
