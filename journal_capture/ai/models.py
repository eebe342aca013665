from dataclasses import dataclass, field


@dataclass(frozen=True)
class ImageInput:
    """Raw image sent alongside a prompt to a vision-capable model."""

    data: bytes = field(repr=False)
    mime_type: str = "image/jpeg"
