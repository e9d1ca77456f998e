"""Classification engines."""
from .classifier import (
    MEDIA_EXTENSIONS,
    classify,
    is_audio_video_file,
    is_valid_media_file_name,
)

__all__ = [
    "MEDIA_EXTENSIONS",
    "classify",
    "is_audio_video_file",
    "is_valid_media_file_name",
]
