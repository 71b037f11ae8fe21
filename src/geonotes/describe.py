"""
Human-readable labels for note attachments.
"""

from __future__ import annotations

from typing import assert_never

from .datamodel import Attachment, Audio, Link, Photo, Video


HD_PHOTO_MIN_WIDTH = 1920
LONG_AUDIO_SECONDS = 300
LONG_VIDEO_SECONDS = 120


def describe_attachment(attachment: Attachment) -> str:
    """Describe an attachment for display.

    Every variant of ``Attachment`` must be handled here; a type checker
    flags the ``assert_never`` call when a new variant is added.
    """
    if isinstance(attachment, Photo):
        if attachment.width > HD_PHOTO_MIN_WIDTH:
            return f"📷 High-definition photo ({attachment.width} x {attachment.height})"
        return "📷 Photo"
    if isinstance(attachment, Audio):
        if attachment.duration > LONG_AUDIO_SECONDS:
            minutes = attachment.duration // 60
            return f"🎵 Audio ({minutes} min)"
        return "🎵 Audio"
    if isinstance(attachment, Link):
        return f"🔗 {attachment.effective_label()}"
    if isinstance(attachment, Video):
        if attachment.seconds > LONG_VIDEO_SECONDS:
            return "🎬 Long video"
        return "🎬 Video"
    assert_never(attachment)
