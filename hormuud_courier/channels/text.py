"""Rendering and segmentation of outbound message text."""

from ..domain.entities import CONFIG_MAX_LENGTH, Channel, OutboundMessage

# How far back from the limit a whitespace character may end a segment
_WORD_BREAK_WINDOW = 6


def split_attachment(attachment: str) -> tuple[str, str]:
    """Split a ``<content-type>:<url>`` attachment into its two parts."""
    content_type, sep, url = attachment.partition(":")
    if not sep:
        return "", attachment
    return content_type, url


def get_text_and_attachments(msg: OutboundMessage) -> str:
    """Render a message as its text followed by one attachment URL per line."""
    text = msg.text
    for attachment in msg.attachments:
        _, url = split_attachment(attachment)
        text = f"{text}\n{url}"
    return text.strip()


def split_msg(text: str, max_length: int = 160) -> list[str]:
    """
    Split text into segments of at most ``max_length`` characters.

    The text is stripped first. A segment ends early at a whitespace
    character found within the last few characters before the limit, and
    that whitespace stays at the end of the segment, so joining the segments
    gives back the stripped text. Blank text yields no segments.
    """
    if max_length < 1:
        raise ValueError("max_length must be positive")

    text = text.strip()
    if not text:
        return []
    if len(text) <= max_length:
        return [text]

    parts: list[str] = []
    part: list[str] = []
    for char in text:
        part.append(char)
        if len(part) == max_length or (len(part) > max_length - _WORD_BREAK_WINDOW and char.isspace()):
            parts.append("".join(part))
            part = []

    if part:
        parts.append("".join(part))
    return parts


def split_msg_by_channel(channel: Channel, text: str, max_length: int) -> list[str]:
    """
    Split text using the channel's ``max_length`` config when it has one.

    Missing or non-positive values fall back to ``max_length``.
    """
    limit = channel.int_config_for_key(CONFIG_MAX_LENGTH, max_length)
    if limit < 1:
        limit = max_length
    return split_msg(text, limit)
