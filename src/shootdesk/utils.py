import base64
import binascii


def is_http_url(data) -> bool:
    """
    Check if the provided data is an http(s) URL
    """
    return isinstance(data, str) and data.startswith(("http://", "https://"))


def remove_b64_header(data: str) -> str:
    """
    Remove the base64 header from a data URL and restore missing padding.
    """
    if data.startswith("data:"):
        data = data.split(",", 1)[-1]
    img_b64 = "".join(data.split())
    padding = len(img_b64) % 4
    if padding:
        img_b64 += "=" * (4 - padding)
    return img_b64


def decode_b64_image(data: str) -> bytes:
    """
    Decode inline image data, with or without a ``data:`` header.

    Raises ``ValueError`` when the payload is not valid base64.
    """
    try:
        return base64.b64decode(remove_b64_header(data), validate=True)
    except binascii.Error as e:
        raise ValueError(f"Invalid base64 image data: {e}") from e


def is_truthy_flag(value) -> bool:
    """``True`` or the string ``"true"`` as posted by HTML forms."""
    if isinstance(value, bool):
        return value
    return isinstance(value, str) and value.strip().lower() == "true"
