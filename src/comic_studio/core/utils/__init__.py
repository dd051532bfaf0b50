"""
Utils Package

Serialization and image payload helpers.
"""

from .serialization import (
    serialize_asset,
    deserialize_asset,
    serialize_library,
    deserialize_library,
    load_library_json,
    save_library_json,
)
from .imaging import (
    ImageDecodeError,
    decode_base64_image,
    encode_image_base64,
    read_image_file_base64,
)

__all__ = [
    "serialize_asset",
    "deserialize_asset",
    "serialize_library",
    "deserialize_library",
    "load_library_json",
    "save_library_json",
    "ImageDecodeError",
    "decode_base64_image",
    "encode_image_base64",
    "read_image_file_base64",
]
