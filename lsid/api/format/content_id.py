"""Encode a sha2-256 digest as a CIDv1 string.

The identifier is the multibase base32 (lower case, unpadded, prefix ``b``)
rendering of::

    <cid version 1> <raw codec 0x55> <sha2-256 code 0x12> <length 32> <digest>

where every integer is an unsigned varint.
"""

import base64

CID_VERSION = 0x01
RAW_CODEC = 0x55
SHA2_256 = 0x12
MULTIBASE_BASE32 = "b"


def _uvarint(value: int) -> bytes:
    out = bytearray()
    while True:
        byte = value & 0x7F
        value >>= 7
        if value:
            out.append(byte | 0x80)
        else:
            out.append(byte)
            return bytes(out)


def content_id(digest: bytes) -> str:
    """Wrap a sha2-256 ``digest`` in a CIDv1 with the raw codec."""
    multihash = _uvarint(SHA2_256) + _uvarint(len(digest)) + digest
    binary = _uvarint(CID_VERSION) + _uvarint(RAW_CODEC) + multihash
    encoded = base64.b32encode(binary).decode("ascii").lower().rstrip("=")
    return MULTIBASE_BASE32 + encoded
