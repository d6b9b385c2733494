# app/core/vapid.py
from cryptography.hazmat.primitives.serialization import Encoding, PublicFormat
from py_vapid import Vapid
from py_vapid.utils import b64urlencode


def generate_vapid_keys() -> dict:
    """Create a fresh P-256 keypair in the base64url form browsers and pywebpush expect."""
    vapid = Vapid()
    vapid.generate_keys()
    # uncompressed EC point, used as applicationServerKey by the browser
    public = vapid.public_key.public_bytes(Encoding.X962, PublicFormat.UncompressedPoint)
    private = vapid.private_key.private_numbers().private_value.to_bytes(32, "big")
    return {
        "publicKey": b64urlencode(public),
        "privateKey": b64urlencode(private),
    }
