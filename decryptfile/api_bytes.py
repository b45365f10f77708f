"""Key derivation and in-memory decryption wrappers."""

from .main import decryptfile


def derive_key(password: str | bytes):
    return decryptfile.derive_key(password)


def split_container(blob: bytes):
    return decryptfile.split_container(blob)


def decrypt_blocks(key: bytes, iv: bytes, ciphertext: bytes):
    return decryptfile.decrypt_blocks(key, iv, ciphertext)


def unpad(padded: bytes):
    return decryptfile.unpad(padded)


def decrypt_bytes(blob: bytes, password: str | bytes):
    return decryptfile.decrypt_bytes(blob, password)
