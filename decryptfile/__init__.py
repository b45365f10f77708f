"""
DECRYPTFILE - AES-256-CBC file decryption

Reverses the ``IV || ciphertext`` format written by encrypt-file: the key is
SHA-256 of the password, the payload is PKCS#7 padded, and the plaintext lands
next to the input as ``<name>.clear``.
"""

from .main import DecryptResult, decryptfile
from .errors import *
from .api_bytes import decrypt_blocks, decrypt_bytes, derive_key, split_container, unpad
from .api_files import decrypt_file, derive_output_path
from .version import __version__
