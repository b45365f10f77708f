"""
Error taxonomy for the decryption pipeline.

Every failure the pipeline can hit is terminal for the run. The CLI maps each
one to a single ``Error: <message>`` line and exit status 1, so the message of
each exception is written to be shown to the user as-is.
"""


class DecryptFileError(Exception):
    """Base class for every failure raised by decryptfile."""


class InputReadError(DecryptFileError):
    """The encrypted input could not be read (missing, not a file, too large, I/O)."""


class MalformedContainer(DecryptFileError, ValueError):
    """The container is too short to hold the 16-byte IV."""


class CipherInitError(DecryptFileError, ValueError):
    """Key or IV length does not match AES-256-CBC requirements."""


class DecryptionError(DecryptFileError, ValueError):
    """Block decryption failed, e.g. the ciphertext is not block aligned."""


class PaddingError(DecryptionError):
    """PKCS#7 padding is invalid: wrong password or corrupted ciphertext."""


class InvalidPath(DecryptFileError, ValueError):
    """No output name can be derived because the input path has no file name."""


class OutputWriteError(DecryptFileError):
    """The recovered plaintext could not be written to the output path."""


__all__ = [
    "DecryptFileError",
    "InputReadError",
    "MalformedContainer",
    "CipherInitError",
    "DecryptionError",
    "PaddingError",
    "InvalidPath",
    "OutputWriteError",
]
