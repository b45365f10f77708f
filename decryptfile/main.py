# DECRYPTFILE AES-256-CBC ENGINE ->

import argparse
import hashlib
import os as _os_module
import pathlib
import sys
import typing
from dataclasses import dataclass

from cryptography.hazmat.primitives import padding
from cryptography.hazmat.primitives.ciphers import Cipher, algorithms, modes

from .errors import (
    CipherInitError,
    DecryptFileError,
    DecryptionError,
    InputReadError,
    InvalidPath,
    MalformedContainer,
    OutputWriteError,
    PaddingError,
)

try:
    import colorama
    colorama.init()  # Initialize colorama for cross-platform color support
except ImportError:
    colorama = None  # Colorama is optional


PathLike = typing.Union[str, "_os_module.PathLike[str]"]
Password = typing.Union[str, bytes, bytearray, memoryview]


@dataclass(frozen=True)
class DecryptResult:
    input_path: pathlib.Path
    output_path: pathlib.Path
    input_size: int
    output_size: int

    def summary(self) -> str:
        return (
            f"Decrypted {str(self.input_path)!r} -> {str(self.output_path)!r} "
            f"({self.input_size} bytes -> {self.output_size} bytes)"
        )


class decryptfile:

    @staticmethod
    def _env_int(name: str) -> typing.Optional[int]:
        value = _os_module.getenv(name)
        if not value:
            return None
        try:
            parsed = int(value)
        except (TypeError, ValueError):
            return None
        if parsed <= 0:
            return None
        return parsed

    ENGINE_VERSION = "1.0.0"
    KEY_LEN = 32  # AES-256
    IV_LEN = 16
    BLOCK_SIZE = 16
    OUTPUT_SUFFIX = ".clear"
    PASSWORD_ENCODING = "utf-8"
    MAX_INPUT_BYTES = 2 * 1024 * 1024 * 1024  # whole file is held in memory
    _MAX_INPUT_BYTES_ENV = _env_int("DECRYPTFILE_MAX_INPUT_BYTES")
    if _MAX_INPUT_BYTES_ENV is not None:
        MAX_INPUT_BYTES = _MAX_INPUT_BYTES_ENV
    _SILENT_MODE: typing.ClassVar[bool] = False

    # KEY DERIVATION

    @staticmethod
    def _coerce_password_bytes(password: Password) -> bytes:
        if isinstance(password, str):
            # argv bytes that are not valid UTF-8 round-trip unchanged
            return password.encode(decryptfile.PASSWORD_ENCODING, "surrogateescape")
        if isinstance(password, (bytes, bytearray, memoryview)):
            return bytes(password)
        raise TypeError(f"Unsupported password type: {type(password)!r}")

    @staticmethod
    def derive_key(password: Password) -> bytes:
        """SHA-256 of the password bytes, used directly as the AES-256 key (no salt, one round)."""
        return hashlib.sha256(decryptfile._coerce_password_bytes(password)).digest()

    # CONTAINER: IV (16 bytes) || CIPHERTEXT

    @staticmethod
    def split_container(blob: typing.Union[bytes, bytearray, memoryview]) -> typing.Tuple[bytes, memoryview]:
        view = memoryview(blob)
        if len(view) < decryptfile.IV_LEN:
            raise MalformedContainer("encrypted file is too short to contain an IV")
        return view[:decryptfile.IV_LEN].tobytes(), view[decryptfile.IV_LEN:]

    # AES-256-CBC

    @staticmethod
    def decrypt_blocks(key: bytes, iv: bytes, ciphertext: typing.Union[bytes, memoryview]) -> bytes:
        """
        Raw CBC decryption of ``ciphertext``; the result still carries its padding.

        Raises CipherInitError for a bad key/IV length and DecryptionError when the
        ciphertext is empty or not a whole number of blocks.
        """
        if len(key) != decryptfile.KEY_LEN:
            raise CipherInitError(
                f"failed to initialize cipher: key must be {decryptfile.KEY_LEN} bytes, got {len(key)}"
            )
        if len(iv) != decryptfile.IV_LEN:
            raise CipherInitError(
                f"failed to initialize cipher: IV must be {decryptfile.IV_LEN} bytes, got {len(iv)}"
            )
        size = len(ciphertext)
        if size == 0 or size % decryptfile.BLOCK_SIZE:
            raise DecryptionError(
                f"decryption failed: ciphertext length {size} is not a positive multiple "
                f"of {decryptfile.BLOCK_SIZE}"
            )
        try:
            cipher = Cipher(algorithms.AES(bytes(key)), modes.CBC(bytes(iv)))
        except ValueError as exc:
            raise CipherInitError(f"failed to initialize cipher: {exc}") from exc
        decryptor = cipher.decryptor()
        try:
            return decryptor.update(ciphertext) + decryptor.finalize()
        except ValueError as exc:
            raise DecryptionError(f"decryption failed: {exc}") from exc

    @staticmethod
    def unpad(padded: bytes) -> bytes:
        unpadder = padding.PKCS7(decryptfile.BLOCK_SIZE * 8).unpadder()
        try:
            return unpadder.update(padded) + unpadder.finalize()
        except ValueError as exc:
            # wrong password and corrupted ciphertext look the same: there is no MAC
            raise PaddingError("decryption failed: invalid padding") from exc

    @staticmethod
    def decrypt_bytes(blob: typing.Union[bytes, bytearray, memoryview], password: Password) -> bytes:
        key = decryptfile.derive_key(password)
        iv, ciphertext = decryptfile.split_container(blob)
        return decryptfile.unpad(decryptfile.decrypt_blocks(key, iv, ciphertext))

    # FILE HANDLING

    @staticmethod
    def derive_output_path(path_like: PathLike) -> pathlib.Path:
        path = pathlib.Path(path_like)
        if path.name in ("", ".", ".."):
            raise InvalidPath(f"input path {str(path_like)!r} has no file name")
        return path.with_name(path.name + decryptfile.OUTPUT_SUFFIX)

    @staticmethod
    def read_input(path: pathlib.Path, max_bytes: typing.Optional[int] = None) -> bytes:
        limit = max_bytes or decryptfile.MAX_INPUT_BYTES
        try:
            if not path.is_file():
                raise FileNotFoundError("no such file")
            size = path.stat().st_size
            if size > limit:
                raise InputReadError(
                    f"failed to read input file {str(path)!r}: {size} bytes exceeds the "
                    f"{limit} byte limit"
                )
            with open(path, "rb") as handle:
                return handle.read()
        except OSError as exc:
            raise InputReadError(f"failed to read input file {str(path)!r}: {exc}") from exc

    @staticmethod
    def write_output(path: pathlib.Path, data: bytes) -> None:
        try:
            with open(path, "wb") as handle:
                handle.write(data)
        except OSError as exc:
            raise OutputWriteError(f"failed to write output file {str(path)!r}: {exc}") from exc

    @staticmethod
    def decrypt_file(
        file: PathLike,
        password: Password,
        output: typing.Optional[PathLike] = None,
        silent: bool = False,
    ) -> DecryptResult:
        """
        Decrypt ``file`` into ``<file>.clear`` (or ``output``) and return a summary.

        The output is only opened once the padding has validated, so a failed run
        never creates or truncates it. Overwrites an existing output silently.
        """
        previous_silent = decryptfile._SILENT_MODE
        decryptfile._SILENT_MODE = silent
        try:
            src = pathlib.Path(file)
            dst = pathlib.Path(output) if output is not None else decryptfile.derive_output_path(src)
            data = decryptfile.read_input(src)
            plaintext = decryptfile.decrypt_bytes(data, password)
            decryptfile.write_output(dst, plaintext)
            result = DecryptResult(src, dst, len(data), len(plaintext))
            if not decryptfile._SILENT_MODE:
                print(result.summary())
            return result
        finally:
            decryptfile._SILENT_MODE = previous_silent


def _error_prefix(stream) -> str:
    if colorama is not None and getattr(stream, "isatty", lambda: False)():
        return f"{colorama.Fore.RED}Error:{colorama.Fore.RESET}"
    return "Error:"


def cli(argv=None) -> int:
    parser = argparse.ArgumentParser(
        prog="decrypt-file",
        description="AES-256-CBC decrypt a file produced by encrypt-file. Output saved as <input>.clear"
    )
    parser.add_argument(
        "password",
        metavar="PASSWORD",
        help="Password used to derive the AES-256 key (SHA-256(password))"
    )
    parser.add_argument(
        "input",
        metavar="FILE",
        help="Path to the encrypted file (IV || ciphertext)"
    )
    parser.add_argument(
        "-o", "--output",
        default=None,
        help="Write the plaintext here instead of <FILE>.clear"
    )
    parser.add_argument(
        "-q", "--quiet",
        action="store_true",
        help="Do not print the summary line on success"
    )
    parser.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {decryptfile.ENGINE_VERSION}"
    )

    args = parser.parse_args(argv)

    try:
        decryptfile.decrypt_file(args.input, args.password, output=args.output, silent=args.quiet)
    except DecryptFileError as exc:
        print(f"{_error_prefix(sys.stderr)} {exc}", file=sys.stderr)
        return 1
    return 0


def main(argv=None) -> int:
    return cli(argv)


if __name__ == "__main__":
    raise SystemExit(main())
