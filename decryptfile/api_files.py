"""File-oriented convenience wrappers."""

from .main import decryptfile


def derive_output_path(file: str):
    return decryptfile.derive_output_path(file)


def decrypt_file(
    file: str,
    password: str | bytes,
    output: str | None = None,
    silent: bool = False,
):
    return decryptfile.decrypt_file(
        file,
        password,
        output=output,
        silent=silent,
    )
