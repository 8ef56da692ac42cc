"""Pure path normalization shared by every backend.

Canonical paths are absolute and ``/``-separated. Directory paths end with
``/`` and file paths never do; the root is ``/``. Nothing in this module
touches a backend, so Location and File can reason about paths structurally.
"""

from .errors import BadFilePrefixError, InvalidPathError

SEP = "/"
ROOT = "/"


def _check(path: str, what: str) -> str:
    if not isinstance(path, str):
        raise InvalidPathError(f"{what} must be a string, got {type(path).__name__}")
    if "\x00" in path:
        raise InvalidPathError(f"{what} contains a NUL character: {path!r}")
    return path.replace("\\", SEP)


def is_dir_path(path: str) -> bool:
    """True if ``path`` names a directory (trailing separator or dot segment)."""
    path = path.replace("\\", SEP)
    if path.endswith(SEP):
        return True
    return path.rsplit(SEP, 1)[-1] in (".", "..")


def normalize(base: str, path: str) -> str:
    """Resolve ``path`` against the directory ``base`` into a canonical path.

    Absolute paths ignore ``base``. ``..`` above the root is clamped to the
    root rather than treated as an error.

    Args:
        base: Directory the relative path is resolved from
        path: Absolute or relative path, ``/`` or ``\\`` separated

    Returns:
        Canonical absolute path, slash-terminated for directories

    Raises:
        InvalidPathError: If ``path`` is empty or malformed
    """
    path = _check(path, "Path")
    if not path:
        raise InvalidPathError("Path must not be empty")
    base = _check(base, "Base path")

    directory = is_dir_path(path)
    if not path.startswith(SEP):
        path = f"{base}{SEP}{path}"

    segments: list[str] = []
    for part in path.split(SEP):
        if part in ("", "."):
            continue
        if part == "..":
            # Clamp at root
            if segments:
                segments.pop()
            continue
        segments.append(part)

    if not segments:
        return ROOT

    result = SEP + SEP.join(segments)
    return result + SEP if directory else result


def dirname(path: str) -> str:
    """Slash-terminated parent directory of a canonical path."""
    trimmed = path.rstrip(SEP)
    if not trimmed:
        return ROOT
    return trimmed.rsplit(SEP, 1)[0] + SEP


def basename(path: str) -> str:
    """Last segment of a canonical path, ``""`` for the root."""
    return path.rstrip(SEP).rsplit(SEP, 1)[-1]


def validate_prefix(prefix: str) -> str:
    """Reject listing prefixes that try to carry a directory component."""
    if SEP in prefix or "\\" in prefix:
        raise BadFilePrefixError(
            f"File prefix may not contain a path separator, use new_location() instead: {prefix!r}"
        )
    return prefix
