# pyobjmesh/errors.py
"""Exceptions raised while turning OBJ data into an ObjMesh."""


class ObjLoadError(Exception):
    """Base class for every failure of the load entry points."""


class ObjFileNotFoundError(ObjLoadError, FileNotFoundError):
    """The input path could not be opened."""

    def __init__(self, path: str) -> None:
        super().__init__(f"file not found: {path}")
        self.path = path


class ObjParseError(ObjLoadError, ValueError):
    """The OBJ data could not be read or parsed.

    The message is deliberately coarse; the underlying parser error, if any,
    is available as ``__cause__``.
    """

    def __init__(self, message: str = "failed to parse OBJ data") -> None:
        super().__init__(message)


class ObjIndexError(ObjLoadError, LookupError):
    """A face references a coordinate that is not in the object's tables."""
