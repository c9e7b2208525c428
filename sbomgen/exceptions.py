"""Custom exceptions for sbomgen."""


class SbomgenError(Exception):
    """Base exception for all sbomgen errors."""


class WalkError(SbomgenError):
    """Raised when a directory walk cannot start (missing or unreadable root)."""

    def __init__(self, root: str, reason: str):
        self.root = root
        self.reason = reason
        super().__init__(f"directory walk failed: {root}: {reason}")


class ManifestParseError(SbomgenError):
    """Raised by a parser when a manifest cannot be decoded at all."""

    def __init__(self, file_path: str, reason: str):
        self.file_path = file_path
        self.reason = reason
        super().__init__(f"cannot parse {file_path}: {reason}")


class UnknownFormatError(SbomgenError):
    """Raised when an output format name is not recognized."""


class FormatError(SbomgenError):
    """Raised when a formatter fails to serialize an SBOM."""
