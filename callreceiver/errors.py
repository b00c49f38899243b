class PrebuildError(Exception):
    """Base class for errors that abort the prebuild step."""


class ManifestError(PrebuildError):
    """The manifest is missing a node the patcher requires."""


class EntryPointError(PrebuildError):
    """The entry-point file could not be patched."""
