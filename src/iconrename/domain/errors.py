class FolderPathError(RuntimeError):
    """The target path does not resolve to an existing directory."""
