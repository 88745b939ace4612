class ExportUsageError(ValueError):
    """
    Exception raised when a command-line value cannot be converted into configuration.

    This covers values argparse cannot validate on its own, such as a malformed
    maximum file size or a depth below -1. Being a ValueError, it is reported by
    argparse as a regular usage error when raised from an argument ``type``.

    Attributes:
        option (str): The option whose value was rejected.

    Example:
        >>> error = ExportUsageError("--max-size", "Invalid size format 'abc'")
        >>> str(error)
        "--max-size: Invalid size format 'abc'"
    """

    def __init__(self, option: str, message: str) -> None:
        self.option = option
        super().__init__(f"{option}: {message}")
