class IniError(Exception):
    pass


class EncodingError(IniError):
    pass


class LineTooLongError(IniError):
    """A line exceeded the configured maximum length.

    Attributes:
        path: The file being read.
        lineno: The line number, starting from 1.
        length: The length of the line in characters.
        limit: The maximum length allowed.
    """

    def __init__(self, path, lineno: int, length: int, limit: int):
        self.path = path
        self.lineno = lineno
        self.length = length
        self.limit = limit

        super().__init__(
            f"{path}:{lineno}: line is {length} characters long (limit is {limit})"
        )
