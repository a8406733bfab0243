"""Migration-level exceptions."""


class NotFoundError(Exception):
    """Raised when a required input path does not exist."""

    def __init__(self, message: str, path: str | None = None):
        self.path = path
        super().__init__(message)


class MigrationError(Exception):
    """Raised when a test case or directory cannot be migrated.

    Wraps the underlying failure (``FormatError``, ``TemplateError``,
    ``NotFoundError`` or ``OSError``) together with a message naming the
    file or test case involved.
    """

    def __init__(self, message: str, cause: BaseException | None = None):
        self.message = message
        self.cause = cause
        if cause is not None:
            self.__cause__ = cause
        super().__init__(message)

    def __str__(self) -> str:
        if self.cause is None:
            return self.message
        return f"{self.message}: {self.cause}"
