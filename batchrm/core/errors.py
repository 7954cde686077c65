"""Per-target errors raised while sizing or removing a file."""

from __future__ import annotations

STAGE_STAT = "stat"
STAGE_REMOVE = "remove"


class TargetError(Exception):
    """Base class for failures tied to a single target path."""

    def __init__(self, path: str, stage: str, cause: Exception | None = None) -> None:
        self.path = path
        self.stage = stage
        self.cause = cause
        super().__init__(self._render())

    @property
    def reason(self) -> str:
        """Underlying cause as text, without the path."""
        if self.cause is None:
            return "unknown error"
        return getattr(self.cause, "strerror", None) or str(self.cause)

    def _render(self) -> str:
        if self.stage == STAGE_STAT:
            return f"Error: {self.reason}. Unable to read size of file {self.path}."
        return f"Error: {self.reason}. Unable to remove file {self.path}."


class TargetNotFound(TargetError):
    """The target path does not exist."""
    pass


class TargetAccessDenied(TargetError):
    """The operating system refused access to the target."""

    def __init__(
        self,
        path: str,
        stage: str,
        cause: Exception | None = None,
        holders: list[str] | None = None,
    ) -> None:
        self.holders = list(holders or [])
        super().__init__(path, stage, cause)

    def _render(self) -> str:
        message = super()._render()
        if self.holders:
            message += f" In use by {', '.join(self.holders)}."
        return message


class StatFailed(TargetError):
    """The size of the target could not be determined."""
    pass


class RemoveFailed(TargetError):
    """The removal call was rejected."""
    pass


def classify_os_error(path: str, stage: str, exc: OSError | ValueError) -> TargetError:
    """
    Map an error raised for a target onto the error taxonomy.

    ValueError covers paths the OS cannot represent (embedded NUL,
    unencodable characters); it maps to StatFailed or RemoveFailed.

    Args:
        path: Target path as given to the engine
        stage: STAGE_STAT or STAGE_REMOVE
        exc: The error raised by the filesystem call

    Returns:
        The matching TargetError subclass instance
    """
    if isinstance(exc, FileNotFoundError):
        return TargetNotFound(path, stage, exc)
    if isinstance(exc, PermissionError):
        return TargetAccessDenied(path, stage, exc)
    if stage == STAGE_STAT:
        return StatFailed(path, stage, exc)
    return RemoveFailed(path, stage, exc)
