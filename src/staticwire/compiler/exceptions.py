from typing import Optional


class StaticWireError(Exception):
    """Base error for component loading and compilation."""

    def __init__(self, message: str, file_path: Optional[str] = None):
        self.message = message
        self.file_path = file_path
        super().__init__(self._format())

    def _format(self) -> str:
        if self.file_path:
            return f"{self.file_path}: {self.message}"
        return self.message


class ComponentLoadError(StaticWireError):
    """Raised when a component description cannot be read into a Component."""

    pass
