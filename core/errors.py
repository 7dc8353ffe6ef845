class TodoStorageError(Exception):
    """Reading or writing a todo file failed."""

    def __init__(self, path, message: str):
        super().__init__(f"{path}: {message}")
        self.path = path
        self.message = message


class TodoFormatError(TodoStorageError):
    """A todo file exists but its content is not a valid todo list."""


class ShellCommandError(Exception):
    """An external shell command could not be started."""
