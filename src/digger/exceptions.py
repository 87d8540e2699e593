class DiggerError(Exception):
    """Base exception for the Digger project."""


class MissingRoomError(DiggerError, KeyError):
    """Raised when a coordinate that must hold a room is not in the dungeon."""

    def __str__(self) -> str:
        # KeyError would repr() the message
        return str(self.args[0]) if self.args else ""


class InputClosedError(DiggerError):
    """Raised when the command stream ends; there is no way to keep playing."""


class SettingsError(DiggerError):
    """Raised when a settings file cannot be parsed or has the wrong shape."""
