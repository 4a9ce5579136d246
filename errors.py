class FluxError(Exception):
    """Base class for every error the interface raises."""


class TerminalModeError(FluxError):
    """Entering or leaving curses mode failed."""


class RenderError(FluxError):
    """Drawing a frame failed."""


class InputError(FluxError):
    """Polling the keyboard failed."""


class InvalidStateError(FluxError, ValueError):
    """AppState was built with values outside its invariants."""
