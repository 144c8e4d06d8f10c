"""Utility functions for the application."""


def log(message: str, indent: int = 0, top: int = 0, bottom: int = 0, carriage_return: bool = False) -> None:
    """
    Custom print function that supports indentation, padding, and optional carriage return.

    Args:
        message: The message to print.
        indent: Number of indentation units (2 spaces each).
        top: Number of empty lines to print before the message.
        bottom: Number of empty lines to print after the message.
        carriage_return: If True, prepends '\r' to the message for in-place updates.
    """
    if top > 0:
        print("\n" * (top - 1))

    output_message = f"{'  ' * indent}{message}"
    if carriage_return:
        output_message = f"\r{output_message}"
    end = "" if carriage_return else "\n"

    try:
        print(output_message, end=end)
    except UnicodeEncodeError:
        # Fallback to ASCII representation if Unicode fails
        print(output_message.encode("ascii", errors="replace").decode("ascii"), end=end)

    if bottom > 0:
        print("\n" * (bottom - 1))


class Logger:
    """
    Console logger handed to scrapers and providers.

    When ``enabled`` is False every call is a no-op, which lets library callers
    silence progress output without touching the code that produces it.
    """

    def __init__(self, enabled: bool = True):
        self.enabled = enabled

    def info(self, message: str, indent: int = 0) -> None:
        self._emit(message, indent)

    def success(self, message: str, indent: int = 0) -> None:
        self._emit(f"✅ {message}", indent)

    def warning(self, message: str, indent: int = 0) -> None:
        self._emit(f"⚠️ {message}", indent)

    def error(self, message: str, indent: int = 0) -> None:
        self._emit(f"❌ {message}", indent)

    def _emit(self, message: str, indent: int) -> None:
        if self.enabled:
            log(message, indent=indent)
