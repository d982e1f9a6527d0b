"""Theme for consistent Rich styling of CLI output."""

from rich.console import Console
from rich.theme import Theme


class Colors:
    """Standardized color palette for CLI output."""

    SUCCESS = "bold green"
    ERROR = "bold red"
    INFO = "bold blue"
    PRIMARY = "cyan"
    MUTED = "dim"


class Icons:
    """Standardized icons for different message types."""

    SUCCESS = "✅"
    ERROR = "❌"
    INFO = "ℹ️"
    BULLET = "•"

    _TEXT_FALLBACKS = {
        "SUCCESS": "[OK]",
        "ERROR": "[ERROR]",
        "INFO": "[INFO]",
        "BULLET": "-",
    }

    @classmethod
    def get_icon(cls, icon_name: str, use_emoji: bool = True) -> str:
        """Get icon for the given name.

        Args:
            icon_name: Name of the icon (e.g., "SUCCESS", "ERROR")
            use_emoji: Whether to use emoji or the plain text fallback

        Returns:
            The icon, possibly empty
        """
        if use_emoji:
            return str(getattr(cls, icon_name, ""))
        return cls._TEXT_FALLBACKS.get(icon_name, "")

    @classmethod
    def format_with_icon(cls, icon_name: str, text: str, use_emoji: bool = True) -> str:
        """Format text with icon, handling empty icons gracefully."""
        icon = cls.get_icon(icon_name, use_emoji)
        return f"{icon} {text}" if icon else text


GLOVEFLASH_THEME = Theme(
    {
        "success": Colors.SUCCESS,
        "error": Colors.ERROR,
        "info": Colors.INFO,
        "primary": Colors.PRIMARY,
        "muted": Colors.MUTED,
    }
)


class ThemedConsole:
    """Console wrapper with the Gloveflash theme applied.

    Messages are printed verbatim: markup is disabled because paths and
    archive listings may contain square brackets.
    """

    def __init__(self, use_emoji: bool = True, stderr: bool = False) -> None:
        self.console = Console(theme=GLOVEFLASH_THEME, stderr=stderr)
        self.use_emoji = use_emoji

    def _print(self, icon_name: str, message: str, style: str) -> None:
        self.console.print(
            Icons.format_with_icon(icon_name, message, self.use_emoji),
            style=style,
            markup=False,
            highlight=False,
            soft_wrap=True,
        )

    def print_success(self, message: str) -> None:
        """Print success message with icon and styling."""
        self._print("SUCCESS", message, "success")

    def print_error(self, message: str) -> None:
        """Print error message with icon and styling."""
        self._print("ERROR", message, "error")

    def print_info(self, message: str) -> None:
        """Print info message with icon and styling."""
        self._print("INFO", message, "info")

    def print_list_item(self, message: str, indent: int = 1) -> None:
        """Print list item with bullet and styling."""
        spacing = "  " * indent
        bullet = Icons.get_icon("BULLET", self.use_emoji)
        self.console.print(
            f"{spacing}{bullet} {message}",
            style="primary",
            markup=False,
            highlight=False,
            soft_wrap=True,
        )


def get_themed_console(use_emoji: bool = True, stderr: bool = False) -> ThemedConsole:
    """Get a themed console instance.

    Args:
        use_emoji: Whether to use emoji icons or text fallbacks
        stderr: Write to stderr instead of stdout

    Returns:
        Configured ThemedConsole instance
    """
    return ThemedConsole(use_emoji=use_emoji, stderr=stderr)
