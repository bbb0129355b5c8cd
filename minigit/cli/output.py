"""CLI output utilities and formatting."""

from colorama import Fore, Style

BANNER = f"""
{Fore.CYAN}{Style.BRIGHT}mini-git{Style.RESET_ALL} {Fore.WHITE}a minimal local version control system{Style.RESET_ALL}
"""


def success(message: str) -> str:
    """Format success message in green."""
    return f"{Fore.GREEN}✓ {message}{Style.RESET_ALL}"


def info(message: str) -> str:
    """Format info message in cyan."""
    return f"{Fore.CYAN}→ {message}{Style.RESET_ALL}"


def error(message: str) -> str:
    """Format error message in red."""
    return f"{Fore.RED}✗ {message}{Style.RESET_ALL}"


def colorize_status(text: str) -> str:
    """Color the section titles of a status report."""
    colors = {
        'Untracked files:': Fore.RED,
        'Ready to commit:': Fore.GREEN,
        'Everything up to date': Fore.GREEN,
    }
    lines = []
    for line in text.splitlines():
        color = colors.get(line)
        lines.append(f"{color}{line}{Style.RESET_ALL}" if color else line)
    return '\n'.join(lines)
