"""Clipboard utilities for copying converted markup."""

import os
import platform
import subprocess

CLIPBOARD_COMMANDS = {
    "macos": ["pbcopy"],
    "windows": ["clip"],
    "wsl": ["clip.exe"],
    "wayland": ["wl-copy"],
}

X11_COMMANDS = [
    ["xclip", "-selection", "clipboard"],
    ["xsel", "--clipboard", "--input"],
]


def detect_platform() -> str:
    """Detect the current platform for clipboard operations.

    Returns:
        Platform identifier: 'macos', 'windows', 'wayland', 'x11', 'wsl',
        'linux' or 'unknown'
    """
    system = platform.system().lower()

    if system == "darwin":
        return "macos"
    if system == "windows":
        return "windows"
    if system == "linux":
        if "microsoft" in platform.uname().release.lower():
            return "wsl"
        if os.environ.get("WAYLAND_DISPLAY"):
            return "wayland"
        if os.environ.get("DISPLAY"):
            return "x11"
        return "linux"

    return "unknown"


def copy_to_clipboard(text: str) -> bool:
    """Copy the Jira markup to the clipboard.

    Args:
        text: The text to copy to clipboard

    Returns:
        True if successful, False otherwise
    """
    platform_type = detect_platform()

    if platform_type == "x11":
        # xclip first, xsel as fallback
        for cmd in X11_COMMANDS:
            try:
                subprocess.run(cmd, input=text, text=True, check=True)
                return True
            except (subprocess.CalledProcessError, FileNotFoundError):
                continue
        return False

    cmd = CLIPBOARD_COMMANDS.get(platform_type)
    if not cmd:
        return False

    try:
        subprocess.run(cmd, input=text, text=True, check=True)
    except (subprocess.CalledProcessError, FileNotFoundError):
        return False
    return True

