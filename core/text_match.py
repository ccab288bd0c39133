"""
text_match.py - Text Matching Tools

Provides prefix stripping and filename validation
"""

from typing import Optional
import platform


def utf8_len(text: str) -> int:
    """Length of text in UTF-8 bytes (undecodable bytes count as one)"""
    return len(text.encode("utf-8", "surrogateescape"))


def display_name(name: str) -> str:
    """
    Printable form of a filename

    Bytes that are not valid UTF-8 come back from the filesystem as lone
    surrogates, which a strict UTF-8 stream refuses to write. They are
    shown as U+FFFD instead. Use this only for output, never for paths.
    """
    return name.encode("utf-8", "surrogateescape").decode("utf-8", "replace")


def strip_prefix(name: str, prefix: str) -> Optional[str]:
    """
    Remove prefix from the start of a filename

    Args:
        name: Filename
        prefix: Prefix to remove (exact match only)

    Returns:
        Remaining name with surrounding whitespace stripped,
        or None if name does not start with prefix
    """
    if not prefix or not name.startswith(prefix):
        return None
    return name[len(prefix):].strip()


def is_valid_filename(name: str) -> tuple[bool, Optional[str]]:
    """
    Check if filename is valid on the current platform

    Args:
        name: Filename

    Returns:
        (is_valid, error_reason)
    """
    if not name:
        return False, "Filename cannot be empty"

    if "/" in name or "\0" in name:
        return False, "Filename contains a path separator or NUL"

    if utf8_len(name) > 255:
        return False, "Filename exceeds 255 bytes"

    if platform.system() != "Windows":
        return True, None

    # Windows invalid characters
    invalid_chars = '<>:"\\|?*'
    for char in invalid_chars:
        if char in name:
            return False, f"Filename contains invalid character: {char}"

    # Trailing space or dot
    if name.endswith(' ') or name.endswith('.'):
        return False, "Filename cannot end with space or dot"

    # Windows reserved names
    reserved_names = {
        'CON', 'PRN', 'AUX', 'NUL',
        'COM1', 'COM2', 'COM3', 'COM4', 'COM5', 'COM6', 'COM7', 'COM8', 'COM9',
        'LPT1', 'LPT2', 'LPT3', 'LPT4', 'LPT5', 'LPT6', 'LPT7', 'LPT8', 'LPT9'
    }
    name_upper = name.upper().split('.')[0]
    if name_upper in reserved_names:
        return False, f"Filename is a Windows reserved name: {name_upper}"

    return True, None
