"""
File Utilities Module
Reading and writing the HTML documents handed to the differ.
"""

from pathlib import Path

HTML_EXTENSIONS = {'.html', '.htm', '.xhtml'}


def normalize_path(path: str | Path) -> Path:
    """Convert string path to normalized Path object."""
    return Path(path).resolve()


def is_html_file(path: str | Path) -> bool:
    return Path(path).suffix.lower() in HTML_EXTENSIONS


def read_file_content(file_path: str | Path) -> str:
    """
    Read file content as UTF-8 text.

    Args:
        file_path: Path to the file to read

    Returns:
        File contents as string

    Raises:
        FileNotFoundError: If file doesn't exist
        UnicodeDecodeError: If the file is not valid UTF-8
    """
    with open(normalize_path(file_path), 'r', encoding='utf-8') as f:
        return f.read()


def write_file_content(file_path: str | Path, content: str) -> Path:
    """Write text to a file, creating parent directories as needed."""
    path = normalize_path(file_path)
    path.parent.mkdir(parents=True, exist_ok=True)
    with open(path, 'w', encoding='utf-8') as f:
        f.write(content)
    return path
