"""Display helpers for attachment metadata."""

# Coarse file type per lower-case extension
FILE_TYPES = {
    "jpg": "image", "jpeg": "image", "png": "image", "gif": "image",
    "pdf": "pdf",
    "doc": "document", "docx": "document", "hwp": "document",
    "xls": "excel", "xlsx": "excel",
    "ppt": "powerpoint", "pptx": "powerpoint",
    "zip": "archive", "rar": "archive", "gz": "archive", "bz2": "archive",
    "txt": "text",
}


def format_file_size(size: int) -> str:
    """Human readable size, e.g. ``512B``, ``1.5 KB``, ``2.0 MB``."""
    if size < 1024:
        return f"{size}B"
    if size < 1024 * 1024:
        return f"{size / 1024:.1f} KB"
    if size < 1024 * 1024 * 1024:
        return f"{size / 1024 / 1024:.1f} MB"
    return f"{size / 1024 / 1024 / 1024:.1f} GB"


def file_type_of(extension: str) -> str:
    return FILE_TYPES.get((extension or "").lower(), "default")
