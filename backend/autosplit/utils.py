import os
import re

ALLOWED_EXTS = {'.stl', '.obj', '.glb', '.gltf'}


def safe_filename(filename: str) -> str:
    name = os.path.basename(filename or "")
    name = re.sub(r'[^A-Za-z0-9._-]', '_', name)
    return name


def file_extension(filename: str) -> str:
    return os.path.splitext(filename or "")[1].lower()


def allowed_file(filename: str, allowed=ALLOWED_EXTS) -> bool:
    """Check the filename extension against an allow-list.

    Entries in ``allowed`` may be given with or without the leading dot.
    """
    ext = file_extension(filename)
    if not ext:
        return False
    normalized = {e.lower() if e.startswith('.') else f'.{e.lower()}' for e in allowed}
    return ext in normalized
