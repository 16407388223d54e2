"""
File storage for exam attachments.

Uploaded files are written to the configured upload directory under a
generated name; the database only keeps the relative reference.
"""
import logging
import os
import re
import secrets
import shutil
import time
import unicodedata
from pathlib import Path
from typing import BinaryIO, Optional

logger = logging.getLogger(__name__)

UPLOAD_URL_PREFIX = "uploads"
DEFAULT_FILENAME = "arquivo"
MAX_FILENAME_LENGTH = 100

_UNSAFE_CHARS = re.compile(r"[^A-Za-z0-9._-]")
_REPEATED_UNDERSCORES = re.compile(r"_{2,}")


def sanitize_filename(name: Optional[str]) -> str:
    """
    Reduce a client-supplied filename to a safe basename.

    Directory components are dropped for both ``/`` and ``\\`` separators,
    accented characters are folded to ASCII and everything outside
    ``[A-Za-z0-9._-]`` becomes ``_``.

    Args:
        name: Original filename as sent by the client

    Returns:
        str: A non-empty filename of at most 100 characters
    """
    if not name:
        return DEFAULT_FILENAME
    base = re.split(r"[\\/]", name)[-1]
    base = unicodedata.normalize("NFKD", base).encode("ascii", "ignore").decode("ascii")
    base = _UNSAFE_CHARS.sub("_", base)
    base = _REPEATED_UNDERSCORES.sub("_", base)
    base = base.lstrip("._")
    if not base:
        return DEFAULT_FILENAME
    if len(base) > MAX_FILENAME_LENGTH:
        stem, dot, ext = base.rpartition(".")
        if dot and stem and len(ext) < 16:
            base = stem[:MAX_FILENAME_LENGTH - len(ext) - 1] + "." + ext
        else:
            base = base[:MAX_FILENAME_LENGTH]
    return base


def build_upload_filename(original: Optional[str], now: Optional[float] = None) -> str:
    """
    Generate the stored name for an upload: ``<epoch-millis>-<random hex>-<sanitized>``.

    Args:
        original: Original filename as sent by the client
        now: Upload time in seconds since the epoch, defaults to the current time

    Returns:
        str: Collision-resistant filename
    """
    millis = int((time.time() if now is None else now) * 1000)
    return f"{millis}-{secrets.token_hex(4)}-{sanitize_filename(original)}"


def ensure_upload_dir(upload_dir: str) -> Path:
    """Create the upload directory if it does not exist yet."""
    path = Path(upload_dir)
    path.mkdir(parents=True, exist_ok=True)
    return path


def save_upload(source: BinaryIO, original: Optional[str], upload_dir: str) -> str:
    """
    Copy an uploaded stream into the upload directory.

    Args:
        source: Readable binary stream of the upload
        original: Original filename as sent by the client
        upload_dir: Target directory

    Returns:
        str: Relative reference to store, e.g. ``uploads/1700000000000-1a2b3c4d-laudo.pdf``
    """
    directory = ensure_upload_dir(upload_dir)
    filename = build_upload_filename(original)
    with open(directory / filename, "wb") as target:
        shutil.copyfileobj(source, target)
    logger.info(f"📎 Stored upload {original!r} as {filename}")
    return f"{UPLOAD_URL_PREFIX}/{filename}"


def remove_upload(reference: str, upload_dir: str) -> None:
    """Remove a stored upload given its relative reference; missing files are ignored."""
    filename = reference.rsplit("/", 1)[-1]
    try:
        os.remove(Path(upload_dir) / filename)
    except FileNotFoundError:
        pass
