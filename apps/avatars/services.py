import logging
import os
import time
from pathlib import Path
from typing import Optional

from django.conf import settings
from django.core.exceptions import ValidationError
from django.core.files.move import file_move_safe
from django.core.files.uploadedfile import UploadedFile
from django.utils.datastructures import MultiValueDict

logger = logging.getLogger(__name__)

AVATAR_FIELD = "avatar"


class AvatarStorageError(Exception):
    """The uploaded avatar could not be written under the upload root."""


# ---------- Naming ----------
def current_millis() -> int:
    """Wall-clock time in milliseconds since the epoch."""
    return int(time.time() * 1000)


def build_unique_filename(original_filename: str, millis: Optional[int] = None) -> str:
    """Prefix the original filename with a millisecond timestamp."""
    if millis is None:
        millis = current_millis()
    return f"{millis}-{original_filename}"


def avatar_url(filename: str) -> str:
    return f"{settings.AVATAR_URL.rstrip('/')}/{filename}"


# ---------- Validation ----------
def resolve_avatar_upload(files: MultiValueDict) -> UploadedFile:
    """Return the first file sent under the avatar field."""
    uploads = files.getlist(AVATAR_FIELD)
    if not uploads:
        raise ValidationError("No file uploaded.")
    uploaded_file = uploads[0]
    if not getattr(uploaded_file, "name", None):
        raise ValidationError("No file uploaded or filename is missing.")
    return uploaded_file


# ---------- Storage ----------
def ensure_upload_root() -> Path:
    upload_root = Path(settings.AVATAR_UPLOAD_ROOT)
    upload_root.mkdir(parents=True, exist_ok=True)
    return upload_root


def _discard(path) -> None:
    """Best-effort removal of a file left behind by a failed store."""
    try:
        os.remove(path)
    except FileNotFoundError:
        pass
    except OSError:
        logger.exception("Error deleting temporary file %s", path)


def _write_chunks(uploaded_file: UploadedFile, destination: Path) -> None:
    # "xb" refuses to replace an existing asset
    with open(destination, "xb") as fh:
        for chunk in uploaded_file.chunks():
            fh.write(chunk)


def store_avatar(uploaded_file: UploadedFile) -> str:
    """
    Persist an uploaded avatar under the upload root and return its URL.

    Temporary uploads are moved into place, in-memory ones are streamed.
    Existing files are never overwritten. On failure the orphaned temporary
    upload (or the partially written destination) is removed and
    AvatarStorageError is raised.
    """
    unique_filename = build_unique_filename(uploaded_file.name)
    try:
        destination = ensure_upload_root() / unique_filename
    except OSError as exc:
        logger.exception("Could not create upload directory %s", settings.AVATAR_UPLOAD_ROOT)
        if hasattr(uploaded_file, "temporary_file_path"):
            _discard(uploaded_file.temporary_file_path())
        raise AvatarStorageError(str(exc)) from exc

    if hasattr(uploaded_file, "temporary_file_path"):
        temporary_path = uploaded_file.temporary_file_path()
        try:
            file_move_safe(temporary_path, destination, allow_overwrite=False)
        except FileExistsError as exc:
            logger.exception("Avatar %s already exists", destination)
            _discard(temporary_path)
            raise AvatarStorageError(str(exc)) from exc
        except OSError as exc:
            # a failed copy fallback can leave a partial destination behind
            logger.exception("Error moving %s to %s", temporary_path, destination)
            _discard(destination)
            _discard(temporary_path)
            raise AvatarStorageError(str(exc)) from exc
    else:
        try:
            _write_chunks(uploaded_file, destination)
        except FileExistsError as exc:
            logger.exception("Avatar %s already exists", destination)
            raise AvatarStorageError(str(exc)) from exc
        except OSError as exc:
            logger.exception("Error writing %s", destination)
            _discard(destination)
            raise AvatarStorageError(str(exc)) from exc

    if settings.FILE_UPLOAD_PERMISSIONS is not None:
        try:
            os.chmod(destination, settings.FILE_UPLOAD_PERMISSIONS)
        except OSError as exc:
            logger.exception("Error setting permissions on %s", destination)
            _discard(destination)
            raise AvatarStorageError(str(exc)) from exc

    logger.info("Stored avatar %s (%s bytes)", unique_filename, uploaded_file.size)
    return avatar_url(unique_filename)
