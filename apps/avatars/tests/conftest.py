"""
Test fixtures for the avatars app.

Points the upload root and Django's temporary upload directory at
per-test directories and provides real PNG uploads built with Pillow.
"""

from __future__ import annotations

import io
import itertools

import pytest
from django.core.files.uploadedfile import SimpleUploadedFile
from PIL import Image
from rest_framework.test import APIClient

from apps.avatars import services


@pytest.fixture
def api_client() -> APIClient:
    return APIClient()


@pytest.fixture
def upload_root(tmp_path, settings):
    """Upload root that does not exist yet; the handler creates it."""
    root = tmp_path / "public" / "uploads" / "avatars"
    settings.AVATAR_UPLOAD_ROOT = root
    return root


@pytest.fixture
def temp_upload_dir(tmp_path, settings):
    """Directory where Django spools incoming files before they are moved."""
    temp_dir = tmp_path / "tmp"
    temp_dir.mkdir()
    settings.FILE_UPLOAD_TEMP_DIR = str(temp_dir)
    return temp_dir


@pytest.fixture
def frozen_millis(monkeypatch):
    """Pin the timestamp used in stored filenames."""
    millis = 1700000000000
    monkeypatch.setattr(services, "current_millis", lambda: millis)
    return millis


@pytest.fixture
def ticking_millis(monkeypatch):
    """Every call returns a later millisecond than the previous one."""
    counter = itertools.count(1700000000000)
    monkeypatch.setattr(services, "current_millis", lambda: next(counter))
    return counter


@pytest.fixture
def png_bytes() -> bytes:
    buffer = io.BytesIO()
    Image.new("RGB", (32, 32), color=(200, 40, 40)).save(buffer, format="PNG")
    return buffer.getvalue()


@pytest.fixture
def make_png_upload(png_bytes):
    """Build a fresh PNG upload; a file object can only be posted once."""
    def _make(name: str = "a.png") -> SimpleUploadedFile:
        return SimpleUploadedFile(name, png_bytes, content_type="image/png")
    return _make
