"""Pluggable storage backends for generated NACHA files."""

from __future__ import annotations

from achgen.core.config import AppSettings
from achgen.core.protocols import IFileStore
from achgen.persistence.memory_backend import MemoryFileStore
from achgen.persistence.s3_backend import S3FileStore


def create_file_store(settings: AppSettings | None = None) -> IFileStore:
    """Create the file store selected by ``settings.storage.backend``."""
    if settings is None:
        settings = AppSettings()

    if settings.storage.backend == "s3":
        return S3FileStore(
            bucket=settings.storage.bucket,
            region=settings.storage.region,
            endpoint_url=settings.storage.endpoint_url,
        )
    return MemoryFileStore()
