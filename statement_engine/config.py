"""
Engine settings.
Every value can be overridden through an environment variable of the same name.
"""

import os
from pathlib import Path
from typing import Optional


class Config:
    """Statement engine settings."""

    APP_NAME = "Statement Interpretation Engine"
    VERSION = "1.0.0"

    # Statement files accepted by the loaders
    MAX_FILE_SIZE_MB: int = int(os.getenv("MAX_FILE_SIZE_MB", "10"))
    MAX_FILE_SIZE_BYTES: int = MAX_FILE_SIZE_MB * 1024 * 1024
    ALLOWED_FILE_TYPES: list[str] = [".pdf", ".txt"]
    TEXT_ENCODING: str = os.getenv("TEXT_ENCODING", "utf-8")

    # 1 keeps per-line extraction on the calling thread
    MAX_WORKERS: int = int(os.getenv("MAX_WORKERS", "1"))

    # Fillers for surviving transactions missing a field
    DEFAULT_DESCRIPTION: str = os.getenv("DEFAULT_DESCRIPTION", "Unknown Transaction")
    DEFAULT_CATEGORY: str = os.getenv("DEFAULT_CATEGORY", "Other")

    LOG_DIR: Path = Path(os.getenv("LOG_DIR", "./logs"))
    LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO")
    LOG_FORMAT: str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    LOG_DATE_FORMAT: str = "%Y-%m-%d %H:%M:%S"

    @classmethod
    def get_log_path(cls, filename: str) -> Path:
        """Path of a log file inside LOG_DIR; the directory is created on demand."""
        cls.LOG_DIR.mkdir(parents=True, exist_ok=True)
        return cls.LOG_DIR / filename

    @classmethod
    def validate_file(cls, filename: str, file_size: int) -> tuple[bool, Optional[str]]:
        """
        Check a statement file's extension and size before it is read.

        Returns:
            (True, None) for an acceptable file, (False, reason) otherwise
        """
        if not filename.lower().endswith(tuple(cls.ALLOWED_FILE_TYPES)):
            return False, f"Invalid file type. Allowed types: {', '.join(cls.ALLOWED_FILE_TYPES)}"

        if file_size > cls.MAX_FILE_SIZE_BYTES:
            size_mb = file_size / (1024 * 1024)
            return False, f"File too large ({size_mb:.2f} MB). Maximum: {cls.MAX_FILE_SIZE_MB} MB"

        if file_size == 0:
            return False, "File is empty"

        return True, None

    @classmethod
    def to_dict(cls) -> dict:
        """Settings as a plain dict, for diagnostics."""
        return {
            "app_name": cls.APP_NAME,
            "version": cls.VERSION,
            "max_file_size_mb": cls.MAX_FILE_SIZE_MB,
            "text_encoding": cls.TEXT_ENCODING,
            "max_workers": cls.MAX_WORKERS,
            "default_description": cls.DEFAULT_DESCRIPTION,
            "default_category": cls.DEFAULT_CATEGORY,
            "log_dir": str(cls.LOG_DIR),
            "log_level": cls.LOG_LEVEL,
        }


config = Config()
