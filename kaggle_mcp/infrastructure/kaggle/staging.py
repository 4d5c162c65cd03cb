"""
Local file staging for notebook pushes.

A push directory holds a notebook document and its metadata descriptor side
by side. Both are written before the directory is handed to the kaggle CLI.
"""

from __future__ import annotations

import json
import logging
import os
import shutil
import tempfile
from contextlib import contextmanager
from typing import Any, Dict, Iterator, Tuple

logger = logging.getLogger(__name__)

STAGING_PREFIX = "kaggle-"


@contextmanager
def staging_directory(base_dir: str) -> Iterator[str]:
    """Fresh temp directory under `base_dir`, removed on exit whatever happens."""
    with tempfile.TemporaryDirectory(prefix=STAGING_PREFIX, dir=base_dir) as temp_dir:
        logger.debug("Staging in %s", temp_dir)
        yield temp_dir


def write_json(path: str, payload: Dict[str, Any]) -> None:
    with open(path, "w", encoding="utf-8") as f:
        json.dump(payload, f, indent=2, ensure_ascii=False)


def write_notebook_pair(
    directory: str,
    notebook_filename: str,
    notebook: Dict[str, Any],
    metadata_filename: str,
    metadata: Dict[str, Any],
) -> Tuple[str, str]:
    """Write the notebook document and metadata descriptor; return both paths."""
    notebook_path = os.path.join(directory, notebook_filename)
    metadata_path = os.path.join(directory, metadata_filename)
    write_json(notebook_path, notebook)
    write_json(metadata_path, metadata)
    return notebook_path, metadata_path


def copy_into(target_dir: str, *paths: str) -> None:
    """Copy files into `target_dir`, creating it (and parents) when missing."""
    ensure_directory(target_dir)
    for path in paths:
        shutil.copyfile(path, os.path.join(target_dir, os.path.basename(path)))


def ensure_directory(path: str) -> str:
    os.makedirs(path, exist_ok=True)
    return path
