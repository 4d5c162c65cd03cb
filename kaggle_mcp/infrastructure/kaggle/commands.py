"""
Command builder: typed parameter records -> kaggle CLI argument vectors.

Every function here is pure. Argument vectors exclude the program name;
the runner prepends the configured kaggle executable.
"""

from __future__ import annotations

import time
from typing import Any, Callable, Dict, List, Optional

from .params import (
    DEFAULT_CATEGORY,
    DEFAULT_GROUP,
    CreateNotebookParams,
    DownloadOutputParams,
    ListCompetitionsParams,
    ListNotebooksParams,
    NotebookStatusParams,
    PullNotebookParams,
    PushNotebookParams,
    SaveMetadataParams,
    SearchDatasetsParams,
)

# Machine-readable (CSV) listing output
VERBOSE_FLAG = "-v"
METADATA_FLAG = "--metadata"

_KERNELSPECS = {
    "python": {"language": "python", "display_name": "Python 3", "name": "python3"},
    "r": {"language": "r", "display_name": "R", "name": "ir"},
}


def list_notebooks_args(p: ListNotebooksParams) -> List[str]:
    return [
        "kernels", "list", "--mine",
        "--page", str(p.page),
        "--page-size", str(p.page_size),
        VERBOSE_FLAG,
    ]


def push_directory_args(directory: str) -> List[str]:
    return ["kernels", "push", "-p", str(directory)]


def notebook_status_args(p: NotebookStatusParams) -> List[str]:
    return ["kernels", "status", p.notebook_slug]


def download_output_args(p: DownloadOutputParams) -> List[str]:
    return ["kernels", "output", p.notebook_slug, "-p", p.output_path]


def search_datasets_args(p: SearchDatasetsParams) -> List[str]:
    # No shell is involved, so the search term travels as a single argv element
    return ["datasets", "list", "-s", p.search, "--page", str(p.page), VERBOSE_FLAG]


def list_competitions_args(p: ListCompetitionsParams) -> List[str]:
    args = ["competitions", "list"]
    if p.group and p.group != DEFAULT_GROUP:
        args += ["--group", p.group]
    if p.category and p.category != DEFAULT_CATEGORY:
        args += ["--category", p.category]
    if p.sort_by:
        args += ["--sort-by", p.sort_by]
    args.append(VERBOSE_FLAG)
    return args


def push_notebook_args(p: PushNotebookParams) -> List[str]:
    if p.mode == "local":
        return push_directory_args(p.local_path)
    return ["kernels", "push", p.notebook_slug]


def save_metadata_args(p: SaveMetadataParams) -> List[str]:
    args = ["kernels", "pull", p.notebook_slug, "-p", p.local_path]
    if not p.include_notebook:
        args.append(METADATA_FLAG)
    return args


def pull_notebook_args(p: PullNotebookParams) -> List[str]:
    args = ["kernels", "pull", p.notebook_slug, "-p", p.local_path]
    if p.metadata:
        args.append(METADATA_FLAG)
    return args


def build_notebook_document(p: CreateNotebookParams) -> Dict[str, Any]:
    """Single-code-cell notebook (nbformat 4.4) holding `p.code`."""
    return {
        "cells": [
            {
                "cell_type": "code",
                "source": p.code,
                "execution_count": None,
                "outputs": [],
            }
        ],
        "metadata": {"kernelspec": dict(_KERNELSPECS[p.language])},
        "nbformat": 4,
        "nbformat_minor": 4,
    }


def build_notebook_metadata(
    p: CreateNotebookParams,
    code_file: str,
    clock: Optional[Callable[[], float]] = None,
) -> Dict[str, Any]:
    """kernel-metadata.json contents for a new notebook push."""
    now = (clock or time.time)()
    return {
        "id": f"new-notebook-{int(now * 1000)}",
        "title": p.title,
        "code_file": code_file,
        "language": p.language,
        "kernel_type": "notebook",
        "is_private": p.is_private,
        "enable_gpu": p.enable_gpu,
        "enable_internet": p.enable_internet,
        "dataset_sources": list(p.dataset_sources),
        "competition_sources": [],
        "kernel_sources": [],
    }
