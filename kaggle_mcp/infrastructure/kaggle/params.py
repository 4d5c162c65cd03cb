"""
Typed parameter records, one per catalog tool.

Each record is built from the raw argument mapping with `from_input`, which
fills defaults and rejects invalid enumerated values. Presence of the
schema-required fields is checked earlier by `Tool.validate`.

Defaults follow the catalog schema:
- numeric fields fall back to their default when absent or falsy
- booleans take their default when absent or null; other non-bool values are rejected
- string paths fall back to their default when absent or empty
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, List, Mapping, Optional, Type

from kaggle_mcp.infrastructure.errors import ToolInputError

LANGUAGES = ("python", "r")
PUSH_MODES = ("slug", "local")
COMPETITION_GROUPS = ("general", "entered", "inClass")
DEFAULT_GROUP = "general"
DEFAULT_CATEGORY = "all"
DEFAULT_NOTEBOOK_DIR = "./kaggle-notebook"
DEFAULT_OUTPUT_DIR = "./kaggle-outputs"


def _int(raw: Mapping[str, Any], key: str, default: int) -> int:
    value = raw.get(key) or default
    try:
        return int(value)
    except (TypeError, ValueError):
        raise ToolInputError(f"{key} must be a number, got {value!r}")


def _str(raw: Mapping[str, Any], key: str, default: Optional[str] = None) -> Optional[str]:
    value = raw.get(key)
    if value is None or value == "":
        return default
    return str(value)


def _flag(raw: Mapping[str, Any], key: str, default: bool) -> bool:
    value = raw.get(key)
    if value is None:
        return default
    if not isinstance(value, bool):
        raise ToolInputError(f"{key} must be a boolean, got {value!r}")
    return value


def _str_list(raw: Mapping[str, Any], key: str) -> List[str]:
    value = raw.get(key) or []
    if isinstance(value, str) or not isinstance(value, (list, tuple)):
        raise ToolInputError(f"{key} must be an array of strings")
    return [str(item) for item in value]


@dataclass(frozen=True)
class AuthCheckParams:
    @classmethod
    def from_input(cls, raw: Mapping[str, Any]) -> "AuthCheckParams":
        return cls()


@dataclass(frozen=True)
class ListNotebooksParams:
    page: int = 1
    page_size: int = 20

    @classmethod
    def from_input(cls, raw: Mapping[str, Any]) -> "ListNotebooksParams":
        return cls(page=_int(raw, "page", 1), page_size=_int(raw, "pageSize", 20))


@dataclass(frozen=True)
class CreateNotebookParams:
    title: str
    code: str
    language: str = "python"
    is_private: bool = True
    enable_gpu: bool = False
    enable_internet: bool = True
    dataset_sources: List[str] = field(default_factory=list)
    save_locally: bool = False
    local_save_path: str = DEFAULT_NOTEBOOK_DIR

    @classmethod
    def from_input(cls, raw: Mapping[str, Any]) -> "CreateNotebookParams":
        language = _str(raw, "language", "python")
        if language not in LANGUAGES:
            raise ToolInputError(f"language must be one of {list(LANGUAGES)}, got {language!r}")
        return cls(
            title=str(raw.get("title")),
            code=str(raw.get("code")),
            language=language,
            is_private=_flag(raw, "isPrivate", True),
            enable_gpu=_flag(raw, "enableGpu", False),
            enable_internet=_flag(raw, "enableInternet", True),
            dataset_sources=_str_list(raw, "datasetSources"),
            save_locally=_flag(raw, "saveLocally", False),
            local_save_path=_str(raw, "localSavePath", DEFAULT_NOTEBOOK_DIR),
        )


@dataclass(frozen=True)
class NotebookStatusParams:
    notebook_slug: str

    @classmethod
    def from_input(cls, raw: Mapping[str, Any]) -> "NotebookStatusParams":
        return cls(notebook_slug=str(raw.get("notebookSlug")))


@dataclass(frozen=True)
class DownloadOutputParams:
    notebook_slug: str
    output_path: str = DEFAULT_OUTPUT_DIR

    @classmethod
    def from_input(cls, raw: Mapping[str, Any]) -> "DownloadOutputParams":
        return cls(
            notebook_slug=str(raw.get("notebookSlug")),
            output_path=_str(raw, "outputPath", DEFAULT_OUTPUT_DIR),
        )


@dataclass(frozen=True)
class SearchDatasetsParams:
    search: str
    page: int = 1

    @classmethod
    def from_input(cls, raw: Mapping[str, Any]) -> "SearchDatasetsParams":
        return cls(search=str(raw.get("search")), page=_int(raw, "page", 1))


@dataclass(frozen=True)
class ListCompetitionsParams:
    group: Optional[str] = None
    category: Optional[str] = None
    sort_by: Optional[str] = None

    @classmethod
    def from_input(cls, raw: Mapping[str, Any]) -> "ListCompetitionsParams":
        # Any value is passed through; only the sentinels are dropped from argv
        return cls(
            group=_str(raw, "group"),
            category=_str(raw, "category"),
            sort_by=_str(raw, "sortBy"),
        )


@dataclass(frozen=True)
class PushNotebookParams:
    mode: str = "slug"
    notebook_slug: Optional[str] = None
    local_path: Optional[str] = None

    @classmethod
    def from_input(cls, raw: Mapping[str, Any]) -> "PushNotebookParams":
        mode = _str(raw, "mode", "slug")
        notebook_slug = _str(raw, "notebookSlug")
        local_path = _str(raw, "localPath")
        if mode == "slug":
            if not notebook_slug:
                raise ToolInputError("notebookSlug is required when mode is 'slug'")
        elif mode == "local":
            if not local_path:
                raise ToolInputError("localPath is required when mode is 'local'")
        else:
            raise ToolInputError(f"Invalid mode: {mode} (expected one of {list(PUSH_MODES)})")
        return cls(mode=mode, notebook_slug=notebook_slug, local_path=local_path)


@dataclass(frozen=True)
class SaveMetadataParams:
    notebook_slug: str
    local_path: str = DEFAULT_NOTEBOOK_DIR
    include_notebook: bool = True

    @classmethod
    def from_input(cls, raw: Mapping[str, Any]) -> "SaveMetadataParams":
        return cls(
            notebook_slug=str(raw.get("notebookSlug")),
            local_path=_str(raw, "localPath", DEFAULT_NOTEBOOK_DIR),
            include_notebook=_flag(raw, "includeNotebook", True),
        )


@dataclass(frozen=True)
class PullNotebookParams:
    notebook_slug: str
    local_path: str = DEFAULT_NOTEBOOK_DIR
    metadata: bool = True

    @classmethod
    def from_input(cls, raw: Mapping[str, Any]) -> "PullNotebookParams":
        return cls(
            notebook_slug=str(raw.get("notebookSlug")),
            local_path=_str(raw, "localPath", DEFAULT_NOTEBOOK_DIR),
            metadata=_flag(raw, "metadata", True),
        )


# Tagged union: tool name -> parameter record type
PARAMS_BY_TOOL: Dict[str, Type[Any]] = {
    "auth_check": AuthCheckParams,
    "list_notebooks": ListNotebooksParams,
    "create_notebook": CreateNotebookParams,
    "get_notebook_status": NotebookStatusParams,
    "download_notebook_output": DownloadOutputParams,
    "search_datasets": SearchDatasetsParams,
    "list_competitions": ListCompetitionsParams,
    "push_notebook": PushNotebookParams,
    "save_notebook_metadata": SaveMetadataParams,
    "pull_notebook": PullNotebookParams,
}


def parse_params(tool_name: str, raw: Mapping[str, Any]):
    """Build the typed parameter record for `tool_name`."""
    try:
        record_type = PARAMS_BY_TOOL[tool_name]
    except KeyError:
        raise ToolInputError(f"Unknown tool: {tool_name}")
    return record_type.from_input(raw)
