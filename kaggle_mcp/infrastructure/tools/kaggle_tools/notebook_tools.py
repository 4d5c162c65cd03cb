# kaggle_mcp/infrastructure/tools/kaggle_tools/notebook_tools.py
"""
Notebook (kernel) tools: list, create, status, output, push, save, pull.
"""

import logging
import os
from typing import Any, Dict

from kaggle_mcp.infrastructure.errors import ToolInputError
from kaggle_mcp.infrastructure.kaggle import commands
from kaggle_mcp.infrastructure.kaggle.cli_runner import format_output
from kaggle_mcp.infrastructure.kaggle.params import DEFAULT_NOTEBOOK_DIR, DEFAULT_OUTPUT_DIR, LANGUAGES, PUSH_MODES
from kaggle_mcp.infrastructure.kaggle.staging import (
    copy_into,
    ensure_directory,
    staging_directory,
    write_notebook_pair,
)

from .base import KaggleTool, NOTEBOOK_SLUG_PROPERTY

logger = logging.getLogger(__name__)


class ListNotebooksTool(KaggleTool):

    @property
    def name(self) -> str:
        return "list_notebooks"

    @property
    def description(self) -> str:
        return "List your Kaggle notebooks (kernels)"

    @property
    def input_schema(self) -> Dict[str, Any]:
        return {
            "type": "object",
            "properties": {
                "page": {"type": "number", "description": "Page number (default: 1)", "default": 1},
                "pageSize": {"type": "number", "description": "Page size (default: 20)", "default": 20},
            },
            "required": [],
        }

    def run(self, input: Dict[str, Any]) -> Dict[str, Any]:
        params = self.parse(input)
        return self.format_result(self.kaggle(commands.list_notebooks_args(params)))


class CreateNotebookTool(KaggleTool):
    """
    Creates a notebook by staging a document + metadata pair in a temp
    directory and pushing that directory. The staging directory is removed
    whether or not the push succeeds.
    """

    @property
    def name(self) -> str:
        return "create_notebook"

    @property
    def description(self) -> str:
        return "Create a new Kaggle notebook"

    @property
    def input_schema(self) -> Dict[str, Any]:
        return {
            "type": "object",
            "properties": {
                "title": {"type": "string", "description": "Notebook title"},
                "code": {"type": "string", "description": "Source code for the notebook's single code cell"},
                "language": {
                    "type": "string",
                    "description": "Programming language (python or r)",
                    "default": "python",
                    "enum": list(LANGUAGES),
                },
                "isPrivate": {"type": "boolean", "description": "Make notebook private", "default": True},
                "enableGpu": {"type": "boolean", "description": "Enable GPU acceleration", "default": False},
                "enableInternet": {"type": "boolean", "description": "Enable internet access", "default": True},
                "datasetSources": {
                    "type": "array",
                    "description": 'Dataset slugs to attach (e.g., ["username/dataset-name"])',
                    "items": {"type": "string"},
                    "default": [],
                },
                "saveLocally": {
                    "type": "boolean",
                    "description": "Save metadata and notebook files locally for future use",
                    "default": False,
                },
                "localSavePath": {
                    "type": "string",
                    "description": "Local directory to save files when saveLocally is true",
                    "default": DEFAULT_NOTEBOOK_DIR,
                },
            },
            "required": ["title", "code"],
        }

    def run(self, input: Dict[str, Any]) -> Dict[str, Any]:
        params = self.parse(input)
        notebook_file = self.config.NOTEBOOK_FILENAME
        notebook = commands.build_notebook_document(params)
        metadata = commands.build_notebook_metadata(params, code_file=notebook_file)

        save_message = ""
        with staging_directory(self.config.temp_dir) as temp_dir:
            staged = write_notebook_pair(
                temp_dir, notebook_file, notebook, self.config.METADATA_FILENAME, metadata
            )
            output = self.kaggle(commands.push_directory_args(temp_dir))

            if params.save_locally:
                copy_into(params.local_save_path, *staged)
                logger.info("Saved notebook files to %s", params.local_save_path)
                save_message = f"\n📁 Files saved locally to: {params.local_save_path}"

        return self.format_result(f"✅ Notebook created: {params.title}\n{format_output(output)}{save_message}")


class NotebookStatusTool(KaggleTool):

    @property
    def name(self) -> str:
        return "get_notebook_status"

    @property
    def description(self) -> str:
        return "Get the status of a notebook execution"

    @property
    def input_schema(self) -> Dict[str, Any]:
        return {
            "type": "object",
            "properties": {"notebookSlug": dict(NOTEBOOK_SLUG_PROPERTY)},
            "required": ["notebookSlug"],
        }

    def run(self, input: Dict[str, Any]) -> Dict[str, Any]:
        params = self.parse(input)
        return self.format_result(self.kaggle(commands.notebook_status_args(params)))


class DownloadOutputTool(KaggleTool):

    @property
    def name(self) -> str:
        return "download_notebook_output"

    @property
    def description(self) -> str:
        return "Download the output of a completed notebook"

    @property
    def input_schema(self) -> Dict[str, Any]:
        return {
            "type": "object",
            "properties": {
                "notebookSlug": dict(NOTEBOOK_SLUG_PROPERTY),
                "outputPath": {
                    "type": "string",
                    "description": "Local directory to save outputs",
                    "default": DEFAULT_OUTPUT_DIR,
                },
            },
            "required": ["notebookSlug"],
        }

    def run(self, input: Dict[str, Any]) -> Dict[str, Any]:
        params = self.parse(input)
        ensure_directory(params.output_path)
        output = self.kaggle(commands.download_output_args(params))
        return self.format_message(f"✅ Notebook output downloaded to: {params.output_path}", output)


class PushNotebookTool(KaggleTool):
    """
    Pushes a notebook either by slug or from a local directory that already
    contains kernel-metadata.json.
    """

    @property
    def name(self) -> str:
        return "push_notebook"

    @property
    def description(self) -> str:
        return (
            "Push (run) a Kaggle notebook. mode 'slug' pushes by notebook identifier; "
            "mode 'local' pushes a local directory containing notebook metadata and code files"
        )

    @property
    def input_schema(self) -> Dict[str, Any]:
        return {
            "type": "object",
            "properties": {
                "notebookSlug": {
                    "type": "string",
                    "description": "Notebook identifier (username/notebook-slug), required when mode is 'slug'",
                },
                "localPath": {
                    "type": "string",
                    "description": f"Local directory containing {self.config.METADATA_FILENAME} "
                                   "(required when mode is 'local')",
                },
                "mode": {
                    "type": "string",
                    "description": "Execution mode: 'slug' or 'local'",
                    "enum": list(PUSH_MODES),
                    "default": "slug",
                },
            },
            "required": [],
        }

    def run(self, input: Dict[str, Any]) -> Dict[str, Any]:
        params = self.parse(input)
        if params.mode == "local":
            metadata_file = self.config.METADATA_FILENAME
            if not os.path.isfile(os.path.join(params.local_path, metadata_file)):
                raise ToolInputError(f"{metadata_file} not found in {params.local_path}")
            message = f"✅ Notebook pushed from local directory: {params.local_path}"
        else:
            message = f"✅ Notebook push started: {params.notebook_slug}"

        output = self.kaggle(commands.push_notebook_args(params))
        return self.format_message(message, output)


class SaveNotebookMetadataTool(KaggleTool):

    @property
    def name(self) -> str:
        return "save_notebook_metadata"

    @property
    def description(self) -> str:
        return "Save notebook metadata and notebook to local directory for later use"

    @property
    def input_schema(self) -> Dict[str, Any]:
        return {
            "type": "object",
            "properties": {
                "notebookSlug": {
                    "type": "string",
                    "description": "Notebook identifier (username/notebook-slug) to download metadata from",
                },
                "localPath": {
                    "type": "string",
                    "description": "Local directory to save metadata and notebook files",
                    "default": DEFAULT_NOTEBOOK_DIR,
                },
                "includeNotebook": {
                    "type": "boolean",
                    "description": "Also download the notebook file",
                    "default": True,
                },
            },
            "required": ["notebookSlug"],
        }

    def run(self, input: Dict[str, Any]) -> Dict[str, Any]:
        params = self.parse(input)
        ensure_directory(params.local_path)
        output = self.kaggle(commands.save_metadata_args(params))
        what = "metadata and notebook" if params.include_notebook else "metadata"
        return self.format_message(f"✅ Notebook {what} saved to {params.local_path}:", output)


class PullNotebookTool(KaggleTool):

    @property
    def name(self) -> str:
        return "pull_notebook"

    @property
    def description(self) -> str:
        return "Pull/download a notebook's metadata and files to local directory"

    @property
    def input_schema(self) -> Dict[str, Any]:
        return {
            "type": "object",
            "properties": {
                "notebookSlug": dict(NOTEBOOK_SLUG_PROPERTY),
                "localPath": {
                    "type": "string",
                    "description": "Local directory to save notebook files",
                    "default": DEFAULT_NOTEBOOK_DIR,
                },
                "metadata": {"type": "boolean", "description": "Download metadata file", "default": True},
            },
            "required": ["notebookSlug"],
        }

    def run(self, input: Dict[str, Any]) -> Dict[str, Any]:
        params = self.parse(input)
        ensure_directory(params.local_path)
        output = self.kaggle(commands.pull_notebook_args(params))
        return self.format_message(f"✅ Notebook pulled to {params.local_path}:", output)
