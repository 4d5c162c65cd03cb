"""Tests for parameter records and argument-vector building."""

import pytest

from kaggle_mcp.infrastructure.errors import ToolInputError
from kaggle_mcp.infrastructure.kaggle import commands
from kaggle_mcp.infrastructure.kaggle.params import (
    CreateNotebookParams,
    ListCompetitionsParams,
    ListNotebooksParams,
    PullNotebookParams,
    PushNotebookParams,
    SaveMetadataParams,
    SearchDatasetsParams,
    parse_params,
)


def test_list_notebooks_defaults():
    params = ListNotebooksParams.from_input({})
    assert commands.list_notebooks_args(params) == [
        "kernels", "list", "--mine", "--page", "1", "--page-size", "20", "-v",
    ]


def test_list_notebooks_falsy_numbers_fall_back():
    params = ListNotebooksParams.from_input({"page": 0, "pageSize": None})
    assert (params.page, params.page_size) == (1, 20)

    params = ListNotebooksParams.from_input({"page": 3, "pageSize": 50})
    assert commands.list_notebooks_args(params)[3:7] == ["--page", "3", "--page-size", "50"]


def test_list_notebooks_rejects_non_numeric_page():
    with pytest.raises(ToolInputError, match="page"):
        ListNotebooksParams.from_input({"page": "two"})


def test_list_competitions_omits_default_group_and_category():
    params = ListCompetitionsParams.from_input({"group": "general", "category": "all"})
    args = commands.list_competitions_args(params)
    assert "--group" not in args
    assert "--category" not in args
    assert args == ["competitions", "list", "-v"]


def test_list_competitions_passes_other_values():
    params = ListCompetitionsParams.from_input(
        {"group": "entered", "category": "featured", "sortBy": "prize"}
    )
    args = commands.list_competitions_args(params)
    assert args == [
        "competitions", "list",
        "--group", "entered",
        "--category", "featured",
        "--sort-by", "prize",
        "-v",
    ]


def test_search_datasets_keeps_query_as_one_argument():
    params = SearchDatasetsParams.from_input({"search": "titanic survival", "page": 2})
    assert commands.search_datasets_args(params) == [
        "datasets", "list", "-s", "titanic survival", "--page", "2", "-v",
    ]


def test_push_notebook_args_by_mode():
    slug = PushNotebookParams.from_input({"notebookSlug": "alice/demo"})
    assert commands.push_notebook_args(slug) == ["kernels", "push", "alice/demo"]

    local = PushNotebookParams.from_input({"mode": "local", "localPath": "/work/nb"})
    assert commands.push_notebook_args(local) == ["kernels", "push", "-p", "/work/nb"]


@pytest.mark.parametrize(
    "raw, message",
    [
        ({"mode": "slug"}, "notebookSlug is required"),
        ({"mode": "local"}, "localPath is required"),
        ({"mode": "remote", "notebookSlug": "alice/demo"}, "Invalid mode: remote"),
    ],
)
def test_push_notebook_params_errors(raw, message):
    with pytest.raises(ToolInputError, match=message):
        PushNotebookParams.from_input(raw)


def test_metadata_flag_conditions_are_opposite():
    save_default = SaveMetadataParams.from_input({"notebookSlug": "alice/demo"})
    save_meta_only = SaveMetadataParams.from_input({"notebookSlug": "alice/demo", "includeNotebook": False})
    pull_default = PullNotebookParams.from_input({"notebookSlug": "alice/demo"})
    pull_no_meta = PullNotebookParams.from_input({"notebookSlug": "alice/demo", "metadata": False})

    assert "--metadata" not in commands.save_metadata_args(save_default)
    assert commands.save_metadata_args(save_meta_only)[-1] == "--metadata"
    assert commands.pull_notebook_args(pull_default) == [
        "kernels", "pull", "alice/demo", "-p", "./kaggle-notebook", "--metadata",
    ]
    assert "--metadata" not in commands.pull_notebook_args(pull_no_meta)


def test_create_notebook_defaults():
    params = CreateNotebookParams.from_input({"title": "Demo", "code": "print(1)"})
    assert params.language == "python"
    assert params.is_private is True
    assert params.enable_gpu is False
    assert params.enable_internet is True
    assert params.dataset_sources == []
    assert params.save_locally is False
    assert params.local_save_path == "./kaggle-notebook"


def test_boolean_flags_keep_explicit_values_and_default_on_null():
    params = CreateNotebookParams.from_input(
        {"title": "Demo", "code": "x", "isPrivate": False, "enableGpu": True, "enableInternet": None}
    )
    assert (params.is_private, params.enable_gpu, params.enable_internet) == (False, True, True)


@pytest.mark.parametrize(
    "tool_name, raw",
    [
        ("create_notebook", {"title": "Demo", "code": "x", "enableGpu": "false"}),
        ("create_notebook", {"title": "Demo", "code": "x", "isPrivate": "false"}),
        ("create_notebook", {"title": "Demo", "code": "x", "saveLocally": "true"}),
        ("create_notebook", {"title": "Demo", "code": "x", "enableInternet": 0}),
        ("save_notebook_metadata", {"notebookSlug": "me/nb", "includeNotebook": "no"}),
        ("pull_notebook", {"notebookSlug": "me/nb", "metadata": 1}),
    ],
)
def test_boolean_flags_reject_non_bool_values(tool_name, raw):
    with pytest.raises(ToolInputError, match="must be a boolean"):
        parse_params(tool_name, raw)


def test_create_notebook_rejects_unknown_language():
    with pytest.raises(ToolInputError, match="language"):
        CreateNotebookParams.from_input({"title": "Demo", "code": "x", "language": "julia"})


def test_notebook_document_has_single_code_cell():
    params = CreateNotebookParams.from_input({"title": "Demo", "code": "print(1)", "language": "r"})
    doc = commands.build_notebook_document(params)

    assert len(doc["cells"]) == 1
    assert doc["cells"][0]["cell_type"] == "code"
    assert doc["cells"][0]["source"] == "print(1)"
    assert doc["metadata"]["kernelspec"] == {"language": "r", "display_name": "R", "name": "ir"}
    assert doc["nbformat"] == 4


def test_notebook_metadata_fields():
    params = CreateNotebookParams.from_input({
        "title": "Demo",
        "code": "print(1)",
        "isPrivate": False,
        "enableGpu": True,
        "enableInternet": False,
        "datasetSources": ["alice/iris"],
    })
    meta = commands.build_notebook_metadata(params, code_file="notebook.ipynb", clock=lambda: 1700000000.0)

    assert meta == {
        "id": "new-notebook-1700000000000",
        "title": "Demo",
        "code_file": "notebook.ipynb",
        "language": "python",
        "kernel_type": "notebook",
        "is_private": False,
        "enable_gpu": True,
        "enable_internet": False,
        "dataset_sources": ["alice/iris"],
        "competition_sources": [],
        "kernel_sources": [],
    }


def test_parse_params_unknown_tool():
    with pytest.raises(ToolInputError, match="Unknown tool: nope"):
        parse_params("nope", {})
