"""Tests for notebook tools that touch the local filesystem."""

import json
import os

from conftest import result_text


def _staged_files(config, runner):
    """Record the staged push directory's contents at invocation time."""
    seen = {}

    def on_run(argv):
        directory = argv[-1]
        seen["dir"] = directory
        seen["files"] = sorted(os.listdir(directory))
        with open(os.path.join(directory, config.METADATA_FILENAME)) as f:
            seen["metadata"] = json.load(f)
        with open(os.path.join(directory, config.NOTEBOOK_FILENAME)) as f:
            seen["notebook"] = json.load(f)

    runner.on_run = on_run
    return seen


def test_create_notebook_stages_pair_and_cleans_up(dispatcher, runner, config):
    seen = _staged_files(config, runner)
    runner.respond(stdout="Kernel version 1 successfully pushed.")

    text = result_text(dispatcher.execute("create_notebook", {
        "title": "Iris EDA",
        "code": "import pandas as pd",
        "datasetSources": ["uciml/iris"],
    }))

    assert text.startswith("✅ Notebook created: Iris EDA\nKernel version 1 successfully pushed.")
    assert runner.calls == [["kernels", "push", "-p", seen["dir"]]]
    assert seen["files"] == ["kernel-metadata.json", "notebook.ipynb"]
    assert seen["metadata"]["title"] == "Iris EDA"
    assert seen["metadata"]["dataset_sources"] == ["uciml/iris"]
    assert seen["metadata"]["code_file"] == "notebook.ipynb"
    assert seen["notebook"]["cells"][0]["source"] == "import pandas as pd"
    assert os.path.dirname(seen["dir"]) == config.temp_dir
    assert not os.path.exists(seen["dir"])
    assert os.listdir(config.temp_dir) == []


def test_create_notebook_cleans_up_when_push_fails(dispatcher, runner, config, tmp_path):
    seen = _staged_files(config, runner)
    runner.respond(stderr="401 - Unauthorized", exit_code=1)
    save_dir = tmp_path / "saved"

    text = result_text(dispatcher.execute("create_notebook", {
        "title": "Broken",
        "code": "1/0",
        "saveLocally": True,
        "localSavePath": str(save_dir),
    }))

    assert text.startswith("Error: Kaggle command failed:")
    assert not os.path.exists(seen["dir"])
    assert os.listdir(config.temp_dir) == []
    assert not save_dir.exists()


def test_create_notebook_saves_locally(dispatcher, runner, config, tmp_path):
    save_dir = tmp_path / "nested" / "saved"

    text = result_text(dispatcher.execute("create_notebook", {
        "title": "Keep me",
        "code": "print('hi')",
        "saveLocally": True,
        "localSavePath": str(save_dir),
    }))

    assert text.endswith(f"📁 Files saved locally to: {save_dir}")
    assert (save_dir / "notebook.ipynb").is_file()
    assert (save_dir / "kernel-metadata.json").is_file()
    metadata = json.loads((save_dir / "kernel-metadata.json").read_text())
    assert metadata["title"] == "Keep me"
    assert metadata["is_private"] is True
    assert os.listdir(config.temp_dir) == []


def test_push_local_without_metadata_file(dispatcher, runner, tmp_path):
    local = tmp_path / "project"
    local.mkdir()

    text = result_text(dispatcher.execute("push_notebook", {"mode": "local", "localPath": str(local)}))

    assert text.startswith("Error:")
    assert "kernel-metadata.json not found" in text
    assert runner.calls == []


def test_push_local_with_metadata_file(dispatcher, runner, tmp_path):
    local = tmp_path / "project"
    local.mkdir()
    (local / "kernel-metadata.json").write_text("{}")

    text = result_text(dispatcher.execute("push_notebook", {"mode": "local", "localPath": str(local)}))

    assert text.startswith(f"✅ Notebook pushed from local directory: {local}")
    assert runner.calls == [["kernels", "push", "-p", str(local)]]


def test_push_invalid_mode(dispatcher, runner):
    text = result_text(dispatcher.execute("push_notebook", {"mode": "remote", "notebookSlug": "alice/demo"}))
    assert text.startswith("Error: Invalid mode: remote")
    assert runner.calls == []


def test_download_output_creates_nested_directory(dispatcher, runner, tmp_path):
    out = tmp_path / "a" / "b" / "outputs"

    text = result_text(dispatcher.execute("download_notebook_output", {
        "notebookSlug": "alice/demo",
        "outputPath": str(out),
    }))

    assert out.is_dir()
    assert text.startswith(f"✅ Notebook output downloaded to: {out}")
    assert runner.calls == [["kernels", "output", "alice/demo", "-p", str(out)]]


def test_pull_and_save_use_default_directory(dispatcher, runner, tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)

    pull_text = result_text(dispatcher.execute("pull_notebook", {"notebookSlug": "alice/demo"}))
    save_text = result_text(dispatcher.execute("save_notebook_metadata", {
        "notebookSlug": "alice/demo",
        "includeNotebook": False,
    }))

    assert (tmp_path / "kaggle-notebook").is_dir()
    assert pull_text.startswith("✅ Notebook pulled to ./kaggle-notebook:")
    assert save_text.startswith("✅ Notebook metadata saved to ./kaggle-notebook:")
    assert runner.calls == [
        ["kernels", "pull", "alice/demo", "-p", "./kaggle-notebook", "--metadata"],
        ["kernels", "pull", "alice/demo", "-p", "./kaggle-notebook", "--metadata"],
    ]
