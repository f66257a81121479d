from __future__ import annotations

from pathlib import PurePosixPath, PureWindowsPath

import pytest

from hwpexport.domain.models import BatchTarget, ExportParameters, SingleTarget
from hwpexport.services.request_builder import (
    ExportRequestBuilder,
    ensure_hwp_name,
    folder_picker_invocation,
    normalize_directory,
)


@pytest.fixture()
def win_builder(engine) -> ExportRequestBuilder:
    return ExportRequestBuilder(
        engine=engine,
        workspace_root=PureWindowsPath("C:\\vault"),
        fallback_directory="C:\\Users\\me\\Desktop",
    )


def test_single_export_args_with_indent(win_builder, engine):
    inv = win_builder.build_invocation(
        SingleTarget(path="notes/todo.md", display_name="todo"),
        ExportParameters(output_name="todo", output_directory="C:\\Out\\", space_indent=True),
    )

    assert inv.args == (
        "converter.py",
        "C:\\vault\\notes\\todo.md",
        "C:\\Out\\todo.hwp",
        "--space-indent",
    )
    assert inv.executable == "python"
    assert inv.working_directory == str(engine.script_dir)
    assert inv.script_path == str(engine.script_path)
    assert inv.command() == ["python", *inv.args]


def test_single_export_keeps_existing_extension(win_builder):
    inv = win_builder.build_invocation(
        SingleTarget(path="todo.md", display_name="todo"),
        ExportParameters(output_name="Report.HWP", output_directory="D:\\x"),
    )
    assert inv.args[2] == "D:\\x\\Report.HWP"
    assert "--space-indent" not in inv.args


def test_single_export_blank_name_uses_display_name(win_builder):
    inv = win_builder.build_invocation(
        SingleTarget(path="todo.md", display_name="todo"),
        ExportParameters(output_name="  ", output_directory="D:\\x"),
    )
    assert inv.args[2] == "D:\\x\\todo.hwp"


def test_batch_export_args(win_builder):
    inv = win_builder.build_invocation(
        BatchTarget(root_path="projects", display_name="projects"),
        ExportParameters(output_directory="D:\\Export", space_indent=False),
    )

    assert inv.args == ("converter.py", "--batch-folder", "C:\\vault\\projects", "D:\\Export")


def test_batch_export_of_workspace_root(win_builder):
    inv = win_builder.build_invocation(
        BatchTarget(root_path="/", display_name="vault"),
        ExportParameters(output_directory="D:\\Export", space_indent=True),
    )
    assert inv.args == (
        "converter.py",
        "--batch-folder",
        "C:\\vault",
        "D:\\Export",
        "--space-indent",
    )


def test_blank_output_directory_falls_back(win_builder):
    inv = win_builder.build_invocation(
        SingleTarget(path="todo.md", display_name="todo"),
        ExportParameters(output_name="todo", output_directory="   "),
    )
    assert inv.args[2] == "C:\\Users\\me\\Desktop\\todo.hwp"


def test_builder_is_deterministic(win_builder):
    target = SingleTarget(path="notes/todo.md", display_name="todo")
    params = ExportParameters(output_name="todo", output_directory="C:\\Out", space_indent=True)

    first = win_builder.build_invocation(target, params)
    second = win_builder.build_invocation(target, params)

    assert first == second
    assert first.args == second.args


def test_trailing_separator_normalization_is_idempotent(win_builder):
    with_sep = normalize_directory("C:\\out\\", PureWindowsPath)
    without = normalize_directory("C:\\out", PureWindowsPath)

    assert with_sep == without == "C:\\out"
    assert normalize_directory(with_sep, PureWindowsPath) == with_sep

    target = SingleTarget(path="a.md", display_name="a")
    a = win_builder.build_invocation(target, ExportParameters(output_name="a", output_directory="C:\\out\\"))
    b = win_builder.build_invocation(target, ExportParameters(output_name="a", output_directory="C:\\out"))
    assert a.args == b.args


def test_posix_paths(engine):
    builder = ExportRequestBuilder(engine=engine, workspace_root=PurePosixPath("/home/me/vault"))
    inv = builder.build_invocation(
        SingleTarget(path="notes/todo.md", display_name="todo"),
        ExportParameters(output_name="todo", output_directory="/tmp/out//"),
    )
    assert inv.args[1:] == ("/home/me/vault/notes/todo.md", "/tmp/out/todo.hwp")


def test_folder_picker_invocation(engine):
    inv = folder_picker_invocation(engine)
    assert inv.args == ("converter.py", "--pick-folder")
    assert inv.working_directory == str(engine.script_dir)


def test_ensure_hwp_name():
    assert ensure_hwp_name("todo") == "todo.hwp"
    assert ensure_hwp_name("todo.hwp") == "todo.hwp"
    assert ensure_hwp_name("todo.md") == "todo.md.hwp"


@pytest.mark.parametrize(
    "flavor, with_sep, expected",
    [
        (PurePosixPath, "/tmp/out/", "/tmp/out"),
        (PurePosixPath, "C:\\out\\", "C:\\out"),
        (PureWindowsPath, "C:/out/", "C:\\out"),
        (PureWindowsPath, "C:\\out\\\\", "C:\\out"),
    ],
)
def test_normalization_strips_either_separator(flavor, with_sep, expected):
    once = normalize_directory(with_sep, flavor)

    assert once == expected
    assert normalize_directory(expected, flavor) == expected
    assert normalize_directory(once, flavor) == once


def test_normalization_default_flavor_treats_backslash_as_separator():
    assert normalize_directory("C:\\out\\") == normalize_directory("C:\\out")


@pytest.mark.parametrize(
    "flavor, root",
    [(PurePosixPath, "/"), (PureWindowsPath, "C:\\"), (PureWindowsPath, "C:/")],
)
def test_normalization_keeps_bare_root(flavor, root):
    once = normalize_directory(root, flavor)

    assert once in ("/", "C:\\")
    assert normalize_directory(once, flavor) == once


def test_blank_output_directory_without_fallback_uses_desktop(engine, monkeypatch):
    import hwpexport.services.config.plugin_config as cfg_mod

    monkeypatch.setattr(cfg_mod, "user_desktop_dir", lambda: "/home/me/Desktop")
    builder = ExportRequestBuilder(engine=engine, workspace_root=PurePosixPath("/home/me/vault"))

    inv = builder.build_invocation(
        SingleTarget(path="todo.md", display_name="todo"),
        ExportParameters(output_name="todo", output_directory=""),
    )

    assert inv.args[2] == "/home/me/Desktop/todo.hwp"
    assert PurePosixPath(inv.args[2]).is_absolute()


def test_blank_fallback_is_treated_as_missing(engine, monkeypatch):
    import hwpexport.services.config.plugin_config as cfg_mod

    monkeypatch.setattr(cfg_mod, "user_desktop_dir", lambda: "/home/me/Desktop")
    builder = ExportRequestBuilder(
        engine=engine,
        workspace_root=PurePosixPath("/home/me/vault"),
        fallback_directory="   ",
    )

    inv = builder.build_invocation(
        BatchTarget(root_path="projects", display_name="projects"),
        ExportParameters(output_directory=" "),
    )

    assert inv.args[3] == "/home/me/Desktop"
