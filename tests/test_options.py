import logging
import os

import pytest

from variantmod.options import (
    DEFAULT_CACHE_DIR,
    LOCK_FILE_NAME,
    MODULE_FILE_NAME,
    OptionError,
    build_settings,
    commander,
    go_getter_work_dir,
    in_memory_module,
    lock_file,
    logger,
    module_file,
    with_file,
    work_dir,
)


def test_defaults_for_file_names(tmp_path):
    settings = build_settings(work_dir(str(tmp_path)))
    assert settings.module_file == "variant.mod"
    assert settings.lock_file == "variant.lock"


def test_cache_dirs_are_made_absolute(tmp_path):
    wd = str(tmp_path)
    settings = build_settings(work_dir(wd))
    expected = os.path.normpath(os.path.join(wd, DEFAULT_CACHE_DIR))
    assert settings.cache_dir == expected
    assert settings.go_getter_abs_work_dir == wd
    assert settings.go_getter_cache_dir == expected


def test_go_getter_cache_dir_follows_go_getter_work_dir(tmp_path):
    wd = str(tmp_path / "work")
    getter_wd = str(tmp_path / "getter")
    settings = build_settings(work_dir(wd), go_getter_work_dir(getter_wd))
    assert settings.abs_work_dir == wd
    assert settings.go_getter_abs_work_dir == getter_wd
    assert settings.go_getter_cache_dir == os.path.normpath(
        os.path.join(getter_wd, DEFAULT_CACHE_DIR)
    )
    assert settings.cache_dir.startswith(wd)


def test_work_dir_defaults_to_current_directory(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    settings = build_settings()
    assert os.path.realpath(settings.abs_work_dir) == os.path.realpath(str(tmp_path))
    assert os.path.isabs(settings.cache_dir)


@pytest.mark.parametrize(
    "path, expected_lock",
    [
        ("variant.mod", "variant.lock"),
        ("myapp.variantmod", "myapp.variantmod.lock"),
        ("myapp.mod", "myapp.lock"),
    ],
)
def test_with_file_derives_lock_file(tmp_path, path, expected_lock):
    settings = build_settings(work_dir(str(tmp_path)), with_file(path))
    assert settings.module_file == path
    assert settings.lock_file == expected_lock


def test_with_file_rejects_unknown_extension(tmp_path):
    with pytest.raises(OptionError, match="unsupported file extension"):
        build_settings(work_dir(str(tmp_path)), with_file("myapp.yaml"))


def test_with_file_rejects_missing_extension(tmp_path):
    with pytest.raises(OptionError):
        build_settings(work_dir(str(tmp_path)), with_file("myapp"))


def test_explicit_module_and_lock_files(tmp_path):
    settings = build_settings(
        module_file("myapp.variantmod"),
        lock_file("myapp.variantmod.lock"),
        work_dir(str(tmp_path)),
    )
    assert settings.module_file == "myapp.variantmod"
    assert settings.lock_file == "myapp.variantmod.lock"


def test_later_options_override_earlier_ones(tmp_path):
    settings = build_settings(
        work_dir(str(tmp_path)),
        with_file("myapp.variantmod"),
        lock_file("other.lock"),
    )
    assert settings.module_file == "myapp.variantmod"
    assert settings.lock_file == "other.lock"


def test_module_file_alone_keeps_default_lock(tmp_path):
    settings = build_settings(work_dir(str(tmp_path)), module_file("myapp.variantmod"))
    assert settings.lock_file == LOCK_FILE_NAME
    assert settings.module_file != MODULE_FILE_NAME


def test_logger_option(tmp_path):
    log = logging.getLogger("custom-test-logger")
    settings = build_settings(work_dir(str(tmp_path)), logger(log))
    assert settings.logger is log


def test_default_logger_exists(tmp_path):
    settings = build_settings(work_dir(str(tmp_path)))
    assert isinstance(settings.logger, logging.Logger)
    assert settings.logger.name == "variantmod"


def test_commander_option(tmp_path):
    def run(command, args, env):
        return command

    settings = build_settings(work_dir(str(tmp_path)), commander(run))
    assert settings.run_command is run
    assert settings.run_command("go", [], {}) == "go"


def test_in_memory_module_option(tmp_path):
    module = {"name": "myapp"}
    settings = build_settings(work_dir(str(tmp_path)), in_memory_module(module))
    assert settings.module is module


def test_no_module_by_default(tmp_path):
    settings = build_settings(work_dir(str(tmp_path)))
    assert settings.module is None
    assert settings.run_command is None