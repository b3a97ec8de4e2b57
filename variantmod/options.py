"""Settings for a module manager and the options that adjust them."""

from __future__ import annotations

import logging
import os
from collections.abc import Callable
from dataclasses import dataclass
from typing import Any

__all__ = [
    "MODULE_FILE_NAME",
    "LOCK_FILE_NAME",
    "DEFAULT_CACHE_DIR",
    "Option",
    "OptionError",
    "ManagerSettings",
    "logger",
    "commander",
    "with_file",
    "module_file",
    "lock_file",
    "work_dir",
    "go_getter_work_dir",
    "in_memory_module",
    "build_settings",
]

MODULE_FILE_NAME = "variant.mod"
LOCK_FILE_NAME = "variant.lock"
DEFAULT_CACHE_DIR = ".variant/mod/cache"


class OptionError(ValueError):
    """Raised when an option cannot be applied."""


@dataclass
class ManagerSettings:
    """Everything a module manager is configured with."""

    module_file: str = ""
    lock_file: str = ""
    module: Any = None
    logger: logging.Logger | None = None
    run_command: Callable[..., Any] | None = None
    abs_work_dir: str = ""
    cache_dir: str = ""
    go_getter_abs_work_dir: str = ""
    go_getter_cache_dir: str = ""


Option = Callable[[ManagerSettings], None]


def _extension(path: str) -> str:
    """Return the extension of the last path element, dot included."""
    name = path.rsplit("/", 1)[-1]
    if os.sep != "/":
        name = name.rsplit(os.sep, 1)[-1]
    dot = name.rfind(".")
    return name[dot:] if dot >= 0 else ""


def _join(base: str, path: str) -> str:
    return os.path.normpath(os.path.join(base, path))


def logger(log: logging.Logger) -> Option:
    """Use ``log`` for all diagnostics."""

    def apply(settings: ManagerSettings) -> None:
        settings.logger = log

    return apply


def commander(run_command: Callable[..., Any]) -> Option:
    """Use ``run_command`` to run external commands."""

    def apply(settings: ManagerSettings) -> None:
        settings.run_command = run_command

    return apply


def with_file(path: str) -> Option:
    """Use ``path`` as the module file and derive the lock file from it."""

    def apply(settings: ManagerSettings) -> None:
        if path == MODULE_FILE_NAME:
            lock = LOCK_FILE_NAME
        else:
            extension = _extension(path)
            if extension == ".variantmod":
                lock = path + ".lock"
            elif extension == ".mod":
                lock = path[: -len(".mod")] + ".lock"
            else:
                raise OptionError(
                    f"unsupported file extension {extension!r}: file is {path!r}"
                )
        settings.module_file = path
        settings.lock_file = lock

    return apply


def module_file(path: str) -> Option:
    """Use ``path`` as the module file."""

    def apply(settings: ManagerSettings) -> None:
        settings.module_file = path

    return apply


def lock_file(path: str) -> Option:
    """Use ``path`` as the lock file."""

    def apply(settings: ManagerSettings) -> None:
        settings.lock_file = path

    return apply


def work_dir(wd: str) -> Option:
    """Use ``wd`` as the absolute working directory."""

    def apply(settings: ManagerSettings) -> None:
        settings.abs_work_dir = wd

    return apply


def go_getter_work_dir(wd: str) -> Option:
    """Use ``wd`` as the working directory for fetching remote sources."""

    def apply(settings: ManagerSettings) -> None:
        settings.go_getter_abs_work_dir = wd

    return apply


def in_memory_module(module: Any) -> Option:
    """Use an already loaded module instead of reading the module file."""

    def apply(settings: ManagerSettings) -> None:
        settings.module = module

    return apply


def build_settings(*args: Option) -> ManagerSettings:
    """Apply the options in order, then fill in defaults for anything unset."""
    settings = ManagerSettings()
    for option in args:
        option(settings)

    if not settings.module_file:
        settings.module_file = MODULE_FILE_NAME
    if not settings.lock_file:
        settings.lock_file = LOCK_FILE_NAME
    if settings.logger is None:
        settings.logger = logging.getLogger("variantmod")
    if not settings.abs_work_dir:
        settings.abs_work_dir = os.path.abspath(os.getcwd())
    if not settings.go_getter_abs_work_dir:
        settings.go_getter_abs_work_dir = settings.abs_work_dir
    if not settings.cache_dir:
        settings.cache_dir = DEFAULT_CACHE_DIR
    if not settings.go_getter_cache_dir:
        settings.go_getter_cache_dir = settings.cache_dir

    if not os.path.isabs(settings.cache_dir):
        settings.cache_dir = _join(settings.abs_work_dir, settings.cache_dir)
    if not os.path.isabs(settings.go_getter_cache_dir):
        settings.go_getter_cache_dir = _join(
            settings.go_getter_abs_work_dir, settings.go_getter_cache_dir
        )

    settings.logger.debug(
        "init: workdir=%s cachedir=%s", settings.abs_work_dir, settings.cache_dir
    )
    return settings