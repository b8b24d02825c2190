#!/usr/bin/env python3
import os
import shutil
import subprocess
import sys
import venv
from pathlib import Path
from typing import Optional, Sequence

VENV_PATH = Path(".venv").resolve()
VENV_EXISTS_PATH = Path(".venv/.EXISTS")
SOURCES = ["vinculum", "ci.py"]


def run_in_venv(args: Sequence[str]) -> None:
    print("Run in environment: " + repr(args))
    environment = os.environ.copy()
    environment["VIRTUAL_ENV"] = VENV_PATH.as_posix()
    environment.pop("PYTHONHOME", None)
    environment["PATH"] = (VENV_PATH / "bin").as_posix() + ":" + environment["PATH"]
    subprocess.check_call(args, env=environment)


def ensure_venv() -> None:
    pyproject_stat = os.stat("pyproject.toml")
    try:
        exists_stat: Optional[os.stat_result] = VENV_EXISTS_PATH.stat()
    except FileNotFoundError:
        exists_stat = None

    if exists_stat and pyproject_stat.st_mtime <= exists_stat.st_mtime:
        return

    print("Creating venv")
    shutil.rmtree(".venv", ignore_errors=True)

    venv.create(".venv", with_pip=True)
    run_in_venv(["python3", "-m", "pip", "install", "--upgrade", "pip"])
    run_in_venv(["python3", "-m", "pip", "install", "flit"])
    run_in_venv(["flit", "install", "-s", "--deps=develop"])
    VENV_EXISTS_PATH.touch()


def cmd_lint() -> None:
    """Run all linting"""
    ensure_venv()
    run_in_venv(["python3", "-m", "mypy", "--strict", *SOURCES])
    run_in_venv(["python3", "-m", "pyflakes", *SOURCES])
    run_in_venv(["python3", "-m", "black", *SOURCES, "--check"])


def cmd_format() -> None:
    """Format source code with black"""
    ensure_venv()
    run_in_venv(["python3", "-m", "isort", *SOURCES])
    run_in_venv(["python3", "-m", "black", *SOURCES])


def cmd_test() -> None:
    """Run unit tests"""
    ensure_venv()
    run_in_venv(["python3", "-X", "dev", "-m", "pytest", "--cov=vinculum"])


def cmd_clean() -> None:
    """Remove all build artifacts"""
    for path in (".venv", "dist", ".pytest_cache", ".mypy_cache"):
        shutil.rmtree(path, ignore_errors=True)


def cmd_help() -> None:
    """Print help strings"""
    for name, value in globals().items():
        if name.startswith("cmd_"):
            print(f"{name[4:]}: {value.__doc__}")


def main() -> None:
    if len(sys.argv) < 2:
        cmd_help()
        sys.exit(1)

    commands = sys.argv[1:]
    for command in commands:
        globals()[f"cmd_{command}"]()


if __name__ == "__main__":
    main()
