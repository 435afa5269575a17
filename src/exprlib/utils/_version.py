# Copyright (c) 2007-2009 PediaPress GmbH
# See README.rst for additional licensing information.

import importlib.metadata
import logging
import os
import re
from pathlib import Path

import toml

logger = logging.getLogger(__name__)

DISTRIBUTION_NAME = "exprlib"


def find_pyproject_toml():
    pyproject_env = os.getenv("EXPRLIB_PYPROJECT_TOML", "")
    if pyproject_env:
        return Path(pyproject_env).resolve()

    current_dir = Path(__file__).resolve().parent

    # walk up until the file system root
    while current_dir != current_dir.parent:
        candidate = current_dir / "pyproject.toml"
        if candidate.exists():
            return candidate

        current_dir = current_dir.parent

    return None


def get_version_from_pyproject(pyproject_toml_path=None):
    if pyproject_toml_path is None:
        pyproject_toml_path = find_pyproject_toml()
    if not pyproject_toml_path:
        return None
    with open(pyproject_toml_path, encoding="utf-8") as file:
        pyproject_data = toml.load(file)
    project = pyproject_data.get("project", {})
    if project.get("name") != DISTRIBUTION_NAME:
        return None
    return project.get("version")


def get_version_from_package(package_name=DISTRIBUTION_NAME):
    try:
        return importlib.metadata.version(package_name)
    except importlib.metadata.PackageNotFoundError:
        return None


def get_version():
    ver = get_version_from_pyproject() or get_version_from_package()
    if not ver:
        logger.warning("could not determine the %s version", DISTRIBUTION_NAME)
        return "0.0.0"
    return ver


def parse_version_info(ver):
    """leading numeric release parts, "0.2.0rc1" -> (0, 2, 0)"""
    res = []
    for part in ver.split(".")[:3]:
        match = re.match(r"\d+", part)
        if match is None:
            break
        res.append(int(match.group()))
    return tuple(res)


version = get_version()
__version_info__ = parse_version_info(version)
display_version = __version__ = version


def main():
    print(DISTRIBUTION_NAME, display_version)


if __name__ == "__main__":
    main()
