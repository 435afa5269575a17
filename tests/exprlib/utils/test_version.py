#! /usr/bin/env py.test

from pathlib import Path

import pytest
import toml

from exprlib.utils import _version

root_dir = Path(__file__).resolve().parent.parent.parent.parent


def test_version_matches_pyproject():
    pyproject = toml.load(root_dir / "pyproject.toml")
    assert _version.version == pyproject["project"]["version"]
    assert _version.__version_info__ == tuple(map(int, _version.version.split(".")))


def test_version_from_pyproject(tmp_path):
    pyproject = tmp_path / "pyproject.toml"
    pyproject.write_text('[project]\nname = "exprlib"\nversion = "9.8.7"\n')
    assert _version.get_version_from_pyproject(pyproject) == "9.8.7"


def test_foreign_pyproject_is_ignored(tmp_path):
    pyproject = tmp_path / "pyproject.toml"
    pyproject.write_text('[project]\nname = "other"\nversion = "1.0.0"\n')
    assert _version.get_version_from_pyproject(pyproject) is None


def test_find_pyproject_from_environment(tmp_path, monkeypatch):
    pyproject = tmp_path / "pyproject.toml"
    monkeypatch.setenv("EXPRLIB_PYPROJECT_TOML", str(pyproject))
    assert _version.find_pyproject_toml() == pyproject.resolve()


def test_main(capsys):
    _version.main()
    assert capsys.readouterr().out == f"exprlib {_version.display_version}\n"


@pytest.mark.parametrize(
    "ver,expected",
    [
        ("0.1.0", (0, 1, 0)),
        ("0.2.0rc1", (0, 2, 0)),
        ("1.0.dev3", (1, 0)),
        ("2.1.0.post1", (2, 1, 0)),
        ("2024.10", (2024, 10)),
    ],
)
def test_parse_version_info(ver, expected):
    assert _version.parse_version_info(ver) == expected
