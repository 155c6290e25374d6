from __future__ import annotations

import json
from pathlib import Path

import pytest

from soapify.__main__ import main


def _write_descriptor(tmp_path: Path, document: object) -> Path:
    path = tmp_path / "service.json"
    path.write_text(json.dumps(document), encoding="utf-8")
    return path


class TestCLI:
    def test_prints_generated_client(self, tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
        path = _write_descriptor(
            tmp_path,
            {
                "class_name": "UserClient",
                "namespace": "app.client",
                "methods": [
                    {
                        "wire_name": "GetUser",
                        "parameters": [{"name": "id", "type": "int"}],
                        "return_type": "app.types.UserResult",
                    }
                ],
            },
        )
        result = main([str(path)])
        assert result == 0
        out = capsys.readouterr().out
        assert "class UserClient(Client):" in out
        assert "def getUser(self, id: int) -> types.UserResult:" in out

    def test_overrides_profile(self, tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
        path = _write_descriptor(
            tmp_path,
            {"class_name": "UserClient", "methods": [{"wire_name": "GetUser", "return_type": "int"}]},
        )
        result = main([str(path), "--method-case", "snake", "--client-base", "acme.soap.Base"])
        assert result == 0
        out = capsys.readouterr().out
        assert "from acme.soap import Base" in out
        assert "def get_user(self) -> int:" in out

    @pytest.mark.parametrize(
        "document",
        [
            pytest.param({}, id="missing-class-name"),
            pytest.param([], id="non-object"),
            pytest.param({"class_name": "C", "methods": [{"wire_name": "P", "return_type": "a..b"}]}, id="assembly"),
        ],
    )
    def test_invalid_descriptor_returns_error(
        self,
        tmp_path: Path,
        capsys: pytest.CaptureFixture[str],
        document: object,
    ) -> None:
        result = main([str(_write_descriptor(tmp_path, document))])
        assert result == 1
        assert capsys.readouterr().err.startswith("error: ")

    def test_missing_file_returns_error(self, tmp_path: Path) -> None:
        assert main([str(tmp_path / "missing.json")]) == 1

    def test_directory_returns_error(self, tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
        assert main([str(tmp_path)]) == 1
        assert capsys.readouterr().err.startswith("error: ")
