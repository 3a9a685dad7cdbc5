import sys
from pathlib import Path

import anyio
import pytest

from gitinfo.utils import (
    decode_bytes,
    decode_path,
    get_project_config_file,
    get_user_config_file,
    remote_tracking_ref,
    unwrap_single_error,
)

linux_only = pytest.mark.skipif(
    sys.platform != "linux", reason="XDG config paths are Linux specific"
)


class TestUnwrapSingleError:
    @pytest.mark.anyio
    async def test_reraises_sole_task_error(self) -> None:
        async def fail() -> None:
            msg = "boom"
            raise KeyError(msg)

        with pytest.raises(KeyError, match="boom"):
            with unwrap_single_error():
                async with anyio.create_task_group() as tg:
                    tg.start_soon(fail)

    def test_keeps_group_with_several_errors(self) -> None:
        group = ExceptionGroup("many", [ValueError("first"), OSError("second")])

        with pytest.raises(ExceptionGroup) as exc_info, unwrap_single_error():
            raise group

        assert exc_info.value is group

    def test_passes_plain_exceptions_through(self) -> None:
        with pytest.raises(RuntimeError), unwrap_single_error():
            msg = "plain"
            raise RuntimeError(msg)


class TestGitHelpers:
    def test_decode_bytes(self) -> None:
        assert decode_bytes(b"refs/heads/master") == "refs/heads/master"
        assert decode_bytes("already") == "already"

    def test_decode_path_replaces_invalid_utf8(self) -> None:
        assert decode_path(b"caf\xe9.txt") == "caf\ufffd.txt"
        assert decode_path("caf\udce9.txt") == "caf\ufffd.txt"
        assert decode_path("dir/caf\u00e9.txt") == "dir/caf\u00e9.txt"

    def test_remote_tracking_ref(self) -> None:
        assert remote_tracking_ref("origin", "feature/x") == (
            "refs/remotes/origin/feature/x"
        )


class TestConfigPaths:
    @linux_only
    def test_user_config_file_uses_xdg(self, tmp_path: Path) -> None:
        assert get_user_config_file() == tmp_path / "xdg" / "gitinfo" / "config.toml"

    @linux_only
    def test_user_config_file_falls_back_to_home(
        self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        monkeypatch.delenv("XDG_CONFIG_HOME")
        monkeypatch.setenv("HOME", str(tmp_path / "home"))

        expected = tmp_path / "home" / ".config" / "gitinfo" / "config.toml"
        assert get_user_config_file() == expected

    def test_project_config_file(self, tmp_path: Path) -> None:
        assert get_project_config_file(tmp_path) == tmp_path / ".gitinfo.toml"

    def test_project_config_file_defaults_to_cwd(
        self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        monkeypatch.chdir(tmp_path)

        assert get_project_config_file() == tmp_path / ".gitinfo.toml"
