"""Unit tests for utility functions (project_management.utils).

Tests cover:
- run_command (success, failure, timeout, missing program)
- PathLockRegistry
- Rich output helpers write to stderr
"""

from __future__ import annotations

import asyncio
import sys
from pathlib import Path
from unittest.mock import patch

import pytest

from project_management.utils import (
    PathLockRegistry,
    console,
    print_error,
    print_info,
    print_success,
    print_warning,
    run_command,
)


# ---------------------------------------------------------------------------
# run_command
# ---------------------------------------------------------------------------


class TestRunCommand:
    @pytest.mark.unit
    @pytest.mark.asyncio
    async def test_success(self):
        code, out, err = await run_command([sys.executable, "-c", "print('hello')"])
        assert code == 0
        assert out == "hello"
        assert err == ""

    @pytest.mark.unit
    @pytest.mark.asyncio
    async def test_nonzero_exit(self):
        code, _, err = await run_command(
            [sys.executable, "-c", "import sys; sys.stderr.write('boom'); sys.exit(3)"]
        )
        assert code == 3
        assert err == "boom"

    @pytest.mark.unit
    @pytest.mark.asyncio
    async def test_cwd(self, tmp_path: Path):
        code, out, _ = await run_command(
            [sys.executable, "-c", "import os; print(os.getcwd())"], cwd=tmp_path
        )
        assert code == 0
        assert Path(out).resolve() == tmp_path.resolve()

    @pytest.mark.unit
    @pytest.mark.asyncio
    async def test_timeout(self):
        code, _, err = await run_command(
            [sys.executable, "-c", "import time; time.sleep(5)"], timeout=0.2
        )
        assert code == -1
        assert "timed out" in err

    @pytest.mark.unit
    @pytest.mark.asyncio
    async def test_missing_program_raises(self):
        with pytest.raises(FileNotFoundError):
            await run_command(["definitely-not-a-real-program-xyz"])

    @pytest.mark.unit
    @pytest.mark.asyncio
    async def test_mocked_process(self, mock_subprocess):
        proc = mock_subprocess(stdout="out\n", stderr="warn\n", returncode=0)
        with patch("asyncio.create_subprocess_exec", return_value=proc) as create:
            code, out, err = await run_command(["git", "status"])
        assert (code, out, err) == (0, "out", "warn")
        assert create.call_args.args[:2] == ("git", "status")


# ---------------------------------------------------------------------------
# PathLockRegistry
# ---------------------------------------------------------------------------


class TestPathLockRegistry:
    @pytest.mark.unit
    @pytest.mark.asyncio
    async def test_entry_exists_only_while_held(self, tmp_path: Path):
        locks = PathLockRegistry()
        async with locks.hold(tmp_path / "a"):
            assert len(locks) == 1
        assert len(locks) == 0

    @pytest.mark.unit
    @pytest.mark.asyncio
    async def test_entry_released_after_error(self, tmp_path: Path):
        locks = PathLockRegistry()
        with pytest.raises(RuntimeError):
            async with locks.hold(tmp_path / "a"):
                raise RuntimeError("boom")
        assert len(locks) == 0

    @pytest.mark.unit
    @pytest.mark.asyncio
    async def test_different_paths_do_not_block(self, tmp_path: Path):
        locks = PathLockRegistry()
        async with locks.hold(tmp_path / "a"):
            async with locks.hold(tmp_path / "b"):
                assert len(locks) == 2
        assert len(locks) == 0

    @pytest.mark.unit
    @pytest.mark.asyncio
    async def test_lock_serializes(self, tmp_path: Path):
        locks = PathLockRegistry()
        order: list[str] = []

        async def worker(tag: str) -> None:
            async with locks.hold(tmp_path / "same"):
                order.append(f"{tag}-start")
                await asyncio.sleep(0.01)
                order.append(f"{tag}-end")

        await asyncio.gather(worker("a"), worker("b"))
        assert order in (
            ["a-start", "a-end", "b-start", "b-end"],
            ["b-start", "b-end", "a-start", "a-end"],
        )
        assert len(locks) == 0

    @pytest.mark.unit
    @pytest.mark.asyncio
    async def test_entry_kept_while_waiter_pending(self, tmp_path: Path):
        locks = PathLockRegistry()
        first_in = asyncio.Event()
        release = asyncio.Event()

        async def first() -> None:
            async with locks.hold(tmp_path / "same"):
                first_in.set()
                await release.wait()

        async def second() -> None:
            async with locks.hold(tmp_path / "same"):
                assert len(locks) == 1

        task_a = asyncio.create_task(first())
        await first_in.wait()
        task_b = asyncio.create_task(second())
        await asyncio.sleep(0)
        release.set()
        await asyncio.gather(task_a, task_b)
        assert len(locks) == 0


# ---------------------------------------------------------------------------
# Rich output helpers
# ---------------------------------------------------------------------------


class TestOutputHelpers:
    @pytest.mark.unit
    def test_console_targets_stderr(self):
        assert console.stderr is True

    @pytest.mark.unit
    @pytest.mark.parametrize(
        "helper", [print_info, print_success, print_warning, print_error]
    )
    def test_helpers_do_not_write_stdout(self, helper, capsys):
        with console.capture() as capture:
            helper("hello there")
        assert "hello there" in capture.get()
        assert capsys.readouterr().out == ""
