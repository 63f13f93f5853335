"""Best-effort git bootstrap for freshly created projects.

Runs ``git init``, ``git add .`` and an initial commit.  A failure at any
step is reported as a warning and never fails project creation.
"""

from __future__ import annotations

from pathlib import Path

from ..config import GitConfig
from ..errors import GitError
from ..utils import print_warning, run_command
from .models import ProjectConfig


def commit_message(config: ProjectConfig) -> str:
    """Message used for the initial commit of *config*'s project."""
    return f"🚀 Initial commit: {config.type.value} project {config.name}"


class GitBootstrapper:
    """Initializes a repository and records the generated files."""

    def __init__(self, git_config: GitConfig | None = None) -> None:
        self.git_config = git_config or GitConfig()

    async def bootstrap(self, root: str | Path, config: ProjectConfig) -> bool:
        """Initialize git in *root* and commit everything.

        Returns:
            ``True`` if the commit was created, ``False`` if git is disabled
            or any step failed.
        """
        if not self.git_config.enabled:
            return False

        try:
            await self._run_git("init", cwd=root)
            await self._run_git("add", ".", cwd=root)
            await self._run_git(*self._identity_args(), "commit", "-m", commit_message(config), cwd=root)
        except (GitError, OSError) as exc:
            print_warning(f"Warning: Could not initialize git repository: {exc}")
            return False
        return True

    def _identity_args(self) -> list[str]:
        args: list[str] = []
        if self.git_config.author_name:
            args += ["-c", f"user.name={self.git_config.author_name}"]
        if self.git_config.author_email:
            args += ["-c", f"user.email={self.git_config.author_email}"]
        return args

    async def _run_git(self, *args: str, cwd: str | Path) -> str:
        """Run a git command and return stdout.

        Raises:
            GitError: If the command exits non-zero or times out.
            FileNotFoundError: If git is not installed.
        """
        cmd = ["git", *args]
        returncode, stdout, stderr = await run_command(
            cmd, cwd=cwd, timeout=self.git_config.timeout
        )
        if returncode != 0:
            cmd_str = " ".join(cmd)
            raise GitError(
                f"Git command failed (exit {returncode}): {cmd_str}\n{stderr}",
                command=cmd_str,
                stderr=stderr,
            )
        return stdout
