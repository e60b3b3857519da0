"""Git operations used while inspecting a workspace.

Only read-only queries live here; fetching is left to the external
command runner that executes the plan.
"""

import logging
import subprocess
from pathlib import Path

from meta_project.domain.shared.result import Err, Ok, Result

logger = logging.getLogger(__name__)


class GitOperations:
    """Read-only git queries with Result-based error handling.

    Example:
        git = GitOperations()
        url = git.get_remote_url(Path("/path/to/workspace"))
        print(url or "(no remote)")
    """

    def __init__(self, timeout: int = 10) -> None:
        """Initialize git operations.

        Args:
            timeout: Timeout in seconds for each git command.
        """
        self._timeout = timeout

    def config_value(self, path: Path, key: str) -> Result[str, str]:
        """Read a git config value in the context of ``path``.

        Args:
            path: Directory to run git in.
            key: Config key, e.g. ``remote.origin.url``.

        Returns:
            Ok(str) with the trimmed value, Err(str) if unset or git failed.
        """
        try:
            result = subprocess.run(
                ["git", "config", "--get", key],
                cwd=str(path),
                capture_output=True,
                text=True,
                timeout=self._timeout,
            )

            if result.returncode == 0:
                return Ok(result.stdout.strip())
            else:
                return Err(result.stderr.strip() or f"{key} is not set")

        except subprocess.TimeoutExpired:
            return Err("Git command timed out")
        except OSError as e:
            return Err(f"Git command failed: {e}")

    def get_remote_url(self, path: Path) -> str | None:
        """Return the ``origin`` remote URL of ``path``, or None."""
        result = self.config_value(path, "remote.origin.url")
        if isinstance(result, Err):
            logger.debug(f"No origin remote for {path}: {result.error}")
            return None
        return result.value or None
