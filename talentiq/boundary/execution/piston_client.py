"""
Piston remote code execution client.

Submits source code to the public Piston API and reports stdout/stderr.
Failures are reported in the result rather than raised, so callers can
show them to the user next to their output.

Dependencies: httpx
System role: Code execution boundary for problem runs
"""

import logging
from dataclasses import dataclass

import httpx

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class LanguageRuntime:
    """Piston runtime selection for a supported language."""

    language: str
    version: str
    extension: str


LANGUAGE_CONFIG: dict[str, LanguageRuntime] = {
    "python": LanguageRuntime(language="python3", version="3.9.1", extension="py"),
    "javascript": LanguageRuntime(language="javascript", version="14.15.4", extension="js"),
    "java": LanguageRuntime(language="java", version="15.0.1", extension="java"),
}


@dataclass
class ExecutionResult:
    """Outcome of a code run."""

    success: bool
    output: str | None = None
    error: str | None = None


class PistonClient:
    """Execute code through the Piston API."""

    def __init__(
        self,
        base_url: str = "https://emkc.org/api/v2/piston",
        timeout: float = 10.0,
        http_client: httpx.AsyncClient | None = None,
    ) -> None:
        """
        Initialize client.

        Args:
            base_url: Piston API base URL
            timeout: Request timeout in seconds
            http_client: Optional pre-built client (tests)
        """
        self._client = http_client or httpx.AsyncClient(base_url=base_url, timeout=timeout)

    async def aclose(self) -> None:
        await self._client.aclose()

    async def execute(self, language: str, code: str) -> ExecutionResult:
        """
        Run code in the given language.

        Args:
            language: One of LANGUAGE_CONFIG's keys
            code: Source code of a single ``main.<ext>`` file

        Returns:
            ExecutionResult: success with output, or failure with error
                (and output, when the program wrote to stderr)
        """
        runtime = LANGUAGE_CONFIG.get(language)
        if runtime is None:
            return ExecutionResult(success=False, error=f"Unsupported language - {language}")

        payload = {
            "language": runtime.language,
            "version": runtime.version,
            "files": [{"name": f"main.{runtime.extension}", "content": code}],
        }

        try:
            response = await self._client.post("/execute", json=payload)
        except httpx.HTTPError as e:
            logger.warning("Code execution request failed", extra={"language": language})
            return ExecutionResult(success=False, error=f"Error executing code - {e}")

        if response.is_error:
            return ExecutionResult(
                success=False,
                error=f"HTTP error - status {response.status_code}",
            )

        run = response.json().get("run") or {}
        output = run.get("output") or ""
        stderr = run.get("stderr") or ""

        if stderr:
            return ExecutionResult(success=False, output=output, error=stderr)
        return ExecutionResult(success=True, output=output)
