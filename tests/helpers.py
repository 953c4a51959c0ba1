import shutil
import subprocess
import tempfile
from collections.abc import Sequence
from pathlib import Path

import pytest

RUNTIME_SUBPROCESS_TIMEOUT_SEC = 30.0


def _require_runnable_tool(
    *,
    tool_name: str,
    tool_path: str | None,
    version_args: Sequence[str],
) -> str:
    if tool_path is None:
        pytest.fail(f"{tool_name} not available", pytrace=False)

    error_message: str | None = None
    try:
        subprocess.run(  # noqa: S603
            [tool_path, *version_args],  # noqa: S607
            check=True,
            capture_output=True,
            text=True,
            timeout=5.0,
        )
    except (OSError, subprocess.SubprocessError) as exc:
        error_message = (
            f"{tool_name} found at {tool_path} but failed health check "
            f"({type(exc).__name__}: {exc})."
        )
    if error_message is not None:
        pytest.fail(error_message, pytrace=False)
    return tool_path


def require_java_runtime() -> tuple[str, str]:
    javac = _require_runnable_tool(
        tool_name="javac",
        tool_path=shutil.which("javac"),
        version_args=("-version",),
    )
    java = _require_runnable_tool(
        tool_name="java",
        tool_path=shutil.which("java"),
        version_args=("-version",),
    )
    return javac, java


def run_java_main(javac: str, java: str, body_lines: Sequence[str]) -> str:
    """Compile and run a Main class whose main() holds ``body_lines``."""
    body = "\n".join(f"    {line}" for line in body_lines)
    main_src = (
        "public class Main {\n"
        "  public static void main(String[] args) {\n"
        f"{body}\n"
        "  }\n"
        "}\n"
    )
    with tempfile.TemporaryDirectory() as tmp_dir:
        tmp = Path(tmp_dir)
        src = tmp / "Main.java"
        src.write_text(main_src, encoding="utf-8")
        subprocess.run(  # noqa: S603
            [javac, "-encoding", "UTF-8", str(src)],
            check=True,
            cwd=tmp,
            capture_output=True,
            text=True,
            timeout=RUNTIME_SUBPROCESS_TIMEOUT_SEC,
        )
        proc = subprocess.run(  # noqa: S603
            [java, "-cp", str(tmp), "Main"],
            check=True,
            cwd=tmp,
            capture_output=True,
            text=True,
            timeout=RUNTIME_SUBPROCESS_TIMEOUT_SEC,
        )
        return proc.stdout
