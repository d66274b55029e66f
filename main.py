# main.py

from pathlib import Path
from subprocess import run


def start(cmmd: list[str]) -> None:
    run(cmmd, check=True)


def main() -> None:
    bin_path = Path(__file__).resolve().parent / ".venv" / "bin"
    cmmd = [
        f"{bin_path / 'uvicorn'}",
        "inkwell.main:app",
        "--host",
        "127.0.0.1",
        "--port",
        "8000",
        "--log-level",
        "info",
        # The content cache is per process; one worker keeps invalidation coherent
        "--workers",
        "1",
        "--loop",
        "uvloop",
        "--http",
        "httptools",
    ]
    start(cmmd)


if __name__ == "__main__":
    main()
