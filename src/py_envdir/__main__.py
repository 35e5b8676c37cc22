"""Allow ``python -m py_envdir <env-dir> <command> [args...]``."""

from py_envdir.cli import run

if __name__ == "__main__":
    run()
