from pathlib import Path

from invoke import task
from invoke.exceptions import Exit

REPO_ROOT = Path(__file__).resolve().parent


@task
def lint(c):
    c.run("ruff check src tests")


@task
def fmt(c):
    c.run("ruff format src tests")


@task
def format_check(c):
    c.run("ruff format --check src tests")


@task
def test(c, k=None):
    cmd = "pytest"
    if k:
        cmd += f" -k {k}"
    c.run(cmd)


@task
def rank(c, source="ideas.example.txt"):
    path = REPO_ROOT / source
    if not path.exists():
        raise Exit(f"Missing ideas file: {path}")
    c.run(f"eloquent rank {path}", pty=True)


@task
def ci(c):
    lint(c)
    format_check(c)
    test(c)
