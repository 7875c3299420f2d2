"""Nox sessions for the authclient test suite and type checks."""

import nox

nox.options.sessions = ["tests", "tests_core"]
nox.options.default_venv_backend = "uv"

PYTHONS = ["3.10", "3.11", "3.12", "3.13"]


@nox.session(python=PYTHONS)
def tests(session):
    """Run the full suite, httpx transport included."""
    session.install(".[full,dev]")
    session.run("pytest", "tests/", "-q", "--no-cov", *session.posargs)


@nox.session(python=PYTHONS[-1])
def tests_core(session):
    """Run the suite without optional extras; httpx tests skip themselves."""
    session.install(".[dev]")
    session.run("pytest", "tests/", "-q", "--no-cov", *session.posargs)


@nox.session(python=PYTHONS[-1])
def coverage(session):
    """Run the suite with coverage for the authclient package."""
    session.install(".[full,dev]")
    session.run("pytest", "tests/", "--cov=authclient", "--cov-report=term-missing")


@nox.session(python=PYTHONS)
def type_check(session):
    """Run mypy type checking."""
    session.install(".[full,dev]")
    session.install("mypy")
    session.run("mypy", "src/authclient", *session.posargs)
