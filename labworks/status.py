"""Human-readable descriptions of error numbers and child wait statuses."""

import os


def error_message(error: int) -> str:
    """Describe an ``errno`` value, newline-terminated."""
    return f"error {error}: {os.strerror(error)}\n"


def _describe(status: int, exit_label: str) -> str:
    message = None
    if os.WIFEXITED(status):
        message = f"{exit_label}: {os.WEXITSTATUS(status)}"
    if os.WIFSIGNALED(status):
        core = " (dumped core)" if os.WCOREDUMP(status) else ""
        message = f"killed by signal: {os.WTERMSIG(status)}{core}"
    if os.WIFSTOPPED(status):
        message = f"stopped by signal: {os.WSTOPSIG(status)}"
    if os.WIFCONTINUED(status):
        message = "continued"
    if message is None:
        raise ValueError(f"unrecognised wait status: {status}")
    return message


def status_message(status: int) -> str:
    """Describe a raw wait status, reporting an exit as its return status."""
    return _describe(status, "return status")


def result_message(status: int) -> str:
    """Describe a processor's wait status, reporting an exit as its replace count."""
    return _describe(status, "replaces")