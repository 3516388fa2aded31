"""
Argv preprocessor for forgiving CLI handling.

Normalizes sys.argv before Typer parses it:
- ``cmdig --version`` → ``cmdig version``
- ``cmdig help list`` → ``cmdig list --help``
"""


def preprocess_argv(argv: list[str]) -> list[str]:
    """Normalize CLI arguments for Typer compatibility.

    Applied rules (in order):
    1. ``--version`` / ``-V`` as first arg → ``version`` subcommand
    2. ``help`` pseudo-command → ``--help`` appended to the subcommand
    """
    if not argv:
        return argv

    if argv[0] in ("--version", "-V"):
        return ["version"]

    if argv[0] == "help":
        subcmds = [t for t in argv[1:] if not t.startswith("-") and t != "help"]
        return [*subcmds[:1], "--help"]

    return argv
