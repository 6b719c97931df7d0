"""Branch name derivation from free-text messages."""

import re

from .config import FALLBACK_BRANCH_NAME

_NON_ALNUM = re.compile(r"[^A-Za-z0-9]")
_HYPHEN_RUN = re.compile(r"-{2,}")


def branch_name_from_message(message):
    """
    Turn a commit/merge message into a ref-safe branch name.

    Maps everything outside ASCII letters and digits to '-', lower-cases,
    collapses hyphen runs and trims them from both ends. Falls back to
    "new" when nothing alphanumeric is left.
    """
    name = _NON_ALNUM.sub("-", (message or "").strip()).lower()
    name = _HYPHEN_RUN.sub("-", name).strip("-")
    return name or FALLBACK_BRANCH_NAME
