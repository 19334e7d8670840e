"""Predicates that decide whether a name can be used unchanged."""

from __future__ import annotations

from safe_filename.rules.tables import NOT_ALLOWED_CHARS, NOT_ALLOWED_NAMES, NOT_ALLOWED_NAMES_WIN11


def is_reserved(name: str, strict: bool = True) -> bool:
    """Return whether ``name`` collides with a Windows device name.

    Windows 10 and Windows 11 reserve different sets of names, Windows 10
    being the more restrictive. With ``strict`` the check is compatible with
    both: ``COM0``/``LPT0`` are reserved and a reserved name followed by a dot
    (``nul.txt``) counts as the device itself. Without ``strict`` only exact
    matches against the Windows 11 set are reported.
    """

    reserved_names = NOT_ALLOWED_NAMES if strict else NOT_ALLOWED_NAMES_WIN11
    name = name.upper()

    if name in reserved_names:
        return True

    if not strict:
        return False

    for prefix_length in (3, 4):
        if len(name) > prefix_length and name[:prefix_length] in reserved_names:
            return name[prefix_length] == "."

    return False


def is_safe(name: str, only_check_creatable: bool = False, strict: bool = True) -> bool:
    """Return whether ``name`` can be used as a file name without changes.

    Windows treats unsafe names in one of two ways:

    1. Creation fails outright (disallowed characters, reserved device names).
    2. Creation succeeds but the name is silently altered (trailing dot or
       space, and in strict mode a leading space).

    With ``only_check_creatable`` only the first category makes a name unsafe.
    ``strict`` is forwarded to :func:`is_reserved`.
    """

    if any(char in NOT_ALLOWED_CHARS for char in name):
        return False

    if is_reserved(name, strict):
        return False

    if only_check_creatable:
        return True

    # An empty name ends in neither, but is never usable.
    if not name or name.endswith("."):
        return False

    if name.endswith(" "):
        return False

    if strict and name.startswith(" "):
        return False

    return True
