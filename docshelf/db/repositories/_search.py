"""Helpers shared by the search queries."""

ESCAPE_CHAR = "\\"


def like_pattern(term: str) -> str:
    """Build a %term% pattern with LIKE wildcards in term escaped.

    Pair with ``ilike(pattern, escape=ESCAPE_CHAR)``.
    """
    escaped = (
        term.replace(ESCAPE_CHAR, ESCAPE_CHAR * 2)
        .replace("%", ESCAPE_CHAR + "%")
        .replace("_", ESCAPE_CHAR + "_")
    )
    return f"%{escaped}%"
