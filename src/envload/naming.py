"""
Environment variable name derivation.

Converts PascalCase or camelCase identifiers to SCREAMING_SNAKE_CASE.
"""


def _word_starts(identifier: str) -> list[int]:
    """Indices where a new word begins (a lowercase letter followed by an uppercase one)."""
    starts = [0]
    for i in range(len(identifier) - 1):
        if identifier[i].islower() and identifier[i + 1].isupper():
            starts.append(i + 1)
    return starts


def to_env_name(identifier: str) -> str:
    """
    Derive the default environment variable name for a field.

    Runs of capitals are kept together as one word, so acronyms
    are never split.

    Examples:
        >>> to_env_name("helloGoodWorld")
        'HELLO_GOOD_WORLD'
        >>> to_env_name("someoneReallyLikesACRONYMS")
        'SOMEONE_REALLY_LIKES_ACRONYMS'

    Args:
        identifier: Declared field name.

    Returns:
        Upper-cased, underscore-separated variable name.
    """
    if not identifier:
        msg = "Cannot derive an environment variable name from an empty identifier"
        raise ValueError(msg)

    starts = _word_starts(identifier)
    ends = [*starts[1:], len(identifier)]
    return "_".join(identifier[s:e].upper() for s, e in zip(starts, ends))
