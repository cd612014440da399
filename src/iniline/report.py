from .ini import Kind, ParseResult


def describe(result: ParseResult) -> str | None:
    """Describe a parse result in human-readable form.

    Args:
        result: The result to describe.

    Returns:
        A one-line description, or None if the line was empty.
    """

    match result.kind:
        case Kind.SECTION:
            return f"Section: '{result.section}'"
        case Kind.PROPERTY:
            return f"Key: '{result.key}', Value: '{result.value}'"
        case Kind.KEY_ONLY:
            return f"Key: '{result.key}' WITHOUT value"
        case Kind.VALUE_ONLY:
            return f"Value: '{result.value}' WITHOUT key"

    return None
