def string_from_pascal_to_camel_case(input: str) -> str:
    """
    Convert a string from PascalCase to camelCase.

    Parameters
    ----------
    input : str - The string to convert.

    Returns
    -------
    str - The converted string.

    Examples
    --------
    >>> string_from_pascal_to_camel_case("IfStatement")
    "ifStatement"
    >>> string_from_pascal_to_camel_case("ifStatement")
    "ifStatement"
    """

    if not input:
        return input
    return input[0].lower() + input[1:]


def strip_suffix(input: str, suffix: str) -> str:
    """
    Remove `suffix` from the end of `input` if it is there.

    Examples
    --------
    >>> strip_suffix("IfStatementContext", "Context")
    "IfStatement"
    >>> strip_suffix("Context", "")
    "Context"
    """
    if suffix and input.endswith(suffix):
        return input[: -len(suffix)]
    return input
