"""Case-insensitive access to header dictionaries.

Exchange objects carry headers as plain dicts whose keys keep the casing the
host pipeline gave them. HTTP header names are case-insensitive, so the
correlation token has to be found and replaced regardless of casing.
"""


def get_header(headers: dict[str, str], name: str) -> str | None:
    """Get a header value by name (case-insensitive).

    An empty value is treated as missing.

    Example:
        >>> get_header({"x-request-hash": "abc"}, "X-Request-Hash")
        'abc'
    """
    name_lower = name.lower()
    for key, value in headers.items():
        if key.lower() == name_lower:
            return value or None
    return None


def set_header(headers: dict[str, str], name: str, value: str) -> None:
    """Set a header in place, replacing any existing key with other casing.

    Example:
        >>> headers = {"x-request-hash": "old"}
        >>> set_header(headers, "X-Request-Hash", "new")
        >>> headers
        {'X-Request-Hash': 'new'}
    """
    name_lower = name.lower()
    for key in [k for k in headers if k.lower() == name_lower]:
        del headers[key]
    headers[name] = value
