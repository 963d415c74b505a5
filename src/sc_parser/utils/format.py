def truncate(text: str, limit: int) -> str:
    """
    Shorten text for log lines, noting the original length.

    Args:
        text: Text to shorten
        limit: Maximum number of characters kept from the start of text

    Returns:
        The text unchanged when it fits, otherwise its first `limit`
        characters followed by the total length

    Examples:
        >>> truncate("RUNNING", 20)
        'RUNNING'
        >>> truncate("SERVICE_NAME: wuauserv", 12)
        'SERVICE_NAME... (22 chars)'
    """
    if limit < 0 or len(text) <= limit:
        return text

    return f"{text[:limit]}... ({len(text)} chars)"
