MAX_ORIGINAL_NAME_LENGTH = 50


def original_name_formatter(original_name: str) -> str:
    """Bound a display filename to 50 characters, keeping its extension."""
    if len(original_name) <= MAX_ORIGINAL_NAME_LENGTH:
        return original_name

    if "." not in original_name:
        return original_name[:MAX_ORIGINAL_NAME_LENGTH]

    stem, extension = original_name.rsplit(".", 1)
    remaining = MAX_ORIGINAL_NAME_LENGTH - len(extension) - 1
    # an extension that alone overflows the limit is cut as well
    return f"{stem[:max(remaining, 0)]}.{extension}"[:MAX_ORIGINAL_NAME_LENGTH]
