"""Path helpers shared by the creation index and the detector."""


def file_extension(path: str) -> str:
    """Return the text after the last dot of the final path segment.

    Returns an empty string when the name has no dot. Unlike
    ``PurePath.suffix`` a leading dot counts, so ``.bunch`` has extension
    ``bunch``.
    """
    name = path.replace("\\", "/").rsplit("/", 1)[-1]
    if "." not in name:
        return ""
    return name.rsplit(".", 1)[1]


def bunch_file_path(path: str, extension: str) -> str:
    return f"{path}.{extension}"
