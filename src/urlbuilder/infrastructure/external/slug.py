from slugify import slugify


def is_slug_safe(value: str) -> bool:
    """
    True when `value` can be placed in a path segment as is: lowercase ASCII
    letters, digits and single hyphens, with no leading or trailing hyphen.
    """
    return bool(value) and slugify(value) == value
