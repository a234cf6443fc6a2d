class ValidationError(ValueError):
    """Raised when maze dimensions or coordinates are rejected before any work is done."""


def require_int(name: str, value) -> int:
    # bool is an int subclass; True would otherwise pass as 1
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValidationError(f"{name} must be an integer, got {value!r}")
    return value
