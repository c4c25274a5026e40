class InvalidArgumentError(ValueError):
    """Raised by the strict pricing contract when no order identifier is given."""
