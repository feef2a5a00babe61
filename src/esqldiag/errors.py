"""Error hierarchy for esqldiag."""


class EntityError(Exception):
    """Base for all errors raised by esqldiag."""
    pass


class ResourceError(EntityError):
    """The display-string table is missing, or lacks a locale or key."""
    pass
