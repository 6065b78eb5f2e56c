class LayoutError(Exception):
    """Base class for page layout errors."""


class LayoutImportError(LayoutError):
    """The import document could not be applied; nothing was changed."""


class PersistenceError(LayoutError):
    """The layout could not be written to local storage."""


class UnknownTemplateError(LayoutError, LookupError):
    pass
