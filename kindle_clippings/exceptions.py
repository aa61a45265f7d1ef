"""Exceptions for the kindle-clippings application."""


class ClippingsError(Exception):
    """Base class for all application errors."""

    message = "Clippings error"

    def __init__(self, message: str | None = None):
        super().__init__(message or self.message)


class FileReadError(ClippingsError):
    """Error raised when the clippings file cannot be opened or read."""

    message = "IO error during reading the file"

    def __init__(self, path, cause: Exception):
        self.path = path
        self.cause = cause
        super().__init__(f"{self.message} {path}: {cause}")


class EntryParseError(ClippingsError):
    """Error raised when a single clipping entry cannot be parsed."""

    def __init__(self, message: str | None = None):
        super().__init__(message)
        # Set by the parser once the failing entry is known
        self.entry_number: int | None = None

    def __eq__(self, other):
        return type(self) is type(other) and self.args == other.args

    def __hash__(self):
        return hash((type(self), self.args))


class TitleNotFound(EntryParseError):
    message = "Title is not found"


class AuthorNotFound(EntryParseError):
    message = "Author is not found"


class KindNotFound(EntryParseError):
    message = "Entry type is not found"


class LocationNotFound(EntryParseError):
    message = "Location is not found"


class DateNotFound(EntryParseError):
    message = "Date is not found"


class InvalidValueError(EntryParseError):
    """Base for errors carrying the text that failed to parse."""

    template = "Invalid value {value}"

    def __init__(self, value: str):
        self.value = value
        super().__init__(self.template.format(value=value))


class InvalidKind(InvalidValueError):
    template = "Invalid entry type {value}, must be Highlight, Note or Bookmark"


class InvalidPage(InvalidValueError):
    template = "Invalid page number {value}"


class InvalidLocation(InvalidValueError):
    template = "Invalid location {value}"


class InvalidDate(InvalidValueError):
    template = "Invalid date {value}"
