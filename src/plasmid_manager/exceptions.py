"""Custom exceptions for plasmid manager."""


class PlasmidError(Exception):
    """Base exception for all plasmid manager errors."""
    pass


class AllocationError(PlasmidError):
    """Exception raised when a gene field cannot be copied into a record."""

    def __init__(self, message: str, field: str = None):
        self.field = field

        if field is not None:
            message = f"{message} (field: {field})"

        super().__init__(message)


class NotFoundError(PlasmidError):
    """Exception raised when a position, name or node handle does not resolve."""

    def __init__(self, message: str, position: int = None, name: str = None):
        self.position = position
        self.name = name

        if position is not None:
            message = f"{message} (position: {position})"
        if name is not None:
            message = f"{message} (name: {name})"

        super().__init__(message)


class InvalidLengthError(PlasmidError):
    """Exception raised when a requested primer length does not fit the sequence."""

    def __init__(self, message: str, requested: int = None, max_length: int = None):
        self.requested = requested
        self.max_length = max_length

        if max_length is not None:
            message = f"{message} (max {max_length})"

        super().__init__(message)


class SequenceIntegrityError(PlasmidError):
    """Exception raised when the linked structure of a sequence is inconsistent."""
    pass


class ParseError(PlasmidError):
    """Exception raised while loading genes from a CSV file."""

    def __init__(self, message: str, line_number: int = None, line_content: str = None):
        self.line_number = line_number
        self.line_content = line_content

        if line_number is not None:
            message = f"Line {line_number}: {message}"
        if line_content is not None:
            message = f"{message} (content: {line_content[:50]})"

        super().__init__(message)


class ReportError(PlasmidError):
    """Exception raised while writing a plasmid report."""

    def __init__(self, message: str, path: str = None):
        self.path = path

        if path is not None:
            message = f"Cannot write report {path}: {message}"

        super().__init__(message)


class ConfigurationError(PlasmidError):
    """Exception raised for configuration errors."""

    def __init__(self, message: str, config_file: str = None, parameter: str = None):
        self.config_file = config_file
        self.parameter = parameter

        if config_file is not None:
            message = f"Configuration error in {config_file}: {message}"
        if parameter is not None:
            message = f"{message} (parameter: {parameter})"

        super().__init__(message)
