"""Subnet options specific exceptions."""


class PreconditionViolationError(Exception):
    """Exception raised when a subnet creation request receives invalid values."""

    def __init__(self, message: str, *args):
        self.message = message
        super().__init__(message, *args)


class AbortProcedureError(Exception):
    """Exception raised when the procedure must be aborted."""

    def __init__(self, message: str, *args):
        self.message = message
        super().__init__(message, *args)


class InvalidYamlError(Exception):
    """Exception raised when a YAML file can not be loaded."""

    def __init__(self, message: str, *args, **kwargs):
        self.message = message
        super().__init__(message, *args)
