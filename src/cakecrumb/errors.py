# SPDX-License-Identifier: MIT


class CakeCrumbError(Exception):
    pass


class ValidationError(CakeCrumbError):
    """Raised when an operation is given input it can never accept.

    Unknown ids and unaffordable purchases are not errors: those operations
    return ``None`` or ``False`` instead.
    """

    def __init__(self, field: str, message: str) -> None:
        self.field = field
        self.message = message
        super().__init__(f"{field}: {message}")
