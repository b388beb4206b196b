from typing import Dict, Any, Optional


class ValidationException(Exception):
    """Base validation exception"""

    def __init__(self, message: str, field: Optional[str] = None, value: Optional[Any] = None):
        super().__init__(message)
        self.field = field
        self.value = value

    def to_dict(self) -> Dict[str, Any]:
        """Convert exception to dictionary for serialization"""
        return {
            'error_type': self.__class__.__name__,
            'message': str(self),
            'field': self.field,
            'value': self.value
        }


class ParameterValidationError(ValidationException):
    """A caller passed arguments that violate a command contract"""

    def __init__(self, message: str, parameter: str, value: Any, expected_type: Optional[str] = None):
        super().__init__(message, parameter, value)
        self.parameter = parameter
        self.expected_type = expected_type

    def to_dict(self) -> Dict[str, Any]:
        result = super().to_dict()
        result['parameter'] = self.parameter
        result['expected_type'] = self.expected_type
        return result
