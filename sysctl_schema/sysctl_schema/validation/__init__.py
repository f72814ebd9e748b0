from .validator import SchemaValidator, validate

__all__ = ["SchemaValidator", "validate"]
