"""
JSONValidator Primitive

Validates JSON data against schemas using jsonschema library.
Provides the predefined schema for the provider configuration.
"""

from typing import Any

from jsonschema import Draft7Validator


class JSONValidator:
    """Validates JSON against schemas"""

    @staticmethod
    def _format_validation_error(error: Any) -> str:
        """
        Format a jsonschema validation error into a readable message

        Args:
            error: ValidationError from jsonschema

        Returns:
            str: Formatted error message with path and details
        """
        path = ".".join(str(p) for p in error.path) if error.path else "root"
        return f"{path}: {error.message}"

    CONFIG_SCHEMA = {
        "type": "object",
        "properties": {
            "dataDir": {"type": "string", "minLength": 1},
            "ttl": {"type": "integer", "minimum": 0},
        },
    }

    def validate(self, data: Any, schema: dict) -> tuple[bool, list[str]]:
        """
        Validate JSON data against a schema

        Args:
            data: The JSON data to validate
            schema: The JSON schema to validate against

        Returns:
            tuple[bool, list[str]]: (is_valid, error_messages)
                - is_valid: True if valid, False otherwise
                - error_messages: List of specific error messages (empty if valid)
        """
        validator = Draft7Validator(schema)
        errors = sorted(validator.iter_errors(data), key=lambda e: [str(p) for p in e.path])

        if not errors:
            return (True, [])

        return (False, [self._format_validation_error(error) for error in errors])

    def validate_config(self, data: dict) -> tuple[bool, list[str]]:
        """Validate provider options against the config schema"""
        return self.validate(data, self.CONFIG_SCHEMA)
