from cssbuilder.validation.validator import validate, validate_recipe

__all__ = ["validate", "validate_recipe"]
