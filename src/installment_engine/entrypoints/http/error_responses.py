"""REST API error response models.

Structured error responses that provide consistent format for all HTTP errors.
"""

from pydantic import BaseModel, ConfigDict


class ErrorDetail(BaseModel):
    """Individual error detail for field-level errors."""

    field: str
    message: str
    code: str | None = None

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "field": "total",
                "message": "Must be a valid decimal: abc",
                "code": "INVALID_DECIMAL",
            }
        }
    )


class ErrorResponse(BaseModel):
    """Structured error response format.

    Supports:
    - Calculator guard-clause failures (detail, code and the offending field)
    - Multi-field boundary errors (detail + errors array)
    - Error codes for i18n (code field can be used for translation keys)

    Examples:
        Guard clause:
            {
                "detail": "installment_count must be <= 18",
                "code": "VALIDATION_ERROR",
                "field": "installment_count"
            }

        Boundary parsing with multiple fields:
            {
                "detail": "Invalid request parameters",
                "code": "VALIDATION_ERROR",
                "errors": [
                    {
                        "field": "total",
                        "message": "String should match pattern '^\\d+(\\.\\d{1,2})?$'",
                        "code": "string_pattern_mismatch"
                    }
                ]
            }
    """

    detail: str
    code: str | None = None
    field: str | None = None
    errors: list[ErrorDetail] | None = None

    model_config = ConfigDict(
        json_schema_extra={
            "examples": [
                {
                    "detail": "installment_count must be <= 18",
                    "code": "VALIDATION_ERROR",
                    "field": "installment_count",
                },
                {
                    "detail": "Validation failed",
                    "code": "VALIDATION_ERROR",
                    "errors": [
                        {
                            "field": "total",
                            "message": "Must be a valid decimal: abc",
                            "code": "INVALID_DECIMAL",
                        },
                    ],
                },
                {"detail": "compound growth produced a non-finite amount", "code": "INTERNAL_ERROR"},
            ]
        }
    )
