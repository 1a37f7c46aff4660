# app/errors.py
from fastapi import HTTPException

# Every error the API reports goes through one of these so the
# exception handlers in app.main can render a uniform {"message": ...} body.

VALIDATION_FAILED = "Validation failed: Invalid product fields"


class ValidationError(HTTPException):
    def __init__(self, detail: str = VALIDATION_FAILED):
        super().__init__(status_code=400, detail=detail)


class UnauthorizedError(HTTPException):
    def __init__(self, detail: str = "Unauthorized"):
        super().__init__(status_code=401, detail=detail)


class NotFoundError(HTTPException):
    def __init__(self, detail: str = "Product not found"):
        super().__init__(status_code=404, detail=detail)
