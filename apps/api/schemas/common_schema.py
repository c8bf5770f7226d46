from pydantic import BaseModel


class DeletedResponse(BaseModel):
    status: str = "deleted"


class ErrorBody(BaseModel):
    status: int
    message: str


class ErrorResponse(BaseModel):
    error: ErrorBody
