from pydantic import BaseModel


class AppHealthOK(BaseModel):
    status: str
    app: str


class IngestAck(BaseModel):
    status: str
    bytes: int


class ErrorResponse(BaseModel):
    detail: str
