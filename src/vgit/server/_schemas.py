from datetime import datetime

from pydantic import BaseModel


class HealthResponse(BaseModel):
    status: str


class RepositoryResponse(BaseModel):
    name: str
    description: str
    last_activity: datetime
    last_activity_human: str


class RepositoriesResponse(BaseModel):
    repositories: list[RepositoryResponse]


class ErrorResponse(BaseModel):
    detail: str
