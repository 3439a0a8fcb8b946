from pydantic import BaseModel
from datetime import datetime


class ArticleOut(BaseModel):
    id: int
    style: str
    title: str
    content: str
    date_published: datetime


class ErrorDetail(BaseModel):
    message: str


class ErrorOut(BaseModel):
    error: ErrorDetail
