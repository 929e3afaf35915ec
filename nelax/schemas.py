from typing import Any, Optional

from pydantic import BaseModel


class ExecuteArgs(BaseModel):
    message: Any = None
    mode: Optional[str] = None  # "chatty" or "solution"; detected when omitted


class ExecuteRequest(BaseModel):
    command: Any = None
    args: Optional[ExecuteArgs] = None


class ErrorResponse(BaseModel):
    success: bool = False
    error: str


class ExecuteResponse(BaseModel):
    success: bool = True
    response: str


class MaterialLink(BaseModel):
    title: str
    link: str = "#"


class Book(BaseModel):
    title: str
    author: str
    link: str = "#"


class VideoLink(BaseModel):
    title: str
    video_url: str = "#"


class StudyMaterials(BaseModel):
    pdfs: list[MaterialLink]
    books: list[Book]
    videos: list[VideoLink]


class MaterialsResponse(StudyMaterials):
    success: bool = True
    query: str
    ai_explanation: str


class Reel(BaseModel):
    course: str
    caption: str
    video_url: str


class ReelsResponse(BaseModel):
    success: bool = True
    reels: list[Reel]


class QuizQuestion(BaseModel):
    question: str
    options: list[str]
    answer: str


class QuizResponse(BaseModel):
    success: bool = True
    questions: list[QuizQuestion]


class TeachResponse(BaseModel):
    success: bool = True
    summary: str


class HealthResponse(BaseModel):
    ok: bool = True
