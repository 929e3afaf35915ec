import logging
from contextlib import asynccontextmanager
from functools import lru_cache
from pathlib import Path
from typing import Optional, Union

from fastapi import Depends, FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import HTMLResponse
from fastapi.templating import Jinja2Templates

from nelax import catalog
from nelax.classifier import classify, normalize_question, select_system_prompt
from nelax.config import get_settings
from nelax.openrouter_client import OpenRouterClient
from nelax.prompts import TEACHER_SYSTEM, TUTOR_SYSTEM, materials_prompt, teach_prompt
from nelax.schemas import (
    ErrorResponse,
    ExecuteRequest,
    ExecuteResponse,
    HealthResponse,
    MaterialsResponse,
    QuizResponse,
    ReelsResponse,
    TeachResponse,
)

logger = logging.getLogger(__name__)

TEMPLATES_DIR = Path(__file__).resolve().parent / "templates"

NO_ANSWER = "Sorry, I couldn't generate a response."


@asynccontextmanager
async def lifespan(app: FastAPI):
    if not get_settings().openrouter_api_key:
        logger.error("Missing OPENROUTER_API_KEY; AI answers will fail until it is set")
    yield


app = FastAPI(title="NelaX Lite", lifespan=lifespan)
app.add_middleware(
    CORSMiddleware,
    allow_origins=list(get_settings().allowed_origins),
    allow_credentials=False,
    allow_methods=["*"],
    allow_headers=["*"],
)
templates = Jinja2Templates(directory=str(TEMPLATES_DIR))


@lru_cache(maxsize=1)
def get_completion_client() -> OpenRouterClient:
    return OpenRouterClient.from_settings(get_settings())


@app.post("/execute", response_model=Union[ExecuteResponse, ErrorResponse])
async def execute(
    req: ExecuteRequest, client: OpenRouterClient = Depends(get_completion_client)
):
    if req.command != "ask_question":
        return ErrorResponse(error="Unknown command")
    if req.args is None:
        logger.warning("ask_question called without args")
        return ErrorResponse(error="Failed to fetch response")

    question = normalize_question(req.args.message)
    mode = classify(req.args.mode, question)
    system_prompt = select_system_prompt(mode)

    try:
        answer = await client.complete(system_prompt, question)
    except Exception:
        logger.exception("Completion request failed for /execute")
        return ErrorResponse(error="Failed to fetch response")

    return ExecuteResponse(response=answer or NO_ANSWER)


@app.get("/api/materials", response_model=Union[MaterialsResponse, ErrorResponse])
async def materials(
    topic: Optional[str] = None,
    level: Optional[str] = None,
    department: Optional[str] = None,
    goal: str = "general",
    client: OpenRouterClient = Depends(get_completion_client),
):
    if not topic or not level or not department:
        return ErrorResponse(error="Missing one or more parameters: topic, level, department")

    try:
        explanation = await client.complete(
            TUTOR_SYSTEM, materials_prompt(topic, level, department, goal)
        )
    except Exception:
        logger.exception("Completion request failed for /api/materials")
        return ErrorResponse(error="Failed to fetch study materials")

    if not explanation:
        explanation = (
            f"Let me help you learn {topic}. Start with the basic concepts and build from there. "
            "📚 Here are materials to study further:"
        )

    study = catalog.build_materials(topic, level, department)
    return MaterialsResponse(
        query=topic,
        ai_explanation=explanation,
        pdfs=study.pdfs,
        books=study.books,
        videos=study.videos,
    )


@app.get("/api/reels", response_model=Union[ReelsResponse, ErrorResponse])
async def reels(course: Optional[str] = None):
    try:
        return ReelsResponse(reels=catalog.filter_reels(course))
    except Exception:
        logger.exception("Failed to list reels")
        return ErrorResponse(error="Failed to fetch educational reels")


@app.get("/api/cbt", response_model=Union[QuizResponse, ErrorResponse])
async def cbt(topic: Optional[str] = None):
    try:
        return QuizResponse(questions=catalog.questions_for(topic))
    except Exception:
        logger.exception("Failed to load test questions")
        return ErrorResponse(error="Failed to fetch test questions")


@app.get("/api/ai-teach", response_model=Union[TeachResponse, ErrorResponse])
async def ai_teach(
    course: Optional[str] = None,
    level: Optional[str] = None,
    client: OpenRouterClient = Depends(get_completion_client),
):
    if not course or not level:
        return ErrorResponse(error="Missing course or level")

    try:
        summary = await client.complete(TEACHER_SYSTEM, teach_prompt(course, level))
    except Exception:
        logger.exception("Completion request failed for /api/ai-teach")
        return ErrorResponse(error="Failed to generate teaching content")

    if not summary:
        summary = (
            f"Let me teach you the basics of {course}. We'll start with fundamental concepts "
            f"and build up from there. This is perfect for {level} students!"
        )
    return TeachResponse(summary=summary)


@app.get("/health", response_model=HealthResponse)
async def health():
    return HealthResponse()


@app.get("/", response_class=HTMLResponse)
async def index(request: Request):
    return templates.TemplateResponse(request, "index.html")


@app.get("/materials", response_class=HTMLResponse)
async def materials_page(request: Request):
    return templates.TemplateResponse(request, "materials.html")


@app.get("/reels", response_class=HTMLResponse)
async def reels_page(request: Request):
    return templates.TemplateResponse(request, "reels.html")


@app.get("/cbt", response_class=HTMLResponse)
async def cbt_page(request: Request):
    return templates.TemplateResponse(request, "cbt.html")


@app.get("/talk-to-nelax", response_class=HTMLResponse)
async def talk_page(request: Request):
    return templates.TemplateResponse(request, "talk-to-nelax.html")


@app.get("/about", response_class=HTMLResponse)
async def about_page(request: Request):
    return templates.TemplateResponse(request, "about.html")
