import httpx
import pytest

from nelax.main import app, get_completion_client
from nelax.openrouter_client import CompletionError
from nelax.prompts import CHATTY_SYSTEM, SOLUTION_SYSTEM, TEACHER_SYSTEM, TUTOR_SYSTEM


class StubCompletionClient:
    def __init__(self, response: str = "", error: Exception | None = None):
        self.response = response
        self.error = error
        self.calls: list[tuple[str, str]] = []

    async def complete(self, system: str, user: str) -> str:
        self.calls.append((system, user))
        if self.error:
            raise self.error
        return self.response


@pytest.fixture
def stub():
    client = StubCompletionClient()
    app.dependency_overrides[get_completion_client] = lambda: client
    yield client
    app.dependency_overrides.clear()


async def _get(path: str, **params) -> httpx.Response:
    async with httpx.AsyncClient(
        transport=httpx.ASGITransport(app=app), base_url="http://test"
    ) as client:
        return await client.get(path, params=params)


async def _execute(body: dict) -> httpx.Response:
    async with httpx.AsyncClient(
        transport=httpx.ASGITransport(app=app), base_url="http://test"
    ) as client:
        return await client.post("/execute", json=body)


@pytest.mark.asyncio
async def test_execute_uses_chatty_prompt_for_greeting(stub):
    stub.response = "<p>👋 Hey!</p>"

    resp = await _execute({"command": "ask_question", "args": {"message": "hello there"}})

    assert resp.status_code == 200
    assert resp.json() == {"success": True, "response": "<p>👋 Hey!</p>"}
    assert stub.calls == [(CHATTY_SYSTEM, "hello there")]


@pytest.mark.asyncio
async def test_execute_uses_solution_prompt_for_questions(stub):
    stub.response = "Step 1"

    resp = await _execute(
        {"command": "ask_question", "args": {"message": "hey, how do I solve this integral?"}}
    )

    assert resp.json()["success"] is True
    assert stub.calls[0][0] == SOLUTION_SYSTEM


@pytest.mark.asyncio
async def test_execute_honours_explicit_mode(stub):
    stub.response = "Hi"

    await _execute(
        {"command": "ask_question", "args": {"message": "explain limits", "mode": "chatty"}}
    )

    assert stub.calls[0][0] == CHATTY_SYSTEM


@pytest.mark.asyncio
async def test_execute_rejects_unknown_command(stub):
    resp = await _execute({"command": "delete_everything", "args": {"message": "hi"}})

    assert resp.status_code == 200
    assert resp.json() == {"success": False, "error": "Unknown command"}
    assert stub.calls == []


@pytest.mark.asyncio
@pytest.mark.parametrize(
    "body",
    [
        {},
        {"command": None},
        {"command": 5},
        {"args": {"message": "hi"}},
    ],
)
async def test_execute_reports_unknown_command_for_missing_or_odd_command(stub, body):
    resp = await _execute(body)

    assert resp.status_code == 200
    assert resp.json() == {"success": False, "error": "Unknown command"}
    assert stub.calls == []


@pytest.mark.asyncio
async def test_execute_without_args_reports_failure(stub):
    for body in ({"command": "ask_question"}, {"command": "ask_question", "args": None}):
        resp = await _execute(body)

        assert resp.status_code == 200
        assert resp.json() == {"success": False, "error": "Failed to fetch response"}
    assert stub.calls == []


@pytest.mark.asyncio
async def test_execute_rejects_non_string_mode(stub):
    resp = await _execute({"command": "ask_question", "args": {"message": "hi", "mode": True}})

    assert resp.status_code == 422
    assert stub.calls == []


@pytest.mark.asyncio
async def test_execute_treats_non_string_message_as_empty(stub):
    stub.response = "Answer"

    resp = await _execute({"command": "ask_question", "args": {"message": 12}})

    assert resp.json() == {"success": True, "response": "Answer"}
    assert stub.calls == [(SOLUTION_SYSTEM, "")]


@pytest.mark.asyncio
async def test_execute_falls_back_when_model_returns_nothing(stub):
    resp = await _execute({"command": "ask_question", "args": {"message": "prove it"}})

    assert resp.json() == {
        "success": True,
        "response": "Sorry, I couldn't generate a response.",
    }


@pytest.mark.asyncio
async def test_execute_reports_generic_error_on_failure(stub):
    stub.error = CompletionError("Missing OPENROUTER_API_KEY")

    resp = await _execute({"command": "ask_question", "args": {"message": "solve x"}})

    assert resp.status_code == 200
    assert resp.json() == {"success": False, "error": "Failed to fetch response"}


@pytest.mark.asyncio
async def test_materials_requires_parameters(stub):
    resp = await _get("/api/materials", topic="Algebra", level="Beginner")

    assert resp.json() == {
        "success": False,
        "error": "Missing one or more parameters: topic, level, department",
    }
    assert stub.calls == []


@pytest.mark.asyncio
async def test_materials_returns_explanation_and_links(stub):
    stub.response = "Algebra is about symbols."

    resp = await _get(
        "/api/materials", topic="Algebra", level="Beginner", department="Mathematics", goal="equations"
    )

    data = resp.json()
    assert data["success"] is True
    assert data["query"] == "Algebra"
    assert data["ai_explanation"] == "Algebra is about symbols."
    assert data["pdfs"][0] == {"title": "Algebra Fundamentals Guide", "link": "#"}
    assert data["books"][0] == {"title": "Introduction to Algebra", "author": "Expert Author", "link": "#"}
    assert data["videos"][1] == {"title": "Mathematics Algebra Tutorial", "video_url": "#"}

    system, prompt = stub.calls[0]
    assert system == TUTOR_SYSTEM
    assert "Beginner student in the Mathematics department" in prompt
    assert "'equations' in the topic of Algebra" in prompt


@pytest.mark.asyncio
async def test_materials_falls_back_on_empty_explanation(stub):
    resp = await _get("/api/materials", topic="Physics", level="Advanced", department="Science")

    assert resp.json()["ai_explanation"].startswith("Let me help you learn Physics.")
    assert "'general' in the topic of Physics" in stub.calls[0][1]


@pytest.mark.asyncio
async def test_materials_reports_failure(stub):
    stub.error = CompletionError("Completion API is currently unavailable. Please retry later.")

    resp = await _get("/api/materials", topic="Physics", level="Advanced", department="Science")

    assert resp.json() == {"success": False, "error": "Failed to fetch study materials"}


@pytest.mark.asyncio
async def test_reels_filters_by_course():
    resp = await _get("/api/reels", course="Programming")

    data = resp.json()
    assert data["success"] is True
    assert [r["caption"] for r in data["reels"]] == [
        "Python Basics Tutorial",
        "JavaScript Crash Course",
    ]

    everything = (await _get("/api/reels")).json()
    assert len(everything["reels"]) == 5


@pytest.mark.asyncio
async def test_cbt_returns_topic_questions():
    resp = await _get("/api/cbt", topic="mathematics")

    data = resp.json()
    assert data["success"] is True
    assert data["questions"][1] == {
        "question": "Solve: x + 5 = 10",
        "options": ["x=3", "x=5", "x=10", "x=15"],
        "answer": "x=5",
    }
    assert (await _get("/api/cbt")).json() == {"success": True, "questions": []}


@pytest.mark.asyncio
async def test_ai_teach_returns_summary(stub):
    stub.response = "Variables hold values."

    resp = await _get("/api/ai-teach", course="Python", level="Beginner")

    assert resp.json() == {"success": True, "summary": "Variables hold values."}
    system, prompt = stub.calls[0]
    assert system == TEACHER_SYSTEM
    assert "Teach a Beginner student the basics of Python" in prompt


@pytest.mark.asyncio
async def test_ai_teach_validates_and_falls_back(stub):
    missing = await _get("/api/ai-teach", course="Python")
    assert missing.json() == {"success": False, "error": "Missing course or level"}

    fallback = await _get("/api/ai-teach", course="Chemistry", level="Intermediate")
    summary = fallback.json()["summary"]
    assert summary.startswith("Let me teach you the basics of Chemistry.")
    assert summary.endswith("This is perfect for Intermediate students!")


@pytest.mark.asyncio
async def test_ai_teach_reports_failure(stub):
    stub.error = CompletionError("Unable to reach completion API")

    resp = await _get("/api/ai-teach", course="Python", level="Beginner")

    assert resp.json() == {"success": False, "error": "Failed to generate teaching content"}


@pytest.mark.asyncio
async def test_health():
    resp = await _get("/health")

    assert resp.status_code == 200
    assert resp.json() == {"ok": True}


@pytest.mark.asyncio
@pytest.mark.parametrize(
    "path, heading",
    [
        ("/", "NelaX Lite"),
        ("/materials", "Study Materials"),
        ("/reels", "Educational Reels"),
        ("/cbt", "Computer-Based Test"),
        ("/talk-to-nelax", "Talk to NelaX"),
        ("/about", "About NelaX Lite"),
    ],
)
async def test_pages_render(path, heading):
    resp = await _get(path)

    assert resp.status_code == 200
    assert resp.headers["content-type"].startswith("text/html")
    assert f"<h1>{heading}</h1>" in resp.text
