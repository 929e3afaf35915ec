"""Static learning content served alongside AI answers.

Links in generated study materials are placeholders until real content
providers are wired in.
"""

from typing import Optional

from nelax.schemas import Book, MaterialLink, QuizQuestion, Reel, StudyMaterials, VideoLink

REELS: tuple[Reel, ...] = (
    Reel(course="Programming", caption="Python Basics Tutorial", video_url="https://youtu.be/Gua2Bo_G-J0?si=FNnNZBbmBh0yqvrk"),
    Reel(course="Mathematics", caption="Calculus Fundamentals", video_url="https://youtu.be/fb7YCVR5fIU?si=XWozkxGoBV2HP2HW"),
    Reel(course="Science", caption="Physics Concepts Explained", video_url="https://youtu.be/qISkyoiGHcI?si=BKRnkFfl-fqKXgLG"),
    Reel(course="Programming", caption="JavaScript Crash Course", video_url="https://youtu.be/27gabbJQZqc?si=rsOLmkD2QXOoxSoi"),
    Reel(course="Mathematics", caption="Algebra Made Easy", video_url="https://youtu.be/Cox8rLXYAGQ?si=CvKUaPuPJOxPb6cr"),
)

QUIZ_QUESTIONS: dict[str, tuple[QuizQuestion, ...]] = {
    "programming": (
        QuizQuestion(
            question="What is a variable in programming?",
            options=["Data storage", "Function", "Loop", "Condition"],
            answer="Data storage",
        ),
        QuizQuestion(
            question="Which language is known for web development?",
            options=["Python", "JavaScript", "C++", "Java"],
            answer="JavaScript",
        ),
    ),
    "mathematics": (
        QuizQuestion(question="What is 2 + 2?", options=["3", "4", "5", "6"], answer="4"),
        QuizQuestion(
            question="Solve: x + 5 = 10",
            options=["x=3", "x=5", "x=10", "x=15"],
            answer="x=5",
        ),
    ),
    "science": (
        QuizQuestion(
            question="What is H2O?",
            options=["Oxygen", "Hydrogen", "Water", "Carbon dioxide"],
            answer="Water",
        ),
        QuizQuestion(
            question="Which planet is known as the Red Planet?",
            options=["Earth", "Mars", "Jupiter", "Venus"],
            answer="Mars",
        ),
    ),
}


def filter_reels(course: Optional[str] = None) -> list[Reel]:
    if not course:
        return list(REELS)
    return [reel for reel in REELS if reel.course == course]


def questions_for(topic: Optional[str]) -> list[QuizQuestion]:
    if not topic:
        return []
    return list(QUIZ_QUESTIONS.get(topic, ()))


def build_materials(topic: str, level: str, department: str) -> StudyMaterials:
    return StudyMaterials(
        pdfs=[
            MaterialLink(title=f"{topic} Fundamentals Guide"),
            MaterialLink(title=f"{department} {topic} Textbook"),
        ],
        books=[
            Book(title=f"Introduction to {topic}", author="Expert Author"),
            Book(title=f"{topic} for {level} Students", author="Education Press"),
        ],
        videos=[
            VideoLink(title=f"{topic} Crash Course"),
            VideoLink(title=f"{department} {topic} Tutorial"),
        ],
    )
