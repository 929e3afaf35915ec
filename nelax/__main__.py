import logging

import uvicorn

from nelax.config import get_settings

logger = logging.getLogger("nelax")


def main() -> None:
    settings = get_settings()
    logging.basicConfig(
        level=settings.log_level,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )

    if not settings.openrouter_api_key:
        logger.error("Missing OPENROUTER_API_KEY in environment or .env")
        raise SystemExit(1)

    base = f"http://localhost:{settings.port}"
    logger.info("NelaX Lite running at %s", base)
    for label, path in (
        ("Materials", "/materials"),
        ("Reels", "/reels"),
        ("CBT Test", "/cbt"),
        ("Materials API", "/api/materials"),
        ("Reels API", "/api/reels"),
        ("CBT API", "/api/cbt"),
        ("AI Teach API", "/api/ai-teach"),
    ):
        logger.info("%s: %s%s", label, base, path)

    uvicorn.run(
        "nelax.main:app",
        host=settings.host,
        port=settings.port,
        log_level=settings.log_level.lower(),
    )


if __name__ == "__main__":
    main()
