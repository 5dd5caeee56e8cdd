"""
Run the API with uvicorn: `python -m studyplanner` or the `studyplanner`
console script. Host and port come from settings (BACKEND_HOST, PORT).
"""

import uvicorn

from studyplanner.config import settings


def main() -> None:
    uvicorn.run(
        "studyplanner.main:app",
        host=settings.backend_host,
        port=settings.backend_port,
        log_level=settings.log_level.lower(),
    )


if __name__ == "__main__":
    main()
