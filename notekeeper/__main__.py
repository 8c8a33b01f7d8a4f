"""Run the NoteKeeper server: `python -m notekeeper`."""

import uvicorn

from notekeeper.config import settings


def main() -> None:
    uvicorn.run(
        "notekeeper.main:app",
        host=settings.backend_host,
        port=settings.backend_port,
        log_level=settings.log_level.lower(),
        # One process: the store lives in this process's memory
        workers=1,
    )


if __name__ == "__main__":
    main()
