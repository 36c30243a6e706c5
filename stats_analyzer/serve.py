"""Production entrypoint: run the service under uvicorn."""
from __future__ import annotations

import uvicorn

from stats_analyzer import config


def main() -> None:
    # log_config=None keeps the handlers installed by setup_logging()
    uvicorn.run(
        "stats_analyzer.main:app",
        host=config.HOST,
        port=config.PORT,
        log_config=None,
    )


if __name__ == "__main__":
    main()
