import logging

# Third-party loggers that log every request at INFO
_CHATTY = ("httpx", "openai", "sqlalchemy.engine")


def init_logging(level: str = "INFO") -> None:
    lvl = getattr(logging, level.upper(), logging.INFO)
    logging.basicConfig(
        level=lvl,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    logging.getLogger("fittrack").setLevel(lvl)
    # Keep uvicorn logs consistent with our level
    for name in ("uvicorn.error", "uvicorn.access"):
        logging.getLogger(name).setLevel(lvl)
    for name in _CHATTY:
        logging.getLogger(name).setLevel(max(lvl, logging.WARNING))
