import logging
import sys

_FORMAT = "%(asctime)s %(levelname)s:%(name)s: %(message)s"


def configure_logging(level: str = "INFO") -> None:
    """Installe un handler stdout sur le logger racine de l'app (une seule fois)."""
    app_logger = logging.getLogger("app")
    if not any(getattr(h, "_habit_handler", False) for h in app_logger.handlers):
        handler = logging.StreamHandler(sys.stdout)
        handler.setFormatter(logging.Formatter(_FORMAT))
        handler._habit_handler = True  # type: ignore[attr-defined]
        app_logger.addHandler(handler)
    app_logger.setLevel(level.upper())
