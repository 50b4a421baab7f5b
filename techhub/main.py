import logging

from fastapi import FastAPI

from techhub.api.auth import router as auth_router
from techhub.api.booking import router as booking_router
from techhub.api.contact import router as contact_router
from techhub.core.config import settings
from techhub.wiring.dependencies import Container, build_container


class ContextFormatter(logging.Formatter):
    def format(self, record: logging.LogRecord) -> str:
        extras = []
        for key in (
            "booking_id", "client_ip", "recipient", "provider", "status", "slot",
            "role", "path", "count", "error", "attempt", "delay_ms",
        ):
            value = getattr(record, key, None)
            if value not in (None, ""):
                extras.append(f"{key}={value}")
        base = super().format(record)
        if extras:
            return f"{base} | " + " ".join(extras)
        return base


handler = logging.StreamHandler()
handler.setFormatter(ContextFormatter("%(asctime)s %(levelname)s:%(name)s:%(message)s"))

root = logging.getLogger()
root.setLevel(getattr(logging, settings.LOG_LEVEL.upper(), logging.INFO))
root.handlers.clear()
root.addHandler(handler)


def create_app(container: Container | None = None) -> FastAPI:
    """Each app owns its container: booking store, rate limiter and use cases."""
    app = FastAPI(title=f"{settings.BUSINESS_NAME} Site API", version="1.0.0")
    app.state.container = container or build_container()

    app.include_router(contact_router, prefix="/api", tags=["contact"])
    app.include_router(booking_router, prefix="/api", tags=["booking"])
    app.include_router(auth_router, prefix="/api/auth", tags=["auth"])

    @app.get("/health")
    def health() -> dict[str, str]:
        return {"status": "ok"}

    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn

    uvicorn.run("techhub.main:app", host="127.0.0.1", port=8000)
