# app/main.py
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from app.core.config import get_settings
from app.core.database import Base, engine
from app.core.errors import register_exception_handlers
from app.core.logging import configure_logging
from app.auth.routes import router as auth_router
from app.ticket.routes import router as ticket_router
from app.user.routes import router as user_router

settings = get_settings()
configure_logging(settings)

Base.metadata.create_all(bind=engine)

app = FastAPI(
    title=settings.APP_NAME,
    description=settings.APP_DESC,
    version=settings.APP_VERSION,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

register_exception_handlers(app)

# Routers
app.include_router(auth_router)
app.include_router(ticket_router)
app.include_router(user_router)

@app.get("/health", tags=["Health"])
def health():
    return {"status": "ok"}
