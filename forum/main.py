import logging
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from forum.core.config import get_settings
from forum.core.db import engine, init_db
from forum.routes.graphql import router as graphql_router
from forum.routes.health import router as health_router

settings = get_settings()
logging.basicConfig(level=settings.log_level)


@asynccontextmanager
async def lifespan(app: FastAPI):
    if engine is not None:
        init_db(engine)
    yield


app = FastAPI(title="Forum API", lifespan=lifespan)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(health_router)
app.include_router(graphql_router, prefix="/graphql")


if __name__ == "__main__":
    uvicorn.run("forum.main:app", host="0.0.0.0", port=settings.port)
