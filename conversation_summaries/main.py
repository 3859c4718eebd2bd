from contextlib import asynccontextmanager

from fastapi import FastAPI

from conversation_summaries.client.connection import close_api_client, connect_api_client
from conversation_summaries.routers.summaries import router as summaries_router


@asynccontextmanager
async def lifespan(app: FastAPI):

    await connect_api_client()
    try:
        yield
    finally:
        await close_api_client()


app = FastAPI(title="Conversation Summaries", lifespan=lifespan)


app.include_router(summaries_router)
