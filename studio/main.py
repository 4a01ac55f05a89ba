from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from strawberry.fastapi import GraphQLRouter

from studio.core import config
from studio.core.logging_config import get_logger, setup_logging
from studio.db.store import build_store
from studio.graphql.context import build_context
from studio.graphql.schema import schema

logger = get_logger("main")


@asynccontextmanager
async def lifespan(app: FastAPI):
    setup_logging()
    store = build_store()
    store.load()
    app.state.store = store
    logger.info("Studio API ready")
    yield


app = FastAPI(lifespan=lifespan)

app.add_middleware(
    CORSMiddleware,
    allow_origins=config.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

graphql_app = GraphQLRouter(
    schema=schema,
    context_getter=build_context,
    graphql_ide="graphiql"
)
app.include_router(graphql_app, prefix="/graphql")


@app.get("/")
def read_root():
    return {"service": "studio", "graphql": "/graphql"}
