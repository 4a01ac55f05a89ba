from dataclasses import dataclass

from fastapi import Depends, Request, Response
from strawberry.fastapi import BaseContext

from studio.db.store import StudioStore


@dataclass
class Context(BaseContext):
    store: StudioStore
    request: Request
    response: Response


def get_store(request: Request) -> StudioStore:
    return request.app.state.store


async def build_context(
    request: Request,
    response: Response,
    store: StudioStore = Depends(get_store),
) -> Context:
    return Context(store=store, request=request, response=response)
