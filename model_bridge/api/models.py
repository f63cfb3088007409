from fastapi import APIRouter, Depends, Request
from model_bridge.core.router import ModelRouter
from model_bridge.schemas.chat import ChatCompletionRequest
from model_bridge.schemas.embeddings import EmbeddingRequest
from model_bridge.schemas.models import ModelList, ModelObject, ResolvedModel
import logging

logger = logging.getLogger(__name__)

router = APIRouter()


def get_model_router(request: Request) -> ModelRouter:
    return request.app.state.model_router


def _resolved(model_router: ModelRouter, payload) -> ResolvedModel:
    return ResolvedModel(
        requested=payload.model,
        model=model_router.select(payload),
        owned_by=model_router.resolver.owner_label(),
    )


@router.get("/models", response_model=ModelList)
async def list_models(model_router: ModelRouter = Depends(get_model_router)):
    return model_router.list_models()


@router.get("/models/{model_id}", response_model=ModelObject)
async def retrieve_model(model_id: str, model_router: ModelRouter = Depends(get_model_router)):
    # Unknown ids are never a 404: they resolve to the default tier like everything else
    backend_model = model_router.resolver.resolve_outbound_model(model_id)
    logger.debug(f"Model '{model_id}' is served by '{backend_model}'")
    return model_router.describe(backend_model)


@router.post("/chat/completions/model", response_model=ResolvedModel)
async def resolve_chat_model(payload: ChatCompletionRequest, model_router: ModelRouter = Depends(get_model_router)):
    return _resolved(model_router, payload)


@router.post("/embeddings/model", response_model=ResolvedModel)
async def resolve_embedding_model(payload: EmbeddingRequest, model_router: ModelRouter = Depends(get_model_router)):
    return _resolved(model_router, payload)
