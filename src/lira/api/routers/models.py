"""Model catalog endpoints."""

from fastapi import APIRouter, status

from ..dependencies import ModelStore
from ..exceptions import NotFoundError
from ..schemas import ModelCreate, ModelResponse, ModelUpdate

router = APIRouter(prefix="/models", tags=["models"])


@router.get("", response_model=list[ModelResponse], summary="List models")
async def list_models(catalog: ModelStore) -> list[ModelResponse]:
    models = await catalog.list_all()
    return [ModelResponse.model_validate(model) for model in models]


@router.post(
    "",
    response_model=ModelResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Register model",
)
async def create_model(request: ModelCreate, catalog: ModelStore) -> ModelResponse:
    """Register a new model.

    Args:
        request: Model registration request
        catalog: Model catalog

    Returns:
        The created model
    """
    model = await catalog.create(
        name=request.name,
        type=request.type,
        description=request.description,
        version=request.version,
    )
    return ModelResponse.model_validate(model)


@router.get("/{model_id}", response_model=ModelResponse, summary="Get model")
async def get_model(model_id: str, catalog: ModelStore) -> ModelResponse:
    model = await catalog.get(model_id)
    if model is None:
        raise NotFoundError("Model", model_id)
    return ModelResponse.model_validate(model)


@router.put("/{model_id}", response_model=ModelResponse, summary="Update model")
async def update_model(
    model_id: str,
    request: ModelUpdate,
    catalog: ModelStore,
) -> ModelResponse:
    """Update a model's name or description.

    Args:
        model_id: Model identifier
        request: Update body
        catalog: Model catalog

    Returns:
        Updated model
    """
    model = await catalog.update(
        model_id,
        name=request.name,
        description=request.description,
    )
    if model is None:
        raise NotFoundError("Model", model_id)
    return ModelResponse.model_validate(model)
