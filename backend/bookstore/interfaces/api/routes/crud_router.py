"""Router factory for the five-endpoint entity CRUD surface."""

from typing import Annotated, Any, Callable, List, Optional, Type

from fastapi import APIRouter, Depends, Query, Request, Response, status
from pydantic import BaseModel

from ....modules.common.services import EntityCrudService
from ....modules.common.utils.error_handler import handle_exception, internal_server_error
from ..dependencies import DbSession


def create_crud_router(
    *,
    prefix: str,
    tag: str,
    entity_name: str,
    service_dependency: Callable[[], EntityCrudService[Any, Any, Any, Any]],
    create_schema: Type[BaseModel],
    replace_schema: Type[BaseModel],
    read_schema: Type[BaseModel],
) -> APIRouter:
    """Build the list/get/create/replace/delete router for one entity.

    Args:
        prefix: Collection path, e.g. ``/Authors``
        tag: OpenAPI tag for the endpoints
        entity_name: Singular entity name used in summaries and route names
        service_dependency: Dependency returning the entity's service
        create_schema: Request body for POST
        replace_schema: Request body for PUT, carries the entity id
        read_schema: Response body for reads and POST

    Returns:
        Router with the five endpoints; callers may add sub-resources to it.
    """
    router = APIRouter(prefix=prefix, tags=[tag])
    get_route_name = f"get_{entity_name}"

    @router.get(
        "",
        response_model=List[read_schema],  # type: ignore[valid-type]
        summary=f"List {tag}",
        description=f"Returns every {entity_name} ordered by id. `offset` and `limit` narrow the result.",
        responses={
            200: {"description": f"List of {tag}"},
            404: {"description": "Store unavailable"},
        },
    )
    async def list_entities(
        db: DbSession,
        offset: Annotated[int, Query(ge=0, description="Rows to skip")] = 0,
        limit: Annotated[Optional[int], Query(ge=1, description="Maximum rows to return")] = None,
        service: EntityCrudService = Depends(service_dependency),
    ):
        try:
            return await service.get_all(db, offset=offset, limit=limit)
        except Exception as e:
            http_exc = handle_exception(e)
            if http_exc:
                raise http_exc
            raise internal_server_error(e, f"listing {tag}")

    @router.get(
        "/{entity_id}",
        name=get_route_name,
        response_model=read_schema,
        summary=f"Get {entity_name}",
        responses={
            200: {"description": f"The {entity_name}"},
            404: {"description": f"{entity_name} not found"},
        },
    )
    async def get_entity(
        entity_id: int,
        db: DbSession,
        service: EntityCrudService = Depends(service_dependency),
    ):
        try:
            return await service.get(entity_id, db)
        except Exception as e:
            http_exc = handle_exception(e)
            if http_exc:
                raise http_exc
            raise internal_server_error(e, f"reading {entity_name} {entity_id}")

    @router.post(
        "",
        status_code=status.HTTP_201_CREATED,
        response_model=read_schema,
        summary=f"Create {entity_name}",
        description=f"Creates a {entity_name}. The id is assigned by the store; the `Location` header points at the new resource.",
        responses={
            201: {"description": f"{entity_name} created"},
            404: {"description": "Store unavailable"},
            422: {"description": "Invalid request body"},
        },
    )
    async def create_entity(
        payload: create_schema,  # type: ignore[valid-type]
        request: Request,
        response: Response,
        db: DbSession,
        service: EntityCrudService = Depends(service_dependency),
    ):
        try:
            created = await service.create(payload, db)
        except Exception as e:
            http_exc = handle_exception(e)
            if http_exc:
                raise http_exc
            raise internal_server_error(e, f"creating {entity_name}")

        response.headers["Location"] = str(request.url_for(get_route_name, entity_id=created.id))
        return created

    @router.put(
        "/{entity_id}",
        status_code=status.HTTP_204_NO_CONTENT,
        response_class=Response,
        summary=f"Replace {entity_name}",
        description=f"""Overwrites the whole {entity_name}. The `id` in the body must equal the id in the path.

        Fields are not merged: every field takes the value sent in the body.
        """,
        responses={
            204: {"description": f"{entity_name} replaced"},
            400: {"description": "Body id does not match path id, or the values are rejected"},
            404: {"description": f"{entity_name} not found"},
            409: {"description": "Concurrent modification"},
        },
    )
    async def replace_entity(
        entity_id: int,
        payload: replace_schema,  # type: ignore[valid-type]
        db: DbSession,
        service: EntityCrudService = Depends(service_dependency),
    ):
        try:
            await service.replace(entity_id, payload, db)
        except Exception as e:
            http_exc = handle_exception(e)
            if http_exc:
                raise http_exc
            raise internal_server_error(e, f"replacing {entity_name} {entity_id}")

        return Response(status_code=status.HTTP_204_NO_CONTENT)

    @router.delete(
        "/{entity_id}",
        status_code=status.HTTP_204_NO_CONTENT,
        response_class=Response,
        summary=f"Delete {entity_name}",
        description=f"Deletes a {entity_name}. Fails while other records still reference it.",
        responses={
            204: {"description": f"{entity_name} deleted"},
            404: {"description": f"{entity_name} not found"},
        },
    )
    async def delete_entity(
        entity_id: int,
        db: DbSession,
        service: EntityCrudService = Depends(service_dependency),
    ):
        try:
            await service.delete(entity_id, db)
        except Exception as e:
            http_exc = handle_exception(e)
            if http_exc:
                raise http_exc
            raise internal_server_error(e, f"deleting {entity_name} {entity_id}")

        return Response(status_code=status.HTTP_204_NO_CONTENT)

    return router
