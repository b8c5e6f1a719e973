"""
Person endpoints.

CRUD over people plus two read‑only listings: ``Filter`` narrows the
list by the query string and ``ChocolateLovers`` returns everyone who
likes chocolate.  Routes with a literal segment are declared before
``/{person_id}`` so they are matched first.

Service exceptions map onto status codes: validation errors become
400, missing people and empty filter results become 404.
"""

from typing import List, Optional

from fastapi import APIRouter, Depends, HTTPException, Query, Request, Response, status
from fastapi.responses import JSONResponse

from person_api.app.api.dependencies import get_person_service
from person_api.app.schemas.filter import PersonFilter
from person_api.app.schemas.person import PersonCreate, PersonRead, PersonReplace
from person_api.app.services.person_service import (
    PersonNotFoundError,
    PersonService,
    PersonValidationError,
)

router = APIRouter()


@router.get("", response_model=List[PersonRead])
async def list_persons(service: PersonService = Depends(get_person_service)) -> List[PersonRead]:
    """Return every person."""
    return await service.list_persons()


@router.get(
    "/Filter",
    response_model=List[PersonRead],
    responses={400: {"description": "No filter was provided"}, 404: {"description": "Nobody matched the filter"}},
)
async def filter_persons(
    name: Optional[str] = Query(None, description="Exact, case-sensitive name"),
    likes_chocolate: Optional[bool] = Query(None, alias="likesChocolate"),
    max_results: Optional[int] = Query(None, alias="maxResults", ge=0),
    service: PersonService = Depends(get_person_service),
) -> List[PersonRead]:
    """Return the people matching the query string.

    Example::

        GET /api/v1/Person/Filter?likesChocolate=true&maxResults=3

    returns the first three people who like chocolate.  Parameters that
    are left out are not filtered on; leaving out all of them is a 400.
    Parameter names are matched case-insensitively.
    """
    # An empty ``name=`` is the same as leaving the parameter out.
    person_filter = PersonFilter(name=name or None, likes_chocolate=likes_chocolate, max_results=max_results)
    try:
        return await service.filter_persons(person_filter)
    except PersonValidationError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e)) from e
    except PersonNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e)) from e


@router.get("/ChocolateLovers", response_model=List[PersonRead])
async def list_chocolate_lovers(service: PersonService = Depends(get_person_service)) -> List[PersonRead]:
    """Return everyone who likes chocolate."""
    return await service.list_chocolate_lovers()


@router.get("/{person_id}", response_model=PersonRead, responses={404: {"description": "Person not found"}})
async def get_person(person_id: int, service: PersonService = Depends(get_person_service)) -> PersonRead:
    try:
        return await service.get_person(person_id)
    except PersonNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e)) from e


@router.post(
    "",
    response_model=PersonRead,
    status_code=status.HTTP_201_CREATED,
    responses={400: {"description": "Invalid name or id already taken"}},
)
async def create_person(
    person_in: PersonCreate,
    request: Request,
    response: Response,
    service: PersonService = Depends(get_person_service),
) -> PersonRead:
    """Create a person.

    The ``id`` may be omitted, in which case the next free id is
    assigned.  The ``Location`` header points at the new person.
    """
    try:
        person = await service.create_person(person_in)
    except PersonValidationError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e)) from e
    response.headers["Location"] = f"{request.url.path.rstrip('/')}/{person.id}"
    return person


@router.put(
    "/{person_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    responses={
        201: {"model": PersonRead, "description": "Nobody had this id, so the person was created"},
        400: {"description": "Invalid name, or URL id and body id differ"},
    },
)
async def put_person(
    person_id: int,
    person_in: PersonReplace,
    request: Request,
    service: PersonService = Depends(get_person_service),
) -> Response:
    """Replace a person, creating it if the id is unused.

    The body must be the entire entity and its ``id`` must equal the
    one in the URL.  Answers 204 when an existing person was replaced
    and 201 with the new person when it was created.
    """
    try:
        person, created = await service.upsert_person(person_id, person_in)
    except PersonValidationError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e)) from e
    if created:
        return JSONResponse(
            status_code=status.HTTP_201_CREATED,
            content=person.model_dump(by_alias=True),
            headers={"Location": request.url.path},
        )
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.delete("/{person_id}", status_code=status.HTTP_204_NO_CONTENT, responses={404: {"description": "Person not found"}})
async def delete_person(person_id: int, service: PersonService = Depends(get_person_service)) -> Response:
    try:
        await service.delete_person(person_id)
    except PersonNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e)) from e
    return Response(status_code=status.HTTP_204_NO_CONTENT)
