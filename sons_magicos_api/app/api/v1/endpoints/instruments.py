"""
Instrument endpoints for API v1.

These routes expose the instrument catalogue: listing with an optional
free‑text filter, retrieval by id, creation, replacement, deletion and
the total value of all instruments of one type.  Reads are public;
create, update and delete require HTTP Basic credentials, checked by
``require_basic_auth`` before the handler runs.

All storage work is delegated to the ``InstrumentServiceBase``
provided by ``get_instrument_service``.  Handlers only translate the
service results into HTTP status codes: 404 and local 400 responses
carry no body.
"""

from typing import List, Optional

from fastapi import APIRouter, Depends, Query, Response, status

from sons_magicos_api.app.api.deps import get_instrument_service
from sons_magicos_api.app.core.security import require_basic_auth
from sons_magicos_api.app.schemas.instrument import (
    InstrumentCreate,
    InstrumentRead,
    InstrumentType,
    InstrumentUpdate,
    MoneyTotal,
)
from sons_magicos_api.app.services.base import InstrumentServiceBase

router = APIRouter()


# The collection answers on both the bare prefix and the trailing-slash form
# so clients never hit a redirect; only the bare form is documented.
@router.get("", response_model=List[InstrumentRead])
@router.get("/", response_model=List[InstrumentRead], include_in_schema=False)
async def list_instruments(
    filter_text: Optional[str] = Query(
        None,
        alias="filter",
        description="Case‑insensitive text matched against name and description",
    ),
    service: InstrumentServiceBase = Depends(get_instrument_service),
) -> List[InstrumentRead]:
    """Return all instruments, optionally filtered.

    An empty list is returned when nothing matches.  This endpoint is
    publicly accessible.
    """
    return await service.list_instruments(filter_text)


# Declared before ``/{instrument_id}`` so the literal path is not parsed as an id.
@router.get("/valor-por-tipo", response_model=MoneyTotal)
async def total_value_by_type(
    instrument_type: InstrumentType = Query(..., alias="type"),
    service: InstrumentServiceBase = Depends(get_instrument_service),
):
    """Return the summed value of every instrument of the given type.

    The total is ``0`` when no instrument has that type.  An unknown
    or missing ``type`` yields HTTP 400.  The body is the decimal
    written out digit for digit as a JSON number, so large totals are
    not rounded through a float.
    """
    total = await service.total_value_by_type(instrument_type)
    return Response(content=format(total, "f"), media_type="application/json")


@router.get(
    "/{instrument_id}",
    response_model=InstrumentRead,
    responses={404: {"description": "Instrument not found"}},
)
async def get_instrument(
    instrument_id: int,
    service: InstrumentServiceBase = Depends(get_instrument_service),
):
    """Retrieve a single instrument by its ID.

    Returns HTTP 404 with an empty body if the instrument is not found.
    """
    instrument = await service.get_instrument(instrument_id)
    if instrument is None:
        return Response(status_code=status.HTTP_404_NOT_FOUND)
    return instrument


_CREATE_ROUTE = dict(
    response_model=InstrumentRead,
    status_code=status.HTTP_201_CREATED,
    dependencies=[Depends(require_basic_auth)],
    responses={400: {"description": "Malformed payload"}, 401: {"description": "Invalid credentials"}},
)


@router.post("", **_CREATE_ROUTE)
@router.post("/", include_in_schema=False, **_CREATE_ROUTE)
async def create_instrument(
    instrument_in: InstrumentCreate,
    service: InstrumentServiceBase = Depends(get_instrument_service),
) -> InstrumentRead:
    """Create a new instrument.

    Any ``id`` present in the body is ignored; the response carries
    the id assigned by the store.
    """
    return await service.add(instrument_in)


@router.put(
    "/{instrument_id}",
    response_model=InstrumentRead,
    status_code=status.HTTP_202_ACCEPTED,
    dependencies=[Depends(require_basic_auth)],
    responses={
        400: {"description": "Path id and body id differ, or malformed payload"},
        401: {"description": "Invalid credentials"},
        404: {"description": "Instrument not found"},
    },
)
async def update_instrument(
    instrument_id: int,
    instrument_in: InstrumentUpdate,
    service: InstrumentServiceBase = Depends(get_instrument_service),
):
    """Replace an existing instrument.

    The ``id`` in the body must equal the one in the path, otherwise
    HTTP 400 is returned and nothing is changed.  HTTP 404 is returned
    if the instrument does not exist, including when it disappears
    between the existence check and the update.
    """
    if instrument_in.id != instrument_id:
        return Response(status_code=status.HTTP_400_BAD_REQUEST)

    if await service.get_instrument(instrument_id) is None:
        return Response(status_code=status.HTTP_404_NOT_FOUND)

    if not await service.update(instrument_in):
        return Response(status_code=status.HTTP_404_NOT_FOUND)
    return InstrumentRead(**instrument_in.model_dump())


@router.delete(
    "/{instrument_id}",
    response_model=InstrumentRead,
    status_code=status.HTTP_202_ACCEPTED,
    dependencies=[Depends(require_basic_auth)],
    responses={401: {"description": "Invalid credentials"}, 404: {"description": "Instrument not found"}},
)
async def delete_instrument(
    instrument_id: int,
    service: InstrumentServiceBase = Depends(get_instrument_service),
):
    """Delete an instrument and return it as it was before deletion.

    Returns HTTP 404 if the instrument does not exist; ``remove`` is
    not called in that case.  If another request deletes the same
    instrument between the lookup and the removal, HTTP 404 is
    returned as well.
    """
    instrument = await service.get_instrument(instrument_id)
    if instrument is None:
        return Response(status_code=status.HTTP_404_NOT_FOUND)

    if not await service.remove(instrument_id):
        return Response(status_code=status.HTTP_404_NOT_FOUND)
    return instrument
