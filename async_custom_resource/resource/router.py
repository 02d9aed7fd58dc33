"""
Routes a lifecycle request to the matching custom resource operation.
"""

import inspect
from collections.abc import Awaitable, Callable
from typing import Any

from ..errors.models import InvalidRequestError
from ..handlers.protocols import CustomResource
from .models import HandlerResult, RequestType

# (input, old input loader) -> result
Operation = Callable[[Any, Callable[[], Any]], Awaitable[HandlerResult[Any]]]


def accepts_old_input(operation: Callable[..., Any]) -> bool:
    """Whether an update operation declares an ``old_input`` parameter."""
    try:
        parameters = inspect.signature(operation).parameters
    except (TypeError, ValueError):
        return False
    return "old_input" in parameters


def route(
    resource: CustomResource,
    request_type: RequestType | str,
    physical_resource_id: str | None,
) -> Operation:
    """
    Select the operation for a request without invoking it.

    | request type | physical id | operation                 |
    |--------------|-------------|---------------------------|
    | Create       | absent      | create(input)             |
    | Update       | present     | update(input, id)         |
    | Delete       | present     | delete(input, id)         |

    The returned callable takes the decoded input and a loader for the old
    input; the loader is only called for an ``update`` that asks for it.

    Raises:
        InvalidRequestError: For any other combination
    """
    if isinstance(request_type, str):
        request_type = RequestType.parse(request_type)

    if request_type == RequestType.CREATE and physical_resource_id is None:
        create = resource.create

        async def run_create(properties: Any, load_old_input: Callable[[], Any]) -> HandlerResult[Any]:
            return await create(properties)

        return run_create

    if request_type == RequestType.UPDATE and physical_resource_id is not None:
        update = resource.update

        async def run_update(properties: Any, load_old_input: Callable[[], Any]) -> HandlerResult[Any]:
            if accepts_old_input(update):
                return await update(
                    properties, physical_resource_id, old_input=load_old_input()
                )
            return await update(properties, physical_resource_id)

        return run_update

    if request_type == RequestType.DELETE and physical_resource_id is not None:
        delete = resource.delete

        async def run_delete(properties: Any, load_old_input: Callable[[], Any]) -> HandlerResult[Any]:
            return await delete(properties, physical_resource_id)

        return run_delete

    raise InvalidRequestError(str(request_type))
