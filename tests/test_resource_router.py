"""
Tests for request routing.
"""

import pytest

from async_custom_resource.errors.models import InvalidRequestError
from async_custom_resource.resource.models import HandlerResult, RequestType
from async_custom_resource.resource.router import accepts_old_input, route


class TestRoute:
    """Tests for route()."""

    @pytest.mark.unit
    @pytest.mark.asyncio
    async def test_create_without_id_routes_to_create(self, mock_resource):
        operation = route(mock_resource, RequestType.CREATE, None)
        await operation({"name": "x"}, lambda: None)

        mock_resource.create.assert_awaited_once_with({"name": "x"})
        mock_resource.update.assert_not_called()
        mock_resource.delete.assert_not_called()

    @pytest.mark.unit
    @pytest.mark.asyncio
    async def test_update_with_id_routes_to_update(self, mock_resource):
        operation = route(mock_resource, RequestType.UPDATE, "r-1")
        await operation({"name": "x"}, lambda: {"name": "old"})

        mock_resource.update.assert_awaited_once_with({"name": "x"}, "r-1")
        mock_resource.create.assert_not_called()
        mock_resource.delete.assert_not_called()

    @pytest.mark.unit
    @pytest.mark.asyncio
    async def test_delete_with_id_routes_to_delete(self, mock_resource):
        operation = route(mock_resource, RequestType.DELETE, "r-1")
        await operation({"name": "x"}, lambda: None)

        mock_resource.delete.assert_awaited_once_with({"name": "x"}, "r-1")
        mock_resource.create.assert_not_called()
        mock_resource.update.assert_not_called()

    @pytest.mark.unit
    def test_route_does_not_invoke_operation(self, mock_resource):
        route(mock_resource, RequestType.CREATE, None)
        mock_resource.create.assert_not_called()

    @pytest.mark.unit
    def test_raw_string_request_type_is_parsed(self, mock_resource):
        assert callable(route(mock_resource, "Delete", "r-1"))

    @pytest.mark.unit
    @pytest.mark.parametrize(
        "request_type, physical_resource_id, expected",
        [
            (RequestType.CREATE, "r-1", "Create"),
            (RequestType.UPDATE, None, "Update"),
            (RequestType.DELETE, None, "Delete"),
            ("Replace", "r-1", "Replace"),
            ("Replace", None, "Replace"),
        ],
    )
    def test_invalid_combinations_raise(
        self, mock_resource, request_type, physical_resource_id, expected
    ):
        with pytest.raises(InvalidRequestError, match=expected) as exc_info:
            route(mock_resource, request_type, physical_resource_id)

        assert exc_info.value.request_type == expected
        mock_resource.create.assert_not_called()
        mock_resource.update.assert_not_called()
        mock_resource.delete.assert_not_called()


class TestOldInput:
    """Tests for passing OldResourceProperties to update."""

    @pytest.mark.unit
    @pytest.mark.asyncio
    async def test_update_receives_old_input_when_declared(self):
        received = {}

        class Resource:
            async def create(self, properties):
                raise AssertionError("not called")

            async def update(self, properties, physical_resource_id, old_input=None):
                received.update(new=properties, old=old_input, id=physical_resource_id)
                return HandlerResult(physical_resource_id)

            async def delete(self, properties, physical_resource_id):
                raise AssertionError("not called")

        operation = route(Resource(), RequestType.UPDATE, "r-9")
        result = await operation({"size": 2}, lambda: {"size": 1})

        assert result.physical_resource_id == "r-9"
        assert received == {"new": {"size": 2}, "old": {"size": 1}, "id": "r-9"}

    @pytest.mark.unit
    @pytest.mark.asyncio
    async def test_old_input_not_loaded_when_undeclared(self, mock_resource):
        def load_old_input():
            raise AssertionError("old input should not be loaded")

        operation = route(mock_resource, RequestType.UPDATE, "r-1")
        await operation({"name": "x"}, load_old_input)

        mock_resource.update.assert_awaited_once_with({"name": "x"}, "r-1")

    @pytest.mark.unit
    def test_accepts_old_input(self):
        async def with_old(properties, physical_resource_id, old_input=None):
            pass

        async def without_old(properties, physical_resource_id):
            pass

        assert accepts_old_input(with_old) is True
        assert accepts_old_input(without_old) is False
