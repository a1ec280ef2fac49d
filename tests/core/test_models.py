"""Tests for request/result models and input parsing."""

import pytest

from multipart_secrets.core.exceptions import InvalidMutationInputError
from multipart_secrets.core.redistribution.models import (
    FindResult,
    MutationRequest,
    MutationResult,
    PartSummary,
    SecretDescription,
)


class TestMutationRequest:
    """MutationRequest validation and JSON parsing."""

    def test_from_json_keeps_value_types(self) -> None:
        request = MutationRequest.from_json('{"s": "x", "n": 1, "o": {"k": [true, null]}}')
        assert request.values == {"s": "x", "n": 1, "o": {"k": [True, None]}}
        assert request.path is None
        assert request.force_update is False
        assert request.path_segments == []

    def test_from_json_with_path_and_force(self) -> None:
        request = MutationRequest.from_json('{"Pass": "y"}', path="Db.Primary", force_update=True)
        assert request.path_segments == ["Db", "Primary"]
        assert request.force_update is True

    @pytest.mark.parametrize("payload", ["{not json", "", "[1, 2]", '"s"', "null"])
    def test_from_json_rejects_non_objects(self, payload: str) -> None:
        with pytest.raises(InvalidMutationInputError) as exc_info:
            MutationRequest.from_json(payload)
        assert exc_info.value.details["field"] == "json_data"

    def test_from_json_rejects_empty_object(self) -> None:
        with pytest.raises(InvalidMutationInputError) as exc_info:
            MutationRequest.from_json("{}")
        assert "empty" in exc_info.value.message

    @pytest.mark.parametrize("path", ["", "a..b", ".a", "a."])
    def test_from_json_rejects_bad_paths(self, path: str) -> None:
        with pytest.raises(InvalidMutationInputError) as exc_info:
            MutationRequest.from_json('{"k": "v"}', path=path)
        assert exc_info.value.details["field"] == "path"

    def test_direct_construction_validates(self) -> None:
        with pytest.raises(ValueError):
            MutationRequest(values={})

    def test_request_is_frozen(self) -> None:
        request = MutationRequest(values={"a": 1})
        with pytest.raises(ValueError):
            request.force_update = True


class TestResultModels:
    """Result and summary models."""

    def test_mutation_result_defaults(self) -> None:
        result = MutationResult(base_name="app", key_count=2, part_count=1)
        assert result.part_names == []
        assert result.created_parts == []

    def test_find_result_defaults_to_not_found(self) -> None:
        result = FindResult(base_name="app", key_path="a.b")
        assert result.found is False
        assert result.part_index is None

    def test_description_part_count(self) -> None:
        description = SecretDescription(
            base_name="app",
            parts=[
                PartSummary(index=0, name="app", key_count=2, size_bytes=20),
                PartSummary(index=1, name="app-1", key_count=1, size_bytes=9),
            ],
            key_count=3,
            max_part_bytes=51200,
        )
        assert description.part_count == 2
        assert description.model_dump()["parts"][1]["name"] == "app-1"
