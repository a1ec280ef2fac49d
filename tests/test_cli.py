"""Tests for the command line entry point with the AWS store patched out."""

import json
from unittest.mock import MagicMock, patch

import pytest
from botocore.exceptions import NoRegionError

from multipart_secrets import cli
from multipart_secrets.core.exceptions import BaseSecretNotFoundError


@pytest.fixture
def fake_store(store_factory):
    """Patch build_store so the CLI runs against an in-memory store."""
    store = store_factory({"app": {"a": "1"}, "app-1": {"Db": {"User": "x"}}})
    store.require_base = MagicMock()
    with patch.object(cli, "build_store", return_value=store):
        yield store


@pytest.fixture(autouse=True)
def no_logging_config():
    with patch.object(cli, "configure_logging"):
        yield


class TestMutateCommands:

    def test_add_prints_summary(self, fake_store, capsys) -> None:
        # At 20 bytes {"Db":{"User":"x"}} fills one part and {"a","b"} the other
        code = cli.main(["add", "--env", "prod", "--secret-name", "app", "--json-data", '{"b": "2"}', "--max-part-bytes", "20"])

        assert code == 0
        out = capsys.readouterr().out
        assert "Add operation completed successfully. Total keys: 3, Total secrets: 2" in out
        fake_store.require_base.assert_called_once_with("app")

    def test_update_at_path(self, fake_store, capsys) -> None:
        code = cli.main([
            "update", "--env", "prod", "--secret_name", "app",
            "--json_data", '{"User": "root"}', "--path", "Db", "--max-part-bytes", "25",
        ])

        assert code == 0
        assert "Update operation completed successfully" in capsys.readouterr().out
        merged = {**fake_store.load("app"), **fake_store.load("app-1")}
        assert merged["Db"] == {"User": "root"}

    def test_add_existing_key_fails(self, fake_store) -> None:
        code = cli.main(["add", "--env", "prod", "--secret-name", "app", "--json-data", '{"a": "2"}'])
        assert code == 1
        assert fake_store.writes == []

    def test_invalid_json_fails(self, fake_store) -> None:
        code = cli.main(["add", "--env", "prod", "--secret-name", "app", "--json-data", "{oops"])
        assert code == 1

    def test_overflow_name_fails(self, fake_store) -> None:
        code = cli.main(["add", "--env", "prod", "--secret-name", "app-1", "--json-data", '{"z": 1}'])
        assert code == 1
        fake_store.require_base.assert_not_called()

    def test_missing_base_fails(self, fake_store) -> None:
        fake_store.require_base.side_effect = BaseSecretNotFoundError("app")
        code = cli.main(["add", "--env", "prod", "--secret-name", "app", "--json-data", '{"z": 1}'])
        assert code == 1

    def test_required_arguments(self) -> None:
        with pytest.raises(SystemExit) as exc_info:
            cli.main(["add", "--secret-name", "app"])
        assert exc_info.value.code == 2


class TestReadCommands:

    def test_find(self, fake_store, capsys) -> None:
        assert cli.main(["find", "--secret-name", "app", "--key-path", "Db.User"]) == 0
        assert "'app-1' (part 1)" in capsys.readouterr().out

    def test_find_not_found(self, fake_store, capsys) -> None:
        assert cli.main(["find", "--secret-name", "app", "--key-path", "Nope"]) == 1
        assert "not found" in capsys.readouterr().out

    def test_find_bad_path(self, fake_store) -> None:
        assert cli.main(["find", "--secret-name", "app", "--key-path", "a..b"]) == 1

    def test_zero_part_limit_fails(self, fake_store) -> None:
        assert cli.main(["describe", "--secret-name", "app", "--max-part-bytes", "0"]) == 1

    def test_describe(self, fake_store, capsys) -> None:
        assert cli.main(["describe", "--secret-name", "app"]) == 0
        out = capsys.readouterr().out
        assert "app: 1 keys" in out
        assert "app-1: 1 keys" in out
        assert "Total keys: 2, Total secrets: 2" in out



class TestUnexpectedFailures:

    @patch("multipart_secrets.boundary.aws.secrets_manager_client.boto3")
    def test_missing_region_exits_with_error(self, mock_boto3: MagicMock, caplog) -> None:
        mock_boto3.client.side_effect = NoRegionError()

        assert cli.main(["describe", "--secret-name", "app"]) == 1
        assert "Secrets Manager connect failed" in caplog.text

    def test_unexpected_error_is_logged(self, fake_store, caplog) -> None:
        fake_store.list_part_indices = MagicMock(side_effect=RuntimeError("boom"))

        assert cli.main(["describe", "--secret-name", "app"]) == 1
        assert "Unexpected failure" in caplog.text


def test_build_store_uses_settings(settings) -> None:
    with patch.object(cli, "SecretsManagerPartStore") as mock_store_class:
        cli.build_store(settings, region=None)
    mock_store_class.assert_called_once_with(region="us-east-1", endpoint_url=None, batch_size=20)


def test_encoded_parts_are_json(fake_store) -> None:
    cli.main(["add", "--env", "prod", "--secret-name", "app", "--json-data", '{"b": "2"}', "--max-part-bytes", "20"])
    for payload in fake_store.secrets.values():
        assert isinstance(json.loads(payload), dict)
