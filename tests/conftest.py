"""
Shared test fixtures and configuration for entire test suite.

Provides: in-memory PartStore fake, settings isolated from the environment
Dependencies: pytest
System role: Test infrastructure and fixture management
"""

import json
from collections.abc import Mapping

import pytest

from multipart_secrets.configs import SecretsStoreSettings, Settings, TaggingSettings
from multipart_secrets.core.exceptions import PartNotFoundError
from multipart_secrets.core.redistribution.naming import PartNamer


class InMemoryPartStore:
    """PartStore fake backed by a dict of secret name -> SecretString."""

    def __init__(self, secrets: Mapping[str, str] | None = None) -> None:
        self.secrets: dict[str, str] = dict(secrets or {})
        self.tags: dict[str, dict[str, str]] = {}
        self.writes: list[str] = []

    def list_part_indices(self, base_name: str) -> list[int]:
        namer = PartNamer(base_name)
        indices = {namer.parse_index(name) for name in self.secrets}
        return sorted(index for index in indices if index is not None)

    def fetch_parts(self, base_name: str, indices: list[int]) -> dict[int, str]:
        namer = PartNamer(base_name)
        payloads = {}
        for index in indices:
            name = namer.name(index)
            if name not in self.secrets:
                raise PartNotFoundError(name)
            payloads[index] = self.secrets[name]
        return payloads

    def upsert_part(self, name: str, payload: str, tags: Mapping[str, str]) -> bool:
        created = name not in self.secrets
        self.secrets[name] = payload
        if created:
            self.tags[name] = dict(tags)
        self.writes.append(name)
        return created

    def load(self, name: str) -> dict:
        return json.loads(self.secrets[name])


def make_store(parts: Mapping[str, dict]) -> InMemoryPartStore:
    """Build a fake store from decoded part documents."""
    return InMemoryPartStore({name: json.dumps(data) for name, data in parts.items()})


@pytest.fixture
def settings() -> Settings:
    """Settings with explicit values so host env vars do not leak in."""
    return Settings(
        environment="test",
        log_level="INFO",
        secrets_store=SecretsStoreSettings(
            region="us-east-1",
            max_part_bytes=50 * 1024,
            max_part_index=5,
            batch_size=20,
        ),
        tagging=TaggingSettings(),
    )


@pytest.fixture
def store_factory():
    """Factory fixture: store_factory({"name": {...}, "name-1": {...}})."""
    return make_store
