"""
Secrets Manager client for multipart secret parts.

Implements the PartStore protocol on top of AWS Secrets Manager:
name-filtered listing, batched reads, and describe-then-update/create upserts.
Translates botocore failures into the domain store errors.

Dependencies: boto3
System role: AWS boundary for the redistribution engine
"""

import logging
from collections.abc import Mapping
from typing import Any

import boto3
from botocore.exceptions import BotoCoreError, ClientError

from multipart_secrets.core.exceptions import (
    BaseSecretNotFoundError,
    PartNotFoundError,
    StoreUnavailableError,
)
from multipart_secrets.core.redistribution.naming import PartNamer
from multipart_secrets.utils.tags import to_aws_tags

logger = logging.getLogger(__name__)

NOT_FOUND_CODE = "ResourceNotFoundException"


def _error_code(error: ClientError) -> str:
    return error.response.get("Error", {}).get("Code", "")


class SecretsManagerPartStore:
    """Secrets Manager backend for multipart secret parts."""

    def __init__(
        self,
        region: str | None = None,
        endpoint_url: str | None = None,
        batch_size: int = 20,
        client: Any | None = None,
    ) -> None:
        """
        Initialize Secrets Manager client.

        Args:
            region: AWS region (None uses the boto3 default chain)
            endpoint_url: Optional endpoint override
            batch_size: Secret ids per BatchGetSecretValue call
            client: Pre-built boto3 client (tests, custom sessions)

        Raises:
            StoreUnavailableError: The client cannot be built (e.g. no region)
        """
        self._region = region
        self._batch_size = batch_size
        if client is not None:
            self._client = client
            return
        try:
            self._client = boto3.client(
                "secretsmanager",
                region_name=region,
                endpoint_url=endpoint_url,
            )
        except BotoCoreError as e:
            raise self._unavailable("connect", e) from e

    def list_part_indices(self, base_name: str) -> list[int]:
        """
        List the part indices stored for a base name.

        Args:
            base_name: Logical secret name

        Returns:
            list[int]: Sorted, unique part indices (0 = base record)

        Raises:
            StoreUnavailableError: ListSecrets failed
        """
        namer = PartNamer(base_name)
        indices: set[int] = set()
        paginator = self._client.get_paginator("list_secrets")

        try:
            pages = paginator.paginate(Filters=[{"Key": "name", "Values": [base_name]}])
            for page in pages:
                for secret in page.get("SecretList", []):
                    index = namer.parse_index(secret.get("Name", ""))
                    if index is not None:
                        indices.add(index)
        except (ClientError, BotoCoreError) as e:
            raise self._unavailable("list", e, secret_name=base_name) from e

        return sorted(indices)

    def fetch_parts(self, base_name: str, indices: list[int]) -> dict[int, str]:
        """
        Fetch the raw payload of every requested part.

        Args:
            base_name: Logical secret name
            indices: Part indices to read

        Returns:
            dict[int, str]: SecretString per part index

        Raises:
            PartNotFoundError: A requested part is missing from the response
            StoreUnavailableError: BatchGetSecretValue failed
        """
        if not indices:
            raise ValueError("No part indices provided to fetch")

        namer = PartNamer(base_name)
        wanted = dict(zip(namer.names(indices), indices))
        names = list(wanted)
        values: dict[str, str] = {}

        for start in range(0, len(names), self._batch_size):
            batch = names[start:start + self._batch_size]
            try:
                response = self._client.batch_get_secret_value(SecretIdList=batch)
            except ClientError as e:
                if _error_code(e) == NOT_FOUND_CODE:
                    raise PartNotFoundError(batch[0], {"batch": batch}) from e
                raise self._unavailable("fetch", e, secrets=batch) from e
            except BotoCoreError as e:
                raise self._unavailable("fetch", e, secrets=batch) from e

            for error in response.get("Errors", []):
                logger.error(f"Failed to fetch {error.get('SecretId')}: {error.get('ErrorCode')}")
            for secret in response.get("SecretValues", []):
                values[secret.get("Name", "")] = secret.get("SecretString", "")

        payloads: dict[int, str] = {}
        for name, index in wanted.items():
            if name not in values:
                raise PartNotFoundError(name)
            payloads[index] = values[name]
        return payloads

    def part_exists(self, name: str) -> bool:
        """
        Check if a secret exists.

        Args:
            name: Physical secret name

        Returns:
            bool: True if the secret exists, False otherwise
        """
        try:
            self._client.describe_secret(SecretId=name)
            return True
        except ClientError as e:
            if _error_code(e) == NOT_FOUND_CODE:
                return False
            raise self._unavailable("describe", e, secret_name=name) from e
        except BotoCoreError as e:
            raise self._unavailable("describe", e, secret_name=name) from e

    def require_base(self, base_name: str) -> None:
        """Raise BaseSecretNotFoundError unless the base record exists."""
        if not self.part_exists(base_name):
            raise BaseSecretNotFoundError(base_name)

    def upsert_part(self, name: str, payload: str, tags: Mapping[str, str]) -> bool:
        """
        Overwrite an existing secret or create it with tags.

        Args:
            name: Physical secret name
            payload: Encoded chunk
            tags: Tags applied only when the secret is created

        Returns:
            bool: True if the secret was created

        Raises:
            StoreUnavailableError: Update or create failed
        """
        exists = self.part_exists(name)
        try:
            if exists:
                self._client.update_secret(SecretId=name, SecretString=payload)
                return False
            self._client.create_secret(
                Name=name,
                SecretString=payload,
                Tags=to_aws_tags(dict(tags)),
            )
            return True
        except (ClientError, BotoCoreError) as e:
            operation = "update" if exists else "create"
            raise self._unavailable(operation, e, secret_name=name) from e

    def _unavailable(self, operation: str, error: Exception, **context: Any) -> StoreUnavailableError:
        details: dict[str, Any] = dict(context)
        if isinstance(error, ClientError):
            details["error_code"] = _error_code(error)
        if self._region:
            details["region"] = self._region
        return StoreUnavailableError(
            f"Secrets Manager {operation} failed: {error}",
            operation=operation,
            details=details,
        )
