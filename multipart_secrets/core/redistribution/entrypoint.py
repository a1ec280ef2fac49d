"""
Multipart secret engine.

Coordinates the read-modify-write cycle of a logical secret:
list parts -> fetch -> merge -> mutate -> partition -> allocate -> upsert.
Every check runs before the first write, so a failed invocation leaves the
store untouched.

Dependencies: tasks, naming, store protocol, configs
System role: Redistribution orchestration (coordinates only)
"""

import logging
from collections.abc import Mapping

from multipart_secrets.configs import Settings, get_settings
from multipart_secrets.core.exceptions import BaseSecretNotFoundError, PartNotFoundError
from multipart_secrets.core.redistribution.models import (
    FindResult,
    MutationRequest,
    MutationResult,
    PartSummary,
    SecretDescription,
)
from multipart_secrets.core.redistribution.naming import (
    BASE_PART_INDEX,
    PartNamer,
    validate_base_name,
)
from multipart_secrets.core.redistribution.path_lookup import (
    JsonObject,
    lookup,
    split_path,
)
from multipart_secrets.core.redistribution.store import PartStore
from multipart_secrets.core.redistribution.tasks import (
    MergingTask,
    MutationTask,
    PartitioningTask,
    SlotAllocationTask,
    encode_chunk,
    encoded_size,
)
from multipart_secrets.observability.log_utils import log_with_context
from multipart_secrets.utils.tags import create_tags, merge_tags

logger = logging.getLogger(__name__)


class MultipartSecretEngine:
    """Orchestrate merge, mutation and redistribution of a multipart secret."""

    def __init__(
        self,
        store: PartStore,
        settings: Settings | None = None,
        max_part_bytes: int | None = None,
        max_part_index: int | None = None,
    ) -> None:
        """
        Initialize engine with a store backend and configuration.

        Args:
            store: Secret store holding the physical parts
            settings: Application settings (uses defaults if None)
            max_part_bytes: Override of the configured part size limit
            max_part_index: Override of the configured part index ceiling
        """
        self._store = store
        self._settings = settings or get_settings()
        store_settings = self._settings.secrets_store

        self._merging_task = MergingTask()
        self._mutation_task = MutationTask()
        self._partitioning_task = PartitioningTask(
            max_part_bytes=(
                max_part_bytes if max_part_bytes is not None else store_settings.max_part_bytes
            ),
        )
        self._allocation_task = SlotAllocationTask(
            max_part_index=(
                max_part_index if max_part_index is not None else store_settings.max_part_index
            ),
        )

    @property
    def max_part_bytes(self) -> int:
        return self._partitioning_task.max_part_bytes

    def load_document(self, base_name: str) -> tuple[list[int], JsonObject]:
        """
        Fetch every part of a secret and merge them.

        Args:
            base_name: Logical secret name

        Returns:
            tuple[list[int], JsonObject]: (sorted part indices, merged document)

        Raises:
            InvalidBaseNameError: base_name names an overflow part
            BaseSecretNotFoundError: No base record exists
            MergeError: A part is malformed, empty or duplicates a key
            StoreError: The store failed
        """
        namer = PartNamer(validate_base_name(base_name))
        indices, payloads = self._fetch(namer)
        document = self._merging_task.merge(payloads, namer)
        logger.info(f"Merged {len(document)} keys from {len(indices)} parts of {namer.base_name}")
        return indices, document

    def run_mutation(
        self,
        base_name: str,
        request: MutationRequest,
        environment: str | None = None,
        extra_tags: Mapping[str, str] | None = None,
    ) -> MutationResult:
        """
        Apply a mutation and redistribute the document across parts.

        Args:
            base_name: Logical secret name
            request: Change set to apply
            environment: Environment recorded in tags of created parts
            extra_tags: Additional tags for created parts

        Returns:
            MutationResult: Final key count and part layout

        Raises:
            MultipartSecretError: Any merge, mutation, partition, allocation
                or store failure; nothing is written unless every check passes
        """
        namer = PartNamer(validate_base_name(base_name))
        indices, payloads = self._fetch(namer)
        if BASE_PART_INDEX not in indices:
            raise BaseSecretNotFoundError(namer.base_name)

        document = self._merging_task.merge(payloads, namer)
        mutated = self._mutation_task.apply(
            document,
            request.values,
            path=request.path_segments,
            force_update=request.force_update,
        )
        chunks = self._partitioning_task.partition(mutated)
        assignments = self._allocation_task.allocate(indices, chunks, namer)

        tags = merge_tags(
            create_tags(environment or self._settings.environment, self._settings.tagging),
            dict(extra_tags or {}),
        )

        created: list[str] = []
        for assignment in assignments:
            payload = encode_chunk(assignment.chunk)
            was_created = self._store.upsert_part(assignment.name, payload, tags)
            if was_created:
                created.append(assignment.name)
            logger.info(
                f"{'Created' if was_created else 'Updated'} {assignment.name} "
                f"({len(assignment.chunk)} keys, {len(payload.encode('utf-8'))} bytes)"
            )

        log_with_context(
            logger,
            logging.INFO,
            "Redistribution complete",
            secret=namer.base_name,
            keys=len(mutated),
            parts=len(assignments),
            created=created,
        )

        return MutationResult(
            base_name=namer.base_name,
            key_count=len(mutated),
            part_count=len(assignments),
            part_names=[a.name for a in assignments],
            created_parts=created,
        )

    def run_find(self, base_name: str, key_path: str) -> FindResult:
        """
        Locate the first part (in ascending index order) holding a key path.

        Args:
            base_name: Logical secret name
            key_path: Dot-separated path, e.g. "Database.User"

        Returns:
            FindResult: found=False when no part holds the path

        Raises:
            ValueError: key_path is malformed
            BaseSecretNotFoundError: The secret has no parts
            MergeError: A part is malformed or empty
        """
        segments = split_path(key_path)
        namer = PartNamer(validate_base_name(base_name))
        indices, payloads = self._fetch(namer)
        if not indices:
            raise BaseSecretNotFoundError(namer.base_name)

        for index in indices:
            part_name = namer.name(index)
            data = self._merging_task.parse_part(part_name, payloads[index])
            found, _ = lookup(data, segments)
            if found:
                logger.info(f"Found '{key_path}' in {part_name}")
                return FindResult(
                    base_name=namer.base_name,
                    key_path=key_path,
                    found=True,
                    part_index=index,
                    part_name=part_name,
                )

        logger.info(f"'{key_path}' not found in {len(indices)} parts of {namer.base_name}")
        return FindResult(base_name=namer.base_name, key_path=key_path)

    def describe(self, base_name: str) -> SecretDescription:
        """
        Summarise every part of a secret.

        Runs the full merge, so duplicate or empty parts are reported as errors.

        Args:
            base_name: Logical secret name

        Returns:
            SecretDescription: Per-part key counts and encoded sizes
        """
        namer = PartNamer(validate_base_name(base_name))
        indices, payloads = self._fetch(namer)
        if not indices:
            raise BaseSecretNotFoundError(namer.base_name)

        document = self._merging_task.merge(payloads, namer)
        parts = []
        for index in indices:
            name = namer.name(index)
            data = self._merging_task.parse_part(name, payloads[index])
            parts.append(
                PartSummary(index=index, name=name, key_count=len(data), size_bytes=encoded_size(data))
            )

        return SecretDescription(
            base_name=namer.base_name,
            parts=parts,
            key_count=len(document),
            max_part_bytes=self.max_part_bytes,
        )

    def _fetch(self, namer: PartNamer) -> tuple[list[int], dict[int, str]]:
        """List and fetch all parts of a secret."""
        indices = sorted(set(self._store.list_part_indices(namer.base_name)))
        logger.info(f"Discovered {len(indices)} parts for {namer.base_name}: {indices}")
        if not indices:
            return [], {}
        payloads = self._store.fetch_parts(namer.base_name, indices)
        missing = [index for index in indices if index not in payloads]
        if missing:
            raise PartNotFoundError(namer.name(missing[0]))
        return indices, payloads
