"""Resource Service — generic list/get/create/update/replace/delete over one entity kind.

Invariants:
    - Stateless: one instance per request, bound to that request's AsyncSession
    - create: payload → required fields → foreign keys → uniqueness → insert → commit
    - update merges via core.merge.merge_fields (scalars keep-if-None, FKs overwrite),
      then rejects a merged row whose foreign keys point nowhere (400, nothing written)
    - Uniqueness treats an unset value as a value: at most one row without a name
    - replace reports zero affected rows as ConcurrencyError, then re-checks existence
    - delete is RESTRICT: rows referenced by other tables are never removed
    - No step retries; failures after validation propagate to the boundary

Design Decisions:
    - One class driven by ResourceSpec instead of one service per entity
      (ADR: five near-identical controllers collapse into data)
    - Validation raises DevHouseError subclasses; routes stay free of branching
"""

import logging
from collections.abc import Mapping, Sequence
from typing import Any

from sqlalchemy import func, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from devhouse.core.errors import (
    ConcurrencyError,
    DuplicateResourceError,
    ErrorContext,
    IdMismatchError,
    InvalidPayloadError,
    InvalidReferenceError,
    ResourceInUseError,
    ResourceNotFoundError,
)
from devhouse.core.merge import merge_fields, missing_required
from devhouse.core.resource_spec import ResourceSpec, empty_field_message

logger = logging.getLogger(__name__)


class ResourceService:
    """CRUD operations for the entity kind described by ``spec``."""

    def __init__(self, db: AsyncSession, spec: ResourceSpec):
        self._db = db
        self.spec = spec

    @property
    def _model(self) -> type[Any]:
        return self.spec.model

    def _context(self, resource_id: int | None = None, field: str | None = None) -> ErrorContext:
        return ErrorContext(
            resource=self.spec.label, resource_id=resource_id, field=field,
        )

    # ─── Reads ───────────────────────────────────────────────────

    async def list_all(self) -> Sequence[Any]:
        result = await self._db.execute(select(self._model))
        return result.scalars().all()

    async def get(self, resource_id: int) -> Any:
        entity = await self._db.get(self._model, resource_id)
        if entity is None:
            raise ResourceNotFoundError(
                self.spec.label, self._context(resource_id),
                message=self.spec.not_found_message,
            )
        return entity

    async def exists(self, resource_id: int) -> bool:
        result = await self._db.execute(
            select(self._model.id).where(self._model.id == resource_id),
        )
        return result.scalar_one_or_none() is not None

    # ─── Create ──────────────────────────────────────────────────

    async def create(self, payload: Mapping[str, Any] | None) -> Any:
        """Validate and insert a new row. Returns the row with its assigned id."""
        if payload is None:
            raise InvalidPayloadError(
                self.spec.invalid_data_message, self._context(),
            )
        if missing_required(payload, self.spec.required_on_create):
            raise InvalidPayloadError(
                self.spec.invalid_data_message, self._context(),
            )

        resolved = await self._resolve_foreign_keys(payload)
        await self._check_unique(payload)

        entity = self._model(
            **{name: payload.get(name) for name in self.spec.writable_fields},
        )
        for fk, target in resolved:
            if fk.attach_as:
                setattr(entity, fk.attach_as, target)

        self._db.add(entity)
        await self._db.commit()
        await self._db.refresh(entity)
        logger.info(
            f"{self.spec.label} {entity.id} created",
            extra={"resource": self.spec.label, "resource_id": entity.id},
        )
        return entity

    async def _resolve_foreign_keys(self, payload: Mapping[str, Any]) -> list:
        resolved = []
        for fk in self.spec.foreign_keys:
            ref_id = payload.get(fk.column)
            target = (
                await self._db.get(fk.target, ref_id) if ref_id is not None else None
            )
            if target is None:
                logger.warning(
                    f"Rejected {self.spec.label}: {fk.label} {ref_id} does not exist",
                    extra={"resource": self.spec.label},
                )
                raise InvalidReferenceError(
                    fk.label, fk.target_label, self._context(field=fk.column),
                )
            resolved.append((fk, target))
        return resolved

    async def _check_unique(
        self, payload: Mapping[str, Any], exclude_id: int | None = None,
    ) -> None:
        field = self.spec.unique_field
        if field is None:
            return
        value = payload.get(field)
        column = getattr(self._model, field)
        # A missing name is a value too: only one row may leave it unset
        condition = column.is_(None) if value is None else column == value
        query = select(self._model.id).where(condition)
        if exclude_id is not None:
            query = query.where(self._model.id != exclude_id)
        result = await self._db.execute(query.limit(1))
        if result.scalar_one_or_none() is not None:
            raise DuplicateResourceError(
                self.spec.label, str(value), self._context(exclude_id, field),
                message=self.spec.duplicate_message(value),
            )

    # ─── Update (partial merge) ──────────────────────────────────

    async def update(
        self, resource_id: int, payload: Mapping[str, Any] | None,
    ) -> str:
        """Merge ``payload`` into an existing row. Returns the success message."""
        if payload is None:
            raise InvalidPayloadError(
                self.spec.invalid_update_message, self._context(resource_id),
            )
        empty = missing_required(payload, self.spec.required_on_update)
        if empty:
            raise InvalidPayloadError(
                self.spec.invalid_update_text or empty_field_message(empty),
                self._context(resource_id, empty),
            )

        existing = await self.get(resource_id)
        unique = self.spec.unique_field
        if unique is not None and payload.get(unique) is not None:
            await self._check_unique(payload, exclude_id=resource_id)

        current = {name: getattr(existing, name) for name in self.spec.writable_fields}
        merged = merge_fields(
            current, payload,
            self.spec.scalar_fields, self.spec.foreign_key_fields,
        )
        # Foreign keys are overwritten wholesale (0 when omitted), so the
        # merged row must still point at existing rows before it is written
        await self._resolve_foreign_keys(merged)
        for name, value in merged.items():
            setattr(existing, name, value)

        await self._db.commit()
        logger.info(
            f"{self.spec.label} {resource_id} updated",
            extra={"resource": self.spec.label, "resource_id": resource_id},
        )
        return self.spec.updated_message

    # ─── Replace (full, id-checked) ──────────────────────────────

    async def replace(self, resource_id: int, payload: Mapping[str, Any]) -> None:
        """Overwrite every writable column of the row ``resource_id``.

        The body must repeat the id. A write that touches no row is treated
        as a concurrency conflict: if the row is gone the caller gets
        ResourceNotFoundError, otherwise the conflict propagates.
        """
        body_id = payload.get("id")
        if body_id != resource_id:
            raise IdMismatchError(resource_id, body_id, self._context(resource_id))

        await self._check_unique(payload, exclude_id=resource_id)
        try:
            await self._persist_replace(resource_id, payload)
        except ConcurrencyError:
            await self._db.rollback()
            if not await self.exists(resource_id):
                raise ResourceNotFoundError(
                    self.spec.label, self._context(resource_id),
                    message=self.spec.not_found_message,
                )
            logger.error(
                f"Concurrency conflict replacing {self.spec.label} {resource_id}",
                extra={"resource": self.spec.label, "resource_id": resource_id},
            )
            raise
        logger.info(
            f"{self.spec.label} {resource_id} replaced",
            extra={"resource": self.spec.label, "resource_id": resource_id},
        )

    async def _persist_replace(
        self, resource_id: int, payload: Mapping[str, Any],
    ) -> None:
        values = {name: payload.get(name) for name in self.spec.writable_fields}
        result = await self._db.execute(
            update(self._model)
            .where(self._model.id == resource_id)
            .values(**values)
            .execution_options(synchronize_session=False),
        )
        if result.rowcount == 0:
            raise ConcurrencyError(
                f"{self.spec.label} {resource_id} was modified or removed during update",
                self._context(resource_id),
            )
        await self._db.commit()

    # ─── Delete ──────────────────────────────────────────────────

    async def delete(self, resource_id: int) -> None:
        entity = await self.get(resource_id)
        references = await self._count_references(resource_id)
        if references:
            logger.warning(
                f"Refused to delete {self.spec.label} {resource_id}: {references}",
                extra={"resource": self.spec.label, "resource_id": resource_id},
            )
            raise ResourceInUseError(
                self.spec.label, references, self._context(resource_id),
            )
        await self._db.delete(entity)
        await self._db.commit()
        logger.info(
            f"{self.spec.label} {resource_id} deleted",
            extra={"resource": self.spec.label, "resource_id": resource_id},
        )

    async def _count_references(self, resource_id: int) -> dict[str, int]:
        counts: dict[str, int] = {}
        for ref in self.spec.referenced_by:
            column = getattr(ref.model, ref.column)
            result = await self._db.execute(
                select(func.count()).select_from(ref.model).where(column == resource_id),
            )
            count = result.scalar_one()
            if count:
                counts[ref.label] = count
        return counts
