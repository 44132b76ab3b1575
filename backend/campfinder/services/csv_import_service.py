"""CSV Import Service: insert validated CSV rows one by one, collecting failures.

Invariants:
    - Each row is committed on its own; a failed row never rolls back earlier rows
    - Every input row ends up either counted in success or listed in errors
    - Errors are reported in file order (ascending row number)
    - Transformed rows pass CampsiteCreate before touching the DB
"""

import logging

from pydantic import ValidationError
from sqlalchemy.ext.asyncio import AsyncSession

from campfinder.core.csv_import import PreparedRow, RowError, prepare_import
from campfinder.models.campsite import Campsite
from campfinder.schemas.campsite import CampsiteCreate, ImportResult, ImportRowError

logger = logging.getLogger(__name__)


def _first_validation_message(exc: ValidationError) -> str:
    error = exc.errors()[0]
    field = ".".join(str(part) for part in error["loc"])
    message = error["msg"].removeprefix("Value error, ")
    return f"{field}: {message}" if field else message


class CsvImportService:
    """Bulk-create listings from an uploaded CSV."""

    def __init__(self, db: AsyncSession):
        self.db = db

    async def import_csv(self, text: str) -> ImportResult:
        prepared, errors = prepare_import(text)
        inserted = 0
        for row in prepared:
            error = await self._insert_row(row)
            if error:
                errors.append(error)
            else:
                inserted += 1

        errors.sort(key=lambda e: e.row)
        logger.info(
            f"CSV import finished: {inserted} inserted, {len(errors)} failed",
            extra={"inserted": inserted, "failed": len(errors)},
        )
        return ImportResult(
            success=inserted,
            errors=[ImportRowError(row=e.row, message=e.message) for e in errors],
        )

    async def _insert_row(self, row: PreparedRow) -> RowError | None:
        try:
            payload = CampsiteCreate.model_validate(row.data)
        except ValidationError as e:
            return RowError(row.row, _first_validation_message(e))

        try:
            self.db.add(Campsite(**payload.model_dump()))
            await self.db.commit()
        except Exception as e:
            # Driver errors (OverflowError, DataError, ...) stay scoped to this row
            await self.db.rollback()
            logger.warning(
                f"CSV row insert failed: {e!r}", extra={"row": row.row}, exc_info=True,
            )
            return RowError(row.row, "データベースへの登録に失敗しました")
        return None
