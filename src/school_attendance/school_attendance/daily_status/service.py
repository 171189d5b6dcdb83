from __future__ import annotations

import logging
from datetime import date
from typing import Optional

from ..common.datetime_utils import today_local
from ..common.validators import optional_text
from ..core.enums import DailyStatus
from ..core.exceptions import ValidationError
from .model import TeacherDailyStatus
from .repository import DailyStatusRepository

logger = logging.getLogger(__name__)


class DailyStatusService:
    def __init__(self, statuses: DailyStatusRepository):
        self._statuses = statuses

    @staticmethod
    def parse_status(value) -> DailyStatus:
        try:
            return DailyStatus(str(value or "").strip().upper())
        except ValueError:
            raise ValidationError("Status harus DONE atau NOT_DONE")

    def get(self, teacher_id: int, work_date: date) -> Optional[TeacherDailyStatus]:
        return self._statuses.get(teacher_id=int(teacher_id), work_date=work_date)

    def set_status(
        self,
        teacher_id: int,
        status: DailyStatus,
        *,
        work_date: Optional[date] = None,
        reason: Optional[str] = None,
    ) -> None:
        """Create or overwrite the (teacher, date) status row.

        The reason is kept only for NOT_DONE; DONE always clears it.
        """

        work_date = work_date or today_local()
        reason = optional_text(reason) if status == DailyStatus.NOT_DONE else None

        existing = self._statuses.get(teacher_id=int(teacher_id), work_date=work_date)
        if existing:
            self._statuses.update(status_id=existing.status_id, status=status, reason=reason)
        else:
            self._statuses.insert(teacher_id=int(teacher_id), work_date=work_date, status=status, reason=reason)

        logger.info("Teacher id=%s daily status %s on %s", teacher_id, status.value, work_date.isoformat())
