"""Automatic debit endpoints (``/debitos-automaticos``)."""

import logging

from bank_terminal.client.base import Resource
from bank_terminal.models import AutoDebit, AutoDebitRequest
from bank_terminal.models.auto_debit import MAX_SCHEDULED_DAY, MIN_SCHEDULED_DAY
from bank_terminal.serialization import to_payload

logger = logging.getLogger(__name__)


class AutoDebitResource(Resource):
    """Automatic debit registration and cancellation."""

    def create(self, request: AutoDebitRequest) -> AutoDebit:
        if not MIN_SCHEDULED_DAY <= request.scheduled_day <= MAX_SCHEDULED_DAY:
            raise ValueError(
                f"Scheduled day must be between {MIN_SCHEDULED_DAY} and "
                f"{MAX_SCHEDULED_DAY}, got {request.scheduled_day}"
            )
        debit = self._one(AutoDebit, self._client.post("/debitos-automaticos", to_payload(request)))
        logger.info("Automatic debit %d registered for account %d", debit.debit_id, debit.account_id)
        return debit

    def list_all(self) -> list[AutoDebit]:
        return self._many(AutoDebit, self._client.get("/debitos-automaticos"))

    def get(self, debit_id: int) -> AutoDebit:
        return self._one(AutoDebit, self._client.get(f"/debitos-automaticos/{debit_id}"))

    def cancel(self, debit_id: int) -> AutoDebit | None:
        """Cancel a debit; None when the backend answers without a body."""
        debit = self._one_or_none(
            AutoDebit, self._client.patch(f"/debitos-automaticos/cancelar/{debit_id}")
        )
        logger.info("Automatic debit %d cancelled", debit_id)
        return debit
