import logging

from ecomove.application.error_mapping import CANCEL_LOAN_ERRORS, CANCEL_LOAN_FALLBACK, translate
from ecomove.application.interfaces.loan_repo import LoanRepository
from ecomove.domain.entities.loan import Loan
from ecomove.domain.errors import NotFoundError, RepositoryError


class CancelLoanUseCase:
    def __init__(self, loan_repo: LoanRepository) -> None:
        self._loan_repo = loan_repo
        self._logger = logging.getLogger(__name__)

    async def execute(self, loan_id: int) -> Loan:
        try:
            loan = await self._loan_repo.find_by_id(loan_id)
            if loan is None:
                raise NotFoundError("loan", loan_id, "El préstamo no existe")
            # Falla con InvalidTransitionError si el préstamo ya terminó.
            loan.cancel()

            cancelled = await self._loan_repo.cancel(loan_id)
        except RepositoryError as exc:
            raise translate(exc, CANCEL_LOAN_ERRORS, CANCEL_LOAN_FALLBACK) from exc

        self._logger.info("Loan cancelled", extra={"loan_id": loan_id, "user_id": cancelled.user_id})
        return cancelled
