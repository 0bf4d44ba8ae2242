from typing import Annotated

from fastapi import APIRouter, Depends, status

from ecomove.api.dependencies import get_use_cases
from ecomove.api.schemas.loans import CompleteLoanBody, CreateLoanBody
from ecomove.application.dtos.loan_dto import CompleteLoanRequest, CreateLoanRequest

router = APIRouter()


@router.post("/loans", status_code=status.HTTP_201_CREATED)
async def create_loan(
    body: CreateLoanBody,
    use_cases: Annotated[dict, Depends(get_use_cases)],
) -> dict:
    """
    Inicia un préstamo.

    Los errores de dominio (usuario no habilitado, vehículo ocupado, batería
    baja, préstamo activo previo) los convierte el handler global en 4xx.
    """
    loan = await use_cases["create_loan"].execute(
        CreateLoanRequest(
            user_id=body.user_id,
            transport_id=body.transport_id,
            origin_station_id=body.origin_station_id,
            payment_method=body.payment_method,
        )
    )
    return loan.to_json()


@router.post("/loans/{loan_id}/complete")
async def complete_loan(
    loan_id: int,
    body: CompleteLoanBody,
    use_cases: Annotated[dict, Depends(get_use_cases)],
) -> dict:
    loan = await use_cases["complete_loan"].execute(
        CompleteLoanRequest(
            loan_id=loan_id,
            destination_station_id=body.destination_station_id,
            end_date=body.end_date,
        )
    )
    return loan.to_json()


@router.post("/loans/{loan_id}/cancel")
async def cancel_loan(
    loan_id: int,
    use_cases: Annotated[dict, Depends(get_use_cases)],
) -> dict:
    loan = await use_cases["cancel_loan"].execute(loan_id)
    return loan.to_json()
