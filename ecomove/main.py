import logging

from fastapi import FastAPI

from ecomove.api.errors import domain_error_handler, unhandled_error_handler
from ecomove.api.routers.auth import router as auth_router
from ecomove.api.routers.health import router as health_router
from ecomove.api.routers.loans import router as loans_router
from ecomove.api.routers.transports import router as transports_router
from ecomove.config import get_settings
from ecomove.domain.errors import DomainError

settings = get_settings()

logging.basicConfig(
    level=settings.log_level,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)

app = FastAPI(
    title="EcoMove API",
    description="Préstamo de bicicletas y scooters eléctricos entre estaciones",
    version="0.1.0",
)

app.add_exception_handler(DomainError, domain_error_handler)
app.add_exception_handler(Exception, unhandled_error_handler)

app.include_router(health_router, tags=["Health"])
app.include_router(auth_router, prefix="/api/v1", tags=["Auth"])
app.include_router(loans_router, prefix="/api/v1", tags=["Loans"])
app.include_router(transports_router, prefix="/api/v1", tags=["Transports"])
