from ecomove.infrastructure.in_memory.auth_repo import InMemoryAuthRepository
from ecomove.infrastructure.in_memory.loan_repo import InMemoryLoanRepository
from ecomove.infrastructure.in_memory.seed import seed_demo_data
from ecomove.infrastructure.in_memory.station_repo import InMemoryStationRepository
from ecomove.infrastructure.in_memory.store import InMemoryStore
from ecomove.infrastructure.in_memory.transport_repo import InMemoryTransportRepository
from ecomove.infrastructure.in_memory.user_repo import InMemoryUserRepository

__all__ = [
    "InMemoryStore",
    "InMemoryUserRepository",
    "InMemoryStationRepository",
    "InMemoryTransportRepository",
    "InMemoryLoanRepository",
    "InMemoryAuthRepository",
    "seed_demo_data",
]
