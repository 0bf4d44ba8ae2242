"""
Integration tests package.

Tests de integración sobre la API HTTP con repositorios en memoria:
- Health checks (liveness y readiness)
- Autenticación (login, registro, logout)
- Ciclo de vida de préstamos (crear, finalizar, cancelar)
- Búsqueda de vehículos disponibles

Para ejecutar solo tests de integración:
    pytest tests/integration/
"""
