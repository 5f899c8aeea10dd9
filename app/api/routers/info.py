"""Info endpoint router composition for environment configuration reporting."""

from fastapi import APIRouter, status
from fastapi.responses import JSONResponse

from app.environment import EnvironmentInfoProvider


def api_create_info_router(info_provider: EnvironmentInfoProvider) -> APIRouter:
    """Create info router reporting environment name and host identifier.

    Args:
        info_provider: Environment-layer info provider.

    Returns:
        APIRouter: Router exposing the root `/` endpoint.

    Raises:
        ValueError: Raised when info_provider is invalid.
    """

    if info_provider is None:
        raise ValueError("info_provider must not be None")

    router = APIRouter(tags=["info"])

    @router.get("/")
    def api_info_get() -> JSONResponse:
        """Return current environment name and host identifier.

        Returns:
            JSONResponse: `AppEnvironment` and `AppHost` payload, null when unset.
        """

        info = info_provider.get_info()
        return JSONResponse(content=info.to_payload(), status_code=status.HTTP_200_OK)

    return router
