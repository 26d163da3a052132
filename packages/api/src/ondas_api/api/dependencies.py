"""FastAPI dependency injection factories.

Usage in routes:
    from ondas_api.api.dependencies import StationFinderDep

    @router.get("/radio")
    def search(finder: StationFinderDep) -> ...:
        ...
"""

from typing import Annotated

from fastapi import Depends, Request
from ondas import StationFinder

from ondas_api.api.container import get_services


def get_station_finder(request: Request) -> StationFinder:
    return get_services(request).station_finder


StationFinderDep = Annotated[StationFinder, Depends(get_station_finder)]
