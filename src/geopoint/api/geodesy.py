"""
Great-circle computation endpoints.
"""

from fastapi import APIRouter

from geopoint.core import geodesy
from geopoint.core.config import settings
from geopoint.models.api import (
    BearingResponse,
    DestinationRequest,
    DistanceResponse,
    PointModel,
    PointPair,
)

router = APIRouter(prefix="/geodesy", tags=["geodesy"])


@router.post("/distance", response_model=DistanceResponse)
async def distance(pair: PointPair) -> DistanceResponse:
    """Haversine distance between two points in kilometers."""
    km = geodesy.great_circle_distance(pair.origin.to_point(), pair.destination.to_point())
    return DistanceResponse(distance_km=km, radius_km=settings.earth_radius_km)


@router.post("/bearing", response_model=BearingResponse)
async def bearing(pair: PointPair) -> BearingResponse:
    """Initial bearing from origin to destination."""
    return BearingResponse(
        bearing_deg=geodesy.bearing_to(pair.origin.to_point(), pair.destination.to_point())
    )


@router.post("/midpoint", response_model=PointModel)
async def midpoint(pair: PointPair) -> PointModel:
    """Midpoint of the great-circle arc between two points."""
    return PointModel.from_point(
        geodesy.midpoint_to(pair.origin.to_point(), pair.destination.to_point())
    )


@router.post("/destination", response_model=PointModel)
async def destination(request: DestinationRequest) -> PointModel:
    """Point reached from origin after travelling distance_km on bearing_deg."""
    return PointModel.from_point(
        geodesy.point_at_distance_and_bearing(
            request.origin.to_point(), request.distance_km, request.bearing_deg
        )
    )
