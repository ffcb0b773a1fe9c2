import logging
from datetime import date
from fastapi import FastAPI, HTTPException, Depends, Query

from api.schemas import (
    # Pricing
    QuoteStayRequest, StayQuoteResponse, DatePriceResponse,
    # Room types
    CreateRoomTypeRequest, SeasonalPricingRequest, SeasonalPricingValidationResponse
)
from api.dependencies import get_pricing_service, get_room_type_service, get_report_service
from application.services import PricingService, RoomTypeService, ReportService
from domain.entities import RoomType
from domain.enums import ReservationSource, ReservationStatus, SOURCE_LABELS
from domain.exceptions import OverlapError
from domain.reports import OccupancyReport, OccupancySummary, RevenueReport, ReservationReport
from infrastructure import config

logging.basicConfig(
    level=config.LOG_LEVEL,
    format="%(asctime)s %(levelname)s %(name)s: %(message)s"
)

app = FastAPI(
    title=config.APP_NAME,
    description="Rate resolution and occupancy/revenue analytics for hotel back offices",
    version=config.APP_VERSION
)


def _overlap_detail(error: OverlapError) -> dict:
    """400 detail naming both conflicting periods"""
    return {
        "message": str(error),
        "conflict": [
            period.model_dump(mode="json", by_alias=True)
            for period in (error.first, error.second)
        ]
    }

# ============================================================================
# HEALTH & ENUM REFERENCE ENDPOINTS
# ============================================================================

@app.get("/api/health", tags=["Health"])
async def health_check():
    """Health check endpoint"""
    return {"status": "healthy", "message": "API is running"}

@app.get("/api/enums/reservation-status", tags=["Enum Reference"])
async def get_reservation_statuses():
    """Get all ReservationStatus enum values"""
    return {
        "values": [item.value for item in ReservationStatus],
        "description": "Reservation status values: pending, confirmed, checked-in, checked-out, cancelled, no-show"
    }

@app.get("/api/enums/reservation-source", tags=["Enum Reference"])
async def get_reservation_sources():
    """Get all ReservationSource enum values with display labels"""
    return {
        "values": {item.value: SOURCE_LABELS[item.value] for item in ReservationSource},
        "description": "Booking channels; reservations without a known channel are reported as unknown"
    }

# ============================================================================
# PRICING ENDPOINTS
# ============================================================================

@app.post("/api/pricing/quote", response_model=StayQuoteResponse, tags=["Pricing"])
async def quote_stay(
    request: QuoteStayRequest,
    service: PricingService = Depends(get_pricing_service)
):
    """Price a stay night by night"""
    try:
        quote = await service.quote_stay(
            room_type_id=request.room_type_id,
            check_in=request.check_in_date,
            check_out=request.check_out_date,
            tax_rate=request.tax_rate
        )
        if not quote:
            raise HTTPException(status_code=404, detail="Room type not found")

        return StayQuoteResponse(
            room_type_id=request.room_type_id,
            nights=quote.nights,
            breakdown=quote.breakdown,
            subtotal=quote.subtotal,
            tax_rate=quote.tax_rate,
            tax=quote.tax,
            total=quote.total,
            currency=quote.currency
        )
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))

@app.get("/api/room-types/{room_type_id}/price", response_model=DatePriceResponse, tags=["Pricing"])
async def get_price_for_date(
    room_type_id: str,
    date: date = Query(..., description="Night to price (YYYY-MM-DD)"),
    service: PricingService = Depends(get_pricing_service)
):
    """Get the nightly price of a room type on a date"""
    price = await service.price_for_date(room_type_id, date)
    if price is None:
        raise HTTPException(status_code=404, detail="Room type not found")
    return DatePriceResponse(room_type_id=room_type_id, date=date, price=price)

# ============================================================================
# ROOM TYPE ENDPOINTS
# ============================================================================

@app.post("/api/room-types", response_model=RoomType, status_code=201, tags=["Room Types"])
async def create_room_type(
    request: CreateRoomTypeRequest,
    service: RoomTypeService = Depends(get_room_type_service)
):
    """Create room type; overlapping seasonal periods are rejected"""
    try:
        room_type = RoomType(**request.model_dump())
        return await service.create_room_type(room_type)
    except OverlapError as e:
        raise HTTPException(status_code=400, detail=_overlap_detail(e))
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))

@app.put("/api/room-types/{room_type_id}/seasonal-pricing", response_model=RoomType, tags=["Room Types"])
async def update_seasonal_pricing(
    room_type_id: str,
    request: SeasonalPricingRequest,
    service: RoomTypeService = Depends(get_room_type_service)
):
    """Replace the seasonal pricing periods of a room type"""
    try:
        room_type = await service.update_seasonal_pricing(room_type_id, request.seasonal_pricing)
        if not room_type:
            raise HTTPException(status_code=404, detail="Room type not found")
        return room_type
    except OverlapError as e:
        raise HTTPException(status_code=400, detail=_overlap_detail(e))
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))

@app.post("/api/room-types/seasonal-pricing/validate", response_model=SeasonalPricingValidationResponse, tags=["Room Types"])
async def validate_seasonal_pricing(
    request: SeasonalPricingRequest,
    service: RoomTypeService = Depends(get_room_type_service)
):
    """Check a seasonal pricing list without saving it"""
    try:
        service.validate_seasonal_pricing(request.seasonal_pricing)
    except OverlapError as e:
        return SeasonalPricingValidationResponse(valid=False, message=str(e), conflict=[e.first, e.second])
    except ValueError as e:
        return SeasonalPricingValidationResponse(valid=False, message=str(e))
    return SeasonalPricingValidationResponse(valid=True)

# ============================================================================
# REPORT ENDPOINTS
# ============================================================================

@app.get("/api/hotels/{hotel_id}/reports/occupancy", response_model=OccupancyReport, tags=["Reports"])
async def get_occupancy_report(
    hotel_id: str,
    start_date: date,
    end_date: date,
    service: ReportService = Depends(get_report_service)
):
    """Daily occupancy for a date range, both ends included"""
    try:
        return await service.generate_occupancy_report(hotel_id, start_date, end_date)
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))

@app.get("/api/hotels/{hotel_id}/reports/occupancy/summary", response_model=OccupancySummary, tags=["Reports"])
async def get_occupancy_summary(
    hotel_id: str,
    start_date: date,
    end_date: date,
    service: ReportService = Depends(get_report_service)
):
    """Average, max and min occupancy for a date range"""
    try:
        return await service.get_occupancy_summary(hotel_id, start_date, end_date)
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))

@app.get("/api/hotels/{hotel_id}/reports/revenue", response_model=RevenueReport, tags=["Reports"])
async def get_revenue_report(
    hotel_id: str,
    start_date: date,
    end_date: date,
    service: ReportService = Depends(get_report_service)
):
    """Room and service revenue realized in a date range"""
    try:
        return await service.generate_revenue_report(hotel_id, start_date, end_date)
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))

@app.get("/api/hotels/{hotel_id}/reports/reservations", response_model=ReservationReport, tags=["Reports"])
async def get_reservation_report(
    hotel_id: str,
    start_date: date,
    end_date: date,
    service: ReportService = Depends(get_report_service)
):
    """Booking sources, cancellations and no-shows of reservations created in a date range"""
    try:
        return await service.generate_reservation_report(hotel_id, start_date, end_date)
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))

if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host="0.0.0.0", port=8000)
