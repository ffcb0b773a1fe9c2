"""API Dependencies - repositories and service providers"""
from application.services import PricingService, RoomTypeService, ReportService
from infrastructure.repositories.in_memory_repositories import (
    InMemoryHotelRepository, InMemoryRoomTypeRepository, InMemoryRoomRepository,
    InMemoryReservationRepository, InMemoryServiceRepository, InMemoryServiceOrderRepository
)

# Initialize repositories
# In production these would wrap the document store client
hotel_repo = InMemoryHotelRepository()
room_type_repo = InMemoryRoomTypeRepository()
room_repo = InMemoryRoomRepository()
reservation_repo = InMemoryReservationRepository()
service_repo = InMemoryServiceRepository()
service_order_repo = InMemoryServiceOrderRepository()


def get_pricing_service() -> PricingService:
    return PricingService(room_type_repo, hotel_repo)


def get_room_type_service() -> RoomTypeService:
    return RoomTypeService(room_type_repo)


def get_report_service() -> ReportService:
    return ReportService(
        room_repo, reservation_repo, service_order_repo,
        room_type_repo, service_repo, hotel_repo
    )
