"""Domain Repository Interfaces"""
from abc import ABC, abstractmethod
from typing import Optional, List

from domain.entities import Hotel, Room, RoomType, Reservation, Service, ServiceOrder
from domain.enums import ReservationStatus, ServiceOrderStatus


class HotelRepository(ABC):
    """Repository interface for hotel settings"""

    @abstractmethod
    async def find_by_id(self, hotel_id: str) -> Optional[Hotel]:
        """Find hotel by ID"""
        pass

    @abstractmethod
    async def save(self, hotel: Hotel) -> Hotel:
        """Save hotel"""
        pass


class RoomTypeRepository(ABC):
    """Repository interface for RoomType"""

    @abstractmethod
    async def save(self, room_type: RoomType) -> RoomType:
        """Save room type"""
        pass

    @abstractmethod
    async def find_by_id(self, room_type_id: str) -> Optional[RoomType]:
        """Find room type by ID"""
        pass

    @abstractmethod
    async def find_by_hotel(self, hotel_id: str) -> List[RoomType]:
        """Find room types of a hotel"""
        pass

    @abstractmethod
    async def update(self, room_type: RoomType) -> RoomType:
        """Update room type"""
        pass


class RoomRepository(ABC):
    """Repository interface for Room"""

    @abstractmethod
    async def save(self, room: Room) -> Room:
        """Save room"""
        pass

    @abstractmethod
    async def count_by_hotel(self, hotel_id: str) -> int:
        """Count rooms of a hotel"""
        pass


class ReservationRepository(ABC):
    """Repository interface for Reservation"""

    @abstractmethod
    async def save(self, reservation: Reservation) -> Reservation:
        """Save reservation"""
        pass

    @abstractmethod
    async def find_by_hotel(
        self,
        hotel_id: str,
        statuses: Optional[List[ReservationStatus]] = None
    ) -> List[Reservation]:
        """Find reservations of a hotel, optionally only with given statuses"""
        pass


class ServiceRepository(ABC):
    """Repository interface for Service"""

    @abstractmethod
    async def save(self, service: Service) -> Service:
        """Save service"""
        pass

    @abstractmethod
    async def find_by_hotel(self, hotel_id: str) -> List[Service]:
        """Find services of a hotel"""
        pass


class ServiceOrderRepository(ABC):
    """Repository interface for ServiceOrder"""

    @abstractmethod
    async def save(self, order: ServiceOrder) -> ServiceOrder:
        """Save service order"""
        pass

    @abstractmethod
    async def find_by_hotel(
        self,
        hotel_id: str,
        status: Optional[ServiceOrderStatus] = None
    ) -> List[ServiceOrder]:
        """Find service orders of a hotel, optionally only with a given status"""
        pass
