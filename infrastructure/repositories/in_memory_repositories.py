"""In-Memory Repository Implementations"""
from typing import Optional, List, Dict

from domain.repositories import (
    HotelRepository, RoomTypeRepository, RoomRepository,
    ReservationRepository, ServiceRepository, ServiceOrderRepository
)
from domain.entities import Hotel, Room, RoomType, Reservation, Service, ServiceOrder
from domain.enums import ReservationStatus, ServiceOrderStatus


class InMemoryHotelRepository(HotelRepository):
    """In-memory implementation of HotelRepository"""

    def __init__(self):
        self._storage: Dict[str, Hotel] = {}

    async def find_by_id(self, hotel_id: str) -> Optional[Hotel]:
        return self._storage.get(hotel_id)

    async def save(self, hotel: Hotel) -> Hotel:
        self._storage[hotel.id] = hotel
        return hotel


class InMemoryRoomTypeRepository(RoomTypeRepository):
    """In-memory implementation of RoomTypeRepository"""

    def __init__(self):
        self._storage: Dict[str, RoomType] = {}

    async def save(self, room_type: RoomType) -> RoomType:
        """Save room type to memory"""
        self._storage[room_type.id] = room_type
        return room_type

    async def find_by_id(self, room_type_id: str) -> Optional[RoomType]:
        return self._storage.get(room_type_id)

    async def find_by_hotel(self, hotel_id: str) -> List[RoomType]:
        """Find room types of a hotel ordered by name"""
        room_types = [rt for rt in self._storage.values() if rt.hotel_id == hotel_id]
        return sorted(room_types, key=lambda rt: rt.name)

    async def update(self, room_type: RoomType) -> RoomType:
        if room_type.id in self._storage:
            self._storage[room_type.id] = room_type
            return room_type
        raise ValueError("Room type not found")


class InMemoryRoomRepository(RoomRepository):
    """In-memory implementation of RoomRepository"""

    def __init__(self):
        self._storage: Dict[str, Room] = {}

    async def save(self, room: Room) -> Room:
        self._storage[room.id] = room
        return room

    async def count_by_hotel(self, hotel_id: str) -> int:
        return sum(1 for room in self._storage.values() if room.hotel_id == hotel_id)


class InMemoryReservationRepository(ReservationRepository):
    """In-memory implementation of ReservationRepository"""

    def __init__(self):
        self._storage: Dict[str, Reservation] = {}

    async def save(self, reservation: Reservation) -> Reservation:
        """Save reservation to memory"""
        self._storage[reservation.id] = reservation
        return reservation

    async def find_by_hotel(
        self,
        hotel_id: str,
        statuses: Optional[List[ReservationStatus]] = None
    ) -> List[Reservation]:
        """Find reservations of a hotel in insertion order"""
        return [
            r for r in self._storage.values()
            if r.hotel_id == hotel_id and (statuses is None or r.status in statuses)
        ]


class InMemoryServiceRepository(ServiceRepository):
    """In-memory implementation of ServiceRepository"""

    def __init__(self):
        self._storage: Dict[str, Service] = {}

    async def save(self, service: Service) -> Service:
        self._storage[service.id] = service
        return service

    async def find_by_hotel(self, hotel_id: str) -> List[Service]:
        return [s for s in self._storage.values() if s.hotel_id == hotel_id]


class InMemoryServiceOrderRepository(ServiceOrderRepository):
    """In-memory implementation of ServiceOrderRepository"""

    def __init__(self):
        self._storage: Dict[str, ServiceOrder] = {}

    async def save(self, order: ServiceOrder) -> ServiceOrder:
        self._storage[order.id] = order
        return order

    async def find_by_hotel(
        self,
        hotel_id: str,
        status: Optional[ServiceOrderStatus] = None
    ) -> List[ServiceOrder]:
        return [
            o for o in self._storage.values()
            if o.hotel_id == hotel_id and (status is None or o.status == status)
        ]
