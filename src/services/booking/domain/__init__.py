from .entity import Booking as Booking
from .factory import BookingDetails as BookingDetails
from .factory import BookingFactory as BookingFactory
from .repository import BookingRepository as BookingRepository
from .value_object import BookingId as BookingId
from .value_object import Passenger as Passenger
from .value_object import PassengerDetails as PassengerDetails
from .value_object import Pnr as Pnr
