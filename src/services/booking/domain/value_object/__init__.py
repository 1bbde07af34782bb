from .booking_id import BookingId as BookingId
from .passenger import Passenger as Passenger
from .passenger import PassengerDetails as PassengerDetails
from .pnr import Pnr as Pnr
