from .booking import CHANGE_CUTOFF_HOURS as CHANGE_CUTOFF_HOURS
from .booking import Booking as Booking
