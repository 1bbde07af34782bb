from .currency import Currency as Currency
from .email import Email as Email
from .iso_date_time import IsoDateTime as IsoDateTime
from .money import Money as Money
