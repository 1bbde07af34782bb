from .http_response import ErrorResponse as ErrorResponse
from .http_response import api_response as api_response
from .http_response import error_response as error_response
from .validators import to_bool_flag as to_bool_flag
from .validators import to_decimal as to_decimal
