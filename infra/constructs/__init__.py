from infra.constructs.api import Api
from infra.constructs.database import Database
from infra.constructs.deployment import Deployment
from infra.constructs.functions import Functions
from infra.constructs.layers import Layers
from infra.constructs.observability import Observability

__all__ = [
    "Api",
    "Database",
    "Deployment",
    "Functions",
    "Layers",
    "Observability",
]
