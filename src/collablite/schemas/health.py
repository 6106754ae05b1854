from datetime import datetime

from pydantic import BaseModel


class Health(BaseModel):
    status: str
    service: str
    database: str
    timestamp: datetime
    environment: str


class ServiceInfo(BaseModel):
    message: str
    graphql: str
    health: str
