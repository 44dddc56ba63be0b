import datetime
import logging

import uvicorn
from fastapi import FastAPI
from pydantic import BaseModel

from time_service.config import DEFAULT_HOST, DEFAULT_PORT

logger = logging.getLogger(__name__)


class TimeResponse(BaseModel):
    currentTime: str


def format_timestamp(moment):
    """
    Render a datetime as a UTC ISO-8601 string with millisecond precision,
    e.g. 2024-01-31T12:00:00.123Z. Naive datetimes are treated as UTC.
    """
    if moment.tzinfo is None:
        moment = moment.replace(tzinfo=datetime.timezone.utc)
    moment = moment.astimezone(datetime.timezone.utc)
    return moment.strftime("%Y-%m-%dT%H:%M:%S.") + f"{moment.microsecond // 1000:03d}Z"


def current_time():
    return format_timestamp(datetime.datetime.now(datetime.timezone.utc))


def create_app():
    """
    Build the FastAPI app with the /time resource.
    """
    app = FastAPI(title="Time Service")

    @app.get("/time", response_model=TimeResponse)
    async def get_time():
        """
        Handles GET requests to /time.
        """
        logger.info("Received request for /time")
        return TimeResponse(currentTime=current_time())

    return app


class TimeServer(uvicorn.Server):
    """
    uvicorn server that announces the listening address once the socket is bound.
    """
    async def startup(self, sockets=None):
        await super().startup(sockets=sockets)
        if self.started:
            logger.info(f"Server running at http://{self.config.host}:{self.config.port}")


def run(app, host=DEFAULT_HOST, port=DEFAULT_PORT):
    """
    Serve the app until interrupted. uvicorn exits the process with status 1
    if the port cannot be bound.
    """
    server = TimeServer(uvicorn.Config(app, host=host, port=port))
    server.run()
