"""request-ip FastAPI application."""
from datetime import datetime
import logging

from fastapi import FastAPI, Request

from request_ip.config import get_settings
from request_ip.middleware.client_ip import ClientIPMiddleware
from request_ip.models.schemas import ClientIPResponse, HealthCheck
from request_ip.resolver import find_match
from request_ip.utils.network import request_info_from_starlette

# Get settings
settings = get_settings()

# Configure logging
logging.basicConfig(level=settings.log_level)
logger = logging.getLogger(__name__)

logger.info(f"Client IP attribute: request.state.{settings.client_ip_attribute}")
# Initialize FastAPI app
app = FastAPI(
    title=settings.app_name,
    description="Resolves the originating client IP behind proxies and CDNs",
    version="1.0.0",
    debug=settings.debug,
)

app.add_middleware(ClientIPMiddleware, attribute_name=settings.client_ip_attribute)


@app.get("/", response_model=HealthCheck)
async def health_check():
    """Health check endpoint."""
    return HealthCheck(
        status="healthy",
        timestamp=datetime.utcnow()
    )


@app.get("/api/ip", response_model=ClientIPResponse)
async def lookup_client_ip(request: Request):
    """Report the caller's address as seen through any proxies."""
    client_ip = getattr(request.state, settings.client_ip_attribute, None)
    match = find_match(request_info_from_starlette(request))
    return ClientIPResponse(
        client_ip=client_ip,
        source=match.source if match else None,
    )


def main():
    """Run the service with uvicorn."""
    import uvicorn

    uvicorn.run("request_ip.main:app", host=settings.host, port=settings.port)


if __name__ == "__main__":
    main()
