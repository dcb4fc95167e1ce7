# Entry point for ASGI servers: uvicorn fittrack.asgi:app
from .main import create_app

app = create_app()
