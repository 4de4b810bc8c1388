"""
AWS Lambda handler for the Stock Dashboard API.

This module wraps the FastAPI application with Mangum for Lambda compatibility.
"""
from mangum import Mangum
from dashboard_api.main import app

# Create the Lambda handler
handler = Mangum(app, lifespan="off")
