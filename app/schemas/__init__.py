"""Request Schemas — pydantic models for the bodies the gateway accepts."""
