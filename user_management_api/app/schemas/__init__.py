"""
Pydantic models shared between the service layer and the API.
"""
