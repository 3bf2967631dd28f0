# API Routes Module
from collegematch.api.routes import (
    recommendations,
    colleges,
)

__all__ = [
    "recommendations",
    "colleges",
]
