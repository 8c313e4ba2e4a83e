"""Shared type aliases used across the schemas."""
from __future__ import annotations

from typing import Annotated

from pydantic import Field

Lat = Annotated[float, Field(ge=-90, le=90)]
Lon = Annotated[float, Field(ge=-180, le=180)]
Rating = Annotated[float, Field(ge=0, le=5)]
