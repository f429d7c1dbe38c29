"""Application ports (Protocols) implemented by infrastructure."""

from profile_api.application.interfaces.repositories import IProfileRepository

__all__ = ["IProfileRepository"]
