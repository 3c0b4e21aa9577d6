"""Data models for Revue request and response payloads."""

from src.models.revue import ApiResponseDTO, RevueDTO

__all__ = ['ApiResponseDTO', 'RevueDTO']
