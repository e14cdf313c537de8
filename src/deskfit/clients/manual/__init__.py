"""Interactive onboarding questionnaire."""

from .client import ManualInputClient

__all__ = ["ManualInputClient"]
