"""
PillarCoach - coaching-model selection and prompt composition.

This package contains the complete application:
- core: Framework-agnostic selection and prompt logic
- api: FastAPI routes and dependencies
- config: Application configuration
"""

__version__ = "0.1.0"
