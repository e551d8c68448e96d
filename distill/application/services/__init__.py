"""
Application services.

Use case orchestrators over the shared application context.
"""

from distill.application.services.ask_service import AskService
from distill.application.services.flow_service import FlowService
from distill.application.services.index_service import IndexService
from distill.application.services.source_service import SourceService

__all__ = ["AskService", "FlowService", "IndexService", "SourceService"]
