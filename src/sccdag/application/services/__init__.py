"""Application services."""

from sccdag.application.services.analyzer import GraphAnalyzer

__all__ = ["GraphAnalyzer"]
